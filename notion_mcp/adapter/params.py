"""Helpers for tool-call arguments sent by MCP clients."""

import json
from collections.abc import Mapping
from typing import Any


def deserialize_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Decode argument values that clients sent as JSON strings.

    Some clients double-serialize nested objects. A string that looks like a
    JSON object or array and parses to one is replaced by the parsed value;
    objects are decoded recursively. Anything else is kept as sent.
    """
    result: dict[str, Any] = {}
    for key, value in params.items():
        result[key] = _decode_value(value)
    return result


def _decode_value(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    trimmed = value.strip()
    if not (
        (trimmed.startswith("{") and trimmed.endswith("}"))
        or (trimmed.startswith("[") and trimmed.endswith("]"))
    ):
        return value
    try:
        parsed = json.loads(trimmed)
    except json.JSONDecodeError:
        return value
    if isinstance(parsed, dict):
        return deserialize_params(parsed)
    if isinstance(parsed, list):
        return parsed
    return value


def parse_fields(raw: Any) -> list[str] | None:
    """Normalize the ``_fields`` argument: a list of names or a comma-separated string."""
    if isinstance(raw, str):
        names = [name.strip() for name in raw.split(",")]
    elif isinstance(raw, list):
        names = [name.strip() for name in raw if isinstance(name, str)]
    else:
        return None
    names = [name for name in names if name]
    return names or None
