"""Maps failed API responses onto the typed error taxonomy."""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from notion_mcp.client.models import RemoteFailure
from notion_mcp.errors.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    NotionError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from notion_mcp.logging.logger import Log

# Checked in order: "block" must win over "page" for compound operation ids.
_RESOURCE_MARKERS: tuple[tuple[str, str], ...] = (
    ("block", "block"),
    ("page", "page"),
    ("data_source", "database"),
    ("data-source", "database"),
    ("database", "database"),
    ("user", "user"),
)

_LEADING_STATUS = re.compile(r"^\d+\s*")


@dataclass(frozen=True)
class _ErrorDetails:
    message: str
    code: str | None = None
    field: str | None = None
    retry_after: int | None = None


def classify(
    failure: RemoteFailure,
    operation_id: str | None = None,
    params: Mapping[str, Any] | None = None,
) -> NotionError:
    """Build the typed error for a failed API call.

    Total over every status and body shape: unknown statuses become a
    ``ServerError`` and unreadable body fields are ignored.
    """
    details = _extract_details(failure)
    error = _build_error(failure, details, operation_id, params)
    Log.debug(
        f"Classified HTTP {failure.status} from {operation_id or 'unknown operation'} "
        f"as {error.type_name} ({error.code})"
    )
    return error


def infer_resource_type(operation_id: str | None) -> str | None:
    """Guess the resource kind an operation targets from its identifier."""
    if not operation_id:
        return None
    for marker, resource_type in _RESOURCE_MARKERS:
        if marker in operation_id:
            return resource_type
    return None


def parse_retry_after(value: Any) -> int | None:
    """Coerce a ``retry_after`` value to whole seconds.

    Empty, negative or non-numeric values are treated as absent; zero is kept.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        value = int(value)
    if isinstance(value, int) and value >= 0:
        return value
    return None


def _extract_details(failure: RemoteFailure) -> _ErrorDetails:
    message = _default_message(failure)
    body = failure.body
    if not isinstance(body, Mapping):
        return _ErrorDetails(message=message)

    body_message = body.get("message")
    return _ErrorDetails(
        message=str(body_message) if body_message else message,
        code=_get_str(body, "code"),
        field=_get_str(body, "field"),
        retry_after=parse_retry_after(body.get("retry_after")),
    )


def _default_message(failure: RemoteFailure) -> str:
    message = _LEADING_STATUS.sub("", failure.reason or "").strip()
    if message:
        return message
    try:
        return HTTPStatus(failure.status).phrase
    except ValueError:
        return f"HTTP {failure.status}"


def _get_str(body: Mapping[str, Any], key: str) -> str | None:
    value = body.get(key)
    return value if isinstance(value, str) and value else None


def _build_error(
    failure: RemoteFailure,
    details: _ErrorDetails,
    operation: str | None,
    params: Mapping[str, Any] | None,
) -> NotionError:
    status = failure.status
    message = details.message

    if status == 400:
        return ValidationError(message, details.field, operation, params)
    if status == 401:
        return AuthenticationError(message, operation, params, http_status=401)
    if status == 403:
        if details.code == "permission_required":
            return PermissionDeniedError(message, operation, params)
        return AuthenticationError(message, operation, params, http_status=403)
    if status == 404:
        return NotFoundError(message, infer_resource_type(operation), operation, params)
    if status == 409:
        return ConflictError(message, operation, params)
    if status == 429:
        retry_after = details.retry_after
        if retry_after is None:
            retry_after = parse_retry_after(failure.headers.get("Retry-After"))
        return RateLimitError(message, retry_after, operation, params)
    return ServerError(message, operation, params, http_status=status)
