"""Reshapes verbose Notion API responses for LLM context."""

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from notion_mcp.transform.base import BaseTransformer
from notion_mcp.transform.models import OutputMode
from notion_mcp.transform.properties import extract_property_value


class ResponseTransformer(BaseTransformer):
    """Transforms API responses into ``full``, ``reduced`` or ``success_only`` shapes."""

    METADATA_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "id",
        "created_time",
        "last_edited_time",
        "created_by",
        "last_edited_by",
        "archived",
        "in_trash",
        "url",
        "public_url",
        "parent",
        "object",
        "type",
        "has_children",
        "next_cursor",
        "prev_cursor",
    })
    PAGINATION_FIELDS: ClassVar[tuple[str, ...]] = (
        "next_cursor",
        "prev_cursor",
        "has_more",
        "type",
        "object",
    )

    def __init__(self, default_mode: OutputMode = OutputMode.FULL) -> None:
        self._default_mode = default_mode

    @property
    def default_mode(self) -> OutputMode:
        return self._default_mode

    def transform(
        self,
        data: Any,
        mode: OutputMode | str | None = None,
        fields: Sequence[str] | None = None,
    ) -> Any:
        """Reshape ``data`` according to ``mode``; unknown modes return it unchanged."""
        resolved = self._default_mode if mode is None or mode == "" else OutputMode.parse(mode)

        if resolved is OutputMode.SUCCESS_ONLY:
            return self._success_only(data)
        if resolved is OutputMode.REDUCED:
            return self._reduce(data, list(fields) if fields else None)
        return data

    @staticmethod
    def _success_only(data: Any) -> dict[str, Any]:
        if isinstance(data, list):
            return {
                "success": True,
                "count": len(data),
                "message": f"Successfully processed {len(data)} item(s)",
            }
        if not isinstance(data, Mapping) or "id" not in data:
            return {"success": True}

        result: dict[str, Any] = {"success": True, "id": data["id"]}
        for key in ("created_time", "last_edited_time"):
            if key in data:
                result[key] = data[key]

        results = data.get("results")
        if isinstance(results, list):
            result["count"] = len(results)
            result["message"] = f"Successfully processed {len(results)} item(s)"
        else:
            result["message"] = "Operation successful"
        return result

    def _reduce(self, data: Any, fields: list[str] | None) -> Any:
        if isinstance(data, list):
            return [self._reduce(item, fields) for item in data]
        if not isinstance(data, Mapping):
            return data

        results = data.get("results")
        if isinstance(results, list):
            envelope = {key: data[key] for key in self.PAGINATION_FIELDS if key in data}
            envelope["results"] = [
                self._reduce_resource(item, fields) if isinstance(item, Mapping) else item
                for item in results
            ]
            return envelope

        return self._reduce_resource(data, fields)

    def _reduce_resource(
        self,
        resource: Mapping[str, Any],
        fields: list[str] | None = None,
    ) -> dict[str, Any]:
        keys = [key for key in fields if key in resource] if fields else list(resource)
        return {key: self._reduce_field(key, resource[key]) for key in keys}

    def _reduce_field(self, key: str, value: Any) -> Any:
        if key in self.METADATA_FIELDS:
            return value
        if key == "properties" and isinstance(value, Mapping):
            return {name: extract_property_value(prop) for name, prop in value.items()}
        return self._reduce_value(value)

    def _reduce_value(self, value: Any) -> Any:
        if isinstance(value, list):
            return [
                self._reduce_resource(item) if isinstance(item, Mapping) else item
                for item in value
            ]
        if isinstance(value, Mapping):
            return self._reduce_resource(value)
        return value
