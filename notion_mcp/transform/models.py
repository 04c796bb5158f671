from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OutputMode(str, Enum):
    """Shape of a transformed API response."""

    FULL = "full"
    REDUCED = "reduced"
    SUCCESS_ONLY = "success_only"

    @classmethod
    def parse(cls, value: object) -> "OutputMode | None":
        """Return the matching mode, or None when ``value`` is not a known mode."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


def _as_mapping(value: Any) -> Mapping[str, Any] | None:
    return value if isinstance(value, Mapping) else None


def _as_list(value: Any) -> list[Any] | None:
    return value if isinstance(value, list) else None


@dataclass(frozen=True)
class PropertyValue(ABC):
    """One typed Notion property: a ``type`` tag plus the same-named payload."""

    tag: str
    payload: Any = None

    @abstractmethod
    def simplify(self) -> Any:
        """Return the semantic content of the property."""


@dataclass(frozen=True)
class RichTextProperty(PropertyValue):
    """``title`` and ``rich_text``."""

    def simplify(self) -> Any:
        fragments = _as_list(self.payload)
        if fragments is None:
            return self.payload

        parts: list[str] = []
        for fragment in fragments:
            fragment = _as_mapping(fragment) or {}
            text = _as_mapping(fragment.get("text"))
            if fragment.get("type") == "text" and text is not None and text.get("content"):
                parts.append(str(text["content"]))
        content = "".join(parts)

        if fragments:
            first = _as_mapping(fragments[0]) or {}
            link = _as_mapping((_as_mapping(first.get("text")) or {}).get("link"))
            if link is not None:
                return {"content": content, "url": link.get("url")}
        return content


@dataclass(frozen=True)
class ChoiceProperty(PropertyValue):
    """``select`` and ``status``: the option name."""

    def simplify(self) -> Any:
        option = _as_mapping(self.payload)
        return option.get("name") if option is not None else None


@dataclass(frozen=True)
class MultiSelectProperty(PropertyValue):
    def simplify(self) -> Any:
        options = _as_list(self.payload)
        if options is None:
            return []
        names = [(_as_mapping(option) or {}).get("name") for option in options]
        return [name for name in names if name]


@dataclass(frozen=True)
class DateProperty(PropertyValue):
    def simplify(self) -> Any:
        date = _as_mapping(self.payload)
        if date is None:
            return None
        if date.get("end"):
            return {"start": date.get("start"), "end": date.get("end")}
        return date.get("start")


@dataclass(frozen=True)
class ScalarProperty(PropertyValue):
    """Tags whose payload already is the value (number, checkbox, url, timestamps...)."""

    def simplify(self) -> Any:
        return self.payload


@dataclass(frozen=True)
class FilesProperty(PropertyValue):
    def simplify(self) -> Any:
        files = _as_list(self.payload)
        if files is None:
            return []
        simplified = [self._simplify_file(_as_mapping(item) or {}) for item in files]
        return [item for item in simplified if item is not None]

    @staticmethod
    def _simplify_file(item: Mapping[str, Any]) -> dict[str, Any] | None:
        external = _as_mapping(item.get("external"))
        if item.get("type") == "external" and external:
            return {"url": external.get("url")}
        hosted = _as_mapping(item.get("file"))
        if item.get("type") == "file" and hosted:
            return {"url": hosted.get("url"), "expiry_time": hosted.get("expiry_time")}
        return None


@dataclass(frozen=True)
class PeopleProperty(PropertyValue):
    def simplify(self) -> Any:
        people = _as_list(self.payload)
        if people is None:
            return []
        return [
            {"id": person.get("id"), "name": person.get("name")}
            for person in people
            if isinstance(person, Mapping)
        ]


@dataclass(frozen=True)
class RelationProperty(PropertyValue):
    def simplify(self) -> Any:
        relations = _as_list(self.payload)
        return list(relations) if relations is not None else []


@dataclass(frozen=True)
class FormulaProperty(PropertyValue):
    RESULT_KEYS = ("string", "number", "boolean", "date")

    def simplify(self) -> Any:
        formula = _as_mapping(self.payload)
        if formula is None:
            return None
        for key in self.RESULT_KEYS:
            if key in formula:
                return formula[key]
        return None


@dataclass(frozen=True)
class RollupProperty(PropertyValue):
    RESULT_KEYS = ("number", "date", "array")

    def simplify(self) -> Any:
        rollup = _as_mapping(self.payload)
        if rollup is None:
            return None
        for key in self.RESULT_KEYS:
            if key in rollup:
                return rollup[key]
        # "incomplete" and empty rollups both collapse to None
        return None


@dataclass(frozen=True)
class UserProperty(PropertyValue):
    """``created_by`` and ``last_edited_by``."""

    def simplify(self) -> Any:
        user = _as_mapping(self.payload)
        if user is None:
            return None
        return {"id": user.get("id"), "name": user.get("name")}


@dataclass(frozen=True)
class UniqueIdProperty(PropertyValue):
    def simplify(self) -> Any:
        unique_id = _as_mapping(self.payload)
        if unique_id is None or "number" not in unique_id:
            return None
        prefix = unique_id.get("prefix")
        number = unique_id["number"]
        return f"{prefix}-{number}" if prefix else number


@dataclass(frozen=True)
class PlaceProperty(PropertyValue):
    def simplify(self) -> Any:
        return self.payload if _as_mapping(self.payload) is not None else None


@dataclass(frozen=True)
class UnknownProperty(PropertyValue):
    """Unrecognized or missing tag. Simplifies to the original object, unchanged."""

    raw: Mapping[str, Any] = field(default_factory=dict)

    def simplify(self) -> Any:
        return self.raw
