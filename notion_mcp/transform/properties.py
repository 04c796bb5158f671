"""Parses raw Notion property objects into typed property values."""

from collections.abc import Mapping
from typing import Any

from notion_mcp.transform.models import (
    ChoiceProperty,
    DateProperty,
    FilesProperty,
    FormulaProperty,
    MultiSelectProperty,
    PeopleProperty,
    PlaceProperty,
    PropertyValue,
    RelationProperty,
    RichTextProperty,
    RollupProperty,
    ScalarProperty,
    UniqueIdProperty,
    UnknownProperty,
    UserProperty,
)

PROPERTY_TYPES: dict[str, type[PropertyValue]] = {
    "title": RichTextProperty,
    "rich_text": RichTextProperty,
    "select": ChoiceProperty,
    "status": ChoiceProperty,
    "multi_select": MultiSelectProperty,
    "date": DateProperty,
    "number": ScalarProperty,
    "checkbox": ScalarProperty,
    "url": ScalarProperty,
    "email": ScalarProperty,
    "phone_number": ScalarProperty,
    "created_time": ScalarProperty,
    "last_edited_time": ScalarProperty,
    "files": FilesProperty,
    "people": PeopleProperty,
    "relation": RelationProperty,
    "formula": FormulaProperty,
    "rollup": RollupProperty,
    "created_by": UserProperty,
    "last_edited_by": UserProperty,
    "unique_id": UniqueIdProperty,
    "place": PlaceProperty,
}


def parse_property(raw: Mapping[str, Any]) -> PropertyValue:
    """Build the typed variant for a raw property object.

    Objects without a ``type`` tag, or with a tag not listed in
    ``PROPERTY_TYPES``, become an ``UnknownProperty`` wrapping ``raw``.
    """
    tag = raw.get("type")
    if not isinstance(tag, str) or tag not in PROPERTY_TYPES:
        return UnknownProperty(tag=str(tag or ""), raw=raw)
    return PROPERTY_TYPES[tag](tag=tag, payload=raw.get(tag))


def extract_property_value(raw: Any) -> Any:
    """Return the simplified value of a raw property; non-objects pass through."""
    if not isinstance(raw, Mapping):
        return raw
    return parse_property(raw).simplify()
