"""Tests for building the schema fragment of a single member."""

import logging

import pytest

from catalog_schema.array_items import array_items
from catalog_schema.build_property_schema import build_property_schema
from catalog_schema.doc_record import DocumentationRecord
from catalog_schema.errors import UnsupportedArrayItemType
from catalog_schema.resolve_types import member_types


def _record(
    name: str, *types: str, description: str | None = None, **tags: str
) -> DocumentationRecord:
    return DocumentationRecord(
        name=name,
        kind="member",
        memberof="Foo",
        line=1,
        declared_types=types,
        description=description,
        custom_tags=tags,
    )


def _schema(record: DocumentationRecord) -> dict:
    return build_property_schema(record, member_types(record))


def test_string_property() -> None:
    """Verify title, cleaned description and absent format."""
    description = "Gets or sets the layers.  This property is observable."
    schema = _schema(_record("layers", "String", description=description))
    assert schema == {"type": "string", "title": "Layers", "description": "The layers."}
    assert list(schema) == ["type", "title", "description"]


def test_boolean_gets_checkbox() -> None:
    """Verify the default boolean format."""
    assert _schema(_record("isOpen", "Boolean"))["format"] == "checkbox"


def test_description_member_gets_textarea() -> None:
    """Verify the textarea format and its editor options."""
    schema = _schema(_record("description", "String"))
    assert schema["format"] == "textarea"
    assert schema["options"] == {"expand_height": True}


def test_string_array() -> None:
    """Verify array properties carry an items schema."""
    schema = _schema(_record("hiddenInfoKeys", "Array.<String>"))
    assert schema["type"] == "array"
    assert schema["format"] == "tabs"
    assert schema["items"] == {"type": "string"}


def test_feature_info_format_array() -> None:
    """Verify the enumerated GetFeatureInfo formats."""
    schema = _schema(_record("getFeatureInfoFormats", "Array.<GetFeatureInfoFormat>"))
    assert schema["items"]["enum"] == ["json", "xml", "html", "text"]


def test_editor_overrides(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that explicit editor tags beat derived values."""
    record = _record(
        "stops",
        "ColorStops",
        description="Gets or sets the stops.",
        editortype="{Number[]} ascending",
        editortitle="Colour stops",
        editordescription="Where the {@link Legend} colour changes.",
        editorformat="table",
        editoritemstitle="Stop",
        editoritemstype="integer",
    )
    with caplog.at_level(logging.DEBUG):
        schema = _schema(record)
    assert schema == {
        "type": "array",
        "title": "Colour stops",
        "description": "Where the Legend colour changes.",
        "format": "table",
        "items": {"type": "integer", "title": "Stop"},
    }
    assert "stops items: Stop" in caplog.text


def test_union_type() -> None:
    """Verify several supported types produce a list of primitives."""
    schema = _schema(_record("data", "Object", "String"))
    assert schema["type"] == ["object", "string"]
    assert "format" not in schema


def test_rectangle_special_fragment() -> None:
    """Verify the hand-written rectangle fragment wins."""
    schema = _schema(_record("rectangle", "Rectangle", description="Gets or sets the extent."))
    assert schema["type"] == "array"
    assert schema["format"] == "table"
    assert schema["items"] == {"type": ["number", "string"]}
    assert schema["minItems"] == 2
    assert schema["maxItems"] == 4
    assert schema["description"] == "The extent."


def test_whitelist_special_fragment() -> None:
    """Verify map-of-booleans properties."""
    schema = _schema(_record("whitelist", "Object"))
    assert schema["type"] == "object"
    assert schema["additionalProperties"] == {"type": "boolean", "format": "checkbox"}


def test_special_fragments_are_copies() -> None:
    """Verify that editing one schema does not leak into the next."""
    first = _schema(_record("blacklist", "Object"))
    first["additionalProperties"]["format"] = "changed"
    second = _schema(_record("blacklist", "Object"))
    assert second["additionalProperties"]["format"] == "checkbox"


def test_unsupported_array_items() -> None:
    """Verify that unknown array item types are rejected."""
    with pytest.raises(UnsupportedArrayItemType):
        array_items(_record("things", "Array.<Rectangle>"), "Array.<Rectangle>")
