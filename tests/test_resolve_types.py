"""Tests for mapping documented types onto schema primitives."""

import pytest

from catalog_schema.doc_record import DocumentationRecord
from catalog_schema.resolve_types import (
    editor_type,
    from_editor_types,
    is_editable,
    member_types,
    resolve_types,
    supported_type,
)


def _record(*types: str, **tags: str) -> DocumentationRecord:
    return DocumentationRecord(
        name="prop", kind="member", memberof="Foo", line=1, declared_types=types, custom_tags=tags
    )


@pytest.mark.parametrize(
    ("type_name", "ok"),
    [
        ("String", True),
        ("number", True),
        ("LegendUrl", True),
        ("Array", True),
        ("Array.<GetFeatureInfoFormat>", True),
        ("Array.<Rectangle>", False),
        ("Terria", False),
        ("Function", False),
    ],
)
def test_supported_type(type_name: str, ok: bool) -> None:
    """Verify which JSDoc types the editor understands."""
    assert supported_type(type_name) is ok


def test_editor_type() -> None:
    """Verify the JSDoc to schema primitive mapping."""
    assert editor_type("Array.<String>") == "array"
    assert editor_type("LegendUrl") == "string"
    assert editor_type("Boolean") == "boolean"


def test_from_editor_types() -> None:
    """Verify parsing of braced and bare editor type overrides."""
    assert from_editor_types("{Number[]} stop values") == ["Array.<Number>"]
    assert from_editor_types("String|Number") == ["String", "Number"]


def test_resolve_types_unwraps_single() -> None:
    """Verify that a single supported type is not wrapped in a list."""
    assert resolve_types(["String"]) == "string"
    assert resolve_types(["Object", "String", "Terria"]) == ["object", "string"]
    assert resolve_types(["Terria"]) == []


def test_rectangle_types() -> None:
    """Verify that rectangles become a pair of array types."""
    types = member_types(_record("Rectangle"))
    assert types == ["Array.<Number>", "Array.<String>"]
    assert resolve_types(types) == ["array", "array"]


def test_editortype_override() -> None:
    """Verify that an explicit editor type makes a member editable."""
    record = _record("ColorStops", editortype="{Number[]}")
    assert member_types(record) == ["Array.<Number>"]
    assert is_editable(record, ["ColorStops"])
    assert not is_editable(_record("Terria"), ["Terria"])
