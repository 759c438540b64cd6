"""Logic for building the ``items`` sub-schema of array properties."""

from typing import Any

from catalog_schema.doc_record import DocumentationRecord
from catalog_schema.errors import UnsupportedArrayItemType

ARRAY_ITEM_TYPES = {
    "Array.<String>": "string",
    "Array.<Number>": "number",
    "Array.<GetFeatureInfoFormat>": "enum",
    "Array.<Object>": "object",
    "Array": "string",
}
FEATURE_INFO_FORMATS = ["json", "xml", "html", "text"]


def array_items(record: DocumentationRecord, array_type: str) -> dict[str, Any]:
    """Return the items schema for an array-typed member."""
    item_type = ARRAY_ITEM_TYPES.get(array_type)
    if item_type is None:
        raise UnsupportedArrayItemType(array_type)

    items: dict[str, Any] = {"type": record.tag("editoritemstype", item_type)}
    title = record.tag("editoritemstitle")
    if title is not None:
        items["title"] = title
    description = record.tag("editoritemsdescription")
    if description is not None:
        items["description"] = description
    if array_type == "Array.<GetFeatureInfoFormat>":
        items["enum"] = list(FEATURE_INFO_FORMATS)
    return items
