"""Logic for building the JSON Schema fragment of a single class member."""

import logging
from collections.abc import Iterable
from typing import Any

from catalog_schema.array_items import array_items
from catalog_schema.doc_record import DocumentationRecord
from catalog_schema.normalize_description import normalize_description
from catalog_schema.resolve_types import resolve_types, supported_type
from catalog_schema.rewrite_links import rewrite_links
from catalog_schema.special_properties import apply_special_properties
from catalog_schema.titleify import titleify

logger = logging.getLogger(__name__)


def _default_format(schema_type: str | list[str], prop_name: str) -> str | None:
    if schema_type == "array":
        return "tabs"
    if schema_type == "boolean":
        return "checkbox"
    if schema_type == "string" and prop_name == "description":
        return "textarea"
    return None


def _array_type(types: list[str]) -> str:
    candidates = [t for t in types if supported_type(t)]
    if len(candidates) == 1:
        return candidates[0]
    return "|".join(types)


def build_property_schema(
    record: DocumentationRecord,
    types: list[str],
    acronyms: Iterable[str] | None = None,
) -> dict[str, Any]:
    """Build the schema of one member from its documentation and override tags.

    ``types`` are the member's effective JSDoc types (see ``member_types``).
    Explicit ``@editor*`` tags always beat derived values, and the name-keyed
    special fragments beat everything.
    """
    schema_type = resolve_types(types)

    description = record.tag("editordescription")
    if description is None and record.description is not None:
        description = normalize_description(record.description)

    # None marks a slot that is dropped at the end, which keeps key order stable.
    schema: dict[str, Any] = {
        "type": schema_type,
        "title": record.tag("editortitle", titleify(record.name, acronyms)),
        "description": rewrite_links(description),
        "format": _default_format(schema_type, record.name),
    }
    if schema_type == "array":
        schema["items"] = array_items(record, _array_type(types))
        if "title" in schema["items"]:
            logger.debug("%s items: %s", record.name, schema["items"]["title"])

    schema["format"] = record.tag("editorformat", schema["format"])
    if schema["format"] == "textarea":
        schema["options"] = {"expand_height": True}

    schema = apply_special_properties(record.name, schema)
    return {k: v for k, v in schema.items() if v is not None}
