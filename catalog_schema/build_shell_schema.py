"""Logic for building the discriminant-bearing shell schema of a concrete class."""

import re
from typing import Any

from catalog_schema.build_class_schema import find_class_record, schema_ref
from catalog_schema.rewrite_links import rewrite_links
from catalog_schema.settings import Settings
from catalog_schema.source_model import SourceModel

ITEMS_REF = {"$ref": "items.json"}


def shell_ref(name: str) -> dict[str, str]:
    """Return a ``$ref`` to the shell schema of a class."""
    return {"$ref": f"{name}_type.json"}


def class_tag(model: SourceModel, class_name: str, tag: str, fallback_field: str | None = None) -> str | None:
    """Look up a custom tag across every record of the class; the last value wins.

    Class comments may be split over several records, so all of them are
    consulted. ``fallback_field`` names a record attribute used when a record
    lacks the tag.
    """
    value = None
    for record in model.records:
        if record.name != class_name:
            continue
        fallback = getattr(record, fallback_field) if fallback_field else None
        found = record.tag(tag, fallback)
        if found is not None:
            value = found
    return value


def default_title(class_name: str, root_class: str = "CatalogMember") -> str:
    """Strip the ``Catalog...`` suffix from a class name, except for the root."""
    common = re.match(r"[A-Z][a-z]+", root_class)
    prefix = common.group(0) if common else "Catalog"
    return re.sub(rf"{prefix}(?!{root_class[len(prefix):]}).*", "", class_name)


def build_shell_schema(
    model: SourceModel, class_schema: dict[str, Any], settings: Settings
) -> dict[str, Any]:
    """Pair a class schema with its fixed ``type`` discriminant.

    The shell repeats the full ancestor chain: the editor needs the flattened
    list and does not follow the class document's own ``allOf``.
    """
    class_name = find_class_record(model).name
    properties: dict[str, Any] = {
        "type": {
            "options": {"hidden": True},
            "type": "string",
            "enum": [model.type_id],
        },
    }
    # Groups contain items, which makes the schema family recursive.
    if model.name.endswith(settings.group_class):
        properties["items"] = dict(ITEMS_REF)

    title = class_tag(model, class_name, "editortitle")
    if title is None:
        title = model.type_name
    if title is None:
        title = default_title(class_name, settings.root_class)

    out: dict[str, Any] = {
        "type": "object",
        "properties": properties,
        "description": rewrite_links(class_tag(model, class_name, "editordescription", "description")),
        "title": title,
        "allOf": list(class_schema.get("allOf", [])) + [schema_ref(model.name)],
    }
    return {k: v for k, v in out.items() if v is not None}
