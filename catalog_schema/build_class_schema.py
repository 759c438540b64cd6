"""Logic for assembling the schema document of one catalog class."""

from typing import Any

from catalog_schema.build_property_schema import build_property_schema
from catalog_schema.doc_record import DocumentationRecord
from catalog_schema.errors import MissingClassComment
from catalog_schema.resolve_types import is_editable, member_types
from catalog_schema.settings import Settings
from catalog_schema.source_model import SourceModel

# Identifies the run-time type; not something a user edits.
EXCLUDED_PROPERTIES = ("typeName",)


def schema_ref(name: str) -> dict[str, str]:
    """Return a ``$ref`` to the schema document of a class."""
    return {"$ref": f"{name}.json"}


def find_class_record(model: SourceModel) -> DocumentationRecord:
    """Return the class-level documentation record of the model."""
    for record in model.records:
        if record.kind == "class":
            return record
    raise MissingClassComment(model.name)


def own_members(
    records: list[DocumentationRecord], class_name: str, inherits_line: int
) -> list[DocumentationRecord]:
    """Members declared directly on the class, ahead of the inheritance line."""
    return [
        r
        for r in records
        if r.kind == "member" and r.memberof == class_name and r.line < inherits_line
    ]


def ancestor_refs(model: SourceModel, settings: Settings) -> list[dict[str, str]]:
    """Build the ordered ``allOf`` references for a non-root class."""
    refs = []
    if len(model.name) > len(settings.item_class) and model.name.endswith(settings.item_class):
        refs.append(schema_ref(settings.item_class))
    elif len(model.name) > len(settings.group_class) and model.name.endswith(settings.group_class):
        refs.append(schema_ref(settings.group_class))
    bases = {settings.item_class, settings.group_class, settings.root_class}
    if model.parent and model.parent not in bases:
        refs.append(schema_ref(model.parent))
    refs.append(schema_ref(settings.root_class))
    return refs


def build_class_schema(model: SourceModel, settings: Settings) -> dict[str, Any]:
    """Build the schema document describing the class's own properties."""
    class_name = find_class_record(model).name

    out: dict[str, Any] = {
        "type": "object",
        "defaultProperties": list(settings.default_properties),
        "properties": {},
    }
    if model.name != settings.root_class:
        out["allOf"] = ancestor_refs(model, settings)

    for record in own_members(model.records, class_name, model.inherits_line):
        types = member_types(record)
        if not is_editable(record, types):
            continue
        out["properties"][record.name] = build_property_schema(
            record, types, settings.acronyms
        )

    for name in EXCLUDED_PROPERTIES:
        out["properties"].pop(name, None)
    return out
