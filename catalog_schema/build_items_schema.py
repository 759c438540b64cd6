"""Logic for building the polymorphic ``items.json`` schema.

Editor mode offers one ``oneOf`` choice per concrete type, which is what a form
builder needs. Validation mode instead requires, for every type, that an item
either does not carry that type's discriminant, or carries it and satisfies
the type's shell schema. A validator can then report exactly which type's
constraints failed rather than only that no alternative matched.
"""

from typing import Any

from catalog_schema.build_class_schema import schema_ref
from catalog_schema.build_shell_schema import shell_ref
from catalog_schema.source_model import SourceModel


def discriminant(type_id: str) -> dict[str, Any]:
    """Constrain the ``type`` property to a single discriminant."""
    return {"properties": {"type": {"enum": [type_id]}}}


def validation_fragment(model: SourceModel) -> dict[str, Any]:
    """Either not this type, or this type with all of its constraints."""
    # The discriminant lives here rather than in the shell: abs-itt inherits
    # from csv, but one type field cannot be both.
    return {
        "oneOf": [
            {"not": discriminant(model.type_id)},
            {"allOf": [discriminant(model.type_id), shell_ref(model.name)]},
        ]
    }


def build_items_schema(
    models: list[SourceModel],
    *,
    editor: bool,
    root_class: str = "CatalogMember",
    group_class: str = "CatalogGroup",
) -> dict[str, Any]:
    """Combine the shells of all concrete models into one items schema."""
    items: dict[str, Any] = {
        "type": "object",
        "title": "item",
        "headerTemplate": "{{ self.name }}",
        "required": ["name", "type"],
    }
    if editor:
        items["allOf"] = [schema_ref(root_class)]
        # Groups are offered first; sorted() is stable so the rest keep input order.
        ordered = sorted(models, key=lambda m: m.name != group_class)
        items["oneOf"] = [shell_ref(m.name) for m in ordered]
    else:
        items["allOf"] = [schema_ref(root_class)] + [validation_fragment(m) for m in models]

    return {
        "title": "Items",
        "description": "List of items or groups",
        "type": "array",
        "format": "tabs",
        "items": items,
    }
