"""Logic for mapping documented JSDoc types onto JSON Schema primitives."""

import re

from catalog_schema.doc_record import DocumentationRecord

SUPPORTED_TYPE_RE = re.compile(
    r"^(Boolean|Number|String|Object|LegendUrl|Array(\.<(String|Number|Object|GetFeatureInfoFormat)>)?)$",
    re.IGNORECASE,
)
EDITOR_TYPE_RE = re.compile(r"(\{(.*)\})?(.*)")
RECTANGLE_TYPES = ("Array.<Number>", "Array.<String>")


def supported_type(type_name: str) -> bool:
    """Whether the documented type is something the editor can handle."""
    return bool(SUPPORTED_TYPE_RE.match(type_name))


def from_editor_types(text: str) -> list[str]:
    """Parse an ``@editortype`` value into JSDoc type names.

    Accepts either ``{Number} trailing text is ignored`` or a bare ``Number``.
    """
    found = EDITOR_TYPE_RE.match(text)  # every part is optional, so this always matches
    expr = found.group(2) if found.group(2) is not None else found.group(3)
    names = []
    for name in expr.strip().split("|"):
        name = name.strip()
        if name.endswith("[]"):
            name = f"Array.<{name[:-2]}>"
        names.append(name)
    return names


def editor_type(type_name: str) -> str:
    """Convert a JSDoc type name to a JSON Schema primitive."""
    if re.search(r"Array", type_name, re.IGNORECASE):
        return "array"
    if re.search(r"LegendUrl", type_name, re.IGNORECASE):
        return "string"
    return type_name.lower()


def member_types(record: DocumentationRecord) -> list[str]:
    """Return the effective JSDoc types of a member, applying overrides."""
    types = list(record.declared_types)
    if types and types[0] == "Rectangle":
        types = list(RECTANGLE_TYPES)
    override = record.tag("editortype")
    if override is not None:
        types = from_editor_types(override)
    return types


def is_editable(record: DocumentationRecord, types: list[str]) -> bool:
    """An explicit ``@editortype`` is trusted; otherwise a type must be supported."""
    if record.tag("editortype"):
        return True
    return any(supported_type(t) for t in types)


def resolve_types(types: list[str]) -> str | list[str]:
    """Map supported types to primitives, unwrapping a single result."""
    resolved = [editor_type(t) for t in types if supported_type(t)]
    return resolved[0] if len(resolved) == 1 else resolved
