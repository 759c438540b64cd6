"""Logic for parsing JavaScript source into a plain-dict syntax tree."""

from typing import Any

import esprima
from esprima.error_handler import Error as EsprimaError

from catalog_schema.errors import UnparseableDocumentation

PARSE_OPTIONS = {"comment": True, "range": True}


def _to_plain(value: Any) -> Any:
    """Convert esprima node objects into nested dicts and lists."""
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if hasattr(value, "__dict__"):
        return {k: _to_plain(v) for k, v in vars(value).items()}
    return value


def parse_source(text: str, filename: str = "<source>") -> dict[str, Any]:
    """Parse a script, keeping comments and character ranges.

    The result is an ESTree-shaped dict with an extra ``comments`` list.
    """
    try:
        program = esprima.parseScript(text, PARSE_OPTIONS)
    except EsprimaError as e:
        msg = f"Cannot parse {filename}: {e}"
        raise UnparseableDocumentation(msg) from e
    tree = _to_plain(program)
    tree.setdefault("comments", [])
    return tree
