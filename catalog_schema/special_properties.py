"""Hand-written schema fragments for properties the documentation cannot describe."""

import copy
from typing import Any

BOOLEAN_MAP: dict[str, Any] = {
    "additionalProperties": {
        "type": "boolean",
        "format": "checkbox",
    },
}

SPECIAL_PROPERTIES: dict[str, dict[str, Any]] = {
    "rectangle": {
        "type": "array",
        "items": {"type": ["number", "string"]},
        "format": "table",
        "options": {
            "collapsed": True,
            "disable_array_reorder": True,
        },
        "maxItems": 4,
        "minItems": 2,
    },
    "blacklist": BOOLEAN_MAP,
    "whitelist": BOOLEAN_MAP,
}


def apply_special_properties(prop_name: str, schema: dict[str, Any]) -> dict[str, Any]:
    """Overlay the special fragment for ``prop_name``, if there is one."""
    special = SPECIAL_PROPERTIES.get(prop_name)
    if special:
        for key, value in special.items():
            schema[key] = copy.deepcopy(value)
    return schema
