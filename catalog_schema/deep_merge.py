"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Lists under these keys accumulate instead of being replaced.
ADDITIVE_KEYS = frozenset({"acronyms"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two configuration dictionaries.

    Nested mappings merge recursively, scalars and lists in ``update`` replace
    those in ``base``. Lists under ``ADDITIVE_KEYS`` are unioned instead, with
    entries upper-cased so ``wms`` and ``WMS`` count once.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif key in ADDITIVE_KEYS and isinstance(current, list) and isinstance(value, list):
            merged[key] = sorted({str(v).upper() for v in current + value})
        else:
            merged[key] = value
    return merged
