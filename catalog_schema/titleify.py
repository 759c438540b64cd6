"""Logic for turning property names into human-readable titles."""

from collections.abc import Iterable

from catalog_schema.load_config import DEFAULT_CONFIG


def titleify(prop_name: str, acronyms: Iterable[str] | None = None) -> str:
    """Turn ``myWmsPropName`` into ``My WMS prop name``."""
    if not prop_name:
        return prop_name
    known = {a.upper() for a in (acronyms if acronyms is not None else DEFAULT_CONFIG["acronyms"])}

    s = prop_name[0].upper()
    for ch in prop_name[1:]:
        if "A" <= ch <= "Z":
            s += " " + ch.lower()
        else:
            s += ch
    return " ".join(w.upper() if w.upper() in known else w for w in s.split(" "))
