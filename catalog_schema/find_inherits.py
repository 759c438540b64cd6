"""Logic for locating the inheritance declaration of a catalog class."""

import re
from dataclasses import dataclass

from catalog_schema.errors import MissingInheritsDeclaration


@dataclass(frozen=True)
class InheritsLine:
    """The inheritance declaration of a class source file."""

    line: int  # 1-based
    parent: str | None


def find_inherits(
    text: str,
    filename: str,
    *,
    class_name: str,
    root_class: str = "CatalogMember",
    define_properties: str = "defineProperties",
    inherit: str = "inherit",
) -> InheritsLine:
    """Find the line where the class inherits from its parent.

    The root class has no parent, so its own property definition block marks
    the boundary instead.
    """
    if class_name == root_class:
        search_re = re.compile(rf"{re.escape(define_properties)}\({re.escape(root_class)}\.prototype")
    else:
        # Some classes inherit from intermediates such as ImageryLayerCatalogItem.
        search_re = re.compile(rf"{re.escape(inherit)}\s*\(([A-Za-z0-9_-]+).*Catalog")

    for lineno, line in enumerate(text.split("\n"), start=1):
        m = search_re.search(line)
        if m:
            parent = m.group(1) if search_re.groups else None
            return InheritsLine(line=lineno, parent=parent)
    raise MissingInheritsDeclaration(filename)
