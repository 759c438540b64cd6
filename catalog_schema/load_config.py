"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from catalog_schema.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "source": {
        "models_dir": "lib/Models",
        "include_pattern": r"Catalog(Item|Group|Member)\.js$",
        "exclude_pattern": r"(ArcGisMapServerCatalogGroup|addUserCatalogMember)",
        "static_dir": None,
    },
    "classes": {
        "root": "CatalogMember",
        "item": "CatalogItem",
        "group": "CatalogGroup",
        "define_properties": "defineProperties",
        "inherit": "inherit",
    },
    "output": {
        "json_indent": 2,
        "editor": False,
        "workers": 4,
    },
    "default_properties": ["name", "type", "url"],
    "acronyms": [
        "WMS",
        "URL",
        "KML",
        "CSV",
        "JSON",
        "ID",
        "GPX",
        "CZML",
        "WFS",
        "WMTS",
        "GEOJSON",
        "CKAN",
    ],
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A path that does not exist is reported and the defaults are used.
    """
    if not path:
        return DEFAULT_CONFIG.copy()
    p = Path(path)
    if not p.exists():
        logger.warning("Config file %s not found; using defaults.", p)
        return DEFAULT_CONFIG.copy()
    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    return deep_merge(DEFAULT_CONFIG, user_config)
