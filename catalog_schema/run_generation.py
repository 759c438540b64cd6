"""Orchestration logic for generating catalog JSON schemas."""

import logging

from catalog_schema.build_items_schema import build_items_schema
from catalog_schema.copy_static_schemas import copy_static_schemas
from catalog_schema.discover_models import discover_models
from catalog_schema.generate_models import generate_models
from catalog_schema.settings import Settings
from catalog_schema.write_json import write_json

logger = logging.getLogger(__name__)


def run_generation(settings: Settings) -> int:
    """Execute the full schema generation pipeline."""
    candidates = discover_models(settings)
    settings.dest.mkdir(parents=True, exist_ok=True)

    copy_static_schemas(settings.static_dir, settings.dest)

    outcomes = generate_models(candidates, settings)
    concrete = [o.model for o in outcomes if o.model is not None and o.model.type_id]

    items = build_items_schema(
        concrete,
        editor=settings.editor,
        root_class=settings.root_class,
        group_class=settings.group_class,
    )
    write_json(settings.dest / "items.json", items, settings.json_indent)

    failed = sum(1 for o in outcomes if not o.succeeded)
    logger.info(
        "Schema writing finished: %d models, %d concrete types, %d failed.",
        len(outcomes),
        len(concrete),
        failed,
    )
    return 0
