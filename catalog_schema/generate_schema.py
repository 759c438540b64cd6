"""Generate JSON schemas for catalog items and groups from documented sources.

Reads the catalog class sources under ``SOURCE/lib/Models`` and writes one
schema per class, one discriminant-bearing shell per concrete class, and an
aggregate ``items.json`` into ``DEST``.
"""

import argparse
import logging
import sys

from catalog_schema.errors import FatalSchemaError
from catalog_schema.load_config import load_config
from catalog_schema.run_generation import run_generation
from catalog_schema.settings import Settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    ap = argparse.ArgumentParser(
        description="Generate JSON schemas for catalog items from documented sources.",
    )
    ap.add_argument("source", help="Root of the source tree (containing lib/Models)")
    ap.add_argument("dest", help="Directory to write the schema documents into")
    ap.add_argument(
        "--editor",
        action="store_true",
        help="Generate items.json for a form editor instead of for validation",
    )
    ap.add_argument(
        "--quiet",
        action="store_true",
        help="Only report warnings and errors",
    )
    ap.add_argument(
        "--json-indent",
        type=int,
        default=None,
        help="Indent width of the written JSON (0 for compact output)",
    )
    ap.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of source files processed concurrently",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the schema generator."""
    args = build_parser().parse_args(argv)
    settings = Settings.from_config(load_config(args.config), args)
    logging.basicConfig(
        level=logging.WARNING if settings.quiet else logging.INFO,
        format="%(message)s",
    )
    try:
        return run_generation(settings)
    except FatalSchemaError as e:
        print(f"*** {e}", file=sys.stderr)
        print("Aborting.\n", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
