"""Logic for selecting the catalog class source files to process."""

import re
from dataclasses import dataclass
from pathlib import Path

from catalog_schema.settings import Settings


@dataclass(frozen=True)
class Candidate:
    """A source file that should describe one catalog class."""

    index: int
    name: str
    filename: Path


def discover_models(settings: Settings) -> list[Candidate]:
    """List candidate model files in a stable (sorted) order."""
    models_dir = settings.models_path
    if not models_dir.is_dir():
        msg = f"No models directory found at: {models_dir}"
        raise SystemExit(msg)

    include = re.compile(settings.include_pattern)
    exclude = re.compile(settings.exclude_pattern) if settings.exclude_pattern else None
    files = sorted(
        p
        for p in models_dir.iterdir()
        if p.is_file() and include.search(p.name) and not (exclude and exclude.search(p.name))
    )
    return [Candidate(i, p.stem, p) for i, p in enumerate(files)]
