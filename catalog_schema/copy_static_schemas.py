"""Logic for copying the hand-written schema documents into the output."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_static_schemas(static_dir: Path, dest: Path) -> list[Path]:
    """Copy every bundled schema file verbatim; return the written paths."""
    copied = []
    for src in sorted(static_dir.glob("*.json")):
        target = dest / src.name
        shutil.copyfile(src, target)
        logger.info("Copied %s", src.name)
        copied.append(target)
    return copied
