"""Logic for writing schema documents to disk."""

import json
from pathlib import Path
from typing import Any


def dump_json(doc: Any, indent: int) -> str:
    """Serialise a document; an indent of zero gives compact output."""
    if indent > 0:
        return json.dumps(doc, indent=indent, ensure_ascii=False)
    return json.dumps(doc, separators=(",", ":"), ensure_ascii=False)


def write_json(path: Path, doc: Any, indent: int) -> None:
    """Write a document as UTF-8 JSON."""
    path.write_text(dump_json(doc, indent), encoding="utf-8")
