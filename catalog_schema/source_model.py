"""Data models for a catalog class source file and its processing outcome."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from catalog_schema.doc_record import DocumentationRecord


@dataclass
class SourceModel:
    """Everything derived from one catalog class source file."""

    name: str
    filename: Path
    parsed_source: dict[str, Any]
    parent: str | None
    inherits_line: int
    type_id: str | None = None
    type_name: str | None = None
    records: list[DocumentationRecord] = field(default_factory=list)


@dataclass
class ModelOutcome:
    """Result of processing one dispatched candidate file."""

    index: int
    name: str
    filename: Path
    model: SourceModel | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the candidate produced a model."""
        return self.error is None and self.model is not None
