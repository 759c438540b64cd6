"""Data models for representing documented symbols."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentationRecord:
    """Represents one documentation comment attached to a symbol."""

    name: str
    kind: str  # class/member/function
    memberof: str | None
    line: int  # 1-based line of the documented code
    declared_types: tuple[str, ...] = ()
    description: str | None = None
    custom_tags: dict[str, str] = field(default_factory=dict)

    def tag(self, name: str, fallback: str | None = None) -> str | None:
        """Return the value of a custom tag, or the fallback if absent."""
        return self.custom_tags.get(name, fallback)
