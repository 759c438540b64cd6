"""Declarative matching of nested node patterns in a plain-dict syntax tree.

A ``TreePattern`` is a sequence of ``PatternStep``s followed by a terminal
field. Each step walks a dotted path from the current node, optionally fans
out over a list, and filters the candidates by node kind and field values.
Whatever candidates survive the final step yield their terminal field.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

_MISSING = object()


def lookup(node: Any, path: str) -> Any:
    """Follow a dotted path of keys and list indexes, or return ``_MISSING``."""
    current = node
    if not path:
        return current
    for part in path.split("."):
        if isinstance(current, dict):
            current = current.get(part, _MISSING)
        elif isinstance(current, list) and part.isdigit():
            idx = int(part)
            current = current[idx] if idx < len(current) else _MISSING
        else:
            return _MISSING
        if current is _MISSING or current is None:
            return _MISSING
    return current


@dataclass(frozen=True)
class PatternStep:
    """One hop in a tree pattern."""

    path: str
    kind: str | None = None
    where: dict[str, Any] = field(default_factory=dict)
    each: bool = False  # fan out over a list found at ``path``
    single: bool = False  # the list at ``path`` must hold exactly one node

    def apply(self, node: Any) -> Iterator[Any]:
        """Yield every candidate reached from ``node`` by this step."""
        found = lookup(node, self.path)
        if found is _MISSING:
            return
        if self.single:
            if not isinstance(found, list) or len(found) != 1:
                return
            candidates = found
        elif self.each:
            if not isinstance(found, list):
                return
            candidates = found
        else:
            candidates = [found]

        for candidate in candidates:
            if self._accepts(candidate):
                yield candidate

    def _accepts(self, candidate: Any) -> bool:
        if self.kind is not None and lookup(candidate, "type") != self.kind:
            return False
        return all(lookup(candidate, k) == v for k, v in self.where.items())


@dataclass(frozen=True)
class TreePattern:
    """A sequence of steps ending in a terminal field."""

    steps: tuple[PatternStep, ...]
    terminal: str

    def find_all(self, tree: Any) -> Iterator[Any]:
        """Yield terminal values of every match, in document order."""
        frontier: list[Any] = [tree]
        for step in self.steps:
            frontier = [c for node in frontier for c in step.apply(node)]
            if not frontier:
                return
        for node in frontier:
            value = lookup(node, self.terminal)
            if value is not _MISSING:
                yield value

    def first(self, tree: Any) -> Any | None:
        """Return the first terminal value, or None when nothing matches."""
        return next(self.find_all(tree), None)
