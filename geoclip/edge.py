"""Directed and undirected edges between two values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple


class Edge(NamedTuple):
    """A directed edge from ``first`` to ``second``."""

    first: Any
    second: Any

    def reversed(self) -> "Edge":
        """Return the edge pointing the other way."""
        return Edge(self.second, self.first)


@dataclass(frozen=True, order=True, init=False)
class BidirectionalEdge:
    """An undirected edge: BidirectionalEdge(a, b) == BidirectionalEdge(b, a)."""

    first: Any
    second: Any

    def __init__(self, a: Any, b: Any) -> None:
        lo = b if b < a else a
        hi = b if a < b else a
        object.__setattr__(self, "first", lo)
        object.__setattr__(self, "second", hi)