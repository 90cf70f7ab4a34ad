"""
Edge descriptors used to bulk-load a graph.

An edge is never stored as an object inside the graph; these are value
types that describe one edge at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Protocol, runtime_checkable


@runtime_checkable
class EdgeLike(Protocol):
    """Anything exposing source, dest and a weight accessor."""

    source: Any
    dest: Any

    def get_weight(self) -> int:
        ...


@dataclass(frozen=True)
class WeightedEdge:
    """
    Edge source -> dest carrying an explicit integer weight.
    """

    source: Hashable
    dest: Hashable
    weight: int

    def get_weight(self) -> int:
        return self.weight


@dataclass(frozen=True)
class UnweightedEdge:
    """
    Edge source -> dest; its weight is always 1.
    """

    source: Hashable
    dest: Hashable

    def get_weight(self) -> int:
        return 1


def as_edge(item: Any) -> EdgeLike:
    """
    Coerce a bulk-loading item into an edge descriptor.

    Accepts anything satisfying ``EdgeLike`` unchanged, a ``(u, v)`` pair
    (weight 1) or a ``(u, v, w)`` triple.
    """
    if isinstance(item, EdgeLike):
        return item
    if isinstance(item, tuple):
        if len(item) == 2:
            return UnweightedEdge(item[0], item[1])
        if len(item) == 3:
            return WeightedEdge(item[0], item[1], item[2])
        raise ValueError(f"Edge tuples need 2 or 3 fields, got {len(item)}: {item!r}")
    raise TypeError(f"Not an edge: {type(item)!r}")
