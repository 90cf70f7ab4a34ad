"""
Cursor and range types over an adjacency mapping.

Cursors are bidirectional positions inside one ordered mapping (the outer
vertex mapping or one vertex's neighbor mapping). They do not own anything
and are invalidated by any structural change to the graph they came from.

Ranges are the Python-iteration face of the same data: lazy, finite and
restartable, because every ``iter()`` starts again from the live mapping.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterator, Tuple

from sorted_map import SortedMap

# shared by every range over an absent vertex
_NO_EDGES: SortedMap = SortedMap()


class _Cursor:
    """
    Position inside an ordered mapping.

    Two cursors are equal when they point into the same mapping object at
    the same position; the values found there are not compared.
    """

    __slots__ = ("_container", "_pos")

    def __init__(self, container: Any, pos: int) -> None:
        self._container = container
        self._pos = pos

    def _key(self) -> Hashable:
        if not 0 <= self._pos < len(self._container):
            raise IndexError(f"{type(self).__name__} is not dereferenceable")
        return self._container.key_at(self._pos)

    @property
    def value(self) -> Hashable:
        return self._key()

    def advance(self):
        self._pos += 1
        return self

    def retreat(self):
        self._pos -= 1
        return self

    def copy(self):
        return type(self)(self._container, self._pos)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return other._container is self._container and other._pos == self._pos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos={self._pos})"


class AdjacentIterator(_Cursor):
    """
    Cursor over one vertex's neighbors, ascending.

    Read-only: neighbor keys are never editable in place, and weight edits
    go through ``AdjacencyListGraph.set_weight`` so undirected edges stay
    mirrored.
    """

    __slots__ = ()

    def dest(self) -> Hashable:
        return self._key()

    def weight(self) -> int:
        return self._container[self._key()]


class AdjacentRange:
    """
    Neighbors of one vertex as (neighbor, weight) pairs in ascending order.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: Any = None) -> None:
        self._edges = edges if edges is not None else _NO_EDGES

    def __iter__(self) -> Iterator[Tuple[Hashable, int]]:
        edges = self._edges
        return ((n, edges[n]) for n in edges)

    def __reversed__(self) -> Iterator[Tuple[Hashable, int]]:
        edges = self._edges
        return ((n, edges[n]) for n in reversed(edges))

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, neighbor: object) -> bool:
        return neighbor in self._edges

    def begin(self) -> AdjacentIterator:
        return AdjacentIterator(self._edges, 0)

    def end(self) -> AdjacentIterator:
        return AdjacentIterator(self._edges, len(self._edges))

    def __repr__(self) -> str:
        return f"AdjacentRange({list(self)!r})"


class VertexIterator(_Cursor):
    """
    Cursor over the vertices of a graph, ascending.

    Besides the vertex itself it exposes that vertex's neighbor range;
    iterating the cursor yields the (neighbor, weight) pairs.
    """

    __slots__ = ()

    def adjacent(self) -> AdjacentRange:
        return AdjacentRange(self._container[self._key()])

    def begin(self) -> AdjacentIterator:
        return self.adjacent().begin()

    def end(self) -> AdjacentIterator:
        return self.adjacent().end()

    def __iter__(self) -> Iterator[Tuple[Hashable, int]]:
        return iter(self.adjacent())


class ReverseVertexIterator(VertexIterator):
    """
    Cursor over the vertices of a graph, descending.

    The position counts from the largest vertex, so ``advance`` moves to
    smaller vertices and ``rend`` sits one step past the smallest.
    """

    __slots__ = ()

    def _key(self) -> Hashable:
        if not 0 <= self._pos < len(self._container):
            raise IndexError("ReverseVertexIterator is not dereferenceable")
        return self._container.key_at(len(self._container) - 1 - self._pos)
