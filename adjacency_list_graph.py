"""
Weighted graph backed by an ordered adjacency list.

Storage is vertex -> (neighbor -> weight), both levels ordered by vertex
value. Undirected and directed graphs share this class; the edge policy
chosen at construction decides whether add_edge mirrors the edge and how
edges are counted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Hashable, Iterable, Iterator, MutableMapping, Optional

from adjacency_iterators import (
    AdjacentRange,
    ReverseVertexIterator,
    VertexIterator,
)
from edge_policies import EdgePolicy, policy_for
from edges import as_edge
from graph import Graph
from sorted_map import SortedMap

logger = logging.getLogger(__name__)

_POSITIONAL_API = ("index", "key_at", "item_at")


class VertexTypeError(TypeError):
    """A vertex is not an instance of the graph's configured vertex type."""


@dataclass(frozen=True)
class GraphOptions:
    """
    Construction-time settings for an AdjacencyListGraph.

    Attributes
    ----------
    directed : bool
        Record edges one-way instead of mirrored.
    vertex_type : type or None
        Every vertex must be an instance of this type. ``vertex_type()`` is
        what ``min_vertex`` returns on an empty graph. ``None`` disables the
        check and makes the empty-graph minimum ``None``.
    edge_container : callable
        Zero-argument factory for each vertex's neighbor mapping. It must
        return an ordered MutableMapping with ``index``, ``key_at`` and
        ``item_at`` positional access; validate() checks for those.
    """

    directed: bool = False
    vertex_type: Optional[type] = int
    edge_container: Callable[[], MutableMapping[Hashable, int]] = field(default=SortedMap)

    def validate(self) -> None:
        if self.vertex_type is not None and not isinstance(self.vertex_type, type):
            raise ValueError(f"vertex_type must be a type, got {self.vertex_type!r}")
        if not callable(self.edge_container):
            raise ValueError("edge_container must be a zero-argument factory")
        sample = self.edge_container()
        missing = [name for name in _POSITIONAL_API if not hasattr(sample, name)]
        if missing:
            raise ValueError(
                f"edge_container must build an ordered mapping with positional "
                f"access; {type(sample).__name__} lacks {', '.join(missing)}"
            )


_UNSET: Any = object()


class AdjacencyListGraph(Graph):
    """
    Weighted graph over ordered vertices.

    Absent vertices and edges are never an error: queries return False, 0 or
    an empty range. Nothing is ever removed.
    """

    def __init__(
        self,
        edges: Iterable[Any] = (),
        *,
        options: Optional[GraphOptions] = None,
        directed: Optional[bool] = None,
        vertex_type: Optional[type] = _UNSET,
    ) -> None:
        opts = options or GraphOptions()
        if directed is not None:
            opts = replace(opts, directed=directed)
        if vertex_type is not _UNSET:
            opts = replace(opts, vertex_type=vertex_type)
        opts.validate()

        self._options = opts
        self._policy: EdgePolicy = policy_for(opts.directed)
        self._adj: SortedMap = SortedMap()

        loaded = self.add_edges(edges)
        if loaded:
            logger.debug(
                "Built %s graph from %d edge items: %d vertices, %d edges",
                "directed" if self.directed else "undirected",
                loaded,
                self.num_vertex(),
                self.num_edge(),
            )

    @classmethod
    def undirected_graph(cls, edges: Iterable[Any] = (), **kwargs: Any) -> "AdjacencyListGraph":
        return cls(edges, directed=False, **kwargs)

    @classmethod
    def directed_graph(cls, edges: Iterable[Any] = (), **kwargs: Any) -> "AdjacencyListGraph":
        return cls(edges, directed=True, **kwargs)

    @classmethod
    def move_from(cls, other: "AdjacencyListGraph") -> "AdjacencyListGraph":
        """
        Take over other's adjacency mapping and options.

        other is left empty but usable, with the same options.
        """
        g = cls(options=other._options)
        g._adj, other._adj = other._adj, SortedMap()
        logger.debug("Moved graph with %d vertices", g.num_vertex())
        return g

    # --- Properties ----------------------------------------------------------

    @property
    def options(self) -> GraphOptions:
        return self._options

    @property
    def directed(self) -> bool:
        return self._policy.directed

    # --- Queries -------------------------------------------------------------

    def num_vertex(self) -> int:
        return len(self._adj)

    def num_edge(self) -> int:
        return self._policy.count(self._adj)

    def is_vertex(self, v: Hashable) -> bool:
        return v in self._adj

    def is_edge(self, u: Hashable, v: Hashable) -> bool:
        inner = self._adj.get(u)
        return inner is not None and v in inner

    def weight(self, u: Hashable, v: Hashable) -> int:
        inner = self._adj.get(u)
        if inner is None:
            return 0
        return inner.get(v, 0)

    def degree(self, v: Hashable) -> int:
        inner = self._adj.get(v)
        return 0 if inner is None else len(inner)

    def adjacent(self, v: Hashable) -> AdjacentRange:
        return AdjacentRange(self._adj.get(v))

    def min_vertex(self) -> Optional[Hashable]:
        if not self._adj:
            vt = self._options.vertex_type
            return vt() if vt is not None else None
        return self._adj.key_at(0)

    # --- Vertex iteration ----------------------------------------------------

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adj)

    def __reversed__(self) -> Iterator[Hashable]:
        return reversed(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, v: object) -> bool:
        return v in self._adj

    def vertices(self) -> Iterator[VertexIterator]:
        """
        One cursor per vertex, ascending; each exposes .value and .adjacent().
        """
        for pos in range(len(self._adj)):
            yield VertexIterator(self._adj, pos)

    def vertex(self, v: Hashable) -> VertexIterator:
        """Cursor positioned at v, or end() if v is absent."""
        return VertexIterator(self._adj, self._adj.index(v))

    def begin(self) -> VertexIterator:
        return VertexIterator(self._adj, 0)

    def end(self) -> VertexIterator:
        return VertexIterator(self._adj, len(self._adj))

    def rbegin(self) -> ReverseVertexIterator:
        return ReverseVertexIterator(self._adj, 0)

    def rend(self) -> ReverseVertexIterator:
        return ReverseVertexIterator(self._adj, len(self._adj))

    # --- Mutation ------------------------------------------------------------

    def _check_vertex(self, v: Hashable) -> None:
        vt = self._options.vertex_type
        if vt is not None and not isinstance(v, vt):
            raise VertexTypeError(
                f"Vertex {v!r} is {type(v).__name__}, graph expects {vt.__name__}"
            )

    def add_vertex(self, v: Hashable) -> None:
        """Ensure v exists; an existing vertex keeps its neighbors."""
        self._check_vertex(v)
        if v not in self._adj:
            self._adj[v] = self._options.edge_container()

    def add_edge(self, u: Hashable, v: Hashable, weight: int = 1) -> None:
        """
        Add or overwrite edge u -> v, creating either vertex if absent.

        Undirected graphs also write v -> u with the same weight.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        self._policy.insert(self._adj, u, v, weight, self._options.edge_container)

    def add_edges(self, edges: Iterable[Any]) -> int:
        """
        Insert every edge-like item (descriptor, pair or triple) through
        add_edge. Returns the number of items consumed.
        """
        n = 0
        for item in edges:
            edge = as_edge(item)
            self.add_edge(edge.source, edge.dest, edge.get_weight())
            n += 1
        return n

    def set_weight(self, u: Hashable, v: Hashable, weight: int) -> bool:
        """
        Change the weight of an existing edge; False if there is none.
        """
        if not self.is_edge(u, v):
            return False
        self._policy.insert(self._adj, u, v, weight, self._options.edge_container)
        return True

    # --- Rendering -----------------------------------------------------------

    def __str__(self) -> str:
        parts = []
        for v, inner in self._adj.items():
            neighbours = ",".join(f"{n}:{w}" for n, w in inner.items())
            parts.append(f"{v}({neighbours})")
        return " ".join(parts)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"AdjacencyListGraph({kind}, num_vertex={self.num_vertex()}, "
            f"num_edge={self.num_edge()})"
        )
