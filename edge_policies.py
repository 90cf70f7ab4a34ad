"""
Edge-insertion policies for adjacency-list graphs.

Both graph variants share one representation; only the write path and the
edge count differ. The policy is picked once, when the graph is built.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Hashable, MutableMapping

Adjacency = MutableMapping[Hashable, MutableMapping[Hashable, int]]
InnerFactory = Callable[[], MutableMapping[Hashable, int]]


class EdgePolicy(ABC):
    """
    How an edge (u, v, weight) lands in the adjacency mapping.
    """

    directed: bool

    @abstractmethod
    def insert(
        self, adj: Adjacency, u: Hashable, v: Hashable, weight: int, new_inner: InnerFactory
    ) -> None:
        """
        Record the edge, creating u and v as vertices if absent.
        Overwrites any previous weight for the pair.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self, adj: Adjacency) -> int:
        """Number of edges recorded in adj."""
        raise NotImplementedError


def _entries(adj: Adjacency) -> int:
    return sum(len(inner) for inner in adj.values())


def _ensure_vertices(adj: Adjacency, u: Hashable, v: Hashable, new_inner: InnerFactory) -> None:
    """Create u and v if absent; a new u is removed again if v fails to insert."""
    added_u = u not in adj
    if added_u:
        adj[u] = new_inner()
    try:
        if v not in adj:
            adj[v] = new_inner()
    except TypeError:
        if added_u:
            del adj[u]
        raise


class UndirectedEdges(EdgePolicy):
    """Every edge is mirrored: adj[u][v] == adj[v][u]."""

    directed = False

    def insert(self, adj, u, v, weight, new_inner):
        _ensure_vertices(adj, u, v, new_inner)
        adj[u][v] = weight
        adj[v][u] = weight

    def count(self, adj):
        # mirrored pairs; assumes symmetry holds exactly
        return _entries(adj) // 2


class DirectedEdges(EdgePolicy):
    """Only adj[u][v] is written; v is created as a vertex if needed."""

    directed = True

    def insert(self, adj, u, v, weight, new_inner):
        _ensure_vertices(adj, u, v, new_inner)
        adj[u][v] = weight

    def count(self, adj):
        return _entries(adj)


UNDIRECTED = UndirectedEdges()
DIRECTED = DirectedEdges()


def policy_for(directed: bool) -> EdgePolicy:
    return DIRECTED if directed else UNDIRECTED
