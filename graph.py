"""
Weighted graph abstraction.

Vertices are ordered, hashable values; edges carry integer weights.
Whether edges are mirrored (undirected) or one-way (directed) is a property
of the concrete graph, not of the code reading it.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterator, Optional

from adjacency_iterators import AdjacentRange


class Graph(ABC):
    """Read-only view shared by directed and undirected graphs."""

    @property
    @abstractmethod
    def directed(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def num_vertex(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def num_edge(self) -> int:
        """
        Number of edges. An undirected edge counts once even though both
        endpoints record it.
        """
        raise NotImplementedError

    @abstractmethod
    def is_vertex(self, v: Hashable) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_edge(self, u: Hashable, v: Hashable) -> bool:
        raise NotImplementedError

    @abstractmethod
    def weight(self, u: Hashable, v: Hashable) -> int:
        """
        Weight of edge u -> v, or 0 if there is no such edge.

        A stored weight of 0 cannot be told apart from a missing edge;
        use is_edge for that.
        """
        raise NotImplementedError

    @abstractmethod
    def degree(self, v: Hashable) -> int:
        """Number of neighbors of v (out-degree when directed), 0 if absent."""
        raise NotImplementedError

    @abstractmethod
    def adjacent(self, v: Hashable) -> AdjacentRange:
        """
        Neighbors of v with their weights, ascending. Empty if v is absent.
        """
        raise NotImplementedError

    @abstractmethod
    def min_vertex(self) -> Optional[Hashable]:
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[Hashable]:
        raise NotImplementedError

    @abstractmethod
    def __reversed__(self) -> Iterator[Hashable]:
        raise NotImplementedError
