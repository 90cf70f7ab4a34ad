"""
Key-ordered mapping used for both levels of the adjacency list.

A plain dict gives the lookups; a parallel key list kept sorted with bisect
gives ascending iteration and positional access for cursors.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    TypeVar,
)

K = TypeVar("K")
T = TypeVar("T")


class SortedMap(MutableMapping[K, T]):
    """
    Mapping whose keys iterate in ascending order.

    Lookup and overwrite are O(1); inserting a new key is O(n) for the list
    shift plus O(log n) comparisons. Keys that cannot be compared with the
    keys already present raise ``TypeError`` on insertion.

    Deletion is only used by graphs to undo a half-finished edge insertion.
    """

    def __init__(self, items: Optional[Iterable[Tuple[K, T]]] = None) -> None:
        self._data: Dict[K, T] = {}
        self._keys: List[K] = []
        if items is not None:
            for k, v in items:
                self[k] = v

    # --- Mapping protocol ---------------------------------------------------

    def __getitem__(self, key: K) -> T:
        return self._data[key]

    def __setitem__(self, key: K, value: T) -> None:
        if key not in self._data:
            insort(self._keys, key)
        self._data[key] = value

    def __delitem__(self, key: K) -> None:
        del self._data[key]
        del self._keys[bisect_left(self._keys, key)]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[K]:
        return iter(self._keys)

    def __reversed__(self) -> Iterator[K]:
        return reversed(self._keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self._data == dict(other.items())

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"SortedMap({{{body}}})"

    def setdefault(self, key: K, default: T = None) -> T:  # type: ignore[assignment]
        if key not in self._data:
            self[key] = default
        return self._data[key]

    def clear(self) -> None:
        self._data.clear()
        self._keys.clear()

    # --- Positional access --------------------------------------------------

    def index(self, key: K) -> int:
        """
        Position of key in ascending order, or len(self) if absent.
        """
        if key not in self._data:
            return len(self._keys)
        return bisect_left(self._keys, key)

    def key_at(self, pos: int) -> K:
        return self._keys[pos]

    def item_at(self, pos: int) -> Tuple[K, T]:
        key = self._keys[pos]
        return key, self._data[key]
