"""Explicit memoization table for recursive puzzle computations."""

from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

V = TypeVar("V")


class MemoCache(Generic[V]):
    """
    Mapping from a canonical argument tuple to a computed result.

    Entries are populated on first computation and never evicted. The cache
    is passed explicitly through the recursive call chain, so separate runs
    never share state unless the caller hands them the same instance.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._table: Dict[Hashable, V] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._table

    def get(self, key: Hashable) -> Optional[V]:
        """Cached value for ``key`` or None; does not count as a hit."""
        return self._table.get(key)

    def put(self, key: Hashable, value: V) -> V:
        """Store a computed value and return it."""
        self._table[key] = value
        return value

    def compute(self, key: Hashable, func: Callable[[], V]) -> V:
        """
        Return the cached value for ``key``, computing it on a miss.

        ``func`` may recurse back into this cache; the value is stored only
        after it returns.
        """
        if key in self._table:
            self.hits += 1
            return self._table[key]
        self.misses += 1
        return self.put(key, func())

    def clear(self):
        """Drop every entry and reset the statistics."""
        self._table.clear()
        self.hits = 0
        self.misses = 0

    def __repr__(self) -> str:
        return f"MemoCache({self.name!r}, size={len(self)}, hits={self.hits}, misses={self.misses})"
