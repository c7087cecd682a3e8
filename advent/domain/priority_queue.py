"""Cost-ordered frontier for uniform-cost search."""

import heapq
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class PriorityItem:
    """
    Entry in the frontier heap.

    Comparison order:
    1. priority (lower is better)
    2. sequence (insertion order, so equal priorities pop FIFO)

    The payload is never compared, which keeps unorderable states usable.
    """
    priority: float
    sequence: int
    cost: int
    data: Any

    def __lt__(self, other: 'PriorityItem') -> bool:
        """Define comparison for heap ordering."""
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.sequence < other.sequence


class PriorityQueue(Generic[T]):
    """
    Min-ordered frontier keyed by accumulated cost.

    Duplicate states at different costs are allowed; there is no decrease-key.
    Callers discard stale entries when they are popped.
    """

    def __init__(self):
        self._heap: List[PriorityItem] = []
        self._counter = 0

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._heap

    def size(self) -> int:
        """Get the number of entries in the queue, stale ones included."""
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, cost: int, item: T, priority: Optional[float] = None):
        """
        Insert an item at the given cost.

        ``priority`` defaults to ``cost``; an informed search passes
        ``cost + heuristic`` instead.
        """
        if priority is None:
            priority = cost
        self._counter += 1
        heapq.heappush(self._heap, PriorityItem(priority, self._counter, cost, item))

    def pop_min(self) -> Optional[Tuple[int, T]]:
        """
        Remove and return the lowest-priority entry as (cost, item).
        Returns None if queue is empty.
        """
        if not self._heap:
            return None
        entry = heapq.heappop(self._heap)
        return (entry.cost, entry.data)

    def peek(self) -> Optional[Tuple[float, int, T]]:
        """
        Look at the next entry without removing it.
        Returns (priority, cost, item) or None if empty.
        """
        if not self._heap:
            return None
        entry = self._heap[0]
        return (entry.priority, entry.cost, entry.data)

    def clear(self):
        """Remove all items from the queue."""
        self._heap.clear()
