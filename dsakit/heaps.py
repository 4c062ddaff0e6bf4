"""Min-priority queues and heap sort."""

from __future__ import annotations

import heapq
from bisect import insort
from operator import neg
from typing import Iterable

from dsakit.queues import EmptyQueueError

DEFAULT_CAPACITY = 1000


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must be non-negative")


class SortedPriorityQueue:
    """A bounded min-priority queue kept as a list sorted in descending order.

    The smallest value sits at the end, so removing it is cheap. Inserts past
    the capacity are ignored.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[int] = []

    def insert(self, value: int) -> bool:
        """Add ``value``; tell whether there was room for it."""
        if len(self._items) >= self.capacity:
            return False
        insort(self._items, value, key=neg)
        return True

    def delete(self) -> int:
        """Remove and return the smallest value."""
        if not self._items:
            raise EmptyQueueError("priority queue is empty")
        return self._items.pop()

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise EmptyQueueError("priority queue is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class MinHeap:
    """A bounded binary min-heap; inserts past the capacity are ignored."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._heap: list[int] = []

    def insert(self, value: int) -> bool:
        """Add ``value``; tell whether there was room for it."""
        if len(self._heap) >= self.capacity:
            return False
        heapq.heappush(self._heap, value)
        return True

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._heap:
            raise EmptyQueueError("heap is empty")
        return heapq.heappop(self._heap)

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        if not self._heap:
            raise EmptyQueueError("heap is empty")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted through a heap."""
    heap = list(values)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]