"""FIFO queues, a bounded ring buffer and a double-ended queue."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from dsakit.linkedlist import Node
from dsakit.stacks import LinkedStack

DEFAULT_RING_CAPACITY = 5


class EmptyQueueError(IndexError):
    """Raised when taking a value from an empty queue."""

    def __init__(self, message: str = "queue is empty") -> None:
        super().__init__(message)


class LinkedQueue:
    """An unbounded FIFO queue built from linked nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._front: Node | None = None
        self._rear: Node | None = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        node = Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self._front is None:
            raise EmptyQueueError()
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        """Yield values from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularQueue:
    """A fixed-size ring buffer; values offered while it is full are dropped."""

    def __init__(self, capacity: int = DEFAULT_RING_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[int | None] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: int) -> bool:
        """Store ``value`` at the rear; tell whether there was room for it."""
        if self._size == self.capacity:
            return False
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1
        return True

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if not self._size:
            raise EmptyQueueError()
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        assert value is not None
        return value

    def __iter__(self) -> Iterator[int]:
        """Yield values from front to rear."""
        for offset in range(self._size):
            value = self._slots[(self._front + offset) % self.capacity]
            assert value is not None
            yield value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, {list(self)!r})"


class Deque:
    """A double-ended queue with pushes and pops at both ends."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push_front(self, value: int) -> None:
        """Add ``value`` before the first element."""
        self._items.appendleft(value)

    def push_back(self, value: int) -> None:
        """Add ``value`` after the last element."""
        self._items.append(value)

    def pop_front(self) -> int:
        """Remove and return the first element."""
        if not self._items:
            raise EmptyQueueError("deque is empty")
        return self._items.popleft()

    def pop_back(self) -> int:
        """Remove and return the last element."""
        if not self._items:
            raise EmptyQueueError("deque is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def reverse_queue(queue: Iterable[int]) -> LinkedQueue:
    """Return a new queue holding ``queue``'s values in reverse, via a stack."""
    source = queue if isinstance(queue, LinkedQueue) else LinkedQueue(queue)
    stack = LinkedStack()
    while len(source):
        stack.push(source.dequeue())
    result = LinkedQueue()
    while len(stack):
        result.enqueue(stack.pop())
    return result