"""Singly, doubly and circularly linked lists and a few list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from heapq import merge
from typing import Iterable, Iterator, NamedTuple


@dataclass(eq=False)
class Node:
    """A list cell; ``prev`` is only used by doubly linked lists."""

    value: int
    next: Node | None = None
    prev: Node | None = None


class LinkedList:
    """A singly linked list that keeps a tail pointer for O(1) appends."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, key: int) -> bool:
        """Unlink the first node holding ``key``; tell whether one was found."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return True
            previous = node
        return False

    def count(self, key: int) -> int:
        """Return how many nodes hold ``key``."""
        return sum(1 for value in self if value == key)

    def rotate_right(self, k: int) -> None:
        """Rotate the list in place ``k`` places to the right."""
        if not self._size:
            return
        k %= self._size
        if k == 0:
            return
        assert self._head is not None and self._tail is not None
        new_tail = self._head
        for _ in range(self._size - k - 1):
            assert new_tail.next is not None
            new_tail = new_tail.next
        self._tail.next = self._head
        self._head = new_tail.next
        new_tail.next = None
        self._tail = new_tail


def merge_sorted_lists(first: Iterable[int], second: Iterable[int]) -> LinkedList:
    """Merge two ascending lists; on ties the element of ``first`` comes first."""
    return LinkedList(merge(first, second))


def find_intersection(first: Iterable[int], second: Iterable[int]) -> int | None:
    """Align both lists at their ends and return the first equal value met.

    The longer list is advanced by the difference in length, then both are
    walked in step. ``None`` means no intersection.
    """
    left = list(first)
    right = list(second)
    diff = abs(len(left) - len(right))
    if len(left) > len(right):
        left = left[diff:]
    else:
        right = right[diff:]
    return next((a for a, b in zip(left, right) if a == b), None)


class DoublyLinkedList:
    """A linked list whose nodes point both ways."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularLinkedList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` after the current last node."""
        node = Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        """Walk once around the ring, starting at the first node."""
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            assert node is not None
            yield node.value
            node = node.next
            if node is head:
                break

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Term(NamedTuple):
    """One polynomial term: ``coefficient * x ** exponent``."""

    coefficient: int
    exponent: int


def format_polynomial(terms: Iterable[Term | tuple[int, int]]) -> str:
    """Render terms in the given order, e.g. ``3x^2 + 2x + 1``."""
    parts = []
    for coefficient, exponent in terms:
        if exponent == 0:
            parts.append(f"{coefficient}")
        elif exponent == 1:
            parts.append(f"{coefficient}x")
        else:
            parts.append(f"{coefficient}x^{exponent}")
    return " + ".join(parts)