import pytest

from dsakit import arrays
from dsakit.linkedlist import (
    CircularLinkedList,
    DoublyLinkedList,
    LinkedList,
    Term,
    find_intersection,
    format_polynomial,
    merge_sorted_lists,
)


@pytest.mark.parametrize("values", [[], [7], [10, 20, 30, 40, 50]])
def test_linked_list_round_trip(values):
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_append_adds_at_end():
    linked = LinkedList([1, 2])
    linked.append(3)
    assert list(linked) == [1, 2, 3]
    assert len(linked) == 3


@pytest.mark.parametrize("key", [1, 2, 4])
def test_remove_first_occurrence(key):
    values = [1, 2, 3, 2, 4]
    linked = LinkedList(values)
    assert linked.remove(key) is True
    expected = list(values)
    expected.remove(key)
    assert list(linked) == expected
    assert len(linked) == len(expected)


def test_remove_tail_then_append_keeps_order():
    linked = LinkedList([5, 6, 7])
    assert linked.remove(7) is True
    linked.append(8)
    assert list(linked) == [5, 6, 8]


def test_remove_missing_key_leaves_list():
    linked = LinkedList([1, 2, 3])
    assert linked.remove(9) is False
    assert list(linked) == [1, 2, 3]


def test_remove_from_empty():
    linked = LinkedList()
    assert linked.remove(1) is False
    assert len(linked) == 0


@pytest.mark.parametrize("key", [1, 2, 5])
def test_count_matches_list_count(key):
    values = [1, 2, 1, 3, 1]
    assert LinkedList(values).count(key) == values.count(key)


@pytest.mark.parametrize("k", [0, 1, 2, 4, 5, 7, -1, -6])
def test_rotate_right_matches_array_rotation(k):
    values = [10, 20, 30, 40, 50]
    linked = LinkedList(values)
    linked.rotate_right(k)
    assert list(linked) == arrays.rotate_right(values, k)
    assert len(linked) == len(values)


def test_rotate_then_append_uses_new_tail():
    linked = LinkedList([1, 2, 3])
    linked.rotate_right(1)
    linked.append(4)
    assert list(linked) == [3, 1, 2, 4]


def test_rotate_empty_list():
    linked = LinkedList()
    linked.rotate_right(3)
    assert list(linked) == []


@pytest.mark.parametrize(
    "first, second",
    [([1, 3, 5], [2, 4, 6]), ([], [1, 2]), ([1, 2], []), ([1, 1, 4], [1, 2, 9])],
)
def test_merge_sorted_lists(first, second):
    merged = merge_sorted_lists(LinkedList(first), LinkedList(second))
    assert list(merged) == sorted(first + second)
    assert list(merged) == arrays.merge_sorted(first, second)


def test_find_intersection_aligned_from_end():
    assert find_intersection(LinkedList([1, 2, 3, 4]), LinkedList([9, 3, 4])) == 3


def test_find_intersection_none():
    assert find_intersection([1, 2, 3], [4, 5, 6]) is None


def test_find_intersection_ignores_unaligned_prefix():
    assert find_intersection([5, 1, 2], [5]) is None


def test_doubly_linked_list_both_directions():
    values = [4, 8, 15, 16]
    doubly = DoublyLinkedList(values)
    assert list(doubly) == values
    assert list(reversed(doubly)) == values[::-1]
    assert len(doubly) == len(values)


def test_doubly_linked_list_append():
    doubly = DoublyLinkedList()
    doubly.append(1)
    doubly.append(2)
    assert list(reversed(doubly)) == [2, 1]


def test_circular_list_walks_once():
    values = [3, 6, 9]
    ring = CircularLinkedList(values)
    assert list(ring) == values
    assert list(ring) == values
    assert len(ring) == len(values)


def test_circular_list_append_and_empty():
    ring = CircularLinkedList()
    assert list(ring) == []
    ring.append(1)
    ring.append(2)
    assert list(ring) == [1, 2]


def test_format_polynomial():
    terms = [Term(3, 2), Term(2, 1), Term(1, 0)]
    assert format_polynomial(terms) == "3x^2 + 2x + 1"


def test_format_polynomial_constant_and_empty():
    assert format_polynomial([Term(5, 0)]) == "5"
    assert format_polynomial([]) == ""