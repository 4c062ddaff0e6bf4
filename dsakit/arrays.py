"""Operations on flat sequences of integers."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from typing import Iterable, NamedTuple, Sequence


class SearchResult(NamedTuple):
    """Where a linear search stopped and how many comparisons it took."""

    index: int | None
    comparisons: int


def insert_at(values: Iterable[int], pos: int, x: int) -> list[int]:
    """Return a copy of ``values`` with ``x`` placed at 1-based position ``pos``."""
    items = list(values)
    if not 1 <= pos <= len(items) + 1:
        raise IndexError(f"position {pos} outside 1..{len(items) + 1}")
    items.insert(pos - 1, x)
    return items


def delete_at(values: Iterable[int], pos: int) -> list[int]:
    """Return a copy of ``values`` without the element at 1-based position ``pos``."""
    items = list(values)
    if not 1 <= pos <= len(items):
        raise IndexError(f"position {pos} outside 1..{len(items)}")
    del items[pos - 1]
    return items


def linear_search(values: Iterable[int], key: int) -> SearchResult:
    """Scan ``values`` for ``key``, counting every comparison made."""
    comparisons = 0
    for index, value in enumerate(values):
        comparisons += 1
        if value == key:
            return SearchResult(index, comparisons)
    return SearchResult(None, comparisons)


def reverse(values: Iterable[int]) -> list[int]:
    """Return the elements of ``values`` in the opposite order."""
    return list(values)[::-1]


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences; on ties the element of ``first`` comes first."""
    left = list(first)
    right = list(second)
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def unique_sorted(values: Iterable[int]) -> list[int]:
    """Drop adjacent duplicates from a sorted sequence."""
    result: list[int] = []
    for value in values:
        if not result or result[-1] != value:
            result.append(value)
    return result


def frequencies(values: Iterable[int]) -> dict[int, int]:
    """Count each value, keyed in order of first appearance."""
    return dict(Counter(values))


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(minimum, maximum)`` of a non-empty sequence."""
    items = list(values)
    if not items:
        raise ValueError("min_max() needs at least one value")
    return min(items), max(items)


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Rotate ``values`` right by ``k`` places; negative ``k`` rotates left."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    if k == 0:
        return items
    return items[-k:] + items[:-k]


def closest_to_zero_pair(values: Iterable[int]) -> tuple[int, int]:
    """Find the pair whose sum is nearest zero, as ``(smaller, larger)``.

    Uses two pointers over the sorted values; the first pair met with the
    smallest absolute sum wins.
    """
    items = sorted(values)
    if len(items) < 2:
        raise ValueError("closest_to_zero_pair() needs at least two values")
    left, right = 0, len(items) - 1
    best: tuple[int, int] | None = None
    best_sum = 0
    while left < right:
        total = items[left] + items[right]
        if best is None or abs(total) < abs(best_sum):
            best_sum = total
            best = (items[left], items[right])
        if total < 0:
            left += 1
        elif total > 0:
            right -= 1
        else:
            break
    assert best is not None
    return best


def count_zero_sum_subarrays(values: Iterable[int]) -> int:
    """Count the contiguous, non-empty slices of ``values`` that sum to zero."""
    seen = Counter([0])
    count = 0
    for prefix in accumulate(values):
        count += seen[prefix]
        seen[prefix] += 1
    return count