import pytest

from dsakit.arrays import (
    closest_to_zero_pair,
    count_zero_sum_subarrays,
    delete_at,
    frequencies,
    insert_at,
    linear_search,
    merge_sorted,
    min_max,
    reverse,
    rotate_right,
    unique_sorted,
)

SAMPLE = [4, 8, 15, 16, 23, 42]


@pytest.mark.parametrize("pos", [1, 3, len(SAMPLE) + 1])
def test_insert_at_places_value(pos):
    result = insert_at(SAMPLE, pos, 99)
    assert len(result) == len(SAMPLE) + 1
    assert result[pos - 1] == 99
    assert delete_at(result, pos) == SAMPLE


def test_insert_at_does_not_mutate_input():
    original = list(SAMPLE)
    insert_at(original, 2, 7)
    assert original == SAMPLE


@pytest.mark.parametrize("pos", [0, -1, len(SAMPLE) + 2])
def test_insert_at_rejects_bad_position(pos):
    with pytest.raises(IndexError):
        insert_at(SAMPLE, pos, 1)


@pytest.mark.parametrize("pos", [1, 4, len(SAMPLE)])
def test_delete_at_round_trip(pos):
    result = delete_at(SAMPLE, pos)
    assert len(result) == len(SAMPLE) - 1
    assert insert_at(result, pos, SAMPLE[pos - 1]) == SAMPLE


@pytest.mark.parametrize("pos", [0, len(SAMPLE) + 1])
def test_delete_at_rejects_bad_position(pos):
    with pytest.raises(IndexError):
        delete_at(SAMPLE, pos)


def test_delete_at_empty():
    with pytest.raises(IndexError):
        delete_at([], 1)


@pytest.mark.parametrize("index", range(len(SAMPLE)))
def test_linear_search_found(index):
    result = linear_search(SAMPLE, SAMPLE[index])
    assert result.index == index
    assert result.comparisons == index + 1


def test_linear_search_first_occurrence():
    values = [5, 1, 5, 1]
    assert linear_search(values, 1).index == 1


def test_linear_search_missing_counts_everything():
    result = linear_search(SAMPLE, 1000)
    assert result.index is None
    assert result.comparisons == len(SAMPLE)


def test_reverse_is_involution():
    assert reverse(reverse(SAMPLE)) == SAMPLE


def test_reverse_swaps_ends():
    result = reverse(SAMPLE)
    assert result[0] == SAMPLE[-1]
    assert result[-1] == SAMPLE[0]
    assert sorted(result) == sorted(SAMPLE)


def test_reverse_empty():
    assert reverse([]) == []


@pytest.mark.parametrize(
    "first, second",
    [([1, 3, 5], [2, 4, 6]), ([], [1, 2]), ([1, 2], []), ([1, 1, 9], [0, 1, 10])],
)
def test_merge_sorted_is_sorted_union(first, second):
    merged = merge_sorted(first, second)
    assert merged == sorted(first + second)


def test_merge_sorted_prefers_first_on_ties():
    first = [1.0, 2.0]
    second = [1, 2]
    merged = merge_sorted(first, second)
    assert [type(v) for v in merged] == [float, int, float, int]


def test_unique_sorted():
    values = [1, 1, 2, 3, 3, 3, 7]
    result = unique_sorted(values)
    assert result == sorted(set(values))
    assert all(a < b for a, b in zip(result, result[1:]))


def test_unique_sorted_empty():
    assert unique_sorted([]) == []


def test_frequencies_counts_and_order():
    values = [3, 1, 3, 2, 1, 3]
    result = frequencies(values)
    assert list(result) == list(dict.fromkeys(values))
    assert all(result[v] == values.count(v) for v in values)
    assert sum(result.values()) == len(values)


def test_min_max():
    values = [7, -3, 12, 0]
    assert min_max(values) == (min(values), max(values))


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


def test_rotate_right_full_turn_is_identity():
    assert rotate_right(SAMPLE, len(SAMPLE)) == SAMPLE
    assert rotate_right(SAMPLE, 0) == SAMPLE


def test_rotate_right_by_one_moves_last_to_front():
    result = rotate_right(SAMPLE, 1)
    assert result[0] == SAMPLE[-1]
    assert result[1:] == SAMPLE[:-1]


@pytest.mark.parametrize("k", [1, 2, 5])
def test_rotate_right_inverse(k):
    n = len(SAMPLE)
    assert rotate_right(rotate_right(SAMPLE, k), n - k) == SAMPLE


def test_rotate_right_negative_and_large():
    n = len(SAMPLE)
    assert rotate_right(SAMPLE, -1) == rotate_right(SAMPLE, n - 1)
    assert rotate_right(SAMPLE, n + 2) == rotate_right(SAMPLE, 2)


def test_rotate_right_empty():
    assert rotate_right([], 3) == []


def test_closest_to_zero_pair_example():
    assert closest_to_zero_pair([1, 60, -10, 70, -80, 85]) == (-80, 85)


def test_closest_to_zero_pair_exact_zero():
    pair = closest_to_zero_pair([5, -7, 3, 7, 20])
    assert sum(pair) == 0
    assert pair[0] <= pair[1]


def test_closest_to_zero_pair_needs_two():
    with pytest.raises(ValueError):
        closest_to_zero_pair([4])


def test_count_zero_sum_subarrays_zeros():
    assert count_zero_sum_subarrays([0, 0, 0]) == 6


def test_count_zero_sum_subarrays_none():
    assert count_zero_sum_subarrays([1, 2, 3]) == 0
    assert count_zero_sum_subarrays([]) == 0


def test_count_zero_sum_subarrays_opposites():
    assert count_zero_sum_subarrays([4, -4]) == 1