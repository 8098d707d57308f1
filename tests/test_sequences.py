import pytest

from hensei.sequences import (
    contains_key,
    contains_set,
    index_of_sort,
    is_single_subset_sequence,
    is_sub_list,
    is_sub_sequence,
    is_subset_sequence,
    sub_list,
)


def test_contains_set():
    assert contains_set({1, 2, 3}, {1, 3})
    assert contains_set({1, 2}, set())
    assert not contains_set({1, 2}, {1, 4})


def test_index_of_sort_orders_values():
    values = [3.0, 1.0, 2.0]
    indices = index_of_sort(values)
    assert indices == [1, 2, 0]
    assert [values[i] for i in indices] == sorted(values)


def test_index_of_sort_keeps_ties_in_order():
    assert index_of_sort([2, 1, 2, 1]) == [1, 3, 0, 2]


def test_index_of_sort_is_permutation():
    values = [5, 3, 9, 3, 0]
    assert sorted(index_of_sort(values)) == list(range(len(values)))


def test_sub_list():
    assert sub_list(["a", "b", "c", "d"], 1, 3) == ["b", "c"]
    assert sub_list([1, 2], 2, 2) == []


def test_sub_list_out_of_range():
    with pytest.raises(IndexError):
        sub_list([1, 2], 1, 5)
    with pytest.raises(IndexError):
        sub_list([1, 2], 2, 1)


def test_is_sub_list():
    assert is_sub_list([2, 3], [1, 2, 3, 4])
    assert not is_sub_list([2, 4], [1, 2, 3, 4])
    assert not is_sub_list([1, 2, 3], [1, 2])


def test_is_sub_list_empty_cases():
    assert is_sub_list([], [1])
    assert not is_sub_list([], [])


def test_contains_key():
    mapping = {1: "a", 5: "b"}
    assert contains_key(mapping, 5)
    assert not contains_key(mapping, 2)
    assert not contains_key({}, 1)


def test_is_sub_sequence_contiguous_in_sorted_order():
    assert is_sub_sequence({1, 2, 3, 4}, {2, 3})
    assert not is_sub_sequence({1, 2, 3, 4}, {1, 3})
    assert is_sub_sequence({1}, set())
    assert not is_sub_sequence(set(), set())


def test_is_subset_sequence():
    s1 = [{1, 2}, {3}, {4, 5, 6}]
    assert is_subset_sequence(s1, [{1}, {5, 6}])
    assert not is_subset_sequence(s1, [{5}, {1}])
    assert is_subset_sequence(s1, [])
    assert not is_subset_sequence([], [{1}])


def test_is_subset_sequence_needs_distinct_sets():
    assert not is_subset_sequence([{1, 2}], [{1}, {2}])
    assert is_subset_sequence([{1, 2}, {2}], [{1}, {2}])


def test_is_single_subset_sequence():
    s2 = [{1, 2}, {3}, {1, 4}]
    assert is_single_subset_sequence([2, 3, 4], s2)
    assert is_single_subset_sequence([1, 1], s2)
    assert not is_single_subset_sequence([3, 2], s2)
    assert is_single_subset_sequence([], [])
    assert not is_single_subset_sequence([1], [])