from hypothesis import given, strategies as st

from dvakit.sorting import is_sorted_array, merge, merge_sort, partition, quick_sort

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=40)


def test_is_sorted_array():
    assert is_sorted_array([])
    assert is_sorted_array([1, 2, 2, 5])
    assert not is_sorted_array([3, 1])


@given(st.lists(st.integers(), min_size=1, max_size=30))
def test_partition_invariant(values):
    original = list(values)
    pivot = values[0]
    index = partition(values, 0, len(values) - 1)
    assert values[index] == pivot
    assert all(v <= pivot for v in values[:index])
    assert all(v > pivot for v in values[index + 1 :])
    assert sorted(values) == sorted(original)


@given(int_lists)
def test_quick_sort_whole_list(values):
    expected = sorted(values)
    quick_sort(values, 0, len(values) - 1)
    assert values == expected
    assert is_sorted_array(values)


@given(int_lists)
def test_merge_sort_whole_list(values):
    expected = sorted(values)
    merge_sort(values, 0, len(values) - 1)
    assert values == expected


@given(int_lists)
def test_default_bounds_cover_everything(values):
    a, b = list(values), list(values)
    quick_sort(a)
    merge_sort(b)
    assert a == b == sorted(values)


def test_sorting_subrange_leaves_rest_untouched():
    values = [9, 5, 3, 4, 1, 0]
    merge_sort(values, 1, 4)
    assert values == [9, 1, 3, 4, 5, 0]
    values = [9, 5, 3, 4, 1, 0]
    quick_sort(values, 1, 4)
    assert values == [9, 1, 3, 4, 5, 0]


@given(int_lists, int_lists)
def test_merge_combines_sorted_runs(left, right):
    left, right = sorted(left), sorted(right)
    values = left + right
    if values:
        merge(values, 0, len(left) - 1, len(values) - 1)
    assert values == sorted(left + right)