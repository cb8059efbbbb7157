"""In-place sorting of integer sequences between two inclusive indices."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Optional


def is_sorted_array(values: Sequence[int]) -> bool:
    """Return True if *values* is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def _bounds(values: Sequence[int], low: int, high: Optional[int]) -> tuple[int, int]:
    return low, len(values) - 1 if high is None else high


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low..high]`` around its first item; return the pivot's index."""
    pivot = values[low]
    border = low
    for i in range(low + 1, high + 1):
        if values[i] <= pivot:
            border += 1
            values[border], values[i] = values[i], values[border]
    values[border], values[low] = values[low], values[border]
    return border


def quick_sort(values: MutableSequence[int], low: int = 0, high: Optional[int] = None) -> None:
    """Sort ``values[low..high]`` in place with quicksort."""
    low, high = _bounds(values, low, high)
    if low < high:
        pivot_index = partition(values, low, high)
        quick_sort(values, low, pivot_index - 1)
        quick_sort(values, pivot_index + 1, high)


def merge(values: MutableSequence[int], low: int, split_point: int, high: int) -> None:
    """Merge the sorted runs ``values[low..split_point]`` and ``values[split_point+1..high]``."""
    left = list(values[low : split_point + 1])
    right = list(values[split_point + 1 : high + 1])
    i = j = 0
    k = low
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            values[k] = left[i]
            i += 1
        else:
            values[k] = right[j]
            j += 1
        k += 1
    for item in left[i:] + right[j:]:
        values[k] = item
        k += 1


def merge_sort(values: MutableSequence[int], low: int = 0, high: Optional[int] = None) -> None:
    """Sort ``values[low..high]`` in place with merge sort."""
    low, high = _bounds(values, low, high)
    if low < high:
        split_point = (low + high) // 2
        merge_sort(values, low, split_point)
        merge_sort(values, split_point + 1, high)
        merge(values, low, split_point, high)