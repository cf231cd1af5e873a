"""Binary search over sorted and rotated sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _search_range(items: Sequence, low: int, high: int, key: Any) -> int | None:
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == key:
            return mid
        if key > items[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search(items: Sequence, key: Any) -> int | None:
    """Return the index of ``key`` in the ascending ``items``, or None."""
    return _search_range(items, 0, len(items) - 1, key)


def find_pivot(items: Sequence, low: int, high: int) -> int | None:
    """Return the index of the largest item of a rotated ascending run.

    For ``[3, 4, 5, 6, 1, 2]`` this is 3, the index of 6. None is returned
    when no rotation point is found in ``items[low:high + 1]``.
    """
    while True:
        if high < low:
            return None
        if high == low:
            return low
        mid = (low + high) // 2
        if mid < high and items[mid] > items[mid + 1]:
            return mid
        if mid > low and items[mid] < items[mid - 1]:
            return mid - 1
        if items[low] >= items[mid]:
            high = mid - 1
        else:
            low = mid + 1


def pivoted_binary_search(items: Sequence, key: Any) -> int | None:
    """Return the index of ``key`` in a rotated ascending sequence, or None."""
    last = len(items) - 1
    pivot = find_pivot(items, 0, last)
    if pivot is None:
        return _search_range(items, 0, last, key)
    if items[pivot] == key:
        return pivot
    if items[0] <= key:
        return _search_range(items, 0, pivot - 1, key)
    return _search_range(items, pivot + 1, last, key)