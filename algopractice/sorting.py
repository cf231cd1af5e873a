"""Classic comparison and distribution sorts."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def insertion_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy, swapping each item leftwards into place."""
    result = list(values)
    for i in range(1, len(result)):
        pos = i
        while pos > 0 and result[pos] < result[pos - 1]:
            result[pos], result[pos - 1] = result[pos - 1], result[pos]
            pos -= 1
    return result


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return a sorted copy of numbers lying in the half-open range [0, 1).

    There are as many buckets as values; each bucket is insertion-sorted
    and the buckets are concatenated in order.
    """
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in insertion_sort(bucket)]


def counting_sort(values: Iterable[int], max_value: int | None = None) -> list[int]:
    """Return a sorted copy of non-negative integers no greater than ``max_value``.

    When ``max_value`` is omitted the largest value is used.
    """
    items = list(values)
    if max_value is None:
        max_value = max(items, default=0)
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    counts = [0] * (max_value + 1)
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value!r} outside 0..{max_value}")
        counts[value] += 1
    for i in range(1, len(counts)):
        counts[i] += counts[i - 1]
    result = [0] * len(items)
    for value in items:
        counts[value] -= 1
        result[counts[value]] = value
    return result


def max_heapify(items: MutableSequence, index: int, size: int) -> None:
    """Sift ``items[index]`` down so the subtree rooted there is a max-heap.

    Only the first ``size`` items are considered part of the heap.
    """
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < size and items[largest] < items[left]:
            largest = left
        if right < size and items[largest] < items[right]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def build_max_heap(items: MutableSequence) -> None:
    """Rearrange ``items`` in place into a max-heap."""
    size = len(items)
    for index in range(size // 2, -1, -1):
        max_heapify(items, index, size)


def heap_sort(items: MutableSequence) -> None:
    """Sort ``items`` in place into ascending order using a max-heap."""
    build_max_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        max_heapify(items, 0, end)


def _merge(left: list, right: list) -> list:
    merged = []
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


def merge_sort(values: Iterable[Any]) -> list:
    """Return a stable sorted copy using top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[low]
    boundary = low + 1
    for scan in range(low + 1, high + 1):
        if pivot > items[scan]:
            items[scan], items[boundary] = items[boundary], items[scan]
            boundary += 1
    items[boundary - 1], items[low] = items[low], items[boundary - 1]
    return boundary - 1


def quick_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy using quicksort with the first item as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if high - low < 1:
            continue
        split = _partition(items, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def shell_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy using shell sort with halving gaps."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items