"""Assorted interview puzzles: dynamic programming, hashing, heaps and selection."""

from __future__ import annotations

import heapq
import random
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import zip_longest
from typing import Any

from algopractice.sorting import build_max_heap, heap_sort, max_heapify

_BASE = 256
_MODULUS = 10**7 + 7


def max_yearly_profit(prices: Sequence[int]) -> int:
    """Return the best revenue from selling items off either end of a shelf.

    One item is sold per year, starting in year 1, and an item sold in year
    ``y`` earns ``price * y``.
    """
    count = len(prices)
    best = [0] * (count + 1)
    for length in range(1, count + 1):
        year = count - length + 1
        best = [
            max(
                best[left + 1] + prices[left] * year,
                best[left] + prices[left + length - 1] * year,
            )
            for left in range(count - length + 1)
        ] + [0]
    return best[0]


def _repeated_of_length(text: str, length: int, powers: list[int]) -> str:
    if length == 0:
        return ""
    codes = [ord(ch) - ord("a") for ch in text]
    digest = 0
    for code in codes[:length]:
        digest = (digest * _BASE + code) % _MODULUS
    seen: dict[int, list[int]] = {digest: [0]}
    for i in range(len(text) - length):
        digest = (
            _BASE * (digest - codes[i] * powers[length - 1]) + codes[i + length]
        ) % _MODULUS
        start = i + 1
        window = text[start:start + length]
        for index in seen.get(digest, ()):
            if text[index:index + length] == window:
                return window
        seen.setdefault(digest, []).append(start)
    return ""


def longest_dup_substring(text: str) -> str:
    """Return a longest substring that occurs at least twice, or ``""``."""
    size = len(text)
    powers = [1] * max(size, 1)
    for i in range(1, size):
        powers[i] = (_BASE * powers[i - 1]) % _MODULUS
    low, high = 0, size - 1
    result = ""
    while low <= high:
        mid = low + (high - low) // 2
        found = _repeated_of_length(text, mid, powers)
        if len(found) > len(result):
            result = found
            low = mid + 1
        else:
            high = mid - 1
    return result


def k_closest(points: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Return the ``k`` points nearest the origin, nearest first."""
    if not points:
        return []
    if not 0 <= k <= len(points):
        raise ValueError(f"k must lie in 0..{len(points)}, got {k}")
    heap = [(p[0] * p[0] + p[1] * p[1], i, list(p)) for i, p in enumerate(points)]
    heapq.heapify(heap)
    return [heapq.heappop(heap)[2] for _ in range(k)]


def add_binary(a: str, b: str) -> str:
    """Return the sum of two binary strings as a binary string."""
    for text in (a, b):
        if any(ch not in "01" for ch in text):
            raise ValueError(f"not a binary string: {text!r}")
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = int(x) + int(y) + carry
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def _partition(items: list[tuple[Any, int]], pivot: int, low: int, high: int) -> int:
    items[high], items[pivot] = items[pivot], items[high]
    store = low
    for i in range(low, high):
        if items[i][1] < items[high][1]:
            items[i], items[store] = items[store], items[i]
            store += 1
    items[high], items[store] = items[store], items[high]
    return store


def top_k_frequent(nums: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` most frequent values, in no particular order."""
    counted = sorted(Counter(nums).items())
    size = len(counted)
    if not 0 <= k <= size:
        raise ValueError(f"k must lie in 0..{size}, got {k}")
    if k == 0:
        return []
    target = size - k
    low, high = 0, size - 1
    while low != high:
        pivot = _partition(counted, random.randint(low, high), low, high)
        if pivot == target:
            break
        if pivot < target:
            low = pivot + 1
        else:
            high = pivot - 1
    return [value for value, _ in counted[target:]]


def _sift_up(items: list, index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not items[parent] < items[index]:
            return
        items[parent], items[index] = items[index], items[parent]
        index = parent


def _heap_until(items: Sequence) -> int:
    for i in range(1, len(items)):
        if items[(i - 1) // 2] < items[i]:
            return i
    return len(items)


def heap_walkthrough(values: Iterable[Any], extra: Any) -> dict[str, Any]:
    """Exercise a max-heap: build, push ``extra``, pop, sort, then re-check.

    Returns the maximum after each stage, the sorted items, whether the sorted
    items still form a max-heap, and their longest prefix that does.
    """
    items = list(values)
    if not items:
        raise ValueError("heap_walkthrough needs at least one value")
    build_max_heap(items)
    steps: dict[str, Any] = {"max": items[0]}
    items.append(extra)
    _sift_up(items, len(items) - 1)
    steps["max_after_push"] = items[0]
    items[0], items[-1] = items[-1], items[0]
    items.pop()
    max_heapify(items, 0, len(items))
    steps["max_after_pop"] = items[0] if items else None
    heap_sort(items)
    steps["sorted"] = list(items)
    until = _heap_until(items)
    steps["is_heap"] = until == len(items)
    steps["heap_prefix"] = items[:until]
    return steps