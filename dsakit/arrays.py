"""Array problems: majority vote, best sums and profits, rain water, merging."""

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate, pairwise
from typing import Any

_END = object()


def majority_element(values: Iterable[Any]) -> Any | None:
    """Return the value held by more than half the items, or None (Boyer-Moore vote)."""
    items = list(values)
    if not items:
        return None
    candidate, count = items[0], 1
    for value in items[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate, count = value, 1
    return candidate if items.count(candidate) > len(items) // 2 else None


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest contiguous sum (Kadane); never less than 0."""
    best = current = 0
    for value in values:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def best_single_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell; 0 if none."""
    lows = accumulate(prices, min)
    return max((price - low for price, low in zip(prices, lows)), default=0)


def total_profit(prices: Iterable[int]) -> int:
    """Return the gain from taking every rise between consecutive prices."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def trapped_rain_water(heights: Sequence[int]) -> int:
    """Return the units of water held between the bars of ``heights``."""
    left = accumulate(heights, max)
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(min(lo, hi) - h for h, lo, hi in zip(heights, left, right))


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse ``values`` in place."""
    values[:] = values[::-1]


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two sorted iterables; on ties the item from ``second`` comes first."""
    left, right = iter(first), iter(second)
    a, b = next(left, _END), next(right, _END)
    merged = []
    while a is not _END and b is not _END:
        if a < b:
            merged.append(a)
            a = next(left, _END)
        else:
            merged.append(b)
            b = next(right, _END)
    if a is not _END:
        merged.append(a)
        merged.extend(left)
    if b is not _END:
        merged.append(b)
        merged.extend(right)
    return merged