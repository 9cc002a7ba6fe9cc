"""Binary-search variants over sorted, rotated, mountain and nearly sorted lists."""

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any


def _require_items(values: Sequence[Any]) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the sorted ``values``, or None when absent."""
    pos = bisect_left(values, key)
    if pos < len(values) and values[pos] == key:
        return pos
    return None


def search_rotated(values: Sequence[Any], key: Any) -> int | None:
    """Return the index of ``key`` in a rotated sorted list of distinct items, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= key < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < key <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def closest_element(values: Sequence[Any], key: Any) -> Any:
    """Return the item of sorted ``values`` nearest to ``key``; ties go to the smaller."""
    _require_items(values)
    pos = bisect_left(values, key)
    if pos < len(values) and values[pos] == key:
        return values[pos]
    if pos == len(values):
        return values[-1]
    if pos == 0:
        return values[0]
    below, above = values[pos - 1], values[pos]
    return above if abs(below - key) > abs(above - key) else below


def first_occurrence(values: Sequence[Any], key: Any) -> int | None:
    """Return the lowest index holding ``key`` in sorted ``values``, or None."""
    pos = bisect_left(values, key)
    if pos < len(values) and values[pos] == key:
        return pos
    return None


def last_occurrence(values: Sequence[Any], key: Any) -> int | None:
    """Return the highest index holding ``key`` in sorted ``values``, or None."""
    pos = bisect_right(values, key) - 1
    if pos >= 0 and values[pos] == key:
        return pos
    return None


def rotation_count(values: Sequence[Any]) -> int:
    """Return how many places a sorted list of distinct items was rotated right.

    This is the index of the smallest item.
    """
    _require_items(values)
    n = len(values)
    low, high = 0, n - 1
    while low <= high:
        if values[low] <= values[high]:
            return low
        mid = (low + high) // 2
        following = values[(mid + 1) % n]
        preceding = values[(mid - 1 + n) % n]
        if values[mid] <= following and values[mid] <= preceding:
            return mid
        if values[mid] <= values[high]:
            high = mid - 1
        else:
            low = mid + 1
    return 0


def mountain_peak(values: Sequence[Any]) -> int:
    """Return the index of the peak of a list that rises and then falls."""
    _require_items(values)
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def find_pivot(values: Sequence[Any]) -> int:
    """Return the index where a rotated sorted list drops back to its smallest item.

    For a list that is not rotated this is the last index.
    """
    _require_items(values)
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] >= values[0]:
            start = mid + 1
        else:
            end = mid
    return start


def _search_range(values: Sequence[Any], low: int, high: int, key: Any) -> int | None:
    pos = bisect_left(values, key, low, high + 1)
    if pos <= high and values[pos] == key:
        return pos
    return None


def search_rotated_with_pivot(values: Sequence[Any], key: Any) -> int | None:
    """Find ``key`` in a rotated sorted list by locating the pivot and searching one side."""
    if not values:
        return None
    pivot = find_pivot(values)
    last = len(values) - 1
    if values[pivot] <= key <= values[last]:
        return _search_range(values, pivot, last, key)
    return _search_range(values, 0, pivot - 1, key)


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    needed, load = 1, 0
    for count in pages:
        if load + count > limit:
            needed += 1
            load = count
        else:
            load += count
    return needed <= students


def min_max_pages(pages: Sequence[int], students: int) -> int:
    """Split consecutive books among students minimising the largest share of pages."""
    _require_items(pages)
    if students < 1:
        raise ValueError(f"there must be at least one student, got {students}")
    start, end = max(pages), sum(pages)
    while start <= end:
        mid = start + (end - start) // 2
        if _fits(pages, students, mid):
            end = mid - 1
        else:
            start = mid + 1
    return start


def search_nearly_sorted(values: Sequence[Any], key: Any) -> int | None:
    """Find ``key`` in a sorted list whose items may sit one place off, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if mid - 1 >= low and values[mid - 1] == key:
            return mid - 1
        if mid + 1 <= high and values[mid + 1] == key:
            return mid + 1
        if values[mid] < key:
            low = mid + 2
        else:
            high = mid - 2
    return None