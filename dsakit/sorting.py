"""Comparison sorts: bubble, insertion, quick, selection and merge sort.

Every function takes any iterable and returns a new sorted list, leaving the
input untouched.
"""

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping adjacent pairs, stopping early after a pass with no swaps."""
    items = list(values)
    for done in range(len(items)):
        swapped = False
        for j in range(len(items) - done - 1):
            if items[j + 1] < items[j]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value after the larger ones already placed shift right."""
    items: list[Any] = []
    for value in values:
        pos = len(items)
        while pos > 0 and items[pos - 1] > value:
            pos -= 1
        items.insert(pos, value)
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining value to the front of the unsorted part."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = i
        for j in range(i + 1, len(items)):
            if items[j] < items[smallest]:
                smallest = j
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves and merging them back; equal items keep their order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))