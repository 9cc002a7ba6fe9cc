"""Array-backed max-heaps and the priority-queue problems built on them."""

import heapq
from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


def _sift_up(heap: MutableSequence[Any], index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if heap[index] <= heap[parent]:
            return
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent


def heap_insert(heap: list[Any], value: Any) -> None:
    """Add ``value`` to the max-heap ``heap``, keeping the heap order."""
    heap.append(value)
    _sift_up(heap, len(heap) - 1)


def heap_delete_root(heap: list[Any]) -> Any:
    """Remove and return the largest item of the max-heap ``heap``."""
    if not heap:
        raise IndexError("delete from an empty heap")
    root = heap[0]
    last = heap.pop()
    if heap:
        heap[0] = last
        sift_down(heap, len(heap), 0)
    return root


def sift_down(values: MutableSequence[Any], size: int, index: int) -> None:
    """Move ``values[index]`` down until the first ``size`` items below it form a max-heap."""
    if not 0 <= size <= len(values):
        raise ValueError(f"heap size must be between 0 and {len(values)}, got {size}")
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a max-heap."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        sift_down(values, size, index)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted with a max-heap."""
    items = list(values)
    build_max_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(items, end, 0)
    return items


def descending(values: Iterable[Any]) -> Iterator[Any]:
    """Yield the items from largest to smallest, as a max priority queue pops them."""
    heap = list(values)
    build_max_heap(heap)
    while heap:
        yield heap_delete_root(heap)


def _check_rank(k: int, size: int) -> None:
    if not 1 <= k <= size:
        raise ValueError(f"k must be between 1 and {size}, got {k}")


def kth_largest(values: Iterable[Any], k: int) -> Any:
    """Return the k-th largest item, keeping a min-heap of the k largest seen."""
    items = list(values)
    _check_rank(k, len(items))
    window = items[:k]
    heapq.heapify(window)
    for value in items[k:]:
        if value > window[0]:
            heapq.heapreplace(window, value)
    return window[0]


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest item, keeping a max-heap of the k smallest seen."""
    items = list(values)
    _check_rank(k, len(items))
    window = items[:k]
    build_max_heap(window)
    for value in items[k:]:
        if value < window[0]:
            window[0] = value
            sift_down(window, k, 0)
    return window[0]


def min_rope_cost(lengths: Iterable[int]) -> int:
    """Return the least total cost of joining ropes, where a join costs the summed length."""
    heap = list(lengths)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        total += joined
        heapq.heappush(heap, joined)
    return total