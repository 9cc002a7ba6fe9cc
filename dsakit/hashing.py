"""Set- and map-based array problems: distinct counts, unions, windows, subarray sums."""

from collections import Counter
from collections.abc import Hashable, Iterable


def count_distinct(values: Iterable[Hashable]) -> int:
    """Return the number of different values."""
    return len(set(values))


def union_size(first: Iterable[Hashable], second: Iterable[Hashable]) -> int:
    """Return the number of different values found in either iterable."""
    return len(set(first).union(second))


def intersection_size(first: Iterable[Hashable], second: Iterable[Hashable]) -> int:
    """Return the number of different values found in both iterables."""
    return len(set(first).intersection(second))


def subarray_with_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return inclusive ``(start, end)`` indexes of a run summing to ``target``, or None.

    Prefix sums are remembered with the latest index at which they occurred; the
    first run found while scanning left to right is returned.
    """
    seen: dict[int, int] = {}
    running = 0
    for index, value in enumerate(values):
        running += value
        if running == target:
            return 0, index
        start = seen.get(running - target)
        if start is not None:
            return start + 1, index
        seen[running] = index
    return None


def distinct_in_windows(values: Iterable[Hashable], k: int) -> list[int]:
    """Return the count of different values in every window of ``k`` consecutive items."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"window size must be between 1 and {len(items)}, got {k}")
    counts = Counter(items[:k])
    result = [len(counts)]
    for leaving, entering in zip(items, items[k:]):
        counts[leaving] -= 1
        if counts[leaving] == 0:
            del counts[leaving]
        counts[entering] += 1
        result.append(len(counts))
    return result