"""Running median of a stream of numbers kept in two heaps."""

import heapq


class MedianFinder:
    """Collects numbers one at a time and reports the median of those seen."""

    def __init__(self) -> None:
        self._low: list[float] = []  # lower half, negated so heapq acts as a max-heap
        self._high: list[float] = []  # upper half, a min-heap

    def add(self, num: float) -> None:
        """Add ``num`` to the stream."""
        if not self._low or -self._low[0] >= num:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)
        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._low) < len(self._high):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def median(self) -> float:
        """Return the median of the numbers added so far."""
        if not self._low:
            raise ValueError("median of an empty stream")
        if len(self._low) == len(self._high):
            return (-self._low[0] + self._high[0]) / 2
        return float(-self._low[0])

    def __len__(self) -> int:
        return len(self._low) + len(self._high)