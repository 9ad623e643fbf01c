"""Running median of a stream of numbers using two heaps."""

from __future__ import annotations

import heapq


class MedianFinder:
    """Keeps the lower half in a max-heap and the upper half in a min-heap."""

    def __init__(self) -> None:
        self._low: list[int] = []  # negated values, max-heap
        self._high: list[int] = []

    def add_num(self, num: int) -> None:
        """Add a number to the stream."""
        low, high = self._low, self._high
        if not low:
            heapq.heappush(low, -num)
        elif len(low) == len(high):
            if num < high[0]:
                heapq.heappush(low, -num)
            else:
                top = heapq.heapreplace(high, num)
                heapq.heappush(low, -top)
        elif not high:
            if num > -low[0]:
                heapq.heappush(high, num)
            else:
                top = -heapq.heapreplace(low, -num)
                heapq.heappush(high, top)
        elif num >= high[0]:
            heapq.heappush(high, num)
        elif num < -low[0]:
            top = -heapq.heapreplace(low, -num)
            heapq.heappush(high, top)
        else:
            heapq.heappush(high, num)

    def find_median(self) -> float:
        """Return the median of the numbers added so far."""
        if not self._low:
            raise IndexError("no numbers have been added")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return (-self._low[0] + self._high[0]) / 2