"""Classic dynamic-programming problems."""

from __future__ import annotations

from typing import Sequence


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    best: list[int] = []
    for value in values:
        best.append(
            1 + max((length for length, prev in zip(best, values) if prev < value), default=0)
        )
    return max(best, default=0)


def frog_jump_cost(heights: Sequence[int], k: int) -> int:
    """Minimum total cost to go from the first stone to the last.

    A jump may cover 1 to ``k`` stones and costs the absolute height difference.
    """
    if not heights:
        raise ValueError("heights must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")
    costs = [0]
    for i in range(1, len(heights)):
        costs.append(
            min(
                costs[i - jump] + abs(heights[i] - heights[i - jump])
                for jump in range(1, min(k, i) + 1)
            )
        )
    return costs[-1]


def knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Return the best total value of a 0/1 knapsack of the given capacity."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def longest_common_subsequence(first: str, second: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def cut_rod(prices: Sequence[int]) -> int:
    """Best revenue from a rod of length len(prices); prices[i] is for length i+1."""
    best = [0]
    for length in range(1, len(prices) + 1):
        best.append(
            max(0, max(best[length - cut] + prices[cut - 1] for cut in range(1, length + 1)))
        )
    return best[-1]