"""Recursive enumeration and counting problems."""

from __future__ import annotations

from itertools import product
from math import comb
from typing import Iterable, Sequence

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


def balanced_brackets(open_count: int, close_count: int) -> list[str]:
    """Return every valid completion using the given numbers of brackets.

    A closing bracket is only placed when more closers than openers remain.
    """
    if open_count < 0 or close_count < 0:
        raise ValueError("bracket counts must be non-negative")
    results: list[str] = []
    prefix: list[str] = []

    def generate(opens: int, closes: int) -> None:
        if opens == 0 and closes == 0:
            results.append("".join(prefix))
            return
        if opens > 0:
            prefix.append("(")
            generate(opens - 1, closes)
            prefix.pop()
        if closes > 0 and opens < closes:
            prefix.append(")")
            generate(opens, closes - 1)
            prefix.pop()

    generate(open_count, close_count)
    return results


def combination_sum(values: Iterable[int], target: int) -> list[list[int]]:
    """Return all multisets of the distinct ``values`` that sum to ``target``.

    Each combination is in ascending order; combinations using smaller
    values come first.
    """
    candidates = sorted(set(values))
    if any(value <= 0 for value in candidates):
        raise ValueError("values must be positive")
    results: list[list[int]] = []
    chosen: list[int] = []

    def generate(index: int, remaining: int) -> None:
        if index == len(candidates):
            if remaining == 0:
                results.append(list(chosen))
            return
        value = candidates[index]
        if value <= remaining:
            chosen.append(value)
            generate(index, remaining - value)
            chosen.pop()
        generate(index + 1, remaining)

    generate(0, target)
    return results


def power_set(values: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``values``, each element first left out then taken."""
    results: list[list[int]] = []
    subset: list[int] = []

    def helper(index: int) -> None:
        if index == len(values):
            results.append(list(subset))
            return
        helper(index + 1)
        subset.append(values[index])
        helper(index + 1)
        subset.pop()

    helper(0)
    return results


def kth_grammar(n: int, k: int) -> int:
    """Return the k-th symbol (1-based) of row n of the 0 -> 01, 1 -> 10 grammar."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= 2 ** (n - 1):
        raise ValueError(f"k must be between 1 and {2 ** (n - 1)}")
    if n == 1:
        return 0
    mid = 2 ** (n - 2)
    if k > mid:
        return 1 - kth_grammar(n - 1, k - mid)
    return kth_grammar(n - 1, k)


def grid_paths(n: int, m: int) -> int:
    """Count right/down paths across an ``n`` by ``m`` grid of cells."""
    if n < 1 or m < 1:
        raise ValueError("grid dimensions must be at least 1")
    return comb(n + m - 2, n - 1)


def letter_combinations(digits: str) -> list[str]:
    """Return the letter strings a phone keypad can spell for ``digits``."""
    if not digits:
        return []
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError("digits must contain only 0-9")
    return ["".join(letters) for letters in product(*(_KEYPAD[int(ch)] for ch in digits))]


def josephus(n: int, k: int) -> int:
    """Return the 0-based position that survives when every k-th of n is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    position = 0
    for size in range(2, n + 1):
        position = (position + k) % size
    return position