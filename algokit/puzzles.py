"""Small counting puzzles."""

from __future__ import annotations

from collections import Counter
from typing import Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


def digit_word_sum(text: str) -> int:
    """Sum the digits whose English names are jumbled together in ``text``.

    Each digit is identified by a letter unique to it once the digits
    already identified are taken away.
    """
    letters = Counter(text)
    zero = letters["z"]
    two = letters["w"]
    four = letters["u"]
    five = letters["f"] - four
    six = letters["x"]
    seven = letters["s"] - six
    eight = letters["g"]
    nine = letters["i"] - five - six - eight
    one = letters["o"] - zero - two - four
    three = letters["r"] - zero - four
    counts = (zero, one, two, three, four, five, six, seven, eight, nine)
    return sum(digit * count for digit, count in enumerate(counts))


def most_occurred(values: Iterable[T]) -> list[T]:
    """Return the most frequent values, in order of first appearance."""
    counts = Counter(values)
    if not counts:
        return []
    highest = max(counts.values())
    return [value for value, count in counts.items() if count == highest]