"""Rearranging and scanning sequences, plus a few small conversions."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


def reverse_word(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def reverse_chars(chars: MutableSequence[T]) -> None:
    """Reverse a mutable sequence in place."""
    chars.reverse()


def move_negatives_left(values: Sequence[int]) -> list[int]:
    """Return a copy with all negative values moved to the front.

    Negatives keep their relative order; non-negatives may be reordered.
    """
    result = list(values)
    slot = 0
    for i, value in enumerate(values):
        if value < 0:
            if i != slot:
                result[i], result[slot] = result[slot], result[i]
            slot += 1
    return result


def sort_by_parity_alternating(values: Sequence[int]) -> list[int]:
    """Return a copy with even values at even indices and odd at odd indices.

    Raises ValueError when the values cannot be arranged that way.
    """
    result = list(values)
    n = len(result)
    even, odd = 0, 1
    while even < n:
        while even < n and result[even] % 2 == 0:
            even += 2
        while odd < n and result[odd] % 2 == 1:
            odd += 2
        if even < n:
            if odd >= n:
                raise ValueError("values hold unequal counts of even and odd numbers")
            result[even], result[odd] = result[odd], result[even]
        even += 2
        odd += 2
    return result


def insert_at(values: Sequence[T], index: int, item: T) -> list[T]:
    """Return a copy of ``values`` with ``item`` placed at ``index``.

    ``index`` must lie in ``0..len(values)``; otherwise IndexError is raised.
    """
    if not 0 <= index <= len(values):
        raise IndexError(f"index {index} outside 0..{len(values)}")
    result = list(values)
    result.insert(index, item)
    return result


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run, never below zero (Kadane)."""
    current = best = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def min_jumps(values: Sequence[int]) -> int | None:
    """Fewest jumps from the first to the last position, or None if unreachable.

    Each value is the longest jump allowed from its position.
    """
    n = len(values)
    if n <= 1:
        return 0
    if values[0] == 0:
        return None
    reach = steps = values[0]
    jumps = 1
    for i in range(1, n):
        if i == n - 1:
            return jumps
        reach = max(reach, i + values[i])
        steps -= 1
        if steps == 0:
            jumps += 1
            if i >= reach:
                return None
            steps = reach - i
    return None


def trapping_water(heights: Sequence[int]) -> int:
    """Units of water held between blocks of the given heights."""
    low, high = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while low <= high:
        if heights[low] < heights[high]:
            if heights[low] < left_max:
                water += left_max - heights[low]
            else:
                left_max = heights[low]
            low += 1
        else:
            if heights[high] >= right_max:
                right_max = heights[high]
            else:
                water += right_max - heights[high]
            high -= 1
    return water


def factorial_digits(n: int) -> list[int]:
    """Decimal digits of ``n!``, most significant first; ``[1]`` for ``n < 1``."""
    return [int(digit) for digit in str(math.factorial(max(n, 0)))]


def to_24_hour(text: str) -> str:
    """Convert ``hh:mm:ssAM``/``hh:mm:ssPM`` to 24-hour ``hh:mm:ss``.

    Anything other than ``A`` in the meridiem position is taken as PM.
    """
    if len(text) < 9 or not text[:2].isdigit():
        raise ValueError(f"not a 12-hour time: {text!r}")
    hour = int(text[:2])
    rest = text[2:8]
    if text[8] == "A":
        return "00" + rest if hour == 12 else text[:8]
    if hour == 12:
        return "12" + rest
    return f"{hour + 12}{rest}"