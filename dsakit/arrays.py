"""Counting, searching and duplicate detection over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations

_MAX_SUBSEQUENCE_VALUE = 100_000


def count_pairs_with_sum(values: Sequence[int], target: int) -> int:
    """Count index pairs ``i < j`` whose values add up to ``target``."""
    return sum(1 for a, b in combinations(values, 2) if a + b == target)


def common_elements(
    first: Sequence[int], second: Sequence[int], third: Sequence[int]
) -> list[int]:
    """Return the elements common to three ascending sequences.

    The sequences are walked together; every position where all three
    agree yields one element, so repeated common values repeat.
    """
    i = j = k = 0
    found: list[int] = []
    while i < len(first) and j < len(second) and k < len(third):
        a, b, c = first[i], second[j], third[k]
        if a == b == c:
            found.append(a)
            i += 1
            j += 1
            k += 1
        elif a < b:
            i += 1
        elif b < c:
            j += 1
        else:
            k += 1
    return found


def has_triplet_sum(values: Sequence[int], target: int) -> bool:
    """Tell whether three distinct positions hold values summing to ``target``."""
    ordered = sorted(values)
    n = len(ordered)
    for i, anchor in enumerate(ordered[: max(n - 2, 0)]):
        left, right = i + 1, n - 1
        while left < right:
            total = anchor + ordered[left] + ordered[right]
            if total == target:
                return True
            if total > target:
                right -= 1
            else:
                left += 1
    return False


def _truncated_half(k: int) -> int:
    return -((-k) // 2) if k < 0 else k // 2


def get_pairs_count(values: Sequence[int], k: int) -> int:
    """Count pairs summing to ``k`` using value frequencies.

    Distinct values up to half of ``k`` (halved toward zero) are paired
    with their complements.
    """
    counts = Counter(values)
    half = _truncated_half(k)
    total = 0
    for value, count in counts.items():
        if value > half:
            continue
        complement = k - value
        if complement not in counts:
            continue
        if complement == value:
            total += count * (count - 1) // 2
        else:
            total += count * counts[complement]
    return total


def find_duplicate(values: Sequence[int]) -> int:
    """Return the smallest value that occurs more than once.

    Raises ValueError when no value repeats.
    """
    ordered = sorted(values)
    for previous, current in zip(ordered, ordered[1:]):
        if previous == current:
            return current
    raise ValueError("sequence has no duplicate value")


def majority_element(values: Sequence[int]) -> int | None:
    """Return the value occurring more than ``len(values) // 2`` times, or None."""
    threshold = len(values) // 2
    counts = Counter(values)
    for value in values:
        if counts[value] > threshold:
            return value
    return None


def duplicates(values: Sequence[int]) -> list[int]:
    """Report repeated values by sign-marking, for values in ``range(len(values))``.

    Each later occurrence of an already marked value is reported once more.
    A slot holding zero cannot be marked, so repeats landing on such a
    slot are not seen. Raises ValueError for values outside the range.
    """
    marks = list(values)
    size = len(marks)
    found: list[int] = []
    for value in values:
        slot = abs(value)
        if slot >= size:
            raise ValueError(f"value {value} lies outside 0..{size - 1}")
        if marks[slot] >= 0:
            marks[slot] = -marks[slot]
        else:
            found.append(slot)
    return found


def longest_consecutive_run(values: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers present, from 0 upward.

    Only values in ``0..max(values)`` take part; negatives are ignored.
    """
    present = set(values)
    upper = max(values, default=-1)
    best = run = 0
    for number in range(max(upper, -1) + 1):
        run = run + 1 if number in present else 0
        best = max(best, run)
    return best


def longest_consecutive_subsequence(values: Sequence[int]) -> int:
    """Length of the longest set of consecutive integers among ``values``.

    Values must lie in ``0..100000``; others raise ValueError.
    """
    present: set[int] = set()
    for value in values:
        if not 0 <= value <= _MAX_SUBSEQUENCE_VALUE:
            raise ValueError(f"value {value} lies outside 0..{_MAX_SUBSEQUENCE_VALUE}")
        present.add(value)
    upper = max(present, default=0)
    best = run = 0
    for number in range(upper + 1):
        run = run + 1 if number in present else 0
        best = max(best, run)
    return best