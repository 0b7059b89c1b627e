"""Elementary comparison sorts that report how many passes they made."""

from __future__ import annotations

from collections.abc import Sequence


def bubble_sort_adaptive(values: Sequence[int]) -> tuple[list[int], int]:
    """Bubble sort that stops after the first pass with no swaps.

    Returns the sorted copy and the number of passes made.
    """
    result = list(values)
    n = len(result)
    passes = 0
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        passes += 1
        if not swapped:
            break
    return result, passes


def bubble_sort(values: Sequence[int]) -> tuple[list[int], int]:
    """Plain bubble sort that always makes ``len(values) - 1`` passes.

    Returns the sorted copy and the number of passes made.
    """
    result = list(values)
    n = len(result)
    passes = 0
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
        passes += 1
    return result, passes


def selection_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy, placing the smallest remaining value at each slot."""
    result = list(values)
    n = len(result)
    for slot in range(n):
        smallest = min(range(slot, n), key=result.__getitem__)
        result[slot], result[smallest] = result[smallest], result[slot]
    return result