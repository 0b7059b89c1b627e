"""Palindrome check and longest repeating subsequence."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways."""
    return text == text[::-1]


def longest_repeating_subsequence(text: str) -> int:
    """Length of the longest subsequence occurring twice at distinct positions."""
    n = len(text)
    previous = [0] * (n + 1)
    for i in range(1, n + 1):
        current = [0] * (n + 1)
        for j in range(1, n + 1):
            if text[i - 1] == text[j - 1] and i != j:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current
    return previous[n]