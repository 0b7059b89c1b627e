"""Counting and testing bits of integers."""

from __future__ import annotations


def _half(n: int) -> int:
    """Halve ``n``, rounding toward zero."""
    return -(-n // 2) if n < 0 else n // 2


def bits_to_flip(a: int, b: int) -> int:
    """Number of bit positions in which ``a`` and ``b`` differ.

    Positions are compared while either value is still positive; a negative
    operand contributes the sign-carrying remainders of halving toward zero.
    """
    if a >= 0 and b >= 0:
        return (a ^ b).bit_count() if hasattr(int, "bit_count") else bin(a ^ b).count("1")
    count = 0
    while a > 0 or b > 0:
        low_a = a - 2 * _half(a)
        low_b = b - 2 * _half(b)
        if (low_a == 1 and low_b == 0) or (low_b == 1 and low_a == 0):
            count += 1
        a, b = _half(a), _half(b)
    return count


def count_set_bits(n: int) -> int:
    """Number of one bits in ``n``; zero for ``n <= 0``."""
    return bin(n).count("1") if n > 0 else 0


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0