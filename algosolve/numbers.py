"""Integer puzzles: bitwise AND of a range, factorial zeros and happy numbers."""

from __future__ import annotations


def range_bitwise_and(left: int, right: int) -> int:
    """Return the bitwise AND of every integer from ``left`` to ``right`` inclusive.

    This is the common binary prefix of both ends, padded with zeros.
    """
    if left < 0 or right < 0:
        raise ValueError("bounds must not be negative")
    if left > right:
        raise ValueError("left must not exceed right")
    shift = 0
    while left != right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeros in the decimal form of ``n!``."""
    if n < 0:
        raise ValueError("factorial needs a non-negative number")
    zeros = 0
    while n >= 5:
        n //= 5
        zeros += n
    return zeros


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Return whether repeatedly summing the squares of the digits reaches 1."""
    if n < 0:
        raise ValueError("happy numbers are defined for non-negative integers")
    seen: set[int] = set()
    while n not in seen:
        total = _digit_square_sum(n)
        if total == 1:
            return True
        if total == 0:
            return False
        seen.add(n)
        n = total
    return False