"""Bit manipulation drills: set-bit counts, division, powers and subsequences."""

from __future__ import annotations

from itertools import compress

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def count_total_set_bits(n: int) -> int:
    """Total number of set bits across all integers from 1 to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    while n > 0:
        x = n.bit_length() - 1
        group = 1 << x
        total += (x << x) >> 1
        total += n - group + 1
        n -= group
    return total


def count_bits(n: int) -> list[int]:
    """Number of set bits of every integer from 0 to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [0] * (n + 1)
    for i in range(1, n + 1):
        counts[i] = counts[i >> 1] + (i & 1)
    return counts


def divide(dividend: int, divisor: int) -> int:
    """Integer division truncated toward zero, clamped to the 32-bit range."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == _INT_MIN and divisor == -1:
        return _INT_MAX
    remaining, step = abs(dividend), abs(divisor)
    negative = (dividend > 0) != (divisor > 0)
    result = 0
    while remaining >= step:
        chunk, multiple = step, 1
        while chunk << 1 <= remaining:
            chunk <<= 1
            multiple <<= 1
        remaining -= chunk
        result += multiple
    return -result if negative else result


def is_power_of_two(n: int) -> bool:
    """True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def all_possible_strings(text: str) -> list[str]:
    """Every non-empty subsequence of ``text``, in lexicographic order."""
    size = len(text)
    results = [
        "".join(compress(text, ((mask >> i) & 1 for i in range(size))))
        for mask in range(1, 1 << size)
    ]
    return sorted(results)


def square(n: int) -> int:
    """``n`` squared, computed with shifts and additions only."""
    n = abs(n)
    if n == 0:
        return 0
    half = n >> 1
    if n & 1:
        return (square(half) << 2) + (half << 2) + 1
    return square(half) << 2