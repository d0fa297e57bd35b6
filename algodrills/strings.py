"""String drills: Roman numerals, palindromes and word order."""

from __future__ import annotations

_NUMERALS = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def int_to_roman(num: int) -> str:
    """Write a non-negative integer in Roman numerals; zero gives ""."""
    if num < 0:
        raise ValueError("Roman numerals cannot express negative numbers")
    parts = []
    for symbol, value in _NUMERALS:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(text: str) -> int:
    """Read a Roman numeral; characters that are not numerals count as zero."""
    values = [_VALUES.get(char, 0) for char in text]
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def _expand(text: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(text) and text[left] == text[right]:
        left -= 1
        right += 1
    return left + 1, right - left - 1


def longest_palindrome(text: str) -> str:
    """Return the first longest palindromic substring of ``text``."""
    start, best = 0, 1
    for i in range(1, len(text)):
        for left, right in ((i - 1, i), (i - 1, i + 1)):
            begin, length = _expand(text, left, right)
            if length > best:
                start, best = begin, length
    return text[start : start + best]


def reverse_words(text: str) -> str:
    """Reverse the order of space-separated words, collapsing extra spaces."""
    return " ".join(reversed([word for word in text.split(" ") if word]))