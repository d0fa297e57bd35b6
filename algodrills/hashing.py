"""Hashing drills: k-sums, runs, windows and prefix tricks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Every distinct sorted quadruple of values summing to ``target``."""
    ordered = sorted(nums)
    size = len(ordered)
    result: list[list[int]] = []
    for i in range(size - 3):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            left, right = j + 1, size - 1
            while left < right:
                total = ordered[i] + ordered[j] + ordered[left] + ordered[right]
                if total == target:
                    result.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    left += 1
                    while left < right and ordered[left] == ordered[left - 1]:
                        left += 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among the values."""
    present = set(nums)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value + 1
        while end in present:
            end += 1
        best = max(best, end - value)
    return best


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices (i, j), i < j, of two values summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen.setdefault(value, index)
    return None


def length_of_longest_substring(text: str) -> int:
    """Length of the longest substring without a repeated character."""
    best = 0
    left = 0
    last_seen: dict[str, int] = {}
    for right, char in enumerate(text):
        if last_seen.get(char, -1) >= left:
            left = last_seen[char] + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best


def max_zero_sum_length(values: Iterable[int]) -> int:
    """Length of the longest contiguous run summing to zero."""
    first_seen: dict[int, int] = {}
    best = 0
    total = 0
    for index, value in enumerate(values):
        total += value
        if total == 0:
            best = index + 1
            continue
        if total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def count_xor_subarrays(values: Iterable[int], target: int) -> int:
    """Number of contiguous runs whose XOR equals ``target``."""
    prefixes: Counter[int] = Counter({0: 1})
    count = 0
    prefix = 0
    for value in values:
        prefix ^= value
        count += prefixes[prefix ^ target]
        prefixes[prefix] += 1
    return count