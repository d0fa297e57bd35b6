"""Recursion drills: combination sums, permutations, partitions and subsets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import factorial


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """All combinations of candidates, each usable any number of times, summing to target."""
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    path: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if index == len(candidates):
            if remaining == 0:
                results.append(list(path))
            return
        value = candidates[index]
        if value <= remaining:
            path.append(value)
            explore(index, remaining - value)
            path.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return results


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Distinct combinations, each candidate used at most once, summing to target."""
    ordered = sorted(candidates)
    if any(value <= 0 for value in ordered):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    path: list[int] = []

    def explore(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(path))
            return
        for i in range(start, len(ordered)):
            if i > start and ordered[i] == ordered[i - 1]:
                continue
            if ordered[i] > remaining:
                break
            path.append(ordered[i])
            explore(i + 1, remaining - ordered[i])
            path.pop()

    explore(0, target)
    return results


def get_permutation(n: int, k: int) -> str:
    """The k-th (1-based) lexicographic permutation of the digits 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    total = factorial(n)
    if not 1 <= k <= total:
        raise ValueError(f"k must lie between 1 and {total}")
    numbers = list(range(1, n + 1))
    rank = k - 1
    block = total
    digits = []
    while numbers:
        block //= len(numbers)
        index, rank = divmod(rank, block)
        digits.append(str(numbers.pop(index)))
    return "".join(digits)


def palindrome_partition(text: str) -> list[list[str]]:
    """Every way to cut ``text`` into palindromic pieces."""
    results: list[list[str]] = []
    path: list[str] = []

    def explore(start: int) -> None:
        if start == len(text):
            results.append(list(path))
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if piece == piece[::-1]:
                path.append(piece)
                explore(end)
                path.pop()

    explore(0)
    return results


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """All distinct subsets of a multiset, each in ascending order."""
    ordered = sorted(nums)
    results: list[list[int]] = []
    path: list[int] = []

    def explore(start: int) -> None:
        results.append(list(path))
        for i in range(start, len(ordered)):
            if i > start and ordered[i] == ordered[i - 1]:
                continue
            path.append(ordered[i])
            explore(i + 1)
            path.pop()

    explore(0)
    return results


def subset_sums(values: Iterable[int]) -> list[int]:
    """Sums of all 2**n subsets, in ascending order."""
    sums = [0]
    for value in values:
        sums = [total + value for total in sums] + sums
    return sorted(sums)