"""Number and counting drills: fast powers, grid paths, voting and 2-D search."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from functools import lru_cache

MOD = 1_000_000_007


def power_mod(base: int, exponent: int) -> int:
    """Return base ** exponent modulo ``MOD`` by repeated squaring.

    A negative exponent yields the integer quotient 1 // power_mod(base, -exponent).
    """
    if exponent == 0:
        return 1
    if exponent < 0:
        positive = power_mod(base, -exponent)
        if positive == 0:
            raise ZeroDivisionError("base is a multiple of the modulus")
        return 1 // positive
    result = 1
    base %= MOD
    while exponent:
        if exponent & 1:
            result = result * base % MOD
        base = base * base % MOD
        exponent >>= 1
    return result


def unique_paths(rows: int, cols: int) -> int:
    """Count right/down paths across a rows x cols grid (tabulated)."""
    if rows < 1 or cols < 1:
        raise ValueError("the grid needs at least one row and one column")
    line = [1] * cols
    for _ in range(1, rows):
        for c in range(1, cols):
            line[c] += line[c - 1]
    return line[-1]


def unique_paths_memo(rows: int, cols: int) -> int:
    """Count right/down paths across a rows x cols grid (memoised recursion).

    A grid with no rows or no columns has no paths.
    """

    @lru_cache(maxsize=None)
    def count(row: int, col: int) -> int:
        if row == rows and col == cols:
            return 1
        if col > cols or row > rows:
            return 0
        return count(row, col + 1) + count(row + 1, col)

    return count(1, 1)


def majority_element(nums: Iterable[int]) -> int:
    """Return the element occurring more than n/2 times (Moore voting)."""
    candidate: int | None = None
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif candidate == value:
            count += 1
        else:
            count -= 1
    if candidate is None:
        raise ValueError("majority_element() needs a non-empty sequence")
    return candidate


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the elements occurring more than n/3 times (Boyer-Moore)."""
    first: int | None = None
    second: int | None = None
    first_count = second_count = 0
    for value in nums:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1

    first_count = sum(1 for value in nums if value == first)
    second_count = sum(1 for value in nums if value == second and value != first)
    threshold = len(nums) // 3
    results = []
    if first is not None and first_count > threshold:
        results.append(first)
    if second is not None and second_count > threshold:
        results.append(second)
    return results


def _sort_and_count_pairs(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return list(values), 0
    middle = (len(values) + 1) // 2
    left, left_count = _sort_and_count_pairs(values[:middle])
    right, right_count = _sort_and_count_pairs(values[middle:])
    count = left_count + right_count
    j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        count += j
    return list(heapq.merge(left, right)), count


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs i < j with nums[i] > 2 * nums[j]."""
    return _sort_and_count_pairs(list(nums))[1]


def staircase_search(matrix: Sequence[Sequence[int]], key: int) -> tuple[int, int] | None:
    """Find ``key`` in a row- and column-sorted matrix, starting top right.

    Returns the (row, column) of a match, or None.
    """
    if not matrix:
        return None
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == key:
            return row, col
        if key < value:
            col -= 1
        else:
            row += 1
    return None


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Binary search a matrix whose rows, read in order, are one sorted run."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    start, end = 0, len(matrix) * cols - 1
    while start <= end:
        mid = (start + end) // 2
        r, c = divmod(mid, cols)
        value = matrix[r][c]
        if value == target:
            return True
        if target < value:
            end = mid - 1
        else:
            start = mid + 1
    return False