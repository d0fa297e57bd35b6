"""Binary search drills: answer searches, medians and rotated or paired arrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import inf


def aggressive_cows(stalls: Iterable[int], cows: int) -> int:
    """Largest minimum distance achievable when placing ``cows`` in the stalls."""
    positions = sorted(stalls)
    if cows < 2:
        raise ValueError("at least two cows are needed")
    if cows > len(positions):
        raise ValueError("more cows than stalls")

    def fits(separation: int) -> bool:
        placed = 1
        last = positions[0]
        for position in positions[1:]:
            if position - last >= separation:
                placed += 1
                last = position
                if placed == cows:
                    return True
        return False

    start, end = 0, positions[-1] - positions[0]
    best = 0
    while start <= end:
        mid = (start + end) // 2
        if fits(mid):
            best = mid
            start = mid + 1
        else:
            end = mid - 1
    return best


def find_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages read when books are shared out in order."""
    if students < 1:
        raise ValueError("at least one student is needed")
    if students > len(pages):
        raise ValueError("more students than books")

    def fits(limit: int) -> bool:
        used = 1
        read = 0
        for count in pages:
            if read + count > limit:
                used += 1
                read = 0
                if used > students:
                    return False
            read += count
        return True

    start, end = max(pages), sum(pages)
    best = end
    while start <= end:
        mid = (start + end) // 2
        if fits(mid):
            best = mid
            end = mid - 1
        else:
            start = mid + 1
    return best


def find_median_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Median of two sorted sequences taken together, in logarithmic time."""
    if len(first) > len(second):
        first, second = second, first
    n1, n2 = len(first), len(second)
    if n1 + n2 == 0:
        raise ValueError("the median of nothing is undefined")
    half = (n1 + n2 + 1) // 2
    start, end = 0, n1
    while start <= end:
        mid1 = (start + end) // 2
        mid2 = half - mid1
        max1 = first[mid1 - 1] if mid1 > 0 else -inf
        max2 = second[mid2 - 1] if mid2 > 0 else -inf
        min1 = first[mid1] if mid1 < n1 else inf
        min2 = second[mid2] if mid2 < n2 else inf
        if max1 <= min2 and max2 <= min1:
            if (n1 + n2) % 2:
                return float(max(max1, max2))
            return (max(max1, max2) + min(min1, min2)) / 2
        if max1 > min2:
            end = mid1 - 1
        else:
            start = mid1 + 1
    raise ValueError("both sequences must be sorted")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[start]:
            if nums[start] <= target < nums[mid]:
                end = mid - 1
            else:
                start = mid + 1
        else:
            if nums[mid] < target <= nums[end]:
                start = mid + 1
            else:
                end = mid - 1
    return -1


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value appearing once in a sorted sequence where all others appear twice."""
    if not nums:
        raise ValueError("single_non_duplicate() needs a non-empty sequence")
    start, end = 0, len(nums) - 2
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] == nums[mid ^ 1]:
            start = mid + 1
        else:
            end = mid - 1
    return nums[start]