"""Two-pointer drills: triple sums, runs, deduplication and trapped water."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triple of values that sums to zero."""
    ordered = sorted(nums)
    size = len(ordered)
    result: list[list[int]] = []
    for i in range(size - 2):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        left, right = i + 1, size - 1
        while left < right:
            total = ordered[i] + ordered[left] + ordered[right]
            if total == 0:
                result.append([ordered[i], ordered[left], ordered[right]])
                left += 1
                while left < right and ordered[left] == ordered[left - 1]:
                    left += 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of 1s."""
    best = count = 0
    for value in nums:
        count = count + 1 if value == 1 else 0
        best = max(best, count)
    return best


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of a sorted list to its front; return their count.

    Values past the returned count are left over and carry no meaning.
    """
    if len(nums) <= 1:
        return len(nums)
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def trapping_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    total = 0
    while left <= right:
        if heights[left] < heights[right]:
            if heights[left] > max_left:
                max_left = heights[left]
            else:
                total += max_left - heights[left]
            left += 1
        else:
            if heights[right] > max_right:
                max_right = heights[right]
            else:
                total += max_right - heights[right]
            right -= 1
    return total