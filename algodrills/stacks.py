"""Stack drills: bracket matching and next-greater-element scans."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_CLOSING = {"(": ")", "{": "}", "[": "]"}


def is_valid_parentheses(text: str) -> bool:
    """True if every bracket in ``text`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer.
    """
    expected: list[str] = []
    for char in text:
        if char in _CLOSING:
            expected.append(_CLOSING[char])
        elif not expected or expected.pop() != char:
            return False
    return not expected


def next_greater_element(nums1: Iterable[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the next greater value to its right in ``nums2``.

    -1 means there is none; values absent from ``nums2`` map to 0.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and value >= stack[-1]:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    return [greater.get(value, 0) for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Next greater value for each element of a circular list, or -1."""
    size = len(nums)
    result = [-1] * size
    stack: list[int] = []
    for position in range(2 * size - 1, -1, -1):
        value = nums[position % size]
        while stack and stack[-1] <= value:
            stack.pop()
        result[position % size] = stack[-1] if stack else -1
        stack.append(value)
    return result