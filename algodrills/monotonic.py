"""Stack and queue drills: LRU cache, min stack, histograms, rotting and window maxima."""

from __future__ import annotations

from collections import OrderedDict, deque
from collections.abc import Sequence

_NEIGHBOURS = ((0, -1), (0, 1), (-1, 0), (1, 0))


class LRUCache:
    """A fixed-size key/value cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: int) -> int:
        """The value stored under ``key``, or -1; a hit marks the key as recent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest key when full."""
        if key in self._entries:
            del self._entries[key]
        elif len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        low = min(value, self._items[-1][1]) if self._items else value
        self._items.append((value, low))

    def pop(self) -> None:
        """Drop the top element; popping an empty stack does nothing."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram."""
    size = len(heights)
    previous = [-1] * size
    following = [size] * size
    stack: list[int] = []
    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        previous[i] = stack[-1] if stack else -1
        stack.append(i)
    stack.clear()
    for i in range(size - 1, -1, -1):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        following[i] = stack[-1] if stack else size
        stack.append(i)
    return max(
        (h * (following[i] - previous[i] - 1) for i, h in enumerate(heights)),
        default=0,
    )


def prev_smaller(values: Sequence[int]) -> list[int]:
    """For each value, the nearest strictly smaller value to its left, or -1."""
    stack: list[int] = []
    results: list[int] = []
    for value in values:
        while stack and value <= stack[-1]:
            stack.pop()
        results.append(stack[-1] if stack else -1)
        stack.append(value)
    return results


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh (1) orange is left beside a rotten (2) one.

    Returns -1 if some fresh orange can never rot. The grid is not changed.
    """
    cells = [list(row) for row in grid]
    queue: deque[tuple[int, int]] = deque()
    fresh = 0
    for r, row in enumerate(cells):
        for c, value in enumerate(row):
            if value == 2:
                queue.append((r, c))
            elif value:
                fresh += 1
    if fresh == 0:
        return 0
    minutes = 0
    while queue:
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for dr, dc in _NEIGHBOURS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < len(cells) and 0 <= nc < len(cells[nr]) and cells[nr][nc] == 1:
                    cells[nr][nc] = 2
                    fresh -= 1
                    queue.append((nr, nc))
        minutes += 1
    return -1 if fresh > 0 else minutes - 1


def max_of_subarrays(values: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError("k must lie between 1 and the number of values")
    window: deque[int] = deque()
    results: list[int] = []
    for i, value in enumerate(values):
        while window and window[0] <= i - k:
            window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            results.append(values[window[0]])
    return results