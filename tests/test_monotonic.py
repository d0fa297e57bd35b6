import pytest

from algodrills.monotonic import (
    LRUCache,
    MinStack,
    largest_rectangle_area,
    max_of_subarrays,
    oranges_rotting,
    prev_smaller,
)


def test_lru_cache_eviction_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lru_update_existing_key_keeps_others():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    assert len(cache) == 2
    assert cache.get(1) == 11
    assert cache.get(2) == 20


def test_lru_rejects_zero_capacity():
    with pytest.raises(ValueError):
        LRUCache(0)


def test_min_stack_operations():
    stack = MinStack()
    stack.push(-2)
    stack.push(0)
    stack.push(-3)
    assert stack.get_min() == -3
    stack.pop()
    assert stack.top() == 0
    assert stack.get_min() == -2


def test_min_stack_empty():
    stack = MinStack()
    stack.pop()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.get_min()


def test_largest_rectangle_worked_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


@pytest.mark.parametrize("heights", [[3], [2, 4], [5, 5, 5, 5], [1, 3, 2, 5, 4]])
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def test_largest_rectangle_uniform():
    assert largest_rectangle_area([5, 5, 5, 5]) == 5 * 4
    assert largest_rectangle_area([]) == 0


def test_prev_smaller():
    assert prev_smaller([4, 5, 2, 10, 8]) == [-1, 4, -1, 2, 2]


def test_prev_smaller_invariant():
    values = [3, 7, 1, 8, 8, 2, 6]
    result = prev_smaller(values)
    assert len(result) == len(values)
    for value, smaller in zip(values, result):
        assert smaller == -1 or smaller < value


def test_oranges_all_rot():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    snapshot = [list(row) for row in grid]
    assert oranges_rotting(grid) == 4
    assert grid == snapshot


def test_oranges_unreachable():
    assert oranges_rotting([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) == -1
    assert oranges_rotting([[1]]) == -1


def test_oranges_no_fresh():
    assert oranges_rotting([[0, 2]]) == 0


def test_sliding_window_max():
    assert max_of_subarrays([1, 2, 3, 1, 4, 5, 2, 3, 6], 3) == [3, 3, 4, 5, 5, 5, 6]


def test_sliding_window_edges():
    values = [4, 9, 1, 7, 3]
    assert max_of_subarrays(values, 1) == values
    assert max_of_subarrays(values, len(values)) == [max(values)]
    assert len(max_of_subarrays(values, 2)) == len(values) - 1


@pytest.mark.parametrize("k", [0, 6])
def test_sliding_window_bad_k(k):
    with pytest.raises(ValueError):
        max_of_subarrays([1, 2, 3, 4, 5], k)