import math
import random
from collections import Counter

import pytest

from algodrills.maths import (
    MOD,
    majority_element,
    majority_elements,
    power_mod,
    reverse_pairs,
    search_matrix,
    staircase_search,
    unique_paths,
    unique_paths_memo,
)


def test_power_mod_small():
    assert power_mod(2, 10) == 1024


@pytest.mark.parametrize(
    "base, exponent",
    [(3, 200), (7, 12345), (MOD - 1, 99), (123456789, 987654321), (-2, 5), (5, 1)],
)
def test_power_mod_matches_builtin(base, exponent):
    assert power_mod(base, exponent) == pow(base, exponent, MOD)


def test_power_mod_zero_exponent():
    assert power_mod(MOD, 0) == 1


def test_power_mod_multiple_of_modulus():
    assert power_mod(MOD, 5) == 0


def test_power_mod_negative_exponent():
    assert power_mod(1, -3) == 1
    assert power_mod(2, -1) == 0
    with pytest.raises(ZeroDivisionError):
        power_mod(MOD, -1)


def test_unique_paths_example():
    assert unique_paths(3, 7) == 28


@pytest.mark.parametrize("rows, cols", [(1, 1), (2, 2), (4, 5), (10, 10), (1, 9)])
def test_unique_paths_binomial(rows, cols):
    expected = math.comb(rows + cols - 2, rows - 1)
    assert unique_paths(rows, cols) == expected
    assert unique_paths_memo(rows, cols) == expected


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


def test_unique_paths_memo_empty_grid():
    assert unique_paths_memo(0, 3) == 0


@pytest.mark.parametrize("nums, expected", [([3, 2, 3], 3), ([2, 2, 1, 1, 1, 2, 2], 2)])
def test_majority_element_examples(nums, expected):
    assert majority_element(nums) == expected


def test_majority_element_empty():
    with pytest.raises(ValueError):
        majority_element([])


@pytest.mark.parametrize(
    "nums, expected", [([3, 2, 3], [3]), ([1], [1]), ([1, 2], [1, 2]), ([-1, -1, 5], [-1])]
)
def test_majority_elements_examples(nums, expected):
    assert majority_elements(nums) == expected


@pytest.mark.parametrize("seed", range(8))
def test_majority_elements_invariant(seed):
    rng = random.Random(seed)
    nums = [rng.choice([1, 1, 1, 2, 2, 3, 4]) for _ in range(rng.randint(1, 30))]
    counts = Counter(nums)
    expected = {value for value, count in counts.items() if count > len(nums) // 3}
    result = majority_elements(nums)
    assert set(result) == expected
    assert len(result) == len(set(result))


def test_reverse_pairs_examples():
    nums = [1, 3, 2, 3, 1]
    assert reverse_pairs(nums) == 2
    assert nums == [1, 3, 2, 3, 1]
    assert reverse_pairs([2, 4, 3, 5, 1]) == 3


def test_reverse_pairs_sorted_is_zero():
    assert reverse_pairs(list(range(20))) == 0


def test_reverse_pairs_large_values():
    big = 2**31 - 1
    assert reverse_pairs([big, big, big]) == 0


def _sorted_grid():
    return [[r * 10 + c * 3 for c in range(4)] for r in range(5)]


def test_staircase_search_finds_every_element():
    matrix = _sorted_grid()
    for row in matrix:
        for value in row:
            found = staircase_search(matrix, value)
            assert found is not None
            r, c = found
            assert matrix[r][c] == value


def test_staircase_search_missing():
    matrix = _sorted_grid()
    assert staircase_search(matrix, 1) is None
    assert staircase_search([], 1) is None


def test_search_matrix_finds_and_misses():
    matrix = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]
    for row in matrix:
        for value in row:
            assert search_matrix(matrix, value) is True
    assert search_matrix(matrix, 13) is False
    assert search_matrix(matrix, 0) is False
    assert search_matrix([], 1) is False