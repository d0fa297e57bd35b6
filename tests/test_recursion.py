from collections import Counter

import pytest

from algodrills.recursion import (
    combination_sum,
    combination_sum2,
    get_permutation,
    palindrome_partition,
    subset_sums,
    subsets_with_dup,
)


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    candidates = [2, 3, 5]
    target = 8
    results = combination_sum(candidates, target)
    assert results
    for combo in results:
        assert sum(combo) == target
        assert set(combo) <= set(candidates)
    assert len({tuple(c) for c in results}) == len(results)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_combination_sum2_example():
    assert combination_sum2([10, 1, 2, 7, 6, 1, 5], 8) == [
        [1, 1, 6],
        [1, 2, 5],
        [1, 7],
        [2, 6],
    ]


def test_combination_sum2_uses_each_once():
    candidates = [2, 5, 2, 1, 2]
    target = 5
    pool = Counter(candidates)
    results = combination_sum2(candidates, target)
    assert results
    for combo in results:
        assert sum(combo) == target
        assert not Counter(combo) - pool
        assert combo == sorted(combo)
    assert len({tuple(c) for c in results}) == len(results)


def test_get_permutation_example():
    assert get_permutation(3, 3) == "213"


def test_get_permutation_ends():
    n = 5
    digits = "".join(str(d) for d in range(1, n + 1))
    assert get_permutation(n, 1) == digits
    assert get_permutation(n, 120) == digits[::-1]


def test_get_permutation_ordering():
    perms = [get_permutation(4, k) for k in range(1, 25)]
    assert perms == sorted(perms)
    assert len(set(perms)) == len(perms)
    assert all(sorted(p) == list("1234") for p in perms)


def test_get_permutation_out_of_range():
    with pytest.raises(ValueError):
        get_permutation(3, 7)
    with pytest.raises(ValueError):
        get_permutation(3, 0)


def test_palindrome_partition_invariants():
    text = "aabbaa"
    results = palindrome_partition(text)
    assert results[0] == list(text)
    for parts in results:
        assert "".join(parts) == text
        assert all(part == part[::-1] for part in parts)
    assert [text] in results
    assert len({tuple(p) for p in results}) == len(results)


def test_palindrome_partition_empty():
    assert palindrome_partition("") == [[]]


def test_subsets_with_dup_invariants():
    nums = [2, 1, 2, 3, 3]
    results = subsets_with_dup(nums)
    counts = Counter(nums)
    expected_size = 1
    for count in counts.values():
        expected_size *= count + 1
    assert len(results) == expected_size
    assert results[0] == []
    assert len({tuple(s) for s in results}) == len(results)
    for subset in results:
        assert subset == sorted(subset)
        assert not Counter(subset) - counts


def test_subset_sums_invariants():
    values = [3, 1, 4, 1]
    sums = subset_sums(values)
    assert len(sums) == 2 ** len(values)
    assert sums == sorted(sums)
    assert sums[0] == 0
    assert sums[-1] == sum(values)