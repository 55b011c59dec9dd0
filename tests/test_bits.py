from functools import reduce
from operator import xor

import pytest

from algonotes.bits import (
    single_number,
    single_number_ii,
    single_number_iii,
    subsets,
    xor_range,
)


def test_subsets_mask_order():
    assert subsets([1, 2, 3]) == [
        [],
        [1],
        [2],
        [1, 2],
        [3],
        [1, 3],
        [2, 3],
        [1, 2, 3],
    ]


def test_subsets_of_empty_is_single_empty():
    assert subsets([]) == [[]]


@pytest.mark.parametrize("nums", [[4], [5, 9], [0, 1, 2, 3], [7, 7, 7, 8, 9]])
def test_subsets_count_and_ends(nums):
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert result[0] == []
    assert result[-1] == nums


def test_subsets_each_is_subsequence():
    nums = [3, 1, 4, 1, 5]
    for subset in subsets(nums):
        it = iter(nums)
        assert all(value in it for value in subset)


@pytest.mark.parametrize(
    "pairs, single",
    [([2, 7], 4), ([1], 9), ([], 0), ([-3, 12, 5], -8)],
)
def test_single_number(pairs, single):
    nums = pairs + [single] + list(reversed(pairs))
    assert single_number(nums) == single


@pytest.mark.parametrize(
    "triples, single",
    [([2], 3), ([1], 5), ([3], 1), ([0, 1, 99], -7), ([-5, 6], 6 + 5)],
)
def test_single_number_ii(triples, single):
    nums = [single]
    for value in triples:
        nums = [value] + nums + [value, value]
    assert single_number_ii(nums) == single


def test_single_number_ii_interleaved():
    nums = [30000, 500, 100, 30000, 100, 30000, 100]
    assert single_number_ii(nums) == 500


@pytest.mark.parametrize(
    "pairs, a, b",
    [([1, 2], 3, 5), ([], 0, 1), ([4, 4], 6, 10), ([-1], -2, 7)],
)
def test_single_number_iii(pairs, a, b):
    nums = pairs + [a] + pairs + [b]
    result = single_number_iii(nums)
    assert sorted(result) == sorted([a, b])
    low_bit = (a ^ b) & -(a ^ b)
    assert result[0] & low_bit
    assert not result[1] & low_bit


@pytest.mark.parametrize("left, right", [(1, 1), (4, 8), (3, 17), (1, 100), (10, 13)])
def test_xor_range_matches_fold(left, right):
    assert xor_range(left, right) == reduce(xor, range(left, right + 1), 0)


def test_xor_range_single_value():
    assert xor_range(42, 42) == 42