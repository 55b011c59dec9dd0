import pytest

from algonotes.sliding_window import (
    largest_variance,
    number_of_nice_subarrays,
    subarrays_with_k_distinct,
    substrings_with_all_three,
)


def _all_subarrays(n):
    return n * (n + 1) // 2


def test_nice_subarrays_worked_example():
    assert number_of_nice_subarrays([1, 1, 2, 1, 1], 3) == 2


def test_nice_subarrays_all_even_with_zero_odd():
    nums = [2, 4, 6, 8]
    assert number_of_nice_subarrays(nums, 0) == _all_subarrays(len(nums))


def test_nice_subarrays_partition_every_subarray():
    nums = [2, 2, 2, 1, 2, 2, 1, 2, 2, 2, 3, 5]
    total = sum(number_of_nice_subarrays(nums, k) for k in range(len(nums) + 1))
    assert total == _all_subarrays(len(nums))


def test_nice_subarrays_too_many_odd_requested():
    nums = [1, 3, 5]
    assert number_of_nice_subarrays(nums, len(nums) + 1) == number_of_nice_subarrays([], 1)


def test_all_three_relabelling_invariant():
    s = "abcabcbbaacc"
    swapped = s.translate(str.maketrans("abc", "cab"))
    assert substrings_with_all_three(swapped) == substrings_with_all_three(s)


def test_all_three_missing_letter_gives_nothing():
    assert substrings_with_all_three("aabbaabb") == substrings_with_all_three("")


def test_all_three_bounded_by_all_substrings():
    s = "acbbcacbab"
    assert 0 < substrings_with_all_three(s) <= _all_subarrays(len(s))


def test_all_three_rejects_other_letters():
    with pytest.raises(ValueError):
        substrings_with_all_three("abcd")


def test_largest_variance_worked_example():
    assert largest_variance("aababbb") == 3


def test_largest_variance_single_letter_is_zero():
    assert largest_variance("aaaa") == largest_variance("")


def test_largest_variance_reverse_invariant():
    s = "baaabcbbacddab"
    assert largest_variance(s[::-1]) == largest_variance(s)


def test_largest_variance_relabelling_invariant():
    s = "aababbbcac"
    relabelled = s.translate(str.maketrans("abc", "xyz"))
    assert largest_variance(relabelled) == largest_variance(s)


def test_largest_variance_bounded_by_length():
    s = "a" * 5 + "b"
    assert largest_variance(s) == len(s) - 2


def test_largest_variance_rejects_uppercase():
    with pytest.raises(ValueError):
        largest_variance("aAb")


def test_k_distinct_worked_example():
    assert subarrays_with_k_distinct([1, 2, 1, 2, 3], 2) == 7


def test_k_distinct_partition_every_subarray():
    nums = [1, 2, 1, 3, 4, 2, 2, 5]
    total = sum(subarrays_with_k_distinct(nums, k) for k in range(1, len(nums) + 1))
    assert total == _all_subarrays(len(nums))


def test_k_distinct_all_equal_values():
    nums = [7] * 6
    assert subarrays_with_k_distinct(nums, 1) == _all_subarrays(len(nums))
    assert subarrays_with_k_distinct(nums, 2) == subarrays_with_k_distinct(nums, 0)


def test_k_distinct_zero_matches_empty_input():
    assert subarrays_with_k_distinct([1, 2, 3], 0) == subarrays_with_k_distinct([], 1)