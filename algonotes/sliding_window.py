"""Sliding-window counting over arrays and strings."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Sequence

_ABC = frozenset("abc")
_LOWERCASE = frozenset(string.ascii_lowercase)


def _at_most_odd(nums: Sequence[int], goal: int) -> int:
    if goal < 0:
        return 0
    total = 0
    odd = 0
    left = 0
    for right, value in enumerate(nums):
        odd += value % 2
        while odd > goal:
            odd -= nums[left] % 2
            left += 1
        total += right - left + 1
    return total


def number_of_nice_subarrays(nums: Iterable[int], k: int) -> int:
    """Count the subarrays holding exactly ``k`` odd numbers."""
    items = list(nums)
    return _at_most_odd(items, k) - _at_most_odd(items, k - 1)


def substrings_with_all_three(s: str) -> int:
    """Count the substrings of ``s`` holding at least one each of ``a``, ``b`` and ``c``.

    Raises ``ValueError`` if ``s`` holds any other character.
    """
    stray = set(s) - _ABC
    if stray:
        raise ValueError(f"only 'a', 'b' and 'c' are allowed, got {sorted(stray)!r}")
    counts: Counter[str] = Counter()
    result = 0
    left = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        while counts["a"] and counts["b"] and counts["c"]:
            counts[s[left]] -= 1
            result += len(s) - right
            left += 1
    return result


def largest_variance(s: str) -> int:
    """Return the largest difference between the counts of two letters in a substring.

    Both letters must occur in the substring. Raises ``ValueError`` if
    ``s`` holds anything but lowercase ASCII letters.
    """
    stray = set(s) - _LOWERCASE
    if stray:
        raise ValueError(f"only lowercase letters are allowed, got {sorted(stray)!r}")
    present = set(s)
    result = 0
    for first in string.ascii_lowercase:
        for second in string.ascii_lowercase:
            if first not in present and second not in present:
                continue
            first_count = 0
            second_count = 0
            second_seen = False
            for ch in s:
                if ch == first:
                    first_count += 1
                if ch == second:
                    second_count += 1
                if second_count > 0:
                    result = max(result, first_count - second_count)
                elif second_seen:
                    result = max(result, first_count - 1)
                if second_count > first_count:
                    first_count = 0
                    second_count = 0
                    second_seen = True
    return result


def _at_most_distinct(nums: Sequence[int], k: int) -> int:
    if k <= 0:
        return 0
    counts: Counter[int] = Counter()
    total = 0
    left = 0
    for right, value in enumerate(nums):
        counts[value] += 1
        while len(counts) > k:
            counts[nums[left]] -= 1
            if counts[nums[left]] == 0:
                del counts[nums[left]]
            left += 1
        total += right - left + 1
    return total


def subarrays_with_k_distinct(nums: Iterable[int], k: int) -> int:
    """Count the subarrays holding exactly ``k`` distinct values."""
    items = list(nums)
    return _at_most_distinct(items, k) - _at_most_distinct(items, k - 1)