"""Bit tricks: subsets by mask, XOR-based single-number searches, range XOR."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, ordered by bit mask.

    Subset ``i`` holds ``nums[j]`` for every bit ``j`` set in ``i``.
    """
    items = list(nums)
    return [
        [value for j, value in enumerate(items) if mask >> j & 1]
        for mask in range(1 << len(items))
    ]


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def single_number_ii(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears three times."""
    ones = 0
    twos = 0
    for value in nums:
        ones ^= value & ~twos
        twos ^= value & ~ones
    return ones


def single_number_iii(nums: Sequence[int]) -> list[int]:
    """Return the two values that appear once when every other value appears twice.

    The value holding the lowest differing bit comes first.
    """
    items = list(nums)
    combined = reduce(xor, items, 0)
    lowest_bit = combined & -combined
    with_bit = 0
    without_bit = 0
    for value in items:
        if value & lowest_bit:
            with_bit ^= value
        else:
            without_bit ^= value
    return [with_bit, without_bit]


def _xor_upto(n: int) -> int:
    remainder = n % 4
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    if remainder == 3:
        return 0
    return n


def xor_range(left: int, right: int) -> int:
    """Return the XOR of every integer from ``left`` to ``right`` inclusive."""
    return _xor_upto(left - 1) ^ _xor_upto(right)