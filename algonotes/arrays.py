"""Array routines: permutations, rotations, partitioning, merging and windows."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def next_permutation(nums: Iterable[int]) -> list[int]:
    """Return the next lexicographic ordering of ``nums``.

    The last ordering wraps around to the first (ascending) one.
    """
    items = list(nums)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        items.reverse()
        return items
    swap = next(
        j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot]
    )
    items[pivot], items[swap] = items[swap], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return items


def rearrange_by_sign(nums: Iterable[int]) -> list[int]:
    """Interleave non-negative and negative values, starting with a non-negative one.

    The relative order within each sign is kept. Raises ``ValueError``
    unless there are as many negative values as non-negative ones.
    """
    items = list(nums)
    positives = [v for v in items if v >= 0]
    negatives = [v for v in items if v < 0]
    if len(positives) != len(negatives):
        raise ValueError(
            f"need equal counts of non-negative and negative values, "
            f"got {len(positives)} and {len(negatives)}"
        )
    return [value for pair in zip(positives, negatives) for value in pair]


def reverse_array(arr: Iterable[int]) -> list[int]:
    """Return the elements of ``arr`` in reverse order."""
    return list(arr)[::-1]


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    count = left_count + right_count
    j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        count += j
    return list(heapq.merge(left, right)), count


def reverse_pairs(nums: Iterable[int]) -> int:
    """Count pairs ``i < j`` with ``nums[i] > 2 * nums[j]``."""
    return _sort_and_count(list(nums))[1]


def rotate_right(nums: Iterable[int], k: int) -> list[int]:
    """Return ``nums`` rotated ``k`` places to the right."""
    items = list(nums)
    if not items:
        return items
    shift = k % len(items)
    return items[len(items) - shift :] + items[: len(items) - shift]


def rotate_left(arr: Iterable[int], d: int) -> list[int]:
    """Return ``arr`` rotated ``d`` places to the left (counter-clockwise)."""
    items = list(arr)
    if not items:
        return items
    shift = d % len(items)
    return items[shift:] + items[:shift]


def rotate_by_one(arr: Iterable[int]) -> list[int]:
    """Return ``arr`` with its last element moved to the front."""
    items = list(arr)
    return items[-1:] + items[:-1]


def smallest_missing_positive(arr: Iterable[int]) -> int:
    """Return the smallest positive integer that does not occur in ``arr``."""
    result = 1
    for value in sorted(arr):
        if value == result:
            result += 1
        elif value > result:
            break
    return result


def sort_012(arr: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag).

    Raises ``ValueError`` on any other value.
    """
    items = list(arr)
    for value in items:
        if value not in (0, 1, 2):
            raise ValueError(f"only 0, 1 and 2 are allowed, got {value!r}")
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def union_sorted(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Return the distinct values of two sorted sequences, in sorted order."""
    result: list[int] = []
    for value in heapq.merge(a, b):
        if not result or result[-1] != value:
            result.append(value)
    return result


def subarray_with_sum(arr: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find the first window of non-negative ``arr`` that sums to ``target``.

    Returns 1-based inclusive ``(start, end)`` positions, or ``None`` if
    no window adds up to ``target``.
    """
    items = list(arr)
    window = 0
    left = 0
    for right, value in enumerate(items):
        window += value
        while window > target and left <= right:
            window -= items[left]
            left += 1
        if window == target:
            return left + 1, right + 1
    return None