"""Recursive enumeration: subsequences, partitions, permutations and subsets."""

from __future__ import annotations

import math
from collections.abc import Iterable

_DECIMAL_DIGITS = frozenset("0123456789")


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def subsequences_with_sum(arr: Iterable[int], total: int) -> list[list[int]]:
    """Return every subsequence of ``arr`` whose elements add up to ``total``.

    Taking an element is explored before skipping it, which fixes the order.
    """
    items = list(arr)
    found: list[list[int]] = []
    chosen: list[int] = []

    def walk(idx: int, running: int) -> None:
        if idx == len(items):
            if running == total:
                found.append(list(chosen))
            return
        chosen.append(items[idx])
        walk(idx + 1, running + items[idx])
        chosen.pop()
        walk(idx + 1, running)

    walk(0, 0)
    return found


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to split ``s`` into palindromic pieces."""
    result: list[list[str]] = []
    path: list[str] = []

    def walk(start: int) -> None:
        if start == len(s):
            result.append(list(path))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if _is_palindrome(piece):
                path.append(piece)
                walk(end)
                path.pop()

    walk(0)
    return result


def min_palindrome_cuts(s: str) -> int:
    """Return the fewest cuts that split ``s`` into palindromes."""
    if not s:
        return 0
    cuts: list[int] = []
    for i in range(len(s)):
        if _is_palindrome(s[: i + 1]):
            cuts.append(0)
            continue
        best = i
        for j, before in enumerate(cuts):
            if _is_palindrome(s[j + 1 : i + 1]):
                best = min(best, before + 1)
        cuts.append(best)
    return cuts[-1]


def permutations(nums: Iterable[int]) -> list[list[int]]:
    """Return all orderings of ``nums``, choosing unused positions in order."""
    items = list(nums)
    used = [False] * len(items)
    result: list[list[int]] = []
    chosen: list[int] = []

    def walk() -> None:
        if len(chosen) == len(items):
            result.append(list(chosen))
            return
        for i, value in enumerate(items):
            if used[i]:
                continue
            used[i] = True
            chosen.append(value)
            walk()
            chosen.pop()
            used[i] = False

    walk()
    return result


def permutations_by_swap(nums: Iterable[int]) -> list[list[int]]:
    """Return all orderings of ``nums`` by swapping elements in place."""
    items = list(nums)
    result: list[list[int]] = []

    def walk(idx: int) -> None:
        if idx == len(items):
            result.append(list(items))
            return
        for i in range(idx, len(items)):
            items[idx], items[i] = items[i], items[idx]
            walk(idx + 1)
            items[idx], items[i] = items[i], items[idx]

    walk(0)
    return result


def kth_permutation(n: int, k: int) -> str:
    """Return the ``k``-th (1-based) lexicographic permutation of 1..n."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    fact = math.factorial(n)
    if not 1 <= k <= fact:
        raise ValueError(f"k must be between 1 and {fact}, got {k}")
    digits = list(range(1, n + 1))
    remaining = k - 1
    out: list[str] = []
    for i in range(n, 0, -1):
        fact //= i
        index, remaining = divmod(remaining, fact)
        out.append(str(digits.pop(index)))
    return "".join(out)


def _valid_octet(piece: str) -> bool:
    return piece[0] != "0" and int(piece) <= 255


def restore_ip_addresses(s: str) -> list[str]:
    """Return every dotted IPv4 address that can be formed from the digits of ``s``."""
    if any(ch not in _DECIMAL_DIGITS for ch in s):
        raise ValueError(f"expected only decimal digits, got {s!r}")
    if len(s) > 12:
        return []

    results: list[str] = []

    def walk(idx: int, parts: list[str]) -> None:
        if idx == len(s) and len(parts) == 4:
            results.append(".".join(parts))
            return
        if len(parts) == 4:
            return
        for width in (1, 2, 3):
            if idx + width > len(s):
                break
            piece = s[idx : idx + width]
            if width == 1 or _valid_octet(piece):
                walk(idx + width, parts + [piece])

    walk(0, [])
    return results


def has_subset_sum(arr: Iterable[int], total: int) -> bool:
    """Tell whether some subset of the non-negative ``arr`` sums to ``total``."""
    items = list(arr)

    def pick(idx: int, running: int) -> bool:
        if running > total:
            return False
        if idx == len(items):
            return running == total
        return pick(idx + 1, running + items[idx]) or pick(idx + 1, running)

    return pick(0, 0)


def subsets_with_duplicates(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct subset of ``nums``, each in sorted order."""
    items = sorted(nums)
    result: list[list[int]] = []
    chosen: list[int] = []

    def walk(idx: int) -> None:
        result.append(list(chosen))
        for i in range(idx, len(items)):
            if i != idx and items[i] == items[i - 1]:
                continue
            chosen.append(items[i])
            walk(i + 1)
            chosen.pop()

    walk(0)
    return result