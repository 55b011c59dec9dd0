"""String routines: matching, reordering, validation, parsing and layout."""

from __future__ import annotations

import re
import string
from bisect import bisect_right
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from itertools import groupby

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_BRACKET_PAIRS = {"(": ")", "{": "}", "[": "]"}
_ASCII_LETTERS = frozenset(string.ascii_letters)
_ATOI_PATTERN = re.compile(r" *([+-]?)([0-9]*)")
_NON_SPACE_RUN = re.compile(r"[^ ]+")
_COMPRESSED_PIECE = re.compile(r"([0-9]+)|(.)", re.DOTALL)


def num_matching_subseq(s: str, words: Iterable[str]) -> int:
    """Count the words that are subsequences of ``s``."""
    positions: defaultdict[str, list[int]] = defaultdict(list)
    for index, ch in enumerate(s):
        positions[ch].append(index)

    def matches(word: str) -> bool:
        prev = -1
        for ch in word:
            spots = positions.get(ch)
            if not spots:
                return False
            at = bisect_right(spots, prev)
            if at == len(spots):
                return False
            prev = spots[at]
        return True

    return sum(1 for word in words if matches(word))


def orderly_queue(s: str, k: int) -> str:
    """Return the smallest string reachable by moving one of the first ``k`` letters to the end."""
    if k > 1:
        return "".join(sorted(s))
    return min((s[i:] + s[:i] for i in range(len(s))), default=s)


def is_pangram(s: str) -> bool:
    """Tell whether ``s`` uses every letter of the English alphabet."""
    seen = {ch.lower() for ch in s if ch in _ASCII_LETTERS}
    return len(seen) == 26


def is_balanced(s: str) -> bool:
    """Tell whether the brackets ``()``, ``[]`` and ``{}`` in ``s`` are balanced.

    Any character that is not an opening bracket must close the most
    recent open one.
    """
    expected: list[str] = []
    for ch in s:
        closer = _BRACKET_PAIRS.get(ch)
        if closer is not None:
            expected.append(closer)
        elif not expected or expected.pop() != ch:
            return False
    return not expected


def repeated_substring_pattern(s: str) -> bool:
    """Tell whether ``s`` is some shorter string repeated at least twice."""
    n = len(s)
    return any(
        n % size == 0 and s[:size] * (n // size) == s for size in range(1, n // 2 + 1)
    )


def reverse_each_word(s: str) -> str:
    """Reverse the letters of each space-separated word, keeping the spacing."""
    return _NON_SPACE_RUN.sub(lambda match: match.group()[::-1], s)


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order, single-spaced."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def frequency_sort(s: str) -> str:
    """Return ``s`` with its characters grouped, most frequent first."""
    return "".join(ch * count for ch, count in Counter(s).most_common())


def compress(chars: Iterable[str]) -> list[str]:
    """Run-length encode a sequence of characters.

    Each run becomes its character followed by the digits of its length,
    the length being left out for runs of one.
    """
    result: list[str] = []
    for ch, run in groupby(chars):
        result.append(ch)
        count = sum(1 for _ in run)
        if count > 1:
            result.extend(str(count))
    return result


def my_atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit range.

    Leading spaces are skipped; parsing stops at the first non-digit.
    Anything unparsable gives 0.
    """
    match = _ATOI_PATTERN.match(s)
    sign_text, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign_text == "-":
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def array_strings_equal(word1: Iterable[str], word2: Iterable[str]) -> bool:
    """Tell whether two lists of strings spell the same text when concatenated."""
    return "".join(word1) == "".join(word2)


def full_justify(words: Sequence[str], max_width: int) -> list[str]:
    """Lay out ``words`` in fully justified lines of ``max_width`` characters.

    Extra spaces go to the leftmost gaps; a line with one word and the
    last line are left-justified.
    """
    lines: list[str] = []
    n = len(words)
    i = 0
    while i < n:
        letters = len(words[i])
        j = i + 1
        while j < n and letters + (j - i - 1) + len(words[j]) + 1 <= max_width:
            letters += len(words[j])
            j += 1
        line_words = words[i:j]
        gaps = j - i - 1
        if j == n or gaps == 0:
            line = " ".join(line_words)
        else:
            each, extra = divmod(max_width - letters, gaps)
            parts = [
                word + " " * (each + (1 if k < extra else 0))
                for k, word in enumerate(line_words[:-1])
            ]
            parts.append(line_words[-1])
            line = "".join(parts)
        lines.append(line.ljust(max_width))
        i = j
    return lines


def close_strings(word1: str, word2: str) -> bool:
    """Tell whether one word can become the other by swapping positions or letters."""
    if len(word1) != len(word2):
        return False
    counts1, counts2 = Counter(word1), Counter(word2)
    return counts1.keys() == counts2.keys() and sorted(counts1.values()) == sorted(
        counts2.values()
    )


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def check_compressed(s: str, t: str) -> bool:
    """Tell whether ``t`` is a valid compression of ``s``.

    Letters in ``t`` must match ``s``; a number skips that many characters.
    Raises ``ValueError`` if ``t`` holds anything but letters and digits.
    """
    position = 0
    for match in _COMPRESSED_PIECE.finditer(t):
        digits, ch = match.groups()
        if digits is not None:
            position += int(digits)
            continue
        if ch not in _ASCII_LETTERS:
            raise ValueError(f"unexpected character {ch!r} in compressed string")
        if position >= len(s) or s[position] != ch:
            return False
        position += 1
    return position == len(s)


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and punctuation."""
    cleaned = "".join(ch.lower() for ch in s if ch.isascii() and ch.isalnum())
    return cleaned == cleaned[::-1]