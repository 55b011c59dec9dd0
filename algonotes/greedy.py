"""Greedy scheduling and matching: meetings, intervals, shortest job first, wildcards."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_meetings(start: Sequence[int], end: Sequence[int]) -> int:
    """Return the most meetings one room can hold.

    Meeting ``i`` runs from ``start[i]`` to ``end[i]``. A meeting may only
    begin strictly after the previous one has ended. Meetings are picked
    greedily by earliest end time.
    """
    if len(start) != len(end):
        raise ValueError(
            f"start and end must have the same length, got {len(start)} and {len(end)}"
        )
    count = 0
    free_after: int | None = None
    for begin, finish in sorted(zip(start, end), key=lambda meeting: meeting[1]):
        if free_after is None or free_after < begin:
            count += 1
            free_after = finish
    return count


def erase_overlap_intervals(intervals: Iterable[Sequence[int]]) -> int:
    """Return the fewest intervals to remove so the rest do not overlap.

    Intervals that only touch at an endpoint do not overlap.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    removed = 0
    last_end = ordered[0][1]
    for begin, finish in ((iv[0], iv[1]) for iv in ordered[1:]):
        if begin >= last_end:
            last_end = finish
        else:
            removed += 1
    return removed


def average_waiting_time(burst_times: Iterable[int]) -> int:
    """Return the average waiting time, rounded down, under shortest job first.

    Raises ``ValueError`` when there are no jobs.
    """
    jobs = sorted(burst_times)
    if not jobs:
        raise ValueError("at least one job is required")
    elapsed = 0
    waiting = 0
    for burst in jobs:
        waiting += elapsed
        elapsed += burst
    return waiting // len(jobs)


def check_valid_string(s: str) -> bool:
    """Tell whether ``s`` can be balanced when each ``*`` may be ``(``, ``)`` or empty.

    Any character other than ``(`` and ``*`` is treated as ``)``.
    """
    opens = 0
    closes = 0
    for forward, backward in zip(s, reversed(s)):
        opens += 1 if forward in "(*" else -1
        closes += 1 if backward in ")*" else -1
        if opens < 0 or closes < 0:
            return False
    return True