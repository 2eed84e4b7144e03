"""Closed integer intervals: insertion, merging and covering with arrows."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _as_pair(interval: Sequence[int]) -> tuple[int, int]:
    """Unpack an interval, raising ``ValueError`` unless it has exactly two ends."""
    start, end = interval
    return start, end


def insert_interval(
    intervals: Iterable[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted, disjoint ``intervals``, merging overlaps.

    Intervals are closed, so ones that only touch are merged too.
    """
    start, end = _as_pair(new_interval)
    before: list[list[int]] = []
    after: list[list[int]] = []
    for s, e in map(_as_pair, intervals):
        if e < start:
            before.append([s, e])
        elif s > end:
            after.append([s, e])
        else:
            start, end = min(start, s), max(end, e)
    return before + [[start, end]] + after


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals into a sorted list of disjoint ones."""
    merged: list[list[int]] = []
    for s, e in sorted(map(_as_pair, intervals)):
        if merged and s <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], e)
        else:
            merged.append([s, e])
    return merged


def find_min_arrow_shots(points: Iterable[Sequence[int]]) -> int:
    """Return the fewest points that together hit every interval."""
    arrows = 0
    reach: int | None = None
    for s, e in sorted(map(_as_pair, points)):
        if reach is not None and s <= reach:
            reach = min(reach, e)
        else:
            arrows += 1
            reach = e
    return arrows