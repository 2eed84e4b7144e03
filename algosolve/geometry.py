"""Collinearity on integer points."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from math import gcd


def _direction(dx: int, dy: int) -> tuple[int, int]:
    """Reduce a non-zero offset to a canonical direction shared by its opposite."""
    divisor = gcd(dx, dy)
    dx, dy = dx // divisor, dy // divisor
    if dx < 0 or (dx == 0 and dy < 0):
        dx, dy = -dx, -dy
    return dx, dy


def max_points(points: Iterable[Sequence[int]]) -> int:
    """Return the largest number of points lying on one straight line.

    Repeated points all count. An empty input gives 0.
    """
    coords: list[tuple[int, int]] = []
    for point in points:
        x, y = point
        coords.append((x, y))

    best = 0
    for index, (x0, y0) in enumerate(coords):
        duplicates = 0
        directions: Counter[tuple[int, int]] = Counter()
        for x, y in coords[index + 1:]:
            dx, dy = x - x0, y - y0
            if dx == 0 and dy == 0:
                duplicates += 1
            else:
                directions[_direction(dx, dy)] += 1
        best = max(best, 1 + duplicates + max(directions.values(), default=0))
    return best