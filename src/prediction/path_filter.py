"""
Noise filtering for raw swipe paths.
"""
from typing import Sequence, Tuple

from .geometry import Point, distance


def filter_path(path: Sequence[Point], min_distance: float) -> Tuple[Point, ...]:
    """
    Thin a raw path using a running reference point.

    The first point is always kept. Every later point is kept only when it is
    at least `min_distance` away from the last kept point, so dwelling on a key
    collapses into a single point while fast strokes keep most of their samples.

    Args:
        path: Raw gesture points in capture order.
        min_distance: Minimum separation between kept points.

    Returns:
        The filtered points as a tuple.
    """
    if len(path) <= 1:
        return tuple(Point(*p) for p in path)

    filtered = [Point(*path[0])]
    for point in path[1:]:
        if distance(filtered[-1], point) >= min_distance:
            filtered.append(Point(*point))

    return tuple(filtered)
