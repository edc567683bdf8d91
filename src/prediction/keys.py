"""
Key lookup and ideal-path generation against a key layout.

A key layout maps key labels to their hit-rectangles. Only single-character
labels take part in decoding; labels such as "shift" or "space" are ignored
by ideal paths but may still be hit by a path endpoint.
"""
import math
from typing import Mapping, Optional, Sequence, Tuple

from .geometry import Point, Rect, distance

KeyLayout = Mapping[str, Rect]


def key_for_point(point: Sequence[float], layout: KeyLayout) -> Optional[str]:
    """Return the label of the first key whose rectangle contains `point`."""
    for label, rect in layout.items():
        if rect.contains(point):
            return label
    return None


def ideal_path(word: str, layout: KeyLayout) -> Tuple[Point, ...]:
    """
    Build the reference path for `word`: the centers of its keys in order.

    Characters without a key in the layout contribute no point.
    """
    path = []
    for char in word.lower():
        rect = layout.get(char)
        if rect is not None:
            path.append(rect.center)
    return tuple(path)


def sample_path(points: Sequence[Point], spacing: float) -> Tuple[Point, ...]:
    """
    Resample a polyline into points roughly `spacing` apart.

    Every vertex is kept, and each segment is split into equal steps no longer
    than `spacing`. Used to synthesize a gesture trace from an ideal path.
    """
    if spacing <= 0:
        raise ValueError("spacing must be positive")
    if len(points) < 2:
        return tuple(Point(*p) for p in points)

    sampled = [Point(*points[0])]
    for start, end in zip(points, points[1:]):
        steps = max(1, math.ceil(distance(start, end) / spacing))
        for i in range(1, steps + 1):
            t = i / steps
            sampled.append(Point(start[0] + t * (end[0] - start[0]),
                                 start[1] + t * (end[1] - start[1])))
    return tuple(sampled)
