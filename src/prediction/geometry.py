"""
Geometry helpers shared by the decoder stages.
"""
from dataclasses import dataclass
from typing import NamedTuple, Sequence
import math


class Point(NamedTuple):
    """A 2D coordinate in the host's screen space."""
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned key hit-rectangle."""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Key rectangle must have positive area, got {self.width}x{self.height}"
            )

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, point: Sequence[float]) -> bool:
        """Inclusive of edges."""
        px, py = point[0], point[1]
        return (self.x <= px <= self.x + self.width
                and self.y <= py <= self.y + self.height)


def distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]
    return math.sqrt(dx * dx + dy * dy)


def nearest_distance(point: Sequence[float], points: Sequence[Sequence[float]]) -> float:
    """Distance from `point` to the closest of `points` (inf when empty)."""
    return min((distance(point, p) for p in points), default=math.inf)
