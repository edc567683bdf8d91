"""
Swipe gesture bookkeeping.
Collects the points of the gesture in progress for the decoder and the trail renderer.
"""
import threading
from typing import Dict, List, Tuple

from prediction.geometry import Point, Rect


class SwipeContext:
    """
    State of the swipe gesture in progress.

    One writer (the input handler) appends points; readers such as a trail
    renderer take snapshots through `path`, which never exposes the live list.
    """

    def __init__(self):
        self._is_swiping = False
        self._path: List[Point] = []
        self._lock = threading.Lock()

        # Map of key labels to their hit-rectangles, set by the host on layout changes
        self.key_bounds: Dict[str, Rect] = {}

    @property
    def is_swiping(self) -> bool:
        return self._is_swiping

    @property
    def path(self) -> Tuple[Point, ...]:
        """Snapshot of the current path."""
        with self._lock:
            return tuple(self._path)

    def start(self, x: float, y: float):
        """Start a new swipe path."""
        with self._lock:
            self._is_swiping = True
            self._path = [Point(x, y)]

    def update(self, x: float, y: float):
        """Add point to the swipe path; ignored when no swipe is active."""
        with self._lock:
            if self._is_swiping:
                self._path.append(Point(x, y))

    def end(self) -> Tuple[Point, ...]:
        """End the swipe and hand back the finished path."""
        with self._lock:
            self._is_swiping = False
            path = tuple(self._path)
            self._path = []
        return path
