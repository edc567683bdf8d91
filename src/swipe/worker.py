"""
Background worker for swipe decoding.
Runs in a separate QThread to avoid blocking the UI.
"""
from dataclasses import dataclass
from typing import Mapping, Tuple

from PyQt5.QtCore import QObject, pyqtSignal, pyqtSlot

from prediction.decoder import SwipeDecoder
from prediction.geometry import Point, Rect


@dataclass(frozen=True)
class DecodeRequest:
    """Immutable snapshot of everything one decode needs."""
    gesture_id: int
    path: Tuple[Point, ...]
    key_bounds: Mapping[str, Rect]


class DecodeWorker(QObject):
    """
    Worker class that decodes finished gestures.
    Emits the result (a word or None) tagged with the gesture id.
    """
    # Signals
    word_decoded = pyqtSignal(int, object)  # gesture_id, Optional[str]
    error = pyqtSignal(str)

    def __init__(self, decoder: SwipeDecoder, parent=None):
        super().__init__(parent)
        self._decoder = decoder

    @pyqtSlot(object)
    def decode(self, request: DecodeRequest):
        """Decode one gesture. Runs in whatever thread owns the worker."""
        try:
            word = self._decoder.decode(request.path, request.key_bounds)
        except Exception as e:
            self.error.emit(f"Decode failed for gesture {request.gesture_id}: {e}")
            return
        self.word_decoded.emit(request.gesture_id, word)
