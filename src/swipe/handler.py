"""
Swipe-to-type gesture handler.
Connects gesture input, the background decode worker and text insertion.
"""
import logging
from typing import Callable, Optional

from PyQt5.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from prediction.decoder import SwipeDecoder

from .context import SwipeContext
from .worker import DecodeRequest, DecodeWorker

logger = logging.getLogger(__name__)


class SwipeGestureHandler(QObject):
    """
    Handles swipe-to-type gestures that predict words from the finger path.

    Finished gestures are decoded by a `DecodeWorker`. Once `start()` has moved
    the worker to its own QThread, results come back to this object's thread
    through queued signals. A result is only inserted if no newer gesture has
    started in the meantime.
    """
    word_predicted = pyqtSignal(str)
    _decode_requested = pyqtSignal(object)

    def __init__(
        self,
        context: SwipeContext,
        decoder: SwipeDecoder,
        insert_text: Callable[[str], None],
        parent=None,
    ):
        """
        Args:
            context: Swipe state shared with the trail renderer.
            decoder: Decoder used by the worker.
            insert_text: Called with the predicted word, then with a space.
        """
        super().__init__(parent)
        self._context = context
        self._decoder = decoder
        self._insert_text = insert_text
        self._gesture_id = 0
        self._thread: Optional[QThread] = None
        self._worker = self._create_worker()

    def _create_worker(self) -> DecodeWorker:
        worker = DecodeWorker(self._decoder)
        self._decode_requested.connect(worker.decode)
        worker.word_decoded.connect(self._on_word_decoded)
        worker.error.connect(self._on_error)
        return worker

    def start(self):
        """Move decoding to a background thread."""
        if self._thread is not None:
            return
        self._thread = QThread()
        self._worker.moveToThread(self._thread)
        self._thread.start()

    def stop(self, timeout_ms: int = 2000) -> bool:
        """
        Stop the background thread.

        Later gestures are decoded in this object's thread again. Returns False
        and keeps the thread if it did not finish within `timeout_ms`.
        """
        if self._thread is None:
            return True
        self._thread.quit()
        if not self._thread.wait(timeout_ms):
            logger.warning("Decode thread did not stop within %d ms", timeout_ms)
            return False

        # The old worker belongs to the finished thread; replace it
        self._decode_requested.disconnect(self._worker.decode)
        self._worker = self._create_worker()
        self._thread = None
        return True

    def handle_swipe_start(self, x: float, y: float):
        self._gesture_id += 1
        self._context.start(x, y)

    def handle_swipe_changed(self, x: float, y: float):
        self._context.update(x, y)

    def handle_swipe_ended(self, x: float, y: float):
        """Finish the gesture and submit it for decoding."""
        self._context.update(x, y)
        path = self._context.end()
        request = DecodeRequest(self._gesture_id, path, dict(self._context.key_bounds))
        self._decode_requested.emit(request)

    @pyqtSlot(int, object)
    def _on_word_decoded(self, gesture_id: int, word: Optional[str]):
        if gesture_id != self._gesture_id:
            logger.debug("Dropping result of stale gesture %d", gesture_id)
            return
        if word is None:
            return
        self._insert_text(word)
        self._insert_text(" ")
        self.word_predicted.emit(word)

    @pyqtSlot(str)
    def _on_error(self, message: str):
        logger.error(message)
