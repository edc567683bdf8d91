import time

import pytest

from conftest import trace
from prediction import Point, SwipeDecoder
from swipe import DecodeRequest, DecodeWorker, SwipeContext, SwipeGestureHandler


@pytest.fixture
def decoder(cat_dictionary):
    return SwipeDecoder(cat_dictionary)


def test_context_collects_points_while_swiping():
    context = SwipeContext()
    context.update(1.0, 1.0)  # Ignored: no swipe yet
    context.start(0.0, 0.0)
    context.update(5.0, 5.0)
    assert context.is_swiping
    assert context.path == (Point(0.0, 0.0), Point(5.0, 5.0))

    path = context.end()
    assert path == (Point(0.0, 0.0), Point(5.0, 5.0))
    assert not context.is_swiping
    assert context.path == ()


def test_context_path_is_a_snapshot():
    context = SwipeContext()
    context.start(0.0, 0.0)
    snapshot = context.path
    context.update(9.0, 9.0)
    assert snapshot == (Point(0.0, 0.0),)


def test_worker_emits_decoded_word(qapp, decoder, layout):
    worker = DecodeWorker(decoder)
    results = []
    worker.word_decoded.connect(lambda gesture_id, word: results.append((gesture_id, word)))

    worker.decode(DecodeRequest(7, tuple(trace("cat", layout)), layout))
    worker.decode(DecodeRequest(8, (Point(0, 0),), layout))

    assert results == [(7, "cat"), (8, None)]


def test_worker_reports_errors(qapp, layout):
    class BrokenDecoder:
        def decode(self, path, layout):
            raise RuntimeError("boom")

    worker = DecodeWorker(BrokenDecoder())
    errors = []
    worker.error.connect(errors.append)
    worker.decode(DecodeRequest(1, (), layout))
    assert len(errors) == 1
    assert "boom" in errors[0]


def _swipe(handler, points):
    handler.handle_swipe_start(*points[0])
    for point in points[1:-1]:
        handler.handle_swipe_changed(*point)
    handler.handle_swipe_ended(*points[-1])


def test_handler_inserts_word_and_space(qapp, decoder, layout):
    context = SwipeContext()
    context.key_bounds = layout
    inserted = []
    handler = SwipeGestureHandler(context, decoder, inserted.append)
    predicted = []
    handler.word_predicted.connect(predicted.append)

    _swipe(handler, trace("cat", layout))

    assert inserted == ["cat", " "]
    assert predicted == ["cat"]
    assert not context.is_swiping


def test_handler_ignores_failed_decodes(qapp, decoder, layout):
    context = SwipeContext()
    context.key_bounds = layout
    inserted = []
    handler = SwipeGestureHandler(context, decoder, inserted.append)

    _swipe(handler, [Point(10, 10), Point(12, 12), Point(14, 14)])

    assert inserted == []


def test_handler_drops_results_of_stale_gestures(qapp, decoder, layout):
    context = SwipeContext()
    inserted = []
    handler = SwipeGestureHandler(context, decoder, inserted.append)

    handler.handle_swipe_start(0.0, 0.0)
    handler.handle_swipe_start(5.0, 5.0)
    handler._on_word_decoded(1, "cat")
    assert inserted == []

    handler._on_word_decoded(2, "cat")
    assert inserted == ["cat", " "]


def test_handler_decodes_in_background_thread(qapp, decoder, layout):
    context = SwipeContext()
    context.key_bounds = layout
    inserted = []
    handler = SwipeGestureHandler(context, decoder, inserted.append)
    handler.start()
    try:
        _swipe(handler, trace("cat", layout))
        deadline = time.monotonic() + 5.0
        while not inserted and time.monotonic() < deadline:
            qapp.processEvents()
            time.sleep(0.01)
    finally:
        handler.stop()

    assert inserted == ["cat", " "]


def test_handler_decodes_inline_after_stop(qapp, decoder, layout):
    context = SwipeContext()
    context.key_bounds = layout
    inserted = []
    handler = SwipeGestureHandler(context, decoder, inserted.append)
    handler.start()
    assert handler.stop()

    _swipe(handler, trace("cat", layout))

    assert inserted == ["cat", " "]


def test_handler_can_restart_after_stop(qapp, decoder, layout):
    context = SwipeContext()
    context.key_bounds = layout
    inserted = []
    handler = SwipeGestureHandler(context, decoder, inserted.append)
    handler.start()
    assert handler.stop()
    handler.start()
    try:
        _swipe(handler, trace("cat", layout))
        deadline = time.monotonic() + 5.0
        while not inserted and time.monotonic() < deadline:
            qapp.processEvents()
            time.sleep(0.01)
    finally:
        assert handler.stop()

    assert inserted == ["cat", " "]
