import pytest

from prediction import Dictionary, ideal_path, sample_path
from ui.layouts import QWERTY, get_key_rects

# 40 x 50 unit keys, close to a phone keyboard in points
KEYBOARD_WIDTH = 400.0
KEYBOARD_HEIGHT = 200.0


@pytest.fixture
def layout():
    return get_key_rects(QWERTY, KEYBOARD_WIDTH, KEYBOARD_HEIGHT)


@pytest.fixture
def cat_dictionary():
    return Dictionary([("cat", 100.0), ("cut", 50.0), ("cot", 10.0)])


def trace(word, layout, spacing=10.0):
    """Swipe trace running straight through the key centers of `word`."""
    return list(sample_path(ideal_path(word, layout), spacing))


@pytest.fixture
def qapp():
    from PyQt5.QtCore import QCoreApplication
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
