"""
SwipeType UI Module

Keyboard layouts and their key hit-rectangles.
"""
from .layouts import get_layout, get_key_rects, QWERTY, DVORAK, COLEMAK

__all__ = [
    'get_layout',
    'get_key_rects',
    'QWERTY',
    'DVORAK',
    'COLEMAK',
]
