"""
Keyboard layout definitions.
Support for QWERTY, DVORAK, and COLEMAK layouts.
"""
from typing import Dict, List

from prediction.geometry import Rect


# Key layout as rows of keys.
# Each key is a string (letter) or (label, width_multiplier) for functional keys.

QWERTY = [
    ['q', 'w', 'e', 'r', 't', 'y', 'u', 'i', 'o', 'p'],
    ['a', 's', 'd', 'f', 'g', 'h', 'j', 'k', 'l'],
    [('shift', 1.5), 'z', 'x', 'c', 'v', 'b', 'n', 'm', ('backspace', 1.5)],
    [('123', 1.5), ',', ('space', 5.0), '.', ('return', 1.5)],
]

DVORAK = [
    ["'", ',', '.', 'p', 'y', 'f', 'g', 'c', 'r', 'l'],
    ['a', 'o', 'e', 'u', 'i', 'd', 'h', 't', 'n', 's'],
    [('shift', 1.0), ';', 'q', 'j', 'k', 'x', 'b', 'm', 'w', 'v', 'z'],
    [('123', 1.5), ('space', 7.0), ('return', 1.5)],
]

COLEMAK = [
    ['q', 'w', 'f', 'p', 'g', 'j', 'l', 'u', 'y', ';'],
    ['a', 'r', 's', 't', 'd', 'h', 'n', 'e', 'i', 'o'],
    [('shift', 1.5), 'z', 'x', 'c', 'v', 'b', 'k', 'm', ('backspace', 1.5)],
    [('123', 1.5), ',', ('space', 5.0), '.', ('return', 1.5)],
]

LAYOUTS: Dict[str, List[List[object]]] = {
    'qwerty': QWERTY,
    'dvorak': DVORAK,
    'colemak': COLEMAK,
}


def get_layout(name: str) -> List[List[object]]:
    """Get keyboard layout by name."""
    return LAYOUTS.get(name.lower(), QWERTY)


def get_key_rects(layout: List[List[object]], width: float, height: float) -> Dict[str, Rect]:
    """
    Get hit-rectangles for each key in a `width` x `height` keyboard.
    Accounts for width multipliers; shorter rows are centered.
    """
    rects = {}
    num_rows = len(layout)
    row_height = height / num_rows

    # First, calculate total width of each row in terms of "units"
    row_widths = []
    for row in layout:
        row_w = 0.0
        for key in row:
            if isinstance(key, tuple):
                row_w += key[1]
            else:
                row_w += 1.0
        row_widths.append(row_w)

    unit = width / max(row_widths)

    for row_idx, row in enumerate(layout):
        # X offset for centering shorter rows
        current_x = (max(row_widths) - row_widths[row_idx]) / 2.0 * unit
        for key in row:
            label = key[0] if isinstance(key, tuple) else key
            key_w = (key[1] if isinstance(key, tuple) else 1.0) * unit

            rects[label] = Rect(current_x, row_idx * row_height, key_w, row_height)
            current_x += key_w

    return rects
