"""On-screen keyboard whose keys light up briefly when pressed."""

import math
from dataclasses import dataclass

PRESS_DURATION = 0.05
KEY_SIZE = 50
KEY_STEP = 55
KEYBOARD_WIDTH = 660

# Characters produced by X keycodes 24 onwards for layouts known here.
LAYOUT_KEYS = {
    "us": "qwertyuiop[]\rasdfghjkl;'`\\zxcvbnm,./",
    "ru": "йцукенгшщзхъ\rфывапролджэё\\ячсмитьбю.",
}

# (index of the first character, number of keys, horizontal offset)
_ROWS = ((0, 12, 0), (13, 11, 25), (26, 10, 50))
# (first scancode, last scancode, index of the first button)
_SCANCODES = ((24, 35, 0), (38, 48, 12), (52, 61, 23))
_NEEDED = max(first + count for first, count, _ in _ROWS)


def _upper(char):
    upper = char.upper()
    return upper if len(upper) == 1 else char


@dataclass
class KeyButton:
    """One key: its letter and rectangle relative to the keyboard origin."""

    letter: str
    x: float
    y: float
    width: float = KEY_SIZE
    height: float = KEY_SIZE
    pressed_until: float = -math.inf

    def press_on(self, now):
        """Light the key up for a short moment starting at ``now``."""
        self.pressed_until = now + PRESS_DURATION

    def is_pressed(self, now):
        return now < self.pressed_until


class Keyboard:
    """Three rows of letter keys laid out under the practice text."""

    def __init__(self, chars, scene_width, scene_height):
        chars = list(chars)
        if len(chars) < _NEEDED:
            raise ValueError(f"need at least {_NEEDED} key characters, got {len(chars)}")
        self.origin = ((scene_width - KEYBOARD_WIDTH) / 2, scene_height / 2 + 20)
        self.buttons = [
            KeyButton(_upper(chars[first + i]), offset + i * KEY_STEP, row * KEY_STEP)
            for row, (first, count, offset) in enumerate(_ROWS)
            for i in range(count)
        ]

    def __iter__(self):
        return iter(self.buttons)

    def __len__(self):
        return len(self.buttons)

    def button_for_scancode(self, scancode):
        """Return the key for a hardware scancode, or None if it has none."""
        for first, last, start in _SCANCODES:
            if first <= scancode <= last:
                return self.buttons[start + scancode - first]
        return None

    def press_scancode(self, scancode, now):
        """Light up the key for ``scancode`` and return it, if there is one."""
        button = self.button_for_scancode(scancode)
        if button is not None:
            button.press_on(now)
        return button