"""Mouse button and pointer state."""

from __future__ import annotations

from typing import List

from .definitions import MOUSE_KEY_COUNT, MouseKey, MouseState
from .geometry import Vec2


class InputState:
    """Tracks pressed mouse buttons, the pointer and the last dragged point."""

    def __init__(self) -> None:
        self._clicked: List[bool] = [False] * MOUSE_KEY_COUNT
        self._points: List[Vec2] = [Vec2(), Vec2()]
        self._push_count = 0

    def _follow(self) -> None:
        # While the left button is held, the click point follows the pointer.
        if self._clicked[MouseKey.LEFT]:
            start = self._points[MouseState.START]
            self._points[MouseState.END] = Vec2(start.x, start.y)

    def press(self, key: int) -> None:
        """Record that a button went down."""
        self._clicked[MouseKey(key)] = True
        self._follow()

    def release(self, key: int) -> None:
        """Record that a button went up."""
        self._clicked[MouseKey(key)] = False
        self._follow()

    def move(self, x: float, y: float) -> None:
        """Record a new pointer position."""
        self._points[MouseState.START] = Vec2(float(x), float(y))
        self._follow()

    def on_mouse_down(self, key: int) -> bool:
        """Return True while the button is held."""
        return self._clicked[MouseKey(key)]

    def on_mouse_up(self, key: int) -> bool:
        """Return True while the button is not held."""
        return not self._clicked[MouseKey(key)]

    def on_mouse_push(self, key: int) -> bool:
        """Return True when the button is held, counting the push."""
        if not self._clicked[MouseKey(key)]:
            return False
        self._push_count += 1
        if self._push_count == 1:
            self._push_count = 0
            return True
        return False

    def move_point(self) -> Vec2:
        """Return the current pointer position."""
        point = self._points[MouseState.START]
        return Vec2(point.x, point.y)

    def click_point(self) -> Vec2:
        """Return the last pointer position seen while the left button was held."""
        point = self._points[MouseState.END]
        return Vec2(point.x, point.y)


def check_hit_key(key: int) -> bool:
    """Return True if the high bit of a key state byte is set."""
    return (key & 0x80) != 0