"""Enumerations and layout constants shared across the editor."""

from enum import IntEnum


class CollisionType(IntEnum):
    """Shape used by an object's collider."""

    RECT = 1
    CIRCLE = 2
    POINT = 3


class CollisionMode(IntEnum):
    """What the editor is doing with collisions."""

    SELECT = 0
    LAYOUT = 1


class ObjectType(IntEnum):
    """Role of an object in the editor."""

    RESOURCE = 0
    MOUSE = 1
    MAP = 2


class MouseKey(IntEnum):
    """Mouse buttons tracked by the input state."""

    LEFT = 0
    RIGHT = 1
    CENTER = 2


class MouseState(IntEnum):
    """Index of the tracked pointer positions."""

    START = 0
    END = 1


WINDOW_W = 1300
WINDOW_H = 900

RESOURCE_SPACE_X = 1000
RESOURCE_SPACE_Y = 300

WINDOW_CENTER_X = WINDOW_W // 2
WINDOW_CENTER_Y = WINDOW_H // 2

MOUSE_KEY_COUNT = len(MouseKey)