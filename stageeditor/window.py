"""The application window, its event handling and start-up helpers."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from .definitions import MouseKey
from .graphics import Device
from .input import InputState

WINDOW_CLASS_NAME = "StageEditorTool"

_BUTTONS = {1: MouseKey.LEFT, 3: MouseKey.RIGHT}


class WindowError(Exception):
    """The window or its drawing surface could not be created."""


class Window:
    """The editor window; turns its events into mouse input state."""

    def __init__(self, input_state: Optional[InputState] = None) -> None:
        self.input = input_state if input_state is not None else InputState()
        self.title = ""
        self.width = 0
        self.height = 0
        self._quit_requested = False

    def create(self, title: str, width: int, height: int) -> None:
        """Open the window system and set the window title and size."""
        try:
            pygame.display.init()
            pygame.display.set_caption(title)
        except pygame.error as exc:
            raise WindowError(f"failed to create the window: {exc}") from exc
        self.title = title
        self.width = width
        self.height = height
        self._quit_requested = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one event to the input state; return False when asked to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button in _BUTTONS:
            self.input.press(_BUTTONS[event.button])
        elif event.type == pygame.MOUSEBUTTONUP and event.button in _BUTTONS:
            self.input.release(_BUTTONS[event.button])
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.input.move(x, y)
        return True

    def process_messages(self) -> bool:
        """Handle pending events; return False once the window should close."""
        if self._quit_requested:
            return False
        return all(self.handle_event(event) for event in pygame.event.get())

    def close(self) -> None:
        """Ask the message loop to stop."""
        self._quit_requested = True


def app_init(
    width: int, height: int, title: str, full_screen: bool = False
) -> Tuple[Window, Device]:
    """Create the window and its drawing device."""
    window = Window()
    window.create(title, width, height)
    device = Device()
    try:
        device.init(width, height, full_screen)
    except RuntimeError as exc:
        raise WindowError(str(exc)) from exc
    return window, device


def app_end(device: Device) -> None:
    """Release the drawing device."""
    device.release()