"""The stage editor application and its entry point."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .datafile import DataFileError, PathLike
from .definitions import WINDOW_H, WINDOW_W
from .graphics import Device, Drawer
from .manager import ObjectManager
from .objects import MapObject, Scene
from .window import Window, WindowError, app_end, app_init

APP_NAME = "StageEditorTool"
DEFAULT_TEXTURE_TABLE = "./Res/texture_name_table.csv"
DEFAULT_RESOURCE_DATA = "./Res/resource_data.csv"
RESOURCE_SPACE_TEXTURE = "./Res/resource_space.csv"


class Editor:
    """Ties the window, textures, objects and collisions together."""

    def __init__(
        self,
        texture_table: PathLike = DEFAULT_TEXTURE_TABLE,
        resource_data: PathLike = DEFAULT_RESOURCE_DATA,
    ) -> None:
        self.texture_table = texture_table
        self.resource_data = resource_data
        self.scene = Scene()
        self.objects = ObjectManager(self.scene)
        self.select_sprite_name = ""
        self.window: Optional[Window] = None
        self.device: Optional[Device] = None

    @property
    def drag_object(self) -> Optional[MapObject]:
        """The map object currently being dragged, if any."""
        return self.scene.drag_object

    @drag_object.setter
    def drag_object(self, obj: Optional[MapObject]) -> None:
        self.scene.drag_object = obj

    def init(self, app_name: str, width: int = WINDOW_W, height: int = WINDOW_H) -> None:
        """Open the window and load textures and resources.

        Raises WindowError if the window cannot be opened and DataFileError
        if a data file cannot be read.
        """
        self.window, self.device = app_init(width, height, app_name, False)
        self.window.input = self.scene.input
        self.scene.drawer = Drawer(self.scene.textures, self.device)
        self.scene.textures.load(self.texture_table)
        self.objects.load(self.resource_data)
        self.objects.init()

    def update(self) -> None:
        """Advance objects and run the collision checks for one frame."""
        self.scene.collision.clear()
        self.objects.update()
        self.scene.collision.update()

    def draw(self) -> None:
        """Draw one frame, then drop objects marked for deletion."""
        if self.device is None or self.scene.drawer is None:
            raise RuntimeError("editor is not initialised")
        self.scene.drawer.draw_2d(RESOURCE_SPACE_TEXTURE, 0, 0, 0.2)
        self.device.draw_start()
        self.objects.draw()
        self.device.draw_end()
        self.objects.delete()

    def release(self) -> None:
        """Forget the textures and close the display."""
        self.scene.textures.release_all()
        if self.device is not None:
            app_end(self.device)
            self.device = None
        self.scene.drawer = None


def main(argv: Optional[List[str]] = None) -> int:
    """Run the editor until its window is closed."""
    parser = argparse.ArgumentParser(
        prog="stageeditor", description="Lay out objects on a stage."
    )
    parser.parse_args(argv)

    editor = Editor()
    try:
        editor.init(APP_NAME)
    except (WindowError, DataFileError) as exc:
        print(f"stageeditor: {exc}", file=sys.stderr)
        editor.release()
        return 1

    window = editor.window
    assert window is not None
    while window.process_messages():
        editor.update()
        editor.draw()
    editor.release()
    return 0


if __name__ == "__main__":
    sys.exit(main())