"""Loaded images and the table of images known to the editor."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

import pygame

from .datafile import read_texture_data
from .geometry import Size, Vec2

PathLike = Union[str, "os.PathLike[str]"]


class TextureError(Exception):
    """An image file could not be loaded."""


@dataclass
class Texture:
    """An image together with its name and pixel size."""

    name: str = ""
    size: Size = field(default_factory=Vec2)
    surface: Optional[pygame.Surface] = None

    @classmethod
    def create(cls, path: PathLike) -> Texture:
        """Load the image at path; raise TextureError if it cannot be read."""
        name = os.fspath(path)
        try:
            surface = pygame.image.load(name)
        except (pygame.error, OSError) as exc:
            raise TextureError(f"cannot load image {name}: {exc}") from exc
        width, height = surface.get_size()
        return cls(name, Vec2(float(width), float(height)), surface)


class TextureManager:
    """Keeps the textures named by a texture table, keyed by file name."""

    def __init__(self) -> None:
        self._textures: Dict[str, Texture] = {}

    def __len__(self) -> int:
        return len(self._textures)

    def __contains__(self, name: object) -> bool:
        return name in self._textures

    def load(self, table_path: PathLike) -> None:
        """Load every image listed in the table file.

        Raises DataFileError if the table cannot be read. An image that fails
        to load is still registered, with no pixels and a zero size. A name
        that is already registered keeps its first texture.
        """
        for name in read_texture_data(table_path):
            try:
                texture = Texture.create(name)
            except TextureError:
                texture = Texture(name)
            self._textures.setdefault(name, texture)

    def find(self, name: str) -> Optional[Texture]:
        """Return the texture registered under name, or None."""
        return self._textures.get(name)

    def size_of(self, name: str) -> Size:
        """Return the size of the named texture, or a zero size if unknown."""
        texture = self._textures.get(name)
        if texture is None:
            return Vec2(0.0, 0.0)
        return Vec2(texture.size.x, texture.size.y)

    def release(self, name: str) -> None:
        """Forget the named texture; unknown names are ignored."""
        self._textures.pop(name, None)

    def release_all(self) -> None:
        """Forget every texture."""
        self._textures.clear()