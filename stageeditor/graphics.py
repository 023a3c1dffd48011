"""The drawing surface and the sprite drawer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from .texture import TextureManager

FULL_SCREEN_SIZE = (1920, 1080)
_WHITE = (255, 255, 255)


@dataclass(frozen=True)
class Vertex:
    """A screen-space vertex: position (x, y, z, rhw), colour and texture coordinate."""

    pos: Tuple[float, float, float, float]
    color: int
    uv: Tuple[float, float]


def _rgb(color: int) -> Tuple[int, int, int]:
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def quad_vertices(
    width: float,
    height: float,
    pos_x: float,
    pos_y: float,
    depth: float = 1.0,
    offset_x: float = 0.5,
    offset_y: float = 0.5,
    color: int = 0x00FFFFFF,
) -> List[Vertex]:
    """Return the four corners of a sprite quad anchored at the given offset."""
    x1 = pos_x - width * offset_x
    y1 = pos_y - height * offset_y
    x2 = pos_x + width * (1.0 - offset_x)
    y2 = pos_y + height * (1.0 - offset_y)
    return [
        Vertex((x1, y1, depth, 1.0), color, (0.0, 0.0)),
        Vertex((x2, y1, depth, 1.0), color, (1.0, 0.0)),
        Vertex((x2, y2, depth, 1.0), color, (1.0, 1.0)),
        Vertex((x1, y2, depth, 1.0), color, (0.0, 1.0)),
    ]


@dataclass
class _Quad:
    image: Optional[pygame.Surface]
    vertices: List[Vertex]

    @property
    def depth(self) -> float:
        return self.vertices[0].pos[2]


class Device:
    """The display surface; quads submitted during a scene are depth-tested."""

    def __init__(self) -> None:
        self._surface: Optional[pygame.Surface] = None
        self._queue: List[_Quad] = []
        self.width = 0
        self.height = 0

    @property
    def surface(self) -> Optional[pygame.Surface]:
        return self._surface

    def init(self, width: int, height: int, full_screen: bool = False) -> None:
        """Open the display; raise RuntimeError if it cannot be created."""
        if full_screen:
            width, height = FULL_SCREEN_SIZE
            flags = pygame.FULLSCREEN
        else:
            flags = 0
        try:
            pygame.display.init()
            self._surface = pygame.display.set_mode((width, height), flags)
        except pygame.error as exc:
            raise RuntimeError(f"cannot create the display: {exc}") from exc
        self.width = width
        self.height = height
        self._queue.clear()

    def _require_surface(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("device is not initialised")
        return self._surface

    def draw_start(self, back_color: int = 0x00000000) -> None:
        """Clear the screen and begin a scene."""
        self._require_surface().fill(_rgb(back_color))
        self._queue.clear()

    def draw_quad(self, image: Optional[pygame.Surface], vertices: List[Vertex]) -> None:
        """Submit a textured quad to the current scene."""
        self._queue.append(_Quad(image, list(vertices)))

    def draw_end(self) -> None:
        """Draw the submitted quads, nearest on top, and present the frame."""
        surface = self._require_surface()
        # Far to near; equal depths keep submission order, so the later one wins.
        for quad in sorted(self._queue, key=lambda q: -q.depth):
            if not 0.0 <= quad.depth <= 1.0:
                continue
            top_left, bottom_right = quad.vertices[0], quad.vertices[2]
            x, y = round(top_left.pos[0]), round(top_left.pos[1])
            w = round(bottom_right.pos[0]) - x
            h = round(bottom_right.pos[1]) - y
            if w <= 0 or h <= 0:
                continue
            rgb = _rgb(top_left.color)
            if quad.image is None:
                surface.fill(rgb, pygame.Rect(x, y, w, h))
                continue
            image = quad.image
            if image.get_size() != (w, h):
                image = pygame.transform.scale(image, (w, h))
            if rgb != _WHITE:
                image = image.copy()
                image.fill(rgb, special_flags=pygame.BLEND_RGB_MULT)
            surface.blit(image, (x, y))
        self._queue.clear()
        pygame.display.flip()

    def release(self) -> None:
        """Close the display."""
        self._queue.clear()
        self._surface = None
        pygame.display.quit()


class Drawer:
    """Draws named textures as screen-space sprites."""

    def __init__(self, textures: TextureManager, device: Device) -> None:
        self.textures = textures
        self.device = device

    def draw_2d(
        self,
        tex_name: str,
        pos_x: float,
        pos_y: float,
        depth: float = 1.0,
        degree: float = 0.0,
        offset_x: float = 0.5,
        offset_y: float = 0.5,
        color: int = 0x00FFFFFF,
    ) -> Optional[List[Vertex]]:
        """Submit the named texture; return its quad, or None if it is unknown.

        The rotation in degree is accepted but not applied.
        """
        texture = self.textures.find(tex_name)
        if texture is None:
            return None
        vertices = quad_vertices(
            texture.size.x,
            texture.size.y,
            pos_x,
            pos_y,
            depth,
            offset_x,
            offset_y,
            color,
        )
        self.device.draw_quad(texture.surface, vertices)
        return vertices