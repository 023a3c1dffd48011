"""Collider shapes used by the collision checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Vec2, Vec3


@dataclass
class Collider:
    """A collider anchored at a position."""

    pos: Vec3 = field(default_factory=Vec3)


@dataclass
class PointCollider(Collider):
    """A collider that is a single point."""


@dataclass
class RectCollider(Collider):
    """An axis-aligned rectangle with its top-left corner at pos."""

    size: Vec2 = field(default_factory=Vec2)

    def contains(self, point: Collider) -> bool:
        """Return True if the point lies in the rectangle, edges included."""
        left = self.pos.x
        right = left + self.size.x
        top = self.pos.y
        bottom = top + self.size.y
        return left <= point.pos.x <= right and top <= point.pos.y <= bottom