"""Two- and three-dimensional vectors and small numeric helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, TypeVar, Union

_EPSILON = 0.0001

_T = TypeVar("_T")

_Number = (int, float)


@dataclass
class Vec2:
    """A 2D vector, also used as a point or a size."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vec2, float]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, _Number):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vec2, float]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        if isinstance(other, _Number):
            return Vec2(self.x / other, self.y / other)
        return NotImplemented

    def is_vertical(self, other: Vec2) -> bool:
        """Return True when the mixed product is (almost) zero or negative."""
        t = self.x * other.y + self.y * other.x
        return t <= _EPSILON

    def is_horizontal(self, other: Vec2) -> bool:
        """Return True when the vectors count as parallel."""
        t = self.x * other.x - other.x * self.y
        return t <= _EPSILON


Size = Vec2


@dataclass
class Vec3:
    """A 3D vector; z is used as drawing depth."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, _Number):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, _Number):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented


def swap(value_1: _T, value_2: _T) -> Tuple[_T, _T]:
    """Return the two values in exchanged order."""
    return value_2, value_1


def square(value: float) -> float:
    """Return value multiplied by itself."""
    return value * value