"""Parameters used to create editor objects."""

from __future__ import annotations

from dataclasses import dataclass

from .definitions import CollisionType, ObjectType
from .geometry import Vec3


@dataclass(init=False)
class CreateParameter:
    """Position, rotation and scale of a new object."""

    pos: Vec3
    rot: float
    scale_x: float
    scale_y: float

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 1.0,
        rot: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> None:
        self.pos = Vec3(x, y, z)
        self.rot = rot
        self.scale_x = scale_x
        self.scale_y = scale_y


@dataclass(init=False)
class SpriteObjectParameter(CreateParameter):
    """Creation parameters of an object drawn with a sprite."""

    sprite_name: str

    def __init__(
        self,
        sprite_name: str = "",
        x: float = 0.0,
        y: float = 0.0,
        z: float = 1.0,
        rot: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> None:
        super().__init__(x, y, z, rot, scale_x, scale_y)
        self.sprite_name = sprite_name


@dataclass(init=False)
class CollisionObjectParameter(SpriteObjectParameter):
    """Creation parameters of an object that takes part in collisions."""

    object_type: ObjectType
    collision_type: CollisionType

    def __init__(
        self,
        object_type: ObjectType = ObjectType.RESOURCE,
        collision_type: CollisionType = CollisionType.RECT,
        sprite_name: str = "",
        x: float = 0.0,
        y: float = 0.0,
        z: float = 1.0,
        rot: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> None:
        super().__init__(sprite_name, x, y, z, rot, scale_x, scale_y)
        self.object_type = object_type
        self.collision_type = collision_type


@dataclass(init=False)
class MapObjectParameter(CollisionObjectParameter):
    """Creation parameters of an object placed on the map."""