"""Creation of editor objects from their parameters."""

from __future__ import annotations

from .objects import MapObject, MouseObject, ResourceObject, Scene, SpriteObject
from .parameters import CollisionObjectParameter, MapObjectParameter, SpriteObjectParameter


class ObjectFactory:
    """Builds objects; sprites and map objects are registered with the scene."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def create_sprite(self, param: SpriteObjectParameter) -> SpriteObject:
        obj = SpriteObject(self.scene, param)
        self.scene.register(obj)
        return obj

    def create_map_object(self, param: MapObjectParameter) -> MapObject:
        obj = MapObject(self.scene, param)
        self.scene.register(obj)
        return obj

    def create_mouse_object(self, param: CollisionObjectParameter) -> MouseObject:
        return MouseObject(self.scene, param)

    def create_resource_object(self, param: CollisionObjectParameter) -> ResourceObject:
        return ResourceObject(self.scene, param)