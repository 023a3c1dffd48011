"""Ownership and per-frame handling of the editor's objects."""

from __future__ import annotations

from typing import List, Optional

from .datafile import PathLike, read_resource_data
from .definitions import CollisionType, ObjectType
from .factory import ObjectFactory
from .objects import CollisionObject, GameObject, Scene
from .parameters import CollisionObjectParameter


class ObjectManager:
    """Holds the placed objects and the resource palette, and drives them."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.objects: List[GameObject] = []
        self.resources: List[CollisionObject] = []

    def load(self, path: PathLike) -> None:
        """Create the mouse object and a resource object for each record in path.

        Raises DataFileError if the resource file cannot be read.
        """
        params = read_resource_data(path)
        factory = ObjectFactory(self.scene)
        mouse_param = CollisionObjectParameter(
            ObjectType.MOUSE, CollisionType.POINT, "", 0.0, 0.0
        )
        self.objects.append(factory.create_mouse_object(mouse_param))
        self.resources.extend(factory.create_resource_object(param) for param in params)

    def register(self, obj: Optional[GameObject]) -> None:
        """Queue an object to join the managed objects on the next update."""
        self.scene.register(obj)

    def add_objects(self) -> None:
        """Move every queued object into the managed objects."""
        self.objects.extend(self.scene.registered)
        # Drained so that an object joins exactly once.
        self.scene.registered.clear()

    def init(self) -> None:
        """Initialise the resource objects."""
        for resource in self.resources:
            resource.init()

    def update(self) -> None:
        """Take in queued objects, then update resources and objects."""
        self.add_objects()
        for resource in self.resources:
            resource.update()
        for obj in self.objects:
            obj.update()

    def draw(self) -> None:
        """Draw the resources, then every object not marked for deletion."""
        for resource in self.resources:
            resource.draw()
        for obj in self.objects:
            if not obj.is_deleted:
                obj.draw()

    def delete(self) -> None:
        """Drop the objects marked for deletion."""
        self.objects = [obj for obj in self.objects if not obj.is_deleted]

    def delete_all(self) -> None:
        """Drop every managed object."""
        self.objects.clear()