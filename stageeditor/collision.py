"""Point-in-rectangle and rectangle overlap checks between editor objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

from .colliders import RectCollider
from .definitions import ObjectType
from .geometry import square

if TYPE_CHECKING:
    from .objects import CollisionObject


class CollisionManager:
    """Collects the objects entered each frame and runs the collision checks.

    ``drag_object`` is a callable returning the object currently being
    dragged in the editor; it becomes the selected object when the mouse
    lies over a map object.
    """

    def __init__(
        self, drag_object: Optional[Callable[[], Optional[CollisionObject]]] = None
    ) -> None:
        self._drag_object = drag_object if drag_object is not None else (lambda: None)
        self.map_objects: List[CollisionObject] = []
        self.resources: List[CollisionObject] = []
        self.mouse: Optional[CollisionObject] = None
        self.selected: Optional[CollisionObject] = None

    def entry(self, obj: CollisionObject) -> None:
        """Register an object according to its type and clear the selection."""
        kind = obj.object_type
        if kind == ObjectType.RESOURCE:
            self.resources.append(obj)
        elif kind == ObjectType.MAP:
            self.map_objects.append(obj)
        elif kind == ObjectType.MOUSE:
            self.mouse = obj
        self.selected = None

    def update(self) -> None:
        """Check the mouse against resources and map objects, then overlaps."""
        for resource in self.resources:
            self.is_point_during_rect(self.mouse, resource)

        for obj in self.map_objects:
            if obj is None:
                continue
            if self.selected is not None and self.selected.selected:
                break
            if self.is_point_during_rect(self.mouse, obj):
                self.selected = self._drag_object()

        if self.selected is not None:
            for rect in self.map_objects:
                if rect is None:
                    continue
                self.is_overlap_rect(self.selected, rect)

    def is_point_during_rect(
        self,
        point_obj: Optional[CollisionObject],
        rect_obj: Optional[CollisionObject],
    ) -> bool:
        """Return True, and notify rect_obj, if the point lies in the rectangle."""
        if point_obj is None or rect_obj is None:
            return False
        point = point_obj.collider()
        rect = rect_obj.collider()
        if not isinstance(rect, RectCollider) or not rect.contains(point):
            return False
        rect_obj.reflection(point_obj)
        return True

    def is_overlap_rect(
        self, select_obj: CollisionObject, rect_obj: CollisionObject
    ) -> bool:
        """Run the rectangle overlap test; notify select_obj and return True on a hit."""
        if select_obj.is_deleted or rect_obj.is_deleted:
            return False
        select = select_obj.collider()
        rect = rect_obj.collider()
        if not isinstance(select, RectCollider) or not isinstance(rect, RectCollider):
            return False
        x = abs(square(select.pos.x - rect.pos.x))
        y = abs(square(select.pos.y - rect.pos.y))
        distance = x + y
        width = select.size.x / 2 + rect.size.x / 2
        height = select.size.y / 2 + rect.size.y / 2
        if width < distance or height < distance:
            select_obj.reflection(rect_obj)
            return True
        return False

    def clear(self) -> None:
        """Forget the map objects entered so far."""
        self.map_objects.clear()