"""The objects placed and handled by the editor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .colliders import Collider, PointCollider, RectCollider
from .collision import CollisionManager
from .definitions import (
    WINDOW_CENTER_X,
    WINDOW_CENTER_Y,
    CollisionType,
    MouseKey,
    ObjectType,
)
from .geometry import Vec2, Vec3
from .input import InputState
from .parameters import (
    CollisionObjectParameter,
    CreateParameter,
    MapObjectParameter,
    SpriteObjectParameter,
)
from .texture import TextureManager

if TYPE_CHECKING:
    from .graphics import Drawer


@dataclass
class Scene:
    """Services shared by the editor objects."""

    input: InputState = field(default_factory=InputState)
    textures: TextureManager = field(default_factory=TextureManager)
    drawer: Optional[Drawer] = None
    drag_object: Optional[MapObject] = None
    registered: List[GameObject] = field(default_factory=list)
    collision: CollisionManager = field(init=False)

    def __post_init__(self) -> None:
        self.collision = CollisionManager(lambda: self.drag_object)

    def register(self, obj: Optional[GameObject]) -> None:
        """Queue a newly created object for the object manager."""
        if obj is None:
            return
        self.registered.append(obj)


class GameObject(ABC):
    """Something with a position, rotation and scale that the editor updates."""

    def __init__(self, param: CreateParameter) -> None:
        self.pos = Vec3(param.pos.x, param.pos.y, param.pos.z)
        self.rot = param.rot
        self.scale = Vec2(param.scale_x, param.scale_y)
        self.is_deleted = False

    @abstractmethod
    def init(self) -> None:
        """Prepare the object after creation."""

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the object."""


class SpriteObject(GameObject):
    """An object drawn with a named texture."""

    def __init__(self, scene: Scene, param: SpriteObjectParameter) -> None:
        super().__init__(param)
        self.scene = scene
        self.sprite_name = param.sprite_name
        self.size = Vec2()

    def init(self) -> None:
        self.size = Vec2(1.0, 1.0)

    def update(self) -> None:
        pass

    def draw(self) -> None:
        if self.scene.drawer is not None:
            self.scene.drawer.draw_2d(self.sprite_name, self.pos.x, self.pos.y, self.pos.z)


class CollisionObject(SpriteObject):
    """A sprite that takes part in collision checks."""

    def __init__(self, scene: Scene, param: CollisionObjectParameter) -> None:
        super().__init__(scene, param)
        self.object_type = ObjectType(param.object_type)
        self.collision_type = CollisionType(param.collision_type)
        self.selected = False

    def collider(self) -> Collider:
        """Return the object's collider as it stands now."""
        return Collider(Vec3(self.pos.x, self.pos.y, self.pos.z))

    @abstractmethod
    def reflection(self, other: CollisionObject) -> None:
        """React to a collision with other."""


class MapObject(CollisionObject):
    """An object placed on the stage; it can be dragged and deleted."""

    def __init__(self, scene: Scene, param: MapObjectParameter) -> None:
        super().__init__(scene, param)
        # Both scale components take scale_x.
        self.scale = Vec2(param.scale_x, param.scale_x)
        self.size = scene.textures.size_of(self.sprite_name)
        self._collider = RectCollider(
            Vec3(self.pos.x, self.pos.y, self.pos.z), Vec2(self.size.x, self.size.y)
        )

    def init(self) -> None:
        pass

    def update(self) -> None:
        self.scene.collision.entry(self)
        if not self.selected:
            return
        user_input = self.scene.input
        click = user_input.click_point()
        self.pos.x = click.x
        self.pos.y = click.y
        self._collider.pos = Vec3(self.pos.x, self.pos.y, self.pos.z)
        self._collider.size = Vec2(self.size.x, self.size.y)
        if user_input.on_mouse_up(MouseKey.LEFT):
            self.selected = False

    def collider(self) -> RectCollider:
        pos, size = self._collider.pos, self._collider.size
        return RectCollider(Vec3(pos.x, pos.y, pos.z), Vec2(size.x, size.y))

    def reflection(self, other: CollisionObject) -> None:
        if other.collision_type == CollisionType.RECT:
            other.collider()
        elif other.collision_type == CollisionType.POINT:
            user_input = self.scene.input
            if user_input.on_mouse_down(MouseKey.LEFT):
                self.selected = True
                self.scene.drag_object = self
            if user_input.on_mouse_down(MouseKey.RIGHT):
                self.is_deleted = True


class MouseObject(CollisionObject):
    """The mouse pointer as a point collider."""

    def __init__(self, scene: Scene, param: CollisionObjectParameter) -> None:
        super().__init__(scene, param)
        self._collider = PointCollider(Vec3())

    def init(self) -> None:
        pass

    def update(self) -> None:
        self.scene.collision.entry(self)
        point = self.scene.input.move_point()
        self.pos.x = point.x
        self.pos.y = point.y
        self._collider.pos = Vec3(point.x, point.y, self._collider.pos.z)

    def collider(self) -> PointCollider:
        pos = self._collider.pos
        return PointCollider(Vec3(pos.x, pos.y, pos.z))

    def reflection(self, other: CollisionObject) -> None:
        pass


class ResourceObject(CollisionObject):
    """A palette entry; clicking it places a new map object."""

    def __init__(self, scene: Scene, param: CollisionObjectParameter) -> None:
        super().__init__(scene, param)
        self.scale = Vec2(param.scale_x, param.scale_x)
        self.size = scene.textures.size_of(self.sprite_name)
        self._collider = RectCollider()
        self.map_parameter = MapObjectParameter()

    def init(self) -> None:
        self.scene.collision.entry(self)
        self._collider.pos = Vec3(self.pos.x, self.pos.y, self.pos.z)
        self._collider.size = Vec2(self.size.x, self.size.y)

    def update(self) -> None:
        pass

    def collider(self) -> RectCollider:
        pos, size = self._collider.pos, self._collider.size
        return RectCollider(Vec3(pos.x, pos.y, pos.z), Vec2(size.x, size.y))

    def reflection(self, other: CollisionObject) -> Optional[MapObject]:
        """Place a map object at the window centre when the left button is pushed."""
        if not self.scene.input.on_mouse_push(MouseKey.LEFT):
            return None
        param = MapObjectParameter(
            ObjectType.MAP,
            self.collision_type,
            self.sprite_name,
            WINDOW_CENTER_X,
            WINDOW_CENTER_Y,
            1.0,
        )
        obj = MapObject(self.scene, param)
        self.scene.register(obj)
        return obj