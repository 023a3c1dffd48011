import pytest

from stageeditor.colliders import PointCollider, RectCollider
from stageeditor.definitions import (
    WINDOW_CENTER_X,
    WINDOW_CENTER_Y,
    CollisionType,
    MouseKey,
    ObjectType,
)
from stageeditor.geometry import Vec2
from stageeditor.objects import (
    GameObject,
    MapObject,
    MouseObject,
    ResourceObject,
    Scene,
    SpriteObject,
)
from stageeditor.parameters import (
    CollisionObjectParameter,
    MapObjectParameter,
    SpriteObjectParameter,
)


class RecordingDrawer:
    def __init__(self):
        self.calls = []

    def draw_2d(self, *args):
        self.calls.append(args)


def make_map(scene, x=10.0, y=20.0, collision=CollisionType.RECT):
    return MapObject(
        scene, MapObjectParameter(ObjectType.MAP, collision, "tile.png", x, y, 0.5, 0.0, 2.0, 3.0)
    )


def make_mouse(scene):
    return MouseObject(
        scene, CollisionObjectParameter(ObjectType.MOUSE, CollisionType.POINT, "", 0.0, 0.0)
    )


def make_resource(scene):
    return ResourceObject(
        scene,
        CollisionObjectParameter(
            ObjectType.RESOURCE, CollisionType.RECT, "block.png", 7.0, 8.0, 0.3
        ),
    )


def test_game_object_is_abstract():
    with pytest.raises(TypeError):
        GameObject(SpriteObjectParameter())


def test_scene_register_ignores_none():
    scene = Scene()
    scene.register(None)
    sprite = SpriteObject(scene, SpriteObjectParameter("a.png", 1.0, 2.0))
    scene.register(sprite)
    assert scene.registered == [sprite]


def test_sprite_init_sets_unit_size():
    scene = Scene()
    sprite = SpriteObject(scene, SpriteObjectParameter("a.png", 1.0, 2.0))
    sprite.init()
    assert sprite.size == Vec2(1.0, 1.0)


def test_sprite_draw_uses_drawer():
    drawer = RecordingDrawer()
    scene = Scene(drawer=drawer)
    sprite = SpriteObject(scene, SpriteObjectParameter("a.png", 4.0, 5.0, 0.25))
    sprite.draw()
    assert drawer.calls == [("a.png", 4.0, 5.0, 0.25)]


def test_map_object_takes_scale_x_for_both_axes():
    scene = Scene()
    obj = make_map(scene)
    assert obj.scale.x == obj.scale.y == 2.0


def test_map_object_unknown_texture_has_zero_size_collider():
    scene = Scene()
    obj = make_map(scene, 10.0, 20.0)
    collider = obj.collider()
    assert isinstance(collider, RectCollider)
    assert (collider.pos.x, collider.pos.y) == (10.0, 20.0)
    assert collider.size == Vec2(0.0, 0.0)


def test_map_object_update_enters_collision():
    scene = Scene()
    obj = make_map(scene)
    obj.update()
    assert scene.collision.map_objects == [obj]
    assert (obj.pos.x, obj.pos.y) == (10.0, 20.0)


def test_map_reflection_left_click_selects_and_drags():
    scene = Scene()
    obj = make_map(scene)
    mouse = make_mouse(scene)
    scene.input.press(MouseKey.LEFT)
    obj.reflection(mouse)
    assert obj.selected is True
    assert scene.drag_object is obj
    assert obj.is_deleted is False


def test_map_reflection_right_click_deletes():
    scene = Scene()
    obj = make_map(scene)
    mouse = make_mouse(scene)
    scene.input.press(MouseKey.RIGHT)
    obj.reflection(mouse)
    assert obj.is_deleted is True
    assert obj.selected is False


def test_map_reflection_with_rect_changes_nothing():
    scene = Scene()
    obj = make_map(scene)
    other = make_map(scene, 0.0, 0.0)
    scene.input.press(MouseKey.LEFT)
    obj.reflection(other)
    assert obj.selected is False
    assert scene.drag_object is None


def test_selected_map_object_follows_click_until_release():
    scene = Scene()
    obj = make_map(scene)
    scene.input.press(MouseKey.LEFT)
    scene.input.move(100, 200)
    obj.selected = True
    obj.update()
    assert (obj.pos.x, obj.pos.y) == (100.0, 200.0)
    assert (obj.collider().pos.x, obj.collider().pos.y) == (100.0, 200.0)
    assert obj.selected is True
    scene.input.release(MouseKey.LEFT)
    obj.update()
    assert obj.selected is False


def test_mouse_update_follows_pointer():
    scene = Scene()
    mouse = make_mouse(scene)
    scene.input.move(30, 40)
    mouse.update()
    collider = mouse.collider()
    assert isinstance(collider, PointCollider)
    assert (collider.pos.x, collider.pos.y) == (30.0, 40.0)
    assert scene.collision.mouse is mouse


def test_resource_init_enters_collision_and_sets_collider():
    scene = Scene()
    resource = make_resource(scene)
    resource.init()
    assert scene.collision.resources == [resource]
    collider = resource.collider()
    assert (collider.pos.x, collider.pos.y, collider.pos.z) == (7.0, 8.0, 0.3)


def test_resource_reflection_places_map_object_on_push():
    scene = Scene()
    resource = make_resource(scene)
    mouse = make_mouse(scene)
    scene.input.press(MouseKey.LEFT)
    created = resource.reflection(mouse)
    assert scene.registered == [created]
    assert created.object_type == ObjectType.MAP
    assert created.collision_type == CollisionType.RECT
    assert created.sprite_name == "block.png"
    assert (created.pos.x, created.pos.y) == (WINDOW_CENTER_X, WINDOW_CENTER_Y)


def test_resource_reflection_without_click_does_nothing():
    scene = Scene()
    resource = make_resource(scene)
    assert resource.reflection(make_mouse(scene)) is None
    assert scene.registered == []


def test_mouse_over_map_object_becomes_selection():
    scene = Scene()
    mouse = make_mouse(scene)
    obj = make_map(scene, 30.0, 40.0)
    scene.input.press(MouseKey.LEFT)
    scene.input.move(30, 40)
    mouse.update()
    obj.update()
    scene.collision.update()
    assert obj.selected is True
    assert scene.collision.selected is obj