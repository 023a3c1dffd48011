# stageeditor

A small 2D stage editor built on pygame. A palette of resource sprites is
shown in the window; clicking a resource places a copy of it on the map,
where it can be dragged with the left mouse button and removed with the
right one.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

Start the editor from the directory that holds its `Res` folder:

```
stageeditor
```

The command takes no options besides `--help`. It opens a 1300 × 900
window and runs until the window is closed.

On start-up the editor reads two files:

- `./Res/texture_name_table.csv` – the image files to load as textures,
  separated by whitespace. Each image is registered under the name as
  written. An image that cannot be loaded is still registered, with no
  pixels and a zero size.
- `./Res/resource_data.csv` – the resource palette. The first line is a
  header and is skipped; blank lines are ignored; at most three records
  are read. Each record is comma separated:

  ```
  object_type, collision_type, sprite_name, x, y, z, rot, scale_x, scale_y
  ```

  `object_type` is `0` (resource), `1` (mouse) or `2` (map);
  `collision_type` is `1` (rectangle), `2` (circle) or `3` (point).

If either file cannot be read, or a record is malformed, or the window
cannot be opened, the editor prints the error and exits with status 1.

## Controls

- Left button held over a palette resource: a map object made from that
  resource is created at the centre of the window, one for every frame
  the button stays down over it.
- Left button pressed on a map object: the object is picked up and follows
  the pointer while the button is held; releasing the button drops it.
- Right button pressed on a map object: the object is deleted.

Sprites are drawn centred on their position, with a depth between 0 and 1;
nearer sprites are drawn on top.

## What it does not do

- The stage layout cannot be saved or exported; placed objects exist only
  while the editor is running.
- Rotation values are read and stored but not applied when drawing.
- Circle collision is defined as a type but no circle test is performed;
  only point-in-rectangle and rectangle checks are run.

## Using it as a library

- `stageeditor.geometry` – `Vec2`, `Vec3` (element-wise `+ - * /`, and
  scaling by a number), `swap`, `square`.
- `stageeditor.definitions` – `CollisionType`, `CollisionMode`,
  `ObjectType`, `MouseKey`, `MouseState` and the window size constants.
- `stageeditor.parameters` – `CreateParameter`, `SpriteObjectParameter`,
  `CollisionObjectParameter`, `MapObjectParameter`.
- `stageeditor.colliders` – `Collider`, `PointCollider`, `RectCollider`
  and `RectCollider.contains` (edges included).
- `stageeditor.datafile` – `read_resource_data`, `read_sprite_data` and
  `read_texture_data`; they raise `DataFileError` on unreadable files or
  malformed records.
- `stageeditor.input` – `InputState` (`press`, `release`, `move`,
  `on_mouse_down`, `on_mouse_up`, `on_mouse_push`, `move_point`,
  `click_point`) and `check_hit_key`.
- `stageeditor.texture` – `Texture.create` and `TextureManager` (`load`,
  `find`, `size_of`, `release`, `release_all`).
- `stageeditor.graphics` – `quad_vertices`, `Vertex`, `Device` (the
  display) and `Drawer.draw_2d`.
- `stageeditor.window` – `Window` (turns pygame events into `InputState`
  changes), `app_init`, `app_end` and `WindowError`.
- `stageeditor.collision` – `CollisionManager`, hit-testing the mouse
  against palette and map objects.
- `stageeditor.objects` – `Scene`, `SpriteObject`, `MapObject`,
  `MouseObject`, `ResourceObject`.
- `stageeditor.factory` – `ObjectFactory`.
- `stageeditor.manager` – `ObjectManager`, which owns the objects of a
  scene and drives them each frame.
- `stageeditor.editor` – `Editor` and the `main` entry point.