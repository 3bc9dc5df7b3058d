# pixelblast

A small top-down game. It opens an 800×600 window that shows a 25×20 tile map
of water, grass and dirt, with a player sprite on top. The game objects live
in a minimal entity-component system, and you can use that system on its own.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
pixelblast
```

This opens the "Pixel Blast" window, centred on the screen. To quit, press
Escape or close the window. A quit request counts as Escape being held down.

Images are loaded from `../assets/`, which is an `assets` directory beside the
directory you start the command from:

- `dirt.png`, `grass.png` and `water.png` for the map tiles
- `player.png` for the player sprite

If an image can't be read, a warning is logged and that image is not drawn.

If the window can't be created, the command prints a message that begins with
`Failed to initialize game!` to standard error and exits with status 1. When it
stops normally it prints `Game exited cleanly.` and exits with status 0.
Command-line arguments are ignored.

## Using the game from code

`pixelblast.game.Game(assets_dir=...)` takes the directory to load images from.
By default this is `../assets`.

- `init(title, width, height, fullscreen)` opens the window and builds the
  scene. If the window can't be created it raises `pixelblast.game.GameError`.
- Each frame, call `handle_events()`, `update()` and `render()` until
  `running` is false.
  - `update()` sets `delta_time` to the seconds elapsed since the previous
    update.
- `clean()` shuts pygame down.
- `Game` is also a context manager, and it calls `clean()` on exit.

## The entity-component system

`pixelblast.ecs` provides `Manager`, `Entity` and `Component`.

- A `Manager` owns entities.
- An `Entity` holds at most one component of each type. Calling
  `update()` or `draw()` on a manager passes the call to every entity. Each
  entity then passes it to its components in the order they were added.
- `get_component` raises `KeyError` if the entity has no component of that
  type.
- At most 32 distinct component types can be used. `add_component` raises
  `ValueError` beyond that.
- `component_type_id(cls)` returns the number assigned to a component type.

```python
from pixelblast.ecs import Manager
from pixelblast.transform_component import TransformComponent

manager = Manager()
player = manager.add_entity()
transform = player.add_component(TransformComponent, 400.0, 300.0, 3.0, 3.0, 0.0)

transform.translate(10, -5)
assert player.has_component(TransformComponent)
assert player.get_component(TransformComponent).position.x == 410.0

player.destroy()
manager.refresh()  # removes inactive entities
assert manager.entities == ()
```

## Other modules

- `pixelblast.common`: `Vector2` supports `+`, `-` and multiplication by a
  scalar. `Rect` holds `x`, `y`, `w` and `h`.
- `pixelblast.transform_component`: `TransformComponent` holds `position`,
  `scale` and `rotation`, and provides `translate` and `set_position`.
- `pixelblast.sprite_component`: `SpriteComponent(texture, z_order, target)`
  draws its texture onto `target` at the entity's `TransformComponent`
  position. The drawn size is the source rectangle's size times the
  transform's scale. It also provides `set_texture`, `set_src_rect` and
  `set_size`.
- `pixelblast.texture`:
  - `load_texture(path)` returns a pygame surface, or `None` if the file can't
    be read.
  - `draw(target, texture, src, dest)` copies the `src` area of a texture onto
    `dest`, stretched to fit.
- `pixelblast.map`: `Map` keeps a 20×25 grid of tile types and draws them as
  32×32 tiles.
  - Type 0 is water, 1 is grass and 2 is dirt. Other values are left empty.
  - `load_map(tiles)` replaces the grid and raises `ValueError` if the grid has
    the wrong size.
  - `Map.from_directory(path)` loads the three tile images from a directory.
- `pixelblast.input`: `Input` tracks which keys are held down.
  - `update(events)` applies the events you pass it. Called with no argument,
    it reads pygame's event queue.
  - `is_key_down(key)` reports whether a key is held.
- `pixelblast.player`: `Player` moves with the arrow keys or WASD, at `speed`
  times the elapsed time. It is kept inside its target surface and drawn as a
  50×50 textured square.

## What it does not do

The game is a scene, not yet a playable game.

- Nothing moves in the window that `pixelblast` opens. The player sprite sits
  at a fixed position, and `Game` does not use the `Player` class.
- There is no shooting, no enemies, no scoring and no collision with the map.
- `SpriteComponent` stores `flip_x`, `flip_y`, `alpha` and `tint`, but does not
  apply them when drawing.
- `TransformComponent` stores `rotation`, but nothing applies it when drawing.