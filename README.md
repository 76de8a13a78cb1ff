# djinni

A small 2D game engine built on pygame. It opens a window, creates a renderer for it, and loads image files as textures. Entities carry draw bounds and a physics body that move together. The package also has a few geometry primitives and a levelled console logger.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Quick start

```python
from djinni.engine import Engine, WindowSettings, VideoSettings
from djinni.renderable import create_sprite

with Engine() as engine:
    engine.initialize(WindowSettings(name="Demo", width=800, height=800), VideoSettings())

    player = create_sprite(engine.renderer, 100, 100, "gfx/player.png")
    player.move(5, 0)
    position = player.position()

    engine.renderer.draw_color(0, 0, 0, 255)
    engine.renderer.clear()
    player.texture.blit(engine.renderer, position.x, position.y)
    engine.renderer.present()
```

Leaving the `with` block calls `Engine.terminate()`. That closes the renderer and the window and shuts pygame down.

## Modules

### `djinni.logger`

- `LogLevel` is an `IntEnum` of thresholds: `ALL` (0), `DEBUG`, `INFO`, `WARN`, `ERROR`, `FATAL`, `DEVELOPMENT` (6) and `NONE` (99).
- `Logger(level=LogLevel.ALL, stream=None)` has `log_debug`, `log_info`, `log_warn`, `log_error`, `log_fatal` and `log_dev`. Each takes a printf-style message and its arguments, and writes one `[TAG]: message` line when the message's level is at or above `level`. The tags are `DEBUG`, `INFO`, `WARNING`, `ERROR`, `FATAL` and `DEV`. With no `stream`, lines go to the current `sys.stdout`.
- `default_logger` is the shared `Logger` that the rest of the package writes to. Set its `level` to quieten output, for example `LogLevel.NONE` to silence it.

### `djinni.geometry`

- `Coordinate(x, y)` is an integer point.
- `slope(start, end)` returns a `LineSlope(dx, dy)`: the per-step delta from `end` towards `start`. The number of steps is the larger of the two absolute axis distances. A zero-length line has a slope of `(0.0, 0.0)`.
- `Line(start, end)` computes its `slope` when it is created.
- `Rectangle(x, y, w, h)` has `position()`, which returns the top-left corner as a `Coordinate`, and `move_to(x, y)`, which moves the corner and keeps the size.
- Each of these types has `inspect()`, which logs a description at debug level.

### `djinni.physics`

- `Velocity(dx=0, dy=0)`.
- `PhysicsBody(bounds, velocity)` is a body with a bounding `Rectangle` and a `Velocity`. `PhysicsBody.create(x, y, w, h)` makes one at rest. `inspect()` logs the body and its bounds.

### `djinni.video`

- `initialize_video(flags=0)` starts pygame's display subsystem. pygame's loader handles every image format it was built with, so `flags` needs no setting.
- `Window(title, x=None, y=None, width=640, height=480, flags=0)` opens the display window. If both `x` and `y` are given, the window is placed there through the `SDL_VIDEO_WINDOW_POS` environment variable. `close()` shuts the display down.
- `Renderer(window, index=-1, flags=0)` draws onto the window's surface. `draw_color(r, g, b, a)` sets the colour that `clear()` fills with. `present()` flips the display. `close()` detaches the renderer from its window. `index` and `flags` are stored but do not change how drawing is done.
- `Texture.load(renderer, filename)` loads an image. `bounds` holds the image's size. `blit(renderer, x, y)` draws the image with its top-left corner at `(x, y)`. `close()` releases the image.
- `Window`, `Renderer` and `Texture` can each be used as a context manager, and close on exit.
- `VideoError` is raised in these cases: the display cannot start, a window cannot be opened, an image cannot be loaded, or a closed renderer or texture is used.

### `djinni.renderable`

- `EntityState` (`DEAD`, `ALIVE`) and `EntityType` (`NONE`, `SPRITE`).
- `Entity(x, y, w, h, entity_type=EntityType.NONE)` has these attributes: `type`, `status` (starts `ALIVE`), `keep_alive`, `always_update`, draw `bounds`, a physics `body` and an optional `texture`. Its methods are:
  - `position()` returns the body's top-left corner.
  - `move_to(x, y)` places both the body and the draw bounds.
  - `move(dx, dy)` shifts the entity.
  - `inspect()` logs the entity at debug level.
- `create_sprite(renderer, x, y, filename)` loads a texture and returns a `SPRITE` entity of the image's size at `(x, y)`.

### `djinni.engine`

- `WindowSettings(name="", posx=None, posy=None, width=640, height=480, flags=0)` and `VideoSettings(index=0, renderer_flags=0, video_flags=0)`.
- `Engine` has these methods:
  - `initialize(window_settings, video_settings)` starts video, opens the window and creates `engine.renderer`.
  - `set_flag(name, value)` sets an environment variable. The value takes effect for whatever pygame creates afterwards.
  - `terminate()` releases everything and quits pygame.
- `main(argv=None)` runs the demo described below.

## Demo

The `djinni-demo` command opens an 800×800 window and moves a sprite five pixels to the right on every frame. It runs until the window is closed:

```
djinni-demo [IMAGE] [--frames N] [--delay MS]
```

- `IMAGE` is the sprite image. It defaults to `bin/gfx/player.png` relative to the current directory. No image ships with the package.
- `--frames N` stops the demo after `N` frames.
- `--delay MS` sets the milliseconds between frames. The default is 1000.

If the image cannot be loaded, the command prints an error and exits with status 1.

## What it does not do

- There is no game loop or event handling beyond the demo's check for the window being closed.
- Velocities are stored on physics bodies but never applied. There is no collision detection.
- There is no sound, no text or font rendering, and no drawing beyond filling the screen and blitting whole textures.

## Tests

```
pytest
```