# quadkit

Game building blocks that do no rendering. They cover color math, camera
matrices, a frame-stepped coroutine executor, pixel-stepped platformer
physics, a CPU particle simulation, and the rules of Life and Snake. You can
feed the results to a renderer of your choice, or use them to test game logic
without opening a window.

## Install

    pip install quadkit

numpy is the only runtime dependency.

## Modules

### `quadkit.color`

- `Color(r, g, b, a)` is a frozen dataclass. Its channels are floats in the 0..1 range.
  - `Color.from_rgba(r, g, b, a)` builds a color from four 0..255 integers.
  - `Color.from_bytes(data)` takes exactly four bytes. `Color.to_bytes()`
    returns four bytes. Each channel is scaled by 255, truncated and clamped to 0..255.
  - `Color.from_tuple(values)` takes exactly four floats. `Color.to_tuple()`
    returns `(r, g, b, a)`. Any other length raises `ValueError`.
- `color_u8(r, g, b, a)` divides each value by 255. The values may be fractional.
- `hsl_to_rgb(h, s, l)` returns an opaque `Color`. `rgb_to_hsl(color)` returns
  `(h, s, l)` and ignores alpha.
- Named constants: `LIGHTGRAY`, `GRAY`, `DARKGRAY`, `YELLOW`, `GOLD`, `ORANGE`,
  `PINK`, `RED`, `MAROON`, `GREEN`, `LIME`, `DARKGREEN`, `SKYBLUE`, `BLUE`,
  `DARKBLUE`, `PURPLE`, `VIOLET`, `DARKPURPLE`, `BEIGE`, `BROWN`, `DARKBROWN`,
  `WHITE`, `BLACK`, `BLANK`, `MAGENTA`.

### `quadkit.executor`

This module drives a coroutine one frame at a time.

- `resume(coroutine)` runs the coroutine until it awaits the next frame. It
  returns `True` once the coroutine has finished.
- `next_frame()` returns a `FrameFuture`. Each `resume` lets the coroutine pass
  exactly one frame boundary.
- `FileLoadingFuture` completes after `set_result(contents)` has been called.
  Awaiting it returns the bytes. If an exception was supplied instead, awaiting
  it raises that exception. Its `ready` property tells whether contents are waiting.
- Awaiting either future outside `resume()` raises `RuntimeError`.
- `ExecState` names the two poll states, `RUN_ONCE` and `WAITING`.

```python
from quadkit.executor import next_frame, resume

async def game():
    for frame in range(3):
        ...  # update game state
        await next_frame()

coro = game()
while not resume(coro):
    pass  # draw the frame here
```

### `quadkit.camera`

- `Camera2D(rotation, zoom, target, offset)` uses rotation in degrees.
  - `Camera2D.from_display_rect(x, y, w, h)` makes camera space match a
    rectangle, with y pointing down.
  - `matrix()` returns a 4x4 numpy array.
  - `world_to_screen(point, screen_width, screen_height)` and
    `screen_to_world(point, screen_width, screen_height)` convert between world
    coordinates and window coordinates.
- `Camera3D(position, target, up, fovy, aspect, projection)` has a `Projection`
  that is either `PERSPECTIVE` or `ORTHOGRAPHIC`.
  - `matrix(screen_width, screen_height)` returns the view-projection matrix.
  - When `aspect` is `None`, the screen size is required to compute the matrix.
- `depth_enabled()` is `False` for `Camera2D` and `True` for `Camera3D`.
- `short_angle_dist(a0, a1)` and `angle_lerp(a0, a1, t)` interpolate angles in
  degrees along the short way round.

### `quadkit.platformer`

`World` holds actors and solids. Actors move one pixel at a time and stop at
solids. Solids carry the actors that ride on top of them and push the actors
that are in their way.

- `add_static_tiled_layer(static_colliders, tile_width, tile_height, width, tag)`
  adds a layer of filled and empty tiles, stored row by row with `width` tiles
  per row. Tiles tagged `1` are solid.
- `add_actor(pos, width, height)` returns an `Actor` handle.
  `add_solid(pos, width, height)` returns a `Solid` handle.
- `move_h(actor, dx)` and `move_v(actor, dy)` accumulate fractional movement.
  They return `False` when a solid stops the actor.
- `solid_move(solid, dx, dy)` moves a solid. An actor that is pushed into a wall
  becomes `squished(actor)`.
- Queries:
  - `actor_pos`, `solid_pos` and `set_actor_position` read or set positions.
  - `collide_check(actor, pos)` tells whether the actor's box placed at `pos`
    would hit something solid.
  - `collide_solids(pos, width, height)` and `collide_tag(tag, pos, width, height)`
    test a box against solids or against tiles with a given tag.
  - `solid_at(pos)` and `tag_at(pos, tag)` test a single point.
- `Rect(x, y, w, h)` provides `contains(point)` and `overlaps(other)`.

```python
from quadkit.platformer import World

world = World()
# 40 tiles per row: an empty first row, a filled second row (floor at y = 8)
world.add_static_tiled_layer([False] * 40 + [True] * 40, 8.0, 8.0, 40, 1)
player = world.add_actor((50.0, 0.0), 8, 8)
print(world.move_v(player, 3.0))   # False: the floor is directly below
print(world.actor_pos(player))     # (50.0, 0.0)
```

### `quadkit.life`

This module implements Conway's Game of Life on a bounded grid. The grid is a
list of rows of `CellState.ALIVE` / `CellState.DEAD`.

- `next_state(cell, neighbors)` applies the rules to a single cell.
- `count_neighbors(cells, x, y)` counts the live neighbours of a cell. Cells
  outside the grid count as dead.
- `next_generation(cells)` returns a new grid and leaves the input unchanged.
- `random_grid(width, height, rng=None)` makes each cell alive with probability 1/5.

### `quadkit.snake`

`SnakeGame(rng=None, clock=time.monotonic)` plays on a 16x16 board.

- `turn(direction)` changes the heading. The direction is one of `UP`, `DOWN`,
  `LEFT`, `RIGHT`. A turn that would reverse the snake is ignored, as is any
  turn after game over.
- `advance()` moves the snake one square.
- `update(now)` advances only when the step interval has passed. It returns
  `True` if it took a step.
- `restart()` starts a new game.
- Eating fruit adds 100 to `score` and multiplies the step interval (`speed`)
  by 0.9. Leaving the board or hitting the body sets `game_over`.

### `quadkit.particle_config` and `quadkit.emitter`

`particle_config` holds the data that describes an emitter:

- `EmitterConfig` sets lifetime, amount, explosiveness, direction and spread,
  velocity, size, gravity, `one_shot`, `local_coords` and more.
- `Curve` is built from key points with linear `Interpolation`.
  `Curve.batch()` samples it into a `BatchedCurve`, and `BatchedCurve.get(t)`
  reads a value from it.
- The emission shapes are `PointShape`, `RectShape` and `SphereShape`. Each has
  `gen_random_point(rng)`.
- `ColorCurve` gives start, middle and end colors.
- `BlendMode` is either `ALPHA` or `ADDITIVE`.
- `AtlasConfig.from_range(n, m, start, stop)` selects the sprite-sheet frames
  to use.

`emitter` simulates particles:

- `Emitter(config, rng=None)` spawns `Particle`s.
  - `update(dt)` moves, colors, resizes and ages the particles, and drops the
    expired ones.
  - `step(pos, dt)` places the emitter at `pos` and then updates it.
  - `emit(pos, n)` spawns `n` particles immediately.
  - `reset()` and `rebuild_size_curve()` are also available.
  - Live particles are in `emitter.particles`.
- `EmittersCache(config, rng=None)` runs many short-lived emitters that share
  one config.
  - `spawn(pos)` starts an emitter, reusing an idle one when one is available.
  - `update(dt)` updates all active emitters and returns finished ones to the
    cache.
  - `active` and `cached` report what is running and what is idle.

```python
from quadkit.emitter import Emitter
from quadkit.particle_config import EmitterConfig

emitter = Emitter(EmitterConfig(amount=10, lifetime=0.5))
for _ in range(30):
    emitter.step((100.0, 100.0), 1 / 60)
print(len(emitter.particles))
```

## What it does not do

quadkit has no window, rendering, input, audio, textures, fonts, shaders or
UI. It has no command-line program either. Cameras return matrices, and
emitters return particle positions, sizes, colors and atlas UVs. Drawing them
and reading the keyboard or mouse is left to the application.

## Running the tests

    pip install "quadkit[test]"
    pytest