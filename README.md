# minibill

A small top-down billiard table: one cue ball, six object balls and six
pockets on a 15 × 8 table. Press and hold a mouse button to charge a shot,
then release it to strike the cue ball toward the pointer. Balls bounce off
the cushions, losing some speed, collide with each other and slow down over
time. A potted object ball leaves the table; potting the cue ball resets it.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
minibill
```

This opens a 1280 × 720 window and runs the game at 60 frames per second.

Controls:

- **Left or right mouse button down** – start charging a shot (the magenta
  bar at the bottom fills up over one second).
- **Left or right mouse button up** – shoot the cue ball toward the pointer
  with the charged strength.
- **Space** – reset the table.
- **Escape** or closing the window – quit.

A shot can only be charged and fired while all balls are at rest.

## Using it from Python

The modules can be driven directly, without opening a window:

```python
from minibill.game import Game

game = Game()
game.init()
game.mouse_button_pressed(0.0, 0.0)
game.update(1.0)                      # fully charged
game.mouse_button_released(4.0, 0.0)  # shoot to the right
for _ in range(120):
    game.update(1 / 60)
print(game.table.positions[0])        # where the cue ball now is
print(game.table.is_pocketed)         # which balls have been potted
game.deinit()
```

- `minibill.vector.Vector2` – a small mutable 2D vector with `length()`,
  `normalize()`, `invert_x()` and `invert_y()`.
- `minibill.scene.Scene` – the meshes, the dark frame around the table and
  the progress bar; `draw(surface)` renders it onto any `pygame.Surface`, so
  it can also be drawn off screen. `screen_to_world_x` and
  `screen_to_world_y` map screen fractions to the 16 × 9 world view.
- `minibill.game.Table` and `minibill.game.Game` – ball positions and
  velocities, cushions, ball-to-ball collisions, pockets and shot charging.
  `Game.update(dt)` advances everything by `dt` seconds.
- `minibill.engine.Engine` – owns the window and the frame loop; its
  `set_target_fps` clamps the frame rate to between 5 and 200 frames per
  second, `handle_event` feeds one pygame event to the game, and `run()`
  opens the window and plays until it is closed. `minibill.engine.main` is
  what the `minibill` command calls.

## What it does not do

There is no scoring, no turns or players, no sound and no saved state: the
table simply plays out each shot until the balls stop.