# invaders

A small space-invaders style arcade game written with pygame.

Your ship sits near the bottom of a 1024×768 window. Above it is a formation
of seventy enemy ships in ten columns and seven rows. From the top down, the
rows are one boss row, one knight row, one mid row and four rows of small
fry. The formation sways slowly from side to side, and the enemies drop beams
that fall off the bottom of the screen. Shoot an enemy and it disappears in
an explosion.

## Installing

```
pip install .
```

## Playing

```
invaders
invaders --assets /path/to/game
```

The game opens on the title screen. It loads its images from
`Assets/画像/` below the directory given with `--assets`. If you leave the
option out, that directory is the current working directory. The images it
looks for are `tiny_ship5.png` (the player), `tiny_ship10.png`,
`tiny_ship16.png`, `tiny_ship9.png` and `tiny_ship18.png` (the enemy types),
`laserBlue01.png` (your shot), `ebeams.png` (enemy beams), `explosion.png`
(a 3×3 sheet of 48-pixel explosion frames) and `bg.png` (the background). An
image that cannot be loaded is simply not drawn, so the game still runs
without them.

| Key         | Where            | Action                                        |
|-------------|------------------|-----------------------------------------------|
| Space       | title screen     | start a game                                  |
| Left/Right  | playing          | move the ship                                 |
| Space       | playing          | fire; at most one shot every half second, and up to five shots in flight |
| G           | playing          | go to the game-over screen                    |
| R           | game-over screen | start a new game                              |
| T           | game-over screen | back to the title                             |
| Escape      | anywhere         | quit                                          |

## What the game does not do

Enemy beams never hit the ship. There is no score and there are no lives. The
game does not end when every enemy is gone. The only way to reach the
game-over screen is to hold G.

## Using the pieces

You can also drive the game objects without opening a window.

- `invaders.app.Game(asset_dir)` runs the screens.
  - `Game.step(pressed, dt)` advances the game by one frame, given the key
    codes held down and the seconds that have passed. It returns `False` once
    Escape is held.
  - `Game.draw(surface)` renders the frame onto any pygame surface.
- `invaders.world.World` holds the live objects, the frame time and a
  `Keyboard`. Its methods are:
  - `add`, which queues an object;
  - `flush_new`, `update`, `draw` and `reap`, which together make up one
    frame;
  - `clear`;
  - `image` and `image_frames`, which load images and cache them.
- `invaders.input.Keyboard` works out, frame by frame, which keys went down,
  which came up and how long each has been held.
- `invaders.stage.Stage` builds the player and the enemy formation, and
  removes enemies that are struck by a shot. `invaders.stage.intersect_rect`
  tests two `invaders.geometry.Rect` values for overlap. Rectangles that only
  touch at an edge do not count as overlapping.
- `invaders.scene.SceneTransition` is a title object that creates a `Stage`
  once S is held. The `invaders` command does not use it.

## Running the tests

```
pip install ".[test]"
pytest
```