# riverraid

A small River Raid style arcade game drawn with pygame. Your plane sits near
the bottom of a river that runs between two green banks. Tanks, bridges,
ships, jets and helicopters scroll down towards you, together with a fuel
tank. Jets fly sideways once they are on screen, and helicopters patrol back
and forth between the river banks.

## Installing

```
pip install .
```

## Playing

```
riverraid
```

Options:

- `--frames N`: stop after `N` frames (by default the game runs until the
  window is closed)
- `--seed N`: seed the random number generator, so enemy waves and fuel
  positions repeat from run to run
- `--images DIR`: directory holding the toolbar icons (default: the working
  directory)

Controls:

- Left / Right arrow: move the plane 5 pixels sideways
- Up arrow: scroll the river forward faster for that frame
- Down arrow: scroll the river back a little for that frame
- Space: fire a bullet
- Closing the window ends the game

Flying over the fuel tank collects fuel and shows "Fuel Collected" on the
status bar. When a bullet touches an enemy, a bullet is taken out of play; a
bullet that touches the fuel tank sends it back above the top of the river at
a new random column. When every enemy of a wave has scrolled off the bottom
of the screen, a new wave is spawned above it.

The toolbar at the top shows the icons `Restart.jpg`, `Pause.jpg`,
`Resume.jpg`, `Load.jpg` and `Save.jpg` from the image directory, each one
only if its file exists.

## What the game does not do

- The status bar always shows the same figures (points 0, game speed 5,
  lives 5, fuel gauge 50); it does not track the game.
- There is no score, the plane does not lose lives when it meets an enemy,
  and fuel is never used up, so the game has no end other than closing the
  window or reaching `--frames`.
- Enemies are not destroyed by bullets; they stay on screen until they
  scroll away.
- The toolbar icons are drawn only; clicking them does nothing, and there is
  no pausing, saving or loading.

## Using it from Python

The game draws on any `riverraid.canvas.Canvas`; `PygameCanvas` opens a real
window and can be used as a context manager.

```python
import random

from riverraid.canvas import PygameCanvas
from riverraid.config import GameConfig
from riverraid.game import Game

config = GameConfig()
with PygameCanvas(config.wind_width, config.wind_height, "River Raid") as canvas:
    game = Game(canvas, config, random.Random(1))
    game.run(max_frames=500)
```

`Game.step(key)` advances one frame for a given key name (`"left"`,
`"right"`, `"up"`, `"down"`, `" "` or `None`) and returns `False` for
`"quit"`. `Game.run(max_frames)` returns the number of frames played.
`GameConfig` holds the window size, bar heights, colours, speeds and the
river's edges; it is frozen and rejects impossible values with `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```