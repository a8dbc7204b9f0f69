# gbtetris

A falling-block puzzle game in the style of a handheld console title. Its
display is 160×144 pixels, built from 8×8 tiles: a background tile map with
palette attributes, and hardware-style sprites. It runs in a window drawn with
pygame.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Playing

```
gbtetris
```

Options:

- `--scale N`: window scale factor (default 3, at least 1).
- `--frames N`: stop after this many frames (default: run until the window is closed).

Keys: arrow keys for the d-pad, Z for A, X for B, Backspace for Select and
Enter for Start. The game runs at 60 frames per second.

The game starts in the splash state. Press **Start** to begin. After that, each frame:

- **Left / Right** move the falling piece one 8-pixel cell, staying inside the well.
- **Up** sends the piece back to the top row and marks the first cell of the
  collision map. The UI then shows tile 5 at column 1 of the top row.
- **Down** held when the fall timer runs out keeps the piece where it is for
  that step.

The fall timer counts 16 steps of 4 frames each, so the piece falls one cell
every 64 frames until it reaches the bottom of the screen. The score, level
and line counters are drawn in the panel on the right while they stay below 10.

Input is read at the end of each frame and acted on in the next one.

## What the game does not do

Only the J piece is drawn, and it always has the same orientation. There is no
rotation, no landing on other blocks, no line clearing, no scoring, no level
progression and no game over. The title, settings and game-over states exist in
`GameState`, but they have no screens of their own. `gbtetris.timer.Timer` is
provided as a helper, and the game loop does not use it.

## Using the pieces from code

The game loop lives in `gbtetris.app.Game`. You can pass it a
`gbtetris.graphics.Display`; if you do not, it creates one. Call
`Game.frame(buttons)` once per frame with a bitmask of held
`gbtetris.joypad.Button` values. It returns the current `GameState`. To get the
picture, call `game.display.render()`, which returns a 160×144 `pygame.Surface`.

The scene logic is in `gbtetris.game_scene.GameScene`, with the methods
`update`, `draw_ui` and `draw_piece`. Its seed defaults to 8. The helpers are:

- `gbtetris.joypad`: `Button` (an `IntFlag`) and `Joypad`, which gives
  edge-detected input through `pressed`, `just_pressed` and `read`.
- `gbtetris.timer.Timer`: a frame-driven countdown with an 8-bit fraction
  (`start`, `update`, `pause`, `resume`, `status`, `remaining`).
- `gbtetris.gbmath`: `multiplication` and `calculate_index` with 8-bit
  wrap-around. `multiplication(a, b)` returns `a` doubled for any nonzero `b`
  and `a` unchanged for `b == 0`.
- `gbtetris.graphics`: `rgb8` (15-bit colours), `decode_tile` and `decode_tiles`
  (2bpp tile data), and `Display`, which holds tiles, palettes, the 32×32
  background map and 40 sprites, and renders them.
- `gbtetris.assets`: the `Asset` class and the built-in `GAME_SCENE`
  background and `TETRAMINO_GRAPHIC` block sprite.

## Running the tests

```
pytest
```