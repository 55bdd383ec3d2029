# samtris

A small falling-block puzzle game. The game logic (playfield, tetrominoes,
gravity, input handling) is plain Python and can be driven and tested
without a window; the front end draws it with pygame.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
samtris
```

The `samtris` command opens a window titled "SAMTris" with a 10 x 20
playfield. Pieces fall on their own and lock in place when they can no
longer move down; a new piece then appears at the top.

While playing:

| Key             | Action                        |
|-----------------|-------------------------------|
| Left / Right    | Move the piece sideways       |
| Down            | Move the piece one row down   |
| Up or X         | Rotate clockwise              |
| Z               | Rotate counterclockwise       |
| Space           | Drop the piece to the bottom  |
| Escape          | Quit                          |

When a new piece cannot be placed the game is over and a red box appears
over the playfield. Press Space, Return or Escape to clear the playfield
and start a new game. Closing the window quits at any time.

The block images are read from `assets/blocks.png`, relative to the
current directory, unless another file is given:

```
samtris --texture path/to/blocks.png
```

The image holds one 16 x 16 tile per piece type, side by side, in the
order I, O, T, Z, S, J, L.

## What the game does not do

Completed rows stay on the playfield: `Playfield.find_full_lines()` reports
them, but the game does not remove them. There is no score, no next-piece
preview, and the fall speed stays at level 0 for the whole game.

## Using the game core

The core can be driven directly, for example to script or test play:

```python
from datetime import timedelta

from samtris.dimensions import Dimensions
from samtris.playfield import Playfield
from samtris.generators import RandomTetrominoGenerator
from samtris.game import Game
from samtris.events import GameInput
from samtris.display import RecordingDisplay

game = Game(Playfield(Dimensions(10, 20)), RandomTetrominoGenerator())
game.spawn_tetromino()
game.handle_input(GameInput.MOVE_LEFT)
game.handle_input(GameInput.DROP)
game.update(timedelta(milliseconds=900))

display = RecordingDisplay()
game.draw(display)
print(display.drawn_blocks)
```

- `Game.handle_input(game_input)` applies a `GameInput` and returns whether
  the piece moved. `GameInput.START_GAME` clears the playfield and spawns a
  new piece.
- `Game.update(delta_time)` takes a `datetime.timedelta` and moves the
  piece down one row each time the gravity interval (848 ms at level 0)
  has passed, locking it if it cannot move.
- `Game.game_state` is `GameState.PLAYING` or `GameState.GAME_OVER`;
  `Game.current_tetromino` and `Game.playfield` expose the rest of the
  state.
- `RandomTetrominoGenerator` accepts an optional `random.Random` for
  repeatable sequences; `FixedTetrominoGenerator` always yields one type.

Any subclass of `samtris.display.Display` (with `clear`, `draw_block`,
`draw_rectangle` and `present`) can be passed to `Game.draw`.
`RecordingDisplay` records the calls it receives, and
`samtris.pygame_display.PygameDisplay` draws onto a pygame surface.