# edgepaddle

A small arcade game. A ball starts in the middle of an 800×600 window
and moves faster over time. You put a paddle on one edge of the
window. When the ball touches the paddle, it takes a new random
direction. The round ends when the ball leaves the window through any
edge. The time you survived is added to a score file, and the whole
score list prints to the terminal.

## Installation

```
pip install .
```

This needs `pygame`.

## Playing

```
edgepaddle
```

If you do not give a name with `--name`, the game asks for one in the
terminal. Only the first word you type is kept. Then the game window
opens.

Options (`edgepaddle --help`):

- `--name NAME` sets the player name, so the game does not ask for it.
- `--scores PATH` sets the file that scores are appended to. The
  default is `scores.txt` in the current directory.

### Controls

| Key            | Action                                        |
|----------------|-----------------------------------------------|
| `W`            | Put the paddle on the top edge                |
| `S`            | Put the paddle on the bottom edge             |
| `A`            | Put the paddle on the left edge               |
| `D`            | Put the paddle on the right edge              |
| `Left`/`Right` | Move a top or bottom paddle                   |
| `Up`/`Down`    | Move a left or right paddle                   |

Choosing an edge puts the paddle in the middle of that edge. At the
start the paddle is on the top edge. After a round ends there is no
paddle until you choose an edge again. The background colour changes
slowly while you play.

If a file named `paddle_texture.jpg` is in the current directory, it is
drawn on the paddle. Otherwise the paddle is a plain white bar.

### Scores

Each finished round appends a line `name seconds` to the score file.
When a round ends, the game prints `Game Over! Time survived: ...` and
then the score list, in the order the lines appear in the file.

## Using it as a library

The game rules work without a display:

- `edgepaddle.world.GameState` holds the ball, the paddle, the speed,
  the time survived and the background colour.
  - `step(dt, controls)` advances the game by `dt` seconds. It returns
    the time survived when the ball left the window, and in that case
    resets the round. Otherwise it returns `None`.
  - `choose_side(side)` puts the paddle on an edge. It raises
    `ValueError` for `Side.NONE`.
  - `reset_ball()`, `ball_rect()` and `paddle_rect()` work as their
    names say. `paddle_rect()` returns `None` when no edge is chosen.
- `edgepaddle.world.Controls` lists the arrow keys held during a frame.
- `edgepaddle.world.Side` names the edges.
- `edgepaddle.world.Rect` is a rectangle, with `intersects`.
- `edgepaddle.world.random_angle` picks a random angle.
- `edgepaddle.scores` provides `ScoreEntry`, `save_score`,
  `load_scores` and `format_score_list`.
  - `load_scores` returns an empty list when the file is missing.
  - It stops reading at the first entry that is not a name followed by
    a number.

## What it does not do

- There is no menu and no in-window score screen. Scores appear only
  in the terminal.
- The score list is not sorted and is never trimmed.

## Running the tests

```
pip install .[test]
pytest
```