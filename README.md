# xiangqi-engine

A small engine for Chinese chess (xiangqi) with no dependencies. It knows where
the 32 pieces start and how each piece type moves. It keeps a history of moves
so they can be taken back. It also has a minimax computer player with
alpha-beta style cut-offs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Coordinates and pieces

The board has 9 columns (`col` 0–8) and 10 rows (`row` 0–9). Red stones have
ids 0–15. They start on rows 0–3 and advance towards higher rows. Black stones
have ids 16–31 and start on rows 6–9. Each `Stone` (in `xiangqi_engine.stone`)
has these attributes:

- `id`
- `type`, a `PieceType`
- `is_red`
- `row` and `col`
- `dead`
- `selected`

| PieceType | Piece          |
|-----------|----------------|
| `CHE`     | chariot (rook) |
| `MA`      | horse          |
| `XIANG`   | elephant       |
| `SHI`     | advisor        |
| `JIANG`   | general        |
| `PAO`     | cannon         |
| `BING`    | soldier        |

`Stone(id)` creates piece `id` on its starting square. `Stone.reset(id)` puts a
stone back into that starting state. Both raise `ValueError` for an id outside
0–31.

## Playing a game

```python
from xiangqi_engine.board import Board

board = Board()

# Red moves first: advance the middle soldier from (col 4, row 3) to row 4.
assert board.move_stone(4, 3, 4, 4)

# An illegal move is refused and the board is left as it was.
assert not board.move_stone(0, 0, 1, 1)

# Take the last move back; the MoveRecord of that move is returned.
record = board.undo_move()
```

Useful members of `Board`:

- `move_stone(from_col, from_row, to_col, to_row)` makes a move if the rules
  allow it. It returns `True` or `False`.
- `can_move(move_id, kill_id, col, row)` checks one candidate move without
  making it. `kill_id` is the id of the stone that would be taken, or `-1`.
- `get_piece_id(col, row)` returns the id of the living stone on a square, or
  `-1`.
- `is_piece(col, row)` is true if any stone is recorded at that square,
  captured stones included.
- `get_stone_by_id(id)` returns a stone, or `None` for an unknown id.
- `click_position(cell_size, x, y)` maps a pixel position to the nearest
  `(col, row)`.
- `try_select_stone(col, row)` picks a stone of the side to move and stores it
  in `active_id`. `set_selected_piece_id(id)` and `clear_selection()` set the
  `selected` flag on stones.
- `undo_move()` / `back_one()` take back the last move. They also work after
  the game has ended. When there is no move to take back they return `None`.
  `relive_stone(id)` brings a captured stone back.
- `init_game()` clears the history and resets every stone.
- State is available through `stones`, `history`, `is_red_turn`,
  `is_game_over` and `selected_piece_id`.

A game is over once a general has been captured.

### Events

`Board` and `Stone` report changes through `Signal` objects from
`xiangqi_engine.events`. Connect a callable with `connect` and remove it with
`disconnect`.

`Board` has these signals:

- `game_ended`, which passes the winner as `"红方"` (red) or `"黑方"` (black)
- `red_turn_changed`
- `stones_changed`
- `undo_performed`
- `selection_cleared`

Each `Stone` has these signals:

- `row_changed`
- `col_changed`
- `dead_changed`
- `selected_changed`

```python
board.game_ended.connect(lambda winner: print("winner:", winner))
```

## Playing against the computer

```python
from xiangqi_engine.ai import AIGameBoard

game = AIGameBoard()      # the computer plays black by default
game.ai_level = 2         # search depth in plies (default 3, minimum 1)
game.start_new_game()

game.move_stone(4, 3, 4, 4)   # red's move
step = game.computer_move()   # black replies; returns the Step played
```

`AIGameBoard` has these members:

- `ai_is_red` sets the colour the computer plays. `ai_level` sets the search
  depth. Setting `ai_level` below 1 raises `ValueError`.
- `computer_move()` plays the best move it finds immediately, when it is the
  computer's turn and the game is not over. Otherwise it returns `None`. After
  a move it emits `computer_moved` with these values, in this order:
  - move id
  - source column
  - source row
  - target column
  - target row
  - captured id
- `best_move()` returns the best `Step` without playing it. A `Step` has
  `move_id`, `kill_id`, `row_from`, `col_from`, `row_to` and `col_to`.
- `score()` gives the material balance from the computer's point of view. Each
  piece type has a value, listed in `PIECE_VALUES`.
- `possible_moves()` lists candidate steps for the red pieces when `ai_is_red`
  differs from `is_red_turn`, and for the black pieces otherwise.

## Move history

Each move produces a frozen `MoveRecord` dataclass from
`xiangqi_engine.moverecord`. It holds these fields:

- `move_id`
- `from_row`
- `from_col`
- `to_row`
- `to_col`
- `kill_id`
- `was_dead`

`MoveRecord.describe()` (also `str()`) returns a one-line summary.

## What it does not do

This is a library only:

- It has no graphical board, no command-line program and no way to save or load
  games.
- Moves are checked only against each piece's movement rules. Check and
  checkmate are not detected.
- A game ends only when a general is actually captured.