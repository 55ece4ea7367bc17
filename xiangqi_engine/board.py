"""Board state and move rules for xiangqi."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .events import Signal
from .moverecord import MoveRecord
from .stone import STONE_COUNT, PieceType, Stone

log = logging.getLogger(__name__)

RED_WINNER = "红方"
BLACK_WINNER = "黑方"

MAX_ROW = 9
MAX_COL = 8

# Knight jumps as (d_col, d_row) together with the "leg" square that blocks them.
_KNIGHT_JUMPS = (
    ((1, 2), (0, 1)),
    ((2, 1), (1, 0)),
    ((2, -1), (1, 0)),
    ((1, -2), (0, -1)),
    ((-1, -2), (0, -1)),
    ((-2, -1), (-1, 0)),
    ((-2, 1), (-1, 0)),
    ((-1, 2), (0, 1)),
)


def _on_board(col: int, row: int) -> bool:
    return 0 <= row <= MAX_ROW and 0 <= col <= MAX_COL


def _round_half_away(value: float) -> int:
    return int(value + 0.5) if value >= 0 else int(value - 0.5)


class Board:
    """Thirty-two stones, whose turn it is, and the history of moves.

    Red pieces start on rows 0-3 and advance towards higher rows; black
    pieces start on rows 6-9. Coordinates are ``(col, row)`` with columns
    0-8 and rows 0-9.
    """

    def __init__(self) -> None:
        self.game_ended = Signal()
        self.red_turn_changed = Signal()
        self.stones_changed = Signal()
        self.undo_performed = Signal()
        self.selection_cleared = Signal()

        self._stones: List[Stone] = [Stone(i) for i in range(STONE_COUNT)]
        self._history: List[MoveRecord] = []
        self._red_turn = True
        self._game_over = False
        self._active_id = -1
        self._selected_piece_id = -1

        for stone in self._stones:
            log.debug("created %r", stone)

    # ------------------------------------------------------------------ state

    @property
    def stones(self) -> List[Stone]:
        """A copy of the list of all stones, indexed by id."""
        return list(self._stones)

    @property
    def history(self) -> Tuple[MoveRecord, ...]:
        """Moves made so far, oldest first."""
        return tuple(self._history)

    @property
    def is_red_turn(self) -> bool:
        return self._red_turn

    @is_red_turn.setter
    def is_red_turn(self, value: bool) -> None:
        if self._red_turn != value:
            self._red_turn = value
            self.red_turn_changed.emit()

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def active_id(self) -> int:
        """Id of the stone picked by :meth:`try_select_stone`, or -1."""
        return self._active_id

    @property
    def selected_piece_id(self) -> int:
        """Id of the stone marked as selected, or -1."""
        return self._selected_piece_id

    def init_game(self) -> None:
        """Clear history and put every stone back at its starting square."""
        self._history.clear()
        for stone in self._stones:
            stone.reset(stone.id)
        self._red_turn = True
        self._game_over = False
        self._active_id = -1
        log.debug("game initialised")
        self.stones_changed.emit()

    # ---------------------------------------------------------------- queries

    def _stone(self, id: int) -> Stone:
        if not 0 <= id < STONE_COUNT:
            raise IndexError(f"no stone with id {id}")
        return self._stones[id]

    def get_stone_by_id(self, id: int) -> Optional[Stone]:
        """Return the stone with *id*, or None if there is none."""
        if 0 <= id < STONE_COUNT:
            return self._stones[id]
        log.warning("invalid stone id: %s", id)
        return None

    def click_position(self, cell_size: int, x: float, y: float) -> Tuple[int, int]:
        """Map a pixel position to the nearest ``(col, row)`` intersection."""
        return _round_half_away(x / cell_size), _round_half_away(y / cell_size)

    def is_piece(self, col: int, row: int) -> bool:
        """True if any stone, captured ones included, sits at ``(col, row)``."""
        return any(s.col == col and s.row == row for s in self._stones)

    def get_piece_id(self, col: int, row: int) -> int:
        """Id of the live stone at ``(col, row)``, or -1."""
        if not _on_board(col, row):
            return -1
        for stone in self._stones:
            if not stone.dead and stone.col == col and stone.row == row:
                return stone.id
        return -1

    # -------------------------------------------------------------- selection

    def try_select_stone(self, col: int, row: int) -> bool:
        """Pick the stone at ``(col, row)`` if it belongs to the side to move."""
        id = self.get_piece_id(col, row)
        if id == -1:
            return False
        if self._red_turn != self._stones[id].is_red:
            return False
        self._active_id = id
        self.stones_changed.emit()
        return True

    def set_selected_piece_id(self, id: int) -> None:
        """Mark stone *id* as selected and unmark the previous one."""
        if self._selected_piece_id == id:
            return
        if self._selected_piece_id != -1:
            old = self.get_stone_by_id(self._selected_piece_id)
            if old is not None:
                old.selected = False
        self._selected_piece_id = id
        if id != -1:
            new = self.get_stone_by_id(id)
            if new is not None:
                new.selected = True

    def clear_selection(self) -> None:
        self.set_selected_piece_id(-1)

    # ------------------------------------------------------------------ moves

    def move_stone(self, from_col: int, from_row: int, to_col: int, to_row: int) -> bool:
        """Move the stone at the source square if the rules allow it."""
        move_id = self.get_piece_id(from_col, from_row)
        kill_id = self.get_piece_id(to_col, to_row)
        if move_id == -1:
            return False
        if not self.can_move(move_id, kill_id, to_col, to_row):
            return False

        mover = self._stones[move_id]
        mover.col = to_col
        mover.row = to_row

        record = MoveRecord(
            move_id=move_id,
            from_row=from_row,
            from_col=from_col,
            to_row=to_row,
            to_col=to_col,
            kill_id=kill_id,
            was_dead=self._stones[kill_id].dead if kill_id != -1 else False,
        )
        self._history.append(record)
        log.debug("recorded %s, %d moves in total", record, len(self._history))

        if kill_id != -1:
            victim = self._stones[kill_id]
            victim.dead = True
            if victim.type == PieceType.JIANG:
                self._game_over = True
                self.game_ended.emit(RED_WINNER if mover.is_red else BLACK_WINNER)

        self._red_turn = not self._red_turn
        self._active_id = -1
        self.stones_changed.emit()
        self.clear_selection()
        return True

    def can_move(self, move_id: int, kill_id: int, col: int, row: int) -> bool:
        """Whether stone *move_id* may go to ``(col, row)``, taking *kill_id* (or -1)."""
        mover = self._stone(move_id)
        if kill_id != -1 and mover.is_red == self._stone(kill_id).is_red:
            return False
        rule = {
            PieceType.CHE: self._can_move_che,
            PieceType.MA: self._can_move_ma,
            PieceType.PAO: self._can_move_pao,
            PieceType.BING: self._can_move_bing,
            PieceType.JIANG: self._can_move_jiang,
            PieceType.SHI: self._can_move_shi,
            PieceType.XIANG: self._can_move_xiang,
        }.get(mover.type)
        if rule is None:
            return False
        return rule(mover, kill_id, col, row)

    def _pieces_between(self, mover: Stone, col: int, row: int) -> int:
        """Count live stones strictly between *mover* and ``(col, row)`` on a line."""
        if mover.row == row:
            low, high = sorted((mover.col, col))
            return sum(self.get_piece_id(c, row) != -1 for c in range(low + 1, high))
        low, high = sorted((mover.row, row))
        return sum(self.get_piece_id(col, r) != -1 for r in range(low + 1, high))

    def _can_move_che(self, mover: Stone, kill_id: int, col: int, row: int) -> bool:
        if not _on_board(col, row):
            return False
        if mover.row != row and mover.col != col:
            return False
        return self._pieces_between(mover, mover.col if mover.row != row else col, row) == 0

    def _can_move_ma(self, mover: Stone, kill_id: int, col: int, row: int) -> bool:
        if not _on_board(col, row):
            return False
        for (d_col, d_row), (leg_col, leg_row) in _KNIGHT_JUMPS:
            if mover.col + d_col != col or mover.row + d_row != row:
                continue
            if self.get_piece_id(mover.col + leg_col, mover.row + leg_row) != -1:
                return False
            target = self.get_piece_id(col, row)
            if target != -1 and self._stones[target].is_red == mover.is_red:
                return False
            return True
        return False

    def _can_move_pao(self, mover: Stone, kill_id: int, col: int, row: int) -> bool:
        if not _on_board(col, row):
            return False
        if mover.row != row and mover.col != col:
            return False
        screens = self._pieces_between(mover, col, row)
        if kill_id == -1:
            return screens == 0 and self.get_piece_id(col, row) == -1
        if screens != 1:
            return False
        if not 0 <= kill_id < STONE_COUNT:
            return False
        victim = self._stones[kill_id]
        if victim.col != col or victim.row != row:
            return False
        return victim.is_red != mover.is_red

    def _can_move_bing(self, mover: Stone, kill_id: int, col: int, row: int) -> bool:
        if not _on_board(col, row):
            return False
        if abs(row - mover.row) + abs(col - mover.col) != 1:
            return False
        if mover.is_red:
            if row < mover.row:
                return False
            if mover.row < 5 and col != mover.col:
                return False
        else:
            if row > mover.row:
                return False
            if mover.row > 4 and col != mover.col:
                return False
        return True

    @staticmethod
    def _in_palace(is_red: bool, col: int, row: int) -> bool:
        if not 3 <= col <= 5:
            return False
        return 0 <= row <= 2 if is_red else 7 <= row <= 9

    def _opposes(self, mover: Stone, kill_id: int) -> bool:
        return kill_id == -1 or self._stones[kill_id].is_red != mover.is_red

    def _can_move_jiang(self, mover: Stone, kill_id: int, col: int, row: int) -> bool:
        if not _on_board(col, row):
            return False
        if abs(row - mover.row) + abs(col - mover.col) == 1:
            if not self._in_palace(mover.is_red, col, row):
                return False
            return self._opposes(mover, kill_id)
        # Generals facing each other on an open file: the mover takes the other.
        if kill_id == -1 or self._stones[kill_id].type != PieceType.JIANG:
            return False
        if col != mover.col:
            return False
        return self._pieces_between(mover, col, row) == 0

    def _can_move_shi(self, mover: Stone, kill_id: int, col: int, row: int) -> bool:
        if abs(row - mover.row) != 1 or abs(col - mover.col) != 1:
            return False
        if not self._in_palace(mover.is_red, col, row):
            return False
        return self._opposes(mover, kill_id)

    def _can_move_xiang(self, mover: Stone, kill_id: int, col: int, row: int) -> bool:
        if abs(row - mover.row) != 2 or abs(col - mover.col) != 2:
            return False
        eye_col = (mover.col + col) // 2
        eye_row = (mover.row + row) // 2
        if self.get_piece_id(eye_col, eye_row) != -1:
            return False
        if mover.is_red and row > 4:
            return False
        if not mover.is_red and row < 5:
            return False
        return self._opposes(mover, kill_id)

    # ------------------------------------------------------------------- undo

    def relive_stone(self, id: int) -> None:
        """Bring a captured stone back; -1 is ignored."""
        if id == -1:
            return
        stone = self.get_stone_by_id(id)
        if stone is not None:
            stone.dead = False

    def back_one(self) -> Optional[MoveRecord]:
        """Take back the last move and return its record, or None if there is none."""
        if not self._history:
            return None
        record = self._history.pop()
        log.debug("taking back %s", record)

        self.relive_stone(record.kill_id)
        moved = self.get_stone_by_id(record.move_id)
        if moved is not None:
            moved.row = record.from_row
            moved.col = record.from_col

        self._red_turn = not self._red_turn
        self._game_over = False

        self.stones_changed.emit()
        self.clear_selection()
        self.undo_performed.emit()
        return record

    def undo_move(self) -> Optional[MoveRecord]:
        """Take back the last move, even after the game has ended."""
        log.debug(
            "undo requested: %d moves, game over=%s", len(self._history), self._game_over
        )
        return self.back_one()