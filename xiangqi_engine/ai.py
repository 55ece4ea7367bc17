"""A minimax opponent that plays one side of the board."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .board import Board
from .events import Signal
from .stone import STONE_COUNT, PieceType

log = logging.getLogger(__name__)

# Material value of each piece kind, used by the static evaluation.
PIECE_VALUES = {
    PieceType.CHE: 1000,
    PieceType.MA: 499,
    PieceType.XIANG: 501,
    PieceType.SHI: 200,
    PieceType.JIANG: 15000,
    PieceType.PAO: 100,
    PieceType.BING: 100,
}

_SCORE_FLOOR = -300000
_SCORE_CEILING = 300000

_HALF = STONE_COUNT // 2


@dataclass(frozen=True)
class Step:
    """A candidate move: stone *move_id* goes from one square to another.

    ``kill_id`` is the id of the stone taken, or -1.
    """

    move_id: int
    kill_id: int
    row_from: int
    col_from: int
    row_to: int
    col_to: int


class AIGameBoard(Board):
    """A board on which one side is played by a depth-limited minimax search."""

    def __init__(self) -> None:
        super().__init__()
        self.ai_is_red_changed = Signal()
        self.ai_level_changed = Signal()
        self.computer_moved = Signal()
        self._ai_is_red = False
        self._ai_level = 3

    @property
    def ai_is_red(self) -> bool:
        return self._ai_is_red

    @ai_is_red.setter
    def ai_is_red(self, value: bool) -> None:
        if self._ai_is_red != value:
            self._ai_is_red = value
            self.ai_is_red_changed.emit()

    @property
    def ai_level(self) -> int:
        """Search depth in plies; at least 1."""
        return self._ai_level

    @ai_level.setter
    def ai_level(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"ai level must be at least 1, got {value}")
        if self._ai_level != value:
            self._ai_level = value
            self.ai_level_changed.emit()

    def start_new_game(self) -> None:
        """Reset the board to the starting position."""
        self.init_game()

    def computer_move(self) -> Optional[Step]:
        """Play the search's best move if it is the computer's turn.

        Returns the step played, or None when the game is over, it is not
        the computer's turn, or there is no move at all. ``computer_moved``
        is emitted with the move id, source column and row, target column
        and row, and the captured id.
        """
        if self.is_game_over:
            return None
        if self.is_red_turn != self._ai_is_red:
            return None
        step = self.best_move()
        if step is None:
            return None
        self.move_stone(step.col_from, step.row_from, step.col_to, step.row_to)
        self.computer_moved.emit(
            step.move_id,
            step.col_from,
            step.row_from,
            step.col_to,
            step.row_to,
            step.kill_id,
        )
        return step

    def best_move(self) -> Optional[Step]:
        """Search ``ai_level`` plies deep and return the best step, or None."""
        best: Optional[Step] = None
        best_score = _SCORE_FLOOR
        for step in reversed(self.possible_moves()):
            self._fake_move(step)
            try:
                value = self._min_score(self._ai_level - 1, best_score)
            finally:
                self._unfake_move(step)
            if value > best_score:
                best = step
                best_score = value
        return best

    def possible_moves(self) -> List[Step]:
        """Every legal step for the side the search is considering."""
        red_side = self._ai_is_red != self.is_red_turn
        ids = range(0, _HALF) if red_side else range(_HALF, STONE_COUNT)
        steps: List[Step] = []
        for move_id in ids:
            stone = self._stones[move_id]
            if stone.dead:
                continue
            for row in range(10):
                for col in range(9):
                    kill_id = self.get_piece_id(col, row)
                    if kill_id != -1 and self._stones[kill_id].is_red == stone.is_red:
                        continue
                    if self.can_move(move_id, kill_id, col, row):
                        steps.append(
                            Step(move_id, kill_id, stone.row, stone.col, row, col)
                        )
        return steps

    def score(self) -> int:
        """Material balance from the computer's point of view."""
        red = black = 0
        for stone in self._stones:
            if stone.dead:
                continue
            value = PIECE_VALUES[stone.type]
            if stone.is_red:
                red += value
            else:
                black += value
        return red - black if self._ai_is_red else black - red

    def _min_score(self, level: int, cur_min: int) -> int:
        if level == 0:
            return self.score()
        lowest = _SCORE_CEILING
        for step in reversed(self.possible_moves()):
            self._fake_move(step)
            try:
                value = self._max_score(level - 1, lowest)
            finally:
                self._unfake_move(step)
            if value <= cur_min:
                return value
            lowest = min(lowest, value)
        return lowest

    def _max_score(self, level: int, cur_max: int) -> int:
        if level == 0:
            return self.score()
        highest = _SCORE_FLOOR
        for step in reversed(self.possible_moves()):
            self._fake_move(step)
            try:
                value = self._min_score(level - 1, highest)
            finally:
                self._unfake_move(step)
            if value >= cur_max:
                return value
            highest = max(highest, value)
        return highest

    def _fake_move(self, step: Step) -> None:
        if step.kill_id != -1:
            self._stones[step.kill_id].dead = True
        mover = self._stones[step.move_id]
        mover.row = step.row_to
        mover.col = step.col_to
        self.is_red_turn = not self.is_red_turn

    def _unfake_move(self, step: Step) -> None:
        if step.kill_id != -1:
            self._stones[step.kill_id].dead = False
        mover = self._stones[step.move_id]
        mover.row = step.row_from
        mover.col = step.col_from
        self.is_red_turn = not self.is_red_turn