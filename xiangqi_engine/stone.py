"""Xiangqi pieces and their starting layout."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .events import Signal


class PieceType(IntEnum):
    """Kinds of piece; the numeric value indexes per-type tables."""

    CHE = 0
    MA = 1
    XIANG = 2
    SHI = 3
    JIANG = 4
    PAO = 5
    BING = 6


# Starting (row, col, type) of the sixteen red pieces; black mirrors them.
_RED_LAYOUT = (
    (0, 0, PieceType.CHE),
    (0, 1, PieceType.MA),
    (0, 2, PieceType.XIANG),
    (0, 3, PieceType.SHI),
    (0, 4, PieceType.JIANG),
    (0, 5, PieceType.SHI),
    (0, 6, PieceType.XIANG),
    (0, 7, PieceType.MA),
    (0, 8, PieceType.CHE),
    (2, 1, PieceType.PAO),
    (2, 7, PieceType.PAO),
    (3, 0, PieceType.BING),
    (3, 2, PieceType.BING),
    (3, 4, PieceType.BING),
    (3, 6, PieceType.BING),
    (3, 8, PieceType.BING),
)

STONE_COUNT = 2 * len(_RED_LAYOUT)


class Stone:
    """One piece on the board.

    Pieces 0-15 are red and 16-31 black. Changing ``row``, ``col``, ``dead``
    or ``selected`` emits the matching signal, but only when the value changes.
    """

    def __init__(self, id: Optional[int] = None) -> None:
        self.row_changed = Signal()
        self.col_changed = Signal()
        self.dead_changed = Signal()
        self.selected_changed = Signal()
        self._id = -1
        self._row = 0
        self._col = 0
        self._dead = False
        self._selected = False
        self._type: Optional[PieceType] = None
        self._red = False
        if id is not None:
            self.reset(id)

    def reset(self, id: int) -> None:
        """Put this stone back to the starting state of piece *id*."""
        if not 0 <= id < STONE_COUNT:
            raise ValueError(f"stone id must be in 0..{STONE_COUNT - 1}, got {id}")
        self._id = id
        if id < len(_RED_LAYOUT):
            self._row, self._col, self._type = _RED_LAYOUT[id]
        else:
            row, col, kind = _RED_LAYOUT[id - len(_RED_LAYOUT)]
            self._row = 9 - row
            self._col = 8 - col
            self._type = kind
        self._dead = False
        self._selected = False
        self._red = id < len(_RED_LAYOUT)

    @property
    def id(self) -> int:
        return self._id

    @property
    def type(self) -> Optional[PieceType]:
        return self._type

    @property
    def is_red(self) -> bool:
        return self._red

    @property
    def row(self) -> int:
        return self._row

    @row.setter
    def row(self, value: int) -> None:
        if self._row != value:
            self._row = value
            self.row_changed.emit()

    @property
    def col(self) -> int:
        return self._col

    @col.setter
    def col(self, value: int) -> None:
        if self._col != value:
            self._col = value
            self.col_changed.emit()

    @property
    def dead(self) -> bool:
        return self._dead

    @dead.setter
    def dead(self, value: bool) -> None:
        if self._dead != value:
            self._dead = value
            self.dead_changed.emit()

    @property
    def selected(self) -> bool:
        return self._selected

    @selected.setter
    def selected(self, value: bool) -> None:
        if self._selected != value:
            self._selected = value
            self.selected_changed.emit()

    def __repr__(self) -> str:
        colour = "red" if self._red else "black"
        kind = self._type.name if self._type is not None else None
        return (
            f"Stone(id={self._id}, {colour} {kind}, col={self._col}, "
            f"row={self._row}, dead={self._dead})"
        )