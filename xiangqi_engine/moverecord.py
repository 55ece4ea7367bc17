"""History entries for moves made on the board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveRecord:
    """One move: which stone went where and which stone (if any) it took.

    ``kill_id`` is -1 when nothing was captured.
    """

    move_id: int = -1
    from_row: int = -1
    from_col: int = -1
    to_row: int = -1
    to_col: int = -1
    kill_id: int = -1
    was_dead: bool = False

    def describe(self) -> str:
        """Return a one-line human-readable summary of the move."""
        return (
            f"MoveRecord: ID={self.move_id}, "
            f"From=({self.from_col},{self.from_row}), "
            f"To=({self.to_col},{self.to_row}), "
            f"KillID={self.kill_id}, "
            f"WasDead={'true' if self.was_dead else 'false'}"
        )

    def __str__(self) -> str:
        return self.describe()