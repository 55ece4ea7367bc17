"""Chinese chess rules, move history, change signals and a minimax computer opponent."""

__version__ = "0.1.0"
__all__ = ["events", "stone", "moverecord", "board", "ai"]