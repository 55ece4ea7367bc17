"""A minimal observer primitive used to announce state changes."""

from __future__ import annotations

from typing import Any, Callable, List

Callback = Callable[..., Any]


class Signal:
    """A list of callbacks that are invoked, in connection order, on emit."""

    def __init__(self) -> None:
        self._callbacks: List[Callback] = []

    def connect(self, callback: Callback) -> None:
        """Register *callback* to be called on every emit."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._callbacks.append(callback)

    def disconnect(self, callback: Callback) -> None:
        """Remove one registration of *callback*; raise ValueError if absent."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            raise ValueError("callback is not connected") from None

    def emit(self, *args: Any) -> None:
        """Call every connected callback with *args*."""
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)