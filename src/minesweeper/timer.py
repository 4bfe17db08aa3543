"""
Session timer module for Minesweeper game.

The board starts its timer on the first accepted action and stops it
when the game is won or lost, and resets it for a new game. Any object
with ``start()``, ``stop()`` and ``reset()`` can be plugged in.
"""
import time
from typing import Callable, Optional, Protocol


class SessionTimer(Protocol):
    """Timer the board drives on first move and on game end."""

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def reset(self) -> None:
        ...


class NullTimer:
    """Timer that ignores every call, for headless boards."""

    def start(self) -> None:
        pass

    def stop(self) -> None:
        pass

    def reset(self) -> None:
        pass


class Stopwatch:
    """
    Elapsed-time counter.

    Starting an already running stopwatch has no effect, and stopping
    freezes the elapsed time until the next ``reset()``.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """
        Initialize the stopwatch.

        Args:
            clock: Monotonic time source returning seconds.
        """
        self._clock = clock
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    def start(self) -> None:
        """Start counting if not already started."""
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        """Freeze the elapsed time."""
        if self._started_at is not None and self._stopped_at is None:
            self._stopped_at = self._clock()

    def reset(self) -> None:
        """Clear the stopwatch back to zero."""
        self._started_at = None
        self._stopped_at = None

    @property
    def running(self) -> bool:
        """Check whether the stopwatch is counting."""
        return self._started_at is not None and self._stopped_at is None

    @property
    def elapsed(self) -> float:
        """Seconds counted so far."""
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return end - self._started_at
