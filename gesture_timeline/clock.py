"""Shared current-time cursor.

The clock is normally advanced by an external player between ticks. Within
a logical tick it accepts a single write, reserved for the Scrub tool's
Active stage.
"""

import logging

from gesture_timeline.errors import ClockWriteError

logger = logging.getLogger(__name__)


class Clock:
    """Process-wide "current time" with a single-writer-per-tick rule."""

    def __init__(self, current_time: int = 0):
        self._current_time = current_time
        self._written_tick: int | None = None

    @property
    def current_time(self) -> int:
        return self._current_time

    def advance(self, ticks: int = 1) -> int:
        """Move the cursor forward, as a player does between ticks."""
        self._current_time += ticks
        return self._current_time

    def written_at(self, tick: int) -> bool:
        """Whether the clock was already written during logical `tick`."""
        return self._written_tick == tick

    def scrub(self, time: int, tick: int) -> None:
        """Rewrite the current time on behalf of logical `tick`.

        Args:
            time: New current time.
            tick: Logical tick performing the write.

        Raises:
            ClockWriteError: If the clock was already written during `tick`.
        """
        if self.written_at(tick):
            raise ClockWriteError(
                f"clock already written at tick {tick} "
                f"(now {self._current_time}, requested {time})"
            )
        logger.debug(f"Scrubbing clock from {self._current_time} to {time}")
        self._current_time = time
        self._written_tick = tick
