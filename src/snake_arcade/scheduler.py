from __future__ import annotations

from .errors import ConfigError


class Scheduler:
    """
    Turns frame time into game ticks.

    The pygame loop runs at the display frame rate; ``advance`` is fed the
    milliseconds since the previous frame and answers how many engine steps
    are due at the current tick interval. Pausing only stops the clock, the
    engine never knows about it.
    """

    def __init__(self):
        self.active = False
        self.paused = False
        self._accumulated_ms = 0

    def start(self) -> None:
        if self.active:
            return
        self.active = True
        self.paused = False
        self._accumulated_ms = 0

    def stop(self) -> None:
        self.active = False
        self.paused = False
        self._accumulated_ms = 0

    def toggle_pause(self) -> bool:
        if not self.active:
            return self.paused
        self.paused = not self.paused
        return self.paused

    def advance(self, elapsed_ms: int, interval_ms: int) -> int:
        if interval_ms < 1:
            raise ConfigError(f"tick interval must be a positive integer, got {interval_ms!r}")
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time cannot be negative, got {elapsed_ms!r}")
        if not self.active or self.paused:
            return 0

        self._accumulated_ms += elapsed_ms
        due, self._accumulated_ms = divmod(self._accumulated_ms, interval_ms)
        return due
