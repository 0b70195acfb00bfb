"""Count-down counters and the frame timer of the game loop."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass
class Counter:
    """A count-down that only decreases while its time is positive."""

    time: float = 0.0

    def tick(self, seconds: float) -> None:
        if self.time > 0.0:
            self.time -= seconds


class Timer:
    """Keeps the game loop at a fixed tick time and accumulates game time."""

    def __init__(self) -> None:
        self.start = time.monotonic()
        self.end = self.start
        self.time = 0.0

    def reset(self) -> None:
        """Mark the start of the current frame."""
        self.start = time.monotonic()

    def tick(self, tick_time: float) -> None:
        self.time += tick_time

    def tick_and_delay(self, tick_time: float) -> None:
        """Sleep for what is left of ``tick_time`` since the last reset, then tick."""
        self.end = time.monotonic()
        delay = tick_time - (self.end - self.start)
        if delay > 0.0:
            time.sleep(delay)
        self.tick(tick_time)