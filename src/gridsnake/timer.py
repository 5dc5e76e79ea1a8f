# src/gridsnake/timer.py
from __future__ import annotations


class IntervalTimer:
    """
    Repeating accumulate-and-fire clock.

    tick() adds elapsed milliseconds and reports how many whole intervals
    have passed since the last fire. The remainder is carried over, so
    feeding 2.5 intervals in one call fires twice and leaves half an
    interval on the clock.
    """

    def __init__(self, interval_ms: float):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.elapsed_ms = 0.0

    def tick(self, elapsed_ms: float) -> int:
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms cannot be negative, got {elapsed_ms}")
        self.elapsed_ms += elapsed_ms
        fired = int(self.elapsed_ms // self.interval_ms)
        self.elapsed_ms -= fired * self.interval_ms
        return fired

    def reset(self) -> None:
        self.elapsed_ms = 0.0
