"""
spawn_timer.py
--------------
Accumulating timers that decide when a spawner fires.
"""

import random


# Absorbs float drift from summing many fixed ticks
TIME_EPSILON = 1e-9


class SpawnTimer:
    """
    Fixed-interval timer with repeating semantics.

    When the accumulated time reaches the interval the timer fires once and
    carries the leftover time into the next period. At most one fire is
    reported per tick.
    """

    def __init__(self, interval: float, elapsed: float = 0.0):
        if interval <= 0:
            raise ValueError(f"SpawnTimer interval must be positive, got {interval}")
        self.interval = interval
        self.elapsed = elapsed
        self.fires = 0

    def tick(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed + TIME_EPSILON < self.interval:
            return False
        self._on_fire()
        self.fires += 1
        return True

    def _on_fire(self):
        self.elapsed = max(self.elapsed - self.interval, 0.0)


class RandomIntervalTimer(SpawnTimer):
    """
    Timer that draws a new interval uniformly from interval_range after
    every fire and restarts from zero.
    """

    def __init__(self, interval_range, first_interval: float = None):
        low, high = interval_range
        if not 0 < low <= high:
            raise ValueError(f"Invalid interval range: {interval_range}")
        self.interval_range = (low, high)
        super().__init__(first_interval if first_interval is not None else random.uniform(low, high))

    def _on_fire(self):
        self.elapsed = 0.0
        self.interval = random.uniform(*self.interval_range)
