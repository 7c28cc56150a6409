"""
Enemy spawn timing and the difficulty ramp
"""

from __future__ import annotations

import math
import random
from collections import deque
from typing import Deque, Optional

from .vector import Vector2


class SpawnDirector:
    """Spawns one enemy per interval; every spawn shortens the next interval"""

    def __init__(
        self,
        rng: random.Random,
        spawn_interval: float = 1.0,  # seconds
        interval_step: float = 0.01,
        min_spawn_interval: float = 0.01,
        spawn_distance: float = 1500.0,
        history: int = 64,
    ):
        assert min_spawn_interval > 0.0, "min_spawn_interval must be positive"
        assert interval_step >= 0.0, "interval_step must not be negative"
        self.rng = rng
        self.spawn_interval = max(min_spawn_interval, spawn_interval)
        self.interval_step = interval_step
        self.min_spawn_interval = min_spawn_interval
        self.spawn_distance = spawn_distance
        self.cooldown = self.spawn_interval

        # intervals used by the most recent spawns, oldest first
        self.intervals: Deque[float] = deque(maxlen=history)
        self.spawned = 0

    def tick(self, dt: float, center: Vector2, active: bool = True) -> Optional[Vector2]:
        """Advance the cooldown; returns a spawn position when one is due"""
        if not active:
            return None

        self.cooldown -= dt
        if self.cooldown > 0.0:
            return None

        self.cooldown = self.spawn_interval
        self.intervals.append(self.spawn_interval)
        self.spawned += 1
        self.spawn_interval = max(self.min_spawn_interval, self.spawn_interval - self.interval_step)

        # on a circle of spawn_distance around the player
        direction = self.rng.random() * 2 * math.pi
        return center + Vector2.polar(self.spawn_distance, direction)
