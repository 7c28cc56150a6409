"""
Immutable 2D vector and small geometry helpers
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector"""
    x: float = 0.0
    y: float = 0.0

    def add(self, that: Vector2) -> Vector2:
        return Vector2(self.x + that.x, self.y + that.y)

    def sub(self, that: Vector2) -> Vector2:
        return Vector2(self.x - that.x, self.y - that.y)

    def scale(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def length(self) -> float:
        """Calculate vector length (magnitude)"""
        return math.hypot(self.x, self.y)

    def normalize(self, eps: float = 1e-8) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero"""
        n = self.length()
        if n < eps:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / n, self.y / n)

    def distance(self, that: Vector2) -> float:
        return self.sub(that).length()

    @staticmethod
    def polar(magnitude: float, direction: float) -> Vector2:
        """Vector of length `magnitude` pointing at `direction` radians"""
        return Vector2(math.cos(direction) * magnitude, math.sin(direction) * magnitude)

    def __add__(self, that: Vector2) -> Vector2:
        return self.add(that)

    def __sub__(self, that: Vector2) -> Vector2:
        return self.sub(that)

    def __mul__(self, scalar: float) -> Vector2:
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.scale(scalar)


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def circle_collide(a: Vector2, ra: float, b: Vector2, rb: float) -> bool:
    """Check if two circles touch or overlap"""
    return a.distance(b) <= ra + rb


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
