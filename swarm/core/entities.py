"""
Game entity dataclasses
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List

from .color import Color
from .vector import Vector2, clamp


@dataclass
class Bullet:
    """Projectile fired by the player"""
    position: Vector2
    velocity: Vector2
    lifetime: float = 5.0  # seconds
    radius: float = 42.0

    def update(self, dt: float):
        self.position = self.position + self.velocity * dt
        self.lifetime -= dt


@dataclass
class Enemy:
    """Enemy entity that chases the player"""
    position: Vector2
    radius: float = 69.0
    speed: float = 250.0  # px/s
    dead: bool = False

    def update(self, dt: float, follow: Vector2):
        direction = (follow - self.position).normalize()
        self.position = self.position + direction * (self.speed * dt)


@dataclass
class Particle:
    """Short-lived debris left behind by a death"""
    position: Vector2
    velocity: Vector2
    lifetime: float  # seconds left
    radius: float
    color: Color
    max_lifetime: float = 1.0

    @property
    def alpha(self) -> float:
        """Fades out linearly with the remaining lifetime"""
        return clamp(self.lifetime / self.max_lifetime, 0.0, 1.0)

    def update(self, dt: float):
        self.position = self.position + self.velocity * dt
        self.lifetime -= dt


@dataclass
class Player:
    """The controllable avatar"""
    position: Vector2
    radius: float = 69.0
    max_health: float = 100.0
    health: float = 100.0
    bullet_speed: float = 1500.0
    bullet_radius: float = 42.0
    bullet_lifetime: float = 5.0

    @property
    def alive(self) -> bool:
        return self.health > 0.0

    def move(self, dt: float, velocity: Vector2):
        self.position = self.position + velocity * dt

    def shoot_at(self, target: Vector2) -> Bullet:
        """Bullet heading for `target`, spawned just outside the player's circle"""
        direction = (target - self.position).normalize()
        return Bullet(
            position=self.position + direction * (self.radius + self.bullet_radius),
            velocity=direction * self.bullet_speed,
            lifetime=self.bullet_lifetime,
            radius=self.bullet_radius,
        )

    def damage(self, amount: float):
        self.health = max(0.0, self.health - amount)

    def heal(self, amount: float):
        self.health = min(self.max_health, self.health + amount)


def particle_burst(
    particles: List[Particle],
    center: Vector2,
    color: Color,
    rng: random.Random,
    count: int = 50,
    magnitude: float = 1500.0,
    lifetime: float = 1.0,
    radius: float = 10.0,
    base_radius: float = 10.0,
) -> int:
    """Append a random number (0..count) of particles flying out of `center`"""
    n = math.ceil(rng.random() * count)
    for _ in range(n):
        particles.append(Particle(
            position=center,
            velocity=Vector2.polar(rng.random() * magnitude, rng.random() * 2 * math.pi),
            lifetime=rng.random() * lifetime,
            radius=rng.random() * radius + base_radius,
            color=color,
            max_lifetime=lifetime,
        ))
    return n
