"""Simulation core - engine, entities, tutorial and spawn ramp"""

from .color import Color, FormatError
from .engine import FrameSnapshot, InputAction, SimulationEngine
from .entities import Bullet, Enemy, Particle, Player
from .spawner import SpawnDirector
from .tutorial import TutorialController, TutorialState
from .vector import Vector2

__all__ = [
    'Bullet', 'Color', 'Enemy', 'FormatError', 'FrameSnapshot', 'InputAction',
    'Particle', 'Player', 'SimulationEngine', 'SpawnDirector',
    'TutorialController', 'TutorialState', 'Vector2',
]
