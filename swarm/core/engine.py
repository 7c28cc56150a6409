"""
SimulationEngine - the per-frame core of the game
-------------------------------------------------
- Player moves with held directions and shoots at pointer positions
- Enemies spawn around the player and chase it
- Bullets kill enemies on contact (score + life-steal), enemies hurt the player
- A tutorial gates enemy spawning until the player has moved and shot
- Spawn interval shrinks with every spawn (difficulty ramp)

The engine never draws and never reads devices: hosts feed it `dt` and
`InputAction`s and render the `FrameSnapshot` it hands back.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple

from ..storage import BestScoreStore, MemoryBestScoreStore
from .color import Color
from .entities import Bullet, Enemy, Particle, Player, particle_burst
from .spawner import SpawnDirector
from .tutorial import TutorialController, TutorialEffect, TutorialState
from .vector import Vector2, circle_collide, clamp


class InputAction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SHOOT = "shoot"
    PAUSE_TOGGLE = "pause_toggle"


# Screen coordinates: +y points down
DIRECTIONS = {
    InputAction.UP: Vector2(0.0, -1.0),
    InputAction.DOWN: Vector2(0.0, 1.0),
    InputAction.LEFT: Vector2(-1.0, 0.0),
    InputAction.RIGHT: Vector2(1.0, 0.0),
}


@dataclass(frozen=True)
class CircleView:
    position: Vector2
    radius: float
    color: Color


@dataclass(frozen=True)
class PlayerView:
    position: Vector2
    radius: float
    color: Color
    health: float
    max_health: float
    alive: bool


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only state handed to the render layer once per frame"""
    player: PlayerView
    bullets: Tuple[CircleView, ...]
    particles: Tuple[CircleView, ...]
    enemies: Tuple[CircleView, ...]
    popup_text: str
    popup_alpha: float
    paused: bool
    score: int
    best_score: int
    grayness: float  # desaturation to apply to every color


class SimulationEngine:
    """Owns every entity of a play session and advances them tick by tick"""

    def __init__(
        self,
        best_score_store: Optional[BestScoreStore] = None,
        seed: Optional[int] = None,
        player_radius: float = 69.0,
        player_speed: float = 750.0,  # px/s
        player_color: str = "#f43841",
        max_health: float = 100.0,
        bullet_radius: float = 42.0,
        bullet_speed: float = 1500.0,
        bullet_lifetime: float = 5.0,  # seconds
        enemy_radius: float = 69.0,
        enemy_speed: float = 250.0,
        enemy_color: str = "#9e95c7",
        enemy_damage: float = 20.0,  # health per contact
        kill_heal: float = 10.0,  # life-steal per kill
        kill_score: int = 100,
        spawn_interval: float = 1.0,  # seconds
        spawn_interval_step: float = 0.01,
        min_spawn_interval: float = 0.01,
        spawn_distance: float = 1500.0,
        particles_count: int = 50,  # max particles per burst
        particle_radius: float = 10.0,
        particle_magnitude: float = 1500.0,
        particle_lifetime: float = 1.0,
        tutorial_fade_speed: float = 1.7,
        death_slowdown: float = 50.0,
        verbose: int = 0,
    ):
        assert death_slowdown > 0.0, "death_slowdown must be positive"
        assert max_health > 0.0, "max_health must be positive"

        self.best_score_store = best_score_store if best_score_store is not None else MemoryBestScoreStore()
        self.rng = random.Random(seed)
        self.verbose = verbose

        # Player config
        self.player_radius = player_radius
        self.player_speed = player_speed
        self.player_color = Color.hex(player_color)
        self.max_health = max_health
        self.bullet_radius = bullet_radius
        self.bullet_speed = bullet_speed
        self.bullet_lifetime = bullet_lifetime

        # Enemy config
        self.enemy_radius = enemy_radius
        self.enemy_speed = enemy_speed
        self.enemy_color = Color.hex(enemy_color)
        self.enemy_damage = enemy_damage
        self.kill_heal = kill_heal
        self.kill_score = kill_score

        # Spawn ramp
        self.spawn_interval = spawn_interval
        self.spawn_interval_step = spawn_interval_step
        self.min_spawn_interval = min_spawn_interval
        self.spawn_distance = spawn_distance

        # Particles
        self.particles_count = particles_count
        self.particle_radius = particle_radius
        self.particle_magnitude = particle_magnitude
        self.particle_lifetime = particle_lifetime

        self.tutorial_fade_speed = tutorial_fade_speed
        self.death_slowdown = death_slowdown

        # Session state, filled in by reset()
        self.player: Player = None  # type: ignore
        self.tutorial: TutorialController = None  # type: ignore
        self.spawner: SpawnDirector = None  # type: ignore
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []
        self.particles: List[Particle] = []
        self.pressed: Set[InputAction] = set()
        self.paused = False
        self.score = 0
        self.best_score = 0

        # Session totals
        self.kills = 0
        self.shots = 0
        self.damage_taken = 0.0

        self.reset()

    # ----------------------------
    # Session
    # ----------------------------

    def reset(self):
        """Start a new session; only the best score survives"""
        self.player = Player(
            position=Vector2(self.player_radius + 10, self.player_radius + 10),
            radius=self.player_radius,
            max_health=self.max_health,
            health=self.max_health,
            bullet_speed=self.bullet_speed,
            bullet_radius=self.bullet_radius,
            bullet_lifetime=self.bullet_lifetime,
        )
        self.tutorial = TutorialController(fade_speed=self.tutorial_fade_speed)
        self.spawner = SpawnDirector(
            self.rng,
            spawn_interval=self.spawn_interval,
            interval_step=self.spawn_interval_step,
            min_spawn_interval=self.min_spawn_interval,
            spawn_distance=self.spawn_distance,
        )
        self.bullets = []
        self.enemies = []
        self.particles = []
        self.pressed = set()
        self.paused = False
        self.score = 0
        self.kills = 0
        self.shots = 0
        self.damage_taken = 0.0

        stored = self.best_score_store.get_best_score()
        self.best_score = stored if stored is not None else 0

        if self.verbose > 0:
            print(f"[SimulationEngine] New session, best score {self.best_score}")

    # ----------------------------
    # Per-frame update
    # ----------------------------

    def tick(self, dt: float) -> List[TutorialEffect]:
        """Advance the simulation by `dt` seconds; returns tutorial popup effects"""
        effects: List[TutorialEffect] = []
        if self.paused:
            return effects

        if not self.player.alive:
            dt /= self.death_slowdown

        velocity, moved = self._held_velocity()
        if moved:
            effects.append(self.tutorial.player_moved())

        self.player.move(dt, velocity)

        effects.append(self.tutorial.update(dt))

        self._handle_collisions()

        for bullet in self.bullets:
            bullet.update(dt)
        self.bullets = [b for b in self.bullets if b.lifetime > 0.0]

        for particle in self.particles:
            particle.update(dt)
        self.particles = [p for p in self.particles if p.lifetime > 0.0]

        for enemy in self.enemies:
            enemy.update(dt, self.player.position)
        self.enemies = [e for e in self.enemies if not e.dead]

        if self.tutorial.finished:
            self._spawn_logic(dt)

        return [effect for effect in effects if effect is not None]

    def _held_velocity(self) -> Tuple[Vector2, bool]:
        velocity = Vector2(0.0, 0.0)
        moved = False
        for action in self.pressed:
            direction = DIRECTIONS.get(action)
            if direction is None:
                continue
            velocity = velocity + direction * self.player_speed
            moved = True
        return velocity, moved

    def _handle_collisions(self):
        for enemy in self.enemies:
            # Bullets vs enemy; one bullet may take out several enemies
            for bullet in self.bullets:
                if enemy.dead:
                    break
                if circle_collide(enemy.position, enemy.radius, bullet.position, bullet.radius):
                    enemy.dead = True
                    bullet.lifetime = 0.0
                    self._on_kill(enemy)

            # Enemy vs player (contact damage)
            if enemy.dead or not self.player.alive:
                continue
            if circle_collide(enemy.position, enemy.radius, self.player.position, self.player.radius):
                self.player.damage(self.enemy_damage)
                self.damage_taken += self.enemy_damage
                enemy.dead = True
                self._burst(enemy.position, self.player_color)

                if not self.player.alive and self.verbose > 0:
                    print(f"[SimulationEngine] Player defeated with score {self.score}")

    def _on_kill(self, enemy: Enemy):
        self.kills += 1
        self.score += self.kill_score
        if self.player.alive:
            self.player.heal(self.kill_heal)
        self._burst(enemy.position, self.enemy_color)

        if self.score > self.best_score:
            self.best_score = self.score
            self.best_score_store.set_best_score(self.score)
            if self.verbose > 1:
                print(f"[SimulationEngine] New best score {self.score}")

    def _burst(self, center: Vector2, color: Color) -> int:
        return particle_burst(
            self.particles,
            center,
            color,
            self.rng,
            count=self.particles_count,
            magnitude=self.particle_magnitude,
            lifetime=self.particle_lifetime,
            radius=self.particle_radius,
        )

    def _spawn_logic(self, dt: float):
        position = self.spawner.tick(dt, self.player.position, active=self.tutorial.finished)
        if position is None:
            return
        self.spawn_enemy(position)

    def spawn_enemy(self, position: Vector2) -> Enemy:
        enemy = Enemy(position=position, radius=self.enemy_radius, speed=self.enemy_speed)
        self.enemies.append(enemy)
        return enemy

    # ----------------------------
    # Input
    # ----------------------------

    def toggle_pause(self):
        self.paused = not self.paused

    def key_down(self, action: Optional[InputAction]):
        """Unbound keys arrive as None and are ignored"""
        if action is None:
            return
        if action is InputAction.PAUSE_TOGGLE:
            self.toggle_pause()
        self.pressed.add(action)

    def key_up(self, action: Optional[InputAction]):
        if action is None:
            return
        self.pressed.discard(action)

    def pointer_down(self, x: float, y: float) -> Optional[Bullet]:
        """Shoot at (x, y) unless paused or defeated"""
        if self.paused or not self.player.alive:
            return None

        self.tutorial.player_shot()
        bullet = self.player.shoot_at(Vector2(x, y))
        self.bullets.append(bullet)
        self.shots += 1
        return bullet

    # ----------------------------
    # Render state
    # ----------------------------

    @property
    def grayness(self) -> float:
        """1.0 while paused, otherwise grows as the player loses health"""
        if self.paused:
            return 1.0
        return clamp(1.0 - self.player.health / self.player.max_health, 0.0, 1.0)

    @property
    def tutorial_state(self) -> TutorialState:
        return self.tutorial.state

    def snapshot(self) -> FrameSnapshot:
        player = self.player
        return FrameSnapshot(
            player=PlayerView(
                position=player.position,
                radius=player.radius,
                color=self.player_color,
                health=player.health,
                max_health=player.max_health,
                alive=player.alive,
            ),
            bullets=tuple(CircleView(b.position, b.radius, self.player_color) for b in self.bullets),
            particles=tuple(
                CircleView(p.position, p.radius, p.color.with_alpha(p.alpha)) for p in self.particles
            ),
            enemies=tuple(CircleView(e.position, e.radius, self.enemy_color) for e in self.enemies),
            popup_text=self.tutorial.popup.text,
            popup_alpha=self.tutorial.popup.alpha,
            paused=self.paused,
            score=self.score,
            best_score=self.best_score,
            grayness=self.grayness,
        )
