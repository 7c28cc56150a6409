"""
SwarmEnv - headless Gymnasium wrapper around SimulationEngine
-------------------------------------------------------------
- Fixed `dt` per step, no wall clock
- Discrete MultiDiscrete action space: [move(5), shoot(2), aim(8)]
- Vector observation: player state + tutorial/ramp progress + top-K nearest enemies
- Reward: kills and survival, minus damage taken

Handy for scripted or random play-throughs and for soak-testing the engine
over thousands of frames without opening a window.

Quick test:
    python -m swarm.play --headless
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .configs.game_config import ENV_CONFIG, GAME_CONFIG
from .core.engine import DIRECTIONS, InputAction, SimulationEngine
from .core.tutorial import TutorialState
from .core.vector import Vector2, clamp, seed_everything
from .storage import BestScoreStore

# move index -> held action
MOVE_ACTIONS = {
    1: InputAction.UP,
    2: InputAction.DOWN,
    3: InputAction.LEFT,
    4: InputAction.RIGHT,
}

# How far in front of the player the aim point sits
AIM_DISTANCE = 300.0


class SwarmEnv(gym.Env):
    """Swarm shooter as a Gymnasium environment"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 1600,
        height: int = 900,
        dt: float = 1 / 30,
        max_steps: int = 1800,
        k_enemies: int = 5,
        shoot_cooldown_steps: int = 6,
        death_penalty: float = 5.0,
        best_score_store: Optional[BestScoreStore] = None,
        engine_config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unknown render_mode: {render_mode}"
        assert dt > 0.0, "dt must be positive"
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.shoot_cooldown_steps = shoot_cooldown_steps
        self.death_penalty = death_penalty
        self.best_score_store = best_score_store
        self.engine_config = dict(GAME_CONFIG if engine_config is None else engine_config)

        # move: 0 stay, 1 up, 2 down, 3 left, 4 right
        # shoot: 0/1
        # aim: 0..7 (8 directions)
        self.action_space = spaces.MultiDiscrete([5, 2, 8])

        # Player: health(1) velocity(2) tutorial(1) spawn interval(1)
        # Each enemy: rel pos(2)
        obs_dim = 1 + 2 + 1 + 1 + (self.k_enemies * 2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._aim_dirs = [
            Vector2.polar(1.0, (math.pi * 2) * (i / 8.0)) for i in range(8)
        ]

        self._window = None
        self.engine: SimulationEngine = None  # type: ignore
        self._step_count = 0
        self._cooldown = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self.engine = SimulationEngine(
            best_score_store=self.best_score_store,
            seed=seed,
            **self.engine_config,
        )
        self._step_count = 0
        self._cooldown = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, shoot, aim = int(action[0]), int(action[1]), int(action[2])
        engine = self.engine

        score_before = engine.score
        damage_before = engine.damage_taken
        alive_before = engine.player.alive

        self._apply_move(move)
        self._apply_shoot(shoot, aim)

        engine.tick(self.dt)

        if self._cooldown > 0:
            self._cooldown -= 1

        reward = (engine.score - score_before) / max(1, engine.kill_score)
        reward -= (engine.damage_taken - damage_before) / engine.max_health
        if alive_before and not engine.player.alive:
            reward -= self.death_penalty

        terminated = not engine.player.alive
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    def _apply_move(self, move: int):
        for held in MOVE_ACTIONS.values():
            self.engine.key_up(held)
        self.engine.key_down(MOVE_ACTIONS.get(move))

    def _apply_shoot(self, shoot: int, aim: int):
        if shoot == 0 or self._cooldown > 0:
            return

        target = self.engine.player.position + self._aim_dirs[aim % 8] * AIM_DISTANCE
        if self.engine.pointer_down(target.x, target.y) is not None:
            self._cooldown = self.shoot_cooldown_steps

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        engine = self.engine
        player = engine.player

        velocity = Vector2(0.0, 0.0)
        for held in engine.pressed:
            velocity = velocity + DIRECTIONS.get(held, Vector2(0.0, 0.0))

        tutorial = engine.tutorial_state / float(TutorialState.FINISHED)
        ramp = engine.spawner.spawn_interval / max(1e-6, engine.spawn_interval)

        obs_parts = [
            (player.health / player.max_health) * 2 - 1,
            clamp(velocity.x, -1, 1),
            clamp(velocity.y, -1, 1),
            tutorial * 2 - 1,
            clamp(ramp, 0, 1) * 2 - 1,
        ]

        # Enemies: top-K nearest, relative position scaled by spawn distance
        scale = max(1e-6, engine.spawn_distance)
        enemies_sorted = sorted(
            engine.enemies,
            key=lambda e: e.position.distance(player.position),
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                rel = enemies_sorted[i].position - player.position
                obs_parts += [clamp(rel.x / scale, -1, 1), clamp(rel.y / scale, -1, 1)]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        engine = self.engine
        return {
            "health": engine.player.health,
            "score": engine.score,
            "best_score": engine.best_score,
            "kills": engine.kills,
            "shots": engine.shots,
            "damage_taken": engine.damage_taken,
            "tutorial": engine.tutorial_state.name,
            "spawn_interval": engine.spawner.spawn_interval,
            "num_enemies": len(engine.enemies),
            "num_bullets": len(engine.bullets),
            "num_particles": len(engine.particles),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import ShooterWindow

            self._window = ShooterWindow(self.engine, width=self.width, height=self.height)

        self._window.engine = self.engine
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(render: bool = False, seed: Optional[int] = 42,
                       best_score_store: Optional[BestScoreStore] = None) -> Dict[str, Any]:
    """Play one episode with random actions and report how it went"""
    env = SwarmEnv(render_mode="human" if render else None,
                   best_score_store=best_score_store, **ENV_CONFIG)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}")
    print(f"  steps={info['step']} score={info['score']} best={info['best_score']} "
          f"kills={info['kills']} health={info['health']:.1f} tutorial={info['tutorial']}")

    env.close()
    info["return"] = total
    return info
