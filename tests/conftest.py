from __future__ import annotations

import pytest

from swarm.core.engine import InputAction, SimulationEngine
from swarm.core.tutorial import TutorialState
from swarm.storage import MemoryBestScoreStore


@pytest.fixture()
def store() -> MemoryBestScoreStore:
    return MemoryBestScoreStore()


@pytest.fixture()
def engine(store: MemoryBestScoreStore) -> SimulationEngine:
    return SimulationEngine(best_score_store=store, seed=0)


def finish_tutorial(engine: SimulationEngine) -> None:
    """Move once and shoot once so the tutorial lets enemies in."""
    engine.key_down(InputAction.RIGHT)
    engine.tick(0.01)
    engine.key_up(InputAction.RIGHT)
    engine.pointer_down(engine.player.position.x + 100, engine.player.position.y)
    engine.bullets.clear()
    assert engine.tutorial_state == TutorialState.FINISHED


@pytest.fixture()
def finished_engine(engine: SimulationEngine) -> SimulationEngine:
    finish_tutorial(engine)
    return engine
