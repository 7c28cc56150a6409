from __future__ import annotations

import random

import pytest

from swarm.core.spawner import SpawnDirector
from swarm.core.vector import Vector2


def test_inactive_director_is_inert() -> None:
    d = SpawnDirector(random.Random(0), spawn_interval=1.0)
    for _ in range(100):
        assert d.tick(1.0, Vector2(0.0, 0.0), active=False) is None
    assert d.cooldown == 1.0
    assert len(d.intervals) == 0
    assert d.spawned == 0


def test_first_spawn_once_cooldown_runs_out() -> None:
    d = SpawnDirector(random.Random(0), spawn_interval=1.0, spawn_distance=1500.0)
    center = Vector2(10.0, -20.0)

    assert d.tick(0.5, center) is None
    position = d.tick(0.5, center)
    assert position is not None
    assert position.distance(center) == pytest.approx(1500.0)
    assert d.cooldown == 1.0
    assert d.spawn_interval == pytest.approx(0.99)


def test_intervals_ramp_down_to_the_floor() -> None:
    d = SpawnDirector(random.Random(1), spawn_interval=0.1, interval_step=0.01, min_spawn_interval=0.03)
    intervals = []
    for _ in range(1000):
        current = d.spawn_interval
        if d.tick(0.01, Vector2(0.0, 0.0)) is not None:
            intervals.append(current)

    assert d.spawned == len(intervals)
    assert len(intervals) > 10
    assert all(a >= b for a, b in zip(intervals, intervals[1:]))
    assert min(intervals) >= 0.03
    assert intervals[-1] == pytest.approx(0.03)
    assert d.spawn_interval == pytest.approx(0.03)


def test_spawn_angles_vary() -> None:
    d = SpawnDirector(random.Random(2), spawn_interval=0.01, interval_step=0.0, min_spawn_interval=0.01)
    positions = {d.tick(0.01, Vector2(0.0, 0.0)) for _ in range(10)}
    assert len(positions) > 1


def test_interval_history_is_bounded() -> None:
    d = SpawnDirector(random.Random(3), spawn_interval=0.01, interval_step=0.0,
                      min_spawn_interval=0.01, history=8)
    for _ in range(100):
        d.tick(0.01, Vector2(0.0, 0.0))

    assert d.spawned == 100
    assert len(d.intervals) == 8
    assert list(d.intervals) == pytest.approx([0.01] * 8)


def test_negative_interval_step_is_rejected() -> None:
    with pytest.raises(AssertionError):
        SpawnDirector(random.Random(0), interval_step=-0.01)
