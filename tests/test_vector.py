from __future__ import annotations

import math

import pytest

from swarm.core.vector import Vector2, circle_collide, clamp


def test_arithmetic_returns_new_vectors() -> None:
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -1.0)

    assert a.add(b) == Vector2(4.0, 1.0)
    assert a + b == Vector2(4.0, 1.0)
    assert b.sub(a) == Vector2(2.0, -3.0)
    assert a * 2 == Vector2(2.0, 4.0)
    assert 2 * a == Vector2(2.0, 4.0)
    assert a == Vector2(1.0, 2.0)


def test_length_distance_and_normalize() -> None:
    v = Vector2(3.0, 4.0)
    assert v.length() == 5.0
    assert Vector2(0.0, 0.0).distance(v) == 5.0

    unit = v.normalize()
    assert unit.length() == pytest.approx(1.0)
    assert unit.x == pytest.approx(0.6)
    assert unit.y == pytest.approx(0.8)


def test_normalizing_zero_vector_gives_zero_vector() -> None:
    zero = Vector2(0.0, 0.0).normalize()
    assert zero == Vector2(0.0, 0.0)
    assert not math.isnan(zero.x) and not math.isnan(zero.y)


def test_polar() -> None:
    v = Vector2.polar(2.0, math.pi / 2)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(2.0)


def test_circle_collide_touching_counts() -> None:
    assert circle_collide(Vector2(0, 0), 1.0, Vector2(2, 0), 1.0)
    assert not circle_collide(Vector2(0, 0), 1.0, Vector2(2.01, 0), 1.0)


def test_clamp() -> None:
    assert clamp(-1, 0, 1) == 0
    assert clamp(2, 0, 1) == 1
    assert clamp(0.5, 0, 1) == 0.5
