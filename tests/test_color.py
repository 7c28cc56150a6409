from __future__ import annotations

import pytest

from swarm.core.color import Color, FormatError


def test_hex_parses_channels() -> None:
    c = Color.hex("#ff8000")
    assert c.r == 1.0
    assert c.g == pytest.approx(128 / 255)
    assert c.b == 0.0
    assert c.a == 1.0


def test_hex_is_case_insensitive() -> None:
    assert Color.hex("#F43841") == Color.hex("#f43841")


@pytest.mark.parametrize("bad", ["f43841", "#f4384", "#f438411", "#gg0000", "", "rgb(1,2,3)"])
def test_hex_rejects_malformed_input(bad: str) -> None:
    with pytest.raises(FormatError):
        Color.hex(bad)


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Color.hex("nope")


def test_full_gray_scale_uses_channel_average() -> None:
    gray = Color(0.9, 0.3, 0.0, 0.5).gray_scale()
    assert gray.r == pytest.approx(0.4)
    assert gray.g == pytest.approx(0.4)
    assert gray.b == pytest.approx(0.4)
    assert gray.a == 0.5


def test_partial_gray_scale_blends_toward_average() -> None:
    c = Color(1.0, 0.0, 0.5)
    assert c.gray_scale(0.0) == c
    half = c.gray_scale(0.5)
    assert half.r == pytest.approx(0.75)
    assert half.g == pytest.approx(0.25)
    assert half.b == pytest.approx(0.5)


def test_with_alpha_and_rgba() -> None:
    c = Color(1.0, 0.0, 0.0).with_alpha(0.5)
    assert c.a == 0.5
    assert c.to_rgba() == (255, 0, 0, 128)
