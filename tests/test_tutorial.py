from __future__ import annotations

import pytest

from swarm.core.tutorial import (
    TUTORIAL_MESSAGES,
    EffectKind,
    FadeEvent,
    Popup,
    TutorialController,
    TutorialEffect,
    TutorialState,
    TutorialTrigger,
    next_state,
)


def test_next_state_only_advances_on_matching_trigger() -> None:
    moved, shot = TutorialTrigger.PLAYER_MOVED, TutorialTrigger.PLAYER_SHOT

    assert next_state(TutorialState.LEARNING_MOVEMENT, moved) == TutorialState.LEARNING_SHOOTING
    assert next_state(TutorialState.LEARNING_MOVEMENT, shot) == TutorialState.LEARNING_MOVEMENT
    assert next_state(TutorialState.LEARNING_SHOOTING, shot) == TutorialState.FINISHED
    assert next_state(TutorialState.LEARNING_SHOOTING, moved) == TutorialState.LEARNING_SHOOTING
    assert next_state(TutorialState.FINISHED, moved) == TutorialState.FINISHED
    assert next_state(TutorialState.FINISHED, shot) == TutorialState.FINISHED


def test_controller_starts_fading_in_movement_hint() -> None:
    t = TutorialController()
    assert t.state == TutorialState.LEARNING_MOVEMENT
    assert t.popup.text == "WASD to move"
    assert t.popup.alpha == 0.0
    assert t.popup.dalpha > 0.0


def test_state_never_goes_backward() -> None:
    t = TutorialController()
    seen = [t.state]

    for trigger in [TutorialTrigger.PLAYER_SHOT, TutorialTrigger.PLAYER_MOVED,
                    TutorialTrigger.PLAYER_MOVED, TutorialTrigger.PLAYER_SHOT,
                    TutorialTrigger.PLAYER_MOVED, TutorialTrigger.PLAYER_SHOT]:
        t.fire(trigger)
        t.update(0.1)
        seen.append(t.state)

    assert seen == sorted(seen)
    assert t.finished


def test_repeated_player_moved_is_a_no_op() -> None:
    t = TutorialController()
    assert t.player_moved() == TutorialEffect(EffectKind.FADE_OUT, "WASD to move")
    assert t.state == TutorialState.LEARNING_SHOOTING

    for _ in range(5):
        assert t.player_moved() is None
    assert t.state == TutorialState.LEARNING_SHOOTING


def test_fade_out_swaps_message_and_fades_in() -> None:
    t = TutorialController(fade_speed=1.7)
    assert t.update(1.0) is None  # fully faded in
    assert t.popup.alpha == 1.0

    t.player_moved()
    effect = t.update(1.0)
    assert effect == TutorialEffect(EffectKind.FADE_IN, TUTORIAL_MESSAGES[TutorialState.LEARNING_SHOOTING])
    assert t.popup.text == "Left Mouse Click to shoot"
    assert t.popup.alpha == 0.0
    assert t.popup.dalpha > 0.0

    assert t.update(0.1) is None


def test_both_triggers_before_fade_out_lands_on_finished_message() -> None:
    t = TutorialController()
    t.update(1.0)
    t.player_moved()
    t.player_shot()
    effect = t.update(1.0)
    assert effect == TutorialEffect(EffectKind.FADE_IN, "")
    assert t.finished


def test_popup_alpha_is_linear_and_clamped() -> None:
    p = Popup("hi", speed=2.0)
    p.fade_in()
    assert p.update(0.25) is None
    assert p.alpha == pytest.approx(0.5)

    assert p.update(10.0) is FadeEvent.FADED_IN
    assert p.alpha == 1.0
    assert p.update(10.0) is None

    p.fade_out()
    assert p.update(0.25) is None
    assert p.alpha == pytest.approx(0.5)
    assert p.update(10.0) is FadeEvent.FADED_OUT
    assert p.alpha == 0.0
    assert p.update(10.0) is None
