"""
Tutorial popup sequencer

The tutorial walks the player through moving and shooting before any enemy
shows up. Transitions are plain functions over `TutorialState`; the
controller only turns them into popup fades and reports what happened as
`TutorialEffect` values, so the engine drives everything from its tick loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .vector import clamp


class TutorialState(IntEnum):
    LEARNING_MOVEMENT = 0
    LEARNING_SHOOTING = 1
    FINISHED = 2


class TutorialTrigger(Enum):
    PLAYER_MOVED = "player_moved"
    PLAYER_SHOT = "player_shot"


class FadeEvent(Enum):
    FADED_OUT = "faded_out"
    FADED_IN = "faded_in"


class EffectKind(Enum):
    FADE_OUT = "fade_out"
    FADE_IN = "fade_in"


@dataclass(frozen=True)
class TutorialEffect:
    """What the controller did to its popup in response to a trigger or a tick"""
    kind: EffectKind
    message: str


TUTORIAL_MESSAGES = {
    TutorialState.LEARNING_MOVEMENT: "WASD to move",
    TutorialState.LEARNING_SHOOTING: "Left Mouse Click to shoot",
    TutorialState.FINISHED: "",
}

# trigger -> state it completes
_TRANSITIONS = {
    TutorialTrigger.PLAYER_MOVED: TutorialState.LEARNING_MOVEMENT,
    TutorialTrigger.PLAYER_SHOT: TutorialState.LEARNING_SHOOTING,
}


def next_state(state: TutorialState, trigger: TutorialTrigger) -> TutorialState:
    """State after `trigger`; triggers that do not match `state` change nothing"""
    if _TRANSITIONS[trigger] == state:
        return TutorialState(state + 1)
    return state


@dataclass
class Popup:
    """Centered message that fades in and out at a fixed speed"""
    text: str
    speed: float = 1.7  # alpha per second
    alpha: float = 0.0
    dalpha: float = 0.0

    def fade_in(self):
        self.dalpha = self.speed

    def fade_out(self):
        self.dalpha = -self.speed

    def update(self, dt: float) -> Optional[FadeEvent]:
        """Integrate alpha; reports a finished fade exactly once"""
        self.alpha = clamp(self.alpha + self.dalpha * dt, 0.0, 1.0)

        if self.dalpha < 0.0 and self.alpha <= 0.0:
            self.dalpha = 0.0
            return FadeEvent.FADED_OUT
        if self.dalpha > 0.0 and self.alpha >= 1.0:
            self.dalpha = 0.0
            return FadeEvent.FADED_IN
        return None


class TutorialController:
    """Movement hint -> shooting hint -> finished"""

    def __init__(self, fade_speed: float = 1.7):
        self.state = TutorialState.LEARNING_MOVEMENT
        self.popup = Popup(TUTORIAL_MESSAGES[self.state], speed=fade_speed)
        self.popup.fade_in()

    @property
    def finished(self) -> bool:
        return self.state == TutorialState.FINISHED

    def fire(self, trigger: TutorialTrigger) -> Optional[TutorialEffect]:
        new_state = next_state(self.state, trigger)
        if new_state == self.state:
            return None
        self.state = new_state
        self.popup.fade_out()
        return TutorialEffect(EffectKind.FADE_OUT, self.popup.text)

    def player_moved(self) -> Optional[TutorialEffect]:
        return self.fire(TutorialTrigger.PLAYER_MOVED)

    def player_shot(self) -> Optional[TutorialEffect]:
        return self.fire(TutorialTrigger.PLAYER_SHOT)

    def update(self, dt: float) -> Optional[TutorialEffect]:
        event = self.popup.update(dt)
        if event is FadeEvent.FADED_OUT:
            # swap in the message of whatever state we reached meanwhile
            self.popup.text = TUTORIAL_MESSAGES[self.state]
            self.popup.fade_in()
            return TutorialEffect(EffectKind.FADE_IN, self.popup.text)
        return None
