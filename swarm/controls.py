"""
Input adaptation - device codes to engine calls

Binding tables map whatever codes the host hands out (Arcade key symbols,
mouse buttons) to `InputAction`s. Nothing here imports a windowing library.
"""

from __future__ import annotations

from typing import Dict, Hashable, Optional

from .core.engine import InputAction, SimulationEngine


class InputAdapter:
    """Feeds raw key/mouse events into a SimulationEngine"""

    def __init__(
        self,
        engine: SimulationEngine,
        key_bindings: Dict[Hashable, InputAction],
        mouse_bindings: Dict[Hashable, InputAction],
        restart_key: Optional[Hashable] = None,
    ):
        self.engine = engine
        self.key_bindings = key_bindings
        self.mouse_bindings = mouse_bindings
        self.restart_key = restart_key

    def resolve_key(self, symbol: Hashable) -> Optional[InputAction]:
        return self.key_bindings.get(symbol)

    def resolve_button(self, button: Hashable) -> Optional[InputAction]:
        return self.mouse_bindings.get(button)

    def key_press(self, symbol: Hashable):
        # restart only once the player is down
        if symbol == self.restart_key and not self.engine.player.alive:
            self.engine.reset()
            return
        self.engine.key_down(self.resolve_key(symbol))

    def key_release(self, symbol: Hashable):
        self.engine.key_up(self.resolve_key(symbol))

    def mouse_press(self, x: float, y: float, button: Hashable, height: float):
        """`y` counts up from the bottom edge; the engine's y counts down"""
        if self.resolve_button(button) is not InputAction.SHOOT:
            return None
        return self.engine.pointer_down(x, height - y)
