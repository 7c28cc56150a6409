"""
Arcade window - clock, input and render host for SimulationEngine
"""

from __future__ import annotations

from typing import Optional, Tuple

import arcade

from .controls import InputAdapter
from .core.color import Color
from .core.engine import FrameSnapshot, InputAction, SimulationEngine
from .core.vector import Vector2, clamp

# Arcade device codes -> engine actions
KEY_BINDINGS = {
    arcade.key.W: InputAction.UP,
    arcade.key.S: InputAction.DOWN,
    arcade.key.A: InputAction.LEFT,
    arcade.key.D: InputAction.RIGHT,
    arcade.key.SPACE: InputAction.PAUSE_TOGGLE,
}

MOUSE_BINDINGS = {
    arcade.MOUSE_BUTTON_LEFT: InputAction.SHOOT,
}

RESTART_KEY = arcade.key.R

PAUSED_MESSAGE = "GAME IS PAUSED (press SPACE to resume)"
DEFEATED_MESSAGE = "YOU DIED (press R to restart)"


class ShooterWindow(arcade.Window):
    """Arcade window that ticks, feeds and draws a SimulationEngine"""

    def __init__(
        self,
        engine: SimulationEngine,
        width: int = 1600,
        height: int = 900,
        title: str = "Swarm Shooter",
        background_color: Tuple[int, int, int] = (24, 24, 24),
        message_color: str = "#ffffff",
        font_size: int = 30,
    ):
        super().__init__(width, height, title, resizable=True)
        self.controls = InputAdapter(engine, KEY_BINDINGS, MOUSE_BINDINGS, restart_key=RESTART_KEY)
        self.background_color = background_color
        self.message_color = Color.hex(message_color)
        self.font_size = font_size

        self.HUD_C = (220, 220, 220)
        self.BAR_BG = (60, 60, 60)

    @property
    def engine(self) -> SimulationEngine:
        return self.controls.engine

    @engine.setter
    def engine(self, engine: SimulationEngine):
        self.controls.engine = engine

    # ----------------------------
    # Clock
    # ----------------------------

    def on_update(self, delta_time: float):
        self.engine.tick(delta_time)

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        self.controls.key_press(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self.controls.key_release(symbol)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        self.controls.mouse_press(x, y, button, self.height)

    # ----------------------------
    # Render
    # ----------------------------

    def _color(self, color: Color, grayness: float):
        return color.gray_scale(grayness).to_rgba()

    def _circle(self, position: Vector2, radius: float, color: Color, grayness: float):
        arcade.draw_circle_filled(
            position.x, self.height - position.y, radius, self._color(color, grayness)
        )

    def _message(self, text: str, color: Color):
        if not text:
            return
        arcade.draw_text(
            text,
            self.width / 2,
            self.height / 2,
            color.to_rgba(),
            self.font_size,
            anchor_x="center",
            anchor_y="center",
        )

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        snap: FrameSnapshot = self.engine.snapshot()
        gray = snap.grayness

        if snap.player.alive:
            self._circle(snap.player.position, snap.player.radius, snap.player.color, gray)
        for group in (snap.bullets, snap.particles, snap.enemies):
            for circle in group:
                self._circle(circle.position, circle.radius, circle.color, gray)

        if snap.paused:
            self._message(PAUSED_MESSAGE, self.message_color)
        elif not snap.player.alive:
            self._message(DEFEATED_MESSAGE, self.message_color)
        else:
            self._message(snap.popup_text, self.message_color.with_alpha(snap.popup_alpha))

        self._draw_hud(snap)

    def _draw_hud(self, snap: FrameSnapshot):
        # Health bar
        bar_w, bar_h = 180, 10
        x0, y0 = 12, self.height - 22
        arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, y0, y0 + bar_h, self.BAR_BG)
        fill = bar_w * clamp(snap.player.health / snap.player.max_health, 0, 1)
        if fill > 0:
            arcade.draw_lrbt_rectangle_filled(
                x0, x0 + fill, y0, y0 + bar_h, self._color(snap.player.color, snap.grayness)
            )

        txt = f"Score: {snap.score}  Best: {snap.best_score}"
        arcade.draw_text(txt, 12, self.height - 44, self.HUD_C, 14)


def play(engine: Optional[SimulationEngine] = None, **window_config) -> SimulationEngine:
    """Open a window and run the game until it is closed"""
    if engine is None:
        engine = SimulationEngine()
    ShooterWindow(engine, **window_config)
    arcade.run()
    return engine
