"""
Arcade host window: feeds input into the engine, ticks it and draws snapshots
"""

from __future__ import annotations

import random
from typing import Optional

import arcade

from .engine import ShooterGame
from .world import WorldSnapshot

KEY_NAMES = {
    arcade.key.W: "w",
    arcade.key.A: "a",
    arcade.key.S: "s",
    arcade.key.D: "d",
    arcade.key.UP: "up",
    arcade.key.DOWN: "down",
    arcade.key.LEFT: "left",
    arcade.key.RIGHT: "right",
}

RESTART_BUTTON = (260, 50)  # width, height in game space


class ShooterWindow(arcade.Window):
    """Arcade window for playing or watching a ShooterGame"""

    def __init__(self, game: ShooterGame, interactive: bool = True,
                 title: str = "SkyShooter - Arcade", n_stars: int = 120):
        cfg = game.config
        super().__init__(cfg.width, cfg.height, title, resizable=True)
        self.game = game
        self.interactive = interactive
        self.snapshot: WorldSnapshot = game.snapshot()

        # Colors
        self.BG = (0, 0, 0)
        self.STAR_C = (255, 255, 255)
        self.PLAYER_C = (80, 200, 120)
        self.ENEMY_C = (220, 80, 80)
        self.BOSS_C = (170, 60, 200)
        self.BULLET_C = (0, 229, 255)
        self.BOSS_BULLET_C = (255, 40, 40)
        self.PARTICLE_C = (255, 165, 0)
        self.HUD_C = (255, 255, 255)

        # Parallax starfield, cosmetic only
        rng = random.Random()
        self.stars = [
            [rng.random() * cfg.width, rng.random() * cfg.height, 0.5 + rng.random() * 1.5]
            for _ in range(n_stars)
        ]

    # ----------------------------
    # Logical <-> window coordinates
    # ----------------------------

    def _view(self):
        """Scale and offsets that letterbox the logical playfield into the window"""
        cfg = self.game.config
        scale = min(self.width / cfg.width, self.height / cfg.height)
        off_x = (self.width - cfg.width * scale) / 2
        off_y = (self.height - cfg.height * scale) / 2
        return scale, off_x, off_y

    def _rect(self, x0: float, y0: float, x1: float, y1: float, color):
        """Fill a game-space rectangle (y pointing down)"""
        scale, off_x, off_y = self._view()
        height = self.game.config.height
        arcade.draw_lrbt_rectangle_filled(
            off_x + x0 * scale,
            off_x + x1 * scale,
            off_y + (height - y1) * scale,
            off_y + (height - y0) * scale,
            color,
        )

    def _text(self, text: str, x: float, y: float, size: int, color=None):
        scale, off_x, off_y = self._view()
        height = self.game.config.height
        arcade.draw_text(text, off_x + x * scale, off_y + (height - y) * scale,
                         color or self.HUD_C, max(1, int(size * scale)))

    def _to_view(self, x: float, y: float):
        """Window pixels (y up) -> position inside the letterboxed view (y down)"""
        scale, off_x, off_y = self._view()
        cfg = self.game.config
        view_w = cfg.width * scale
        view_h = cfg.height * scale
        return x - off_x, view_h - (y - off_y), view_w, view_h

    # ----------------------------
    # Arcade callbacks
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.interactive:
            self.snapshot = self.game.tick(delta_time)
        else:
            self.snapshot = self.game.snapshot()

        height = self.game.config.height
        for star in self.stars:
            star[1] += star[2]
            if star[1] > height:
                star[1] = 0.0

    def on_draw(self):
        self.clear()
        snap = self.snapshot if self.interactive else self.game.snapshot()
        cfg = self.game.config

        self._rect(0, 0, cfg.width, cfg.height, self.BG)
        for x, y, _ in self.stars:
            self._rect(x, y, x + 2, y + 2, self.STAR_C)

        if not snap.game_over:
            p = snap.player
            self._rect(p.x - p.half_size, p.y - p.half_size,
                       p.x + p.half_size, p.y + p.half_size, self.PLAYER_C)

        for b in snap.bullets:
            self._rect(b.x - 3, b.y, b.x + 3, b.y + 18, self.BULLET_C)
        for e in snap.enemies:
            self._rect(e.x, e.y, e.x + e.size, e.y + e.size, self.ENEMY_C)
        for boss in snap.bosses:
            self._rect(boss.x, boss.y, boss.x + boss.size, boss.y + boss.size, self.BOSS_C)
        for bb in snap.boss_bullets:
            self._rect(bb.x - 3, bb.y, bb.x + 3, bb.y + 14, self.BOSS_BULLET_C)
        for pt in snap.particles:
            self._rect(pt.x, pt.y, pt.x + 3, pt.y + 3, self.PARTICLE_C)

        # HUD
        self._rect(12, 12, 252, 141, (0, 0, 0))
        self._text(f"Health: {snap.health:.0f}", 22, 42, 18)
        self._text(f"Level: {snap.level}", 22, 66, 18)
        self._text(f"Difficulty: {snap.difficulty}", 22, 90, 18)
        self._text(f"Score: {snap.score}", 22, 114, 18)

        if snap.game_over:
            self._draw_game_over()

    def _restart_button(self):
        cfg = self.game.config
        bw, bh = RESTART_BUTTON
        bx = cfg.width / 2 - bw / 2
        by = cfg.height / 2 + 10
        return bx, by, bw, bh

    def _draw_game_over(self):
        cfg = self.game.config
        self._rect(0, 0, cfg.width, cfg.height, (0, 0, 0, 180))
        self._text("GAME OVER", cfg.width / 2 - 140, cfg.height / 2 - 40, 48)

        bx, by, bw, bh = self._restart_button()
        self._rect(bx, by, bx + bw, by + bh, self.BULLET_C)
        self._text("RESTART", cfg.width / 2 - 45, by + 33, 22, (0, 0, 0))

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.game.input.press(name)

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.game.input.release(name)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.game.input.set_pointer(*self._to_view(x, y))

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        sx, sy, view_w, view_h = self._to_view(x, y)
        if self.game.game_over:
            cfg = self.game.config
            gx, gy = sx * cfg.width / view_w, sy * cfg.height / view_h
            bx, by, bw, bh = self._restart_button()
            if bx < gx < bx + bw and by < gy < by + bh:
                self.game.request_restart()
            return
        self.game.input.begin_touch(sx, sy, view_w, view_h)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.game.input.move_touch(*self._to_view(x, y))

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.game.input.end_touch()


def play(game: Optional[ShooterGame] = None):
    """Open a window and run the game until it is closed"""
    game = game or ShooterGame()
    window = ShooterWindow(game)
    arcade.run()
    return window.game.snapshot()
