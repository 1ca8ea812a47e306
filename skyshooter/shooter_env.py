"""
SkyShooterEnv - Gymnasium wrapper around the arcade shooter engine
------------------------------------------------------------------
- Gymnasium API over ShooterGame, ticked at a fixed dt
- Discrete MultiDiscrete action space: [horizontal(3), vertical(3)],
  fed to the engine as held direction keys
- Vector observation: player state + top-K nearest enemies
  + top-B bosses + top-M nearest boss bullets
- rgb_array rendering rasterizes the snapshot with numpy;
  human rendering opens the arcade window

Quick test:
    python -m skyshooter --headless
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .engine import ShooterGame
from .input_state import UP, DOWN, LEFT, RIGHT
from .utils import clamp, seed_everything
from .world import WorldSnapshot


class SkyShooterEnv(gym.Env):
    """Vertical shooter environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        preset: str = "tiered",
        config: Optional[GameConfig] = None,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        b_bosses: int = 3,
        m_boss_bullets: int = 3,
        damage_weight: float = 0.05,
        death_penalty: float = 5.0,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        self.render_mode = render_mode

        self.config = config or GameConfig.from_preset(preset)
        self.dt = dt
        self.max_steps = max_steps

        # Observation config
        self.k_enemies = k_enemies
        self.b_bosses = b_bosses
        self.m_boss_bullets = m_boss_bullets

        # Reward config
        self.damage_weight = damage_weight
        self.death_penalty = death_penalty

        # Action space:
        # horizontal: 0 none, 1 left, 2 right
        # vertical: 0 none, 1 up, 2 down
        self.action_space = spaces.MultiDiscrete([3, 3])

        # Observation space (vector)
        # Player: pos(2) health(1) level(1) progress to next level(1)
        # Each enemy: rel pos(2) speed(1)
        # Each boss: rel pos(2) hp(1)
        # Each boss bullet: rel pos(2)
        obs_dim = 5 + (self.k_enemies * 3) + (self.b_bosses * 3) + (self.m_boss_bullets * 2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.game = ShooterGame(self.config)
        self._snapshot: WorldSnapshot = self.game.snapshot()
        self._window = None
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))

        self._step_count = 0
        self._snapshot = self.game.reset(seed=seed)

        return self._get_obs(), self._get_info()

    def step(self, action):
        if not self.action_space.contains(np.asarray(action, dtype=np.int64)):
            raise ValueError(f"Invalid action: {action}")

        horizontal, vertical = int(action[0]), int(action[1])
        self._apply_action(horizontal, vertical)

        before = self._snapshot
        self._snapshot = self.game.tick(self.dt)

        reward = self._compute_reward(before, self._snapshot)

        terminated = self._snapshot.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    def _apply_action(self, horizontal: int, vertical: int):
        controls = self.game.input
        controls.set_direction(LEFT, horizontal == 1)
        controls.set_direction(RIGHT, horizontal == 2)
        controls.set_direction(UP, vertical == 1)
        controls.set_direction(DOWN, vertical == 2)

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        snap = self._snapshot
        w, h = float(snap.width), float(snap.height)
        px, py = snap.player.x, snap.player.y
        step = self.config.level_score_step

        obs_parts = [
            (px / w) * 2 - 1,
            (py / h) * 2 - 1,
            (snap.health / snap.max_health) * 2 - 1,
            (snap.level / self.config.max_level) * 2 - 1,
            ((snap.score % step) / step) * 2 - 1,
        ]

        # Enemies: top-K nearest (by centre)
        max_speed = max(1e-6, self.config.enemy_speed(self.config.max_level))
        enemies_sorted = sorted(
            snap.enemies,
            key=lambda e: (e.center[0] - px) ** 2 + (e.center[1] - py) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                cx, cy = e.center
                obs_parts += [
                    clamp((cx - px) / w, -1, 1),
                    clamp((cy - py) / h, -1, 1),
                    clamp(e.speed / max_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        # Bosses: in pool order (at most a few alive)
        max_hp = max(1e-6, self.config.boss_hp(self.config.max_level, weak=False))
        for i in range(self.b_bosses):
            if i < len(snap.bosses):
                boss = snap.bosses[i]
                cx, cy = boss.center
                obs_parts += [
                    clamp((cx - px) / w, -1, 1),
                    clamp((cy - py) / h, -1, 1),
                    clamp(boss.hp / max_hp, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        # Boss bullets: top-M nearest
        bullets_sorted = sorted(
            snap.boss_bullets,
            key=lambda b: (b.x - px) ** 2 + (b.y - py) ** 2
        )
        for i in range(self.m_boss_bullets):
            if i < len(bullets_sorted):
                b = bullets_sorted[i]
                obs_parts += [clamp((b.x - px) / w, -1, 1), clamp((b.y - py) / h, -1, 1)]
            else:
                obs_parts += [0.0, 0.0]

        obs = np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)
        return obs

    def _compute_reward(self, before: WorldSnapshot, after: WorldSnapshot) -> float:
        reward = float(after.score - before.score)
        health_lost = max(0.0, before.health - after.health)
        reward -= self.damage_weight * health_lost
        if after.game_over:
            reward -= self.death_penalty
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        snap = self._snapshot
        return {
            "score": snap.score,
            "level": snap.level,
            "health": snap.health,
            "difficulty": snap.difficulty,
            "num_enemies": len(snap.enemies),
            "num_bosses": len(snap.bosses),
            "num_bullets": len(snap.bullets),
            "num_boss_bullets": len(snap.boss_bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            return rasterize(self._snapshot)

        if self._window is None:
            # arcade needs a display, so only import it when a window is requested
            from .window import ShooterWindow
            self._window = ShooterWindow(self.game, interactive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Software rasterizer for rgb_array mode
# ----------------------------

BG_C = (18, 18, 22)
PLAYER_C = (80, 200, 120)
ENEMY_C = (220, 80, 80)
BOSS_C = (170, 60, 200)
BULLET_C = (0, 229, 255)
BOSS_BULLET_C = (255, 40, 40)
PARTICLE_C = (255, 165, 0)


def _fill(frame: np.ndarray, x0: float, y0: float, x1: float, y1: float, color):
    h, w = frame.shape[:2]
    left = int(clamp(round(x0), 0, w))
    right = int(clamp(round(x1), 0, w))
    top = int(clamp(round(y0), 0, h))
    bottom = int(clamp(round(y1), 0, h))
    if right > left and bottom > top:
        frame[top:bottom, left:right] = color


def rasterize(snap: WorldSnapshot) -> np.ndarray:
    """Paint a snapshot into an (H, W, 3) uint8 array, y pointing down"""
    frame = np.empty((snap.height, snap.width, 3), dtype=np.uint8)
    frame[:] = BG_C

    for e in snap.enemies:
        _fill(frame, e.x, e.y, e.x + e.size, e.y + e.size, ENEMY_C)
    for boss in snap.bosses:
        _fill(frame, boss.x, boss.y, boss.x + boss.size, boss.y + boss.size, BOSS_C)
    for b in snap.bullets:
        _fill(frame, b.x - 3, b.y, b.x + 3, b.y + 18, BULLET_C)
    for bb in snap.boss_bullets:
        _fill(frame, bb.x - 3, bb.y, bb.x + 3, bb.y + 14, BOSS_BULLET_C)
    for p in snap.particles:
        _fill(frame, p.x, p.y, p.x + 3, p.y + 3, PARTICLE_C)

    player = snap.player
    hs = player.half_size
    _fill(frame, player.x - hs, player.y - hs, player.x + hs, player.y + hs, PLAYER_C)
    return frame


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, preset: str = "tiered", seed: Optional[int] = 42,
                       max_steps: int = 3600) -> Dict[str, Any]:
    """Run a random-policy episode and return the final info"""
    env = SkyShooterEnv(render_mode="human" if render else None, preset=preset, max_steps=max_steps)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}")
    print(f"Score: {info['score']}  Level: {info['level']}  "
          f"Health: {info['health']:.0f}  Steps: {info['step']}")

    env.close()
    info["return"] = total
    info["terminated"] = terminated
    return info
