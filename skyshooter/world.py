"""
World state aggregate and the read-only snapshot handed to renderers
"""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .config import GameConfig, difficulty
from .entities import Player, Bullet, Enemy, Boss, BossBullet, Particle


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class ProgressionState:
    """Score, level, health and the play phase"""
    max_health: float = 100.0
    score: int = 0
    level: int = 1
    health: float = 100.0
    phase: Phase = Phase.PLAYING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def difficulty(self) -> str:
        return difficulty(self.level)


@dataclass
class WorldState:
    """Every entity pool plus progression, owned by one game session"""
    config: GameConfig
    rng: random.Random
    player: Player
    progression: ProgressionState
    bullets: List[Bullet] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    bosses: List[Boss] = field(default_factory=list)
    boss_bullets: List[BossBullet] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    tick: int = 0

    @classmethod
    def create(cls, config: GameConfig, rng: random.Random) -> "WorldState":
        player = Player(
            x=config.width / 2,
            y=config.height - config.player_start_offset,
            half_size=config.player_half_size,
            speed=config.player_speed,
        )
        progression = ProgressionState(
            max_health=config.max_health,
            health=config.max_health,
        )
        return cls(config=config, rng=rng, player=player, progression=progression)

    def check_invariants(self):
        """Fail loudly on states the rules can never produce"""
        cfg = self.config
        prog = self.progression
        assert 0.0 <= prog.health <= prog.max_health, f"health out of range: {prog.health}"
        assert prog.score >= 0, f"negative score: {prog.score}"
        assert 1 <= prog.level <= max(cfg.max_level, 1), f"level out of range: {prog.level}"
        if prog.health <= 0.0:
            assert prog.game_over, "health depleted without game over"

        half = self.player.half_size
        assert half <= self.player.x <= cfg.width - half, f"player x out of bounds: {self.player.x}"
        assert half <= self.player.y <= cfg.height - half, f"player y out of bounds: {self.player.y}"

        assert all(b.alive for b in self.bullets), "dead bullet left in pool"
        assert all(e.alive for e in self.enemies), "dead enemy left in pool"
        assert all(b.alive and b.hp > 0 for b in self.bosses), "dead boss left in pool"
        assert all(b.alive for b in self.boss_bullets), "dead boss bullet left in pool"
        assert all(p.life > 0 for p in self.particles), "expired particle left in pool"

    def snapshot(self) -> "WorldSnapshot":
        prog = self.progression
        return WorldSnapshot(
            tick=self.tick,
            width=self.config.width,
            height=self.config.height,
            player=copy.copy(self.player),
            bullets=tuple(copy.copy(b) for b in self.bullets),
            enemies=tuple(copy.copy(e) for e in self.enemies),
            bosses=tuple(copy.copy(b) for b in self.bosses),
            boss_bullets=tuple(copy.copy(b) for b in self.boss_bullets),
            particles=tuple(copy.copy(p) for p in self.particles),
            score=prog.score,
            level=prog.level,
            health=prog.health,
            max_health=prog.max_health,
            difficulty=prog.difficulty,
            phase=prog.phase,
        )


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only view of one tick, in logical game-space coordinates"""
    tick: int
    width: int
    height: int
    player: Player
    bullets: Tuple[Bullet, ...]
    enemies: Tuple[Enemy, ...]
    bosses: Tuple[Boss, ...]
    boss_bullets: Tuple[BossBullet, ...]
    particles: Tuple[Particle, ...]
    score: int
    level: int
    health: float
    max_health: float
    difficulty: str
    phase: Phase

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER
