"""
Game configuration for the shooter engine
Two tuning presets of the same engine: "tiered" (canonical) and "classic"
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Tuple


# ==============================================================================
# PRESETS
# Plain dicts so they can be edited, printed or loaded from elsewhere
# ==============================================================================

# Tiered multi-boss ruleset (canonical)
TIERED_CONFIG = {
    "name": "tiered",
    "description": "Boss count grows with level tier (1 at L3, 2 at L7, 3 at L10)",
    "boss_policy": "tiered",
    "boss_tiers": ((10, 3), (7, 2), (3, 1)),
    "boss_every_levels": 3,
    "enemy_base_count": 4,
    "enemy_base_speed": 2.0,
    "enemy_speed_per_level": 0.25,
    "bullet_damage_step": 2,
    "boss_fire_chance": 0.015,
    "boss_fire_chance_hard": 0.03,
    "boss_bullet_damage": 6.0,
    "boss_bullet_damage_hard": 10.0,
}

# Single boss every few levels, slower waves
CLASSIC_CONFIG = {
    "name": "classic",
    "description": "One boss every 3 levels, gentler enemy curve",
    "boss_policy": "interval",
    "boss_tiers": ((10, 3), (7, 2), (3, 1)),
    "boss_every_levels": 3,
    "enemy_base_count": 3,
    "enemy_base_speed": 2.0,
    "enemy_speed_per_level": 0.2,
    "bullet_damage_step": 3,
    "boss_fire_chance": 0.02,
    "boss_fire_chance_hard": 0.02,
    "boss_bullet_damage": 8.0,
    "boss_bullet_damage_hard": 8.0,
}

PRESETS = {
    "tiered": TIERED_CONFIG,
    "classic": CLASSIC_CONFIG,
}

BOSS_POLICIES = ("tiered", "interval")


@dataclass
class GameConfig:
    """All tunable constants of one game session"""
    name: str = "tiered"
    description: str = ""

    # Playfield (logical coordinates)
    width: int = 1280
    height: int = 720

    # Player
    player_half_size: float = 16.0
    player_speed: float = 52.0  # px per tick
    player_start_offset: float = 90.0  # distance from bottom edge
    touch_speed_multiplier: float = 1.0
    pointer_dead_zone: float = 4.0

    # Health
    max_health: float = 100.0
    enemy_escape_penalty: float = 3.0
    boss_health_refill: float = 0.5  # fraction of max_health

    # Player bullets
    bullet_interval: float = 0.07  # seconds
    bullet_speed: float = 26.0
    bullet_damage_step: int = 2

    # Enemies
    enemy_interval: float = 1.2  # seconds
    enemy_base_count: int = 4
    enemy_size: float = 32.0
    enemy_base_speed: float = 2.0
    enemy_speed_per_level: float = 0.25

    # Bosses
    boss_policy: str = "tiered"
    boss_tiers: Tuple[Tuple[int, int], ...] = ((10, 3), (7, 2), (3, 1))
    boss_every_levels: int = 3
    boss_size: float = 96.0
    boss_speed: float = 2.0
    boss_start_x: float = 200.0
    boss_spacing: float = 300.0
    boss_start_y: float = 60.0
    boss_weak_chance: float = 0.6
    boss_weak_hp: Tuple[float, float] = (40.0, 8.0)  # base, per level
    boss_strong_hp: Tuple[float, float] = (70.0, 12.0)
    boss_score_bonus: int = 5

    # Boss bullets
    boss_fire_chance: float = 0.015
    boss_fire_chance_hard: float = 0.03
    boss_fire_hard_level: int = 7
    boss_bullet_speed: float = 7.0
    boss_bullet_damage: float = 6.0
    boss_bullet_damage_hard: float = 10.0

    # Progression
    level_score_step: int = 12
    max_level: int = 10

    # Particles
    particle_life: int = 20
    particle_spread: float = 7.0
    enemy_burst: int = 14
    boss_hit_burst: int = 4
    boss_death_burst: int = 40

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        config = cls(**data)
        config.validate()
        return config

    @classmethod
    def from_preset(cls, name: str = "tiered", **overrides) -> "GameConfig":
        if name not in PRESETS:
            raise ValueError(f"Unknown preset: {name} (choose from {sorted(PRESETS)})")
        data = dict(PRESETS[name])
        data.update(overrides)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self):
        if self.boss_policy not in BOSS_POLICIES:
            raise ValueError(f"Unknown boss policy: {self.boss_policy}")
        for key in ("width", "height", "player_half_size", "enemy_size", "boss_size",
                    "bullet_interval", "enemy_interval", "max_health", "level_score_step",
                    "boss_every_levels", "bullet_damage_step"):
            if getattr(self, key) <= 0:
                raise ValueError(f"{key} must be positive, got {getattr(self, key)}")
        if not 0.0 <= self.boss_weak_chance <= 1.0:
            raise ValueError("boss_weak_chance must be within [0, 1]")
        if self.max_level < 1:
            raise ValueError("max_level must be at least 1")

    # ----------------------------
    # Level-driven curves
    # ----------------------------

    def bullet_damage(self, level: int) -> int:
        return 1 + level // self.bullet_damage_step

    def enemy_count(self, level: int) -> int:
        return self.enemy_base_count + level

    def enemy_speed(self, level: int) -> float:
        return self.enemy_base_speed + level * self.enemy_speed_per_level

    def boss_count(self, level: int) -> int:
        """Number of bosses spawned when ``level`` is reached"""
        if self.boss_policy == "interval":
            return 1 if level % self.boss_every_levels == 0 else 0
        for min_level, count in self.boss_tiers:
            if level >= min_level:
                return count
        return 0

    def boss_hp(self, level: int, weak: bool) -> float:
        base, per_level = self.boss_weak_hp if weak else self.boss_strong_hp
        return base + per_level * level

    def boss_fire_probability(self, level: int) -> float:
        if level >= self.boss_fire_hard_level:
            return self.boss_fire_chance_hard
        return self.boss_fire_chance

    def boss_bullet_hit(self, level: int) -> float:
        if level >= self.boss_fire_hard_level:
            return self.boss_bullet_damage_hard
        return self.boss_bullet_damage


def difficulty(level: int) -> str:
    """Difficulty label for a level"""
    if level < 3:
        return "Easy"
    if level < 6:
        return "Medium"
    return "Hard"
