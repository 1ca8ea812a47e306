"""
Spawn logic: player bullets, enemy waves, bosses, boss fire and particle bursts
"""

from __future__ import annotations

import logging

from .entities import Bullet, Enemy, Boss, BossBullet, Particle
from .world import WorldState

logger = logging.getLogger(__name__)


def spawn_bullet(world: WorldState):
    cfg = world.config
    world.bullets.append(Bullet(
        x=world.player.x,
        y=world.player.y,
        speed=cfg.bullet_speed,
        damage=cfg.bullet_damage(world.progression.level),
    ))


def spawn_enemy_wave(world: WorldState) -> int:
    cfg = world.config
    level = world.progression.level
    count = cfg.enemy_count(level)
    speed = cfg.enemy_speed(level)
    for _ in range(count):
        world.enemies.append(Enemy(
            x=world.rng.random() * (cfg.width - cfg.enemy_size),
            y=-cfg.enemy_size,
            speed=speed,
            size=cfg.enemy_size,
        ))
    logger.debug("Enemy wave: %d enemies at speed %.2f", count, speed)
    return count


def spawn_bosses(world: WorldState) -> int:
    """Replace the boss pool with the wave for the current level"""
    cfg = world.config
    level = world.progression.level
    count = cfg.boss_count(level)
    if count == 0:
        return 0

    bosses = []
    for i in range(count):
        weak = world.rng.random() < cfg.boss_weak_chance
        bosses.append(Boss(
            x=cfg.boss_start_x + i * cfg.boss_spacing,
            y=cfg.boss_start_y,
            hp=cfg.boss_hp(level, weak),
            direction=1 if world.rng.random() > 0.5 else -1,
            size=cfg.boss_size,
        ))
    for old in world.bosses:
        old.alive = False
    world.bosses = bosses
    logger.info("Boss wave at level %d: %d boss(es), hp %s",
                level, count, [b.hp for b in bosses])
    return count


def spawn_boss_fire(world: WorldState) -> int:
    """Each live boss fires with a level-dependent probability"""
    cfg = world.config
    chance = cfg.boss_fire_probability(world.progression.level)
    fired = 0
    for boss in world.bosses:
        if world.rng.random() < chance:
            world.boss_bullets.append(BossBullet(
                x=boss.x + boss.size / 2,
                y=boss.y + boss.size,
                speed=cfg.boss_bullet_speed,
            ))
            fired += 1
    return fired


def explode(world: WorldState, x: float, y: float, count: int):
    cfg = world.config
    rng = world.rng
    for _ in range(count):
        world.particles.append(Particle(
            x=x,
            y=y,
            vx=(rng.random() - 0.5) * cfg.particle_spread,
            vy=(rng.random() - 0.5) * cfg.particle_spread,
            life=cfg.particle_life,
        ))


class SpawnScheduler:
    """Wall-clock interval timers for bullets and enemy waves"""

    def __init__(self, bullet_interval: float, enemy_interval: float):
        self.bullet_interval = bullet_interval
        self.enemy_interval = enemy_interval
        self._bullet_timer = 0.0
        self._enemy_timer = 0.0

    @classmethod
    def from_config(cls, config) -> "SpawnScheduler":
        return cls(config.bullet_interval, config.enemy_interval)

    def reset(self):
        self._bullet_timer = 0.0
        self._enemy_timer = 0.0

    def advance(self, world: WorldState, elapsed: float):
        """Fire every interval that elapsed, then let bosses shoot"""
        if world.progression.game_over:
            return
        if elapsed < 0:
            raise ValueError(f"elapsed time must be non-negative, got {elapsed}")

        self._bullet_timer += elapsed
        while self._bullet_timer >= self.bullet_interval:
            self._bullet_timer -= self.bullet_interval
            spawn_bullet(world)

        self._enemy_timer += elapsed
        while self._enemy_timer >= self.enemy_interval:
            self._enemy_timer -= self.enemy_interval
            spawn_enemy_wave(world)

        spawn_boss_fire(world)
