"""
Collision resolution between bullets, enemies, bosses and the player
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from . import progression, spawner
from .utils import point_in_box, point_in_centered_box
from .world import WorldState

logger = logging.getLogger(__name__)


@dataclass
class CollisionEvents:
    """What happened during one resolution pass"""
    enemies_killed: int = 0
    boss_hits: int = 0
    bosses_killed: int = 0
    player_hits: int = 0
    damage_taken: float = 0.0
    score_gained: int = 0


def resolve_bullets_vs_enemies(world: WorldState, events: CollisionEvents):
    cfg = world.config
    for e in world.enemies:
        for b in world.bullets:
            if not b.alive:
                continue
            if point_in_box(b.x, b.y, e.x, e.y, e.size, e.size):
                e.alive = False
                b.alive = False
                cx, cy = e.center
                spawner.explode(world, cx, cy, cfg.enemy_burst)
                events.enemies_killed += 1
                events.score_gained += 1
                progression.add_score(world, 1)
                break

    world.enemies = [e for e in world.enemies if e.alive]
    world.bullets = [b for b in world.bullets if b.alive]


def resolve_bullets_vs_bosses(world: WorldState, events: CollisionEvents):
    cfg = world.config
    # a level-up mid-loop swaps the pool and marks the old bosses dead
    bosses = list(world.bosses)
    for boss in bosses:
        for b in world.bullets:
            if not boss.alive:
                break
            if not b.alive:
                continue
            if point_in_box(b.x, b.y, boss.x, boss.y, boss.size, boss.size):
                b.alive = False
                boss.hp -= b.damage
                spawner.explode(world, b.x, b.y, cfg.boss_hit_burst)
                events.boss_hits += 1
                if boss.hp <= 0:
                    _destroy_boss(world, boss, events)

    world.bosses = [boss for boss in world.bosses if boss.alive]
    world.bullets = [b for b in world.bullets if b.alive]


def _destroy_boss(world: WorldState, boss, events: CollisionEvents):
    cfg = world.config
    boss.hp = 0
    boss.alive = False
    cx, cy = boss.center
    spawner.explode(world, cx, cy, cfg.boss_death_burst)
    progression.change_health(world.progression, cfg.boss_health_refill * cfg.max_health)
    events.bosses_killed += 1
    events.score_gained += cfg.boss_score_bonus
    logger.info("Boss destroyed at level %d (+%d score)", world.progression.level, cfg.boss_score_bonus)
    progression.add_score(world, cfg.boss_score_bonus)


def resolve_boss_bullets_vs_player(world: WorldState, events: CollisionEvents):
    player = world.player
    damage = world.config.boss_bullet_hit(world.progression.level)
    for bb in world.boss_bullets:
        if point_in_centered_box(bb.x, bb.y, player.x, player.y, player.half_size):
            bb.alive = False
            progression.change_health(world.progression, -damage)
            events.player_hits += 1
            events.damage_taken += damage
    world.boss_bullets = [bb for bb in world.boss_bullets if bb.alive]


def resolve(world: WorldState) -> CollisionEvents:
    events = CollisionEvents()
    resolve_bullets_vs_enemies(world, events)
    resolve_bullets_vs_bosses(world, events)
    resolve_boss_bullets_vs_player(world, events)
    return events
