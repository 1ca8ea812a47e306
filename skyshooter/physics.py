"""
Per-tick position integration and boundary culling
"""

from __future__ import annotations

import math

from . import progression
from .input_state import Intent
from .utils import clamp
from .world import WorldState


def step_player(world: WorldState, intent: Intent):
    player = world.player
    cfg = world.config

    speed = player.speed
    if intent.source == "touch":
        speed *= cfg.touch_speed_multiplier

    step_x = intent.dx * speed
    step_y = intent.dy * speed

    # Pointer-follow stops on the target instead of overshooting it
    if intent.target is not None:
        dist = math.hypot(intent.target[0] - player.x, intent.target[1] - player.y)
        if speed > dist:
            scale = dist / speed
            step_x *= scale
            step_y *= scale

    h = player.half_size
    player.x = clamp(player.x + step_x, h, cfg.width - h)
    player.y = clamp(player.y + step_y, h, cfg.height - h)


def step_bullets(world: WorldState):
    for b in world.bullets:
        b.y -= b.speed
        if b.y < 0:
            b.alive = False
    world.bullets = [b for b in world.bullets if b.alive]


def step_enemies(world: WorldState) -> int:
    """Move enemies down; returns how many escaped past the bottom edge"""
    escaped = 0
    for e in world.enemies:
        e.y += e.speed
        if e.y > world.config.height:
            e.alive = False
            escaped += 1
    world.enemies = [e for e in world.enemies if e.alive]
    if escaped:
        progression.change_health(world.progression, -escaped * world.config.enemy_escape_penalty)
    return escaped


def step_bosses(world: WorldState):
    right_edge = world.config.width
    for boss in world.bosses:
        boss.x += world.config.boss_speed * boss.direction
        if boss.x < 0 or boss.x > right_edge - boss.size:
            boss.direction *= -1


def step_boss_bullets(world: WorldState):
    for bb in world.boss_bullets:
        bb.y += bb.speed
        if bb.y > world.config.height:
            bb.alive = False
    world.boss_bullets = [bb for bb in world.boss_bullets if bb.alive]


def step_particles(world: WorldState):
    for p in world.particles:
        p.x += p.vx
        p.y += p.vy
        p.life -= 1
    world.particles = [p for p in world.particles if p.life > 0]


def step_world(world: WorldState) -> int:
    """Advance every non-player pool; returns the number of escaped enemies"""
    step_bullets(world)
    escaped = step_enemies(world)
    step_bosses(world)
    step_boss_bullets(world)
    step_particles(world)
    return escaped
