"""
Progression state machine: score, level, health and the Playing -> GameOver transition
"""

from __future__ import annotations

import logging

from . import spawner
from .utils import clamp
from .world import Phase, ProgressionState, WorldState

logger = logging.getLogger(__name__)


def change_health(progression: ProgressionState, delta: float) -> float:
    """Apply a health change, clamped to [0, max_health]; returns the new health"""
    progression.health = clamp(progression.health + delta, 0.0, progression.max_health)
    return progression.health


def add_score(world: WorldState, points: int) -> int:
    """Add kill points and apply any level-ups they cause; returns levels gained"""
    if points <= 0:
        return 0
    prog = world.progression
    step = world.config.level_score_step

    milestones = (prog.score + points) // step - prog.score // step
    prog.score += points

    gained = 0
    for _ in range(milestones):
        if prog.level >= world.config.max_level:
            break
        prog.level += 1
        gained += 1
        logger.info("Level up: %d (score %d, %s)", prog.level, prog.score, prog.difficulty)
        spawner.spawn_bosses(world)
    return gained


def check(world: WorldState) -> Phase:
    """End the game on the tick health is depleted"""
    prog = world.progression
    if prog.phase is Phase.PLAYING and prog.health <= 0.0:
        prog.phase = Phase.GAME_OVER
        logger.info("Game over at tick %d: score %d, level %d", world.tick, prog.score, prog.level)
    return prog.phase
