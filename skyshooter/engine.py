"""
ShooterGame - the per-frame game loop driver
--------------------------------------------
One call to tick() is one logical update:
input -> player physics -> world physics -> collisions -> spawn timers
-> progression check -> snapshot.

Spawn timers run on wall-clock time (the elapsed seconds handed to tick),
but movement is a fixed amount per tick with no delta-time scaling, so the
simulation runs faster on faster displays. Hosts that need stable speed
should call tick() at a fixed rate.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import collisions, physics, progression
from .collisions import CollisionEvents
from .config import GameConfig
from .input_state import InputState
from .spawner import SpawnScheduler
from .utils import make_rng
from .world import Phase, WorldSnapshot, WorldState

logger = logging.getLogger(__name__)


class ShooterGame:
    """Owns the world, the input state and the spawn timers of one session"""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = config or GameConfig.from_preset("tiered")
        self.config.validate()
        self.input = InputState(self.config.width, self.config.height,
                                dead_zone=self.config.pointer_dead_zone)
        self.scheduler = SpawnScheduler.from_config(self.config)
        self.seed = seed
        self.world = WorldState.create(self.config, make_rng(seed))
        self.last_events = CollisionEvents()

    # ----------------------------
    # Session control
    # ----------------------------

    def reset(self, seed: Optional[int] = None) -> WorldSnapshot:
        """Recreate every pool and the progression state from scratch"""
        if seed is not None:
            self.seed = seed
        self.world = WorldState.create(self.config, make_rng(self.seed))
        self.scheduler.reset()
        self.input.reset()
        self.last_events = CollisionEvents()
        logger.info("World reset (preset %s, seed %s)", self.config.name, self.seed)
        return self.world.snapshot()

    def request_restart(self) -> bool:
        """Restart trigger from the host; only honoured once the game is over"""
        if not self.game_over:
            return False
        self.reset()
        return True

    @property
    def game_over(self) -> bool:
        return self.world.progression.game_over

    @property
    def phase(self) -> Phase:
        return self.world.progression.phase

    # ----------------------------
    # Game loop
    # ----------------------------

    def tick(self, elapsed: float = 0.0) -> WorldSnapshot:
        """Advance one frame; ``elapsed`` is the wall-clock seconds since the last tick"""
        world = self.world
        if world.progression.game_over:
            return world.snapshot()

        world.tick += 1

        intent = self.input.resolve(world.player.x, world.player.y)
        physics.step_player(world, intent)
        physics.step_world(world)

        self.last_events = collisions.resolve(world)

        self.scheduler.advance(world, elapsed)

        progression.check(world)
        world.check_invariants()
        return world.snapshot()

    def snapshot(self) -> WorldSnapshot:
        return self.world.snapshot()
