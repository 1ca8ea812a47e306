"""
Game entity dataclasses
"""

from dataclasses import dataclass


@dataclass
class Player:
    """Player ship, positioned by its centre"""
    x: float
    y: float
    half_size: float = 16.0
    speed: float = 52.0


@dataclass
class Bullet:
    """Player bullet, a point travelling up"""
    x: float
    y: float
    speed: float = 26.0
    damage: int = 1
    alive: bool = True


@dataclass
class Enemy:
    """Descending enemy, positioned by its top-left corner"""
    x: float
    y: float
    speed: float
    size: float = 32.0
    alive: bool = True

    @property
    def center(self):
        return self.x + self.size / 2, self.y + self.size / 2


@dataclass
class Boss:
    """Patrolling boss, positioned by its top-left corner"""
    x: float
    y: float
    hp: float
    direction: int = 1  # +1 right, -1 left
    size: float = 96.0
    alive: bool = True

    @property
    def center(self):
        return self.x + self.size / 2, self.y + self.size / 2


@dataclass
class BossBullet:
    """Boss projectile, a point travelling down"""
    x: float
    y: float
    speed: float = 7.0
    alive: bool = True


@dataclass
class Particle:
    """Cosmetic explosion fragment"""
    x: float
    y: float
    vx: float
    vy: float
    life: int = 20
