"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def point_in_box(px, py, bx, by, w, h) -> bool:
    """Check if a point lies strictly inside an axis-aligned box (top-left bx, by)"""
    return bx < px < bx + w and by < py < by + h


def point_in_centered_box(px, py, cx, cy, half) -> bool:
    """Check if a point lies strictly inside a square box centred on (cx, cy)"""
    return point_in_box(px, py, cx - half, cy - half, half * 2, half * 2)


def make_rng(seed: Optional[int]) -> random.Random:
    """Create the random source for one world"""
    return random.Random(seed)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
