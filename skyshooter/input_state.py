"""
InputState - latest directional intent from keyboard, mouse and touch
---------------------------------------------------------------------
Keyboard wins whenever a direction key is held. Otherwise the ship follows
the active pointer (touch before mouse) with a small dead-zone on arrival.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .utils import clamp, normalize

UP, DOWN, LEFT, RIGHT = "up", "down", "left", "right"

DIRECTION_VECTORS = {
    UP: (0.0, -1.0),
    DOWN: (0.0, 1.0),
    LEFT: (-1.0, 0.0),
    RIGHT: (1.0, 0.0),
}

# Key names (lower case) -> logical direction
KEY_BINDINGS: Dict[str, str] = {
    "w": UP,
    "up": UP,
    "arrowup": UP,
    "s": DOWN,
    "down": DOWN,
    "arrowdown": DOWN,
    "a": LEFT,
    "left": LEFT,
    "arrowleft": LEFT,
    "d": RIGHT,
    "right": RIGHT,
    "arrowright": RIGHT,
}


def to_logical(sx: float, sy: float, view_w: float, view_h: float,
               width: float, height: float) -> Tuple[float, float]:
    """Map a screen position inside a view of size view_w x view_h to game space"""
    if view_w <= 0 or view_h <= 0:
        return clamp(sx, 0.0, width), clamp(sy, 0.0, height)
    x = sx * (width / view_w)
    y = sy * (height / view_h)
    return clamp(x, 0.0, width), clamp(y, 0.0, height)


@dataclass
class Intent:
    """Movement intent for one tick"""
    dx: float = 0.0
    dy: float = 0.0
    source: str = "none"  # "keyboard", "mouse", "touch" or "none"
    target: Optional[Tuple[float, float]] = None

    @property
    def is_zero(self) -> bool:
        return self.dx == 0.0 and self.dy == 0.0


class InputState:
    """Holds the raw input and resolves it into one intent per tick"""

    def __init__(self, width: float = 1280, height: float = 720, dead_zone: float = 4.0):
        self.width = width
        self.height = height
        self.dead_zone = dead_zone
        self.held = {UP: False, DOWN: False, LEFT: False, RIGHT: False}
        self.mouse: Optional[Tuple[float, float]] = None
        self.touch: Optional[Tuple[float, float]] = None

    # ----------------------------
    # Keyboard
    # ----------------------------

    def press(self, key: str) -> bool:
        """Mark a bound key as held; returns False for unbound keys"""
        direction = KEY_BINDINGS.get(key.lower())
        if direction is None:
            return False
        self.held[direction] = True
        return True

    def release(self, key: str) -> bool:
        direction = KEY_BINDINGS.get(key.lower())
        if direction is None:
            return False
        self.held[direction] = False
        return True

    def set_direction(self, direction: str, pressed: bool):
        if direction not in self.held:
            raise ValueError(f"Unknown direction: {direction}")
        self.held[direction] = pressed

    def release_all(self):
        for direction in self.held:
            self.held[direction] = False

    # ----------------------------
    # Pointer / touch
    # ----------------------------

    def set_pointer(self, sx: float, sy: float, view_w: Optional[float] = None,
                    view_h: Optional[float] = None):
        """Record a mouse position; view size defaults to the logical size"""
        self.mouse = to_logical(sx, sy, view_w or self.width, view_h or self.height,
                                self.width, self.height)

    def begin_touch(self, sx: float, sy: float, view_w: Optional[float] = None,
                    view_h: Optional[float] = None):
        self.touch = to_logical(sx, sy, view_w or self.width, view_h or self.height,
                                self.width, self.height)

    def move_touch(self, sx: float, sy: float, view_w: Optional[float] = None,
                   view_h: Optional[float] = None):
        if self.touch is None:
            return
        self.begin_touch(sx, sy, view_w, view_h)

    def end_touch(self):
        self.touch = None

    @property
    def touch_active(self) -> bool:
        return self.touch is not None

    # ----------------------------
    # Resolution
    # ----------------------------

    def resolve(self, player_x: float, player_y: float) -> Intent:
        dx = dy = 0.0
        for direction, pressed in self.held.items():
            if pressed:
                vx, vy = DIRECTION_VECTORS[direction]
                dx += vx
                dy += vy
        if any(self.held.values()):
            dx, dy = normalize(dx, dy)
            # opposite keys cancel out to a still keyboard intent
            return Intent(dx, dy, "keyboard")

        if self.touch is not None:
            target, source = self.touch, "touch"
        elif self.mouse is not None:
            target, source = self.mouse, "mouse"
        else:
            return Intent()

        mx = target[0] - player_x
        my = target[1] - player_y
        if mx * mx + my * my <= self.dead_zone * self.dead_zone:
            return Intent(0.0, 0.0, source, target)
        dx, dy = normalize(mx, my)
        return Intent(dx, dy, source, target)

    def reset(self):
        self.release_all()
        self.mouse = None
        self.touch = None
