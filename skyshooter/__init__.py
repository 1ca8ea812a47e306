"""SkyShooter - arcade vertical shooter engine"""

from .config import GameConfig, PRESETS
from .engine import ShooterGame
from .input_state import InputState
from .shooter_env import SkyShooterEnv, run_random_episode
from .world import Phase, WorldSnapshot, WorldState

__all__ = [
    "GameConfig",
    "PRESETS",
    "ShooterGame",
    "InputState",
    "SkyShooterEnv",
    "run_random_episode",
    "Phase",
    "WorldSnapshot",
    "WorldState",
]
