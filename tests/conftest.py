import pytest

from skyshooter.config import GameConfig
from skyshooter.engine import ShooterGame


@pytest.fixture
def config():
    return GameConfig.from_preset("tiered")


@pytest.fixture
def game(config):
    return ShooterGame(config, seed=1234)


@pytest.fixture
def world(game):
    return game.world


def place_player(world, x, y):
    world.player.x = x
    world.player.y = y
