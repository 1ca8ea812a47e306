from skyshooter import progression
from skyshooter.world import Phase


def test_health_clamped(world):
    prog = world.progression
    assert progression.change_health(prog, 50) == prog.max_health
    assert progression.change_health(prog, -250) == 0.0


def test_level_up_every_step(world, config):
    prog = world.progression
    for _ in range(config.level_score_step - 1):
        progression.add_score(world, 1)
    assert prog.level == 1
    assert progression.add_score(world, 1) == 1
    assert prog.level == 2


def test_multiple_milestones_in_one_award(world):
    world.progression.score = 10
    gained = progression.add_score(world, 30)
    assert gained == 3
    assert world.progression.level == 4


def test_level_capped(world, config):
    world.progression.level = config.max_level
    world.progression.score = 119
    assert progression.add_score(world, 1) == 0
    assert world.progression.level == config.max_level
    assert world.progression.score == 120


def test_non_positive_score_ignored(world):
    assert progression.add_score(world, 0) == 0
    assert progression.add_score(world, -3) == 0
    assert world.progression.score == 0


def test_game_over_is_terminal(world):
    prog = world.progression
    assert progression.check(world) is Phase.PLAYING
    prog.health = 0
    assert progression.check(world) is Phase.GAME_OVER
    progression.change_health(prog, 100)
    assert progression.check(world) is Phase.GAME_OVER
    assert prog.game_over
