import math

import pytest

from skyshooter.config import GameConfig
from skyshooter.engine import ShooterGame
from skyshooter.entities import Bullet, Enemy, Boss, BossBullet
from skyshooter.world import Phase

from conftest import place_player


def test_new_game_state(game, config):
    snap = game.snapshot()
    assert snap.phase is Phase.PLAYING
    assert (snap.score, snap.level, snap.health) == (0, 1, config.max_health)
    assert snap.bullets == snap.enemies == snap.bosses == snap.boss_bullets == snap.particles == ()
    assert (snap.player.x, snap.player.y) == (640, 630)


def test_enemy_escape_scenario(game, config):
    world = game.world
    place_player(world, 640, 620)
    world.enemies = [Enemy(x=600, y=-32, speed=3)]

    ticks = math.ceil(752 / 3)
    for _ in range(ticks - 1):
        game.tick(0.0)
    assert len(world.enemies) == 1
    assert world.progression.health == config.max_health

    snap = game.tick(0.0)
    assert snap.enemies == ()
    assert snap.health == config.max_health - config.enemy_escape_penalty

    for _ in range(10):
        game.tick(0.0)
    assert world.progression.health == config.max_health - config.enemy_escape_penalty
    assert (world.player.x, world.player.y) == (640, 620)


def test_boss_bullet_kills_player_scenario(game):
    world = game.world
    place_player(world, 640, 620)
    world.progression.health = 1
    world.boss_bullets = [BossBullet(x=640, y=610)]
    world.enemies = [Enemy(x=100, y=100, speed=3)]

    snap = game.tick(0.0)
    assert snap.health <= 0
    assert snap.phase is Phase.GAME_OVER
    assert snap.boss_bullets == ()

    frozen_y = world.enemies[0].y
    for _ in range(5):
        after = game.tick(1.0)
    assert world.enemies[0].y == frozen_y
    assert after.tick == snap.tick
    assert world.bullets == []


def test_restart_scenario(game, config):
    world = game.world
    world.progression.health = 0
    world.progression.phase = Phase.GAME_OVER
    world.progression.score = 40
    world.progression.level = 4
    world.enemies = [Enemy(x=1, y=1, speed=1)]
    world.bullets = [Bullet(x=1, y=1)]
    world.bosses = [Boss(x=1, y=60, hp=9)]

    assert game.request_restart()
    snap = game.snapshot()
    assert snap.phase is Phase.PLAYING
    assert (snap.score, snap.level, snap.health) == (0, 1, config.max_health)
    assert snap.bullets == snap.enemies == snap.bosses == snap.boss_bullets == snap.particles == ()


def test_restart_ignored_while_playing(game):
    game.world.progression.score = 3
    assert not game.request_restart()
    assert game.world.progression.score == 3


def test_reset_is_unconditional(game, config):
    game.world.progression.score = 3
    snap = game.reset(seed=99)
    assert snap.score == 0
    assert game.seed == 99


def test_same_seed_same_game():
    a = ShooterGame(seed=7)
    b = ShooterGame(seed=7)
    for _ in range(200):
        sa = a.tick(1 / 60)
        sb = b.tick(1 / 60)
    assert [e.x for e in sa.enemies] == [e.x for e in sb.enemies]


def test_snapshot_is_detached(game):
    game.world.enemies = [Enemy(x=100, y=100, speed=0)]
    snap = game.snapshot()
    snap.enemies[0].y = 500
    assert game.world.enemies[0].y == 100
    with pytest.raises(Exception):
        snap.score = 10


def test_keyboard_moves_player_through_tick(game, config):
    place_player(game.world, 640, 360)
    game.input.press("d")
    snap = game.tick(0.0)
    assert snap.player.x == pytest.approx(640 + config.player_speed)


def test_auto_fire_follows_wall_clock(game):
    game.tick(0.0)
    assert game.world.bullets == []
    game.tick(0.07)
    assert len(game.world.bullets) == 1


@pytest.mark.parametrize("preset", ["tiered", "classic"])
def test_session_properties(preset):
    game = ShooterGame(GameConfig.from_preset(preset), seed=2024)
    cfg = game.config
    half = cfg.player_half_size
    last_score, last_level = 0, 1

    # sweep the pointer back and forth so the ship keeps moving
    for t in range(3000):
        x = (t * 7) % cfg.width
        game.input.set_pointer(x, cfg.height - 40)
        snap = game.tick(1 / 60)

        assert 0 <= snap.health <= cfg.max_health
        assert snap.score >= last_score
        assert snap.level >= last_level
        assert half <= snap.player.x <= cfg.width - half
        assert half <= snap.player.y <= cfg.height - half
        assert all(b.hp > 0 for b in snap.bosses)
        last_score, last_level = snap.score, snap.level
        if snap.game_over:
            break

    assert last_score > 0


def test_score_only_from_kills(game):
    for _ in range(600):
        before = game.snapshot()
        snap = game.tick(1 / 60)
        gained = snap.score - before.score
        events = game.last_events
        assert gained == events.score_gained
        if snap.game_over:
            break
