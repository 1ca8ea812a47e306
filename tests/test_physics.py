import pytest

from skyshooter import physics
from skyshooter.config import GameConfig
from skyshooter.engine import ShooterGame
from skyshooter.entities import Bullet, Enemy, Boss, BossBullet, Particle
from skyshooter.input_state import Intent

from conftest import place_player


def test_player_moves_by_speed(world):
    place_player(world, 640, 360)
    physics.step_player(world, Intent(1.0, 0.0, "keyboard"))
    assert world.player.x == pytest.approx(640 + world.config.player_speed)
    assert world.player.y == 360


def test_player_clamped_to_playfield(world):
    half = world.player.half_size
    place_player(world, 20, 700)
    physics.step_player(world, Intent(-1.0, 0.0, "keyboard"))
    physics.step_player(world, Intent(0.0, 1.0, "keyboard"))
    assert world.player.x == half
    assert world.player.y == world.config.height - half


def test_pointer_follow_stops_on_target(world):
    place_player(world, 640, 360)
    physics.step_player(world, Intent(1.0, 0.0, "mouse", target=(650, 360)))
    assert world.player.x == pytest.approx(650)


def test_touch_speed_boost():
    cfg = GameConfig.from_preset("tiered", touch_speed_multiplier=1.5)
    game = ShooterGame(cfg, seed=1)
    place_player(game.world, 200, 360)
    physics.step_player(game.world, Intent(1.0, 0.0, "touch", target=(1200, 360)))
    assert game.world.player.x == pytest.approx(200 + 52 * 1.5)


def test_bullets_culled_above_top(world):
    world.bullets = [Bullet(x=100, y=20, speed=26), Bullet(x=100, y=300, speed=26)]
    physics.step_bullets(world)
    assert [b.y for b in world.bullets] == [274]


def test_enemy_escape_costs_health_once(world):
    world.enemies = [Enemy(x=10, y=719, speed=2), Enemy(x=10, y=100, speed=2)]
    escaped = physics.step_enemies(world)
    assert escaped == 1
    assert len(world.enemies) == 1
    assert world.progression.health == world.config.max_health - world.config.enemy_escape_penalty


def test_boss_bounces_at_edges(world):
    right = world.config.width - world.config.boss_size
    world.bosses = [Boss(x=right - 1, y=60, hp=10, direction=1),
                    Boss(x=1, y=60, hp=10, direction=-1)]
    physics.step_bosses(world)
    assert [b.direction for b in world.bosses] == [-1, 1]
    physics.step_bosses(world)
    assert world.bosses[0].x == pytest.approx(right - 1)
    assert world.bosses[1].x == pytest.approx(1)


def test_boss_bullets_culled_below_bottom(world):
    world.boss_bullets = [BossBullet(x=5, y=715, speed=7), BossBullet(x=5, y=100, speed=7)]
    physics.step_boss_bullets(world)
    assert [bb.y for bb in world.boss_bullets] == [107]


def test_particles_expire(world):
    world.particles = [Particle(x=0, y=0, vx=1, vy=2, life=1), Particle(x=0, y=0, vx=1, vy=2, life=3)]
    physics.step_particles(world)
    assert len(world.particles) == 1
    p = world.particles[0]
    assert (p.x, p.y, p.life) == (1, 2, 2)
