import numpy as np
import pytest

from skyshooter.entities import BossBullet, Enemy, Particle
from skyshooter.shooter_env import SkyShooterEnv, rasterize, run_random_episode


def test_reset_observation():
    env = SkyShooterEnv()
    obs, info = env.reset(seed=42)
    assert obs.shape == env.observation_space.shape
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["level"] == 1
    assert info["step"] == 0


def test_step_contract():
    env = SkyShooterEnv(max_steps=5)
    env.reset(seed=1)
    for i in range(5):
        obs, reward, terminated, truncated, info = env.step(np.array([2, 0]))
        assert env.observation_space.contains(obs)
        assert isinstance(reward, float)
    assert truncated
    assert info["step"] == 5


def test_action_moves_player():
    env = SkyShooterEnv()
    env.reset(seed=1)
    start_x = env.game.world.player.x
    env.step([1, 0])
    assert env.game.world.player.x < start_x


def test_invalid_action_rejected():
    env = SkyShooterEnv()
    env.reset(seed=1)
    with pytest.raises(ValueError):
        env.step([3, 0])


def test_unknown_render_mode_rejected():
    with pytest.raises(ValueError):
        SkyShooterEnv(render_mode="ascii")


def test_rgb_array_render():
    env = SkyShooterEnv(render_mode="rgb_array")
    env.reset(seed=3)
    for _ in range(30):
        env.step([0, 0])
    frame = env.render()
    assert frame.shape == (720, 1280, 3)
    assert frame.dtype == np.uint8
    # the player ship is painted at its position
    player = env.game.world.player
    assert tuple(frame[int(player.y), int(player.x)]) == (80, 200, 120)


def test_rasterize_clips_offscreen_entities():
    env = SkyShooterEnv()
    env.reset(seed=3)
    env.game.world.enemies = [Enemy(x=1270, y=-32, speed=2)]
    env.game.world.particles = [Particle(x=-5, y=-5, vx=0, vy=0, life=3)]
    frame = rasterize(env.game.snapshot())
    assert frame.shape == (720, 1280, 3)


def test_death_penalty_on_game_over():
    env = SkyShooterEnv(death_penalty=5.0)
    env.reset(seed=1)
    env.game.world.progression.health = 0.5
    env.game.world.enemies = []
    player = env.game.world.player
    env.game.world.boss_bullets = [BossBullet(x=player.x, y=player.y - 7)]
    obs, reward, terminated, truncated, info = env.step([0, 0])
    assert terminated
    assert reward < -5.0


def test_run_random_episode_headless(capsys):
    info = run_random_episode(render=False, seed=0, max_steps=120)
    assert info["step"] <= 120
    assert "Random episode return" in capsys.readouterr().out
