"""Tests for jumper/env.py — JumperEnv Gymnasium wrapper."""

from __future__ import annotations

import gymnasium as gym
import numpy as np
import pytest
from gymnasium.utils.env_checker import check_env

import jumper.env_registration  # noqa: F401
from jumper.config import JumperConfig
from jumper.env import JumperEnv
from jumper.observation import IDX_ENERGY, IDX_GROUNDED, OBS_DIM
from jumper.policies.actions import ACTION_JUMP, ACTION_NOOP

INFO_KEYS = {
    "frame",
    "time",
    "energy",
    "grounded",
    "consecutive_jumps",
    "obstacles_passed",
    "episode_return",
    "events",
}


# ---------------------------------------------------------------------------
# Spaces
# ---------------------------------------------------------------------------

def test_spaces():
    env = JumperEnv()
    assert env.observation_space.shape == (OBS_DIM,)
    assert env.observation_space.dtype == np.float32
    assert env.action_space.n == 2


def test_check_env():
    check_env(JumperEnv(), skip_render_check=True)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_config_dict():
    env = JumperEnv(config={"min_speed": 4.0, "max_speed": 6.0})
    assert env.config.min_speed == 4.0
    assert env.config.max_speed == 6.0


def test_config_object():
    cfg = JumperConfig(spawn_interval=1.0)
    assert JumperEnv(config=cfg).config is cfg


def test_invalid_config():
    with pytest.raises(ValueError):
        JumperEnv(config={"min_speed": 6.0, "max_speed": 2.0})


# ---------------------------------------------------------------------------
# reset / step
# ---------------------------------------------------------------------------

def test_reset():
    env = JumperEnv()
    obs, info = env.reset(seed=42)
    assert obs.shape == (OBS_DIM,)
    assert obs.dtype == np.float32
    assert obs[IDX_GROUNDED] == 1.0
    assert obs[IDX_ENERGY] == 1.0
    assert set(info) == INFO_KEYS
    assert info["frame"] == 0
    assert info["events"] == []


def test_step_before_reset():
    with pytest.raises(RuntimeError, match="reset"):
        JumperEnv().step(ACTION_NOOP)


@pytest.mark.parametrize("action", [-1, 2, 7])
def test_invalid_action(action):
    env = JumperEnv()
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step(action)


def test_step_returns_five_tuple():
    env = JumperEnv()
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(ACTION_NOOP)
    assert obs.shape == (OBS_DIM,)
    assert isinstance(reward, float)
    assert terminated is False
    assert truncated is False
    assert set(info) == INFO_KEYS
    assert info["frame"] == 1


def test_jump_step():
    env = JumperEnv()
    env.reset(seed=0)
    obs, reward, _, _, info = env.step(ACTION_JUMP)
    assert obs[IDX_GROUNDED] == 0.0
    assert info["energy"] == pytest.approx(0.5)
    assert "JumpEvent" in info["events"]
    assert reward == pytest.approx(-0.5)


def test_numpy_action_accepted():
    env = JumperEnv()
    env.reset(seed=0)
    env.step(np.int64(1))


def test_idle_terminates_with_collision_penalty():
    env = JumperEnv()
    env.reset(seed=3)
    for _ in range(1000):
        _, reward, terminated, truncated, info = env.step(ACTION_NOOP)
        if terminated:
            break
    assert terminated
    assert not truncated
    assert reward == -6.0
    assert "CollisionEvent" in info["events"]


def test_truncation_at_max_steps():
    env = JumperEnv(max_steps=10)
    env.reset(seed=0)
    for i in range(10):
        _, _, terminated, truncated, _ = env.step(ACTION_NOOP)
        assert not terminated
        assert truncated == (i == 9)


def test_episode_return_matches_rewards():
    env = JumperEnv()
    env.reset(seed=1)
    total = 0.0
    for _ in range(200):
        _, reward, terminated, _, info = env.step(env.action_space.sample())
        total += reward
        if terminated:
            break
    assert info["episode_return"] == pytest.approx(total)


def test_reset_restarts_episode():
    env = JumperEnv()
    env.reset(seed=0)
    for _ in range(30):
        env.step(ACTION_JUMP)
    _, info = env.reset(seed=0)
    assert info["frame"] == 0
    assert info["episode_return"] == 0.0
    assert info["energy"] == 1.0


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------

def _rollout(seed: int) -> list[float]:
    env = JumperEnv(config={"spawn_interval": 0.5})
    obs, _ = env.reset(seed=seed)
    trace = [float(obs[6])]
    for _ in range(100):
        obs, reward, terminated, _, _ = env.step(ACTION_NOOP)
        trace.extend([float(obs[6]), reward])
        if terminated:
            break
    return trace


def test_same_seed_same_episode():
    assert _rollout(5) == _rollout(5)


def test_different_seed_different_speeds():
    assert _rollout(5)[0] != _rollout(6)[0]


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("env_id", ["jumper/Jumper-v0", "jumper/JumperFast-v0"])
def test_gym_make(env_id):
    env = gym.make(env_id)
    obs, _ = env.reset(seed=0)
    assert obs.shape == (OBS_DIM,)
    env.step(ACTION_NOOP)
    env.close()


def test_fast_variant_config():
    env = gym.make("jumper/JumperFast-v0")
    assert env.unwrapped.config.min_speed == 4.0
    assert env.unwrapped.config.spawn_interval == 2.0
    env.close()
