"""jumper/env_registration.py — Register jumper envs with Gymnasium.

Import this module to register all environments::

    import jumper.env_registration
    env = gymnasium.make("jumper/Jumper-v0")
"""

import gymnasium as gym

gym.register(
    id="jumper/Jumper-v0",
    entry_point="jumper.env:JumperEnv",
    kwargs={"max_steps": 3000},
    max_episode_steps=3000,
)

# Faster obstacles, shorter spawn gap
gym.register(
    id="jumper/JumperFast-v0",
    entry_point="jumper.env:JumperEnv",
    kwargs={
        "config": {"min_speed": 4.0, "max_speed": 7.0, "spawn_interval": 2.0},
        "max_steps": 3000,
    },
    max_episode_steps=3000,
)
