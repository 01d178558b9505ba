"""jumper/env.py — Gymnasium environment wrapper (Layer 5).

Bridges the headless simulation with RL training. Thin adapter that
delegates to simulation and observation modules; the reward is the one
sim_step computes.
"""

from __future__ import annotations

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from jumper.config import JumperConfig, config_from_dict
from jumper.observation import OBS_DIM, extract_observation
from jumper.policies.actions import NUM_ACTIONS
from jumper.simulation import SimState, create_sim, sim_step


class JumperEnv(gym.Env):
    """Gymnasium environment: time jumps over scrolling obstacles."""

    metadata = {"render_modes": [], "render_fps": 50}

    def __init__(
        self,
        config: JumperConfig | dict | None = None,
        max_steps: int = 3000,
        render_mode: str | None = None,
    ) -> None:
        super().__init__()
        if isinstance(config, dict) or config is None:
            config = config_from_dict(config)
        self.config = config.validate()
        self.max_steps = max_steps
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-np.inf,
            high=np.inf,
            shape=(OBS_DIM,),
            dtype=np.float32,
        )
        self.action_space = spaces.Discrete(NUM_ACTIONS)

        self.sim: SimState | None = None
        self._step_count = 0
        self._last_events: list = []

    def reset(
        self,
        *,
        seed: int | None = None,
        options: dict | None = None,
    ) -> tuple[np.ndarray, dict]:
        super().reset(seed=seed)
        self.sim = create_sim(self.config, rng=self.np_random)
        self._step_count = 0
        self._last_events = []
        return self._get_obs(), self._get_info()

    def step(
        self, action: int
    ) -> tuple[np.ndarray, float, bool, bool, dict]:
        if self.sim is None:
            raise RuntimeError("Call reset() before step().")
        action = int(action)
        if not self.action_space.contains(action):
            raise ValueError(f"Action must be in [0, {NUM_ACTIONS - 1}], got {action}.")

        reward, self._last_events = sim_step(self.sim, action)
        self._step_count += 1

        obs = self._get_obs()
        terminated = bool(self.sim.terminated)
        truncated = self._step_count >= self.max_steps
        info = self._get_info()

        return obs, float(reward), terminated, truncated, info

    def _get_obs(self) -> np.ndarray:
        return extract_observation(self.sim)

    def _get_info(self) -> dict:
        agent = self.sim.agent
        return {
            "frame": self.sim.frame,
            "time": agent.clock,
            "energy": agent.energy,
            "grounded": agent.grounded,
            "consecutive_jumps": agent.consecutive_jumps,
            "obstacles_passed": self.sim.obstacles_passed,
            "episode_return": self.sim.total_reward,
            "events": [type(e).__name__ for e in self._last_events],
        }
