"""jumper/policies/timed_jump.py — TimedJumpPolicy: jump when the obstacle is one lead time away.

Reads the closest obstacle's position and speed from the observation and
requests a jump once the obstacle will arrive within ``lead_time`` seconds.
With the default knobs the apex of a jump comes about 0.5 s after takeoff,
so a 0.5 s lead puts the obstacle under the agent at the top of the arc.
"""

from __future__ import annotations

import numpy as np

from jumper.observation import IDX_AGENT_X, IDX_GROUNDED, IDX_OBSTACLE_VX, IDX_OBSTACLE_X
from jumper.policies.actions import ACTION_JUMP, ACTION_NOOP


class TimedJumpPolicy:
    """Policy that jumps a fixed time before the obstacle arrives."""

    def __init__(self, lead_time: float = 0.5) -> None:
        self.lead_time = lead_time

    def act(self, obs: np.ndarray) -> int:
        grounded = obs[IDX_GROUNDED] > 0.5
        speed = -float(obs[IDX_OBSTACLE_VX])
        if not grounded or speed <= 0.0:
            return ACTION_NOOP

        distance = float(obs[IDX_OBSTACLE_X] - obs[IDX_AGENT_X])
        if 0.0 < distance <= speed * self.lead_time:
            return ACTION_JUMP
        return ACTION_NOOP

    def reset(self) -> None:
        pass
