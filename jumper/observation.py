"""jumper/observation.py — Observation extraction from SimState.

Produces a flat float32 vector for policy consumption. Obstacle fields are
zero when the field is empty.
"""

from __future__ import annotations

import numpy as np

from jumper.simulation import SimState

OBS_DIM = 11

OBS_LABELS: tuple[str, ...] = (
    "agent_x",
    "agent_y",
    "agent_vx",
    "agent_vy",
    "obstacle_x",
    "obstacle_y",
    "obstacle_vx",
    "obstacle_vy",
    "grounded",
    "energy",
    "consecutive_jumps",
)

# Indices used by programmed policies
IDX_AGENT_X = 0
IDX_OBSTACLE_X = 4
IDX_OBSTACLE_VX = 6
IDX_GROUNDED = 8
IDX_ENERGY = 9
IDX_CONSECUTIVE_JUMPS = 10


def extract_observation(sim: SimState) -> np.ndarray:
    """Extract the observation vector from the current simulation state.

    Layout:
        [0-1]  agent position (x, y)
        [2-3]  agent velocity (x, y)
        [4-5]  closest obstacle position (x, y), or (0, 0) if none
        [6-7]  closest obstacle velocity (x, y), or (0, 0) if none
        [8]    grounded flag (0.0 or 1.0)
        [9]    energy in [0, 1]
        [10]   consecutive-jump count
    """
    agent = sim.agent
    body = agent.body
    obs = np.zeros(OBS_DIM, dtype=np.float32)

    obs[0] = body.x
    obs[1] = body.y
    obs[2] = body.vx
    obs[3] = body.vy

    closest = sim.field.closest_obstacle(agent.position)
    if closest is not None:
        obs[4] = closest.x
        obs[5] = closest.y
        obs[6] = closest.vx
        obs[7] = closest.vy

    obs[8] = float(agent.grounded)
    obs[9] = agent.energy
    obs[10] = float(agent.consecutive_jumps)
    return obs
