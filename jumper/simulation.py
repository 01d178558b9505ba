"""jumper/simulation.py — Headless episode simulation (Layer 2).

Provides SimState (agent + obstacle field + episode counters), create_sim()
and reset_sim() factories, and sim_step() which runs one tick in a fixed
order and returns the tick reward plus the events that occurred.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from jumper.config import JumperConfig
from jumper.constants import (
    COLLISION_PENALTY,
    FLOOR_Y,
    PASSED_REWARD,
    SURVIVAL_BONUS,
    TAG_FLOOR,
    TAG_OBSTACLE,
)
from jumper.jumping_agent import JumpingAgent
from jumper.obstacles import ObstacleField
from jumper.physics import boxes_overlap, integrate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------

@dataclass
class ObstacleSpawnedEvent:
    obstacle_id: int
    speed: float


@dataclass
class JumpEvent:
    pass


@dataclass
class LandedEvent:
    pass


@dataclass
class LeftFloorEvent:
    pass


@dataclass
class ObstaclePassedEvent:
    obstacle_id: int


@dataclass
class CollisionEvent:
    obstacle_id: int


Event = (
    ObstacleSpawnedEvent
    | JumpEvent
    | LandedEvent
    | LeftFloorEvent
    | ObstaclePassedEvent
    | CollisionEvent
)


# ---------------------------------------------------------------------------
# SimState
# ---------------------------------------------------------------------------

@dataclass
class SimState:
    """Complete headless episode state."""

    config: JumperConfig
    agent: JumpingAgent
    field: ObstacleField
    frame: int = 0
    obstacles_passed: int = 0
    total_reward: float = 0.0
    terminated: bool = False
    touching_floor: bool = True


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def create_sim(
    config: JumperConfig | None = None,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> SimState:
    """Build a ready-to-step episode: agent at rest, one obstacle spawned.

    Args:
        config: Episode knobs; defaults when None. Validated here.
        rng: Random generator for obstacle speeds. Takes precedence over seed.
        seed: Seed for a fresh generator when rng is None.
    """
    config = (config or JumperConfig()).validate()
    if rng is None:
        rng = np.random.default_rng(seed)
    sim = SimState(
        config=config,
        agent=JumpingAgent(config),
        field=ObstacleField(config, rng),
    )
    reset_sim(sim)
    return sim


def reset_sim(sim: SimState) -> None:
    """Start a new episode in place: agent reset, field reset, counters zeroed."""
    sim.agent.reset()
    sim.field.reset()
    sim.frame = 0
    sim.obstacles_passed = 0
    sim.total_reward = 0.0
    sim.terminated = False
    sim.touching_floor = True


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------

def sim_step(sim: SimState, action: int) -> tuple[float, list[Event]]:
    """Advance the episode by one tick of ``sim.config.dt`` seconds.

    Order: spawn/move obstacles, agent decision, agent kinematics and floor
    contact, obstacle collision, passed-obstacle credit, pruning, survival
    bonus. A collision ends the tick immediately with exactly the collision
    penalty. After termination every call returns ``(0.0, [])``.
    """
    events: list[Event] = []
    if sim.terminated:
        return 0.0, events

    cfg = sim.config
    agent = sim.agent
    field = sim.field
    dt = cfg.dt

    # Obstacles
    for obs in field.tick(dt):
        events.append(ObstacleSpawnedEvent(obstacle_id=obs.id, speed=-obs.vx))

    # Agent decision
    closest = field.closest_obstacle(agent.position)
    reward = agent.decide_and_act(action, closest, dt)
    if agent.jumped_this_tick:
        events.append(JumpEvent())

    # Agent kinematics and floor contact. A jump too weak to lift the body
    # off the floor lands on the same tick.
    touching = integrate(agent.body, cfg.gravity, dt, FLOOR_Y)
    if touching and (not sim.touching_floor or not agent.grounded):
        agent.on_collision(TAG_FLOOR)
        events.append(LandedEvent())
    elif not touching and sim.touching_floor:
        agent.on_collision_end(TAG_FLOOR)
        events.append(LeftFloorEvent())
    sim.touching_floor = touching

    # Obstacle collision
    body = agent.body
    for obs in field.obstacles:
        if boxes_overlap(
            body.x, body.y, body.half_width, body.half_height,
            obs.x, obs.y, obs.half_size, obs.half_size,
        ):
            reward = agent.on_collision(TAG_OBSTACLE)
            events.append(CollisionEvent(obstacle_id=obs.id))
            sim.terminated = True
            sim.total_reward += reward
            sim.frame += 1
            logger.info(
                "Episode terminated at frame %d (t=%.2f): hit obstacle %d, "
                "passed=%d, return=%.2f",
                sim.frame, agent.clock, obs.id, sim.obstacles_passed,
                sim.total_reward,
            )
            return COLLISION_PENALTY, events

    # Passed obstacles
    for obs in field.collect_passed_events(body.x):
        reward += PASSED_REWARD
        sim.obstacles_passed += 1
        events.append(ObstaclePassedEvent(obstacle_id=obs.id))
        logger.debug("Agent dodged obstacle %d, reward: %.1f", obs.id, PASSED_REWARD)

    field.prune_offscreen(cfg.offscreen_x)

    reward += SURVIVAL_BONUS
    sim.total_reward += reward
    sim.frame += 1
    return reward, events
