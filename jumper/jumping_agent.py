"""jumper/jumping_agent.py — JumpingAgent: jump state machine and reward shaping.

The agent is driven entirely through explicit inputs: ``decide_and_act`` once
per tick with the policy's action and the closest obstacle, plus
``on_collision`` / ``on_collision_end`` notifications from the host. It never
reaches into the obstacle field.

State machine::

    GROUNDED --jump (grounded, energy, cooldown)--> AIRBORNE
    AIRBORNE --on_collision("Floor")-------------> GROUNDED
    GROUNDED --on_collision_end("Floor")---------> AIRBORNE
    any      --on_collision("Obstacle")----------> TERMINATED (absorbing)
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from jumper.config import JumperConfig
from jumper.constants import (
    AGENT_HALF_SIZE,
    COLLISION_PENALTY,
    CONSECUTIVE_JUMP_PENALTY,
    DANGER_DISTANCE,
    FLOOR_Y,
    IDEAL_JUMP_DISTANCE,
    JUMP_WINDOW,
    MISSED_JUMP_PENALTY,
    STEP_PENALTY,
    TAG_FLOOR,
    TAG_OBSTACLE,
    TIMING_REWARD_FLOOR,
    TIMING_REWARD_SCALE,
    UNNECESSARY_JUMP_PENALTY,
)
from jumper.obstacles import Obstacle
from jumper.physics import Body, apply_impulse, resting_y

logger = logging.getLogger(__name__)

ACTION_NO_JUMP = 0
ACTION_JUMP = 1


class AgentPhase(Enum):
    GROUNDED = "grounded"
    AIRBORNE = "airborne"
    TERMINATED = "terminated"


def timing_reward(distance: float) -> float:
    """Bonus for a jump with the obstacle *distance* ahead (0 < distance < 3).

    Peaks at 0.3 when distance is 1.5 and never drops below 0.15.
    """
    quality = 1.0 - abs(distance - IDEAL_JUMP_DISTANCE) / IDEAL_JUMP_DISTANCE
    return TIMING_REWARD_SCALE * max(TIMING_REWARD_FLOOR, quality)


class JumpingAgent:
    """Position, velocity, energy, and jump bookkeeping for the jumper."""

    def __init__(self, config: JumperConfig | None = None) -> None:
        self.config = config or JumperConfig()
        self.reset()

    def reset(self) -> None:
        """Restore the episode-start state: grounded, full energy, at rest."""
        self.body = Body(
            x=self.config.agent_x,
            y=resting_y(AGENT_HALF_SIZE, FLOOR_Y),
            half_width=AGENT_HALF_SIZE,
            half_height=AGENT_HALF_SIZE,
        )
        self.grounded: bool = True
        self.energy: float = 1.0
        self.last_jump_time: float = -math.inf
        self.consecutive_jumps: int = 0
        self.clock: float = 0.0
        self.terminated: bool = False
        self.jump_count: int = 0
        self.jumped_this_tick: bool = False

    # -- views --------------------------------------------------------------

    @property
    def position(self) -> tuple[float, float]:
        return (self.body.x, self.body.y)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.body.vx, self.body.vy)

    @property
    def phase(self) -> AgentPhase:
        if self.terminated:
            return AgentPhase.TERMINATED
        return AgentPhase.GROUNDED if self.grounded else AgentPhase.AIRBORNE

    def can_jump(self) -> bool:
        return (
            not self.terminated
            and self.grounded
            and self.energy >= self.config.jump_energy_cost
            and self.clock - self.last_jump_time >= self.config.jump_cooldown
        )

    def distance_to(self, obstacle: Obstacle | None) -> float:
        """Signed horizontal distance to *obstacle*; positive means ahead."""
        if obstacle is None:
            return math.inf
        return obstacle.x - self.body.x

    # -- per-tick decision --------------------------------------------------

    def decide_and_act(
        self, action: int, closest: Obstacle | None, dt: float,
    ) -> float:
        """Apply one tick of energy recovery, the chosen action, and shaping.

        Returns the agent's share of the tick reward. Environment-level terms
        (passed obstacles, survival bonus) are added by the caller. Once the
        episode has terminated this is a no-op returning 0.0.
        """
        self.jumped_this_tick = False
        if self.terminated:
            return 0.0

        self.clock += dt
        if self.grounded:
            self.energy = min(1.0, self.energy + self.config.energy_recovery_rate * dt)

        distance = self.distance_to(closest)
        reward = 0.0

        if action == ACTION_JUMP and self.can_jump():
            self._jump()
            reward += CONSECUTIVE_JUMP_PENALTY * self.consecutive_jumps
            if 0.0 < distance < JUMP_WINDOW:
                bonus = timing_reward(distance)
                reward += bonus
                logger.debug("Well-timed jump at distance %.2f, reward: %.2f", distance, bonus)
            else:
                reward += UNNECESSARY_JUMP_PENALTY
                logger.debug("Unnecessary jump, penalty: %.2f", UNNECESSARY_JUMP_PENALTY)
        elif action == ACTION_NO_JUMP and self.grounded:
            self.consecutive_jumps = 0
            if 0.0 < distance < DANGER_DISTANCE:
                reward += MISSED_JUMP_PENALTY
                logger.debug("Failed to jump when needed, penalty: %.2f", MISSED_JUMP_PENALTY)

        reward += STEP_PENALTY
        return reward

    def _jump(self) -> None:
        apply_impulse(self.body, self.config.jump_force)
        self.grounded = False
        self.energy = max(0.0, self.energy - self.config.jump_energy_cost)
        self.consecutive_jumps += 1
        self.jump_count += 1
        self.last_jump_time = self.clock
        self.jumped_this_tick = True

    # -- host notifications -------------------------------------------------

    def on_collision(self, tag: str) -> float:
        """Contact began with an entity tagged *tag*.

        Returns the terminal penalty for an obstacle hit, otherwise 0.0.
        """
        if self.terminated:
            return 0.0
        if tag == TAG_OBSTACLE:
            self.terminated = True
            logger.debug("Collision with obstacle at t=%.2f, reward: %.1f", self.clock, COLLISION_PENALTY)
            return COLLISION_PENALTY
        if tag == TAG_FLOOR:
            self.grounded = True
            # Landing restarts the cooldown.
            self.last_jump_time = self.clock
        return 0.0

    def on_collision_end(self, tag: str) -> None:
        """Contact ended with an entity tagged *tag*."""
        if self.terminated:
            return
        if tag == TAG_FLOOR:
            self.grounded = False
