"""jumper/obstacles.py — Obstacle entities and the ObstacleField that owns them.

The field spawns obstacles on a timer at a random leftward speed, moves them,
credits each one exactly once when it passes the agent, and prunes obstacles
that scroll off the left edge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from jumper.config import JumperConfig
from jumper.constants import FLOOR_Y, OBSTACLE_HALF_SIZE


# ---------------------------------------------------------------------------
# Obstacle entity
# ---------------------------------------------------------------------------

@dataclass
class Obstacle:
    """A box sliding left along the floor."""
    id: int
    x: float
    y: float
    vx: float  # negative: moving toward and past the agent
    half_size: float = OBSTACLE_HALF_SIZE
    reward_pending: bool = True
    vy: float = 0.0


# ---------------------------------------------------------------------------
# Field
# ---------------------------------------------------------------------------

class ObstacleField:
    """Owns every live obstacle plus the spawn timer and current spawn speed."""

    def __init__(
        self,
        config: JumperConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or JumperConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.obstacles: list[Obstacle] = []
        self.spawn_timer: float = 0.0
        self.current_speed: float = self._sample_speed()
        self._next_id: int = 0

    # -- lifecycle ----------------------------------------------------------

    def reset(self) -> Obstacle:
        """Clear all obstacles, reseed timer and speed, spawn one obstacle.

        Returns the freshly spawned obstacle.
        """
        self.obstacles.clear()
        self.spawn_timer = 0.0
        self.current_speed = self._sample_speed()
        return self.spawn()

    def spawn(self) -> Obstacle:
        """Spawn one obstacle at the spawn point with a freshly sampled speed."""
        self.current_speed = self._sample_speed()
        half = OBSTACLE_HALF_SIZE
        obstacle = Obstacle(
            id=self._next_id,
            x=self.config.spawn_x,
            y=FLOOR_Y + half,
            vx=-self.current_speed,
            half_size=half,
        )
        self._next_id += 1
        self.obstacles.append(obstacle)
        return obstacle

    def tick(self, dt: float) -> list[Obstacle]:
        """Advance the spawn timer and every obstacle by *dt* seconds.

        Returns the obstacles spawned during this tick (zero or one).
        """
        spawned: list[Obstacle] = []
        self.spawn_timer += dt
        if self.spawn_timer >= self.config.spawn_interval:
            spawned.append(self.spawn())
            self.spawn_timer = 0.0

        for obs in self.obstacles:
            obs.x += obs.vx * dt
            obs.y += obs.vy * dt
        return spawned

    # -- queries ------------------------------------------------------------

    def collect_passed_events(self, agent_x: float) -> list[Obstacle]:
        """Credit every pending obstacle that has crossed *agent_x*.

        Each obstacle is returned at most once over its lifetime; its
        reward_pending flag is cleared as it is reported.
        """
        passed: list[Obstacle] = []
        for obs in self.obstacles:
            if obs.reward_pending and obs.x < agent_x:
                obs.reward_pending = False
                passed.append(obs)
        return passed

    def prune_offscreen(self, limit: float | None = None) -> list[Obstacle]:
        """Remove obstacles left of *limit* (config.offscreen_x by default).

        Removed obstacles are never credited, even if still pending.
        Returns the removed obstacles.
        """
        if limit is None:
            limit = self.config.offscreen_x
        removed = [o for o in self.obstacles if o.x < limit]
        if removed:
            self.obstacles = [o for o in self.obstacles if o.x >= limit]
            for obs in removed:
                obs.reward_pending = False
        return removed

    def closest_obstacle(
        self, agent_position: tuple[float, float],
    ) -> Obstacle | None:
        """Return the obstacle nearest to *agent_position*, or None if empty.

        Ties go to the earliest-spawned obstacle.
        """
        ax, ay = agent_position
        closest: Obstacle | None = None
        min_dist = math.inf
        for obs in self.obstacles:
            dist = math.hypot(obs.x - ax, obs.y - ay)
            if dist < min_dist:
                min_dist = dist
                closest = obs
        return closest

    @property
    def pending_count(self) -> int:
        return sum(1 for o in self.obstacles if o.reward_pending)

    # -- internals ----------------------------------------------------------

    def _sample_speed(self) -> float:
        return float(self.rng.uniform(self.config.min_speed, self.config.max_speed))
