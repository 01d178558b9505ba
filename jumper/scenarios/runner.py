"""jumper/scenarios/runner — Scenario execution engine (Layer 4).

Executes a ScenarioDef to completion, collecting trajectory and metrics.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Any

from jumper.invariants import check_invariants
from jumper.observation import extract_observation
from jumper.policies.registry import resolve_policy
from jumper.scenarios.conditions import check_conditions
from jumper.scenarios.loader import ScenarioDef
from jumper.simulation import Event, SimState, create_sim, sim_step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass
class FrameRecord:
    """Per-frame snapshot of simulation state, taken after the step."""

    frame: int
    time: float
    x: float
    y: float
    y_vel: float
    grounded: bool
    energy: float
    consecutive_jumps: int
    obstacle_distance: float | None
    action: int
    reward: float
    obstacles_passed: int
    events: list[str]


@dataclass
class ScenarioOutcome:
    """Result of executing a scenario to completion."""

    name: str
    success: bool
    reason: str
    frames_elapsed: int
    metrics: dict[str, Any]
    trajectory: list[FrameRecord]
    wall_time_ms: float


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------


def _metric_obstacles_passed(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> int:
    return sim.obstacles_passed


def _metric_total_reward(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> float:
    return sum(r.reward for r in trajectory)


def _metric_jump_count(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> int:
    return sim.agent.jump_count


def _metric_survival_time(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> float:
    if not trajectory:
        return 0.0
    return trajectory[-1].time


def _metric_time_on_ground(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> float:
    if not trajectory:
        return 0.0
    return sum(1 for r in trajectory if r.grounded) / len(trajectory)


def _metric_min_energy(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> float:
    if not trajectory:
        return 1.0
    return min(r.energy for r in trajectory)


def _metric_mean_energy(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> float:
    if not trajectory:
        return 1.0
    return sum(r.energy for r in trajectory) / len(trajectory)


def _metric_collision_count(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> int:
    return sum(1 for r in trajectory if "CollisionEvent" in r.events)


def _metric_invariant_violations(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> int:
    return len(check_invariants(trajectory, events))


def _metric_energy_profile(
    trajectory: list[FrameRecord], sim: SimState, success: bool, events: list,
) -> list[float]:
    return [r.energy for r in trajectory]


_METRIC_DISPATCH: dict[str, Any] = {
    "obstacles_passed": _metric_obstacles_passed,
    "total_reward": _metric_total_reward,
    "jump_count": _metric_jump_count,
    "survival_time": _metric_survival_time,
    "time_on_ground": _metric_time_on_ground,
    "min_energy": _metric_min_energy,
    "mean_energy": _metric_mean_energy,
    "collision_count": _metric_collision_count,
    "invariant_violations": _metric_invariant_violations,
    "energy_profile": _metric_energy_profile,
}


def compute_metrics(
    requested: list[str],
    trajectory: list[FrameRecord],
    sim: SimState,
    success: bool,
    events_per_frame: list[list[Event]] | None = None,
) -> dict[str, Any]:
    """Compute the requested metrics from trajectory and sim state."""
    events = events_per_frame if events_per_frame is not None else []
    result: dict[str, Any] = {}
    for name in requested:
        func = _METRIC_DISPATCH.get(name)
        if func is None:
            raise ValueError(
                f"Unknown metric: {name!r}. "
                f"Valid metrics: {sorted(_METRIC_DISPATCH)}"
            )
        result[name] = func(trajectory, sim, success, events)
    return result


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def _obstacle_distance(sim: SimState) -> float | None:
    closest = sim.field.closest_obstacle(sim.agent.position)
    distance = sim.agent.distance_to(closest)
    return None if math.isinf(distance) else distance


def run_scenario(scenario_def: ScenarioDef) -> ScenarioOutcome:
    """Execute a single scenario to completion.

    Creates a seeded simulation, resolves the policy, runs the tick loop with
    condition checking, and returns a ScenarioOutcome with trajectory and
    metrics.
    """
    sim = create_sim(scenario_def.config, seed=scenario_def.seed)

    policy = resolve_policy(scenario_def.policy, scenario_def.policy_params)
    policy.reset()

    trajectory: list[FrameRecord] = []
    events_per_frame: list[list[Event]] = []
    success: bool | None = None
    reason: str | None = None

    start_time = time.perf_counter()

    for frame in range(scenario_def.max_frames):
        obs = extract_observation(sim)
        action = int(policy.act(obs))
        reward, events = sim_step(sim, action)
        events_per_frame.append(events)

        agent = sim.agent
        trajectory.append(
            FrameRecord(
                frame=frame,
                time=agent.clock,
                x=agent.body.x,
                y=agent.body.y,
                y_vel=agent.body.vy,
                grounded=agent.grounded,
                energy=agent.energy,
                consecutive_jumps=agent.consecutive_jumps,
                obstacle_distance=_obstacle_distance(sim),
                action=action,
                reward=reward,
                obstacles_passed=sim.obstacles_passed,
                events=[type(e).__name__ for e in events],
            )
        )

        success, reason = check_conditions(
            scenario_def.success,
            scenario_def.failure,
            sim,
            trajectory,
            frame,
            scenario_def.max_frames,
        )
        if success is not None:
            break

    wall_time = (time.perf_counter() - start_time) * 1000
    metrics = compute_metrics(
        scenario_def.metrics, trajectory, sim, success is True, events_per_frame,
    )

    outcome = ScenarioOutcome(
        name=scenario_def.name,
        success=success if success is not None else False,
        reason=reason or "timed_out",
        frames_elapsed=len(trajectory),
        metrics=metrics,
        trajectory=trajectory,
        wall_time_ms=wall_time,
    )
    logger.info(
        "Scenario %s: %s (%s) after %d frames, passed=%d, return=%.2f",
        outcome.name, "PASS" if outcome.success else "FAIL", outcome.reason,
        outcome.frames_elapsed, sim.obstacles_passed, sim.total_reward,
    )
    return outcome
