"""jumper/scenarios/conditions — Condition dataclasses and runtime checker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jumper.simulation import SimState

VALID_SUCCESS_TYPES: frozenset[str] = frozenset(
    {
        "alive_at_end",
        "obstacles_passed_gte",
        "total_reward_gte",
    }
)

VALID_FAILURE_TYPES: frozenset[str] = frozenset(
    {
        "collision",
        "jump_spam",
        "energy_depleted",
        "any",
    }
)


@dataclass
class SuccessCondition:
    type: str
    value: float | None = None


@dataclass
class FailureCondition:
    type: str
    value: float | None = None
    window: int | None = None
    conditions: list[FailureCondition] | None = None


# ---------------------------------------------------------------------------
# Runtime condition checking
# ---------------------------------------------------------------------------


def _check_success(
    cond: SuccessCondition,
    sim: SimState,
    trajectory: list,
    frame: int,
    max_frames: int,
) -> tuple[bool | None, str | None]:
    """Evaluate a single success condition.

    Returns ``(True, reason)`` if the condition fires, ``(None, None)`` otherwise.
    """
    if cond.type == "alive_at_end":
        if frame >= max_frames - 1 and not sim.terminated:
            return True, "alive_at_end"

    elif cond.type == "obstacles_passed_gte":
        if sim.obstacles_passed >= cond.value:
            return True, "obstacles_passed_gte"

    elif cond.type == "total_reward_gte":
        if sim.total_reward >= cond.value:
            return True, "total_reward_gte"

    return None, None


def _check_failure(
    cond: FailureCondition,
    sim: SimState,
    trajectory: list,
    frame: int,
) -> tuple[bool | None, str | None]:
    """Evaluate a single failure condition.

    Returns ``(False, reason)`` if the condition fires, ``(None, None)`` otherwise.
    """
    if cond.type == "collision":
        if sim.terminated:
            return False, "collision"

    elif cond.type == "jump_spam":
        limit = cond.value if cond.value is not None else 3
        if sim.agent.consecutive_jumps >= limit:
            return False, "jump_spam"

    elif cond.type == "energy_depleted":
        window = cond.window or 50
        threshold = cond.value if cond.value is not None else 0.5
        if len(trajectory) >= window:
            recent = trajectory[-window:]
            if all(r.energy < threshold for r in recent):
                return False, "energy_depleted"

    elif cond.type == "any":
        if cond.conditions:
            for sub in cond.conditions:
                result, reason = _check_failure(sub, sim, trajectory, frame)
                if result is not None:
                    return result, reason

    return None, None


def check_conditions(
    success: SuccessCondition,
    failure: FailureCondition,
    sim: SimState,
    trajectory: list,
    frame: int,
    max_frames: int,
) -> tuple[bool | None, str | None]:
    """Check success and failure conditions for the current frame.

    Failure is checked first: a collision on the last frame is a failure
    even when the success condition would also hold.

    Returns ``(True, reason)`` for success, ``(False, reason)`` for failure,
    or ``(None, None)`` if neither condition has triggered yet.
    """
    result, reason = _check_failure(failure, sim, trajectory, frame)
    if result is not None:
        return result, reason

    result, reason = _check_success(success, sim, trajectory, frame, max_frames)
    if result is not None:
        return result, reason

    return None, None
