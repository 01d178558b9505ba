"""jumper/invariants.py — Invariant checker for recorded episode trajectories.

Scans per-frame snapshots plus events and flags states the jumper rules
forbid. Tests import it and assert on the returned violations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

from jumper.constants import AGENT_HALF_SIZE, FLOOR_Y
from jumper.jumping_agent import ACTION_NO_JUMP
from jumper.physics import resting_y
from jumper.simulation import ObstaclePassedEvent

if TYPE_CHECKING:
    from jumper.simulation import Event

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

GROUND_TOLERANCE = 1e-6
"""Height above the resting position still treated as on the floor."""

# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class SnapshotLike(Protocol):
    """Minimal interface for frame snapshots accepted by the checker."""

    frame: int
    y: float
    grounded: bool
    energy: float
    consecutive_jumps: int
    action: int


# ---------------------------------------------------------------------------
# Violation
# ---------------------------------------------------------------------------


@dataclass
class Violation:
    """A single invariant violation."""

    frame: int
    invariant: str
    details: str
    severity: str  # "error" or "warning"


# ---------------------------------------------------------------------------
# Individual checkers
# ---------------------------------------------------------------------------


def _check_energy_bounds(
    snapshots: Sequence[SnapshotLike],
) -> list[Violation]:
    violations: list[Violation] = []
    for snap in snapshots:
        if not 0.0 <= snap.energy <= 1.0:
            violations.append(Violation(
                frame=snap.frame,
                invariant="energy_out_of_range",
                details=f"energy={snap.energy:.4f} outside [0, 1]",
                severity="error",
            ))
    return violations


def _check_single_credit(
    snapshots: Sequence[SnapshotLike],
    events_per_frame: Sequence[Sequence[Event]],
) -> list[Violation]:
    violations: list[Violation] = []
    credited: dict[int, int] = {}
    for i, frame_events in enumerate(events_per_frame):
        frame = snapshots[i].frame if i < len(snapshots) else i
        for e in frame_events:
            if not isinstance(e, ObstaclePassedEvent):
                continue
            if e.obstacle_id in credited:
                violations.append(Violation(
                    frame=frame,
                    invariant="obstacle_credited_twice",
                    details=(
                        f"Obstacle {e.obstacle_id} credited again "
                        f"(first at frame {credited[e.obstacle_id]})"
                    ),
                    severity="error",
                ))
            else:
                credited[e.obstacle_id] = frame
    return violations


def _check_jump_counter(
    snapshots: Sequence[SnapshotLike],
) -> list[Violation]:
    """The counter drops to zero exactly on a grounded no-jump decision.

    The decision is taken against the grounded flag of the previous frame's
    snapshot. The first frame is judged against the episode start: grounded,
    counter at zero.
    """
    violations: list[Violation] = []
    prev_grounded = True
    prev_count = 0
    for curr in snapshots:
        grounded_no_jump = curr.action == ACTION_NO_JUMP and prev_grounded

        if grounded_no_jump and curr.consecutive_jumps != 0:
            violations.append(Violation(
                frame=curr.frame,
                invariant="jump_counter_not_reset",
                details=(
                    f"No-jump while grounded but consecutive_jumps="
                    f"{curr.consecutive_jumps}"
                ),
                severity="error",
            ))
        elif not grounded_no_jump and curr.consecutive_jumps < prev_count:
            violations.append(Violation(
                frame=curr.frame,
                invariant="jump_counter_unexpected_reset",
                details=(
                    f"consecutive_jumps fell {prev_count} -> "
                    f"{curr.consecutive_jumps} without a grounded no-jump"
                ),
                severity="error",
            ))
        prev_grounded = curr.grounded
        prev_count = curr.consecutive_jumps
    return violations


def _check_ground_consistency(
    snapshots: Sequence[SnapshotLike],
) -> list[Violation]:
    rest = resting_y(AGENT_HALF_SIZE, FLOOR_Y)
    violations: list[Violation] = []
    for snap in snapshots:
        if snap.grounded and snap.y > rest + GROUND_TOLERANCE:
            violations.append(Violation(
                frame=snap.frame,
                invariant="grounded_above_floor",
                details=f"grounded=True but y={snap.y:.3f} > resting {rest:.3f}",
                severity="warning",
            ))
    return violations


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_invariants(
    snapshots: Sequence[SnapshotLike],
    events_per_frame: Sequence[Sequence[Event]],
) -> list[Violation]:
    """Scan a trajectory for rule violations.

    Args:
        snapshots: Per-frame snapshot list.
        events_per_frame: Per-frame event lists (parallel to snapshots).

    Returns:
        List of Violation objects, sorted by frame number.
    """
    violations: list[Violation] = []
    violations.extend(_check_energy_bounds(snapshots))
    violations.extend(_check_single_credit(snapshots, events_per_frame))
    violations.extend(_check_jump_counter(snapshots))
    violations.extend(_check_ground_consistency(snapshots))
    violations.sort(key=lambda v: v.frame)
    return violations
