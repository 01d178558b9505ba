"""jumper/physics.py — Minimal host kinematics for the headless simulation.

Ballistic vertical motion, a flat floor, and axis-aligned box overlap. Just
enough to produce the floor and obstacle contact notifications the agent
consumes; no friction, rotation, or restitution.
"""

from __future__ import annotations

from dataclasses import dataclass

from jumper.constants import AGENT_HALF_SIZE, AGENT_MASS, FLOOR_Y


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class Body:
    """Position, velocity, and box extents of one entity (center-based)."""
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    half_width: float = AGENT_HALF_SIZE
    half_height: float = AGENT_HALF_SIZE
    mass: float = AGENT_MASS

    @property
    def bottom(self) -> float:
        return self.y - self.half_height

    @property
    def top(self) -> float:
        return self.y + self.half_height


def resting_y(half_height: float, floor_y: float = FLOOR_Y) -> float:
    """Center height of a box standing on the floor."""
    return floor_y + half_height


# ---------------------------------------------------------------------------
# Forces
# ---------------------------------------------------------------------------

def apply_impulse(body: Body, impulse_y: float) -> None:
    """Instantaneous vertical impulse: velocity change of impulse / mass."""
    body.vy += impulse_y / body.mass


def integrate(
    body: Body, gravity: float, dt: float, floor_y: float = FLOOR_Y,
) -> bool:
    """Advance *body* by one tick and resolve the floor.

    Semi-implicit Euler on the vertical axis: velocity first, then position.
    Horizontal velocity is applied unchanged. A body that reaches the floor
    is clamped onto it with zero vertical velocity.

    Returns:
        True if the body is touching the floor after the step.
    """
    body.vy -= gravity * dt
    body.x += body.vx * dt
    body.y += body.vy * dt

    if body.bottom <= floor_y:
        body.y = resting_y(body.half_height, floor_y)
        body.vy = 0.0
        return True
    return False


# ---------------------------------------------------------------------------
# Overlap
# ---------------------------------------------------------------------------

def boxes_overlap(
    ax: float, ay: float, a_half_w: float, a_half_h: float,
    bx: float, by: float, b_half_w: float, b_half_h: float,
) -> bool:
    """Strict AABB overlap; touching edges do not count."""
    return (
        abs(ax - bx) < a_half_w + b_half_w
        and abs(ay - by) < a_half_h + b_half_h
    )
