"""jumper/constants.py — Default knobs, geometry, and reward terms.

Distances are world units, times are seconds. The agent stands at x=0 on a
floor at y=0; obstacles spawn to the right and scroll left.
"""

# ---------------------------------------------------------------------------
# Spawn parameters
# ---------------------------------------------------------------------------

MIN_SPEED = 2.0
MAX_SPEED = 5.0
SPAWN_INTERVAL = 3.0
SPAWN_X = 10.0
OFFSCREEN_X = -12.0
"""Obstacles with x below this are removed."""

# ---------------------------------------------------------------------------
# Agent parameters
# ---------------------------------------------------------------------------

JUMP_FORCE = 5.0
JUMP_COOLDOWN = 0.5
ENERGY_RECOVERY_RATE = 0.1
JUMP_ENERGY_COST = 0.5
AGENT_MASS = 1.0

# ---------------------------------------------------------------------------
# World geometry
# ---------------------------------------------------------------------------

GRAVITY = 9.81
FLOOR_Y = 0.0
AGENT_X = 0.0
AGENT_HALF_SIZE = 0.5
OBSTACLE_HALF_SIZE = 0.2
DT = 0.02
"""Fixed tick length (50 Hz)."""

# ---------------------------------------------------------------------------
# Reward terms
# ---------------------------------------------------------------------------

COLLISION_PENALTY = -6.0
PASSED_REWARD = 3.0
SURVIVAL_BONUS = 0.01
STEP_PENALTY = -0.01
CONSECUTIVE_JUMP_PENALTY = -0.1
UNNECESSARY_JUMP_PENALTY = -0.4
MISSED_JUMP_PENALTY = -0.3
TIMING_REWARD_SCALE = 0.3
TIMING_REWARD_FLOOR = 0.5
"""Lower bound on timing quality, so a well-timed jump earns at least 0.15."""

IDEAL_JUMP_DISTANCE = 1.5
JUMP_WINDOW = 3.0
"""Jumps with the obstacle ahead closer than this earn the timing bonus."""
DANGER_DISTANCE = 1.5
"""Not jumping with the obstacle ahead closer than this is penalized."""

# ---------------------------------------------------------------------------
# Collision tags
# ---------------------------------------------------------------------------

TAG_OBSTACLE = "Obstacle"
TAG_FLOOR = "Floor"
