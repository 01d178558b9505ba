"""jumper/policies/actions.py — Action space.

Two discrete actions: do nothing, or request a jump. Whether a requested
jump happens is decided by the agent's grounded/energy/cooldown rules.
"""

from __future__ import annotations

from jumper.jumping_agent import ACTION_JUMP, ACTION_NO_JUMP

ACTION_NOOP = ACTION_NO_JUMP

NUM_ACTIONS = 2

ACTION_NAMES: dict[int, str] = {
    ACTION_NOOP: "noop",
    ACTION_JUMP: "jump",
}

__all__ = ["ACTION_NOOP", "ACTION_JUMP", "NUM_ACTIONS", "ACTION_NAMES"]
