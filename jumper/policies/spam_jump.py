"""jumper/policies/spam_jump.py — SpamJumpPolicy: requests a jump every tick.

Exercises the cooldown, energy, and consecutive-jump penalty rules.
"""

from __future__ import annotations

import numpy as np

from jumper.policies.actions import ACTION_JUMP


class SpamJumpPolicy:
    """Policy that holds the jump button."""

    def act(self, obs: np.ndarray) -> int:
        return ACTION_JUMP

    def reset(self) -> None:
        pass
