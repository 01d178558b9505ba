"""jumper/policies/idle.py — IdlePolicy: never jumps.

Null baseline; every episode ends on the first obstacle.
"""

from __future__ import annotations

import numpy as np

from jumper.policies.actions import ACTION_NOOP


class IdlePolicy:
    """Policy that does nothing every tick."""

    def act(self, obs: np.ndarray) -> int:
        return ACTION_NOOP

    def reset(self) -> None:
        pass
