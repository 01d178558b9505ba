"""jumper/policies/manual.py — ManualPolicy: a single "jump" trigger.

Stands in for a human pressing a jump key. The trigger is any zero-argument
callable returning True when a jump is wanted this tick; the policy never
looks at the observation.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from jumper.policies.actions import ACTION_JUMP, ACTION_NOOP

logger = logging.getLogger(__name__)


class ManualPolicy:
    """Policy driven by an external jump trigger."""

    def __init__(self, trigger: Callable[[], bool] | None = None) -> None:
        self.trigger = trigger
        self.presses: int = 0

    def act(self, obs: np.ndarray) -> int:
        if self.trigger is not None and self.trigger():
            self.presses += 1
            logger.debug("Manual jump triggered")
            return ACTION_JUMP
        return ACTION_NOOP

    def reset(self) -> None:
        self.presses = 0
