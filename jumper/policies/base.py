"""jumper/policies/base.py — Policy protocol (Layer 3).

A policy is consulted once per tick with the 11-float observation and answers
with a jump decision. Heuristics, scripted timelines and the PPO actor all
satisfy it structurally; nothing needs to subclass it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Policy(Protocol):
    """Jump decision maker."""

    def act(self, obs: np.ndarray) -> int:
        """``ACTION_NOOP`` or ``ACTION_JUMP`` for the tick described by *obs*."""
        ...

    def reset(self) -> None:
        """Drop per-episode state before the first tick of a new episode."""
        ...
