"""jumper/policies/scripted.py — ScriptedPolicy: replay jump windows by tick.

The timeline is a list of ``[start, end, action]`` windows (end exclusive),
usually straight from a scenario YAML. Ticks outside every window are no-ops;
where windows overlap the first one listed wins.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from jumper.policies.actions import ACTION_NAMES, ACTION_NOOP


class ScriptedPolicy:
    """Open-loop policy: ignores the observation, counts ticks."""

    def __init__(self, timeline: Sequence[Sequence[int]]) -> None:
        windows = []
        for entry in timeline:
            start, end, action = (int(v) for v in entry)
            if action not in ACTION_NAMES:
                raise ValueError(f"Scripted action must be 0 or 1, got {action}")
            if end < start:
                raise ValueError(f"Scripted window ends before it starts: {entry}")
            windows.append((start, end, action))
        self.timeline = windows
        self.tick = 0

    def action_at(self, tick: int) -> int:
        return next(
            (action for start, end, action in self.timeline if start <= tick < end),
            ACTION_NOOP,
        )

    def act(self, obs: np.ndarray) -> int:
        action = self.action_at(self.tick)
        self.tick += 1
        return action

    def reset(self) -> None:
        self.tick = 0
