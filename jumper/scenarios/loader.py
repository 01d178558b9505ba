"""jumper/scenarios/loader — ScenarioDef and YAML loading.

A scenario file names a policy, a seed, optional ``config:`` overrides on
JumperConfig, a frame budget, and the success/failure conditions that end the
run. Malformed files raise ValueError at load time, before any frame runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from jumper.config import JumperConfig, config_from_dict
from jumper.scenarios.conditions import (
    VALID_FAILURE_TYPES,
    VALID_SUCCESS_TYPES,
    FailureCondition,
    SuccessCondition,
)

REQUIRED_KEYS = ("name", "policy", "max_frames", "success", "failure")

# Success types that compare against a threshold.
_THRESHOLD_SUCCESS = frozenset({"obstacles_passed_gte", "total_reward_gte"})


@dataclass
class ScenarioDef:
    """One runnable scenario.

    ``seed`` feeds the obstacle-speed generator, so a scenario replays the
    same episode every time. ``config`` is the defaults with the file's
    ``config:`` block applied.
    """

    name: str
    description: str
    policy: str
    policy_params: dict | None
    max_frames: int
    success: SuccessCondition
    failure: FailureCondition
    metrics: list[str]
    seed: int = 0
    config: JumperConfig = field(default_factory=JumperConfig)

    @classmethod
    def from_dict(cls, data: dict) -> ScenarioDef:
        if not isinstance(data, dict):
            raise ValueError("Scenario file must contain a mapping")
        missing = [k for k in REQUIRED_KEYS if k not in data]
        if missing:
            raise ValueError(f"Scenario is missing required keys: {missing}")
        return cls(
            name=str(data["name"]),
            description=data.get("description", ""),
            policy=data["policy"],
            policy_params=data.get("policy_params"),
            max_frames=int(data["max_frames"]),
            success=_success_from(data["success"]),
            failure=_failure_from(data["failure"]),
            metrics=list(data.get("metrics") or []),
            seed=int(data.get("seed", 0)),
            config=config_from_dict(data.get("config")),
        )


def _success_from(data: dict) -> SuccessCondition:
    kind = data["type"]
    if kind not in VALID_SUCCESS_TYPES:
        raise ValueError(f"Unknown success condition type: {kind!r}")
    value = data.get("value")
    if kind in _THRESHOLD_SUCCESS and value is None:
        raise ValueError(f"Success condition {kind!r} requires a value")
    return SuccessCondition(type=kind, value=value)


def _failure_from(data: dict) -> FailureCondition:
    kind = data["type"]
    if kind not in VALID_FAILURE_TYPES:
        raise ValueError(f"Unknown failure condition type: {kind!r}")
    children = None
    if kind == "any":
        children = [_failure_from(c) for c in data.get("conditions") or []]
    return FailureCondition(
        type=kind,
        value=data.get("value"),
        window=data.get("window"),
        conditions=children,
    )


def load_scenario(path: Path | str) -> ScenarioDef:
    """Parse one scenario YAML file."""
    with open(path) as f:
        return ScenarioDef.from_dict(yaml.safe_load(f))


def load_scenarios(
    paths: list[Path] | None = None,
    run_all: bool = False,
    base: Path = Path("scenarios"),
) -> list[ScenarioDef]:
    """Parse *paths*, or every ``*.yaml`` under *base* (sorted) when *run_all*."""
    if run_all:
        paths = sorted(Path(base).glob("*.yaml"))
    return [load_scenario(p) for p in paths or []]
