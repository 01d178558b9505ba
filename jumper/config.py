"""jumper/config.py — JumperConfig: every numeric knob of a jumper episode.

Defaults come from constants.py. Configs can be built from a plain dict
(e.g. the ``config:`` block of a scenario YAML) or loaded from a YAML file.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

import yaml

from jumper.constants import (
    AGENT_X,
    DT,
    ENERGY_RECOVERY_RATE,
    GRAVITY,
    JUMP_COOLDOWN,
    JUMP_ENERGY_COST,
    JUMP_FORCE,
    MAX_SPEED,
    MIN_SPEED,
    OFFSCREEN_X,
    SPAWN_INTERVAL,
    SPAWN_X,
)


@dataclass(frozen=True)
class JumperConfig:
    """Episode configuration.

    Attributes
    ----------
    min_speed, max_speed : float
        Obstacle speed is drawn uniformly from this range on every spawn.
    spawn_interval : float
        Seconds between obstacle spawns.
    jump_force : float
        Upward impulse applied on a jump.
    jump_cooldown : float
        Minimum seconds between a jump (or landing) and the next jump.
    energy_recovery_rate : float
        Energy regained per second while grounded.
    jump_energy_cost : float
        Energy spent per jump.
    gravity : float
        Downward acceleration of the agent.
    dt : float
        Tick length in seconds.
    spawn_x : float
        Horizontal spawn position of new obstacles.
    offscreen_x : float
        Obstacles left of this are removed.
    agent_x : float
        Horizontal position of the agent.
    """

    min_speed: float = MIN_SPEED
    max_speed: float = MAX_SPEED
    spawn_interval: float = SPAWN_INTERVAL
    jump_force: float = JUMP_FORCE
    jump_cooldown: float = JUMP_COOLDOWN
    energy_recovery_rate: float = ENERGY_RECOVERY_RATE
    jump_energy_cost: float = JUMP_ENERGY_COST
    gravity: float = GRAVITY
    dt: float = DT
    spawn_x: float = SPAWN_X
    offscreen_x: float = OFFSCREEN_X
    agent_x: float = AGENT_X

    def validate(self) -> JumperConfig:
        """Raise ValueError for out-of-range knobs. Returns self for chaining."""
        if self.min_speed <= 0:
            raise ValueError(f"min_speed must be positive, got {self.min_speed}")
        if self.min_speed > self.max_speed:
            raise ValueError(
                f"min_speed ({self.min_speed}) must not exceed "
                f"max_speed ({self.max_speed})"
            )
        if self.spawn_interval <= 0:
            raise ValueError(
                f"spawn_interval must be positive, got {self.spawn_interval}"
            )
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.jump_force <= 0:
            raise ValueError(f"jump_force must be positive, got {self.jump_force}")
        if self.jump_cooldown < 0:
            raise ValueError(
                f"jump_cooldown must not be negative, got {self.jump_cooldown}"
            )
        if self.energy_recovery_rate < 0:
            raise ValueError(
                f"energy_recovery_rate must not be negative, "
                f"got {self.energy_recovery_rate}"
            )
        if not 0.0 < self.jump_energy_cost <= 1.0:
            raise ValueError(
                f"jump_energy_cost must be in (0, 1], got {self.jump_energy_cost}"
            )
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.offscreen_x >= self.agent_x:
            raise ValueError(
                f"offscreen_x ({self.offscreen_x}) must be left of "
                f"agent_x ({self.agent_x})"
            )
        if self.spawn_x <= self.agent_x:
            raise ValueError(
                f"spawn_x ({self.spawn_x}) must be right of agent_x ({self.agent_x})"
            )
        return self

    def to_dict(self) -> dict:
        return asdict(self)


_FIELD_NAMES = frozenset(f.name for f in fields(JumperConfig))


def config_from_dict(
    data: dict | None, base: JumperConfig | None = None,
) -> JumperConfig:
    """Apply *data* as overrides on *base* (defaults if None) and validate.

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    base = base or JumperConfig()
    if not data:
        return base.validate()
    unknown = set(data) - _FIELD_NAMES
    if unknown:
        raise ValueError(
            f"Unknown config keys: {sorted(unknown)}. "
            f"Valid keys: {sorted(_FIELD_NAMES)}"
        )
    overrides = {k: float(v) for k, v in data.items()}
    return replace(base, **overrides).validate()


def load_config(path: Path | str) -> JumperConfig:
    """Load a JumperConfig from a YAML mapping of overrides."""
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return config_from_dict(data)
