"""Tests for jumper/config.py — JumperConfig defaults, validation, YAML loading."""

from __future__ import annotations

import pytest
import yaml

from jumper.config import JumperConfig, config_from_dict, load_config


def test_defaults():
    cfg = JumperConfig()
    assert cfg.min_speed == 2.0
    assert cfg.max_speed == 5.0
    assert cfg.spawn_interval == 3.0
    assert cfg.jump_force == 5.0
    assert cfg.jump_cooldown == 0.5
    assert cfg.energy_recovery_rate == 0.1
    assert cfg.jump_energy_cost == 0.5
    assert cfg.offscreen_x == -12.0


def test_defaults_validate():
    cfg = JumperConfig()
    assert cfg.validate() is cfg


def test_frozen():
    cfg = JumperConfig()
    with pytest.raises(AttributeError):
        cfg.min_speed = 1.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_speed": 6.0},
        {"min_speed": 0.0},
        {"spawn_interval": 0.0},
        {"dt": -0.01},
        {"jump_force": 0.0},
        {"jump_cooldown": -1.0},
        {"energy_recovery_rate": -0.1},
        {"jump_energy_cost": 0.0},
        {"jump_energy_cost": 1.5},
        {"gravity": 0.0},
        {"offscreen_x": 1.0},
        {"spawn_x": -1.0},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        JumperConfig(**overrides).validate()


def test_equal_speeds_allowed():
    JumperConfig(min_speed=3.0, max_speed=3.0).validate()


def test_config_from_dict_none():
    assert config_from_dict(None) == JumperConfig()


def test_config_from_dict_overrides():
    cfg = config_from_dict({"min_speed": 3, "spawn_interval": 2})
    assert cfg.min_speed == 3.0
    assert isinstance(cfg.min_speed, float)
    assert cfg.spawn_interval == 2.0
    assert cfg.max_speed == 5.0


def test_config_from_dict_base():
    base = JumperConfig(max_speed=9.0)
    cfg = config_from_dict({"min_speed": 8.0}, base=base)
    assert cfg.max_speed == 9.0
    assert cfg.min_speed == 8.0


def test_config_from_dict_unknown_key():
    with pytest.raises(ValueError, match="Unknown config keys"):
        config_from_dict({"min_sped": 3.0})


def test_config_from_dict_validates():
    with pytest.raises(ValueError, match="max_speed"):
        config_from_dict({"min_speed": 10.0})


def test_load_config(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.dump({"jump_force": 6.5, "gravity": 12.0}))
    cfg = load_config(path)
    assert cfg.jump_force == 6.5
    assert cfg.gravity == 12.0


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == JumperConfig()


def test_load_config_not_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_to_dict_round_keys():
    d = JumperConfig().to_dict()
    assert config_from_dict(d) == JumperConfig()
