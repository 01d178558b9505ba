"""Tests for jumper/obstacles.py — ObstacleField spawning, motion, credit, and pruning."""

from __future__ import annotations

import numpy as np
import pytest

from jumper.config import JumperConfig
from jumper.obstacles import Obstacle, ObstacleField


def _field(seed: int = 0, **overrides) -> ObstacleField:
    return ObstacleField(JumperConfig(**overrides), np.random.default_rng(seed))


def _place(field: ObstacleField, *xs: float) -> list[Obstacle]:
    field.obstacles = [
        Obstacle(id=i, x=x, y=0.2, vx=-3.0) for i, x in enumerate(xs)
    ]
    return field.obstacles


# ---------------------------------------------------------------------------
# reset / spawn
# ---------------------------------------------------------------------------

class TestReset:
    def test_reset_spawns_exactly_one(self):
        field = _field()
        obs = field.reset()
        assert field.obstacles == [obs]
        assert obs.x == 10.0
        assert obs.reward_pending is True
        assert field.spawn_timer == 0.0

    def test_reset_mid_episode_clears(self):
        field = _field(spawn_interval=0.5)
        field.reset()
        for _ in range(10):
            field.tick(0.25)
        assert len(field.obstacles) > 1

        field.reset()
        assert len(field.obstacles) == 1
        assert field.obstacles[0].x == 10.0
        assert field.spawn_timer == 0.0

    def test_spawn_speed_in_range(self):
        field = _field(seed=42)
        for _ in range(200):
            obs = field.spawn()
            assert -5.0 <= obs.vx <= -2.0
            assert obs.vx == -field.current_speed

    def test_fixed_speed(self):
        field = _field(min_speed=3.0, max_speed=3.0)
        assert field.reset().vx == -3.0

    def test_ids_unique(self):
        field = _field()
        ids = {field.spawn().id for _ in range(20)}
        assert len(ids) == 20

    def test_seeded_speeds_reproducible(self):
        a = _field(seed=9)
        b = _field(seed=9)
        assert [a.spawn().vx for _ in range(5)] == [b.spawn().vx for _ in range(5)]

    def test_obstacle_rests_on_floor(self):
        obs = _field().reset()
        assert obs.y - obs.half_size == pytest.approx(0.0)


# ---------------------------------------------------------------------------
# tick
# ---------------------------------------------------------------------------

class TestTick:
    def test_moves_by_velocity(self):
        field = _field()
        obs = field.reset()
        field.tick(0.5)
        assert obs.x == pytest.approx(10.0 + obs.vx * 0.5)

    def test_spawn_on_interval(self):
        field = _field(spawn_interval=3.0)
        field.reset()
        for _ in range(5):
            assert field.tick(0.5) == []
        assert len(field.obstacles) == 1

        spawned = field.tick(0.5)
        assert len(spawned) == 1
        assert len(field.obstacles) == 2
        assert field.spawn_timer == 0.0

    def test_new_obstacle_moves_same_tick(self):
        field = _field(spawn_interval=0.5)
        field.reset()
        (obs,) = field.tick(0.5)
        assert obs.x == pytest.approx(10.0 + obs.vx * 0.5)

    def test_timer_accumulates(self):
        field = _field()
        field.reset()
        field.tick(0.25)
        field.tick(0.25)
        assert field.spawn_timer == pytest.approx(0.5)


# ---------------------------------------------------------------------------
# collect_passed_events
# ---------------------------------------------------------------------------

class TestPassedEvents:
    def test_fires_once(self):
        field = _field()
        (obs,) = _place(field, -1.0)
        assert field.collect_passed_events(0.0) == [obs]
        assert obs.reward_pending is False
        for _ in range(10):
            field.tick(0.1)
            assert field.collect_passed_events(0.0) == []

    def test_ahead_not_credited(self):
        field = _field()
        (obs,) = _place(field, 0.5)
        assert field.collect_passed_events(0.0) == []
        assert obs.reward_pending is True

    def test_exactly_at_agent_not_credited(self):
        field = _field()
        _place(field, 0.0)
        assert field.collect_passed_events(0.0) == []

    def test_multiple(self):
        field = _field()
        a, b, c = _place(field, -1.0, 2.0, -0.5)
        assert field.collect_passed_events(0.0) == [a, c]
        assert field.pending_count == 1


# ---------------------------------------------------------------------------
# prune_offscreen
# ---------------------------------------------------------------------------

class TestPrune:
    def test_removes_beyond_limit(self):
        field = _field()
        far, near = _place(field, -13.0, -11.0)
        removed = field.prune_offscreen(-12.0)
        assert removed == [far]
        assert field.obstacles == [near]

    def test_default_limit_from_config(self):
        field = _field(offscreen_x=-5.0)
        _place(field, -6.0, -4.0)
        field.prune_offscreen()
        assert [o.x for o in field.obstacles] == [-4.0]

    def test_pruned_never_credited(self):
        field = _field()
        (obs,) = _place(field, -13.0)
        field.prune_offscreen(-12.0)
        assert obs.reward_pending is False
        assert field.collect_passed_events(0.0) == []


# ---------------------------------------------------------------------------
# closest_obstacle
# ---------------------------------------------------------------------------

class TestClosest:
    def test_empty_is_none(self):
        field = _field()
        assert field.closest_obstacle((0.0, 0.5)) is None

    def test_picks_nearest(self):
        field = _field()
        _, behind = _place(field, 3.0, -2.0)
        assert field.closest_obstacle((0.0, 0.5)) is behind

    def test_euclidean_distance(self):
        field = _field()
        low, high = _place(field, 2.0, 1.9)
        high.y = 5.0
        assert field.closest_obstacle((0.0, 0.2)) is low

    def test_tie_first_encountered(self):
        field = _field()
        first, _ = _place(field, 2.0, -2.0)
        assert field.closest_obstacle((0.0, 0.2)) is first
