"""jumper/scenarios/compare — Baseline comparison and regression detection.

A baseline is a results JSON written by ``save_results``. Each shared numeric
metric is diffed with a direction (higher/lower is better, or neutral) and a
relative threshold.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jumper.scenarios.runner import ScenarioOutcome


METRIC_DIRECTION: dict[str, str] = {
    "obstacles_passed": "higher",
    "total_reward": "higher",
    "survival_time": "higher",
    "collision_count": "lower",
    "invariant_violations": "lower",
    "jump_count": "neutral",
    "time_on_ground": "neutral",
    "min_energy": "neutral",
    "mean_energy": "neutral",
}

EXIT_OK = 0
EXIT_STATUS_FLIP = 1
EXIT_METRIC_REGRESSION = 2


@dataclass
class MetricDelta:
    """Change of one metric between baseline and current run."""

    metric: str
    old: float | None
    new: float | None

    @property
    def relative(self) -> float | None:
        if self.old is None or self.new is None or self.old == 0:
            return None
        return (self.new - self.old) / abs(self.old)

    def verdict(self, threshold: float) -> str:
        """``"improved"``, ``"regressed"``, or ``""`` (within threshold/neutral)."""
        direction = METRIC_DIRECTION.get(self.metric, "neutral")
        rel = self.relative
        if direction == "neutral" or rel is None or abs(rel) <= threshold:
            return ""
        better = rel > 0 if direction == "higher" else rel < 0
        return "improved" if better else "regressed"

    def format(self, threshold: float) -> str:
        rel = self.relative
        pct = "(N/A)" if rel is None else f"({rel * 100:+.1f}%)"
        mark = {"improved": "  ✓ improved", "regressed": "  ⚠ regression"}.get(
            self.verdict(threshold), "",
        )
        return f"  {self.metric:<20s}  {_fmt(self.old):>8s} → {_fmt(self.new):<8s} {pct}{mark}"


def _fmt(val: object) -> str:
    if val is None:
        return "None"
    if isinstance(val, float):
        return f"{val:.2f}"
    return str(val)


def is_regression(
    metric: str, old_val: float, new_val: float, threshold: float = 0.05,
) -> bool:
    """True if *metric* moved the wrong way by more than *threshold*."""
    return MetricDelta(metric, old_val, new_val).verdict(threshold) == "regressed"


def diff_metrics(current: dict, baseline: dict) -> list[MetricDelta]:
    """Deltas for every scalar metric present in both dicts, sorted by name."""
    deltas = []
    for key in sorted(set(current) & set(baseline)):
        old, new = baseline[key], current[key]
        if isinstance(old, list) or isinstance(new, list):
            continue
        deltas.append(MetricDelta(key, old, new))
    return deltas


def status_changes(
    current: dict[str, ScenarioOutcome], baseline: dict[str, dict],
) -> list[tuple[str, bool, bool]]:
    """``(name, was_success, is_success)`` for every scenario whose status flipped."""
    flips = []
    for name in sorted(set(current) & set(baseline)):
        was, now = bool(baseline[name]["success"]), current[name].success
        if was != now:
            flips.append((name, was, now))
    return flips


def compare_results(
    current: list[ScenarioOutcome],
    baseline_path: Path | str,
    threshold: float = 0.05,
) -> int:
    """Print a comparison of *current* against the baseline JSON.

    Returns an exit code: 0 no regressions, 1 a scenario flipped from PASS
    to FAIL, 2 metric regressions beyond *threshold* without status flips.
    """
    with open(Path(baseline_path)) as f:
        baseline_by_name: dict[str, dict] = {e["name"]: e for e in json.load(f)}
    current_by_name = {o.name: o for o in current}

    flips = status_changes(current_by_name, baseline_by_name)
    broke = any(was and not now for _, was, now in flips)
    if flips:
        print("⚠ STATUS CHANGES:" if broke else "STATUS CHANGES:")
        for name, was, now in flips:
            old_s, new_s = ("PASS" if was else "FAIL"), ("PASS" if now else "FAIL")
            note = "(REGRESSION)" if was else "(fixed!)"
            print(f"  {name}: {old_s} → {new_s}  {note}")
        print()

    regressed = False
    for name in sorted(set(current_by_name) | set(baseline_by_name)):
        if name not in current_by_name:
            print(f"{name}: MISSING (in baseline but not in current run)")
            continue
        if name not in baseline_by_name:
            print(f"{name}: NEW (not in baseline)")
            continue

        deltas = diff_metrics(
            current_by_name[name].metrics, baseline_by_name[name].get("metrics", {}),
        )
        if not deltas:
            continue
        print(f"{name}:")
        for delta in deltas:
            print(delta.format(threshold))
            if delta.verdict(threshold) == "regressed":
                regressed = True

    if broke:
        return EXIT_STATUS_FLIP
    if regressed:
        return EXIT_METRIC_REGRESSION
    return EXIT_OK
