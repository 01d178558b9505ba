"""jumper/scenarios/output — Console lines and results JSON for scenario runs."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jumper.scenarios.runner import ScenarioOutcome


_GREEN = "\033[32m"
_RED = "\033[31m"
_RESET = "\033[0m"

# Metrics echoed on the console line when present: (key, label, format).
_HEADLINE = (
    ("obstacles_passed", "passed", "{}"),
    ("total_reward", "return", "{:.2f}"),
    ("jump_count", "jumps", "{}"),
)


def _paint(text: str, color: str) -> str:
    """Wrap *text* in an ANSI color when stdout is a terminal."""
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is not None and isatty():
        return f"{color}{text}{_RESET}"
    return text


def format_outcome(outcome: ScenarioOutcome) -> str:
    status = _paint("PASS", _GREEN) if outcome.success else _paint("FAIL", _RED)
    fields = [
        f"{status}  {outcome.name:<25s}",
        f"{outcome.frames_elapsed:>5d} frames",
        f"{outcome.wall_time_ms:>7.1f}ms",
        outcome.reason,
    ]
    fields += [
        f"{label}={fmt.format(outcome.metrics[key])}"
        for key, label, fmt in _HEADLINE
        if key in outcome.metrics
    ]
    return "  ".join(fields)


def print_outcome(outcome: ScenarioOutcome) -> None:
    print(format_outcome(outcome))


def print_summary(results: list[ScenarioOutcome]) -> None:
    passed = sum(r.success for r in results)
    failed = len(results) - passed
    pass_str = _paint(f"{passed} passed", _GREEN) if passed else f"{passed} passed"
    fail_str = _paint(f"{failed} failed", _RED) if failed else f"{failed} failed"
    print(f"\n{len(results)} scenarios: {pass_str}, {fail_str}")


def outcome_to_dict(
    outcome: ScenarioOutcome, include_trajectory: bool = False,
) -> dict:
    """JSON-ready dict; the per-frame trajectory only on request."""
    data = asdict(outcome)
    if not include_trajectory:
        del data["trajectory"]
    return data


def save_results(
    results: list[ScenarioOutcome],
    path: Path | str,
    include_trajectory: bool = False,
) -> None:
    """Write *results* as a JSON list, the format ``compare_results`` reads back."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [outcome_to_dict(r, include_trajectory) for r in results]
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)
        f.write("\n")
