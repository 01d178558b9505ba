"""jumper/scenarios — Scenario definition, loading, conditions, and runner (Layer 4)."""

from jumper.scenarios.conditions import (
    VALID_FAILURE_TYPES,
    VALID_SUCCESS_TYPES,
    FailureCondition,
    SuccessCondition,
    check_conditions,
)
from jumper.scenarios.loader import ScenarioDef, load_scenario, load_scenarios
from jumper.scenarios.runner import FrameRecord, ScenarioOutcome, compute_metrics, run_scenario
from jumper.scenarios.compare import compare_results
from jumper.scenarios.output import print_outcome, print_summary, save_results

__all__ = [
    "VALID_SUCCESS_TYPES",
    "VALID_FAILURE_TYPES",
    "SuccessCondition",
    "FailureCondition",
    "check_conditions",
    "ScenarioDef",
    "load_scenario",
    "load_scenarios",
    "FrameRecord",
    "ScenarioOutcome",
    "compute_metrics",
    "run_scenario",
    "print_outcome",
    "print_summary",
    "save_results",
    "compare_results",
]
