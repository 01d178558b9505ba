"""jumper/scenarios/cli — CLI entry point for running scenarios.

Usage::

    python -m jumper.scenarios.cli scenarios/timed_jump_clears_first.yaml
    python -m jumper.scenarios.cli --all
    python -m jumper.scenarios.cli --all --policy idle
    python -m jumper.scenarios.cli --all -o results/run_001.json
    python -m jumper.scenarios.cli --all --compare results/baseline.json -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from jumper.scenarios.compare import compare_results
from jumper.scenarios.loader import load_scenarios
from jumper.scenarios.output import print_outcome, print_summary, save_results
from jumper.scenarios.runner import run_scenario


def main(argv: list[str] | None = None) -> None:
    """Run scenarios from the command line."""
    parser = argparse.ArgumentParser(description="Run jumper scenarios")
    parser.add_argument(
        "scenarios", nargs="*", help="Scenario YAML files",
    )
    parser.add_argument(
        "--all", action="store_true", help="Run all scenarios in --dir",
    )
    parser.add_argument(
        "--dir", default="scenarios", help="Scenario directory for --all",
    )
    parser.add_argument(
        "--policy", help="Override policy for all scenarios",
    )
    parser.add_argument(
        "--output", "-o", help="Output file path for results JSON",
    )
    parser.add_argument(
        "--trajectory", action="store_true",
        help="Include per-frame trajectory in JSON output",
    )
    parser.add_argument(
        "--compare", help="Compare against baseline results JSON",
    )
    parser.add_argument(
        "--verbose", "-v", action="count", default=0,
        help="Log episode events (-v info, -vv debug)",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if not args.scenarios and not args.all:
        parser.print_usage()
        sys.exit(2)

    paths = [Path(s) for s in args.scenarios] if args.scenarios else None
    scenario_defs = load_scenarios(paths=paths, run_all=args.all, base=Path(args.dir))

    results = []
    for scenario_def in scenario_defs:
        if args.policy:
            scenario_def.policy = args.policy
            scenario_def.policy_params = None
        outcome = run_scenario(scenario_def)
        results.append(outcome)
        print_outcome(outcome)

    print_summary(results)

    if args.output:
        save_results(results, args.output, include_trajectory=args.trajectory)

    if args.compare:
        sys.exit(compare_results(results, args.compare))

    sys.exit(0 if all(r.success for r in results) else 1)


if __name__ == "__main__":
    main()
