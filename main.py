#!/usr/bin/env python3
"""
Raytracer scenario runner

Runs tuple feature files and reports each scenario's outcome.
"""
__version__ = "0.1.0"

import argparse
import logging
import sys
from typing import List, Optional
from scenarios.feature import FeatureSyntaxError
from scenarios.runner import FeatureResult, run_path

logger = logging.getLogger(__name__)


def report(result: FeatureResult) -> None:
    """Print one line per scenario followed by the feature summary."""
    print(f"Feature: {result.feature.name}")
    for scenario_result in result.scenarios:
        if scenario_result.passed:
            print(f"  PASS {scenario_result.scenario.name}")
            continue
        problem = scenario_result.first_problem
        print(f"  FAIL {scenario_result.scenario.name}")
        print(f"       line {problem.step.line}: {problem.step} [{problem.status.value}] {problem.message}")
    print(result.summary())


def main(argv: Optional[List[str]] = None) -> int:
    """Run the given feature files and return the process exit status."""
    parser = argparse.ArgumentParser(description="Run tuple feature files.")
    parser.add_argument("features", nargs="+", help="Feature files to run")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each step")
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    all_passed = True
    for path in args.features:
        try:
            result = run_path(path)
        except (FeatureSyntaxError, OSError) as e:
            logger.error(f"Error loading feature: {str(e)}")
            return 2
        report(result)
        all_passed = all_passed and result.passed

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
