# scenarios/runner.py
from enum import Enum
from typing import List, Optional
import logging
from pydantic import Field
from scenarios.feature import Feature, Scenario, Step, load_feature
from scenarios.steps import STEPS, StepRegistry, UndefinedStepError, AmbiguousStepError
from scenarios.world import World
from utils.base_model import ImmutableModel

# Registers the tuple vocabulary in STEPS
import scenarios.tuple_steps  # noqa: F401

logger = logging.getLogger(__name__)


class StepStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    UNDEFINED = "undefined"
    ERROR = "error"
    SKIPPED = "skipped"


class StepResult(ImmutableModel):
    step: Step
    status: StepStatus
    message: Optional[str] = None


class ScenarioResult(ImmutableModel):
    scenario: Scenario
    steps: List[StepResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(result.status == StepStatus.PASSED for result in self.steps)

    @property
    def first_problem(self) -> Optional[StepResult]:
        """The step that stopped the scenario, if any."""
        for result in self.steps:
            if result.status != StepStatus.PASSED:
                return result
        return None


class FeatureResult(ImmutableModel):
    feature: Feature
    scenarios: List[ScenarioResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.scenarios)

    @property
    def passed_count(self) -> int:
        return sum(1 for result in self.scenarios if result.passed)

    @property
    def failed_count(self) -> int:
        return len(self.scenarios) - self.passed_count

    def summary(self) -> str:
        return (f"{len(self.scenarios)} scenarios "
                f"({self.passed_count} passed, {self.failed_count} failed)")


def run_step(step: Step, world: World, registry: StepRegistry) -> StepResult:
    """Run a single step and classify its outcome."""
    logger.debug(f"Running step: {step}")
    try:
        handler, args = registry.match(step.text)
    except (UndefinedStepError, AmbiguousStepError) as e:
        return StepResult(step=step, status=StepStatus.UNDEFINED, message=str(e))

    try:
        handler(world, *args)
    except AssertionError as e:
        return StepResult(step=step, status=StepStatus.FAILED, message=str(e) or "assertion failed")
    except Exception as e:
        return StepResult(step=step, status=StepStatus.ERROR, message=f"{type(e).__name__}: {e}")
    return StepResult(step=step, status=StepStatus.PASSED)


def run_scenario(scenario: Scenario, registry: StepRegistry = STEPS) -> ScenarioResult:
    """Run a scenario's steps in order against a fresh World."""
    world = World()
    results: List[StepResult] = []
    stopped = False

    for step in scenario.steps:
        if stopped:
            results.append(StepResult(step=step, status=StepStatus.SKIPPED))
            continue
        result = run_step(step, world, registry)
        results.append(result)
        if result.status != StepStatus.PASSED:
            stopped = True
            logger.warning(
                f"Scenario '{scenario.name}' {result.status.value} at line {step.line}: "
                f"{step} ({result.message})"
            )

    return ScenarioResult(scenario=scenario, steps=results)


def run_feature(feature: Feature, registry: StepRegistry = STEPS) -> FeatureResult:
    """Run every scenario of a feature."""
    logger.info(f"Running feature '{feature.name}' ({len(feature.scenarios)} scenarios)")
    results = [run_scenario(scenario, registry) for scenario in feature.scenarios]
    result = FeatureResult(feature=feature, scenarios=results)
    logger.info(f"Feature '{feature.name}': {result.summary()}")
    return result


def run_path(path, registry: StepRegistry = STEPS) -> FeatureResult:
    """Load a feature file and run it."""
    feature = load_feature(path)
    logger.info(f"Loaded {path}")
    return run_feature(feature, registry)
