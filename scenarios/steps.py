# scenarios/steps.py
"""
Step expressions and the registry that maps step text to handlers.

Expressions are cucumber expressions: built-in '{int}', '{float}', '{word}'
and '{string}' parameters plus the '{var}' type defined here for scenario
variable names. Parentheses and slashes are cucumber syntax (optional text
and alternation), so literal ones must be escaped, e.g. 'tuple\\({float}\\)'.
"""
from typing import Callable, List, Optional, Tuple
import logging
from cucumber_expressions.expression import CucumberExpression
from cucumber_expressions.parameter_type import ParameterType
from cucumber_expressions.parameter_type_registry import ParameterTypeRegistry

logger = logging.getLogger(__name__)

StepHandler = Callable[..., None]

# Scenario variable names, e.g. 'a1' or 'norm'. Unlike '{word}' this never
# swallows a leading operator such as the '-' in '-a'.
VARIABLE_PARAMETER = ParameterType(
    name="var",
    regexp=r"[A-Za-z_]\w*",
    type=str,
    transformer=lambda name: name,
    use_for_snippets=False,
    prefer_for_regexp_match=False,
)


class UndefinedStepError(LookupError):
    """No registered expression matches a step."""


class AmbiguousStepError(LookupError):
    """More than one registered expression matches a step."""


def create_parameter_types() -> ParameterTypeRegistry:
    """Built-in cucumber parameter types plus '{var}'."""
    parameter_types = ParameterTypeRegistry()
    parameter_types.define_parameter_type(VARIABLE_PARAMETER)
    return parameter_types


class StepExpression:
    """A compiled cucumber expression returning converted argument values."""

    def __init__(self, expression: str, parameter_types: ParameterTypeRegistry):
        self.expression = expression
        self._compiled = CucumberExpression(expression, parameter_types)

    def match(self, text: str) -> Optional[list]:
        """Return the converted arguments if text matches, otherwise None."""
        arguments = self._compiled.match(text)
        if arguments is None:
            return None
        return [argument.value for argument in arguments]

    def __repr__(self) -> str:
        return f"StepExpression({self.expression!r})"


class StepRegistry:
    """Collection of step expressions and their handlers."""

    def __init__(self, parameter_types: Optional[ParameterTypeRegistry] = None):
        self.parameter_types = parameter_types or create_parameter_types()
        self._steps: List[Tuple[StepExpression, StepHandler]] = []

    def step(self, expression: str) -> Callable[[StepHandler], StepHandler]:
        """Decorator registering a handler called as handler(world, *args)."""
        compiled = StepExpression(expression, self.parameter_types)

        def decorator(handler: StepHandler) -> StepHandler:
            self._steps.append((compiled, handler))
            return handler

        return decorator

    def match(self, text: str) -> Tuple[StepHandler, list]:
        """
        Find the single handler whose expression matches text.

        Raises:
            UndefinedStepError: If nothing matches
            AmbiguousStepError: If more than one expression matches
        """
        found = []
        for expression, handler in self._steps:
            args = expression.match(text)
            if args is not None:
                found.append((expression, handler, args))

        if not found:
            raise UndefinedStepError(f"No step matches: {text}")
        if len(found) > 1:
            candidates = ", ".join(repr(expression.expression) for expression, _, _ in found)
            raise AmbiguousStepError(f"Step '{text}' matches several expressions: {candidates}")

        expression, handler, args = found[0]
        logger.debug(f"Matched '{text}' to {expression!r}")
        return handler, args

    def __len__(self) -> int:
        return len(self._steps)


# Default registry
STEPS = StepRegistry()
