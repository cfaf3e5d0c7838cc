# scenarios/tuple_steps.py
"""Step definitions for the tuple feature vocabulary."""
import math
from domain.geometry.constants import EPSILON
from domain.geometry.tuples import Tuple, point, vector, magnitude, normalize, dot, cross
from scenarios.steps import STEPS
from scenarios.world import World


def assert_tuple(actual: Tuple, expected: Tuple) -> None:
    assert actual.is_close_to(expected), f"expected {expected}, got {actual}"


def assert_scalar(actual: float, expected: float) -> None:
    assert abs(actual - expected) < EPSILON, f"expected {expected}, got {actual}"


# Givens

@STEPS.step("{var} ← tuple\\({float}, {float}, {float}, {float}\\)")
def given_tuple(world: World, name: str, x: float, y: float, z: float, w: float):
    world[name] = Tuple(x=x, y=y, z=z, w=w)


@STEPS.step("{var} ← point\\({float}, {float}, {float}\\)")
def given_point(world: World, name: str, x: float, y: float, z: float):
    world[name] = point(x, y, z)


@STEPS.step("{var} ← vector\\({float}, {float}, {float}\\)")
def given_vector(world: World, name: str, x: float, y: float, z: float):
    world[name] = vector(x, y, z)


# Whens

@STEPS.step("{var} ← normalize\\({var}\\)")
def when_normalize(world: World, name: str, source: str):
    world[name] = normalize(world[source])


# Thens: fields and kind

@STEPS.step("{var}.x = {float}")
def then_x(world: World, name: str, expected: float):
    assert_scalar(world[name].x, expected)


@STEPS.step("{var}.y = {float}")
def then_y(world: World, name: str, expected: float):
    assert_scalar(world[name].y, expected)


@STEPS.step("{var}.z = {float}")
def then_z(world: World, name: str, expected: float):
    assert_scalar(world[name].z, expected)


@STEPS.step("{var}.w = {float}")
def then_w(world: World, name: str, expected: float):
    assert_scalar(world[name].w, expected)


@STEPS.step("{var} is a point")
def then_is_point(world: World, name: str):
    assert world[name].is_point, f"{world[name]} is not a point"


@STEPS.step("{var} is not a point")
def then_is_not_point(world: World, name: str):
    assert not world[name].is_point, f"{world[name]} is a point"


@STEPS.step("{var} is a vector")
def then_is_vector(world: World, name: str):
    assert world[name].is_vector, f"{world[name]} is not a vector"


@STEPS.step("{var} is not a vector")
def then_is_not_vector(world: World, name: str):
    assert not world[name].is_vector, f"{world[name]} is a vector"


# Thens: equality and arithmetic

@STEPS.step("{var} = tuple\\({float}, {float}, {float}, {float}\\)")
def then_equals_tuple(world: World, name: str, x: float, y: float, z: float, w: float):
    assert_tuple(world[name], Tuple(x=x, y=y, z=z, w=w))


@STEPS.step("{var} = point\\({float}, {float}, {float}\\)")
def then_equals_point(world: World, name: str, x: float, y: float, z: float):
    assert_tuple(world[name], point(x, y, z))


@STEPS.step("{var} = vector\\({float}, {float}, {float}\\)")
def then_equals_vector(world: World, name: str, x: float, y: float, z: float):
    assert_tuple(world[name], vector(x, y, z))


@STEPS.step("{var} + {var} = tuple\\({float}, {float}, {float}, {float}\\)")
def then_sum(world: World, a: str, b: str, x: float, y: float, z: float, w: float):
    assert_tuple(world[a] + world[b], Tuple(x=x, y=y, z=z, w=w))


@STEPS.step("{var} - {var} = vector\\({float}, {float}, {float}\\)")
def then_difference_vector(world: World, a: str, b: str, x: float, y: float, z: float):
    assert_tuple(world[a] - world[b], vector(x, y, z))


@STEPS.step("{var} - {var} = point\\({float}, {float}, {float}\\)")
def then_difference_point(world: World, a: str, b: str, x: float, y: float, z: float):
    assert_tuple(world[a] - world[b], point(x, y, z))


@STEPS.step("-{var} = tuple\\({float}, {float}, {float}, {float}\\)")
def then_negation(world: World, name: str, x: float, y: float, z: float, w: float):
    assert_tuple(-world[name], Tuple(x=x, y=y, z=z, w=w))


@STEPS.step("{var} * {float} = tuple\\({float}, {float}, {float}, {float}\\)")
def then_product(world: World, name: str, scalar: float, x: float, y: float, z: float, w: float):
    assert_tuple(world[name] * scalar, Tuple(x=x, y=y, z=z, w=w))


@STEPS.step("{var} \\/ {float} = tuple\\({float}, {float}, {float}, {float}\\)")
def then_quotient(world: World, name: str, scalar: float, x: float, y: float, z: float, w: float):
    assert_tuple(world[name] / scalar, Tuple(x=x, y=y, z=z, w=w))


# Thens: geometry

@STEPS.step("magnitude\\({var}\\) = {float}")
def then_magnitude(world: World, name: str, expected: float):
    assert_scalar(magnitude(world[name]), expected)


@STEPS.step("magnitude\\({var}\\) = √{float}")
def then_magnitude_sqrt(world: World, name: str, expected: float):
    assert_scalar(magnitude(world[name]), math.sqrt(expected))


@STEPS.step("normalize\\({var}\\) = vector\\({float}, {float}, {float}\\)")
def then_normalized(world: World, name: str, x: float, y: float, z: float):
    assert_tuple(normalize(world[name]), vector(x, y, z))


@STEPS.step("normalize\\({var}\\) = vector\\({int}\\/√{float}, {int}\\/√{float}, {int}\\/√{float}\\)")
def then_normalized_sqrt(world: World, name: str,
                         x: int, x_root: float, y: int, y_root: float, z: int, z_root: float):
    expected = vector(x / math.sqrt(x_root), y / math.sqrt(y_root), z / math.sqrt(z_root))
    assert_tuple(normalize(world[name]), expected)


@STEPS.step("dot\\({var}, {var}\\) = {float}")
def then_dot(world: World, a: str, b: str, expected: float):
    assert_scalar(dot(world[a], world[b]), expected)


@STEPS.step("cross\\({var}, {var}\\) = vector\\({float}, {float}, {float}\\)")
def then_cross(world: World, a: str, b: str, x: float, y: float, z: float):
    assert_tuple(cross(world[a], world[b]), vector(x, y, z))
