import pytest
import math
from pydantic import ValidationError
from domain.geometry.constants import EPSILON
from domain.geometry.tuples import (
    Tuple, ZeroMagnitudeError, point, vector, magnitude, normalize, dot, cross,
)


SAMPLE_TUPLES = [
    Tuple(x=4.3, y=-4.2, z=3.1, w=1.0),
    Tuple(x=1.0, y=-2.0, z=3.0, w=-4.0),
    point(3.0, -2.0, 5.0),
    vector(-2.0, 3.0, 1.0),
    vector(0.1, 0.2, 0.3),
]

SAMPLE_VECTORS = [
    vector(1.0, 2.0, 3.0),
    vector(-1.0, -2.0, -3.0),
    vector(4.0, 0.0, 0.0),
    vector(0.001, 1000.0, -7.5),
]


class TestConstruction:
    def test_tuple_with_w_1_is_a_point(self):
        a = Tuple(x=4.3, y=-4.2, z=3.1, w=1.0)
        assert a.x == 4.3
        assert a.y == -4.2
        assert a.z == 3.1
        assert a.w == 1.0
        assert a.is_point
        assert not a.is_vector

    def test_tuple_with_w_0_is_a_vector(self):
        a = Tuple(x=4.3, y=-4.2, z=3.1, w=0.0)
        assert not a.is_point
        assert a.is_vector

    def test_point_sets_w_to_1(self):
        assert point(4, -4, 3) == Tuple(x=4.0, y=-4.0, z=3.0, w=1.0)

    def test_vector_sets_w_to_0(self):
        assert vector(4, -4, 3) == Tuple(x=4.0, y=-4.0, z=3.0, w=0.0)

    def test_integers_are_stored_as_floats(self):
        p = point(1, 2, 3)
        assert isinstance(p.x, float)
        assert isinstance(p.w, float)

    def test_non_finite_fields_are_accepted(self):
        t = Tuple(x=math.inf, y=-math.inf, z=math.nan, w=0.0)
        assert math.isinf(t.x)
        assert math.isnan(t.z)

    def test_invalid_field_type(self):
        with pytest.raises(ValidationError):
            Tuple(x="not a number", y=0.0, z=0.0, w=0.0)

    def test_immutability(self):
        p = point(1.0, 2.0, 3.0)

        with pytest.raises(Exception):
            p.x = 5.0  # Frozen after creation

    def test_with_changes_returns_new_tuple(self):
        p = point(1.0, 2.0, 3.0)
        v = p.with_changes(w=0.0)
        assert v == vector(1.0, 2.0, 3.0)
        assert p.is_point

    def test_tuples_are_hashable(self):
        seen = {point(1, 2, 3): "p", vector(1, 2, 3): "v"}
        assert seen[point(1.0, 2.0, 3.0)] == "p"
        assert seen[vector(1.0, 2.0, 3.0)] == "v"

    def test_components(self):
        assert Tuple(x=1, y=2, z=3, w=4).components() == (1.0, 2.0, 3.0, 4.0)

    def test_string_representation(self):
        assert str(point(1.0, 2.0, 3.0)) == "tuple(1.0, 2.0, 3.0, 1.0)"


class TestComparison:
    def test_exact_equality(self):
        assert point(1.0, 2.0, 3.0) == point(1.0, 2.0, 3.0)
        assert point(1.0, 2.0, 3.0) != vector(1.0, 2.0, 3.0)

    def test_is_close_to(self):
        a = point(1.0, 1.0, 1.0)
        b = point(1.0 + EPSILON / 10, 1.0, 1.0)
        c = point(1.1, 1.0, 1.0)

        assert a.is_close_to(b)  # Using default EPSILON
        assert not a.is_close_to(c)

        # With custom tolerance
        assert a.is_close_to(c, tolerance=0.2)
        assert not a.is_close_to(c, tolerance=0.05)

    def test_is_close_to_compares_w(self):
        assert not point(1.0, 2.0, 3.0).is_close_to(vector(1.0, 2.0, 3.0))

    def test_nan_is_never_close(self):
        t = Tuple(x=math.nan, y=0.0, z=0.0, w=0.0)
        assert not t.is_close_to(t)


class TestArithmetic:
    def test_adding_point_and_vector(self):
        a1 = point(3, -2, 5)
        a2 = vector(-2, 3, 1)
        result = a1 + a2
        assert result == Tuple(x=1, y=1, z=6, w=1)
        assert result.is_point

    def test_adding_two_vectors_gives_vector(self):
        assert (vector(1, 2, 3) + vector(4, 5, 6)).is_vector

    def test_adding_two_points_is_not_rejected(self):
        result = point(1, 1, 1) + point(2, 2, 2)
        assert result.w == 2.0
        assert not result.is_point
        assert not result.is_vector

    def test_subtracting_two_points(self):
        assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)

    def test_subtracting_vector_from_point(self):
        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_subtracting_two_vectors(self):
        assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)

    def test_subtracting_from_zero_vector(self):
        assert vector(0, 0, 0) - vector(1, -2, 3) == vector(-1, 2, -3)

    def test_negation(self):
        a = Tuple(x=1, y=-2, z=3, w=-4)
        assert -a == Tuple(x=-1, y=2, z=-3, w=4)

    def test_negation_matches_subtraction_from_zero(self):
        a = Tuple(x=1, y=-2, z=3, w=-4)
        zero = Tuple(x=0, y=0, z=0, w=0)
        assert (-a).is_close_to(zero - a)

    def test_scalar_multiplication(self):
        a = Tuple(x=1, y=-2, z=3, w=-4)
        assert a * 3.5 == Tuple(x=3.5, y=-7, z=10.5, w=-14)
        assert a * 0.5 == Tuple(x=0.5, y=-1, z=1.5, w=-2)

    def test_scalar_multiplication_is_commutative(self):
        a = Tuple(x=1, y=-2, z=3, w=-4)
        assert 3.5 * a == a * 3.5

    def test_scalar_division(self):
        a = Tuple(x=1, y=-2, z=3, w=-4)
        assert a / 2 == Tuple(x=0.5, y=-1, z=1.5, w=-2)

    def test_division_by_zero_gives_ieee_results(self):
        result = vector(1, -2, 3) / 0
        assert result.x == math.inf
        assert result.y == -math.inf
        assert result.z == math.inf
        assert math.isnan(result.w)

    def test_division_by_negative_zero_flips_infinity_sign(self):
        result = point(1, 0, -1) / -0.0
        assert result.x == -math.inf
        assert math.isnan(result.y)
        assert result.z == math.inf
        assert result.w == -math.inf

    def test_unsupported_operands(self):
        p = point(1, 2, 3)
        with pytest.raises(TypeError):
            p + 1.0
        with pytest.raises(TypeError):
            p - 1.0
        with pytest.raises(TypeError):
            p * p
        with pytest.raises(TypeError):
            p / p
        with pytest.raises(TypeError):
            p * True

    def test_multiplication_past_float_range_gives_infinity(self):
        big = Tuple(x=1e308, y=-1e308, z=1e308, w=0)
        result = big * 10
        assert result.x == math.inf
        assert result.y == -math.inf
        assert result.z == math.inf
        assert result.w == 0.0

    def test_scalar_too_large_for_float(self):
        result = point(1, -1, 0) * 10 ** 400
        assert result.x == math.inf
        assert result.y == -math.inf
        assert math.isnan(result.z)
        assert result.w == math.inf
        assert (point(1, 2, 3) * -(10 ** 400)).x == -math.inf

    def test_division_by_scalar_too_large_for_float(self):
        assert vector(1, -2, 3) / 10 ** 400 == vector(0, 0, 0)

    @pytest.mark.parametrize("a", SAMPLE_TUPLES)
    @pytest.mark.parametrize("b", SAMPLE_TUPLES)
    def test_add_then_subtract_restores(self, a, b):
        assert (a + b - b).is_close_to(a)

    @pytest.mark.parametrize("a", SAMPLE_TUPLES)
    def test_double_negation(self, a):
        assert -(-a) == a


class TestMagnitude:
    @pytest.mark.parametrize("v", [vector(1, 0, 0), vector(0, 1, 0), vector(0, 0, 1)])
    def test_unit_vectors(self, v):
        assert magnitude(v) == 1.0

    def test_magnitude_of_vector(self):
        assert vector(1, 2, 3).magnitude() == pytest.approx(math.sqrt(14))
        assert magnitude(vector(-1, -2, -3)) == pytest.approx(math.sqrt(14))

    def test_magnitude_includes_w(self):
        assert magnitude(point(0, 0, 0)) == 1.0

    @pytest.mark.parametrize("scale", [1e200, 1e-200])
    def test_extreme_scales(self, scale):
        assert magnitude(vector(scale, 0, 0)) == pytest.approx(scale)
        assert magnitude(vector(-scale, 0, 0)) == pytest.approx(scale)

    def test_squares_beyond_float_range(self):
        big = Tuple(x=1e308, y=1e308, z=0, w=0)
        assert magnitude(big) == pytest.approx(math.sqrt(2) * 1e308)


class TestNormalize:
    def test_normalize_axis_vector(self):
        assert normalize(vector(4, 0, 0)) == vector(1, 0, 0)

    def test_normalize_vector(self):
        root = math.sqrt(14)
        expected = vector(1 / root, 2 / root, 3 / root)
        assert normalize(vector(1, 2, 3)).is_close_to(expected)
        assert normalize(vector(1, 2, 3)).is_close_to(vector(0.26726, 0.53452, 0.80178))

    @pytest.mark.parametrize("v", SAMPLE_VECTORS)
    def test_normalized_magnitude_is_one(self, v):
        assert magnitude(normalize(v)) == pytest.approx(1.0)

    def test_normalize_keeps_vector_kind(self):
        assert normalize(vector(1, 2, 3)).is_vector

    def test_normalize_zero_vector_gives_nan(self):
        result = normalize(vector(0, 0, 0))
        assert all(math.isnan(value) for value in result.components())

    def test_strict_normalize_zero_vector_raises(self):
        with pytest.raises(ZeroMagnitudeError):
            normalize(vector(0, 0, 0), strict=True)

    def test_strict_normalize_error_is_value_error(self):
        with pytest.raises(ValueError):
            vector(0, 0, 0).normalize(strict=True)

    def test_strict_normalize_non_degenerate(self):
        assert vector(4, 0, 0).normalize(strict=True) == vector(1, 0, 0)

    @pytest.mark.parametrize("scale", [1e200, 1e-200])
    def test_normalize_extreme_scales(self, scale):
        assert normalize(vector(scale, 0, 0)).is_close_to(vector(1, 0, 0))
        assert normalize(vector(0, -scale, 0)).is_close_to(vector(0, -1, 0))

    def test_normalize_huge_fields(self):
        half = math.sqrt(0.5)
        result = normalize(Tuple(x=1e308, y=1e308, z=0, w=0))
        assert result.is_close_to(Tuple(x=half, y=half, z=0, w=0))


class TestProducts:
    def test_dot_product(self):
        assert dot(vector(1, 2, 3), vector(2, 3, 4)) == 20.0

    def test_dot_of_orthogonal_vectors(self):
        assert dot(vector(1, 0, 0), vector(0, 1, 0)) == 0.0

    def test_dot_past_float_range(self):
        big = Tuple(x=1e308, y=1e308, z=1e308, w=1e308)
        assert dot(big, big) == math.inf
        assert dot(big, -big) == -math.inf

    def test_dot_includes_w(self):
        a = Tuple(x=0, y=0, z=0, w=2)
        b = Tuple(x=0, y=0, z=0, w=3)
        assert a.dot(b) == 6.0

    def test_cross_product(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert cross(a, b) == vector(-1, 2, -1)
        assert cross(b, a) == vector(1, -2, 1)

    def test_cross_of_axes(self):
        assert vector(1, 0, 0).cross(vector(0, 1, 0)) == vector(0, 0, 1)

    def test_cross_always_returns_vector(self):
        assert cross(point(1, 2, 3), point(2, 3, 4)).is_vector

    @pytest.mark.parametrize("a", SAMPLE_VECTORS)
    @pytest.mark.parametrize("b", SAMPLE_VECTORS)
    def test_cross_is_anticommutative(self, a, b):
        assert cross(a, b).is_close_to(-cross(b, a))

    @pytest.mark.parametrize("a", SAMPLE_VECTORS)
    @pytest.mark.parametrize("b", SAMPLE_VECTORS)
    def test_cross_is_perpendicular(self, a, b):
        c = cross(a, b)
        assert dot(c, a) == pytest.approx(0.0, abs=1e-6)
        assert dot(c, b) == pytest.approx(0.0, abs=1e-6)
