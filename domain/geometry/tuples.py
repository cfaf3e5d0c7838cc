# domain/geometry/tuples.py
from numbers import Real
from typing import Optional
import math
from pydantic import Field
from domain.geometry.constants import EPSILON, POINT_W, VECTOR_W
from utils.base_model import ImmutableModel


class ZeroMagnitudeError(ValueError):
    """Raised by a strict normalize() of a tuple whose magnitude is zero."""


def _is_scalar(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _as_float(scalar) -> float:
    """Convert a real scalar to float, rounding values beyond the float range to +-inf."""
    try:
        return float(scalar)
    except OverflowError:
        return math.inf if scalar > 0 else -math.inf


def _divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE-754 results for a zero divisor instead of ZeroDivisionError."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    # The sign of a zero divisor (0.0 or -0.0) decides the sign of the infinity
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Tuple(ImmutableModel):
    """
    A homogeneous coordinate (x, y, z, w) in 3D space.

    By convention w == 1.0 marks a point (a location) and w == 0.0 marks a
    vector (a direction or displacement). Any other w is still a valid tuple,
    e.g. the sum of two points, and every operation is defined for it; keeping
    results geometrically meaningful is up to the caller.

    Degenerate divisions do not raise: dividing by zero or normalizing a
    zero-length tuple yields inf/NaN fields that flow into later computation.
    """
    x: float = Field(description="X component")
    y: float = Field(description="Y component")
    z: float = Field(description="Z component")
    w: float = Field(description="W component, 1.0 for points and 0.0 for vectors")

    @property
    def is_point(self) -> bool:
        """True when w is exactly 1.0."""
        return self.w == POINT_W

    @property
    def is_vector(self) -> bool:
        """True when w is exactly 0.0."""
        return self.w == VECTOR_W

    def components(self) -> tuple:
        """Return the fields as a plain (x, y, z, w) tuple."""
        return (self.x, self.y, self.z, self.w)

    def is_close_to(self, other: "Tuple", tolerance: Optional[float] = None) -> bool:
        """
        Check whether every field of this tuple is within tolerance of other's.

        Args:
            other: The tuple to compare with
            tolerance: Maximum per-field difference. If None, uses EPSILON.

        Returns:
            True if all four fields differ by less than the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        return all(
            abs(a - b) < tolerance
            for a, b in zip(self.components(), other.components())
        )

    def magnitude(self) -> float:
        """Euclidean length over all four fields, without intermediate overflow or underflow."""
        return math.hypot(self.x, self.y, self.z, self.w)

    def normalize(self, strict: bool = False) -> "Tuple":
        """
        Scale the tuple to unit magnitude.

        A zero-length tuple normalizes to all-NaN fields unless strict is set,
        in which case ZeroMagnitudeError is raised instead.
        """
        mag = self.magnitude()
        if strict and mag == 0.0:
            raise ZeroMagnitudeError(f"Cannot normalize zero-magnitude tuple {self}")
        return Tuple(
            x=_divide(self.x, mag),
            y=_divide(self.y, mag),
            z=_divide(self.z, mag),
            w=_divide(self.w, mag),
        )

    def dot(self, other: "Tuple") -> float:
        """Dot product over all four fields."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        """3D cross product of the x, y, z parts. The result is always a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z, w=self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z, w=self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(x=-self.x, y=-self.y, z=-self.z, w=-self.w)

    def __mul__(self, scalar: float) -> "Tuple":
        if not _is_scalar(scalar):
            return NotImplemented
        scalar = _as_float(scalar)
        return Tuple(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar, w=self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Tuple":
        if not _is_scalar(scalar):
            return NotImplemented
        scalar = _as_float(scalar)
        return Tuple(
            x=_divide(self.x, scalar),
            y=_divide(self.y, scalar),
            z=_divide(self.z, scalar),
            w=_divide(self.w, scalar),
        )

    def __str__(self) -> str:
        return f"tuple({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1.0)."""
    return Tuple(x=x, y=y, z=z, w=POINT_W)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0.0)."""
    return Tuple(x=x, y=y, z=z, w=VECTOR_W)


def magnitude(t: Tuple) -> float:
    """Euclidean length of t."""
    return t.magnitude()


def normalize(t: Tuple, strict: bool = False) -> Tuple:
    """Unit-length copy of t. See Tuple.normalize."""
    return t.normalize(strict=strict)


def dot(a: Tuple, b: Tuple) -> float:
    """Dot product of a and b over all four fields."""
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    """Cross product of the 3D parts of a and b, as a vector."""
    return a.cross(b)
