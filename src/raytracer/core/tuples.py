"""
Homogeneous 4-component tuple (points and free vectors).

Data model (invariants):
- `x, y, z, w` are Python floats; instances are frozen and every operation
  returns a new `Tuple`.
- `w == 1.0` marks a point (a position), `w == 0.0` marks a vector (a direction).
  The factories only ever produce these two values, but other `w` values are
  representable (e.g. the result of `point - point + point` arithmetic chains
  or a matrix product).
- `is_point()` tests `w > 0` and `is_vector()` tests `w == 0`, so a tuple with a
  negative `w` is neither.
- `==` compares all four components with the shared absolute tolerance
  (`raytracer.common.tolerance.EPSILON`); tuples are therefore unhashable.

API:
- Named methods `add/subtract/negate/multiply_by_scalar/divide_by_scalar/
  magnitude/normalize/dot/cross`, all pure.
- Operator sugar (`+`, `-`, unary `-`, `* float`, `/ float`) delegates to them.

Example:
    p = point(1, 2, 3)
    v = vector(0, 0, 1)
    p + v            # Tuple(x=1.0, y=2.0, z=4.0, w=1.0)
    v.cross(vector(1, 0, 0))
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.common.tolerance import all_approx_equal
from raytracer.common.types import Vec4

POINT_W = 1.0
VECTOR_W = 0.0


@dataclass(frozen=True, slots=True, eq=False)
class Tuple:
    """Immutable (x, y, z, w) value."""

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        # Normalize ints/numpy scalars to plain floats.
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))
        object.__setattr__(self, "w", float(self.w))

    # ── factories ───────────────────
    @classmethod
    def create(cls, x: float, y: float, z: float, w: float) -> "Tuple":
        return cls(x, y, z, w)

    @classmethod
    def point(cls, x: float, y: float, z: float) -> "Tuple":
        """Position in space (`w = 1`)."""
        return cls(x, y, z, POINT_W)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> "Tuple":
        """Direction without position (`w = 0`)."""
        return cls(x, y, z, VECTOR_W)

    # ── role predicates ─────────────
    def is_point(self) -> bool:
        return self.w > 0.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    # ── arithmetic (pure) ───────────
    def add(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def subtract(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def negate(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def multiply_by_scalar(self, factor: float) -> "Tuple":
        f = float(factor)
        return Tuple(self.x * f, self.y * f, self.z * f, self.w * f)

    def divide_by_scalar(self, divisor: float) -> "Tuple":
        """Component-wise division.

        Raises
        ------
        ZeroDivisionError
            When `divisor` is zero (Python float division semantics).
        """
        d = float(divisor)
        return Tuple(self.x / d, self.y / d, self.z / d, self.w / d)

    # ── geometry ────────────────────
    def magnitude(self) -> float:
        """Euclidean length over all four components (`w` included)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> "Tuple":
        """Return the tuple scaled to magnitude 1.

        Raises
        ------
        ZeroDivisionError
            When the magnitude is exactly zero. A zero vector has no direction,
            and dividing would only yield NaN components.
        """
        length = self.magnitude()
        if length == 0.0:
            raise ZeroDivisionError(f"cannot normalize a zero-magnitude tuple: {self!r}")
        return self.divide_by_scalar(length)

    def dot(self, other: "Tuple") -> float:
        """Sum of element-wise products, `w` included."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        """3D cross product; `w` of both operands is ignored and the result is a vector."""
        return Tuple.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def as_tuple(self) -> Vec4:
        return (self.x, self.y, self.z, self.w)

    # ── equality / sugar ────────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return all_approx_equal(self.as_tuple(), other.as_tuple())

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Tuple":
        return self.negate()

    def __mul__(self, factor: float) -> "Tuple":
        if isinstance(factor, Tuple):
            return NotImplemented
        return self.multiply_by_scalar(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Tuple":
        if isinstance(divisor, Tuple):
            return NotImplemented
        return self.divide_by_scalar(divisor)


def create(x: float, y: float, z: float, w: float) -> Tuple:
    return Tuple(x, y, z, w)


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple.point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple.vector(x, y, z)


__all__ = ["Tuple", "create", "point", "vector", "POINT_W", "VECTOR_W"]
