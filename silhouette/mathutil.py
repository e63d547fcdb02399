"""Scalar, vector, rectangle and transform helpers used throughout the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]

FLOAT_EPSILON = 0.001
PI = math.pi
TWO_PI = 2.0 * PI

_DEG_TO_RAD = 0.01745329252


@dataclass(frozen=True)
class Vec2:
    """A two-component vector with integer or float components."""

    x: Number = 0
    y: Number = 0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: Number) -> Vec2:
        if isinstance(scalar, Vec2) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: Number = 0
    top: Number = 0
    width: Number = 0
    height: Number = 0

    @classmethod
    def from_vectors(cls, position: Vec2, size: Vec2) -> Rect:
        return cls(position.x, position.y, size.x, size.y)

    @property
    def position(self) -> Vec2:
        return Vec2(self.left, self.top)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def right(self) -> Number:
        return self.left + self.width

    @property
    def bottom(self) -> Number:
        return self.top + self.height

    def offset(self, dx: Number, dy: Number) -> Rect:
        """Return a copy moved by (dx, dy)."""
        return Rect(self.left + dx, self.top + dy, self.width, self.height)

    def _span(self) -> tuple[Number, Number, Number, Number]:
        min_x = min(self.left, self.left + self.width)
        max_x = max(self.left, self.left + self.width)
        min_y = min(self.top, self.top + self.height)
        max_y = max(self.top, self.top + self.height)
        return min_x, max_x, min_y, max_y

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap by a non-empty area."""
        a_min_x, a_max_x, a_min_y, a_max_y = self._span()
        b_min_x, b_max_x, b_min_y, b_max_y = other._span()
        inter_left = max(a_min_x, b_min_x)
        inter_top = max(a_min_y, b_min_y)
        inter_right = min(a_max_x, b_max_x)
        inter_bottom = min(a_max_y, b_max_y)
        return inter_left < inter_right and inter_top < inter_bottom

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside; right and bottom edges are excluded."""
        min_x, max_x, min_y, max_y = self._span()
        return min_x <= point.x < max_x and min_y <= point.y < max_y


@dataclass(frozen=True)
class Transform:
    """A 2D affine transform: x' = a*x + b*y + c, y' = d*x + e*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    def combine(self, other: Transform) -> Transform:
        """Return self * other; other is applied to points first."""
        return Transform(
            self.a * other.a + self.b * other.d,
            self.a * other.b + self.b * other.e,
            self.a * other.c + self.b * other.f + self.c,
            self.d * other.a + self.e * other.d,
            self.d * other.b + self.e * other.e,
            self.d * other.c + self.e * other.f + self.f,
        )

    def translated(self, offset: Vec2) -> Transform:
        return self.combine(Transform(1.0, 0.0, offset.x, 0.0, 1.0, offset.y))

    def rotated(self, degrees: float) -> Transform:
        rad = degrees * PI / 180.0
        cos = math.cos(rad)
        sin = math.sin(rad)
        return self.combine(Transform(cos, -sin, 0.0, sin, cos, 0.0))

    def scaled(self, sx: float, sy: float) -> Transform:
        return self.combine(Transform(sx, 0.0, 0.0, 0.0, sy, 0.0))

    def apply(self, point: Vec2) -> Vec2:
        return Vec2(
            self.a * point.x + self.b * point.y + self.c,
            self.d * point.x + self.e * point.y + self.f,
        )

    @property
    def gl_matrix(self) -> tuple[float, ...]:
        """The transform as a column-major 4x4 matrix."""
        return (
            self.a, self.d, 0.0, 0.0,
            self.b, self.e, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            self.c, self.f, 0.0, 1.0,
        )


def sign(x: Number) -> Number:
    """Sign of x; integers exactly, floats with an epsilon dead zone."""
    if isinstance(x, int):
        return 1 if x > 0 else 0 if x == 0 else -1
    return 1.0 if x > FLOAT_EPSILON else -1.0 if x < -FLOAT_EPSILON else 0.0


def float_sign(x: Number) -> float:
    """Exact sign of an integer, as a float."""
    if x == 0:
        return 0.0
    return math.copysign(1.0, x)


def int_sign(x: float) -> int:
    """Sign of a float with an epsilon dead zone, as an integer."""
    if abs(x) <= FLOAT_EPSILON:
        return 0
    return int(math.copysign(1, x))


def float_is_zero(x: float) -> bool:
    return abs(x) < FLOAT_EPSILON


def float_nearly_zero(x: float, tolerance: float) -> bool:
    return abs(x) < tolerance


def float_equals(a: float, b: float) -> bool:
    return abs(a - b) < FLOAT_EPSILON


def float_nearly_equals(a: float, b: float, tolerance: float) -> bool:
    return abs(a - b) < tolerance


def float_less(a: float, b: float) -> bool:
    return a < b - FLOAT_EPSILON


def float_greater(a: float, b: float) -> bool:
    return a > b + FLOAT_EPSILON


def float_less_or_equal(a: float, b: float) -> bool:
    return a < b + FLOAT_EPSILON


def float_greater_or_equal(a: float, b: float) -> bool:
    return a > b - FLOAT_EPSILON


def clamp(value, low, high):
    if value < low:
        return low
    if value < high:
        return value
    return high


def length_squared(v: Vec2) -> float:
    return v.x * v.x + v.y * v.y


def length(v: Vec2) -> float:
    return math.sqrt(length_squared(v))


def distance_squared(p1: Vec2, p2: Vec2) -> float:
    return length_squared(p2 - p1)


def distance(p1: Vec2, p2: Vec2) -> float:
    return length(p2 - p1)


def deg_to_rad(degrees: float) -> float:
    return _DEG_TO_RAD * degrees


def sin_deg(degrees: float) -> float:
    return math.sin(deg_to_rad(degrees))


def cos_deg(degrees: float) -> float:
    return math.cos(deg_to_rad(degrees))


def rotation_to_unit_vector(rotation: float) -> Vec2:
    """Unit vector for a clockwise rotation in degrees, where 0 points up."""
    return Vec2(sin_deg(rotation), -cos_deg(rotation))


def to_float_vec(v: Vec2) -> Vec2:
    return Vec2(float(v.x), float(v.y))


def _lround(x: float) -> int:
    magnitude = math.floor(abs(x) + 0.5)
    return int(-magnitude if x < 0 else magnitude)


def round_to_int_vec(v: Vec2) -> Vec2:
    """Round each component to the nearest integer, halves away from zero."""
    return Vec2(_lround(v.x), _lround(v.y))


def truncate_to_int_vec(v: Vec2) -> Vec2:
    """Truncate each component towards zero."""
    return Vec2(int(v.x), int(v.y))