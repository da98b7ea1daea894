"""Basic numeric types and helpers shared by the docking core."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

PI = 3.1415926535897931
FL_TOLERANCE = 0.001
MAX_FL = sys.float_info.max
EPSILON_FL = sys.float_info.epsilon
MAX_SZ = 2**64 - 1
MAX_UNSIGNED = 2**32 - 1

# Multiply pK by this to get free energy in kcal/mol:
# E = RT ln(K) = -RT * ln(10) * pK, with RT in kcal/mol at 300 K.
PK_TO_ENERGY_FACTOR = -8.31 * 0.001 * 300 / 4.184 * math.log(10.0)


class InternalError(Exception):
    """An internal consistency check failed."""


def sqr(x):
    """Return x squared."""
    return x * x


@dataclass(frozen=True, slots=True)
class Vec:
    """An immutable 3D vector."""

    x: float
    y: float
    z: float

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        raise IndexError(f"vector index {i} out of range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def norm_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return math.sqrt(self.norm_sqr())

    def dot(self, other: "Vec") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: Union["Vec", float]) -> "Vec":
        if isinstance(other, Vec):
            return Vec(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Vec(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Union["Vec", float]) -> "Vec":
        if isinstance(other, Vec):
            return Vec(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (int, float)):
            return Vec(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __neg__(self) -> "Vec":
        return Vec(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        """Scale by a number, or take the dot product with another vector."""
        if isinstance(other, Vec):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vec(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vec(self.x * other, self.y * other, self.z * other)
        return NotImplemented


ZERO_VEC = Vec(0.0, 0.0, 0.0)
MAX_VEC = Vec(MAX_FL, MAX_FL, MAX_FL)


class Mat:
    """An immutable 3x3 matrix stored in column-major order."""

    __slots__ = ("_data",)

    def __init__(self, xx, xy, xz, yx, yy, yz, zx, zy, zz):
        self._data = (xx, yx, zx, xy, yy, zy, xz, yz, zz)

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        if not (0 <= i < 3 and 0 <= j < 3):
            raise IndexError(f"matrix index {key} out of range")
        return self._data[i + 3 * j]

    def rows(self) -> list[tuple[float, float, float]]:
        return [tuple(self[i, j] for j in range(3)) for i in range(3)]

    def __matmul__(self, v: Vec) -> Vec:
        d = self._data
        return Vec(
            d[0] * v[0] + d[3] * v[1] + d[6] * v[2],
            d[1] * v[0] + d[4] * v[1] + d[7] * v[2],
            d[2] * v[0] + d[5] * v[1] + d[8] * v[2],
        )

    def __mul__(self, other):
        if isinstance(other, Vec):
            return self @ other
        if isinstance(other, (int, float)):
            return self.scaled(other)
        return NotImplemented

    def scaled(self, s: float) -> "Mat":
        """Return this matrix with every element multiplied by s."""
        return Mat(*(value * s for row in self.rows() for value in row))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Mat({', '.join(repr(value) for row in self.rows() for value in row)})"


def cross_product(a: Vec, b: Vec) -> Vec:
    return Vec(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def elementwise_product(a: Vec, b: Vec) -> Vec:
    return Vec(a[0] * b[0], a[1] * b[1], a[2] * b[2])


def fl_to_sz(x: float, max_value: int) -> int:
    """Convert x to an integer clamped to [0, max_value]."""
    if x <= 0:
        return 0
    if x >= max_value:
        return max_value
    return min(int(x), max_value)


def eq(a, b) -> bool:
    """Compare numbers, vectors or sequences within FL_TOLERANCE."""
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return abs(a - b) < FL_TOLERANCE
    a_items = list(a)
    b_items = list(b)
    if len(a_items) != len(b_items):
        return False
    return all(eq(x, y) for x, y in zip(a_items, b_items))


def not_max(x: float) -> bool:
    return x < 0.1 * MAX_FL


def vec_distance_sqr(a: Vec, b: Vec) -> float:
    return sqr(a[0] - b[0]) + sqr(a[1] - b[1]) + sqr(a[2] - b[2])


def dot_product(a: Vec, b: Vec) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def length(a: Vec) -> float:
    return math.sqrt(dot_product(a, a))


def angle(a: Vec, b: Vec) -> float:
    """Angle between two vectors in degrees; NaN where undefined."""
    denominator = length(a) * length(b)
    if denominator == 0:
        return math.nan
    cosine = dot_product(a, b) / denominator
    if not -1.0 <= cosine <= 1.0:
        return math.nan
    return math.acos(cosine) * 180.0 / PI


def find_min(values: Sequence) -> int:
    """Index of the first smallest element, or len(values) when empty."""
    best = len(values)
    for i, value in enumerate(values):
        if i == 0 or value < values[best]:
            best = i
    return best


def normalized_angle(x: float) -> float:
    """Return x shifted by multiples of 2*pi into [-pi, pi]."""
    if x > 3 * PI:
        n = (x - PI) / (2 * PI)
        return normalized_angle(x - 2 * PI * math.ceil(n))
    if x < -3 * PI:
        n = (-x - PI) / (2 * PI)
        return normalized_angle(x + 2 * PI * math.ceil(n))
    if x > PI:
        return x - 2 * PI
    if x < -PI:
        return x + 2 * PI
    return x


def pk_to_energy(pk: float) -> float:
    return PK_TO_ENERGY_FACTOR * pk


def starts_with(text: str, start: str) -> bool:
    return text.startswith(start)