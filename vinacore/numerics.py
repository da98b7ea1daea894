"""Small numeric helpers: integer powers, box clamping and energy capping."""

from __future__ import annotations

from typing import TypeVar, Union

from vinacore.common import EPSILON_FL, Vec, not_max, vec_distance_sqr

Deriv = TypeVar("Deriv", float, Vec)


def int_pow(x: float, n: int) -> float:
    """Return x to the non-negative integer power n by repeated multiplication."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = 1.0
    for _ in range(n):
        result *= x
    return result


def closest_between(begin: float, end: float, x: float) -> float:
    """Clamp x to [begin, end]."""
    if begin > end:
        raise ValueError("begin must not exceed end")
    if x <= begin:
        return begin
    if x >= end:
        return end
    return x


def brick_closest(begin: Vec, end: Vec, v: Vec) -> Vec:
    """The point of the box [begin, end] closest to v."""
    return Vec(*(closest_between(b, e, x) for b, e, x in zip(begin, end, v)))


def brick_distance_sqr(begin: Vec, end: Vec, v: Vec) -> float:
    return vec_distance_sqr(brick_closest(begin, end, v), v)


def _curl_factor(e: float, v: float) -> Union[float, None]:
    if e > 0 and not_max(v):
        return 0.0 if v < EPSILON_FL else v / (v + e)
    return None


def curl(e: float, v: float) -> float:
    """Smoothly cap a positive energy e by v."""
    factor = _curl_factor(e, v)
    return e if factor is None else e * factor


def curl_with_deriv(e: float, deriv: Deriv, v: float) -> tuple[float, Deriv]:
    """Cap e by v and scale its derivative accordingly; returns (e, deriv)."""
    factor = _curl_factor(e, v)
    if factor is None:
        return e, deriv
    return e * factor, deriv * (factor * factor)