"""Simple descriptive statistics and correlation measures."""

from __future__ import annotations

import math
from typing import Sequence

from vinacore.common import EPSILON_FL


def _check_same_length(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def deviation(values: Sequence[float]) -> float:
    """Population standard deviation; 0 for an empty sequence."""
    if not values:
        return 0.0
    m = mean(values)
    return math.sqrt(sum((v - m) ** 2 for v in values) / len(values))


def rmsd(a: Sequence[float], b: Sequence[float]) -> float:
    _check_same_length(a, b)
    if not a:
        return 0.0
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)) / len(a))


def average_difference(b: Sequence[float], a: Sequence[float]) -> float:
    """Mean of b - a."""
    _check_same_length(a, b)
    if not a:
        return 0.0
    return sum(y - x for x, y in zip(a, b)) / len(a)


def _sqrt_or_nan(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation; 0 when empty or when either input is constant."""
    _check_same_length(x, y)
    n = len(x)
    if n == 0:
        return 0.0
    sum_x = sum(x)
    sum_y = sum(y)
    sum_x_sq = sum(v * v for v in x)
    sum_y_sq = sum(v * v for v in y)
    sum_prod = sum(a * b for a, b in zip(x, y))
    sd_x = _sqrt_or_nan(sum_x_sq / n - (sum_x / n) ** 2)
    sd_y = _sqrt_or_nan(sum_y_sq / n - (sum_y / n) ** 2)
    cov = sum_prod / n - (sum_x / n) * (sum_y / n)
    product = sd_x * sd_y
    if abs(product) < EPSILON_FL:
        return 0.0
    return cov / product


def get_rankings(x: Sequence[float]) -> list[float]:
    """Zero-based rank of each element in ascending order."""
    ranks = [0.0] * len(x)
    for rank, index in enumerate(sorted(range(len(x)), key=lambda i: x[i])):
        ranks[index] = float(rank)
    return ranks


def spearman(x: Sequence[float], y: Sequence[float]) -> float:
    return pearson(get_rankings(x), get_rankings(y))