"""Exponentially weighted estimate of a value and its spread."""

from __future__ import annotations


class RecentHistory:
    """Tracks a running estimate of x and of its squared error."""

    def __init__(self, initial_x_estimate: float, initial_error_estimate: float, lifetime: float):
        self._x_estimate = initial_x_estimate
        self._error_estimate_sqr = initial_error_estimate**2
        self._weight = 1 / max(1.5, lifetime)

    @property
    def x_estimate(self) -> float:
        return self._x_estimate

    @property
    def error_estimate_sqr(self) -> float:
        return self._error_estimate_sqr

    def add(self, x: float) -> None:
        w = self._weight
        this_error_sqr = (x - self._x_estimate) ** 2
        self._error_estimate_sqr = w * this_error_sqr + (1 - w) * self._error_estimate_sqr
        self._x_estimate = w * x + (1 - w) * self._x_estimate

    def possibly_smaller_than(self, x: float) -> bool:
        """Whether the tracked value may be below x, within two standard errors."""
        if self._x_estimate < x:
            return True
        return (x - self._x_estimate) ** 2 < 4 * self._error_estimate_sqr