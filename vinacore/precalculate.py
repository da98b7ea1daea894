"""Tabulated pair energies and their radial derivatives."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence

from vinacore.atom import Typing, num_atom_types
from vinacore.atom_constants import xs_hal_any_bond_possible, xs_sul_bond_possible
from vinacore.common import EPSILON_FL, MAX_FL, InternalError
from vinacore.matrix import TriangularMatrix

NUM_ANGLES = 1802
_ANGLE_SPAN = 180.1


class ScoringFunction(ABC):
    """A pairwise scoring term depending on atom types, distance and angle."""

    @abstractmethod
    def atom_typing_used(self) -> Typing:
        """The typing scheme whose type indices eval() receives."""

    @abstractmethod
    def cutoff(self) -> float:
        """Distance beyond which the function is zero."""

    @abstractmethod
    def eval(self, t1: int, t2: int, r: float, theta: float) -> float:
        """Energy of a type pair at distance r and angle theta (degrees)."""


def _angle_index(theta: float, count: int) -> int:
    theta_rounded = math.floor(theta * 10 + 0.5) / 10
    return int(theta_rounded * (count - 1) / _ANGLE_SPAN)


def _calculate_thetas(num_angles: int) -> list[float]:
    return [i * _ANGLE_SPAN / (num_angles - 1) for i in range(num_angles)]


class PrecalculateElement:
    """Tables for one type pair, indexed by factor * r^2 and by angle.

    ``smooth[i][j]`` holds ``(energy, derivative / r)``; ``fast[i][j]`` holds
    the mean of neighbouring energies for quick lookups.
    """

    def __init__(self, n: int, factor: float):
        self.fast: list[list[float]] = [[] for _ in range(n)]
        self.smooth: list[list[tuple[float, float]]] = [[] for _ in range(n)]
        self.factor = factor

    def eval_fast(self, r2: float, theta: float) -> float:
        i = int(self.factor * r2)
        count = len(self.fast[0])
        j = _angle_index(theta, count) if count > 1 else 0
        return self.fast[i][j]

    def eval_deriv(self, r2: float, theta: float) -> tuple[float, float]:
        """Linearly interpolated (energy, derivative / r) at squared distance r2."""
        r2_factored = self.factor * r2
        i1 = int(r2_factored)
        i2 = min(i1 + 1, len(self.smooth) - 1)
        rem = r2_factored - i1
        count = len(self.smooth[0])
        j = _angle_index(theta, count) if count > 1 else 0
        e1, d1 = self.smooth[i1][j]
        e2, d2 = self.smooth[i2][j]
        return e1 + rem * (e2 - e1), d1 + rem * (d2 - d1)

    def _first_at(self, i: int, j: int) -> float:
        row = self.smooth[i]
        return row[j][0] if len(row) > 1 else row[0][0]

    def init_from_smooth_fst(self, rs: Sequence[float]) -> None:
        """Fill in derivatives and the fast table from the smooth energies."""
        n = len(self.smooth)
        if len(rs) != n or len(self.fast) != n:
            raise InternalError("table sizes do not match the radii")
        for i in range(n):
            new_smooth = []
            new_fast = []
            for j, (energy, _) in enumerate(self.smooth[i]):
                if i == 0 or i == n - 1:
                    dor = 0.0
                else:
                    delta = rs[i + 1] - rs[i - 1]
                    before = self._first_at(i - 1, j)
                    after = self._first_at(i + 1, j)
                    dor = (after - before) / (delta * rs[i])
                new_smooth.append((energy, dor))
                following = 0.0 if i + 1 >= n else self._first_at(i + 1, j)
                new_fast.append((following + energy) / 2)
            self.smooth[i] = new_smooth
            self.fast[i][: len(new_fast)] = new_fast

    def min_smooth_fst(self) -> int:
        """Row whose last energy is smallest; the highest such row on ties."""
        best = 0
        size = len(self.smooth)
        for i_inv in range(size):
            i = size - i_inv - 1
            if i_inv == 0 or self.smooth[i][-1][0] < self.smooth[best][-1][0]:
                best = i
        return best

    def widen_smooth_fst(
        self, rs: Sequence[float], thetas: Sequence[float], left: float, right: float
    ) -> None:
        """Flatten the energy well by widening it left and right of its minimum."""
        min_index = self.min_smooth_fst()
        if min_index >= len(rs):
            raise InternalError("no radii to widen over")
        if len(rs) != len(self.smooth):
            raise InternalError("table sizes do not match the radii")
        optimal_r = rs[min_index]
        new_firsts = []
        for i, row in enumerate(self.smooth):
            r = rs[i]
            if r < optimal_r - left:
                r += left
            elif r > optimal_r + right:
                r -= right
            else:
                r = optimal_r
            r = min(max(r, 0.0), rs[-1])
            new_firsts.append([self.eval_deriv(r * r, thetas[j])[0] for j in range(len(row))])
        self.smooth = [
            [(first, dor) for first, (_, dor) in zip(firsts, row)]
            for firsts, row in zip(new_firsts, self.smooth)
        ]

    def widen(
        self, rs: Sequence[float], thetas: Sequence[float], left: float, right: float
    ) -> None:
        self.widen_smooth_fst(rs, thetas, left, right)
        self.init_from_smooth_fst(rs)


class Precalculate:
    """Lookup tables of a scoring function for every pair of atom types."""

    def __init__(self, sf: ScoringFunction, v: float = MAX_FL, factor: float = 32.0):
        self._cutoff_sqr = sf.cutoff() ** 2
        self.n = int(factor * self._cutoff_sqr) + 3
        self.factor = factor
        self._typing = sf.atom_typing_used()

        if not factor > EPSILON_FL:
            raise InternalError("factor must be positive")
        if not int(self._cutoff_sqr * factor) + 1 < self.n:
            raise InternalError("table too small for the cutoff")
        if not self._cutoff_sqr * factor + 1 < self.n:
            raise InternalError("table too small for the cutoff")

        rs = self._calculate_rs()
        thetas = _calculate_thetas(NUM_ANGLES)
        size = num_atom_types(self._typing)
        self._data = TriangularMatrix(size, None)
        for t1 in range(size):
            for t2 in range(t1, size):
                element = PrecalculateElement(self.n, factor)
                angular = xs_hal_any_bond_possible(t1, t2) or xs_sul_bond_possible(t1, t2)
                for i, r in enumerate(rs):
                    if angular:
                        values = [min(v, sf.eval(t1, t2, r, theta)) for theta in thetas]
                    else:
                        values = [min(v, sf.eval(t1, t2, r, 0.0))]
                    element.smooth[i] = [(value, 0.0) for value in values]
                    element.fast[i] = [0.0] * len(values)
                element.init_from_smooth_fst(rs)
                self._data[t1, t2] = element

    @property
    def atom_typing_used(self) -> Typing:
        return self._typing

    @property
    def cutoff_sqr(self) -> float:
        return self._cutoff_sqr

    def eval_fast(self, type_pair_index: int, r2: float, theta: float) -> float:
        return self._data[type_pair_index].eval_fast(r2, theta)

    def eval_deriv(self, type_pair_index: int, r2: float, theta: float) -> tuple[float, float]:
        return self._data[type_pair_index].eval_deriv(r2, theta)

    def index_permissive(self, t1: int, t2: int) -> int:
        return self._data.index_permissive(t1, t2)

    def widen(self, left: float, right: float) -> None:
        rs = self._calculate_rs()
        thetas = _calculate_thetas(NUM_ANGLES)
        size = self._data.dim
        for t1 in range(size):
            for t2 in range(t1, size):
                self._data[t1, t2].widen(rs, thetas, left, right)

    def _calculate_rs(self) -> list[float]:
        return [math.sqrt(i / self.factor) for i in range(self.n)]