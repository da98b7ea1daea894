"""One-dimensional grid extents and helpers over triples of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from vinacore.common import Vec, eq


@dataclass
class GridDim:
    """A grid axis from begin to end divided into n intervals."""

    begin: float = 0.0
    end: float = 0.0
    n: int = 0

    def span(self) -> float:
        return self.end - self.begin

    def enabled(self) -> bool:
        return self.n > 0


def _grid_dim_eq(a: GridDim, b: GridDim) -> bool:
    return a.n == b.n and eq(a.begin, b.begin) and eq(a.end, b.end)


def grid_dims_eq(a: Sequence[GridDim], b: Sequence[GridDim]) -> bool:
    """Compare grid dimension triples, with tolerance on the bounds."""
    return len(a) == len(b) and all(_grid_dim_eq(x, y) for x, y in zip(a, b))


def grid_dims_begin(dims: Sequence[GridDim]) -> Vec:
    return Vec(*(d.begin for d in dims))


def grid_dims_end(dims: Sequence[GridDim]) -> Vec:
    return Vec(*(d.end for d in dims))


def format_grid_dims(dims: Sequence[GridDim]) -> str:
    """One line per axis: 'n [begin .. end]'."""
    return "".join(f"{d.n} [{d.begin:g} .. {d.end:g}]\n" for d in dims)