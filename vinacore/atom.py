"""Atom types, bonds and atoms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from vinacore.atom_constants import (
    METAL_COVALENT_RADIUS,
    AdType,
    ElType,
    SyType,
    XsType,
    ad_is_heteroatom,
    ad_is_hydrogen,
    ad_type_property,
    ad_type_to_el_type,
)
from vinacore.common import MAX_SZ, MAX_VEC, InternalError, Vec
from vinacore.matrix import triangular_matrix_index


class Typing(Enum):
    """Atom typing scheme."""

    EL = "el"
    AD = "ad"
    XS = "xs"
    SY = "sy"


_TYPE_COUNTS = {
    Typing.EL: int(ElType.SIZE),
    Typing.AD: int(AdType.SIZE),
    Typing.XS: int(XsType.SIZE),
    Typing.SY: int(SyType.SIZE),
}


@dataclass
class AtomType:
    """An atom's type in each typing scheme; SIZE values mean unassigned."""

    el: int = ElType.SIZE
    ad: int = AdType.SIZE
    xs: int = XsType.SIZE
    sy: int = SyType.SIZE

    def get(self, typing: Typing) -> int:
        if typing is Typing.EL:
            return self.el
        if typing is Typing.AD:
            return self.ad
        if typing is Typing.XS:
            return self.xs
        if typing is Typing.SY:
            return self.sy
        raise ValueError(f"unknown typing scheme {typing!r}")

    def is_hydrogen(self) -> bool:
        return ad_is_hydrogen(self.ad)

    def is_heteroatom(self) -> bool:
        return ad_is_heteroatom(self.ad) or self.xs == XsType.Met_D

    def acceptable_type(self) -> bool:
        return self.ad < AdType.SIZE or self.xs == XsType.Met_D

    def assign_el(self) -> None:
        """Derive the element type from the AutoDock and X-Score types."""
        self.el = ad_type_to_el_type(self.ad)
        if self.ad == AdType.SIZE and self.xs == XsType.Met_D:
            self.el = ElType.Met

    def same_element(self, other: "AtomType") -> bool:
        return self.el == other.el

    def covalent_radius(self) -> float:
        if self.ad < AdType.SIZE:
            return ad_type_property(self.ad).covalent_radius
        if self.xs == XsType.Met_D:
            return METAL_COVALENT_RADIUS
        raise InternalError("covalent radius of an untyped atom")

    def optimal_covalent_bond_length(self, other: "AtomType") -> float:
        return self.covalent_radius() + other.covalent_radius()


def num_atom_types(typing: Typing) -> int:
    return _TYPE_COUNTS[typing]


def get_type_pair_index(typing: Typing, a: AtomType, b: AtomType) -> int:
    """Packed symmetric index of the type pair; both types must be assigned."""
    n = num_atom_types(typing)
    i = a.get(typing)
    j = b.get(typing)
    if not (0 <= i < n and 0 <= j < n):
        raise InternalError("atom type unassigned in the given typing scheme")
    if i <= j:
        return triangular_matrix_index(n, i, j)
    return triangular_matrix_index(n, j, i)


@dataclass
class AtomIndex:
    """Position of an atom, either among grid atoms or among other atoms."""

    i: int = MAX_SZ
    in_grid: bool = False


@dataclass
class Bond:
    connected_atom_index: AtomIndex = field(default_factory=AtomIndex)
    length: float = 0.0
    rotatable: bool = False


@dataclass
class Atom(AtomType):
    """A typed atom with charge, coordinates and bonds."""

    charge: float = 0.0
    coords: Vec = MAX_VEC
    bonds: list[Bond] = field(default_factory=list)