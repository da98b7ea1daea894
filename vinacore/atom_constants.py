"""Atom typing schemes and per-type physical constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from vinacore.common import InternalError


class ElType(IntEnum):
    """Element types, including hydrogen."""

    H = 0
    C = 1
    N = 2
    O = 3
    S = 4
    P = 5
    F = 6
    Cl = 7
    Br = 8
    I = 9
    Met = 10
    SIZE = 11


class AdType(IntEnum):
    """AutoDock 4 atom types."""

    C = 0
    A = 1
    N = 2
    O = 3
    P = 4
    S = 5
    H = 6  # non-polar hydrogen
    F = 7
    I = 8
    NA = 9
    OA = 10
    SA = 11
    HD = 12
    Mg = 13
    Mn = 14
    Zn = 15
    Ca = 16
    Fe = 17
    Cl = 18
    Br = 19
    SIZE = 20


class XsType(IntEnum):
    """X-Score atom types."""

    C_H = 0
    C_P = 1
    N_P = 2
    N_D = 3
    N_A = 4
    N_DA = 5
    O_P = 6
    O_D = 7
    O_A = 8
    O_DA = 9
    S_A = 10
    S_P = 11
    P_P = 12
    F_H = 13
    Cl_H = 14
    Br_H = 15
    I_H = 16
    Met_D = 17
    SIZE = 18


class SyType(IntEnum):
    """DrugScore-CSD atom types."""

    C_3 = 0
    C_2 = 1
    C_ar = 2
    C_cat = 3
    N_3 = 4
    N_ar = 5
    N_am = 6
    N_pl3 = 7
    O_3 = 8
    O_2 = 9
    O_co2 = 10
    S = 11
    P = 12
    F = 13
    Cl = 14
    Br = 15
    I = 16
    Met = 17
    SIZE = 18


@dataclass(frozen=True, slots=True)
class AtomKind:
    """Physical parameters of an AutoDock atom type."""

    name: str
    radius: float
    depth: float
    solvation: float
    volume: float
    covalent_radius: float


ATOM_KIND_DATA: tuple[AtomKind, ...] = (
    AtomKind("C", 2.00000, 0.15000, -0.00143, 33.51030, 0.77),
    AtomKind("A", 2.00000, 0.15000, -0.00052, 33.51030, 0.77),
    AtomKind("N", 1.75000, 0.16000, -0.00162, 22.44930, 0.75),
    AtomKind("O", 1.60000, 0.20000, -0.00251, 17.15730, 0.73),
    AtomKind("P", 2.10000, 0.20000, -0.00110, 38.79240, 1.06),
    AtomKind("S", 2.00000, 0.20000, -0.00214, 33.51030, 1.02),
    AtomKind("H", 1.00000, 0.02000, 0.00051, 0.00000, 0.37),
    AtomKind("F", 1.54500, 0.08000, -0.00110, 15.44800, 0.71),
    AtomKind("I", 2.36000, 0.55000, -0.00110, 55.05850, 1.33),
    AtomKind("NA", 1.75000, 0.16000, -0.00162, 22.44930, 0.75),
    AtomKind("OA", 1.60000, 0.20000, -0.00251, 17.15730, 0.73),
    AtomKind("SA", 2.00000, 0.20000, -0.00214, 33.51030, 1.02),
    AtomKind("HD", 1.00000, 0.02000, 0.00051, 0.00000, 0.37),
    AtomKind("Mg", 0.65000, 0.87500, -0.00110, 1.56000, 1.30),
    AtomKind("Mn", 0.65000, 0.87500, -0.00110, 2.14000, 1.39),
    AtomKind("Zn", 0.74000, 0.55000, -0.00110, 1.70000, 1.31),
    AtomKind("Ca", 0.99000, 0.55000, -0.00110, 2.77000, 1.74),
    AtomKind("Fe", 0.65000, 0.01000, -0.00110, 1.84000, 1.25),
    AtomKind("Cl", 2.04500, 0.27600, -0.00110, 35.82350, 0.99),
    AtomKind("Br", 2.16500, 0.38900, -0.00110, 42.56610, 1.14),
)

METAL_SOLVATION_PARAMETER = -0.00110
# Covalent radius for metals not listed in ATOM_KIND_DATA.
METAL_COVALENT_RADIUS = 1.75

# Atom names treated as another AutoDock type.
ATOM_EQUIVALENCES: dict[str, str] = {"Se": "S"}


@dataclass(frozen=True, slots=True)
class AcceptorKind:
    """Hydrogen-bond acceptor parameters: optimal length and depth."""

    ad_type: int
    radius: float
    depth: float


ACCEPTOR_KIND_DATA: tuple[AcceptorKind, ...] = (
    AcceptorKind(AdType.NA, 1.9, 5.0),
    AcceptorKind(AdType.OA, 1.9, 5.0),
    AcceptorKind(AdType.SA, 2.5, 1.0),
)

XS_VDW_RADII: tuple[float, ...] = (
    1.9,  # C_H
    1.9,  # C_P
    1.8,  # N_P
    1.8,  # N_D
    1.8,  # N_A
    1.8,  # N_DA
    1.7,  # O_P
    1.7,  # O_D
    1.7,  # O_A
    1.7,  # O_DA
    2.0,  # S_A
    2.0,  # S_P
    2.1,  # P_P
    1.5,  # F_H
    1.8,  # Cl_H
    2.0,  # Br_H
    2.2,  # I_H
    1.2,  # Met_D
)

NON_AD_METAL_NAMES: tuple[str, ...] = ("Cu", "Fe", "Na", "K", "Hg", "Co", "U", "Cd", "Ni")

_AD_TO_EL: dict[int, ElType] = {
    AdType.C: ElType.C,
    AdType.A: ElType.C,
    AdType.N: ElType.N,
    AdType.O: ElType.O,
    AdType.P: ElType.P,
    AdType.S: ElType.S,
    AdType.H: ElType.H,
    AdType.F: ElType.F,
    AdType.I: ElType.I,
    AdType.NA: ElType.N,
    AdType.OA: ElType.O,
    AdType.SA: ElType.S,
    AdType.HD: ElType.H,
    AdType.Mg: ElType.Met,
    AdType.Mn: ElType.Met,
    AdType.Zn: ElType.Met,
    AdType.Ca: ElType.Met,
    AdType.Fe: ElType.Met,
    AdType.Cl: ElType.Cl,
    AdType.Br: ElType.Br,
    AdType.SIZE: ElType.SIZE,
}

_HYDROPHOBIC = frozenset({XsType.C_H, XsType.F_H, XsType.Cl_H, XsType.Br_H, XsType.I_H})
_ACCEPTORS = frozenset({XsType.N_A, XsType.N_DA, XsType.O_A, XsType.O_DA})
_DONORS = frozenset({XsType.N_D, XsType.N_DA, XsType.O_D, XsType.O_DA, XsType.Met_D})


def ad_is_hydrogen(ad: int) -> bool:
    return ad in (AdType.H, AdType.HD)


def ad_is_heteroatom(ad: int) -> bool:
    """True for known AutoDock types other than carbon and hydrogen."""
    return ad not in (AdType.A, AdType.C, AdType.H, AdType.HD) and ad < AdType.SIZE


def ad_type_to_el_type(t: int) -> ElType:
    """Element type of an AutoDock type; AdType.SIZE maps to ElType.SIZE."""
    try:
        return _AD_TO_EL[t]
    except KeyError:
        raise InternalError(f"unknown AutoDock type {t}") from None


def xs_radius(t: int) -> float:
    if not 0 <= t < len(XS_VDW_RADII):
        raise IndexError(f"X-Score type {t} out of range")
    return XS_VDW_RADII[t]


def is_non_ad_metal_name(name: str) -> bool:
    return name in NON_AD_METAL_NAMES


def xs_is_hydrophobic(xs: int) -> bool:
    return xs in _HYDROPHOBIC


def xs_is_cl(xs: int) -> bool:
    return xs == XsType.Cl_H


def xs_is_br(xs: int) -> bool:
    return xs == XsType.Br_H


def xs_is_i(xs: int) -> bool:
    return xs == XsType.I_H


def xs_is_s(xs: int) -> bool:
    return xs in (XsType.S_A, XsType.S_P)


def xs_is_halogen(xs: int) -> bool:
    return xs_is_cl(xs) or xs_is_br(xs) or xs_is_i(xs)


def xs_is_acceptor(xs: int) -> bool:
    return xs in _ACCEPTORS


def xs_is_donor(xs: int) -> bool:
    return xs in _DONORS


def xs_donor_acceptor(t1: int, t2: int) -> bool:
    return xs_is_donor(t1) and xs_is_acceptor(t2)


def xs_h_bond_possible(t1: int, t2: int) -> bool:
    return xs_donor_acceptor(t1, t2) or xs_donor_acceptor(t2, t1)


def xs_is_hal_acceptor(xs: int) -> bool:
    return xs_is_acceptor(xs) or xs == XsType.S_A


def xs_hal_cl_bond_possible(t1: int, t2: int) -> bool:
    return (xs_is_cl(t1) and xs_is_hal_acceptor(t2)) or (xs_is_cl(t2) and xs_is_hal_acceptor(t1))


def xs_hal_br_bond_possible(t1: int, t2: int) -> bool:
    return (xs_is_br(t1) and xs_is_hal_acceptor(t2)) or (xs_is_br(t2) and xs_is_hal_acceptor(t1))


def xs_hal_i_bond_possible(t1: int, t2: int) -> bool:
    return (xs_is_i(t1) and xs_is_hal_acceptor(t2)) or (xs_is_i(t2) and xs_is_hal_acceptor(t1))


def xs_hal_any_bond_possible(t1: int, t2: int) -> bool:
    return (
        xs_hal_cl_bond_possible(t1, t2)
        or xs_hal_br_bond_possible(t1, t2)
        or xs_hal_i_bond_possible(t1, t2)
    )


def xs_sul_bond_possible(t1: int, t2: int) -> bool:
    return (xs_is_s(t1) and xs_is_hal_acceptor(t2)) or (xs_is_s(t2) and xs_is_hal_acceptor(t1))


def ad_type_property(i: int) -> AtomKind:
    if not 0 <= i < len(ATOM_KIND_DATA):
        raise IndexError(f"AutoDock type {i} out of range")
    return ATOM_KIND_DATA[i]


def string_to_ad_type(name: str) -> AdType:
    """AutoDock type for an atom name, or AdType.SIZE if the name is unknown."""
    for i, kind in enumerate(ATOM_KIND_DATA):
        if kind.name == name:
            return AdType(i)
    if name in ATOM_EQUIVALENCES:
        return string_to_ad_type(ATOM_EQUIVALENCES[name])
    return AdType.SIZE


def max_covalent_radius() -> float:
    return max((kind.covalent_radius for kind in ATOM_KIND_DATA), default=0.0)