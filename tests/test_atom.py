import pytest

from vinacore.atom import (
    Atom,
    AtomIndex,
    AtomType,
    Bond,
    Typing,
    get_type_pair_index,
    num_atom_types,
)
from vinacore.atom_constants import (
    METAL_COVALENT_RADIUS,
    AdType,
    ElType,
    SyType,
    XsType,
)
from vinacore.common import MAX_SZ, MAX_VEC, InternalError


def test_defaults_are_unassigned():
    t = AtomType()
    assert t.get(Typing.EL) == ElType.SIZE
    assert t.get(Typing.AD) == AdType.SIZE
    assert t.get(Typing.XS) == XsType.SIZE
    assert t.get(Typing.SY) == SyType.SIZE
    assert not t.acceptable_type()


def test_untyped_covalent_radius_raises():
    with pytest.raises(InternalError):
        AtomType().covalent_radius()


def test_covalent_radius_from_table_and_metal():
    assert AtomType(ad=AdType.C).covalent_radius() == 0.77
    metal = AtomType(xs=XsType.Met_D)
    assert metal.covalent_radius() == METAL_COVALENT_RADIUS
    assert metal.acceptable_type()
    assert metal.is_heteroatom()


def test_bond_length_symmetric():
    a = AtomType(ad=AdType.N)
    b = AtomType(ad=AdType.Br)
    assert a.optimal_covalent_bond_length(b) == pytest.approx(b.optimal_covalent_bond_length(a))
    assert a.optimal_covalent_bond_length(a) == pytest.approx(2 * a.covalent_radius())


def test_hydrogen_and_heteroatom():
    assert AtomType(ad=AdType.HD).is_hydrogen()
    assert not AtomType(ad=AdType.C).is_heteroatom()
    assert AtomType(ad=AdType.OA).is_heteroatom()


def test_assign_el():
    t = AtomType(ad=AdType.SA)
    t.assign_el()
    assert t.el == ElType.S
    metal = AtomType(ad=AdType.SIZE, xs=XsType.Met_D)
    metal.assign_el()
    assert metal.el == ElType.Met
    bad = AtomType(ad=AdType.SIZE + 5)
    with pytest.raises(InternalError):
        bad.assign_el()


def test_same_element():
    a = AtomType(ad=AdType.A)
    b = AtomType(ad=AdType.C)
    a.assign_el()
    b.assign_el()
    assert a.same_element(b)
    c = AtomType(ad=AdType.N)
    c.assign_el()
    assert not a.same_element(c)


def test_num_atom_types():
    assert num_atom_types(Typing.XS) == XsType.SIZE
    assert num_atom_types(Typing.AD) == AdType.SIZE


def test_type_pair_index_symmetric_and_dense():
    n = num_atom_types(Typing.XS)
    seen = set()
    for i in range(n):
        for j in range(n):
            a = AtomType(xs=i)
            b = AtomType(xs=j)
            idx = get_type_pair_index(Typing.XS, a, b)
            assert idx == get_type_pair_index(Typing.XS, b, a)
            seen.add(idx)
    assert seen == set(range(n * (n + 1) // 2))


def test_type_pair_index_unassigned_raises():
    with pytest.raises(InternalError):
        get_type_pair_index(Typing.XS, AtomType(xs=XsType.C_H), AtomType())


def test_atom_index_and_bond_defaults():
    assert AtomIndex() == AtomIndex(MAX_SZ, False)
    assert Bond().connected_atom_index == AtomIndex()
    assert not Bond().rotatable


def test_atom_defaults():
    a = Atom()
    b = Atom()
    assert a.coords == MAX_VEC
    assert a.charge == 0.0
    a.bonds.append(Bond(AtomIndex(3, True), 1.5, True))
    assert b.bonds == []
    assert a.bonds[0].connected_atom_index.i == 3