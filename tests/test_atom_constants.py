import pytest

from vinacore.atom_constants import (
    ACCEPTOR_KIND_DATA,
    ATOM_KIND_DATA,
    AdType,
    ElType,
    XsType,
    ad_is_heteroatom,
    ad_is_hydrogen,
    ad_type_property,
    ad_type_to_el_type,
    is_non_ad_metal_name,
    max_covalent_radius,
    string_to_ad_type,
    xs_h_bond_possible,
    xs_hal_any_bond_possible,
    xs_hal_br_bond_possible,
    xs_hal_cl_bond_possible,
    xs_hal_i_bond_possible,
    xs_is_acceptor,
    xs_is_donor,
    xs_is_halogen,
    xs_is_hal_acceptor,
    xs_is_hydrophobic,
    xs_is_s,
    xs_radius,
    xs_sul_bond_possible,
)
from vinacore.common import InternalError


def test_table_sizes_match_enums():
    assert len(ATOM_KIND_DATA) == AdType.SIZE
    assert [ad_type_property(i) for i in range(AdType.SIZE)] == list(ATOM_KIND_DATA)
    assert ad_type_property(AdType.SIZE - 1).name == "Br"
    assert len(ACCEPTOR_KIND_DATA) == 3


def test_kind_names_match_enum_order():
    for ad in AdType:
        if ad == AdType.SIZE:
            continue
        assert string_to_ad_type(ad_type_property(ad).name) == ad


def test_string_to_ad_type_equivalence_and_unknown():
    assert string_to_ad_type("Se") == AdType.S
    assert string_to_ad_type("Xx") == AdType.SIZE


def test_ad_type_property_values():
    assert ad_type_property(AdType.Zn).covalent_radius == 1.31
    assert ad_type_property(AdType.OA).name == "OA"
    with pytest.raises(IndexError):
        ad_type_property(AdType.SIZE)


def test_max_covalent_radius():
    assert max_covalent_radius() == 1.74
    assert all(k.covalent_radius <= max_covalent_radius() for k in ATOM_KIND_DATA)


def test_hydrogen_and_heteroatom():
    assert ad_is_hydrogen(AdType.H) and ad_is_hydrogen(AdType.HD)
    assert not ad_is_hydrogen(AdType.C)
    assert ad_is_heteroatom(AdType.NA)
    assert not ad_is_heteroatom(AdType.A)
    assert not ad_is_heteroatom(AdType.HD)
    assert not ad_is_heteroatom(AdType.SIZE)


def test_ad_type_to_el_type():
    assert ad_type_to_el_type(AdType.A) == ElType.C
    assert ad_type_to_el_type(AdType.Fe) == ElType.Met
    assert ad_type_to_el_type(AdType.SIZE) == ElType.SIZE
    with pytest.raises(InternalError):
        ad_type_to_el_type(AdType.SIZE + 1)


def test_xs_radius():
    assert xs_radius(XsType.Met_D) == 1.2
    assert xs_radius(XsType.I_H) == 2.2
    with pytest.raises(IndexError):
        xs_radius(XsType.SIZE)


def test_non_ad_metals():
    assert is_non_ad_metal_name("Cu")
    assert not is_non_ad_metal_name("Zn")


def test_xs_classification():
    assert xs_is_hydrophobic(XsType.C_H)
    assert not xs_is_hydrophobic(XsType.C_P)
    assert xs_is_halogen(XsType.Br_H)
    assert not xs_is_halogen(XsType.F_H)
    assert xs_is_s(XsType.S_P)
    assert xs_is_acceptor(XsType.O_DA) and xs_is_donor(XsType.O_DA)
    assert xs_is_donor(XsType.Met_D) and not xs_is_acceptor(XsType.Met_D)
    assert xs_is_hal_acceptor(XsType.S_A)
    assert not xs_is_hal_acceptor(XsType.S_P)


def test_h_bond_symmetric():
    for a in XsType:
        for b in XsType:
            assert xs_h_bond_possible(a, b) == xs_h_bond_possible(b, a)
    assert xs_h_bond_possible(XsType.N_D, XsType.O_A)
    assert not xs_h_bond_possible(XsType.N_D, XsType.N_D)


def test_halogen_and_sulfur_bonds():
    assert xs_hal_cl_bond_possible(XsType.O_A, XsType.Cl_H)
    assert xs_hal_br_bond_possible(XsType.Br_H, XsType.S_A)
    assert xs_hal_i_bond_possible(XsType.I_H, XsType.N_A)
    assert not xs_hal_any_bond_possible(XsType.Cl_H, XsType.C_H)
    assert xs_sul_bond_possible(XsType.S_P, XsType.O_A)
    assert not xs_sul_bond_possible(XsType.S_P, XsType.C_H)