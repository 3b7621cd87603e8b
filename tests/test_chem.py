"""
Unit tests for element lookups and atom handles built from symbols.
"""

import pytest

from gendata.schema import AtomRef, BondRef
from gendata.utils.chem import get_atomic_number, is_valid_element


@pytest.mark.parametrize("symbol, number", [("H", 1), ("c", 6), ("Cl", 17), ("fe", 26)])
def test_get_atomic_number(symbol, number):
    assert get_atomic_number(symbol) == number


def test_invalid_element():
    assert not is_valid_element("Xx")
    assert not is_valid_element("123")
    with pytest.raises(ValueError):
        get_atomic_number("Xx")


def test_atom_ref_from_symbol():
    hydrogen = AtomRef.from_symbol(3, "H")
    assert hydrogen.idx == 3
    assert hydrogen.is_hydrogen()
    assert not AtomRef.from_symbol(0, "O").is_hydrogen()


def test_atom_refs_are_hashable():
    assert len({AtomRef(0, 6), AtomRef(0, 6), AtomRef(1, 6)}) == 2


def test_bond_neighbor():
    c, o = AtomRef(0, 6), AtomRef(1, 8)
    bond = BondRef(0, c, o, order=2)
    assert bond.get_nbr_atom(c) == o
    assert bond.get_nbr_atom(o) == c
    with pytest.raises(ValueError):
        bond.get_nbr_atom(AtomRef(2, 1))


def test_atom_ref_identity_ignores_element():
    """Index and generation identify an atom; the element is descriptive only."""
    assert AtomRef(0, 6) == AtomRef(0)
    assert hash(AtomRef(0, 6)) == hash(AtomRef(0))
    assert AtomRef(0, 6, generation=1) != AtomRef(0, 6)
    assert BondRef(0, AtomRef(0, 6), AtomRef(1, 8)) == BondRef(0, AtomRef(0), AtomRef(1))
