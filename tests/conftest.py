"""Shared atom and bond handles for record tests."""

import pytest

from gendata.schema.handles import AtomRef, BondRef

CARBON = 6
HYDROGEN = 1


@pytest.fixture
def ethane_atoms():
    """
    Atoms of ethane: two carbons (0, 1) and six hydrogens (2-7).

    Hydrogens 2-4 sit on carbon 0, hydrogens 5-7 on carbon 1.
    """
    carbons = [AtomRef(0, CARBON), AtomRef(1, CARBON)]
    hydrogens = [AtomRef(i, HYDROGEN) for i in range(2, 8)]
    return carbons + hydrogens


@pytest.fixture
def cc_bond(ethane_atoms):
    """Central C-C bond of ethane."""
    return BondRef(0, ethane_atoms[0], ethane_atoms[1])
