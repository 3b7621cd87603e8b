"""
Unit tests for kind alias resolution and stored unit lookup.
"""

import pytest

from gendata.data.mapped import get_stored_unit, kind_aliases, resolve_attr_key
from gendata.exceptions import UnknownDataKindError
from gendata.schema import DataKind, resolve_kind


@pytest.mark.parametrize(
    "value, expected",
    [
        (DataKind.RING, DataKind.RING),
        ("unit_cell", DataKind.UNIT_CELL),
        ("UnitCell", DataKind.UNIT_CELL),
        ("unit cell", DataKind.UNIT_CELL),
        ("TorsionData", DataKind.TORSION),
        ("dihedrals", DataKind.TORSION),
        ("SSSR", DataKind.RING),
        ("conformrs", DataKind.CONFORMER),
    ],
)
def test_resolve_kind(value, expected):
    assert resolve_kind(value) is expected


def test_resolve_kind_exact_only():
    """A cutoff of 1.0 disables fuzzy matches."""
    assert resolve_kind("comment", cutoff=1.0) is DataKind.COMMENT
    with pytest.raises(UnknownDataKindError):
        resolve_kind("conformrs", cutoff=1.0)


def test_resolve_kind_unknown():
    with pytest.raises(UnknownDataKindError):
        resolve_kind("qqqqqqqqqq")
    with pytest.raises(KeyError):
        resolve_kind(42)


def test_every_kind_has_aliases():
    for kind in DataKind:
        assert kind.value in kind_aliases
        assert resolve_kind(kind.value) is kind


def test_default_attribute():
    assert DataKind.UNIT_CELL.default_attribute == "UnitCell"
    assert DataKind.SPIN.default_attribute == ""


def test_resolve_attr_key_type_error():
    with pytest.raises(TypeError):
        resolve_attr_key(None, kind_aliases)


def test_stored_units():
    assert get_stored_unit("cell_angle") == "degree"
    assert get_stored_unit("energy") == "kJ/mol"
    with pytest.raises(KeyError):
        get_stored_unit("pressure")
