"""
Unit tests for Angle and AngleData.

This suite covers:
- Setting atoms from separate handles or a triple
- Equality independent of terminus order, before and after sorting
- Export of vertex/terminus index rows
"""

import numpy as np
import pytest

from gendata.schema import Angle, AngleData, AtomRef, DataKind


@pytest.fixture
def water():
    """Oxygen vertex (0) with hydrogens 1 and 2."""
    return AtomRef(0, 8), AtomRef(1, 1), AtomRef(2, 1)


def test_set_atoms(water):
    o, h1, h2 = water
    angle = Angle()
    angle.set_atoms(o, h1, h2)
    assert angle.get_atoms() == (o, h1, h2)

    angle.set_atoms((o, h2, h1))
    assert angle.get_atoms() == (o, h2, h1)


def test_set_atoms_wrong_count(water):
    with pytest.raises(TypeError):
        Angle().set_atoms(*water[:2])


def test_angle_value(water):
    angle = Angle(*water)
    angle.set_angle(1.824)
    assert angle.get_angle() == pytest.approx(1.824)


def test_sort_by_index(water):
    """Termini are ordered by ascending atom index."""
    o, h1, h2 = water
    angle = Angle(o, h2, h1)
    angle.sort_by_index()
    assert angle.get_atoms() == (o, h1, h2)


def test_equality_ignores_terminus_order(water):
    """Angles with swapped termini compare equal, and stay equal after sorting."""
    o, h1, h2 = water
    first = Angle(o, h1, h2, radians=1.8)
    second = Angle(o, h2, h1)
    assert first == second

    first.sort_by_index()
    second.sort_by_index()
    assert first == second
    assert first.get_atoms() == second.get_atoms()


def test_inequality_on_vertex(water):
    o, h1, h2 = water
    assert Angle(o, h1, h2) != Angle(h1, o, h2)


def test_clear(water):
    angle = Angle(*water, radians=1.0)
    angle.clear()
    assert angle.get_atoms() == (None, None, None)
    assert angle.get_angle() == 0.0


def test_angle_data_stores_copies(water):
    angle = Angle(*water)
    data = AngleData()
    data.set_data(angle)
    angle.set_angle(2.0)

    assert data.kind is DataKind.ANGLE
    assert data.get_name() == "AngleData"
    assert data.get_size() == 1
    assert data.get_data()[0].get_angle() == 0.0


def test_fill_angle_array(water):
    """Each angle yields a [vertex, terminus, terminus] row."""
    o, h1, h2 = water
    data = AngleData()
    data.set_data(Angle(o, h1, h2))
    data.set_data(Angle(h1, o, h2))

    out = []
    assert data.fill_angle_array(out) == 2
    assert out == [[0, 1, 2], [1, 0, 2]]
    np.testing.assert_array_equal(data.as_array(), np.array(out))


def test_fill_angle_array_rejects_incomplete_angle(water):
    data = AngleData()
    data.set_data(Angle(water[0], water[1]))
    with pytest.raises(ValueError):
        data.fill_angle_array([])


def test_empty_angle_array():
    data = AngleData()
    assert data.fill_angle_array([]) == 0
    assert data.as_array().shape == (0, 3)


def test_angle_data_clear(water):
    data = AngleData()
    data.set_data(Angle(*water))
    data.clear()
    assert data.get_size() == 0


def test_equality_ignores_element_data(water):
    """Angles over the same atom indices are equal whether or not elements are known."""
    o, h1, h2 = water
    assert Angle(o, h1, h2) == Angle(AtomRef(0), AtomRef(2), AtomRef(1))


def test_angle_is_unhashable(water):
    with pytest.raises(TypeError):
        hash(Angle(*water))
