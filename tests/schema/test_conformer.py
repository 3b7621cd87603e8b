"""
Unit tests for ConformerData.

This suite covers:
- Whole-sequence setters and copying getters
- Energy unit conversion through pint
- Opt-in validation of conformer and atom counts
"""

import numpy as np
import pytest

from gendata.schema import ConformerData, DataKind

FORCES = [np.zeros((3, 3)), np.ones((3, 3))]


@pytest.fixture
def conformers():
    data = ConformerData()
    data.set_dimension([3, 3])
    data.set_energies([0.0, 4.184])
    data.set_forces(FORCES)
    data.set_data(["minimum", "rotamer"])
    return data


def test_defaults():
    data = ConformerData()
    assert data.kind is DataKind.CONFORMER
    assert data.get_name() == "Conformers"
    assert data.n_conformers == 0
    assert data.get_forces() == []


def test_setters_and_getters(conformers):
    np.testing.assert_array_equal(conformers.get_dimension(), [3, 3])
    np.testing.assert_allclose(conformers.get_energies(), [0.0, 4.184])
    assert len(conformers.get_forces()) == 2
    assert conformers.get_data() == ["minimum", "rotamer"]
    assert conformers.n_conformers == 2


def test_getters_return_copies(conformers):
    """Changing returned values does not change the record."""
    forces = conformers.get_forces()
    forces[1][0, 0] = 99.0
    energies = conformers.get_energies()
    energies[0] = 99.0
    conformers.get_data().append("extra")

    assert conformers.get_forces()[1][0, 0] == 1.0
    assert conformers.get_energies()[0] == 0.0
    assert len(conformers.get_data()) == 2


def test_setters_copy_input():
    velocities = [np.zeros((2, 3))]
    data = ConformerData()
    data.set_velocities(velocities)
    velocities[0][0, 0] = 5.0
    assert data.get_velocities()[0][0, 0] == 0.0


def test_energy_units(conformers):
    """Energies are stored in kJ/mol and converted on request."""
    np.testing.assert_allclose(conformers.get_energies(units="kcal/mol"), [0.0, 1.0])

    conformers.set_energies([2.0], units="kcal/mol")
    np.testing.assert_allclose(conformers.get_energies(), [8.368])


def test_invalid_vector_shape():
    with pytest.raises(ValueError):
        ConformerData().set_displacements([np.zeros((2, 2))])


def test_validate_accepts_consistent_data(conformers):
    conformers.validate()
    conformers.validate(n_atoms=3)


def test_validate_conformer_count(conformers):
    """Sequences of different length are reported."""
    conformers.set_energies([0.0, 1.0, 2.0])
    with pytest.raises(ValueError, match="number of conformers"):
        conformers.validate()


def test_validate_atom_count(conformers):
    with pytest.raises(ValueError, match="number of atoms"):
        conformers.validate(n_atoms=4)

    conformers.set_velocities([np.zeros((3, 3)), np.zeros((2, 3))])
    with pytest.raises(ValueError, match="number of atoms"):
        conformers.validate()


def test_mismatch_is_not_checked_on_set(conformers):
    """Setters accept mismatched sequences; only validate complains."""
    conformers.set_dimension([3])
    assert conformers.n_conformers == 2
