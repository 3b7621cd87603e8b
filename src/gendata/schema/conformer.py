"""Per-conformer data for an ensemble of geometries sharing one connectivity."""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gendata.config.unit_registry import load_unit_registry
from gendata.data.mapped import get_stored_unit
from gendata.schema.base import GenericData
from gendata.schema.kinds import DataKind
from gendata.utils.format import resolve_units
from gendata.utils.logging import get_logger

logger = get_logger(__name__)


def _vector_sets(values: Iterable[ArrayLike], label: str) -> list[NDArray[np.float64]]:
    """Copy per-conformer atom vectors into float arrays of shape (n_atoms, 3)."""
    sets = []
    for i, value in enumerate(values):
        arr = np.array(value, dtype=float)
        if arr.size == 0:
            arr = np.zeros((0, 3))
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError(f"{label} for conformer {i} must have shape (n_atoms, 3), got {arr.shape}")
        sets.append(arr)
    return sets


@dataclass(eq=False)
class ConformerData(GenericData):
    """
    Parallel per-conformer sequences for one structure.

    Attributes
    ----------
    dimensions : NDArray[np.int_]
        Dimensionality of each conformer.
    energies : NDArray[np.float64]
        Relative energy of each conformer in kJ/mol.
    forces, velocities, displacements : list[NDArray[np.float64]]
        Per-conformer arrays of shape (n_atoms, 3).
    data : list[str]
        Free-form annotation per conformer.

    Notes
    -----
    - Setters replace a whole sequence and getters return copies.
    - Sequences are not cross-checked when set; call ``validate`` to check that all
      populated sequences agree on the conformer count and atom count.
    """

    KIND = DataKind.CONFORMER

    dimensions: NDArray[np.int_] = field(default_factory=lambda: np.zeros(0, dtype=int))
    energies: NDArray[np.float64] = field(default_factory=lambda: np.zeros(0))
    forces: list[NDArray[np.float64]] = field(default_factory=list)
    velocities: list[NDArray[np.float64]] = field(default_factory=list)
    displacements: list[NDArray[np.float64]] = field(default_factory=list)
    data: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.set_dimension(self.dimensions)
        self.set_energies(self.energies)
        self.set_forces(self.forces)
        self.set_velocities(self.velocities)
        self.set_displacements(self.displacements)
        self.set_data(self.data)

    def set_dimension(self, dimensions: Sequence[int]) -> None:
        self.dimensions = np.array(dimensions, dtype=int).reshape(-1)

    def set_energies(self, energies: Sequence[float], units: str = "") -> None:
        """Set conformer energies, converting from ``units`` to kJ/mol when given."""
        values = np.array(energies, dtype=float).reshape(-1)
        stored = get_stored_unit("energy")
        units = resolve_units(units, stored)
        if units != stored:
            Q_ = load_unit_registry().Quantity
            values = np.asarray(Q_(values, units).to(stored).magnitude, dtype=float)
        self.energies = values

    def set_forces(self, forces: Iterable[ArrayLike]) -> None:
        self.forces = _vector_sets(forces, "forces")

    def set_velocities(self, velocities: Iterable[ArrayLike]) -> None:
        self.velocities = _vector_sets(velocities, "velocities")

    def set_displacements(self, displacements: Iterable[ArrayLike]) -> None:
        self.displacements = _vector_sets(displacements, "displacements")

    def set_data(self, data: Iterable[str]) -> None:
        self.data = [str(d) for d in data]

    def get_dimension(self) -> NDArray[np.int_]:
        return self.dimensions.copy()

    def get_energies(self, units: str = "") -> NDArray[np.float64]:
        """Return conformer energies, in kJ/mol unless other units are requested."""
        stored = get_stored_unit("energy")
        units = resolve_units(units, stored)
        if units == stored:
            return self.energies.copy()
        Q_ = load_unit_registry().Quantity
        return np.asarray(Q_(self.energies, stored).to(units).magnitude, dtype=float)

    def get_forces(self) -> list[NDArray[np.float64]]:
        return [f.copy() for f in self.forces]

    def get_velocities(self) -> list[NDArray[np.float64]]:
        return [v.copy() for v in self.velocities]

    def get_displacements(self) -> list[NDArray[np.float64]]:
        return [d.copy() for d in self.displacements]

    def get_data(self) -> list[str]:
        return list(self.data)

    def _sequence_lengths(self) -> dict[str, int]:
        lengths = {
            "dimensions": len(self.dimensions),
            "energies": len(self.energies),
            "forces": len(self.forces),
            "velocities": len(self.velocities),
            "displacements": len(self.displacements),
            "data": len(self.data),
        }
        return {key: n for key, n in lengths.items() if n > 0}

    @property
    def n_conformers(self) -> int:
        """int: Length of the longest populated sequence."""
        return max(self._sequence_lengths().values(), default=0)

    def validate(self, n_atoms: Optional[int] = None) -> None:
        """
        Check that the populated sequences describe the same ensemble.

        Parameters
        ----------
        n_atoms : int, optional
            Expected atom count of the owning structure. If omitted, the per-atom arrays
            only need to agree with each other.
        """
        lengths = self._sequence_lengths()
        if len(set(lengths.values())) > 1:
            logger.error(f"Mismatched conformer counts: {lengths}")
            raise ValueError(f"Populated sequences disagree on the number of conformers: {lengths}")

        atom_counts = {
            f"{label}[{i}]": len(arr)
            for label, sets in (
                ("forces", self.forces),
                ("velocities", self.velocities),
                ("displacements", self.displacements),
            )
            for i, arr in enumerate(sets)
        }
        expected = {n_atoms} if n_atoms is not None else set()
        if len(set(atom_counts.values()) | expected) > 1:
            logger.error(f"Mismatched atom counts: {atom_counts} (expected {n_atoms})")
            raise ValueError(f"Per-atom sequences disagree on the number of atoms (expected {n_atoms}): {atom_counts}")
