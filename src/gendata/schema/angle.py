"""Bond angles and the per-structure angle collection."""

from dataclasses import InitVar, dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from gendata.schema.base import GenericData
from gendata.schema.handles import AtomRef
from gendata.schema.kinds import DataKind

ANGLE_ATOMS = 3


@dataclass(eq=False)
class Angle:
    """
    A vertex atom, two terminus atoms, and the angle between them in radians.

    Two angles are equal when they share the vertex and the same pair of termini in
    either order; the angle value is not compared.
    """

    vertex: Optional[AtomRef] = None
    a: InitVar[Optional[AtomRef]] = None
    b: InitVar[Optional[AtomRef]] = None
    radians: float = 0.0
    termini: tuple[Optional[AtomRef], Optional[AtomRef]] = field(init=False, default=(None, None))

    def __post_init__(self, a: Optional[AtomRef], b: Optional[AtomRef]) -> None:
        self.termini = (a, b)
        self.radians = float(self.radians)

    def __repr__(self) -> str:
        ids = [atom.idx if atom is not None else None for atom in self.get_atoms()]
        return f"<Angle vertex={ids[0]} termini=({ids[1]}, {ids[2]}) radians={self.radians:.4f}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        if self.vertex != other.vertex:
            return False
        return self.termini == other.termini or self.termini == other.termini[::-1]

    __hash__ = None

    def clear(self) -> None:
        self.vertex = None
        self.termini = (None, None)
        self.radians = 0.0

    def get_angle(self) -> float:
        """Return the angle in radians."""
        return self.radians

    def set_angle(self, radians: float) -> None:
        """Set the angle in radians."""
        self.radians = float(radians)

    def set_atoms(self, *atoms) -> None:
        """Set the atoms from ``(vertex, a, b)`` or a single 3-tuple."""
        if len(atoms) == 1:
            atoms = tuple(atoms[0])
        if len(atoms) != ANGLE_ATOMS:
            raise TypeError(f"set_atoms expects {ANGLE_ATOMS} atoms, got {len(atoms)}")
        self.vertex = atoms[0]
        self.termini = (atoms[1], atoms[2])

    def get_atoms(self) -> tuple[Optional[AtomRef], Optional[AtomRef], Optional[AtomRef]]:
        """Return ``(vertex, a, b)``."""
        return (self.vertex, *self.termini)

    def sort_by_index(self) -> None:
        """Order the termini by ascending atom index."""
        a, b = self.termini
        if a is not None and b is not None and a.idx > b.idx:
            self.termini = (b, a)

    def copy(self) -> "Angle":
        return Angle(self.vertex, *self.termini, radians=self.radians)


@dataclass
class AngleData(GenericData):
    """All bond angles of a structure."""

    KIND = DataKind.ANGLE

    angles: list[Angle] = field(default_factory=list)

    def clear(self) -> None:
        self.angles = []

    def set_data(self, angle: Angle) -> None:
        """Append a copy of ``angle``."""
        self.angles.append(angle.copy())

    def get_data(self) -> list[Angle]:
        return [angle.copy() for angle in self.angles]

    def get_size(self) -> int:
        """Return the number of angles."""
        return len(self.angles)

    def fill_angle_array(self, out: list[list[int]]) -> int:
        """
        Append every angle as ``[vertex, terminus1, terminus2]`` atom indices.

        Returns
        -------
        int
            Number of angles written.
        """
        for angle in self.angles:
            atoms = angle.get_atoms()
            if any(atom is None for atom in atoms):
                raise ValueError(f"Cannot export incomplete angle {angle!r}")
            out.append([atom.idx for atom in atoms])
        return len(self.angles)

    def as_array(self) -> NDArray[np.int_]:
        """Return the angle indices as an integer array of shape (N, 3)."""
        rows: list[list[int]] = []
        self.fill_angle_array(rows)
        return np.array(rows, dtype=int).reshape(-1, ANGLE_ATOMS)
