"""
Torsions (dihedral angles) around rotatable bonds.

A ``Torsion`` stores one central bond B-C and every A/D substituent pair found around it,
each with its own dihedral angle. ``TorsionData`` collects all torsions of a structure.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from gendata.schema.base import GenericData
from gendata.schema.handles import AtomRef, BondRef
from gendata.schema.kinds import DataKind
from gendata.utils.logging import get_logger

logger = get_logger(__name__)

TORSION_ATOMS = 4


class DistalPair(NamedTuple):
    """Substituents A and D of a torsion and the dihedral angle in radians."""

    a: AtomRef
    d: AtomRef
    angle: float = 0.0


@dataclass
class Torsion:
    """
    Central bond B-C plus the distal atom pairs forming dihedrals around it.

    Attributes
    ----------
    bc : tuple[AtomRef, AtomRef], optional
        Central atoms; None while the torsion is empty.
    ads : list[DistalPair]
        Distal atom pairs in insertion order.
    bond_idx : int, optional
        Index of the central bond when set through ``set_data``.
    """

    bc: Optional[tuple[AtomRef, AtomRef]] = None
    ads: list[DistalPair] = field(default_factory=list)
    bond_idx: Optional[int] = None

    @classmethod
    def from_atoms(cls, a: AtomRef, b: AtomRef, c: AtomRef, d: AtomRef) -> "Torsion":
        """Create a torsion holding a single A-B-C-D dihedral."""
        torsion = cls()
        torsion.add_torsion(a, b, c, d)
        return torsion

    def clear(self) -> None:
        self.bc = None
        self.ads = []
        self.bond_idx = None

    def empty(self) -> bool:
        """Return True when no central bond has been set."""
        return self.bc is None

    def add_torsion(self, *atoms) -> bool:
        """
        Add an A-B-C-D dihedral around the central bond.

        Accepts four atoms or a single 4-tuple. The first call on an empty torsion fixes
        the central pair; later calls must name the same pair in either order. When the
        pair is given as C-B, the dihedral is stored as D-C-B-A so that A stays on the
        first central atom.

        Returns
        -------
        bool
            False, with the torsion unchanged, if B-C does not match the central pair.
        """
        if len(atoms) == 1:
            atoms = tuple(atoms[0])
        if len(atoms) != TORSION_ATOMS:
            raise TypeError(f"add_torsion expects {TORSION_ATOMS} atoms, got {len(atoms)}")
        a, b, c, d = atoms

        if self.empty():
            self.bc = (b, c)
        elif (b, c) == self.bc:
            pass
        elif (c, b) == self.bc:
            a, d = d, a
        else:
            logger.warning(
                f"Central bond mismatch: torsion is around ({self.bc[0].idx}, {self.bc[1].idx}), "
                f"got ({b.idx}, {c.idx})"
            )
            return False

        self.ads.append(DistalPair(a, d, 0.0))
        return True

    def set_angle(self, radians: float, index: int = 0) -> bool:
        """Set the dihedral angle of the distal pair at ``index``; False if out of bounds."""
        if not 0 <= index < len(self.ads):
            logger.warning(f"Torsion index {index} out of bounds (size {len(self.ads)})")
            return False
        self.ads[index] = self.ads[index]._replace(angle=float(radians))
        return True

    def get_angle(self, index: int = 0) -> Optional[float]:
        """Return the dihedral angle in radians at ``index``, or None if out of bounds."""
        if not 0 <= index < len(self.ads):
            logger.warning(f"Torsion index {index} out of bounds (size {len(self.ads)})")
            return None
        return self.ads[index].angle

    def set_data(self, bond: Optional[BondRef]) -> bool:
        """Reset the torsion to an empty set of distal pairs around ``bond``."""
        if bond is None:
            return False
        self.clear()
        self.bc = (bond.begin, bond.end)
        self.bond_idx = bond.idx
        return True

    def get_bond_idx(self) -> Optional[int]:
        return self.bond_idx

    def get_bc(self) -> Optional[tuple[AtomRef, AtomRef]]:
        return self.bc

    def get_ads(self) -> list[DistalPair]:
        return list(self.ads)

    def get_size(self) -> int:
        """Return the number of distal pairs."""
        return len(self.ads)

    def get_torsions(self) -> list[tuple[AtomRef, AtomRef, AtomRef, AtomRef]]:
        """Return every dihedral as an (A, B, C, D) quadruple."""
        if self.bc is None:
            return []
        b, c = self.bc
        return [(ad.a, b, c, ad.d) for ad in self.ads]

    def is_proton_rotor(self) -> bool:
        """Return True if every distal atom is a hydrogen; False for an empty torsion."""
        if not self.ads:
            return False
        return all(ad.a.is_hydrogen() and ad.d.is_hydrogen() for ad in self.ads)


@dataclass
class TorsionData(GenericData):
    """All torsions of a structure, rebuilt as a unit by torsion perception."""

    KIND = DataKind.TORSION

    torsions: list[Torsion] = field(default_factory=list)

    def clear(self) -> None:
        self.torsions = []

    def get_data(self) -> list[Torsion]:
        """Return copies of the stored torsions."""
        return [Torsion(t.bc, list(t.ads), t.bond_idx) for t in self.torsions]

    def get_size(self) -> int:
        """Return the number of torsions."""
        return len(self.torsions)

    def set_data(self, torsion: Torsion) -> None:
        """Append a copy of ``torsion``."""
        self.torsions.append(Torsion(torsion.bc, list(torsion.ads), torsion.bond_idx))

    def fill_torsion_array(self, out: list[list[int]]) -> bool:
        """
        Append every dihedral as ``[a, b, c, d]`` atom indices.

        Parameters
        ----------
        out : list[list[int]]
            Caller-owned list to extend.

        Returns
        -------
        bool
            True if at least one quadruple was produced.
        """
        produced = 0
        for torsion in self.torsions:
            for quad in torsion.get_torsions():
                out.append([atom.idx for atom in quad])
                produced += 1
        return produced > 0
