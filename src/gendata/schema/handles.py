"""
Stable handles to atoms, bonds, and rings owned by a structure.

Records refer to entities through these frozen handles instead of holding the entities
themselves. A handle records identity only; whether the entity still exists is for the
owning structure to decide, using ``generation`` to detect reuse of an index.
"""

from dataclasses import dataclass, field

from gendata.utils.chem import get_atomic_number

HYDROGEN = 1


@dataclass(frozen=True)
class AtomRef:
    """
    Handle to an atom.

    Attributes
    ----------
    idx : int
        Zero-based identifier of the atom within its structure.
    atomic_num : int
        Atomic number, 0 when unknown. Not part of the handle's identity.
    generation : int
        Arena generation of the slot ``idx`` at the time the handle was taken.
    """

    idx: int
    atomic_num: int = field(default=0, compare=False)
    generation: int = 0

    @classmethod
    def from_symbol(cls, idx: int, symbol: str, generation: int = 0) -> "AtomRef":
        """Build a handle from an element symbol."""
        return cls(idx=idx, atomic_num=get_atomic_number(symbol), generation=generation)

    def is_hydrogen(self) -> bool:
        """Return True for hydrogen atoms."""
        return self.atomic_num == HYDROGEN


@dataclass(frozen=True)
class BondRef:
    """Handle to a bond between two atoms."""

    idx: int
    begin: AtomRef
    end: AtomRef
    order: int = 1
    generation: int = 0

    def get_nbr_atom(self, atom: AtomRef) -> AtomRef:
        """Return the atom at the other end of the bond."""
        if atom == self.begin:
            return self.end
        if atom == self.end:
            return self.begin
        raise ValueError(f"Atom {atom.idx} is not part of bond {self.idx}")


@dataclass(frozen=True)
class RingRef:
    """Handle to a perceived ring, listing member atom identifiers in ring order."""

    idx: int
    atom_ids: tuple[int, ...]
    generation: int = 0

    @property
    def size(self) -> int:
        """int: Number of atoms in the ring."""
        return len(self.atom_ids)

    def is_member(self, atom_id: int) -> bool:
        """Check whether an atom identifier belongs to the ring."""
        return atom_id in self.atom_ids
