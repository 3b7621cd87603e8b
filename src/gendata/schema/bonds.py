"""Records for bonds that are not (yet) ordinary bonds of the structure."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from gendata.schema.base import GenericData
from gendata.schema.handles import AtomRef, BondRef
from gendata.schema.kinds import DataKind


@dataclass
class ExternalBond:
    """
    Bond crossing a fragment boundary, such as a ring closure in a SMILES fragment.

    Attributes
    ----------
    idx : int
        Connection index shared by both ends of the external bond.
    atom : AtomRef, optional
        Atom outside the current fragment.
    bond : BondRef, optional
        Bond outside the current fragment.
    """

    idx: int = 0
    atom: Optional[AtomRef] = None
    bond: Optional[BondRef] = None

    def get_idx(self) -> int:
        return self.idx

    def get_atom(self) -> Optional[AtomRef]:
        return self.atom

    def get_bond(self) -> Optional[BondRef]:
        return self.bond

    def set_idx(self, idx: int) -> None:
        self.idx = idx

    def set_atom(self, atom: Optional[AtomRef]) -> None:
        self.atom = atom

    def set_bond(self, bond: Optional[BondRef]) -> None:
        self.bond = bond


@dataclass
class ExternalBondData(GenericData):
    """Ordered collection of external bonds for a structure."""

    KIND = DataKind.EXTERNAL_BOND

    bonds: list[ExternalBond] = field(default_factory=list)

    def set_data(self, atom: Optional[AtomRef], bond: Optional[BondRef], idx: int) -> None:
        """Append an external bond."""
        self.bonds.append(ExternalBond(idx=idx, atom=atom, bond=bond))

    def get_data(self) -> list[ExternalBond]:
        """Return a copy of the external bond list."""
        return [ExternalBond(eb.idx, eb.atom, eb.bond) for eb in self.bonds]

    def __len__(self) -> int:
        return len(self.bonds)

    def __iter__(self) -> Iterator[ExternalBond]:
        return iter(self.bonds)


@dataclass
class VirtualBondData(GenericData):
    """
    Bond to an atom that has not yet been added to the structure.

    Parsers create these while atoms are still streaming in and turn them into real
    bonds once the end atom exists. The bond fields cannot be changed after construction.

    Examples
    --------
    >>> vb = VirtualBondData(3, 7, 2)
    >>> vb.get_bgn(), vb.get_end(), vb.get_order(), vb.get_stereo()
    (3, 7, 2, 0)
    """

    KIND = DataKind.VIRTUAL_BOND
    _READ_ONLY = ("bgn", "end", "order", "stereo")

    bgn: int = 0
    end: int = 0
    order: int = 0
    stereo: int = 0

    def __setattr__(self, key, value) -> None:
        if key in self._READ_ONLY and key in self.__dict__:
            raise AttributeError(f"{self.__class__.__name__}.{key} is read-only")
        super().__setattr__(key, value)

    def get_bgn(self) -> int:
        return self.bgn

    def get_end(self) -> int:
        return self.end

    def get_order(self) -> int:
        return self.order

    def get_stereo(self) -> int:
        return self.stereo
