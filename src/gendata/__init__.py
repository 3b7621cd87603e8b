"""gendata package."""

from gendata._version import __version__
from gendata.core import DataStore
from gendata.exceptions import GenericDataError, SingularLatticeError, UnknownDataKindError
from gendata.schema import (
    RECORD_TYPES,
    Angle,
    AngleData,
    AtomRef,
    BondRef,
    CommentData,
    ConformerData,
    CustomData,
    DataKind,
    ExternalBond,
    ExternalBondData,
    GenericData,
    PairData,
    RingData,
    RingRef,
    SymmetryData,
    Torsion,
    TorsionData,
    UnitCellData,
    VirtualBondData,
    resolve_kind,
)

__all__ = [
    "RECORD_TYPES",
    "Angle",
    "AngleData",
    "AtomRef",
    "BondRef",
    "CommentData",
    "ConformerData",
    "CustomData",
    "DataKind",
    "DataStore",
    "ExternalBond",
    "ExternalBondData",
    "GenericData",
    "GenericDataError",
    "PairData",
    "RingData",
    "RingRef",
    "SingularLatticeError",
    "SymmetryData",
    "Torsion",
    "TorsionData",
    "UnitCellData",
    "UnknownDataKindError",
    "VirtualBondData",
    "__version__",
]
