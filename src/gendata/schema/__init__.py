"""Record types attached to atoms, bonds, and structures."""

from typing import Union

from gendata.schema.angle import Angle, AngleData
from gendata.schema.base import GenericData
from gendata.schema.bonds import ExternalBond, ExternalBondData, VirtualBondData
from gendata.schema.conformer import ConformerData
from gendata.schema.custom import CustomData
from gendata.schema.handles import AtomRef, BondRef, RingRef
from gendata.schema.kinds import DataKind, resolve_kind
from gendata.schema.ring import RingData
from gendata.schema.symmetry import SymmetryData
from gendata.schema.text import CommentData, PairData
from gendata.schema.torsion import DistalPair, Torsion, TorsionData
from gendata.schema.unit_cell import UnitCellData

GenericRecord = Union[
    PairData,
    CommentData,
    ExternalBondData,
    VirtualBondData,
    RingData,
    UnitCellData,
    ConformerData,
    SymmetryData,
    TorsionData,
    AngleData,
    CustomData,
]

RECORD_TYPES: dict[DataKind, type[GenericData]] = {
    DataKind.PAIR: PairData,
    DataKind.COMMENT: CommentData,
    DataKind.EXTERNAL_BOND: ExternalBondData,
    DataKind.VIRTUAL_BOND: VirtualBondData,
    DataKind.RING: RingData,
    DataKind.UNIT_CELL: UnitCellData,
    DataKind.CONFORMER: ConformerData,
    DataKind.SYMMETRY: SymmetryData,
    DataKind.TORSION: TorsionData,
    DataKind.ANGLE: AngleData,
    DataKind.CUSTOM: CustomData,
}

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
    "DistalPair",
    "ExternalBond",
    "ExternalBondData",
    "GenericData",
    "GenericRecord",
    "PairData",
    "RingData",
    "RingRef",
    "SymmetryData",
    "Torsion",
    "TorsionData",
    "UnitCellData",
    "VirtualBondData",
    "resolve_kind",
]
