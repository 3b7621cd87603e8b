"""Point-group and space-group labels."""

from dataclasses import dataclass

from gendata.schema.base import GenericData
from gendata.schema.kinds import DataKind


@dataclass
class SymmetryData(GenericData):
    """
    Point-group and/or space-group symmetry labels.

    Labels are stored verbatim; no conversion between symbol notations is attempted.
    """

    KIND = DataKind.SYMMETRY

    point_group: str = ""
    space_group: str = ""

    def set_data(self, point_group: str, space_group: str = "") -> None:
        self.point_group = point_group
        self.space_group = space_group

    def set_point_group(self, point_group: str) -> None:
        self.point_group = point_group

    def set_space_group(self, space_group: str) -> None:
        self.space_group = space_group

    def get_point_group(self) -> str:
        return self.point_group

    def get_space_group(self) -> str:
        return self.space_group
