"""
Base record type for auxiliary data attached to atoms, bonds, and structures.

Every record carries a free-text attribute name and a kind tag. The tag is fixed by the
concrete record class and cannot be reassigned; the name is a mutable label used for
string lookups.
"""

import copy
from dataclasses import dataclass, field
from typing import ClassVar

from gendata.schema.kinds import DataKind


@dataclass
class GenericData:
    """
    Tagged record base.

    Attributes
    ----------
    name : str
        Attribute label (e.g., "UnitCell", "Comment" or "Author"). Defaults to the
        attribute name registered for the record's kind.
    """

    KIND: ClassVar[DataKind] = DataKind.UNDEFINED

    name: str = field(default="", kw_only=True)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = self.KIND.default_attribute

    @property
    def kind(self) -> DataKind:
        """DataKind: Kind tag of the record."""
        return self.KIND

    def set_name(self, name: str) -> None:
        """Set the attribute label."""
        self.name = name

    def get_name(self) -> str:
        """Return the attribute label."""
        return self.name

    def get_kind(self) -> DataKind:
        """Return the kind tag."""
        return self.KIND

    def copy(self):
        """Return an independent copy of the record."""
        return copy.deepcopy(self)
