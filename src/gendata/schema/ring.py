"""Smallest set of smallest rings (SSSR) perceived for a structure."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from gendata.schema.base import GenericData
from gendata.schema.handles import RingRef
from gendata.schema.kinds import DataKind


@dataclass
class RingData(GenericData):
    """
    Ordered list of ring handles, filled by an external ring-perception routine.

    The record is created once per structure after ring perception and should be
    cleared or replaced whenever the structure's graph changes.
    """

    KIND = DataKind.RING

    rings: list[RingRef] = field(default_factory=list)

    def set_data(self, rings: Iterable[RingRef]) -> None:
        """Replace the ring list."""
        self.rings = list(rings)

    def push_back(self, ring: RingRef) -> None:
        """Append a single ring."""
        self.rings.append(ring)

    def get_data(self) -> list[RingRef]:
        """Return a copy of the ring list."""
        return list(self.rings)

    def clear(self) -> None:
        self.rings.clear()

    def __len__(self) -> int:
        return len(self.rings)

    def __iter__(self) -> Iterator[RingRef]:
        return iter(self.rings)
