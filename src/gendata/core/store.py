"""Generic-data collection owned by an atom, bond, or structure."""

from collections import defaultdict
from typing import Iterator, Optional

from natsort import natsorted

from gendata.exceptions import UnknownDataKindError
from gendata.schema import RECORD_TYPES, GenericRecord
from gendata.schema.base import GenericData
from gendata.schema.kinds import DataKind, resolve_kind
from gendata.utils.logging import get_logger


class DataStore:
    """
    Records attached to one owning entity, queryable by kind or by attribute name.

    Parameters
    ----------
    records : list[GenericData], optional
        Records to attach on construction.
    verbose : bool, optional
        If True, enables detailed logging output.

    Notes
    -----
    - Records keep their insertion order in every query.
    - The store does no locking; callers sharing it across threads must serialize access.
    """

    def __init__(self, records: Optional[list[GenericData]] = None, verbose: bool = False) -> None:
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self._records: list[GenericData] = []
        for record in records or []:
            self.attach(record)

    def attach(self, record: GenericData, name: Optional[str] = None) -> GenericData:
        """
        Attach a record, optionally renaming it first.

        Returns
        -------
        GenericData
            The attached record.
        """
        if not isinstance(record, GenericData):
            raise TypeError(f"Expected a GenericData record, got {type(record).__name__}")
        if name is not None:
            record.set_name(name)
        self._records.append(record)
        self.logger.debug(f"Attached {record.kind.name} record '{record.name}'")
        return record

    def detach(self, record: GenericData) -> bool:
        """Remove a record by identity; False if it was not attached."""
        for i, attached in enumerate(self._records):
            if attached is record:
                del self._records[i]
                self.logger.debug(f"Detached {record.kind.name} record '{record.name}'")
                return True
        return False

    def clear(self) -> None:
        """Remove all records."""
        self._records.clear()

    def _group_by_kind(self) -> dict[DataKind, list[GenericData]]:
        """group the records by kind."""
        grouped = defaultdict(list)
        for record in self._records:
            grouped[record.kind].append(record)
        return grouped

    def get_by_kind(self, kind: DataKind | str) -> list[GenericRecord]:
        """Get list of records by kind; kind aliases such as "UnitCell" are accepted."""
        return self._group_by_kind().get(resolve_kind(kind), [])

    def get_by_name(self, name: str) -> list[GenericData]:
        """Get list of records by attribute name."""
        return [record for record in self._records if record.name == name]

    def get(self, key: DataKind | str) -> Optional[GenericRecord]:
        """
        Get the first record matching a kind or attribute name.

        Strings are matched against attribute names first and exact kind aliases second.
        """
        if isinstance(key, str):
            by_name = self.get_by_name(key)
            if by_name:
                return by_name[0]
        try:
            by_kind = self.get_by_kind(resolve_kind(key, cutoff=1.0))
        except UnknownDataKindError:
            return None
        return by_kind[0] if by_kind else None

    def get_typed(self, kind: DataKind | str) -> list[GenericRecord]:
        """Get records of a kind, checked against the class registered for that kind."""
        kind = resolve_kind(kind)
        cls = RECORD_TYPES.get(kind)
        if cls is None:
            raise UnknownDataKindError(f"No record type is registered for {kind.name}")

        records = self.get_by_kind(kind)
        for record in records:
            if not isinstance(record, cls):
                raise TypeError(f"Record '{record.name}' has kind {kind.name} but type {type(record).__name__}")
        return records

    def has_data(self, key: DataKind | str) -> bool:
        """Check for a record matching a kind or attribute name."""
        return self.get(key) is not None

    def names(self) -> list[str]:
        """Get the unique attribute names in natural sort order."""
        return natsorted({record.name for record in self._records})

    def all(self) -> list[GenericData]:
        """Get all records."""
        return list(self._records)

    def __iter__(self) -> Iterator[GenericData]:
        """Allows you to loop over records directly.

        Examples
        --------
        >>> store = DataStore([CommentData("made by hand")])
        >>> for record in store:
        ...     print(record.name)
        Comment
        """
        return iter(self._records)

    def __len__(self) -> int:
        """Get the number of attached records."""
        return len(self._records)

    def __contains__(self, record: object) -> bool:
        return any(attached is record for attached in self._records)
