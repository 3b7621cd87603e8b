"""Plain string records: key/value pairs and free-text comments."""

from dataclasses import dataclass

from gendata.schema.base import GenericData
from gendata.schema.kinds import DataKind


@dataclass
class PairData(GenericData):
    """Arbitrary attribute/value pair; ``name`` is the key."""

    KIND = DataKind.PAIR

    value: str = ""

    def set_value(self, value: str) -> None:
        """Set the stored value."""
        self.value = str(value)

    def get_value(self) -> str:
        """Return the stored value."""
        return self.value


@dataclass
class CommentData(GenericData):
    """
    Comment text, possibly spanning several lines.

    Leading and trailing whitespace is stripped whenever the text is set.
    """

    KIND = DataKind.COMMENT

    data: str = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        self.data = self.data.strip()

    def set_data(self, data: str) -> None:
        """Set the comment text, trimming surrounding whitespace."""
        self.data = str(data).strip()

    def get_data(self) -> str:
        """Return the comment text."""
        return self.data
