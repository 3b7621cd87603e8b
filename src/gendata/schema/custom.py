"""Open-ended record for data kinds defined by downstream code."""

from dataclasses import dataclass
from typing import Any

from gendata.schema.base import GenericData
from gendata.schema.kinds import DataKind


@dataclass
class CustomData(GenericData):
    """
    Arbitrary payload under a caller-chosen tag.

    Attributes
    ----------
    tag : str
        Identifier of the downstream data type (e.g., "myapp.docking_score").
    payload : Any
        The attached data; bytes or any typed object.

    Notes
    -----
    - All custom records share ``DataKind.CUSTOM``; use ``tag`` to tell them apart.
    - When no name is given the tag is used as the attribute name.
    """

    KIND = DataKind.CUSTOM

    tag: str = ""
    payload: Any = None

    def __post_init__(self) -> None:
        if not self.name:
            self.name = self.tag or self.KIND.default_attribute

    def get_tag(self) -> str:
        return self.tag

    def get_payload(self) -> Any:
        return self.payload

    def set_payload(self, payload: Any) -> None:
        self.payload = payload
