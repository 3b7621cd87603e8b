"""Infrastructure helpers."""

from gendata.utils.chem import get_atomic_number, is_valid_element
from gendata.utils.format import format_vector, resolve_units
from gendata.utils.logging import get_logger
from gendata.utils.validation import validate_points, validate_vector3

__all__ = [
    "format_vector",
    "get_atomic_number",
    "get_logger",
    "is_valid_element",
    "resolve_units",
    "validate_points",
    "validate_vector3",
]
