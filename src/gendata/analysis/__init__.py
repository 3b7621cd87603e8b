"""Numerical routines backing the record types."""

from gendata.analysis.lattice import (
    cell_vectors_from_parameters,
    check_lattice,
    fractional_matrix,
    lattice_type,
    parameters_from_vectors,
    vector_angle,
)

__all__ = [
    "cell_vectors_from_parameters",
    "check_lattice",
    "fractional_matrix",
    "lattice_type",
    "parameters_from_vectors",
    "vector_angle",
]
