"""
Crystallographic unit cell with conversion between fractional and Cartesian coordinates.

The cell can be defined either by six parameters or by three translation vectors. The
two setters are independent: ``set_data`` does not touch stored vectors other than
discarding them, and ``set_vectors`` does not recompute the parameters unless
``derive_parameters`` is called. Whichever representation was set last is authoritative.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gendata.analysis.lattice import (
    cell_vectors_from_parameters,
    check_lattice,
    fractional_matrix,
    lattice_type,
    parameters_from_vectors,
)
from gendata.config.unit_registry import load_unit_registry
from gendata.data.mapped import get_stored_unit
from gendata.schema.base import GenericData
from gendata.schema.kinds import DataKind
from gendata.utils.format import format_vector, resolve_units
from gendata.utils.logging import get_logger
from gendata.utils.validation import validate_points, validate_vector3

logger = get_logger(__name__)

# fractional coordinates this close to 1 wrap to 0
WRAP_TOLERANCE = 1e-8


@dataclass(eq=False)
class UnitCellData(GenericData):
    """
    Periodic cell described by lengths and angles or by translation vectors.

    Attributes
    ----------
    a, b, c : float
        Cell lengths in Angstrom.
    alpha, beta, gamma : float
        Cell angles in degrees.
    offset : NDArray[np.float64]
        Origin shift applied after orthogonalization.
    space_group : str
        Space-group symbol; stored verbatim.

    Notes
    -----
    - The orthogonalization matrix has the cell vectors as columns: ``cart = ortho @ frac + offset``.
    - ``get_fractional_matrix`` raises ``SingularLatticeError`` for zero-volume cells.
    """

    KIND = DataKind.UNIT_CELL

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0
    offset: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    space_group: str = ""
    _vectors: Optional[NDArray[np.float64]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.offset = validate_vector3(self.offset, name="offset")

    def set_data(
        self,
        a: float,
        b: float,
        c: float,
        alpha: float,
        beta: float,
        gamma: float,
        angle_units: str = "",
    ) -> None:
        """
        Define the cell by its six parameters.

        Parameters
        ----------
        a, b, c : float
            Cell lengths in Angstrom.
        alpha, beta, gamma : float
            Cell angles, in degrees unless ``angle_units`` says otherwise.
        angle_units : str, optional
            Units of the given angles (e.g., "radian"). Defaults to degrees.
        """
        stored = get_stored_unit("cell_angle")
        units = resolve_units(angle_units, stored)
        if units != stored:
            Q_ = load_unit_registry().Quantity
            alpha, beta, gamma = (float(Q_(x, units).to(stored).magnitude) for x in (alpha, beta, gamma))

        self.a, self.b, self.c = float(a), float(b), float(c)
        self.alpha, self.beta, self.gamma = float(alpha), float(beta), float(gamma)
        self._vectors = None
        logger.debug(f"Set cell parameters a={a}, b={b}, c={c}, alpha={alpha}, beta={beta}, gamma={gamma}")

    def set_vectors(self, v1: ArrayLike, v2: ArrayLike, v3: ArrayLike) -> None:
        """Define the cell by its translation vectors; cell parameters are left as they are."""
        self._vectors = np.vstack(
            [validate_vector3(v, name=f"v{i}") for i, v in enumerate((v1, v2, v3), start=1)]
        )
        logger.debug(f"Set cell vectors {', '.join(format_vector(v) for v in self._vectors)}")

    def has_vectors(self) -> bool:
        """Return True if translation vectors were set explicitly."""
        return self._vectors is not None

    def derive_parameters(self) -> None:
        """Recompute the six cell parameters from explicitly set translation vectors."""
        if self._vectors is None:
            return
        self.a, self.b, self.c, self.alpha, self.beta, self.gamma = parameters_from_vectors(*self._vectors)

    def set_offset(self, offset: ArrayLike) -> None:
        self.offset = validate_vector3(offset, name="offset")

    def get_offset(self) -> NDArray[np.float64]:
        return self.offset.copy()

    def set_space_group(self, space_group: str) -> None:
        """Set the space-group symbol; no SymmetryData record is created."""
        self.space_group = space_group

    def get_space_group(self) -> str:
        return self.space_group

    def get_a(self) -> float:
        return self.a

    def get_b(self) -> float:
        return self.b

    def get_c(self) -> float:
        return self.c

    def get_alpha(self) -> float:
        return self.alpha

    def get_beta(self) -> float:
        return self.beta

    def get_gamma(self) -> float:
        return self.gamma

    def parameters(self, angle_units: str = "") -> tuple[float, float, float, float, float, float]:
        """Return ``(a, b, c, alpha, beta, gamma)`` with angles in the requested units."""
        stored = get_stored_unit("cell_angle")
        units = resolve_units(angle_units, stored)
        angles = (self.alpha, self.beta, self.gamma)
        if units != stored:
            Q_ = load_unit_registry().Quantity
            angles = tuple(float(Q_(x, stored).to(units).magnitude) for x in angles)
        return (self.a, self.b, self.c, *angles)

    def get_cell_vectors(self) -> list[NDArray[np.float64]]:
        """
        Return the three translation vectors.

        Explicitly set vectors are returned as they are; otherwise the vectors are built
        from the cell parameters.
        """
        if self._vectors is not None:
            return [v.copy() for v in self._vectors]
        matrix = cell_vectors_from_parameters(self.a, self.b, self.c, self.alpha, self.beta, self.gamma)
        return list(matrix)

    def get_cell_matrix(self) -> NDArray[np.float64]:
        """Return the translation vectors as the rows of a 3x3 matrix."""
        return np.vstack(self.get_cell_vectors())

    def get_ortho_matrix(self) -> NDArray[np.float64]:
        """Return the matrix converting fractional to Cartesian coordinates."""
        return self.get_cell_matrix().T

    def get_fractional_matrix(self) -> NDArray[np.float64]:
        """Return the matrix converting Cartesian to fractional coordinates."""
        return fractional_matrix(self.get_ortho_matrix())

    def get_cell_volume(self) -> float:
        """Return the cell volume in cubic Angstrom."""
        return check_lattice(self.get_cell_matrix())

    def fractional_to_cartesian(self, frac: ArrayLike) -> NDArray[np.float64]:
        """
        Convert fractional coordinates to Cartesian coordinates.

        Parameters
        ----------
        frac : array_like
            A single point of shape (3,) or an array of points of shape (N, 3).

        Returns
        -------
        NDArray[np.float64]
            Cartesian coordinates with the same shape as the input.
        """
        points = validate_points(frac)
        return points @ self.get_ortho_matrix().T + self.offset

    def cartesian_to_fractional(self, cart: ArrayLike) -> NDArray[np.float64]:
        """Convert Cartesian coordinates of shape (3,) or (N, 3) to fractional coordinates."""
        points = validate_points(cart)
        return (points - self.offset) @ self.get_fractional_matrix().T

    def wrap_fractional_coordinate(self, frac: ArrayLike) -> NDArray[np.float64]:
        """Map fractional coordinates into the [0, 1) interval."""
        wrapped = np.mod(validate_points(frac), 1.0)
        wrapped[np.isclose(wrapped, 1.0, rtol=0.0, atol=WRAP_TOLERANCE)] = 0.0
        return wrapped

    def lattice_type(self) -> str:
        """Return the lattice system implied by the cell parameters."""
        return lattice_type(self.a, self.b, self.c, self.alpha, self.beta, self.gamma)
