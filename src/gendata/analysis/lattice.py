"""
Crystallographic lattice geometry.

Converts between the six cell parameters (a, b, c, alpha, beta, gamma) and the three
real-space translation vectors, and builds the matrices that map fractional coordinates
to Cartesian coordinates and back.

Conventions
-----------
- Angles are in degrees, lengths in Angstrom.
- Cell matrices hold the translation vectors as rows.
- The orthogonalization matrix holds them as columns, so that ``cart = ortho @ frac``.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gendata.exceptions import SingularLatticeError

# smallest accepted ratio of cell volume to |v1| |v2| |v3|
SINGULAR_TOLERANCE = 1e-10
# tolerance used when classifying lattices from their parameters
LATTICE_TOLERANCE = 1e-4


def cell_vectors_from_parameters(
    a: float, b: float, c: float, alpha: float, beta: float, gamma: float
) -> NDArray[np.float64]:
    """
    Build translation vectors from cell parameters.

    The first vector lies along x, the second in the xy-plane at ``gamma`` from the
    first, and the third is fixed by the remaining angles so the cell volume is positive.

    Parameters
    ----------
    a, b, c : float
        Cell lengths.
    alpha, beta, gamma : float
        Cell angles in degrees; alpha is between b and c, beta between a and c,
        gamma between a and b.

    Returns
    -------
    NDArray[np.float64]
        Array of shape (3, 3) whose rows are the translation vectors.
    """
    cos_a, cos_b, cos_g = np.cos(np.radians([alpha, beta, gamma]))
    sin_g = np.sin(np.radians(gamma))

    if min(a, b, c) <= 0:
        raise SingularLatticeError(f"Cell lengths must be positive, got a={a}, b={b}, c={c}")
    if abs(sin_g) < SINGULAR_TOLERANCE:
        raise SingularLatticeError(f"Cell angle gamma={gamma} makes the first two vectors collinear")

    # squared volume of the cell with unit edge lengths
    unit_volume_sq = 1.0 - cos_a**2 - cos_b**2 - cos_g**2 + 2.0 * cos_a * cos_b * cos_g
    if unit_volume_sq <= SINGULAR_TOLERANCE**2:
        raise SingularLatticeError(f"Cell angles ({alpha}, {beta}, {gamma}) do not span a three-dimensional cell")

    v1 = np.array([a, 0.0, 0.0])
    v2 = np.array([b * cos_g, b * sin_g, 0.0])
    v3 = np.array(
        [
            c * cos_b,
            c * (cos_a - cos_b * cos_g) / sin_g,
            c * np.sqrt(unit_volume_sq) / sin_g,
        ]
    )
    return np.vstack([v1, v2, v3])


def vector_angle(u: ArrayLike, v: ArrayLike) -> float:
    """Return the angle between two vectors in degrees."""
    u = np.asarray(u, dtype=float)
    v = np.asarray(v, dtype=float)
    norms = np.linalg.norm(u) * np.linalg.norm(v)
    if norms == 0:
        raise SingularLatticeError("Cannot measure an angle against a zero-length vector")
    cos_theta = np.clip(np.dot(u, v) / norms, -1.0, 1.0)
    return float(np.degrees(np.arccos(cos_theta)))


def parameters_from_vectors(
    v1: ArrayLike, v2: ArrayLike, v3: ArrayLike
) -> tuple[float, float, float, float, float, float]:
    """
    Compute cell parameters from translation vectors.

    Returns
    -------
    tuple[float, float, float, float, float, float]
        ``(a, b, c, alpha, beta, gamma)`` with angles in degrees.
    """
    a, b, c = (float(np.linalg.norm(v)) for v in (v1, v2, v3))
    alpha = vector_angle(v2, v3)
    beta = vector_angle(v1, v3)
    gamma = vector_angle(v1, v2)
    return a, b, c, alpha, beta, gamma


def check_lattice(cell_matrix: ArrayLike) -> float:
    """
    Check that a cell matrix spans three dimensions.

    Parameters
    ----------
    cell_matrix : array_like
        Matrix of shape (3, 3) with the translation vectors as rows.

    Returns
    -------
    float
        Absolute cell volume.
    """
    matrix = np.asarray(cell_matrix, dtype=float)
    scale = float(np.prod(np.linalg.norm(matrix, axis=1)))
    volume = abs(float(np.linalg.det(matrix)))

    if scale == 0.0 or not np.isfinite(volume) or volume / scale <= SINGULAR_TOLERANCE:
        raise SingularLatticeError(f"Singular lattice: cell volume {volume:.3e} for vectors {matrix.tolist()}")
    return volume


def fractional_matrix(ortho: ArrayLike) -> NDArray[np.float64]:
    """Invert an orthogonalization matrix after checking it is not singular."""
    ortho = np.asarray(ortho, dtype=float)
    check_lattice(ortho.T)
    return np.linalg.inv(ortho)


def lattice_type(a: float, b: float, c: float, alpha: float, beta: float, gamma: float) -> str:
    """
    Classify a lattice from its cell parameters.

    Returns
    -------
    str
        One of "triclinic", "monoclinic", "orthorhombic", "tetragonal", "rhombohedral",
        "hexagonal", or "cubic".
    """

    def same(x: float, y: float) -> bool:
        return bool(np.isclose(x, y, rtol=LATTICE_TOLERANCE, atol=LATTICE_TOLERANCE))

    right_angles = sum(same(angle, 90.0) for angle in (alpha, beta, gamma))
    equal_lengths = same(a, b) + same(b, c) + same(a, c)

    if right_angles == 3:
        if equal_lengths == 3:
            return "cubic"
        if equal_lengths >= 1:
            return "tetragonal"
        return "orthorhombic"

    if same(alpha, 90.0) and same(beta, 90.0) and same(gamma, 120.0) and same(a, b):
        return "hexagonal"

    if equal_lengths == 3 and same(alpha, beta) and same(beta, gamma):
        return "rhombohedral"

    if right_angles == 2:
        return "monoclinic"

    return "triclinic"
