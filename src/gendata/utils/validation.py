"""
Contains generic input validation utilities used across gendata modules.

These functions are stateless and reusable, designed to enforce type, value, and shape constraints
without introducing domain-specific logic.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray


def validate_vector3(vec: ArrayLike, name: str = "vector") -> NDArray[np.float64]:
    """Return a copy of ``vec`` as a float array of shape (3,)."""
    try:
        arr = np.array(vec, dtype=float)
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a numeric 3-vector, got {vec!r}") from e

    if arr.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {arr.shape}")
    return arr


def validate_points(points: ArrayLike) -> NDArray[np.float64]:
    """Return points as a float array of shape (3,) or (N, 3)."""
    arr = np.array(points, dtype=float)
    if arr.ndim == 1 and arr.shape == (3,):
        return arr
    if arr.ndim == 2 and arr.shape[1] == 3:
        return arr
    raise ValueError(f"Expected a point of shape (3,) or an array of shape (N, 3), got {arr.shape}")
