"""Input validation helpers used at the public API boundary."""

from __future__ import annotations

import numpy as np


def assert_finite(name: str, arr: np.ndarray) -> None:
    """Error if ``arr`` contains NaN or infinite values."""
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")


def as_vector3(vec, name: str = "vector") -> np.ndarray:
    """Return ``vec`` as a fresh float array of shape ``(3,)``.

    Raises
    ------
    ValueError
        If ``vec`` does not hold exactly three finite components.
    """
    arr = np.array(vec, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have exactly 3 components, got shape {arr.shape}")
    assert_finite(name, arr)
    return arr


def unit_vector(vec, name: str = "vector") -> np.ndarray:
    """Return ``vec`` normalised to unit length."""
    arr = as_vector3(vec, name)
    norm = np.linalg.norm(arr)
    if norm == 0:
        raise ValueError(f"{name} has zero length")
    return arr / norm
