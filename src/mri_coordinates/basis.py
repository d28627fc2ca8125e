"""Construction of the gradient coordinate system basis.

The basis is returned as a 3×3 matrix whose columns are the read, line and
partition axes expressed in the frame of the supplied normal.  The line
axis is kept inside a canonical plane chosen by the orientation: for
sagittal and coronal slices it has no third component, for transversal
slices no first component.  Since the gradient system can only be tilted
about two physical axes the line axis never leaves that plane, which makes
the construction deterministic.
"""

from __future__ import annotations

import numpy as np

from .constants import DEGENERATE_EPSILON
from .orientation import Orientation
from .validators import unit_vector


class DegenerateOrientationError(ValueError):
    """Raised when the normal lies on the axis excluded by the orientation."""

    def __init__(self, orientation: Orientation, normal: np.ndarray):
        self.orientation = orientation
        self.normal = normal
        super().__init__(
            f"degenerate orientation: normal {normal} has no component in the "
            f"{orientation.name.lower()} line plane"
        )


def line_axis(normal, orientation: Orientation, sign: float = 1.0) -> np.ndarray:
    """Return the unit line axis orthogonal to ``normal``.

    ``sign=1`` gives the patient-frame convention, ``sign=-1`` the
    device-frame convention used for raw direction cosines.
    """
    if not isinstance(orientation, Orientation):
        raise TypeError(f"expected Orientation, got {type(orientation).__name__}")
    n1, n2, n3 = unit_vector(normal, "normal")
    if orientation is Orientation.TRANSVERSAL:
        norm = np.hypot(n2, n3)
        line = np.array([0.0, -n3, n2])
    elif orientation is Orientation.SAGITTAL:
        norm = np.hypot(n1, n2)
        line = np.array([-n2, n1, 0.0])
    else:
        norm = np.hypot(n1, n2)
        line = np.array([n2, -n1, 0.0])
    if norm <= DEGENERATE_EPSILON:
        raise DegenerateOrientationError(orientation, np.array([n1, n2, n3]))
    return sign * line / norm


def rotate_in_plane(basis: np.ndarray, beta: float) -> np.ndarray:
    """Rotate read and line axes by ``beta`` radians about the partition axis.

    ``read' = cos(beta) read + sin(beta) line`` and
    ``line' = cos(beta) line - sin(beta) read``; the partition column is
    copied unchanged.
    """
    basis = np.asarray(basis, dtype=float)
    if basis.shape != (3, 3):
        raise ValueError(f"basis must be 3x3, got shape {basis.shape}")
    c, s = np.cos(beta), np.sin(beta)
    read, line, partition = basis.T
    return np.column_stack((c * read + s * line, c * line - s * read, partition))


def build_basis(normal, orientation: Orientation, beta: float = 0.0) -> np.ndarray:
    """Return the read/line/partition basis for a slice normal.

    Parameters
    ----------
    normal : array_like, shape (3,)
        Partition direction in the working frame.  Re-normalised.
    orientation : Orientation
        Canonical orientation selecting the plane of the line axis.
    beta : float, optional
        In-plane rotation in radians.

    Returns
    -------
    ndarray of shape (3, 3)
        Right-handed orthonormal matrix with columns (read, line, partition).

    Raises
    ------
    DegenerateOrientationError
        If ``normal`` lies on the axis excluded by ``orientation``.
    """
    partition = unit_vector(normal, "normal")
    line = line_axis(partition, orientation)
    read = np.cross(line, partition)
    return rotate_in_plane(np.column_stack((read, line, partition)), beta)


__all__ = [
    "DegenerateOrientationError",
    "build_basis",
    "line_axis",
    "rotate_in_plane",
]
