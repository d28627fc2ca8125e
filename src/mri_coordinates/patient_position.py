"""Patient coordinate system ↔ device coordinate system rotations.

Each patient position fixes a signed permutation between the anatomical
axes (sagittal, coronal, transversal) and the physical gradient axes
(x, y, z) of the scanner.  Rows of the matrices are device axes, columns
are patient axes, so ``v_dcs = patient_to_device(pos) @ v_pcs``.

The matrices are proper rotations (determinant +1) and
``device_to_patient`` is their transpose.
"""
from __future__ import annotations

import enum
from typing import Dict

import numpy as np

from .validators import as_vector3


class PatientPosition(enum.Enum):
    """Patient table position, valued by its DICOM abbreviation."""

    HEAD_FIRST_SUPINE = "HFS"
    HEAD_FIRST_PRONE = "HFP"
    HEAD_FIRST_LATERAL_RIGHT = "HFDR"
    HEAD_FIRST_LATERAL_LEFT = "HFDL"
    FEET_FIRST_SUPINE = "FFS"
    FEET_FIRST_PRONE = "FFP"
    FEET_FIRST_LATERAL_RIGHT = "FFDR"
    FEET_FIRST_LATERAL_LEFT = "FFDL"

    @classmethod
    def from_code(cls, code: str) -> "PatientPosition":
        """Return the position for a DICOM abbreviation such as ``"HFS"``."""
        try:
            return cls(code.strip().upper())
        except (AttributeError, ValueError):
            raise ValueError(f"unknown patient position code: {code!r}") from None


def _table(rows) -> np.ndarray:
    R = np.array(rows, dtype=float)
    R.setflags(write=False)
    return R


_PCS_TO_DCS: Dict[PatientPosition, np.ndarray] = {
    #                                         sag   cor   tra
    PatientPosition.HEAD_FIRST_SUPINE: _table([[ 1,  0,  0],    # x = +sag
                                               [ 0, -1,  0],    # y = -cor
                                               [ 0,  0, -1]]),  # z = -tra
    PatientPosition.HEAD_FIRST_PRONE: _table([[-1,  0,  0],
                                              [ 0,  1,  0],
                                              [ 0,  0, -1]]),
    PatientPosition.HEAD_FIRST_LATERAL_RIGHT: _table([[ 0,  1,  0],
                                                      [ 1,  0,  0],
                                                      [ 0,  0, -1]]),
    PatientPosition.HEAD_FIRST_LATERAL_LEFT: _table([[ 0, -1,  0],
                                                     [-1,  0,  0],
                                                     [ 0,  0, -1]]),
    PatientPosition.FEET_FIRST_SUPINE: _table([[-1,  0,  0],
                                               [ 0, -1,  0],
                                               [ 0,  0,  1]]),
    PatientPosition.FEET_FIRST_PRONE: _table([[ 1,  0,  0],
                                              [ 0,  1,  0],
                                              [ 0,  0,  1]]),
    PatientPosition.FEET_FIRST_LATERAL_RIGHT: _table([[ 0, -1,  0],
                                                      [ 1,  0,  0],
                                                      [ 0,  0,  1]]),
    PatientPosition.FEET_FIRST_LATERAL_LEFT: _table([[ 0,  1,  0],
                                                     [-1,  0,  0],
                                                     [ 0,  0,  1]]),
}


def _lookup(position: PatientPosition) -> np.ndarray:
    if not isinstance(position, PatientPosition):
        raise TypeError(f"expected PatientPosition, got {type(position).__name__}")
    return _PCS_TO_DCS[position]


def patient_to_device(position: PatientPosition) -> np.ndarray:
    """Rotation matrix from PCS to DCS.

    Parameters
    ----------
    position : PatientPosition
        Position of the patient on the table.

    Returns
    -------
    ndarray of shape (3, 3)
        Signed permutation matrix with exactly one ±1 per row and column.
    """
    return _lookup(position).copy()


def device_to_patient(position: PatientPosition) -> np.ndarray:
    """Rotation matrix from DCS to PCS (transpose of ``patient_to_device``)."""
    return _lookup(position).T.copy()


def patient_to_device_vector(vec_pcs, position: PatientPosition) -> np.ndarray:
    """Rotate a PCS vector into the DCS."""
    return _lookup(position) @ as_vector3(vec_pcs, "vec_pcs")


def device_to_patient_vector(vec_dcs, position: PatientPosition) -> np.ndarray:
    """Rotate a DCS vector into the PCS."""
    return _lookup(position).T @ as_vector3(vec_dcs, "vec_dcs")


__all__ = [
    "PatientPosition",
    "patient_to_device",
    "device_to_patient",
    "patient_to_device_vector",
    "device_to_patient_vector",
]
