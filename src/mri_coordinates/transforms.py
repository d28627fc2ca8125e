"""Gradient ↔ patient ↔ device rotation matrices.

Functions
---------
gradient_to_patient(normal, beta)
    GCS → PCS for a patient-space slice normal.
gradient_to_device(normal, beta, position)
    GCS → DCS: the gradient basis is built in the patient frame and then
    rotated with ``patient_to_device(position)``.
patient_to_gradient, device_to_gradient
    Inverses (transposes) of the above.
direction_cosines_to_device(dc, beta)
    GCS → DCS straight from device-space direction cosines, without a
    patient position.

All matrices are orthonormal with determinant +1; columns are the read,
line and partition axes.
"""
from __future__ import annotations

import logging

import numpy as np
from scipy.spatial.transform import Rotation as R

from .basis import build_basis, line_axis
from .orientation import classify, orientation_from_direction_cosines
from .patient_position import PatientPosition, device_to_patient, patient_to_device
from .validators import unit_vector

logger = logging.getLogger(__name__)


def gradient_to_patient(normal, beta: float) -> np.ndarray:
    """Rotation matrix from GCS to PCS.

    Parameters
    ----------
    normal : array_like, shape (3,)
        Slice normal (partition direction) in patient coordinates.
    beta : float
        In-plane rotation in radians.

    Returns
    -------
    ndarray of shape (3, 3)
        Matrix ``G`` such that ``v_pcs = G @ v_gcs``.
    """
    orientation = classify(normal)
    return build_basis(normal, orientation, beta)


def patient_to_gradient(normal, beta: float) -> np.ndarray:
    """Rotation matrix from PCS to GCS."""
    return gradient_to_patient(normal, beta).T


def gradient_to_device(normal, beta: float, position: PatientPosition) -> np.ndarray:
    """Rotation matrix from GCS to DCS.

    The orientation is decided on the patient-space ``normal``; classifying
    after mapping to the device frame can pick a different orientation for
    the same slice, so that ordering is not used here.
    """
    G = gradient_to_patient(normal, beta)
    return patient_to_device(position) @ G


def device_to_gradient(normal, beta: float, position: PatientPosition) -> np.ndarray:
    """Rotation matrix from DCS to GCS."""
    return gradient_to_device(normal, beta, position).T


def direction_cosines_to_device(dc, beta: float) -> np.ndarray:
    """Rotation matrix from GCS to DCS for device-space direction cosines.

    The orientation is the axis with the largest squared direction cosine
    and the line axis uses the device-frame sign convention.  The in-plane
    rotation is applied as an elementary rotation about the partition axis.

    Parameters
    ----------
    dc : array_like, shape (3,)
        Partition direction cosines in device coordinates.
    beta : float
        In-plane rotation in radians.
    """
    partition = unit_vector(dc, "direction cosines")
    orientation = orientation_from_direction_cosines(partition)
    logger.debug("direction cosines %s -> %s", partition, orientation.name)
    line = line_axis(partition, orientation, sign=-1.0)
    read = np.cross(line, partition)
    basis = np.column_stack((read, line, partition))
    return basis @ R.from_euler("z", beta).as_matrix()


__all__ = [
    "gradient_to_patient",
    "patient_to_gradient",
    "gradient_to_device",
    "device_to_gradient",
    "device_to_patient",
    "direction_cosines_to_device",
]
