"""Rotation matrices between MRI gradient, patient and device coordinates."""

from .basis import DegenerateOrientationError, build_basis, line_axis, rotate_in_plane
from .orientation import (
    Orientation,
    classification_rule,
    classify,
    orientation_from_direction_cosines,
)
from .patient_position import (
    PatientPosition,
    device_to_patient,
    device_to_patient_vector,
    patient_to_device,
    patient_to_device_vector,
)
from .trace_utils import get_logger
from .transforms import (
    device_to_gradient,
    direction_cosines_to_device,
    gradient_to_device,
    gradient_to_patient,
    patient_to_gradient,
)

__all__ = [
    "DegenerateOrientationError",
    "build_basis",
    "line_axis",
    "rotate_in_plane",
    "Orientation",
    "classification_rule",
    "classify",
    "orientation_from_direction_cosines",
    "PatientPosition",
    "device_to_patient",
    "device_to_patient_vector",
    "patient_to_device",
    "patient_to_device_vector",
    "get_logger",
    "device_to_gradient",
    "direction_cosines_to_device",
    "gradient_to_device",
    "gradient_to_patient",
    "patient_to_gradient",
]
