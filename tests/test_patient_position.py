import numpy as np
import pytest

from mri_coordinates.patient_position import (
    PatientPosition,
    device_to_patient,
    device_to_patient_vector,
    patient_to_device,
    patient_to_device_vector,
)

ALL_POSITIONS = list(PatientPosition)

# (device x, device y, device z) as (sign, patient axis index)
EXPECTED = {
    PatientPosition.HEAD_FIRST_SUPINE: [(1, 0), (-1, 1), (-1, 2)],
    PatientPosition.HEAD_FIRST_PRONE: [(-1, 0), (1, 1), (-1, 2)],
    PatientPosition.HEAD_FIRST_LATERAL_RIGHT: [(1, 1), (1, 0), (-1, 2)],
    PatientPosition.HEAD_FIRST_LATERAL_LEFT: [(-1, 1), (-1, 0), (-1, 2)],
    PatientPosition.FEET_FIRST_SUPINE: [(-1, 0), (-1, 1), (1, 2)],
    PatientPosition.FEET_FIRST_PRONE: [(1, 0), (1, 1), (1, 2)],
    PatientPosition.FEET_FIRST_LATERAL_RIGHT: [(-1, 1), (1, 0), (1, 2)],
    PatientPosition.FEET_FIRST_LATERAL_LEFT: [(1, 1), (-1, 0), (1, 2)],
}


def test_eight_positions():
    assert len(ALL_POSITIONS) == 8


@pytest.mark.parametrize("position", ALL_POSITIONS)
def test_table_entries(position):
    P = patient_to_device(position)
    expected = np.zeros((3, 3))
    for row, (sign, col) in enumerate(EXPECTED[position]):
        expected[row, col] = sign
    assert np.array_equal(P, expected)


@pytest.mark.parametrize("position", ALL_POSITIONS)
def test_signed_permutation_and_proper(position):
    P = patient_to_device(position)
    assert np.array_equal(np.abs(P).sum(axis=0), np.ones(3))
    assert np.array_equal(np.abs(P).sum(axis=1), np.ones(3))
    assert np.isclose(np.linalg.det(P), 1.0)


@pytest.mark.parametrize("position", ALL_POSITIONS)
def test_inverse_is_transpose(position):
    P = patient_to_device(position)
    Q = device_to_patient(position)
    assert np.array_equal(Q, P.T)
    assert np.array_equal(P @ Q, np.eye(3))


def test_vector_forms():
    v = np.array([0.2, -0.3, 0.9])
    pos = PatientPosition.HEAD_FIRST_LATERAL_RIGHT
    w = patient_to_device_vector(v, pos)
    assert np.allclose(w, [-0.3, 0.2, -0.9])
    assert np.allclose(device_to_patient_vector(w, pos), v)


def test_returned_matrix_is_a_copy():
    P = patient_to_device(PatientPosition.HEAD_FIRST_SUPINE)
    P[0, 0] = 42.0
    assert patient_to_device(PatientPosition.HEAD_FIRST_SUPINE)[0, 0] == 1.0


@pytest.mark.parametrize(
    "code,expected", [
        ("HFS", PatientPosition.HEAD_FIRST_SUPINE),
        ("ffp", PatientPosition.FEET_FIRST_PRONE),
        (" HFDL ", PatientPosition.HEAD_FIRST_LATERAL_LEFT),
        ("FFDR", PatientPosition.FEET_FIRST_LATERAL_RIGHT),
    ],
)
def test_from_code(code, expected):
    assert PatientPosition.from_code(code) is expected


@pytest.mark.parametrize("code", ["XYZ", "", None])
def test_from_code_unknown(code):
    with pytest.raises(ValueError):
        PatientPosition.from_code(code)


def test_non_enum_position_rejected():
    with pytest.raises(TypeError):
        patient_to_device("HFS")
    with pytest.raises(ValueError):
        patient_to_device_vector([1.0, 0.0], PatientPosition.HEAD_FIRST_SUPINE)
