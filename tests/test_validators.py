import numpy as np
import pytest

from mri_coordinates.validators import as_vector3, assert_finite, unit_vector


def test_as_vector3_copies():
    src = np.array([1.0, 2.0, 3.0])
    out = as_vector3(src)
    out[0] = 9.0
    assert src[0] == 1.0


@pytest.mark.parametrize("bad", [[1.0], [1.0, 2.0, 3.0, 4.0], np.eye(3)])
def test_as_vector3_shape(bad):
    with pytest.raises(ValueError):
        as_vector3(bad)


def test_assert_finite():
    assert_finite("v", np.array([1.0, 2.0, 3.0]))
    with pytest.raises(ValueError):
        assert_finite("v", np.array([1.0, np.inf, 3.0]))


def test_unit_vector():
    assert np.allclose(unit_vector([3.0, 0.0, 4.0]), [0.6, 0.0, 0.8])
    with pytest.raises(ValueError):
        unit_vector([0.0, 0.0, 0.0])
