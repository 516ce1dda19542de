import math

import numpy as np
import pytest

from spinbox.errors import ConfigurationError
from spinbox.mathutils import (
    as_vec3,
    frame_velocity,
    is_orthonormal,
    quat_from_axis_angle,
    quat_mul,
    quat_to_matrix,
    rotation_from_euler,
)


def test_euler_rotation_is_orthonormal():
    for angles in [(0.0, 0.0, 0.0), (0.3, -1.2, 2.5), (10.0, 20.0, -30.0)]:
        assert is_orthonormal(rotation_from_euler(*angles))


def test_euler_order_is_x_then_y_then_z():
    # x-axis turned 90 deg about X stays put, then Y sends it to -z, Z leaves -z alone
    R = rotation_from_euler(math.pi / 2, math.pi / 2, 0.0)
    np.testing.assert_allclose(R @ np.array([1.0, 0.0, 0.0]), [0.0, 0.0, -1.0], atol=1e-12)
    # y-axis: X sends it to +z, Y sends +z to +x
    np.testing.assert_allclose(R @ np.array([0.0, 1.0, 0.0]), [1.0, 0.0, 0.0], atol=1e-12)


def test_single_axis_rotation_about_z():
    R = rotation_from_euler(0.0, 0.0, math.pi / 2)
    np.testing.assert_allclose(R @ np.array([1.0, 0.0, 0.0]), [0.0, 1.0, 0.0], atol=1e-12)


def test_is_orthonormal_rejects_reflection_and_scale():
    assert not is_orthonormal(np.diag([1.0, 1.0, -1.0]))
    assert not is_orthonormal(np.eye(3) * 2.0)
    assert not is_orthonormal(np.eye(2))


def test_frame_velocity_is_cross_product():
    np.testing.assert_allclose(frame_velocity([0.0, 0.0, 1.0], [2.0, 0.0, 0.0]), [0.0, 2.0, 0.0])
    np.testing.assert_array_equal(frame_velocity([0.0, 0.0, 0.1], [0.0, 0.0, 0.0]), [0.0, 0.0, 0.0])


def test_quaternion_matches_axis_angle():
    q = quat_from_axis_angle([0.0, 0.0, 2.0], math.pi / 2)
    np.testing.assert_allclose(quat_to_matrix(q), rotation_from_euler(0.0, 0.0, math.pi / 2), atol=1e-12)


def test_quaternion_composition():
    q = quat_from_axis_angle([1.0, 0.0, 0.0], 0.25)
    composed = quat_mul(q, q)
    np.testing.assert_allclose(quat_to_matrix(composed), rotation_from_euler(0.5, 0.0, 0.0), atol=1e-12)


def test_zero_axis_gives_identity():
    np.testing.assert_array_equal(quat_from_axis_angle([0.0, 0.0, 0.0], 1.0), [1.0, 0.0, 0.0, 0.0])


def test_as_vec3_copies_and_validates():
    src = [1, 2, 3]
    vec = as_vec3(src)
    assert vec.dtype == float
    vec[0] = 5.0
    assert src[0] == 1

    with pytest.raises(ConfigurationError):
        as_vec3([1.0, 2.0])
    with pytest.raises(ConfigurationError):
        as_vec3([1.0, float("nan"), 0.0])
    with pytest.raises(ConfigurationError):
        as_vec3([1.0, float("inf"), 0.0])
    with pytest.raises(ConfigurationError):
        as_vec3(["a", "b", "c"])
