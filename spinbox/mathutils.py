import math
import numpy as np

from .errors import ConfigurationError

IDENTITY_QUAT = (1.0, 0.0, 0.0, 0.0)

# ----------------------
# Vector helpers
# ----------------------
def as_vec3(values, name="vector"):
    """Copy `values` into a finite float 3-vector."""
    try:
        vec = np.array(values, dtype=float).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a sequence of 3 numbers") from exc
    if vec.shape != (3,):
        raise ConfigurationError(f"{name} must have 3 components, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise ConfigurationError(f"{name} has non-finite components: {vec}")
    return vec

def frame_velocity(angular_velocity, position):
    # linear velocity of a point rigidly attached to the rotating boundary
    return np.cross(angular_velocity, position)

# ----------------------
# Rotation matrices
# ----------------------
def rotation_from_euler(rx, ry, rz):
    """Rotation about X, then Y, then Z (R = Rz @ Ry @ Rx)."""
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)

    Rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]], dtype=float)
    Ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]], dtype=float)
    Rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]], dtype=float)

    return Rz @ Ry @ Rx

def is_orthonormal(R, tol=1e-9):
    R = np.asarray(R, dtype=float)
    if R.shape != (3, 3):
        return False
    if not np.allclose(R @ R.T, np.eye(3), atol=tol):
        return False
    return abs(np.linalg.det(R) - 1.0) <= tol

# ----------------------
# Quaternion utilities
# ----------------------
def quat_mul(q1, q2):
    # q = [w, x, y, z]
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2
    return np.array([
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 - x1*z2 + y1*w2 + z1*x2,
        w1*z2 + x1*y2 - y1*x2 + z1*w2
    ], dtype=float)

def quat_normalize_inplace(q):
    n = np.linalg.norm(q)
    if n > 0:
        q /= n
    else:
        q[:] = IDENTITY_QUAT
    return q

def quat_from_axis_angle(axis, angle):
    ax = np.array(axis, dtype=float)
    n = np.linalg.norm(ax)
    if n < 1e-12:
        return np.array(IDENTITY_QUAT, dtype=float)
    ax /= n
    s = math.sin(angle * 0.5)
    return np.array([math.cos(angle * 0.5), ax[0]*s, ax[1]*s, ax[2]*s], dtype=float)

def quat_to_matrix(q):
    w, x, y, z = q
    xx = x*x; yy = y*y; zz = z*z
    wx = w*x; wy = w*y; wz = w*z
    xy = x*y; xz = x*z; yz = y*z
    return np.array([
        [1 - 2*(yy + zz), 2*(xy - wz),     2*(xz + wy)],
        [2*(xy + wz),     1 - 2*(xx + zz), 2*(yz - wx)],
        [2*(xz - wy),     2*(yz + wx),     1 - 2*(xx + yy)]
    ], dtype=float)
