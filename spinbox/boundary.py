import logging
import numpy as np

from .config import ROTATION_MODES
from .errors import ConfigurationError
from .mathutils import (
    IDENTITY_QUAT,
    as_vec3,
    quat_from_axis_angle,
    quat_mul,
    quat_normalize_inplace,
    quat_to_matrix,
    rotation_from_euler,
)

logger = logging.getLogger(__name__)


class Boundary:
    """
    The spinning cube the ball lives in.

    `orientation` holds three running angles, one per axis, each summed
    with the matching component of `angular_velocity` every tick. In the
    default "euler" mode the rotation matrix is rebuilt from those angles
    (X, then Y, then Z). This does not match a true constant-angular-velocity
    rotation over long runs; "quaternion" mode composes the per-tick
    increments instead and keeps the angles only for display.
    """

    def __init__(self, half_extent, angular_velocity=(0.0, 0.0, 0.0), mode="euler", radius=None):
        half_extent = float(half_extent)
        if not np.isfinite(half_extent) or half_extent <= 0.0:
            raise ConfigurationError(f"half_extent must be positive, got {half_extent}")
        if radius is not None and half_extent <= radius:
            raise ConfigurationError(
                f"half_extent ({half_extent}) must be larger than radius ({radius})"
            )
        if mode not in ROTATION_MODES:
            raise ConfigurationError(f"unknown rotation mode {mode!r}")

        self.half_extent = half_extent
        self.angular_velocity = as_vec3(angular_velocity, "angular_velocity")
        self.mode = mode
        self.reset()

        logger.info(
            "Boundary: half_extent=%.3f angular_velocity=%s mode=%s",
            self.half_extent, self.angular_velocity, self.mode,
        )

    def reset(self):
        self._angles = np.zeros(3, dtype=float)
        self._quat = np.array(IDENTITY_QUAT, dtype=float)
        self._R = np.eye(3)

        speed = float(np.linalg.norm(self.angular_velocity))
        self._step_quat = quat_from_axis_angle(self.angular_velocity, speed)

    # ----------------------
    # Per-tick update
    # ----------------------
    def advance(self):
        self._angles += self.angular_velocity
        if self.mode == "quaternion":
            self._quat = quat_normalize_inplace(quat_mul(self._step_quat, self._quat))
            self._R = quat_to_matrix(self._quat)
        else:
            self._R = rotation_from_euler(*self._angles)

    # ----------------------
    # Frame transforms
    # ----------------------
    def world_to_local(self, vector):
        # R is orthonormal, so the transpose is the inverse
        return self._R.T @ np.asarray(vector, dtype=float)

    def local_to_world(self, vector):
        return self._R @ np.asarray(vector, dtype=float)

    # ----------------------
    # Observers
    # ----------------------
    @property
    def orientation(self):
        return self._angles.copy()

    @property
    def rotation(self):
        return self._R.copy()

    @property
    def inverse_rotation(self):
        return self._R.T.copy()

    def __repr__(self):
        return (
            f"Boundary(half_extent={self.half_extent}, "
            f"angular_velocity={self.angular_velocity.tolist()}, mode={self.mode!r})"
        )
