"""
Defaults and the validated simulation config.

Units follow the demo: distances in scene units, velocities in units per
tick, angular velocity in radians per tick.
"""
import math
from dataclasses import dataclass

from .errors import ConfigurationError
from .mathutils import as_vec3

# ----------------------
# Window / scene settings
# ----------------------
SCREEN_WIDTH = 1100
SCREEN_HEIGHT = 700
FOV = 60.0
NEAR = 0.1
FAR = 2000.0
FRAME_RATE = 60             # ticks per second in the viewer

# Rendering detail
SPHERE_SLICES = 20
SPHERE_STACKS = 14

# Camera
CAM_DISTANCE = 90.0
CAM_PITCH = 20.0
CAM_YAW = -35.0

# ----------------------
# Physics defaults
# ----------------------
HALF_EXTENT = 25.0
BALL_RADIUS = 1.0
ANGULAR_VELOCITY = (0.005, 0.01, 0.0075)
BALL_POSITION = (0.0, 0.0, 0.0)
BALL_VELOCITY = (0.35, 0.25, 0.15)

ROTATION_MODES = ("euler", "quaternion")


@dataclass
class SimulationConfig:
    """Everything needed to build one boundary and one ball."""

    half_extent: float = HALF_EXTENT
    radius: float = BALL_RADIUS
    angular_velocity: tuple = ANGULAR_VELOCITY
    position: tuple = BALL_POSITION
    velocity: tuple = BALL_VELOCITY
    rotation_mode: str = "euler"

    def validate(self):
        """
        Check the construction-time preconditions and normalize vectors.

        The ball must fit strictly inside the cube, otherwise the clamp
        target has the wrong sign and the ball oscillates forever.
        """
        if not math.isfinite(self.half_extent) or self.half_extent <= 0.0:
            raise ConfigurationError(f"half_extent must be positive, got {self.half_extent}")
        if not math.isfinite(self.radius) or self.radius <= 0.0:
            raise ConfigurationError(f"radius must be positive, got {self.radius}")
        if self.half_extent <= self.radius:
            raise ConfigurationError(
                f"half_extent ({self.half_extent}) must be larger than radius ({self.radius})"
            )
        if self.rotation_mode not in ROTATION_MODES:
            raise ConfigurationError(
                f"rotation_mode must be one of {ROTATION_MODES}, got {self.rotation_mode!r}"
            )
        self.angular_velocity = tuple(as_vec3(self.angular_velocity, "angular_velocity").tolist())
        self.position = tuple(as_vec3(self.position, "position").tolist())
        self.velocity = tuple(as_vec3(self.velocity, "velocity").tolist())
        self.half_extent = float(self.half_extent)
        self.radius = float(self.radius)
        return self
