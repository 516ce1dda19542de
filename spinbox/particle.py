import numpy as np

from .errors import ConfigurationError
from .mathutils import as_vec3


class Particle:
    """The ball: world-space position and velocity (units per tick) plus a fixed radius."""

    def __init__(self, position, velocity, radius):
        radius = float(radius)
        if not np.isfinite(radius) or radius <= 0.0:
            raise ConfigurationError(f"radius must be positive, got {radius}")
        self.position = as_vec3(position, "position")
        self.velocity = as_vec3(velocity, "velocity")
        self.radius = radius

    def integrate(self, dt=1.0):
        # explicit Euler, no gravity
        self.position += self.velocity * dt

    def copy(self):
        return Particle(self.position, self.velocity, self.radius)

    def __repr__(self):
        return (
            f"Particle(position={self.position.tolist()}, "
            f"velocity={self.velocity.tolist()}, radius={self.radius})"
        )
