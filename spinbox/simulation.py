import copy
import logging
from dataclasses import dataclass

import numpy as np

from .boundary import Boundary
from .collision import CollisionResolver
from .config import SimulationConfig
from .errors import ConfigurationError
from .particle import Particle

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Everything a tick reads and writes. Owned by exactly one simulation stream."""

    boundary: Boundary
    particle: Particle
    ticks: int = 0
    contacts: int = 0


def advance_state(state, resolver):
    """Advance `state` in place by one tick and return the contact."""
    state.boundary.advance()
    state.particle.integrate()
    contact = resolver.resolve(state.boundary, state.particle)
    state.ticks += 1
    if contact:
        state.contacts += 1
    return contact


def step(state, resolver=None):
    """Functional form of a tick: returns the advanced copy, `state` is left as is."""
    new_state = copy.deepcopy(state)
    advance_state(new_state, resolver or CollisionResolver())
    return new_state


class Simulation:
    """
    One boundary, one ball, one resolver.

    The host (the viewer loop, a test, the headless CLI) owns the cadence
    and calls `tick()`; nothing in here sleeps, blocks or keeps a clock.
    """

    def __init__(self, boundary, particle):
        if boundary.half_extent <= particle.radius:
            raise ConfigurationError(
                f"half_extent ({boundary.half_extent}) must be larger than radius ({particle.radius})"
            )
        self.state = SimulationState(boundary, particle)
        self.resolver = CollisionResolver()

    @classmethod
    def from_config(cls, config=None):
        config = (config or SimulationConfig()).validate()
        boundary = Boundary(
            config.half_extent,
            config.angular_velocity,
            mode=config.rotation_mode,
            radius=config.radius,
        )
        particle = Particle(config.position, config.velocity, config.radius)
        return cls(boundary, particle)

    # ----------------------
    # Stepping
    # ----------------------
    def tick(self):
        contact = advance_state(self.state, self.resolver)
        if contact:
            logger.debug("tick %d: bounced off %s", self.state.ticks, contact.describe())

    def run(self, ticks):
        """Tick `ticks` times and return the ball position after each one, shape (ticks, 3)."""
        trajectory = np.empty((ticks, 3), dtype=float)
        for i in range(ticks):
            self.tick()
            trajectory[i] = self.state.particle.position
        return trajectory

    # ----------------------
    # Observers
    # ----------------------
    @property
    def boundary(self):
        return self.state.boundary

    @property
    def particle(self):
        return self.state.particle

    @property
    def ticks(self):
        return self.state.ticks

    @property
    def contacts(self):
        return self.state.contacts

    @property
    def rotation(self):
        return self.state.boundary.rotation

    @property
    def orientation(self):
        return self.state.boundary.orientation

    @property
    def half_extent(self):
        return self.state.boundary.half_extent

    @property
    def ball_position(self):
        return self.state.particle.position.copy()

    @property
    def ball_velocity(self):
        return self.state.particle.velocity.copy()

    @property
    def ball_radius(self):
        return self.state.particle.radius
