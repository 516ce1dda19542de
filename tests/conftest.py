import numpy as np
import pytest

from spinbox import Boundary, Particle, Simulation


def make_sim(position, velocity, angular_velocity=(0.0, 0.0, 0.0), half_extent=25.0, radius=1.0, mode="euler"):
    boundary = Boundary(half_extent, angular_velocity, mode=mode, radius=radius)
    particle = Particle(position, velocity, radius)
    return Simulation(boundary, particle)


@pytest.fixture
def static_sim():
    return make_sim((24.5, 0.0, 0.0), (1.0, 0.0, 0.0))


@pytest.fixture
def spinning_boundary():
    boundary = Boundary(25.0, (0.013, -0.021, 0.034))
    for _ in range(57):
        boundary.advance()
    return boundary


def local_extent(boundary, particle):
    return np.abs(boundary.world_to_local(particle.position)) + particle.radius
