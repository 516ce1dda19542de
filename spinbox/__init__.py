"""A ball bouncing inside a rotating cube."""
from .boundary import Boundary
from .collision import CollisionResolver, Contact
from .config import SimulationConfig
from .errors import ConfigurationError
from .particle import Particle
from .simulation import Simulation, SimulationState, step

__version__ = "0.1.0"

__all__ = [
    "Boundary",
    "CollisionResolver",
    "ConfigurationError",
    "Contact",
    "Particle",
    "Simulation",
    "SimulationConfig",
    "SimulationState",
    "step",
]
