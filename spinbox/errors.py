class ConfigurationError(ValueError):
    """Raised when the simulation is set up with impossible parameters."""
