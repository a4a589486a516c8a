"""Custom exceptions for the sickle_sim package."""


class SickleSimError(Exception):
    """Base exception for sickle_sim package."""
    pass


class ConfigurationError(SickleSimError):
    """Configuration validation or loading error."""
    pass


class SimulationError(SickleSimError):
    """Simulation execution error."""
    pass


class InvariantError(SimulationError):
    """An internal invariant of the generation cycle was violated."""
    pass
