"""Error taxonomy shared by the simulation packages."""
from __future__ import annotations


class SimulationError(Exception):
    """Base error for simulation failures."""


class InvalidConfigurationError(SimulationError, ValueError):
    """Raised when a buffer size, cycle index, or sample set cannot be simulated."""


class EmptySeriesError(SimulationError, ValueError):
    """Raised when analytics are requested for a series without measurements."""


__all__ = ["EmptySeriesError", "InvalidConfigurationError", "SimulationError"]
