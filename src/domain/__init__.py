"""Domain package exposing media/session models and the error taxonomy."""
from .errors import EmptySeriesError, InvalidConfigurationError, SimulationError
from .models import (
    SUPPORTED_FORMATS,
    MediaDescriptor,
    SimulationConfig,
    initialize_media,
)

__all__ = [
    "EmptySeriesError",
    "InvalidConfigurationError",
    "MediaDescriptor",
    "SUPPORTED_FORMATS",
    "SimulationConfig",
    "SimulationError",
    "initialize_media",
]
