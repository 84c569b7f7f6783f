"""Synthetic audio buffers with derived peak and RMS statistics."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Iterable

import numpy as np

from domain.errors import InvalidConfigurationError

from .metrics import peak_amplitude, rms_power

logger = logging.getLogger(__name__)

# Envelope bounds: 0.5 +/- 0.3 keeps every sample inside [-0.8, 0.8].
MODULATION_CENTER = 0.5
MODULATION_DEPTH = 0.3
MODULATION_RATE = 0.1


@dataclass(frozen=True, eq=False)
class AudioBuffer:
    """Read-only sample block whose statistics are derived from the samples."""

    samples: np.ndarray
    peak_amplitude: float = field(init=False)
    rms_power: float = field(init=False)

    def __post_init__(self) -> None:
        samples = np.array(self.samples, dtype=np.float64).reshape(-1)
        if samples.size == 0:
            raise InvalidConfigurationError("Audio buffers require at least one sample")
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)
        object.__setattr__(self, "peak_amplitude", peak_amplitude(samples))
        object.__setattr__(self, "rms_power", rms_power(samples))

    @classmethod
    def from_samples(cls, values: Iterable[float]) -> AudioBuffer:
        return cls(np.fromiter(values, dtype=np.float64))

    @property
    def sample_count(self) -> int:
        return int(self.samples.size)

    def __len__(self) -> int:
        return self.sample_count


def synthesize_samples(buffer_size: int) -> np.ndarray:
    """Return the amplitude-modulated single-period sine used by the player demo.

    Sample ``i`` is ``sin(2*pi*i/n) * (0.5 + 0.3*sin(0.1*i))``; there is no
    randomness, so equal sizes always produce equal sequences.
    """

    if buffer_size <= 0:
        raise InvalidConfigurationError(
            f"Buffer size must be positive; received {buffer_size}"
        )
    index = np.arange(buffer_size, dtype=np.float64)
    carrier = np.sin(2.0 * math.pi * index / buffer_size)
    envelope = MODULATION_CENTER + MODULATION_DEPTH * np.sin(index * MODULATION_RATE)
    return carrier * envelope


def generate_audio_buffer(buffer_size: int) -> AudioBuffer:
    """Synthesize a buffer of *buffer_size* samples and compute its statistics."""

    buffer = AudioBuffer(synthesize_samples(buffer_size))
    logger.debug(
        "Generated %s samples (peak=%.6f, rms=%.6f)",
        buffer.sample_count,
        buffer.peak_amplitude,
        buffer.rms_power,
    )
    return buffer


__all__ = [
    "AudioBuffer",
    "MODULATION_CENTER",
    "MODULATION_DEPTH",
    "MODULATION_RATE",
    "generate_audio_buffer",
    "synthesize_samples",
]
