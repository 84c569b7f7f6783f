"""Signal statistics used by the buffer generator and the analytics report."""
from __future__ import annotations

import math

import numpy as np


def peak_amplitude(samples: np.ndarray) -> float:
    """Return the largest absolute sample value (``0.0`` for an empty buffer)."""

    if samples.size == 0:
        return 0.0
    return float(np.max(np.abs(samples)))


def rms_power(samples: np.ndarray) -> float:
    """Return the root-mean-square level of *samples*.

    The accumulation happens in float64 so that the value matches an
    independent ``sqrt(mean(s**2))`` to well below ``1e-9``.
    """

    if samples.size == 0:
        return 0.0
    squared = np.square(samples, dtype=np.float64)
    return math.sqrt(float(np.sum(squared)) / samples.size)


def rms_dbfs(rms: float, *, reference: float = 1.0) -> float:
    """Convert an RMS value to dBFS relative to *reference* amplitude."""

    reference = max(reference, 1e-9)
    return 20.0 * math.log10(max(rms, 1e-9) / reference)


def crest_factor(peak: float, rms: float) -> float | None:
    """Return ``peak / rms`` or ``None`` when the signal carries no energy."""

    if rms <= 0.0:
        return None
    return peak / rms


__all__ = ["crest_factor", "peak_amplitude", "rms_dbfs", "rms_power"]
