"""Cycle-based codec simulation producing timing and efficiency measurements.

Each cycle blocks for the configured codec latency, runs a fixed
trigonometric workload, and records how long both took. The clock and the
sleep function are injectable so tests can drive the full loop without
spending wall-clock time.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
import math
import time
from typing import Iterator, List, Tuple

from domain.errors import InvalidConfigurationError
from domain.models import MediaDescriptor, SimulationConfig

logger = logging.getLogger(__name__)

REFERENCE_BITRATE_KBPS = 320.0


@dataclass(frozen=True)
class CycleMeasurement:
    """Outcome of a single simulated codec cycle.

    ``efficiency`` is the reported score; ``workload_score`` is the
    diagnostic value derived from the synthetic workload and never replaces
    it. Either is ``None`` when its formula has no defined value.
    """

    cycle_index: int
    processing_time_ms: float
    efficiency: float | None
    workload_score: float | None = None


@dataclass(frozen=True)
class PerformanceSeries:
    """Ordered, immutable collection of cycle measurements for one run."""

    measurements: Tuple[CycleMeasurement, ...] = ()

    @property
    def processing_times(self) -> List[float]:
        return [measurement.processing_time_ms for measurement in self.measurements]

    @property
    def efficiencies(self) -> List[float | None]:
        return [measurement.efficiency for measurement in self.measurements]

    def __len__(self) -> int:
        return len(self.measurements)

    def __iter__(self) -> Iterator[CycleMeasurement]:
        return iter(self.measurements)


def cycle_efficiency(processing_time_ms: float, bit_rate_kbps: float) -> float | None:
    """Return ``(1000 / time) * (bitrate / 320)``; ``None`` for non-positive times."""

    if processing_time_ms <= 0.0:
        return None
    return (1_000.0 / processing_time_ms) * (bit_rate_kbps / REFERENCE_BITRATE_KBPS)


def synthetic_workload(cycle_index: int, iterations: int = 1000) -> float:
    """Accumulate ``sin(0.01*k) * cos(0.02*cycle_index)`` over *iterations* steps."""

    phase = math.cos(cycle_index * 0.02)
    accumulator = 0.0
    for step in range(iterations):
        accumulator += math.sin(step * 0.01) * phase
    return accumulator


def workload_efficiency(accumulated: float, bit_rate_kbps: float) -> float | None:
    """Scale the workload magnitude by bitrate; ``None`` when bitrate is not positive."""

    if bit_rate_kbps <= 0:
        return None
    return abs(accumulated) / (bit_rate_kbps * 0.001)


class CodecCycleProcessor:
    """Run simulated codec cycles for a media descriptor."""

    def __init__(
        self,
        media: MediaDescriptor,
        config: SimulationConfig,
        *,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], None] | None = None,
        on_cycle: Callable[[CycleMeasurement], None] | None = None,
    ) -> None:
        self._media = media
        self._config = config
        self._clock = clock or time.perf_counter
        self._sleep = sleep or time.sleep
        self._callbacks: List[Callable[[CycleMeasurement], None]] = []
        if on_cycle is not None:
            self._callbacks.append(on_cycle)

    @property
    def media(self) -> MediaDescriptor:
        return self._media

    @property
    def config(self) -> SimulationConfig:
        return self._config

    def add_callback(self, callback: Callable[[CycleMeasurement], None]) -> None:
        """Register a function invoked for every completed cycle."""

        self._callbacks.append(callback)

    def process_cycle(self, cycle_index: int) -> CycleMeasurement:
        """Simulate one cycle and return its measurement."""

        if cycle_index < 1:
            raise InvalidConfigurationError(
                f"Cycle indices start at 1; received {cycle_index}"
            )
        start = self._clock()
        delay = self._config.codec_delay_seconds
        if delay > 0.0:
            self._sleep(delay)
        accumulated = synthetic_workload(cycle_index, self._config.workload_iterations)
        workload_score = workload_efficiency(accumulated, self._media.bit_rate_kbps)
        elapsed_ms = max(0.0, (self._clock() - start) * 1_000.0)

        measurement = CycleMeasurement(
            cycle_index=cycle_index,
            processing_time_ms=elapsed_ms,
            efficiency=cycle_efficiency(elapsed_ms, self._media.bit_rate_kbps),
            workload_score=workload_score,
        )
        logger.debug("Cycle %s measured %s", cycle_index, measurement)
        return measurement

    def run(self) -> PerformanceSeries:
        """Process cycles ``1..total_cycles`` in order and collect the series."""

        measurements: List[CycleMeasurement] = []
        for cycle_index in range(1, self._config.total_cycles + 1):
            measurement = self.process_cycle(cycle_index)
            measurements.append(measurement)
            for callback in self._callbacks:
                callback(measurement)
        logger.debug("Completed %s codec cycles", len(measurements))
        return PerformanceSeries(tuple(measurements))


__all__ = [
    "CodecCycleProcessor",
    "CycleMeasurement",
    "PerformanceSeries",
    "REFERENCE_BITRATE_KBPS",
    "cycle_efficiency",
    "synthetic_workload",
    "workload_efficiency",
]
