"""Aggregate cycle measurements and buffer statistics into a performance report."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
import logging
from typing import Dict, Iterable, List

from audio.buffer import AudioBuffer
from audio.metrics import crest_factor, rms_dbfs
from codec.processor import PerformanceSeries
from domain.errors import EmptySeriesError

logger = logging.getLogger(__name__)

OPTIMAL_PROCESSING_MS = 150.0
PLAYBACK_PEAK_THRESHOLD = 0.8


class ProcessingVerdict(str, Enum):
    OPTIMAL = "optimal"
    NEEDS_OPTIMIZATION = "needs optimization"


class AmplitudeVerdict(str, Enum):
    SUFFICIENT = "sufficient for playback"
    NEEDS_NORMALIZATION = "may need normalization"


@dataclass(frozen=True)
class SeriesStatistics:
    """Minimum, maximum, sum and mean of a numeric series."""

    count: int
    minimum: float
    maximum: float
    total: float
    average: float


@dataclass(frozen=True)
class AudioStatistics:
    """Buffer-level figures reported alongside the codec metrics."""

    sample_count: int
    peak_amplitude: float
    rms_power: float
    rms_dbfs: float
    dynamic_range: float | None


@dataclass(frozen=True)
class PerformanceReport:
    """Structured analytics handed to the presentation layer."""

    processing_time: SeriesStatistics
    efficiency: SeriesStatistics | None
    undefined_efficiency_count: int
    audio: AudioStatistics
    processing_verdict: ProcessingVerdict
    amplitude_verdict: AmplitudeVerdict

    @property
    def total_cycles(self) -> int:
        return self.processing_time.count

    @property
    def processing_optimal(self) -> bool:
        return self.processing_verdict is ProcessingVerdict.OPTIMAL

    @property
    def amplitude_sufficient(self) -> bool:
        return self.amplitude_verdict is AmplitudeVerdict.SUFFICIENT

    def to_summary(self) -> Dict[str, object]:
        """Return a JSON-serialisable view of every computed value."""

        return {
            "total_cycles": self.total_cycles,
            "processing_time_ms": asdict(self.processing_time),
            "efficiency": asdict(self.efficiency) if self.efficiency is not None else None,
            "undefined_efficiency_count": self.undefined_efficiency_count,
            "audio": asdict(self.audio),
            "processing_optimal": self.processing_optimal,
            "processing_verdict": self.processing_verdict.value,
            "amplitude_sufficient": self.amplitude_sufficient,
            "amplitude_verdict": self.amplitude_verdict.value,
        }


def summarize_series(values: Iterable[float]) -> SeriesStatistics:
    """Return :class:`SeriesStatistics` for *values*, which must not be empty."""

    data = [float(value) for value in values]
    if not data:
        raise EmptySeriesError("Cannot summarise an empty series")
    total = sum(data)
    return SeriesStatistics(
        count=len(data),
        minimum=min(data),
        maximum=max(data),
        total=total,
        average=total / len(data),
    )


def judge_processing(average_ms: float) -> ProcessingVerdict:
    if average_ms < OPTIMAL_PROCESSING_MS:
        return ProcessingVerdict.OPTIMAL
    return ProcessingVerdict.NEEDS_OPTIMIZATION


def judge_amplitude(peak: float) -> AmplitudeVerdict:
    if peak > PLAYBACK_PEAK_THRESHOLD:
        return AmplitudeVerdict.SUFFICIENT
    return AmplitudeVerdict.NEEDS_NORMALIZATION


def audio_statistics(buffer: AudioBuffer) -> AudioStatistics:
    return AudioStatistics(
        sample_count=buffer.sample_count,
        peak_amplitude=buffer.peak_amplitude,
        rms_power=buffer.rms_power,
        rms_dbfs=rms_dbfs(buffer.rms_power),
        dynamic_range=crest_factor(buffer.peak_amplitude, buffer.rms_power),
    )


def aggregate_performance(series: PerformanceSeries, buffer: AudioBuffer) -> PerformanceReport:
    """Compute the analytics report for a completed run.

    Undefined efficiencies (zero-length cycles) are excluded from the
    efficiency statistics and counted separately; when none are defined the
    efficiency statistics are ``None``.
    """

    if len(series) == 0:
        raise EmptySeriesError("Performance series contains no measurements")

    processing = summarize_series(series.processing_times)
    defined: List[float] = [value for value in series.efficiencies if value is not None]
    efficiency = summarize_series(defined) if defined else None

    report = PerformanceReport(
        processing_time=processing,
        efficiency=efficiency,
        undefined_efficiency_count=len(series) - len(defined),
        audio=audio_statistics(buffer),
        processing_verdict=judge_processing(processing.average),
        amplitude_verdict=judge_amplitude(buffer.peak_amplitude),
    )
    logger.debug(
        "Aggregated %s cycles: avg %.3f ms, verdicts %s / %s",
        processing.count,
        processing.average,
        report.processing_verdict.value,
        report.amplitude_verdict.value,
    )
    return report


__all__ = [
    "AmplitudeVerdict",
    "AudioStatistics",
    "OPTIMAL_PROCESSING_MS",
    "PLAYBACK_PEAK_THRESHOLD",
    "PerformanceReport",
    "ProcessingVerdict",
    "SeriesStatistics",
    "aggregate_performance",
    "audio_statistics",
    "judge_amplitude",
    "judge_processing",
    "summarize_series",
]
