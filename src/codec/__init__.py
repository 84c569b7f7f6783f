"""Codec processing simulation: per-cycle timing and efficiency scores."""
from .processor import (
    REFERENCE_BITRATE_KBPS,
    CodecCycleProcessor,
    CycleMeasurement,
    PerformanceSeries,
    cycle_efficiency,
    synthetic_workload,
    workload_efficiency,
)

__all__ = [
    "CodecCycleProcessor",
    "CycleMeasurement",
    "PerformanceSeries",
    "REFERENCE_BITRATE_KBPS",
    "cycle_efficiency",
    "synthetic_workload",
    "workload_efficiency",
]
