"""Analytics over codec cycle series and audio buffer statistics."""
from .aggregator import (
    AmplitudeVerdict,
    AudioStatistics,
    PerformanceReport,
    ProcessingVerdict,
    SeriesStatistics,
    aggregate_performance,
    summarize_series,
)
from .report import (
    progress_snapshot,
    render_banner,
    render_buffer_block,
    render_completion,
    render_media_block,
    render_progress_line,
    render_report,
)

__all__ = [
    "AmplitudeVerdict",
    "AudioStatistics",
    "PerformanceReport",
    "ProcessingVerdict",
    "SeriesStatistics",
    "aggregate_performance",
    "progress_snapshot",
    "render_banner",
    "render_buffer_block",
    "render_completion",
    "render_media_block",
    "render_progress_line",
    "render_report",
    "summarize_series",
]
