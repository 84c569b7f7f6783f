#!/usr/bin/env python3
"""Media player processing simulation CLI.

Run with ``python tools/media_player_simulation.py`` to reproduce the
default session: a 1024-sample synthetic buffer, ten 100 ms codec cycles
for a 320 kbps MP3 resource, and the final performance report. Flags shrink
the run for demos and CI, and ``--json`` swaps the text report for a
machine-readable summary.
"""
from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import asdict, dataclass
import json
import logging
from typing import Dict, Sequence

from analytics.aggregator import PerformanceReport, aggregate_performance
from analytics.report import (
    render_banner,
    render_buffer_block,
    render_completion,
    render_media_block,
    render_progress_line,
    render_report,
)
from audio.buffer import AudioBuffer, generate_audio_buffer
from codec.processor import CodecCycleProcessor, CycleMeasurement, PerformanceSeries
from domain.errors import SimulationError
from domain.models import MediaDescriptor, SimulationConfig, initialize_media

logger = logging.getLogger(__name__)

DEFAULT_IDENTIFIER = "professional_audio_sample.mp3"
DEFAULT_FORMAT = "MP3"
DEFAULT_DURATION_SECONDS = 180.0
DEFAULT_BITRATE_KBPS = 320


@dataclass
class SimulationResult:
    media: MediaDescriptor
    config: SimulationConfig
    buffer: AudioBuffer
    series: PerformanceSeries
    report: PerformanceReport

    def to_summary(self) -> Dict[str, object]:
        return {
            "media": self.media.model_dump(),
            "config": self.config.model_dump(),
            "cycles": [asdict(measurement) for measurement in self.series],
            "report": self.report.to_summary(),
        }


def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return parsed


def _non_negative_int(value: str) -> int:
    parsed = int(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}")
    return parsed


def _non_negative_float(value: str) -> float:
    parsed = float(value)
    if parsed < 0.0:
        raise argparse.ArgumentTypeError(f"expected a non-negative number, got {value!r}")
    return parsed


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--cycles",
        type=_positive_int,
        default=defaults.total_cycles,
        help="Number of codec processing cycles to simulate.",
    )
    parser.add_argument(
        "--buffer-size",
        type=_positive_int,
        default=defaults.buffer_size,
        help="Audio buffer capacity in samples.",
    )
    parser.add_argument(
        "--delay-ms",
        type=_non_negative_float,
        default=defaults.codec_delay_ms,
        help="Simulated codec latency applied to every cycle.",
    )
    parser.add_argument(
        "--workload-iterations",
        type=_non_negative_int,
        default=defaults.workload_iterations,
        help="Iterations of the synthetic codec workload per cycle.",
    )
    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        help="Media format designation (MP3, WAV and FLAC are supported).",
    )
    parser.add_argument(
        "--bitrate",
        type=int,
        default=DEFAULT_BITRATE_KBPS,
        help="Media bit rate in kbps.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON summary instead of the text report.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (logs go to stderr).",
    )
    return parser.parse_args(argv)


def run_simulation(
    media: MediaDescriptor,
    config: SimulationConfig,
    *,
    clock: Callable[[], float] | None = None,
    sleep: Callable[[float], None] | None = None,
    on_cycle: Callable[[CycleMeasurement], None] | None = None,
) -> SimulationResult:
    """Generate the buffer, run every cycle, and aggregate the analytics."""

    buffer = generate_audio_buffer(config.buffer_size)
    processor = CodecCycleProcessor(media, config, clock=clock, sleep=sleep, on_cycle=on_cycle)
    logger.info(
        "Running %s cycles for %s (%s kbps)",
        config.total_cycles,
        media.identifier,
        media.bit_rate_kbps,
    )
    series = processor.run()
    report = aggregate_performance(series, buffer)
    return SimulationResult(media=media, config=config, buffer=buffer, series=series, report=report)


def main(
    argv: Sequence[str] | None = None,
    *,
    clock: Callable[[], float] | None = None,
    sleep: Callable[[float], None] | None = None,
) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s")

    config = SimulationConfig(
        total_cycles=args.cycles,
        buffer_size=args.buffer_size,
        codec_delay_ms=args.delay_ms,
        workload_iterations=args.workload_iterations,
    )
    media = initialize_media(
        DEFAULT_IDENTIFIER,
        args.format,
        DEFAULT_DURATION_SECONDS,
        args.bitrate,
    )

    on_cycle: Callable[[CycleMeasurement], None] | None = None
    if not args.json:
        print(render_banner())
        print()
        print(render_media_block(media))
        print()
        print(render_buffer_block(config))
        print()
        print("INITIATING MEDIA PROCESSING SIMULATION:")
        print("-" * 40)

        def _print_progress(measurement: CycleMeasurement) -> None:
            print(render_progress_line(measurement, config.total_cycles), flush=True)

        on_cycle = _print_progress

    try:
        result = run_simulation(media, config, clock=clock, sleep=sleep, on_cycle=on_cycle)
    except SimulationError as exc:
        logger.error("Simulation failed: %s", exc)
        return 1

    if args.json:
        print(json.dumps(result.to_summary(), indent=2))
    else:
        print()
        print(render_report(result.report))
        print()
        print(render_completion())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
