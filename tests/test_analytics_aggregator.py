import json

import pytest

from analytics.aggregator import (
    AmplitudeVerdict,
    ProcessingVerdict,
    aggregate_performance,
    judge_amplitude,
    judge_processing,
    summarize_series,
)
from audio.buffer import AudioBuffer, generate_audio_buffer
from codec.processor import CycleMeasurement, PerformanceSeries, cycle_efficiency
from domain.errors import EmptySeriesError


def _series(times: list[float], bitrate: int = 320) -> PerformanceSeries:
    return PerformanceSeries(
        tuple(
            CycleMeasurement(
                cycle_index=index,
                processing_time_ms=time_ms,
                efficiency=cycle_efficiency(time_ms, bitrate),
            )
            for index, time_ms in enumerate(times, start=1)
        )
    )


@pytest.fixture()
def reference_buffer() -> AudioBuffer:
    return AudioBuffer.from_samples([0.8, 0.0, 0.0, 0.0])


def test_processing_time_statistics(reference_buffer):
    report = aggregate_performance(_series([100.0, 120.0, 140.0]), reference_buffer)
    timing = report.processing_time
    assert timing.count == 3
    assert timing.minimum == pytest.approx(100.0)
    assert timing.maximum == pytest.approx(140.0)
    assert timing.total == pytest.approx(360.0)
    assert timing.average == pytest.approx(120.0)
    assert report.total_cycles == 3


def test_efficiency_statistics(reference_buffer):
    report = aggregate_performance(_series([100.0, 125.0, 200.0]), reference_buffer)
    efficiency = report.efficiency
    assert efficiency is not None
    assert efficiency.maximum == pytest.approx(10.0)
    assert efficiency.minimum == pytest.approx(5.0)
    assert efficiency.average == pytest.approx((10.0 + 8.0 + 5.0) / 3)
    assert report.undefined_efficiency_count == 0


def test_undefined_efficiencies_are_excluded(reference_buffer):
    report = aggregate_performance(_series([0.0, 100.0]), reference_buffer)
    assert report.undefined_efficiency_count == 1
    assert report.efficiency is not None
    assert report.efficiency.count == 1
    assert report.efficiency.average == pytest.approx(10.0)


def test_all_undefined_efficiencies_yield_no_statistics(reference_buffer):
    report = aggregate_performance(_series([0.0, 0.0]), reference_buffer)
    assert report.efficiency is None
    assert report.undefined_efficiency_count == 2


def test_dynamic_range_and_peak_boundary(reference_buffer):
    report = aggregate_performance(_series([100.0]), reference_buffer)
    assert report.audio.peak_amplitude == pytest.approx(0.8)
    assert report.audio.rms_power == pytest.approx(0.4)
    assert report.audio.dynamic_range == pytest.approx(2.0)
    # 0.8 is not strictly above the playback threshold.
    assert report.amplitude_verdict is AmplitudeVerdict.NEEDS_NORMALIZATION
    assert report.amplitude_sufficient is False


def test_peak_above_threshold_is_sufficient():
    buffer = AudioBuffer.from_samples([0.9, -0.1])
    report = aggregate_performance(_series([100.0]), buffer)
    assert report.amplitude_verdict is AmplitudeVerdict.SUFFICIENT
    assert report.amplitude_verdict.value == "sufficient for playback"


def test_silent_buffer_has_undefined_dynamic_range():
    report = aggregate_performance(_series([100.0]), AudioBuffer.from_samples([0.0, 0.0]))
    assert report.audio.dynamic_range is None


@pytest.mark.parametrize(
    ("average", "expected"),
    [
        (120.0, ProcessingVerdict.OPTIMAL),
        (149.99, ProcessingVerdict.OPTIMAL),
        (150.0, ProcessingVerdict.NEEDS_OPTIMIZATION),
        (210.0, ProcessingVerdict.NEEDS_OPTIMIZATION),
    ],
)
def test_processing_threshold(average, expected):
    assert judge_processing(average) is expected


def test_amplitude_threshold_is_strict():
    assert judge_amplitude(0.8) is AmplitudeVerdict.NEEDS_NORMALIZATION
    assert judge_amplitude(0.8000001) is AmplitudeVerdict.SUFFICIENT


def test_reference_session_verdicts():
    buffer = generate_audio_buffer(1024)
    report = aggregate_performance(_series([100.0] * 10), buffer)
    assert report.processing_optimal is True
    assert report.amplitude_sufficient is False


def test_empty_series_raises_precondition_error(reference_buffer):
    with pytest.raises(EmptySeriesError):
        aggregate_performance(PerformanceSeries(), reference_buffer)
    with pytest.raises(EmptySeriesError):
        summarize_series([])


def test_aggregation_does_not_mutate_inputs(reference_buffer):
    series = _series([100.0, 120.0])
    before = list(series.measurements)
    aggregate_performance(series, reference_buffer)
    assert list(series.measurements) == before


def test_summary_is_json_serialisable(reference_buffer):
    report = aggregate_performance(_series([100.0, 0.0]), reference_buffer)
    payload = json.loads(json.dumps(report.to_summary()))
    assert payload["total_cycles"] == 2
    assert payload["processing_time_ms"]["average"] == pytest.approx(50.0)
    assert payload["undefined_efficiency_count"] == 1
    assert payload["audio"]["dynamic_range"] == pytest.approx(2.0)
    assert payload["processing_verdict"] == "optimal"
    assert payload["amplitude_verdict"] == "may need normalization"
