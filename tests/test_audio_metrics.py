import numpy as np
import pytest

from audio.metrics import crest_factor, peak_amplitude, rms_dbfs, rms_power


def test_peak_and_rms_for_square_wave():
    samples = np.array([0.5, -0.5, 0.5, -0.5])
    assert peak_amplitude(samples) == pytest.approx(0.5)
    assert rms_power(samples) == pytest.approx(0.5)


def test_empty_inputs_report_silence():
    empty = np.array([], dtype=np.float64)
    assert peak_amplitude(empty) == 0.0
    assert rms_power(empty) == 0.0


def test_rms_dbfs_reference_levels():
    assert rms_dbfs(1.0) == pytest.approx(0.0)
    assert rms_dbfs(0.5) == pytest.approx(-6.0206, abs=1e-4)
    assert rms_dbfs(0.0) == pytest.approx(-180.0)


def test_crest_factor_guards_silence():
    assert crest_factor(0.8, 0.4) == pytest.approx(2.0)
    assert crest_factor(0.0, 0.0) is None
