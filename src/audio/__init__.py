"""Synthetic audio buffers and the signal statistics derived from them."""
from .buffer import AudioBuffer, generate_audio_buffer, synthesize_samples
from .metrics import crest_factor, peak_amplitude, rms_dbfs, rms_power

__all__ = [
    "AudioBuffer",
    "crest_factor",
    "generate_audio_buffer",
    "peak_amplitude",
    "rms_dbfs",
    "rms_power",
    "synthesize_samples",
]
