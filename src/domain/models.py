"""Pydantic-powered value objects describing a simulated playback session.

`MediaDescriptor` captures the resource being "played" while
`SimulationConfig` holds the run parameters (cycle count, buffer size,
codec latency). Both are frozen so every downstream component
receives the same read-only view for the lifetime of a run.
"""
from __future__ import annotations

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field, computed_field

SUPPORTED_FORMATS: FrozenSet[str] = frozenset({"MP3", "WAV", "FLAC"})


class MediaDescriptor(BaseModel):
    """Metadata for the media resource fed into the codec simulation."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Unique identifier for the media resource")
    format: str = Field(..., description="Container/codec format designation, e.g. MP3")
    duration_seconds: float = Field(..., description="Total playback duration in seconds")
    bit_rate_kbps: int = Field(..., description="Encoding bit rate in kilobits per second")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def codec_supported(self) -> bool:
        """Return ``True`` when the format is one the simulated player can decode."""

        return self.format in SUPPORTED_FORMATS


class SimulationConfig(BaseModel):
    """Immutable run parameters; tests shrink these for fast, deterministic runs."""

    model_config = ConfigDict(frozen=True)

    total_cycles: int = Field(10, gt=0, description="Number of codec processing cycles")
    buffer_size: int = Field(1024, gt=0, description="Audio buffer capacity in samples")
    sample_rate_hz: float = Field(44_100.0, gt=0, description="Audio sampling frequency")
    video_frame_rate: int = Field(30, gt=0, description="Target video frames per second")
    codec_delay_ms: float = Field(
        100.0, ge=0.0, description="Simulated codec I/O latency applied every cycle"
    )
    workload_iterations: int = Field(
        1000, ge=0, description="Iterations of the synthetic trigonometric workload"
    )

    @property
    def codec_delay_seconds(self) -> float:
        return self.codec_delay_ms / 1_000.0


def initialize_media(
    identifier: str,
    media_format: str,
    duration_seconds: float,
    bit_rate_kbps: int,
) -> MediaDescriptor:
    """Build a :class:`MediaDescriptor`; inputs are accepted as given."""

    return MediaDescriptor(
        identifier=identifier,
        format=media_format,
        duration_seconds=duration_seconds,
        bit_rate_kbps=bit_rate_kbps,
    )


__all__ = ["MediaDescriptor", "SUPPORTED_FORMATS", "SimulationConfig", "initialize_media"]
