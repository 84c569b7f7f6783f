import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import pytest

from domain.models import MediaDescriptor, SimulationConfig, initialize_media

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@dataclass
class FakeClock:
    """Deterministic time source whose sleep advances the clock instantly."""

    current: float = 0.0
    work_seconds: float = 0.0
    sleeps: List[float] = field(default_factory=list)

    def __call__(self) -> float:
        value = self.current
        # Each read advances time by the simulated workload duration.
        self.current += self.work_seconds
        return value

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.current += seconds


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def fast_config() -> SimulationConfig:
    return SimulationConfig(total_cycles=3, buffer_size=64, codec_delay_ms=5.0, workload_iterations=50)


@pytest.fixture()
def mp3_media() -> MediaDescriptor:
    return initialize_media("professional_audio_sample.mp3", "MP3", 180.0, 320)
