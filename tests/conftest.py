"""
Pytest configuration and shared fixtures.
"""

import random
import tempfile
from collections.abc import Sequence
from pathlib import Path

import pytest

from chord_studio.core import Pitch


class RecordingBackend:
    """Audio backend that records triggers instead of sounding them."""

    def __init__(self) -> None:
        self.triggers: list[tuple[list[str], float, float]] = []
        self.releases = 0

    def trigger(self, pitches: Sequence[Pitch], duration: float, scheduled_time: float) -> None:
        self.triggers.append(([p.name for p in pitches], duration, scheduled_time))

    def release_all(self) -> None:
        self.releases += 1


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def backend() -> RecordingBackend:
    """Recording audio backend."""
    return RecordingBackend()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)
