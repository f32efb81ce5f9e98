"""
Scale primitives - Scale and the chord-quality table.

A scale is a fixed interval pattern from the key's root. Each of its seven
degrees (0-6) carries the triad quality built on that step.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from .chord import ChordQuality

# Semitones from the root to each scale degree
_STEPS: MappingProxyType[str, tuple[int, ...]] = MappingProxyType(
    {
        "Major": (0, 2, 4, 5, 7, 9, 11),
        "Minor": (0, 2, 3, 5, 7, 8, 10),  # natural minor
    }
)

_M = ChordQuality.MAJOR
_m = ChordQuality.MINOR
_dim = ChordQuality.DIMINISHED

CHORD_QUALITY_TABLE: MappingProxyType[str, tuple[ChordQuality, ...]] = MappingProxyType(
    {
        "Major": (_M, _m, _m, _M, _M, _m, _dim),
        "Minor": (_m, _dim, _M, _m, _m, _M, _M),
    }
)

DEGREE_COUNT = 7


class Scale(str, Enum):
    """The supported scales."""

    MAJOR = "Major"
    MINOR = "Minor"

    @property
    def steps(self) -> tuple[int, ...]:
        """Semitone offset from the root for each degree 0-6."""
        return _STEPS[self.value]

    @property
    def qualities(self) -> tuple[ChordQuality, ...]:
        """Triad quality for each degree 0-6."""
        return CHORD_QUALITY_TABLE[self.value]

    def quality_at(self, degree: int) -> ChordQuality:
        """Triad quality built on a degree."""
        check_degree(degree)
        return self.qualities[degree]

    def semitones_at(self, degree: int) -> int:
        """Semitones from the root to a degree."""
        check_degree(degree)
        return self.steps[degree]

    @classmethod
    def parse(cls, name: str | Scale) -> Scale:
        """Parse 'Major' / 'minor' / 'MINOR' into a Scale."""
        if isinstance(name, Scale):
            return name
        for member in cls:
            if member.value.lower() == name.strip().lower():
                return member
        raise ValueError(f"Unknown scale: {name}")

    def __str__(self) -> str:
        return self.value


def check_degree(degree: int) -> None:
    """Raise ValueError unless degree is 0-6."""
    if not 0 <= degree < DEGREE_COUNT:
        raise ValueError(f"Degree must be 0-6, got {degree}")
