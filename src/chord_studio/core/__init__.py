"""
Core music primitives - the theory tables.

These are the static mappings everything else composes on:
- PitchClass: The 12 chromatic keys (0-11)
- Pitch: A pitch class at a concrete octave
- Scale: Major / Minor with their degree offsets and quality rows
- ChordQuality: Triad interval stacks
- ChordSymbol: Root + quality
"""

from chord_studio.core.chord import ChordQuality, ChordSymbol
from chord_studio.core.pitch import KEYS, Pitch, PitchClass
from chord_studio.core.scale import CHORD_QUALITY_TABLE, DEGREE_COUNT, Scale, check_degree

__all__ = [
    # Pitch
    "KEYS",
    "PitchClass",
    "Pitch",
    # Scale
    "Scale",
    "CHORD_QUALITY_TABLE",
    "DEGREE_COUNT",
    "check_degree",
    # Chord
    "ChordQuality",
    "ChordSymbol",
]
