"""
Harmony pipeline:

    (key, scale, template) → degrees → ChordSymbols → VoicedChords
"""

from chord_studio.harmony.generator import (
    ProgressionGenerator,
    degree_insight,
    ending_feel,
    generate,
    insight,
    summary,
)
from chord_studio.harmony.resolver import resolve, resolve_degree
from chord_studio.harmony.voicing import VoicedChord, voice

__all__ = [
    # Resolver
    "resolve",
    "resolve_degree",
    # Voicing
    "VoicedChord",
    "voice",
    # Generator
    "ProgressionGenerator",
    "generate",
    "insight",
    "degree_insight",
    "ending_feel",
    "summary",
]
