"""
Chord Studio - chord progression generation, playback and MIDI export.

    (key, scale, template) → Progression → {PlaybackScheduler, MIDI bytes}
"""

from chord_studio.compiler import export
from chord_studio.config import StudioConfig, load_config
from chord_studio.core import KEYS, ChordQuality, ChordSymbol, Pitch, PitchClass, Scale
from chord_studio.harmony import (
    ProgressionGenerator,
    VoicedChord,
    generate,
    insight,
    resolve,
    summary,
    voice,
)
from chord_studio.models import Progression, ProgressionTemplate
from chord_studio.playback import PlaybackScheduler, PlaybackState, TransportUnavailableError
from chord_studio.studio import ChordStudio
from chord_studio.templates import COMMON_PROGRESSIONS

__version__ = "0.1.0"

__all__ = [
    "COMMON_PROGRESSIONS",
    "KEYS",
    "ChordQuality",
    "ChordStudio",
    "ChordSymbol",
    "Pitch",
    "PitchClass",
    "PlaybackScheduler",
    "PlaybackState",
    "Progression",
    "ProgressionGenerator",
    "ProgressionTemplate",
    "Scale",
    "StudioConfig",
    "TransportUnavailableError",
    "VoicedChord",
    "export",
    "generate",
    "insight",
    "load_config",
    "resolve",
    "summary",
    "voice",
]
