"""
Playback - timed chord triggering with transport control.
"""

from chord_studio.playback.backends import (
    AudioBackend,
    LoggingBackend,
    MidiOutputBackend,
    TransportUnavailableError,
)
from chord_studio.playback.scheduler import PlaybackListener, PlaybackScheduler, PlaybackState

__all__ = [
    "AudioBackend",
    "LoggingBackend",
    "MidiOutputBackend",
    "PlaybackListener",
    "PlaybackScheduler",
    "PlaybackState",
    "TransportUnavailableError",
]
