"""
Export pipeline - transforms progressions to MIDI.

The pipeline:
    Progression → NoteEvents (seconds) → MidiEvents (ticks) → MIDI bytes
"""

from chord_studio.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    NoteEvent,
    build_track,
    events_to_midi,
    export,
    midi_to_bytes,
    progression_to_midi,
    save_midi,
    seconds_to_ticks,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "NoteEvent",
    "build_track",
    "events_to_midi",
    "export",
    "midi_to_bytes",
    "progression_to_midi",
    "save_midi",
    "seconds_to_ticks",
]
