"""
MIDI export - progression to Standard MIDI File.

This module handles conversion from a progression to a Standard MIDI File
using mido. Chords are placed on an absolute seconds grid (one second per
chord) independent of the playback tempo.
The same progression always produces the same bytes.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from mido import Message, MetaMessage, MidiFile, MidiTrack, bpm2tempo

from chord_studio.constants import (
    CHORD_SECONDS,
    DEFAULT_TEMPO_BPM,
    DEFAULT_VELOCITY,
    MIDI_FILENAME,
    REFERENCE_OCTAVE,
)
from chord_studio.config import check_filename
from chord_studio.core import ChordSymbol
from chord_studio.harmony.voicing import voice

logger = logging.getLogger(__name__)

# Ticks per quarter note
TICKS_PER_BEAT = 480


@dataclass(frozen=True)
class NoteEvent:
    """
    A note in seconds - the exporter's track buffer entry.

    One per pitch per chord.
    """

    pitch: int
    start_seconds: float
    duration_seconds: float
    velocity: int = DEFAULT_VELOCITY


@dataclass(frozen=True)
class MidiEvent:
    """A NoteEvent converted to ticks, ready for the track writer."""

    pitch: int
    start_ticks: int
    duration_ticks: int
    velocity: int
    channel: int = 0

    def __post_init__(self) -> None:
        for label, value, low, high in (
            ("Pitch", self.pitch, 0, 127),
            ("Velocity", self.velocity, 0, 127),
            ("Channel", self.channel, 0, 15),
        ):
            if not low <= value <= high:
                raise ValueError(f"{label} must be {low}-{high}, got {value}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")

    @property
    def end_ticks(self) -> int:
        return self.start_ticks + self.duration_ticks

    def messages(self) -> Iterator[tuple[int, Message]]:
        """Absolute-tick note_on and note_off for this event."""
        yield self.start_ticks, Message(
            "note_on", channel=self.channel, note=self.pitch, velocity=self.velocity
        )
        yield self.end_ticks, Message("note_off", channel=self.channel, note=self.pitch, velocity=0)


def seconds_to_ticks(
    seconds: float,
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> int:
    """Convert seconds to ticks at a fixed tempo. At 120 BPM one second is 960 ticks."""
    return round(seconds * ticks_per_beat * tempo_bpm / 60)


def build_track(
    progression: Iterable[ChordSymbol | str],
    chord_seconds: float = CHORD_SECONDS,
    octave: int = REFERENCE_OCTAVE,
    velocity: int = DEFAULT_VELOCITY,
) -> tuple[NoteEvent, ...]:
    """
    Voice each chord and lay it out on the seconds grid.

    Args:
        progression: Progression, or any sequence of chord symbols / strings
        chord_seconds: Length of each chord (default 1.0)
        octave: Voicing octave (default 4)
        velocity: Note velocity

    Returns:
        Note events in chord order, then root/third/fifth order
    """
    events: list[NoteEvent] = []
    for index, chord in enumerate(progression):
        start = index * chord_seconds
        for pitch in voice(chord, octave).pitches:
            events.append(
                NoteEvent(
                    pitch=pitch.midi,
                    start_seconds=start,
                    duration_seconds=chord_seconds,
                    velocity=velocity,
                )
            )
    return tuple(events)


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Write events to a single-track MidiFile.

    Args:
        events: Events in track order
        tempo_bpm: Tempo written to the set_tempo meta message
        ticks_per_beat: File resolution

    Returns:
        A mido MidiFile with one track, terminated by end_of_track
    """
    timeline = [pair for event in events for pair in event.messages()]
    # Stable: at a shared tick releases go first, and chord tones keep their order
    timeline.sort(key=lambda pair: (pair[0], pair[1].type == "note_on"))

    track = MidiTrack([MetaMessage("set_tempo", tempo=bpm2tempo(tempo_bpm), time=0)])
    previous = 0
    for tick, message in timeline:
        track.append(message.copy(time=tick - previous))
        previous = tick
    track.append(MetaMessage("end_of_track", time=0))

    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    mid.tracks.append(track)
    return mid


def progression_to_midi(
    progression: Iterable[ChordSymbol | str],
    chord_seconds: float = CHORD_SECONDS,
    octave: int = REFERENCE_OCTAVE,
    velocity: int = DEFAULT_VELOCITY,
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
) -> MidiFile:
    """Build the note track for a progression and convert it to a MidiFile."""
    notes = build_track(progression, chord_seconds, octave, velocity)
    events = [
        MidiEvent(
            pitch=note.pitch,
            start_ticks=seconds_to_ticks(note.start_seconds, tempo_bpm),
            duration_ticks=seconds_to_ticks(note.duration_seconds, tempo_bpm),
            velocity=note.velocity,
        )
        for note in notes
    ]
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def midi_to_bytes(mid: MidiFile) -> bytes:
    """Serialize a MidiFile to bytes."""
    buffer = io.BytesIO()
    mid.save(file=buffer)
    return buffer.getvalue()


def export(
    progression: Iterable[ChordSymbol | str],
    chord_seconds: float = CHORD_SECONDS,
    octave: int = REFERENCE_OCTAVE,
    velocity: int = DEFAULT_VELOCITY,
) -> bytes:
    """
    Export a progression as Standard MIDI File bytes.

    Pure: does not touch playback state, and an empty progression gives a
    valid file with no notes.

    Example:
        data = export(["C", "Am"])  # 6 notes, Am starts at 1.0s
    """
    return midi_to_bytes(progression_to_midi(progression, chord_seconds, octave, velocity))


def save_midi(
    progression: Iterable[ChordSymbol | str],
    output_dir: Path,
    filename: str = MIDI_FILENAME,
    chord_seconds: float = CHORD_SECONDS,
    octave: int = REFERENCE_OCTAVE,
    velocity: int = DEFAULT_VELOCITY,
) -> Path:
    """
    Export a progression and write it to output_dir/filename.

    Returns:
        Path to the written file
    """
    output_path = output_dir / check_filename(filename)
    data = export(progression, chord_seconds, octave, velocity)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.info(f"Wrote {len(data)} bytes to {output_path}")
    return output_path
