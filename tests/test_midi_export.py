"""
MIDI export tests.

Covers the low-level tick codec and the progression exporter.
"""

import io
from pathlib import Path

import pytest
from mido import MidiFile

from chord_studio.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    NoteEvent,
    build_track,
    events_to_midi,
    export,
    progression_to_midi,
    save_midi,
    seconds_to_ticks,
)
from chord_studio.constants import MIDI_FILENAME
from chord_studio.harmony import ProgressionGenerator
from chord_studio.templates import COMMON_PROGRESSIONS


def load(data: bytes) -> MidiFile:
    return MidiFile(file=io.BytesIO(data))


def absolute_notes(mid: MidiFile) -> list[tuple[str, int, int]]:
    """(type, note, absolute tick) for every note message."""
    notes = []
    now = 0
    for msg in mid.tracks[0]:
        now += msg.time
        if msg.type in ("note_on", "note_off"):
            notes.append((msg.type, msg.note, now))
    return notes


class TestMidiEvent:
    """Test MidiEvent dataclass."""

    def test_create_valid_event(self) -> None:
        """Can create a valid MIDI event."""
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100)
        assert event.pitch == 60
        assert event.channel == 0

    def test_event_validation(self) -> None:
        """MIDI ranges are enforced."""
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=128, start_ticks=0, duration_ticks=480, velocity=100)
        with pytest.raises(ValueError, match="Velocity must be 0-127"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=128)
        with pytest.raises(ValueError, match="Channel must be 0-15"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100, channel=16)
        with pytest.raises(ValueError, match="Start ticks must be >= 0"):
            MidiEvent(pitch=60, start_ticks=-1, duration_ticks=480, velocity=100)


class TestEventsToMidi:
    """Test the events_to_midi function."""

    def test_empty_events(self) -> None:
        """Can create MIDI file with no events."""
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_note_off_before_note_on_at_same_tick(self) -> None:
        """Back-to-back notes release before the next one starts."""
        events = [
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100),
            MidiEvent(pitch=62, start_ticks=480, duration_ticks=480, velocity=100),
        ]
        notes = absolute_notes(events_to_midi(events))
        assert notes == [
            ("note_on", 60, 0),
            ("note_off", 60, 480),
            ("note_on", 62, 480),
            ("note_off", 62, 960),
        ]

    def test_tempo_setting(self) -> None:
        """Tempo is correctly set in the MIDI file."""
        mid = events_to_midi([], tempo_bpm=140)
        tempo_msgs = [msg for msg in mid.tracks[0] if msg.type == "set_tempo"]
        assert len(tempo_msgs) == 1
        assert tempo_msgs[0].tempo == int(60_000_000 / 140)

    def test_ends_with_end_of_track(self) -> None:
        """The track is terminated."""
        mid = events_to_midi([MidiEvent(60, 0, 480, 100)])
        assert mid.tracks[0][-1].type == "end_of_track"


class TestSecondsToTicks:
    """Seconds → ticks at the default tempo."""

    def test_one_second(self) -> None:
        """At 120 BPM one second is two beats."""
        assert seconds_to_ticks(1.0) == 2 * TICKS_PER_BEAT
        assert seconds_to_ticks(0) == 0
        assert seconds_to_ticks(1.0, tempo_bpm=60) == TICKS_PER_BEAT


class TestBuildTrack:
    """Test the seconds-grid note buffer."""

    def test_c_then_am(self) -> None:
        """Two chords give six notes, one second each."""
        notes = build_track(["C", "Am"])
        assert notes == (
            NoteEvent(60, 0.0, 1.0),
            NoteEvent(64, 0.0, 1.0),
            NoteEvent(67, 0.0, 1.0),
            NoteEvent(69, 1.0, 1.0),
            NoteEvent(72, 1.0, 1.0),
            NoteEvent(76, 1.0, 1.0),
        )

    def test_empty(self) -> None:
        """No chords, no notes."""
        assert build_track([]) == ()

    def test_custom_length(self) -> None:
        """Chord length is configurable."""
        notes = build_track(["C", "F", "G"], chord_seconds=2.0)
        assert [n.start_seconds for n in notes[::3]] == [0.0, 2.0, 4.0]


class TestExport:
    """Test the progression exporter."""

    def test_c_then_am(self) -> None:
        """Export ['C', 'Am']: chord 0 at 0s, chord 1 at 1s, 1s each."""
        mid = load(export(["C", "Am"]))
        assert len(mid.tracks) == 1

        notes = absolute_notes(mid)
        note_ons = [(note, tick) for kind, note, tick in notes if kind == "note_on"]
        note_offs = [(note, tick) for kind, note, tick in notes if kind == "note_off"]
        assert note_ons == [(60, 0), (64, 0), (67, 0), (69, 960), (72, 960), (76, 960)]
        assert sorted(note_offs) == [
            (60, 960),
            (64, 960),
            (67, 960),
            (69, 1920),
            (72, 1920),
            (76, 1920),
        ]

    def test_seconds_roundtrip(self) -> None:
        """Note-on times read back as whole seconds."""
        mid = load(export(["C", "Am"]))
        now = 0.0
        starts = []
        for msg in mid:  # iterating a MidiFile yields times in seconds
            now += msg.time
            if msg.type == "note_on":
                starts.append(round(now, 6))
        assert starts == [0.0, 0.0, 0.0, 1.0, 1.0, 1.0]

    def test_empty_progression(self) -> None:
        """An empty progression is a valid file with no notes."""
        mid = load(export([]))
        assert len(mid.tracks) == 1
        assert absolute_notes(mid) == []

    def test_progression_object(self) -> None:
        """Progression objects export directly."""
        progression = ProgressionGenerator(COMMON_PROGRESSIONS).generate(
            "C", "Major", "I-V-vi-IV"
        )
        mid = progression_to_midi(progression)
        note_ons = [n for n in absolute_notes(mid) if n[0] == "note_on"]
        assert len(note_ons) == 12
        assert [note for _, note, _ in note_ons[3:6]] == [67, 71, 74]  # G B D

    def test_deterministic(self) -> None:
        """Same progression, same bytes."""
        assert export(["C", "G", "Am", "F"]) == export(["C", "G", "Am", "F"])

    def test_standard_midi_header(self) -> None:
        """Output is a Standard MIDI File."""
        data = export(["C"])
        assert data[:4] == b"MThd"
        assert b"MTrk" in data

    def test_save_midi(self, temp_dir: Path) -> None:
        """save_midi writes the default filename."""
        path = save_midi(["C", "Am"], temp_dir / "out")
        assert path.name == MIDI_FILENAME
        assert path.read_bytes() == export(["C", "Am"])
