"""
Pitch primitives - PitchClass and Pitch.

PitchClass represents the 12 chromatic keys (octave-independent).
Pitch pins a pitch class to an octave, which is what actually sounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

# Key names in pitch-class order; sharps are the canonical spelling
KEYS: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
_FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")


class PitchClass(IntEnum):
    """
    A chromatic key, valued 0-11 in KEYS order.

    Sharps and flats naming the same key resolve to one member,
    so parse('Bb') is parse('A#') is PitchClass.As.
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Move by semitones, wrapping within the octave."""
        return PitchClass((self.value + semitones) % 12)

    def to_midi(self, octave: int = 4) -> int:
        """MIDI note number in the given octave (C4 = 60)."""
        return (octave + 1) * 12 + self.value

    def spell(self, prefer_flats: bool = False) -> str:
        """Key name, e.g. 'F#' (or 'Gb' with prefer_flats)."""
        return (_FLAT_NAMES if prefer_flats else KEYS)[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str | PitchClass) -> PitchClass:
        """
        Parse a key name.

        Accepts sharp names ('F#'), flat names ('Gb') and member names ('Fs').
        """
        if isinstance(name, PitchClass):
            return name

        text = name.strip()
        for table in (KEYS, _FLAT_NAMES):
            if text in table:
                return cls(table.index(text))

        by_member = {member.name.upper(): member for member in cls}
        if text.upper() in by_member:
            return by_member[text.upper()]

        raise ValueError(f"Unknown pitch class: {name}")


@dataclass(frozen=True)
class Pitch:
    """
    A pitch class at a concrete octave.

    Pitch(PitchClass.A, 4) is A4 (MIDI 69).
    """

    pitch_class: PitchClass
    octave: int

    def __post_init__(self) -> None:
        if not 0 <= self.midi <= 127:
            raise ValueError(f"Pitch {self.name} is outside MIDI range 0-127")

    @property
    def midi(self) -> int:
        """MIDI note number."""
        return self.pitch_class.to_midi(self.octave)

    @property
    def name(self) -> str:
        """Scientific pitch name, e.g. 'C#4'."""
        return f"{self.pitch_class.spell()}{self.octave}"

    def transpose(self, semitones: int) -> Pitch:
        """Transpose by semitones, carrying into the next octave as needed."""
        return Pitch.from_midi(self.midi + semitones)

    @classmethod
    def from_midi(cls, midi_note: int) -> Pitch:
        """Build a pitch from a MIDI note number."""
        return cls(PitchClass.from_midi(midi_note), midi_note // 12 - 1)

    def __str__(self) -> str:
        return self.name
