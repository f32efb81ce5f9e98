"""
Voicing engine - chord symbols to concrete pitches.

The root sits at the reference octave and every interval of the quality is
stacked on it in semitones. Order is root, third, fifth; the MIDI exporter
emits events in this order.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_studio.constants import REFERENCE_OCTAVE
from chord_studio.core import ChordSymbol, Pitch


@dataclass(frozen=True)
class VoicedChord:
    """A chord symbol realized as pitches."""

    chord: ChordSymbol
    pitches: tuple[Pitch, ...]

    @property
    def midi_notes(self) -> list[int]:
        """MIDI note numbers in voicing order."""
        return [pitch.midi for pitch in self.pitches]

    @property
    def names(self) -> list[str]:
        """Pitch names like 'A4', 'C5', 'E5'."""
        return [pitch.name for pitch in self.pitches]

    def __len__(self) -> int:
        return len(self.pitches)

    def __str__(self) -> str:
        return f"{self.chord} ({' '.join(self.names)})"


def voice(chord: ChordSymbol | str, octave: int = REFERENCE_OCTAVE) -> VoicedChord:
    """
    Voice a chord at the given octave.

    Args:
        chord: Chord symbol, or a string like 'Am'
        octave: Octave for the root (default 4)

    Returns:
        The voiced chord

    Example:
        voice("Bdim").names  # ['B4', 'D5', 'F5']
    """
    symbol = ChordSymbol.parse(chord)
    root = Pitch(symbol.root, octave)
    pitches = tuple(root.transpose(offset) for offset in symbol.quality.intervals)
    return VoicedChord(symbol, pitches)
