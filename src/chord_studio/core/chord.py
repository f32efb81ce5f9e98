"""
Chord primitives - ChordQuality and ChordSymbol.

Chords are stacks of intervals measured from the root. The three triad
qualities used here are the only ones a major or minor scale produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .pitch import PitchClass

_INTERVALS: MappingProxyType[str, tuple[int, ...]] = MappingProxyType(
    {
        "": (0, 4, 7),  # major
        "m": (0, 3, 7),  # minor
        "dim": (0, 3, 6),  # diminished
    }
)

_TAGS: MappingProxyType[str, str] = MappingProxyType(
    {
        "": "",
        "m": "minor",
        "dim": "diminished",
    }
)


class ChordQuality(str, Enum):
    """
    Triad quality. The value is the chord-symbol suffix.

    ChordQuality.MINOR.value == "m", so str(ChordSymbol) reads "Am".
    """

    MAJOR = ""
    MINOR = "m"
    DIMINISHED = "dim"

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets from the root (root, third, fifth)."""
        return _INTERVALS[self.value]

    @property
    def tag(self) -> str:
        """Long-form tag: '', 'minor' or 'diminished'."""
        return _TAGS[self.value]

    @property
    def is_minor(self) -> bool:
        """True when the triad has a minor third (minor or diminished)."""
        return self is not ChordQuality.MAJOR

    @classmethod
    def classify(cls, tag: str | ChordQuality) -> ChordQuality:
        """
        Map a quality tag to a quality.

        Accepts both suffixes ('', 'm', 'dim') and long tags ('minor',
        'diminished'). Diminished is tested first because 'dim' contains
        an 'm'.
        """
        if isinstance(tag, ChordQuality):
            return tag
        tag = tag.strip().lower()
        if tag.startswith("dim") or tag == "°":
            return cls.DIMINISHED
        if tag in ("m", "min", "minor"):
            return cls.MINOR
        if tag in ("", "maj", "major"):
            return cls.MAJOR
        raise ValueError(f"Unknown chord quality: {tag!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ChordSymbol:
    """
    A chord symbol: root pitch class plus triad quality.

    Produced by the resolver, consumed by voicing, playback and export.
    """

    root: PitchClass
    quality: ChordQuality = ChordQuality.MAJOR

    def __str__(self) -> str:
        return f"{self.root.spell()}{self.quality.value}"

    def __repr__(self) -> str:
        return f"ChordSymbol({self})"

    @classmethod
    def parse(cls, symbol: str | ChordSymbol) -> ChordSymbol:
        """
        Parse a chord symbol like 'C', 'F#m', 'Bdim' or 'Ebm'.

        The root is one letter plus an optional accidental; the rest is
        the quality suffix.
        """
        if isinstance(symbol, ChordSymbol):
            return symbol

        symbol = symbol.strip()
        if not symbol:
            raise ValueError("Empty chord symbol")

        split = 2 if len(symbol) > 1 and symbol[1] in "#b" else 1
        root = PitchClass.parse(symbol[:split])
        quality = ChordQuality.classify(symbol[split:])
        return cls(root, quality)
