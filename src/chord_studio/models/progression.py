"""
Progression models - templates and generated progressions.

A template is a named, key-independent list of scale degrees (the design
token). A progression is that template anchored to a key and scale.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, Field, field_validator

from chord_studio.core import ChordSymbol, PitchClass, Scale, check_degree

TONIC_DEGREE = 0


class ProgressionTemplate(BaseModel):
    """
    A named sequence of scale degrees (0-6).

    Example:
        ProgressionTemplate(name="I-V-vi-IV", degrees=(0, 4, 5, 3))
    """

    name: str = Field(..., min_length=1, description="Template name, e.g. 'I-V-vi-IV'")
    degrees: tuple[int, ...] = Field(..., min_length=1, description="Scale degrees 0-6")
    description: str = Field("", description="Human-readable description")

    model_config = {"frozen": True}

    @field_validator("degrees")
    @classmethod
    def _degrees_in_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        for degree in v:
            check_degree(degree)
        return v

    @property
    def starts_on_tonic(self) -> bool:
        """True when the first degree is the tonic."""
        return self.degrees[0] == TONIC_DEGREE

    def normalized(self) -> tuple[int, ...]:
        """Degrees with the tonic prepended when the template does not start on it."""
        if self.starts_on_tonic:
            return self.degrees
        return (TONIC_DEGREE, *self.degrees)


@dataclass(frozen=True)
class Progression:
    """
    An ordered sequence of chord symbols in a key.

    Created fresh on each generation and read-only afterwards.
    """

    key: PitchClass
    scale: Scale
    chords: tuple[ChordSymbol, ...]
    degrees: tuple[int, ...] = ()
    template_name: str | None = None
    symbols: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", tuple(str(chord) for chord in self.chords))

    def __len__(self) -> int:
        return len(self.chords)

    def __iter__(self) -> Iterator[ChordSymbol]:
        return iter(self.chords)

    def __getitem__(self, index: int) -> ChordSymbol:
        return self.chords[index]

    @property
    def first(self) -> ChordSymbol | None:
        return self.chords[0] if self.chords else None

    @property
    def last(self) -> ChordSymbol | None:
        return self.chords[-1] if self.chords else None

    def __str__(self) -> str:
        return " - ".join(self.symbols)

    def to_dict(self) -> dict[str, object]:
        """Plain-data view for JSON responses."""
        return {
            "key": self.key.spell(),
            "scale": self.scale.value,
            "template": self.template_name,
            "degrees": list(self.degrees),
            "chords": list(self.symbols),
        }
