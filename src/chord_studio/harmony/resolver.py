"""
Chord resolver - scale degrees to chord symbols.

resolve() is pure: same key, scale and degrees always give the same chords.

Roots are the scale's own notes by default, so degree 4 in C major is G.
With chromatic=True a degree is a plain semitone offset from the key
(degree 4 in C is E) while the quality still comes from the scale's row.
"""

from __future__ import annotations

from collections.abc import Iterable

from chord_studio.core import ChordSymbol, PitchClass, Scale


def resolve_degree(
    key: PitchClass,
    scale: Scale,
    degree: int,
    chromatic: bool = False,
) -> ChordSymbol:
    """
    Resolve one scale degree to the triad built on it.

    Args:
        key: Tonic pitch class
        scale: Major or Minor
        degree: Scale degree 0-6
        chromatic: Offset the root by degree semitones instead of scale steps

    Returns:
        The chord symbol for that degree
    """
    quality = scale.quality_at(degree)
    offset = degree if chromatic else scale.semitones_at(degree)
    return ChordSymbol(key.transpose(offset), quality)


def resolve(
    key: PitchClass | str,
    scale: Scale | str,
    degrees: Iterable[int],
    chromatic: bool = False,
) -> tuple[ChordSymbol, ...]:
    """
    Resolve a degree sequence to chord symbols in a key.

    Args:
        key: Tonic, as a PitchClass or a name like 'C#'
        scale: Scale, as a Scale or 'Major' / 'Minor'
        degrees: Scale degrees 0-6
        chromatic: Offset roots by semitones instead of scale steps

    Returns:
        Chord symbols in degree order

    Example:
        resolve("C", "Major", [0, 4, 5, 3])  # C G Am F
        resolve("C", "Major", [0, 4, 5, 3], chromatic=True)  # C E Fm D#
    """
    tonic = PitchClass.parse(key)
    mode = Scale.parse(scale)
    return tuple(resolve_degree(tonic, mode, degree, chromatic) for degree in degrees)
