"""
Progression generator - picks a template and anchors it to a key.

Template selection goes through an injected random.Random so a fixed seed
gives a fixed progression.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from chord_studio.constants import FALLBACK_INSIGHT, INSIGHTS, ErrorMessages
from chord_studio.core import PitchClass, Scale
from chord_studio.harmony.resolver import resolve
from chord_studio.models import Progression, ProgressionTemplate

logger = logging.getLogger(__name__)


class ProgressionGenerator:
    """
    Generates progressions from a template library.

    Templates not starting on the tonic get the tonic prepended, so a
    progression is either as long as its template or one chord longer.
    """

    def __init__(
        self,
        templates: Sequence[ProgressionTemplate],
        rng: random.Random | None = None,
        chromatic: bool = False,
    ):
        """
        Initialize the generator.

        Args:
            templates: Template library to choose from
            rng: Random source (default: a fresh, unseeded random.Random)
            chromatic: Resolve roots as semitone offsets (see resolve())
        """
        if not templates:
            raise ValueError("Template library is empty")
        self.templates = list(templates)
        self.rng = rng or random.Random()
        self.chromatic = chromatic

    def choose_template(self) -> ProgressionTemplate:
        """Pick a template uniformly at random."""
        return self.rng.choice(self.templates)

    def get_template(self, name: str) -> ProgressionTemplate | None:
        """Look up a template by name."""
        for template in self.templates:
            if template.name == name:
                return template
        return None

    def generate(
        self,
        key: PitchClass | str,
        scale: Scale | str,
        template: ProgressionTemplate | str | None = None,
    ) -> Progression:
        """
        Generate a progression.

        Args:
            key: Tonic, e.g. 'C' or PitchClass.C
            scale: 'Major' or 'Minor'
            template: Template or template name (default: random choice)

        Returns:
            A new Progression
        """
        if template is None:
            chosen = self.choose_template()
        elif isinstance(template, str):
            found = self.get_template(template)
            if found is None:
                raise ValueError(ErrorMessages.TEMPLATE_NOT_FOUND.format(name=template))
            chosen = found
        else:
            chosen = template

        tonic = PitchClass.parse(key)
        mode = Scale.parse(scale)
        degrees = chosen.normalized()
        progression = Progression(
            key=tonic,
            scale=mode,
            chords=resolve(tonic, mode, degrees, self.chromatic),
            degrees=degrees,
            template_name=chosen.name,
        )
        logger.debug(f"Generated {progression} from {chosen.name} in {tonic.spell()} {mode}")
        return progression


def generate(
    key: PitchClass | str,
    scale: Scale | str,
    templates: Sequence[ProgressionTemplate],
    rng: random.Random | None = None,
    chromatic: bool = False,
) -> Progression:
    """Generate a progression from a randomly chosen template."""
    return ProgressionGenerator(templates, rng, chromatic).generate(key, scale)


def insight(progression: Progression, index: int) -> str:
    """
    Caption for the chord at a position in the progression.

    Captions are keyed by position, not by the scale degree played there.
    Positions past 6 get a generic caption.
    """
    if 0 <= index < len(INSIGHTS):
        return INSIGHTS[index]
    return FALLBACK_INSIGHT


def degree_insight(progression: Progression, index: int) -> str:
    """Caption keyed by the scale degree actually played at a position."""
    if not 0 <= index < len(progression.degrees):
        return FALLBACK_INSIGHT
    return INSIGHTS[progression.degrees[index]]


def ending_feel(progression: Progression) -> str:
    """'tension' when the last chord has a minor third, else 'resolution'."""
    last = progression.last
    if last is not None and last.quality.is_minor:
        return "tension"
    return "resolution"


def summary(progression: Progression) -> str:
    """
    One-paragraph description naming the first and last chord.

    Returns an empty string for an empty progression.
    """
    if not progression.chords:
        return ""
    return (
        f"This chord progression ({progression}) creates a unique emotional journey. "
        f"It starts with {progression.first}, which establishes the key, "
        f"and ends with {progression.last}, giving a sense of {ending_feel(progression)}."
    )
