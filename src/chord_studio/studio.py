"""
Chord studio session - the caller-facing facade.

Owns the selected key and scale, the current progression and the single
playback scheduler. Generating a new progression stops any playback first
so the scheduler never plays a stale voicing.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from chord_studio.compiler.midi import export, save_midi
from chord_studio.config import StudioConfig
from chord_studio.constants import MIDI_FILENAME, ErrorMessages
from chord_studio.core import PitchClass, Scale
from chord_studio.harmony import ProgressionGenerator, insight, summary
from chord_studio.models import Progression, ProgressionTemplate
from chord_studio.playback import AudioBackend, LoggingBackend, PlaybackScheduler, PlaybackState
from chord_studio.templates import TemplateLoader

logger = logging.getLogger(__name__)


class ChordStudio:
    """
    One user session: generate, play, inspect and export progressions.
    """

    def __init__(
        self,
        config: StudioConfig | None = None,
        backend: AudioBackend | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the session.

        Args:
            config: Settings (default: StudioConfig())
            backend: Audio backend (default: LoggingBackend)
            rng: Random source for template choice (default: seeded from config.seed)
        """
        self.config = config or StudioConfig()
        self.loader = TemplateLoader(self.config.templates_dir)
        self.generator = ProgressionGenerator(
            self.loader.list_templates(),
            rng or random.Random(self.config.seed),
            chromatic=self.config.chromatic_roots,
        )
        self.scheduler = PlaybackScheduler(
            backend or LoggingBackend(),
            tempo_bpm=self.config.tempo_bpm,
            octave=self.config.octave,
        )
        self.key = PitchClass.C
        self.scale = Scale.MAJOR
        self._progression: Progression | None = None

    @property
    def progression(self) -> Progression | None:
        return self._progression

    @property
    def templates(self) -> list[ProgressionTemplate]:
        return self.generator.templates

    @property
    def playback_state(self) -> PlaybackState:
        return self.scheduler.state

    def select(self, key: PitchClass | str | None = None, scale: Scale | str | None = None) -> None:
        """Change the selected key and/or scale."""
        if key is not None:
            self.key = PitchClass.parse(key)
        if scale is not None:
            self.scale = Scale.parse(scale)

    def generate(
        self,
        key: PitchClass | str | None = None,
        scale: Scale | str | None = None,
        template: ProgressionTemplate | str | None = None,
    ) -> Progression:
        """
        Replace the current progression with a new one.

        Stops playback first; the highlighted chord resets to none.
        """
        self.select(key, scale)
        if self.scheduler.stop():
            logger.debug("Stopped playback before regenerating")
        self._progression = self.generator.generate(self.key, self.scale, template)
        logger.info(f"Generated {self._progression} ({self._progression.template_name})")
        return self._progression

    def require_progression(self) -> Progression:
        """The current progression, or ValueError if none was generated."""
        if self._progression is None:
            raise ValueError(ErrorMessages.NO_PROGRESSION)
        return self._progression

    def play(self) -> bool:
        """Start playing the current progression. Ignored while already playing."""
        return self.scheduler.start(self.require_progression())

    def stop(self) -> bool:
        """Stop playback. No-op when idle."""
        return self.scheduler.stop()

    def toggle(self) -> bool:
        """Play if idle, stop if playing. Returns the new is_playing."""
        if self.scheduler.is_playing:
            self.stop()
        else:
            self.play()
        return self.scheduler.is_playing

    def insights(self) -> list[str]:
        """One caption per chord position."""
        progression = self.require_progression()
        return [insight(progression, index) for index in range(len(progression))]

    def summary(self) -> str:
        return summary(self.require_progression())

    def export_midi(self) -> bytes:
        """The current progression as MIDI file bytes."""
        return export(
            self.require_progression(),
            chord_seconds=self.config.chord_seconds,
            octave=self.config.octave,
            velocity=self.config.velocity,
        )

    def save_midi(self, filename: str = MIDI_FILENAME, output_dir: Path | None = None) -> Path:
        """Write the current progression to a MIDI file."""
        return save_midi(
            self.require_progression(),
            output_dir or self.config.output_dir,
            filename,
            chord_seconds=self.config.chord_seconds,
            octave=self.config.octave,
            velocity=self.config.velocity,
        )
