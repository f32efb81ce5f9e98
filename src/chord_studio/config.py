"""
Studio configuration.

Settings come from an optional YAML file (chord-studio.yaml in the working
directory by default). Every field has a default, so an empty or missing
file is a valid configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from chord_studio.constants import (
    CHORD_SECONDS,
    CONFIG_FILENAME,
    DEFAULT_TEMPO_BPM,
    DEFAULT_VELOCITY,
    REFERENCE_OCTAVE,
    ErrorMessages,
)

logger = logging.getLogger(__name__)


class StudioConfig(BaseModel):
    """Settings for a chord studio session."""

    tempo_bpm: int = Field(DEFAULT_TEMPO_BPM, gt=0, le=400, description="Playback tempo")
    octave: int = Field(REFERENCE_OCTAVE, ge=0, le=8, description="Voicing octave")
    chord_seconds: float = Field(CHORD_SECONDS, gt=0, description="MIDI export chord length")
    velocity: int = Field(DEFAULT_VELOCITY, ge=0, le=127, description="Note velocity")
    output_dir: Path = Field(Path("output"), description="Where MIDI files are written")
    templates_dir: Path | None = Field(None, description="Project template YAML directory")
    midi_port: str | None = Field(None, description="MIDI output port for playback")
    seed: int | None = Field(None, description="Seed for template selection")
    chromatic_roots: bool = Field(
        False, description="Resolve degrees as semitone offsets from the key"
    )

    model_config = {"frozen": True}


def load_config(path: Path | None = None) -> StudioConfig:
    """
    Load configuration from YAML.

    Args:
        path: Config file (default: ./chord-studio.yaml). A missing
            default file gives the default config; a missing explicit
            file is an error.

    Returns:
        The parsed StudioConfig
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
        if not path.exists():
            return StudioConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = StudioConfig.model_validate(data)
    logger.info(f"Loaded config from {path}")
    return config


def check_filename(name: str) -> str:
    """
    Return name if it is a bare file name, else raise ValueError.

    Names that are empty, '.', '..' or contain a directory part would
    write outside the target directory.
    """
    if name in ("", ".", "..") or Path(name).name != name or "\\" in name:
        raise ValueError(ErrorMessages.INVALID_FILENAME.format(name=name))
    return name
