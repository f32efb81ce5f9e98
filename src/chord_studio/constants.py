"""
Constants for the chord studio.

No magic strings - defaults, file naming and messages live here.
"""

# Voicing
REFERENCE_OCTAVE = 4

# Playback - one tick per quarter note at the default tempo
DEFAULT_TEMPO_BPM = 120

# MIDI export - absolute seconds, independent of playback tempo
CHORD_SECONDS = 1.0
DEFAULT_VELOCITY = 100
MIDI_FILENAME = "chord-progression.mid"
MIDI_CONTENT_TYPE = "audio/midi"

# Config file looked up in the working directory
CONFIG_FILENAME = "chord-studio.yaml"

INSIGHTS: tuple[str, ...] = (
    "Tonic chord, provides a sense of resolution",
    "Builds tension, often leading back to the tonic",
    "Creates movement, often used in transitions",
    "Subdominant chord, creates anticipation",
    "Dominant chord, creates strong pull to the tonic",
    "Related to the tonic, often used for emotional effect",
    "Creates tension, typically resolves to the tonic",
)
FALLBACK_INSIGHT = "Adds color and interest to the progression"


class ErrorMessages:
    """Standardized error messages."""

    NO_PROGRESSION = "No progression generated yet. Generate one first."
    TEMPLATE_NOT_FOUND = "Template '{name}' not found."
    NO_EVENT_LOOP = "Playback needs a running event loop."
    PORT_UNAVAILABLE = "Could not open MIDI output port '{port}': {error}"
    INVALID_FILENAME = "Invalid file name '{name}': must be a plain name without directories."


class SuccessMessages:
    """Standardized success messages."""

    PROGRESSION_GENERATED = "Generated {chords} from template '{template}'."
    PLAYBACK_STARTED = "Playing {count} chords at {tempo} BPM."
    PLAYBACK_STOPPED = "Playback stopped."
    MIDI_EXPORTED = "Exported {count} note events to {path}."
