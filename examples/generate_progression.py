#!/usr/bin/env python3
"""
Example: Generate chord progressions and export them to MIDI.

Run this script to create playable MIDI files you can open in any DAW.

Usage:
    python examples/generate_progression.py
    # Creates: examples/output/<key>-<scale>.mid
"""

import random
from pathlib import Path

from chord_studio.compiler.midi import save_midi
from chord_studio.harmony import ProgressionGenerator, insight, summary, voice
from chord_studio.templates import COMMON_PROGRESSIONS


def main() -> None:
    """Generate example progressions."""
    output_dir = Path(__file__).parent / "output"
    generator = ProgressionGenerator(COMMON_PROGRESSIONS, random.Random(2024))

    for key, scale in [("C", "Major"), ("A", "Minor"), ("F#", "Major")]:
        progression = generator.generate(key, scale)
        print(f"{key} {scale} ({progression.template_name}): {progression}")

        for index, chord in enumerate(progression):
            notes = " ".join(voice(chord).names)
            print(f"  {index}: {chord!s:<5} {notes:<12} {insight(progression, index)}")

        print(f"  {summary(progression)}")

        filename = f"{key.replace('#', 's')}-{scale.lower()}.mid"
        path = save_midi(progression, output_dir, filename)
        print(f"  Created: {path}\n")

    print("Done! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
