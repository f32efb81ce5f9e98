#!/usr/bin/env python3
"""
Example: Play a progression on a MIDI output port.

Without a port name the chords are only logged.

Usage:
    python examples/play_progression.py
    python examples/play_progression.py "IAC Driver Bus 1"
"""

import asyncio
import logging
import sys

from chord_studio.config import StudioConfig
from chord_studio.playback import LoggingBackend, MidiOutputBackend, PlaybackState
from chord_studio.studio import ChordStudio

logging.basicConfig(level=logging.INFO)


async def main(port_name: str | None) -> None:
    backend = MidiOutputBackend(port_name) if port_name else LoggingBackend()
    studio = ChordStudio(StudioConfig(tempo_bpm=60), backend=backend)

    progression = studio.generate("D", "Minor")
    print(f"Playing {progression} ({progression.template_name})")

    def show(state: PlaybackState) -> None:
        if state.current_index >= 0:
            print(f"  -> {progression[state.current_index]}")

    studio.scheduler.subscribe(show)
    async with studio.scheduler:
        studio.play()
        await studio.scheduler.wait()
        # Let the last chord ring out
        await asyncio.sleep(studio.scheduler.tick_seconds)

    if isinstance(backend, MidiOutputBackend):
        backend.close()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
