"""
Audio backends - what actually makes a sound.

The scheduler only asks a backend to "play these pitches for this long at
this time" and to silence everything on stop. How sound is produced is
the backend's business.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Protocol

from mido import Message, open_output

from chord_studio.constants import DEFAULT_VELOCITY, ErrorMessages
from chord_studio.core import Pitch

logger = logging.getLogger(__name__)


class TransportUnavailableError(RuntimeError):
    """The timing or audio resource needed for playback could not be acquired."""


class AudioBackend(Protocol):
    """Anything the scheduler can trigger chords on."""

    def trigger(self, pitches: Sequence[Pitch], duration: float, scheduled_time: float) -> None:
        """Sound pitches for duration seconds starting at scheduled_time (event loop clock)."""
        ...

    def release_all(self) -> None:
        """Silence everything and drop anything still pending."""
        ...


class LoggingBackend:
    """Backend that logs each trigger. Used when no MIDI port is configured."""

    def __init__(self) -> None:
        self.triggered = 0

    def trigger(self, pitches: Sequence[Pitch], duration: float, scheduled_time: float) -> None:
        self.triggered += 1
        names = " ".join(pitch.name for pitch in pitches)
        logger.info(f"Chord {names} for {duration:.3f}s at t={scheduled_time:.3f}")

    def release_all(self) -> None:
        logger.debug("Released all notes")


class MidiOutputBackend:
    """
    Backend that plays chords on a MIDI output port.

    Note-on and note-off messages are scheduled on the running event loop,
    so trigger() must be called from inside it.
    """

    def __init__(
        self,
        port_name: str | None = None,
        velocity: int = DEFAULT_VELOCITY,
        channel: int = 0,
    ):
        """
        Open the output port.

        Args:
            port_name: Port to open (default: the system default port)
            velocity: Note-on velocity
            channel: MIDI channel (0-15)

        Raises:
            TransportUnavailableError: If the port cannot be opened
        """
        try:
            self._port = open_output(port_name)
        except (OSError, ImportError) as e:
            raise TransportUnavailableError(
                ErrorMessages.PORT_UNAVAILABLE.format(port=port_name or "default", error=e)
            ) from e
        self.velocity = velocity
        self.channel = channel
        self._handles: list[asyncio.TimerHandle] = []
        self._sounding: set[int] = set()

    def trigger(self, pitches: Sequence[Pitch], duration: float, scheduled_time: float) -> None:
        loop = asyncio.get_running_loop()
        notes = [pitch.midi for pitch in pitches]
        now = loop.time()
        self._handles = [h for h in self._handles if not h.cancelled() and h.when() > now]
        self._handles.append(loop.call_at(scheduled_time, self._note_on, notes))
        self._handles.append(loop.call_at(scheduled_time + duration, self._note_off, notes))

    def release_all(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
        self._note_off(sorted(self._sounding))

    def close(self) -> None:
        """Silence and close the port."""
        self.release_all()
        self._port.close()

    def _note_on(self, notes: list[int]) -> None:
        for note in notes:
            self._port.send(
                Message("note_on", channel=self.channel, note=note, velocity=self.velocity)
            )
            self._sounding.add(note)

    def _note_off(self, notes: list[int]) -> None:
        for note in notes:
            self._port.send(Message("note_off", channel=self.channel, note=note, velocity=0))
            self._sounding.discard(note)
