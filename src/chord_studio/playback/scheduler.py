"""
Playback scheduler - plays a progression one chord per quarter note.

State machine:

    Idle --start()--> Playing --last tick--> Idle
                      Playing --stop()-----> Idle

The transport is an asyncio task owned by the scheduler. Tick i is due at
origin + i * quarter on the event loop clock, so ticks never drift and
never overlap. Each session gets its own task; a tick only fires while
that task is still the scheduler's active one, so nothing fires after
stop().

A backend error ends the session early. It is logged, kept as last_error
and re-raised by wait().
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from types import TracebackType

from chord_studio.constants import DEFAULT_TEMPO_BPM, REFERENCE_OCTAVE, ErrorMessages
from chord_studio.core import ChordSymbol
from chord_studio.harmony.voicing import VoicedChord, voice
from chord_studio.playback.backends import AudioBackend, TransportUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackState:
    """Observable playback state. current_index is -1 when nothing sounds."""

    is_playing: bool = False
    current_index: int = -1


PlaybackListener = Callable[[PlaybackState], None]


class PlaybackScheduler:
    """
    Drives timed chord playback against the event loop clock.

    Only one session runs at a time: start() while playing is ignored.
    """

    def __init__(
        self,
        backend: AudioBackend,
        tempo_bpm: int = DEFAULT_TEMPO_BPM,
        octave: int = REFERENCE_OCTAVE,
    ):
        """
        Initialize the scheduler.

        Args:
            backend: Audio backend that sounds each chord
            tempo_bpm: Tempo; one chord per quarter note
            octave: Voicing octave
        """
        if tempo_bpm <= 0:
            raise ValueError(f"Tempo must be positive, got {tempo_bpm}")
        self.backend = backend
        self.tempo_bpm = tempo_bpm
        self.octave = octave
        self._task: asyncio.Task[None] | None = None
        self._is_playing = False
        self._current_index = -1
        self._listeners: list[PlaybackListener] = []
        self._error: Exception | None = None

    @property
    def tick_seconds(self) -> float:
        """Length of one quarter note in seconds."""
        return 60.0 / self.tempo_bpm

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def last_error(self) -> Exception | None:
        """The backend failure that ended the last session, if any."""
        return self._error

    @property
    def state(self) -> PlaybackState:
        return PlaybackState(self._is_playing, self._current_index)

    def subscribe(self, listener: PlaybackListener) -> Callable[[], None]:
        """
        Call listener on every state change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self, progression: Iterable[ChordSymbol | str]) -> bool:
        """
        Start playing a progression.

        Args:
            progression: Chords to play, in order

        Returns:
            True if playback started; False if already playing or empty

        Raises:
            TransportUnavailableError: If there is no running event loop
        """
        if self._is_playing:
            logger.debug("Ignoring start: already playing")
            return False

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise TransportUnavailableError(ErrorMessages.NO_EVENT_LOOP) from e

        chords = [voice(chord, self.octave) for chord in progression]
        if not chords:
            logger.debug("Ignoring start: empty progression")
            return False

        self._is_playing = True
        self._current_index = -1
        self._error = None
        self._task = loop.create_task(self._run(chords, loop.time()))
        logger.info(f"Playing {len(chords)} chords at {self.tempo_bpm} BPM")
        self._notify()
        return True

    def stop(self) -> bool:
        """
        Stop playback immediately. No-op when idle.

        Returns:
            True if a session was stopped
        """
        if not self._is_playing:
            return False

        task = self._task
        self._release()
        if task is not None and task is not asyncio.current_task():
            task.cancel()
        self.backend.release_all()
        logger.info("Playback stopped")
        return True

    async def wait(self) -> None:
        """
        Wait until the current session (if any) finishes or is stopped.

        Raises:
            Exception: The backend error that ended the session early
        """
        task = self._task
        if task is not None:
            await asyncio.wait({task})
        if self._error is not None:
            raise self._error

    async def __aenter__(self) -> PlaybackScheduler:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    async def _run(self, chords: list[VoicedChord], origin: float) -> None:
        """Fire one tick per chord, then return to Idle."""
        loop = asyncio.get_running_loop()
        me = asyncio.current_task()
        tick = self.tick_seconds
        try:
            for index, chord in enumerate(chords):
                scheduled_time = origin + index * tick
                delay = scheduled_time - loop.time()
                if delay > 0:
                    await asyncio.sleep(delay)
                if self._task is not me:
                    return
                self.backend.trigger(chord.pitches, tick, scheduled_time)
                self._current_index = index
                self._notify()
        except Exception as e:
            if self._task is not me:
                raise
            logger.exception(f"Playback failed at chord {index} of {len(chords)}")
            self._error = e
        finally:
            # Completion, cancellation or a backend error all end the session
            if self._task is me:
                self._release()

    def _release(self) -> None:
        self._task = None
        self._is_playing = False
        self._current_index = -1
        self._notify()

    def _notify(self) -> None:
        state = self.state
        for listener in list(self._listeners):
            listener(state)
