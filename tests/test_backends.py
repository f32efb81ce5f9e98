"""
Tests for the audio backends.

MidiOutputBackend is exercised against a fake port patched in for
mido.open_output, so no MIDI hardware is needed.
"""

import asyncio

import pytest

from chord_studio.harmony import voice
from chord_studio.playback import LoggingBackend, MidiOutputBackend, TransportUnavailableError

CLOCK_SLACK = 0.005


class FakePort:
    """Output port that records what it is sent, with the loop time."""

    def __init__(self, name: str | None) -> None:
        self.name = name
        self.sent: list[tuple[str, int, int, float]] = []
        self.closed = False

    def send(self, msg) -> None:
        now = asyncio.get_running_loop().time()
        self.sent.append((msg.type, msg.note, msg.velocity, now))

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def midi_backend(monkeypatch) -> tuple[MidiOutputBackend, FakePort]:
    ports: list[FakePort] = []

    def fake_open_output(name=None):
        ports.append(FakePort(name))
        return ports[-1]

    monkeypatch.setattr("chord_studio.playback.backends.open_output", fake_open_output)
    backend = MidiOutputBackend("Test Port", velocity=90)
    return backend, ports[0]


class TestMidiOutputBackend:
    """Tests for MidiOutputBackend."""

    def test_opens_named_port(self, midi_backend) -> None:
        """The configured port name is passed to mido."""
        _, port = midi_backend
        assert port.name == "Test Port"

    @pytest.mark.asyncio
    async def test_note_on_then_note_off(self, midi_backend) -> None:
        """Chord tones sound at the scheduled time and stop after the duration."""
        backend, port = midi_backend
        loop = asyncio.get_running_loop()
        start = loop.time() + 0.01
        backend.trigger(voice("C").pitches, 0.02, start)

        await asyncio.sleep(0.06)

        assert [(kind, note, velocity) for kind, note, velocity, _ in port.sent] == [
            ("note_on", 60, 90),
            ("note_on", 64, 90),
            ("note_on", 67, 90),
            ("note_off", 60, 0),
            ("note_off", 64, 0),
            ("note_off", 67, 0),
        ]
        on_times = [t for kind, _, _, t in port.sent if kind == "note_on"]
        off_times = [t for kind, _, _, t in port.sent if kind == "note_off"]
        # asyncio may run a timer up to one clock tick early
        assert min(on_times) >= start - CLOCK_SLACK
        assert min(off_times) >= start + 0.02 - CLOCK_SLACK

    @pytest.mark.asyncio
    async def test_release_all_silences_sounding_notes(self, midi_backend) -> None:
        """release_all turns off held notes and cancels their pending note-offs."""
        backend, port = midi_backend
        loop = asyncio.get_running_loop()
        backend.trigger(voice("Am").pitches, 10.0, loop.time())
        await asyncio.sleep(0.01)
        assert [kind for kind, *_ in port.sent] == ["note_on"] * 3

        backend.release_all()
        assert sorted(note for kind, note, *_ in port.sent if kind == "note_off") == [69, 72, 76]

        await asyncio.sleep(0.02)
        assert len(port.sent) == 6
        assert backend._handles == []
        assert backend._sounding == set()

    @pytest.mark.asyncio
    async def test_release_all_cancels_future_chords(self, midi_backend) -> None:
        """A chord scheduled for later never sounds after release_all."""
        backend, port = midi_backend
        loop = asyncio.get_running_loop()
        backend.trigger(voice("G").pitches, 0.01, loop.time() + 0.02)
        backend.release_all()

        await asyncio.sleep(0.05)
        assert port.sent == []

    @pytest.mark.asyncio
    async def test_finished_handles_are_pruned(self, midi_backend) -> None:
        """Only handles still pending are kept between triggers."""
        backend, _ = midi_backend
        loop = asyncio.get_running_loop()
        backend.trigger(voice("C").pitches, 0.005, loop.time())
        backend.trigger(voice("F").pitches, 0.005, loop.time())
        await asyncio.sleep(0.02)

        backend.trigger(voice("G").pitches, 1.0, loop.time() + 0.5)
        assert len(backend._handles) == 2
        backend.release_all()

    @pytest.mark.asyncio
    async def test_close(self, midi_backend) -> None:
        """close() silences and closes the port."""
        backend, port = midi_backend
        backend.trigger(voice("C").pitches, 10.0, asyncio.get_running_loop().time())
        await asyncio.sleep(0.01)

        backend.close()
        assert port.closed
        assert [kind for kind, *_ in port.sent].count("note_off") == 3

    def test_unavailable_port(self, monkeypatch) -> None:
        """A port that cannot be opened is a transport failure."""

        def broken_open_output(name=None):
            raise OSError("unknown port")

        monkeypatch.setattr("chord_studio.playback.backends.open_output", broken_open_output)
        with pytest.raises(TransportUnavailableError, match="Missing Port"):
            MidiOutputBackend("Missing Port")

    def test_missing_midi_library(self, monkeypatch) -> None:
        """No rtmidi installed is also a transport failure."""

        def no_backend(name=None):
            raise ImportError("No module named 'rtmidi'")

        monkeypatch.setattr("chord_studio.playback.backends.open_output", no_backend)
        with pytest.raises(TransportUnavailableError, match="default"):
            MidiOutputBackend()


class TestLoggingBackend:
    """Tests for LoggingBackend."""

    def test_logs_each_trigger(self, caplog) -> None:
        """Each trigger is counted and logged with note names."""
        backend = LoggingBackend()
        with caplog.at_level("INFO", logger="chord_studio.playback.backends"):
            backend.trigger(voice("Bdim").pitches, 0.5, 1.0)
        assert backend.triggered == 1
        assert "B4 D5 F5" in caplog.text
