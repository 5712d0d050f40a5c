from __future__ import annotations

from types import SimpleNamespace

from streamvol.application.stream_registry import StreamRegistry
from streamvol.infrastructure.memory_backend import DEFAULT_STREAM_IDS
from streamvol.infrastructure.property_stores import InMemoryPropertyStore
from streamvol.infrastructure.pulse_backend import PulseAudioBackend
from streamvol.shapers import exponential_ramp
from streamvol.stream_options import StreamType


class _FakePulse:
    def __init__(self, sink_inputs) -> None:
        self.sink_inputs = sink_inputs
        self.sink = SimpleNamespace(name="alsa_output", mute=0)
        self.volume_calls: list[tuple[int, float]] = []
        self.closed = False

    def sink_input_list(self):
        return self.sink_inputs

    def volume_set_all_chans(self, obj, level: float) -> None:
        self.volume_calls.append((obj.index, level))

    def server_info(self):
        return SimpleNamespace(default_sink_name=self.sink.name)

    def get_sink_by_name(self, name: str):
        assert name == self.sink.name
        return self.sink

    def mute(self, obj, mute: bool) -> None:
        obj.mute = int(mute)

    def close(self) -> None:
        self.closed = True


def _sink_input(index: int, role: str, corked: bool = False):
    return SimpleNamespace(index=index, proplist={"media.role": role}, corked=corked)


def test_volume_applies_to_sink_inputs_with_matching_role() -> None:
    pulse = _FakePulse([_sink_input(1, "music"), _sink_input(2, "a11y"), _sink_input(3, "music")])
    backend = PulseAudioBackend(pulse=pulse)

    assert backend.set_stream_volume(DEFAULT_STREAM_IDS[StreamType.PLAYBACK], 50) is True

    assert pulse.volume_calls == [(1, 0.5), (3, 0.5)]


def test_playing_status_ignores_corked_inputs() -> None:
    pulse = _FakePulse([_sink_input(1, "music", corked=True), _sink_input(2, "a11y")])
    backend = PulseAudioBackend(pulse=pulse)

    assert backend.get_stream_playing_status(DEFAULT_STREAM_IDS[StreamType.PLAYBACK]) is False
    assert backend.get_stream_playing_status(DEFAULT_STREAM_IDS[StreamType.TTS]) is True
    assert backend.get_stream_playing_status(9999) is False


def test_mute_targets_default_sink() -> None:
    pulse = _FakePulse([])
    backend = PulseAudioBackend(pulse=pulse)

    backend.set_mute(True)

    assert pulse.sink.mute == 1
    assert backend.is_muted() is True


def test_curve_reshapes_applied_level() -> None:
    pulse = _FakePulse([_sink_input(7, "a11y")])
    backend = PulseAudioBackend(pulse=pulse)
    registry = StreamRegistry(InMemoryPropertyStore(), backend)

    registry.set_volume_shaper(exponential_ramp)
    pulse.volume_calls.clear()
    registry.set_volume(50, StreamType.TTS)

    assert pulse.volume_calls == [(7, backend.shaped_level(50))]
    assert backend.shaped_level(50) < 0.5


def test_curve_rejects_out_of_range_points() -> None:
    backend = PulseAudioBackend(pulse=_FakePulse([]))

    assert backend.set_curve_for_volume(0, 101) is False
    assert backend.set_curve_for_volume(0, "10") is False
    assert backend.set_curve_for_volume(0, 10) is True


def test_failed_volume_update_reports_rejection(caplog) -> None:
    class _BrokenPulse(_FakePulse):
        def volume_set_all_chans(self, obj, level: float) -> None:
            raise RuntimeError("connection lost")

    backend = PulseAudioBackend(pulse=_BrokenPulse([_sink_input(1, "music")]))

    assert backend.set_stream_volume(DEFAULT_STREAM_IDS[StreamType.PLAYBACK], 20) is False
    assert "PulseAudio stream volume update failed" in caplog.text


def test_close_releases_connection() -> None:
    pulse = _FakePulse([])
    backend = PulseAudioBackend(pulse=pulse)

    backend.close()

    assert pulse.closed is True
