"""PulseAudio (or pipewire-pulse) backend built on ``pulsectl``.

PulseAudio has no notion of stream classes, so each class is mapped to the
``media.role`` property clients attach to their sink inputs. Volume curves are
kept locally and applied whenever a stream volume is written.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Real
from typing import TYPE_CHECKING, Any

from streamvol.application.ports import AudioBackend
from streamvol.infrastructure.memory_backend import DEFAULT_STREAM_IDS
from streamvol.stream_options import StreamType

if TYPE_CHECKING:
    import pulsectl

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_ROLES: dict[StreamType, str] = {
    StreamType.AUDIO: "video",
    StreamType.TTS: "a11y",
    StreamType.RING: "event",
    StreamType.VOICE_CALL: "phone",
    StreamType.PLAYBACK: "music",
    StreamType.ALARM: "alarm",
    StreamType.SYSTEM: "notification",
}


class PulseAudioBackend(AudioBackend):
    """Drive sink-input volumes and default-sink mute through a Pulse connection."""

    def __init__(
        self,
        client_name: str = "streamvol",
        *,
        media_roles: Mapping[StreamType, str] | None = None,
        stream_ids: Mapping[StreamType, int] | None = None,
        curve_ceiling: int = 100,
        pulse: pulsectl.Pulse | None = None,
    ) -> None:
        self._client_name = client_name
        self._pulse = pulse
        self._media_roles = dict(media_roles or DEFAULT_MEDIA_ROLES)
        self._stream_ids = dict(stream_ids or DEFAULT_STREAM_IDS)
        self._kinds_by_id = {stream_id: kind for kind, stream_id in self._stream_ids.items()}
        self.curve_ceiling = curve_ceiling
        self._curve: dict[int, float] = {}

    @property
    def stream_ids(self) -> Mapping[StreamType, int]:
        return self._stream_ids

    def _connect(self) -> pulsectl.Pulse:
        if self._pulse is None:
            import pulsectl

            self._pulse = pulsectl.Pulse(self._client_name)
        return self._pulse

    def close(self) -> None:
        if self._pulse is not None:
            self._pulse.close()
        self._pulse = None

    def _sink_inputs_for(self, stream_id: int) -> list[Any]:
        kind = self._kinds_by_id.get(stream_id)
        if kind is None:
            return []
        role = self._media_roles.get(kind)
        return [
            sink_input
            for sink_input in self._connect().sink_input_list()
            if sink_input.proplist.get("media.role") == role
        ]

    def _default_sink(self) -> Any:
        pulse = self._connect()
        return pulse.get_sink_by_name(pulse.server_info().default_sink_name)

    def shaped_level(self, volume: int) -> float:
        """Map a 0..100 volume through the curve to a Pulse level in 0.0..1.0."""

        return float(self._curve.get(volume, volume)) / self.curve_ceiling

    def set_stream_volume(self, stream_id: int, volume: int) -> bool:
        level = self.shaped_level(volume)
        try:
            pulse = self._connect()
            for sink_input in self._sink_inputs_for(stream_id):
                pulse.volume_set_all_chans(sink_input, level)
        except Exception as error:  # noqa: BLE001
            logger.warning(
                "PulseAudio stream volume update failed.",
                extra={"stream_id": stream_id, "volume": volume},
                exc_info=error,
            )
            return False
        return True

    def get_stream_playing_status(self, stream_id: int) -> bool:
        return any(not sink_input.corked for sink_input in self._sink_inputs_for(stream_id))

    def is_muted(self) -> bool:
        return bool(self._default_sink().mute)

    def set_mute(self, muted: bool) -> bool:
        self._connect().mute(self._default_sink(), bool(muted))
        return True

    def set_curve_for_volume(self, index: int, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        if not 0 <= value <= self.curve_ceiling:
            return False
        self._curve[index] = float(value)
        return True
