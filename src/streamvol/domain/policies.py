"""Domain value objects describing volume policy."""

from __future__ import annotations

from dataclasses import dataclass

from streamvol.stream_options import StreamType


@dataclass(frozen=True, slots=True)
class VolumePolicy:
    """Bounds and defaults applied to every volume write."""

    policy_id: str
    min_volume: int = 0
    max_volume: int = 100
    fallback_default_volume: int = 60
    curve_max_index: int = 100
    default_stream: StreamType = StreamType.TTS
    broadcast_streams: tuple[StreamType, ...] = (
        StreamType.AUDIO,
        StreamType.PLAYBACK,
        StreamType.TTS,
        StreamType.RING,
    )
    policy_version: str = "v1"

    def clamp(self, volume: float) -> float:
        if volume > self.max_volume:
            return self.max_volume
        if volume < self.min_volume:
            return self.min_volume
        return volume


DEFAULT_VOLUME_POLICY = VolumePolicy(policy_id="stream-volume-default", policy_version="v1")
