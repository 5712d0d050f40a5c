"""Domain entities for the stream catalog."""

from __future__ import annotations

from dataclasses import dataclass

from streamvol.stream_options import StreamType

VOLUME_PROPERTY_PREFIX = "audio.volume"
DEFAULT_VOLUME_PROPERTY = f"{VOLUME_PROPERTY_PREFIX}.default"
PERSIST_NAMESPACE = "persist"


@dataclass(frozen=True, slots=True)
class StreamDefinition:
    """Static description of a catalog entry before a backend assigns its id."""

    kind: StreamType
    readonly: bool = False


@dataclass(frozen=True, slots=True)
class StreamDescriptor:
    """One audio channel class bound to its native backend handle."""

    kind: StreamType
    id: int
    readonly: bool = False

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def property_key(self) -> str:
        return f"{VOLUME_PROPERTY_PREFIX}.{self.name}"


# Catalog order is also initialization order.
STREAM_CATALOG: tuple[StreamDefinition, ...] = (
    StreamDefinition(StreamType.AUDIO),
    StreamDefinition(StreamType.TTS),
    StreamDefinition(StreamType.RING),
    StreamDefinition(StreamType.VOICE_CALL),
    StreamDefinition(StreamType.PLAYBACK),
    StreamDefinition(StreamType.ALARM),
    StreamDefinition(StreamType.SYSTEM, readonly=True),
)
