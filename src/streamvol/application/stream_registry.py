"""Stream registry: the closed catalog of audio streams and their volume control."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from numbers import Integral
from typing import Any, Union

import numpy as np

from streamvol.application.event_publisher import EventPublisher, NullEventPublisher
from streamvol.application.ports import AudioBackend, PropertyStore
from streamvol.domain.events import MuteChanged, StreamInitialized, VolumeChanged, VolumeShapeApplied
from streamvol.domain.models import (
    DEFAULT_VOLUME_PROPERTY,
    PERSIST_NAMESPACE,
    STREAM_CATALOG,
    StreamDefinition,
    StreamDescriptor,
)
from streamvol.domain.policies import DEFAULT_VOLUME_POLICY, VolumePolicy
from streamvol.errors import (
    CurveRangeError,
    InvalidArgumentError,
    ShaperStructureError,
    StreamPermissionError,
    UnknownStreamError,
)
from streamvol.stream_options import StreamType, parse_case_insensitive_enum
from streamvol.utils.numbers import is_volume_number, parse_int

logger = logging.getLogger(__name__)

StreamRef = Union[StreamType, int, str]
Shaper = Callable[[int], Any]


def resolve_default_volume(
    property_store: PropertyStore,
    fallback: int,
    policy: VolumePolicy = DEFAULT_VOLUME_POLICY,
) -> int:
    """Read ``audio.volume.default`` from the store, falling back when unset or non-numeric.

    Either source is clamped to the policy bounds.
    """

    stored = parse_int(property_store.get(DEFAULT_VOLUME_PROPERTY, PERSIST_NAMESPACE))
    if stored is None:
        stored = fallback
    return int(policy.clamp(stored))


class StreamRegistry:
    """Mediates persisted volume and native playback state for the stream catalog.

    The registry is built once with its collaborators. Construction binds every
    catalog entry to the backend's native id and seeds a default volume for
    streams that have none persisted yet.
    """

    def __init__(
        self,
        property_store: PropertyStore,
        backend: AudioBackend,
        *,
        policy: VolumePolicy = DEFAULT_VOLUME_POLICY,
        default_volume: int | None = None,
        event_publisher: EventPublisher | None = None,
        catalog: Iterable[StreamDefinition] = STREAM_CATALOG,
    ) -> None:
        self._store = property_store
        self._backend = backend
        self.policy = policy
        self.event_publisher = event_publisher or NullEventPublisher()

        fallback = policy.fallback_default_volume if default_volume is None else default_volume
        self.default_volume = resolve_default_volume(property_store, fallback, policy)

        self._descriptors = self._bind_catalog(catalog, backend)
        self._by_id = {descriptor.id: descriptor for descriptor in self._descriptors}
        self._by_kind = {descriptor.kind: descriptor for descriptor in self._descriptors}
        self.initialize()

    @staticmethod
    def _bind_catalog(
        catalog: Iterable[StreamDefinition], backend: AudioBackend
    ) -> tuple[StreamDescriptor, ...]:
        stream_ids = backend.stream_ids
        descriptors: list[StreamDescriptor] = []
        seen_ids: set[int] = set()
        for definition in catalog:
            if definition.kind not in stream_ids:
                raise ValueError(f"Audio backend exposes no id for stream '{definition.kind.value}'.")
            stream_id = int(stream_ids[definition.kind])
            if stream_id in seen_ids:
                raise ValueError(f"Audio backend reuses stream id {stream_id}.")
            seen_ids.add(stream_id)
            descriptors.append(
                StreamDescriptor(kind=definition.kind, id=stream_id, readonly=definition.readonly)
            )
        return tuple(descriptors)

    def initialize(self) -> list[StreamDescriptor]:
        """Persist the default volume for every stream lacking one.

        Safe to call repeatedly: streams with a parsable persisted value are
        left untouched. Returns the streams that were seeded.
        """

        seeded: list[StreamDescriptor] = []
        for descriptor in self._descriptors:
            if self._read_volume(descriptor) is not None:
                continue
            applied = self._store_volume(descriptor, self.default_volume)
            seeded.append(descriptor)
            logger.info(
                "Seeded default stream volume",
                extra={"stream": descriptor.name, "volume": applied},
            )
            self.event_publisher.publish(
                StreamInitialized(
                    stream_name=descriptor.name,
                    payload_summary={"stream_id": descriptor.id, "volume": applied},
                )
            )
        return seeded

    # Catalog lookups

    def streams(self) -> tuple[StreamDescriptor, ...]:
        return self._descriptors

    def _lookup(self, stream: Any) -> StreamDescriptor | None:
        if isinstance(stream, StreamType):
            return self._by_kind.get(stream)
        if isinstance(stream, bool):
            return None
        if isinstance(stream, Integral):
            return self._by_id.get(int(stream))
        if isinstance(stream, str):
            token = stream.strip()
            if token.isascii() and token.isdigit():
                return self._by_id.get(int(token))
            try:
                kind = parse_case_insensitive_enum(stream, StreamType)
            except ValueError:
                return None
            return self._by_kind.get(kind)
        return None

    def descriptor(self, stream: Any) -> StreamDescriptor:
        """Resolve a stream reference or raise UnknownStreamError."""

        descriptor = self._lookup(stream)
        if descriptor is None:
            raise UnknownStreamError(stream)
        return descriptor

    def _resolve_or_default(self, stream: Any) -> StreamDescriptor:
        if stream is None:
            return self.descriptor(self.policy.default_stream)
        return self.descriptor(stream)

    def get_stream_name(self, stream: Any) -> str | None:
        """Catalog name for ``stream`` or None; never raises."""

        descriptor = self._lookup(stream)
        return descriptor.name if descriptor is not None else None

    # Persistence helpers

    def _read_volume(self, descriptor: StreamDescriptor) -> int | None:
        return parse_int(self._store.get(descriptor.property_key, PERSIST_NAMESPACE))

    def _store_volume(self, descriptor: StreamDescriptor, volume: float) -> int:
        applied = math.floor(volume)
        self._store.set(descriptor.property_key, str(applied), PERSIST_NAMESPACE)
        if self._backend.set_stream_volume(descriptor.id, applied) is False:
            logger.warning(
                "Audio backend rejected stream volume",
                extra={"stream": descriptor.name, "stream_id": descriptor.id, "volume": applied},
            )
        return applied

    # Operations

    def set_volume(self, volume: Any, stream: StreamRef | None = None) -> None:
        """Set the volume of ``stream``, or of every broadcast stream when omitted.

        The volume is clamped to the policy bounds and floored before it is
        persisted. Broadcast writes are applied one stream at a time; a failure
        part way through leaves earlier streams updated.

        Raises UnknownStreamError, InvalidArgumentError or StreamPermissionError.
        """

        descriptor = None if stream is None else self.descriptor(stream)
        if not is_volume_number(volume):
            raise InvalidArgumentError(f"vol must be a number, got {type(volume).__name__}")
        clamped = self.policy.clamp(volume)

        if descriptor is None:
            for kind in self.policy.broadcast_streams:
                self.set_volume(clamped, kind)
            return

        if descriptor.readonly:
            raise StreamPermissionError(descriptor.name)

        applied = self._store_volume(descriptor, clamped)
        logger.debug("Stream volume set", extra={"stream": descriptor.name, "volume": applied})
        self.event_publisher.publish(
            VolumeChanged(
                stream_name=descriptor.name,
                payload_summary={"stream_id": descriptor.id, "requested": volume, "volume": applied},
            )
        )

    def get_volume(self, stream: StreamRef | None = None) -> int | None:
        """Persisted volume of ``stream`` (TTS when omitted), or None when unparsable."""

        return self._read_volume(self._resolve_or_default(stream))

    def is_muted(self) -> bool:
        return bool(self._backend.is_muted())

    def set_mute(self, muted: Any) -> bool:
        result = self._backend.set_mute(bool(muted))
        self.event_publisher.publish(
            MuteChanged(stream_name=None, payload_summary={"muted": bool(muted)})
        )
        return result

    def set_volume_shaper(self, shaper: Shaper) -> bool:
        """Apply the volume curve produced by ``shaper``.

        ``shaper`` is called with the maximum curve index (100) and must return
        a list, tuple or 1-D numpy array with one value per index 0..100. Points
        are forwarded in order; the first rejected or missing point raises
        CurveRangeError and points already sent stay applied.
        """

        max_index = self.policy.curve_max_index
        shape = shaper(max_index)
        points = _curve_points(shape)

        for index in range(max_index + 1):
            if index >= len(points):
                raise CurveRangeError(index, None)
            value = points[index]
            if not self._backend.set_curve_for_volume(index, value):
                raise CurveRangeError(index, value)

        self.event_publisher.publish(
            VolumeShapeApplied(
                stream_name=None,
                payload_summary={"points": max_index + 1, "shaper": getattr(shaper, "__name__", repr(shaper))},
            )
        )
        return True

    def get_playing_status(self, stream: StreamRef | None = None) -> bool:
        """True when the stream (TTS when omitted) is connected and playing."""

        descriptor = self._resolve_or_default(stream)
        return bool(self._backend.get_stream_playing_status(descriptor.id))

    def snapshot(self) -> list[dict[str, Any]]:
        """Catalog state for display: id, name, readonly flag, volume and playing status."""

        return [
            {
                "id": descriptor.id,
                "name": descriptor.name,
                "readonly": descriptor.readonly,
                "volume": self._read_volume(descriptor),
                "playing": bool(self._backend.get_stream_playing_status(descriptor.id)),
            }
            for descriptor in self._descriptors
        ]


def _curve_points(shape: Any) -> Sequence[Any]:
    if isinstance(shape, np.ndarray):
        if shape.ndim != 1:
            raise ShaperStructureError("shaper function should return a 1-D sequence of curve values.")
        return shape.tolist()
    if isinstance(shape, (list, tuple)):
        return shape
    raise ShaperStructureError(
        f"shaper function should return an array with 101 elements, got {type(shape).__name__}."
    )


__all__ = ["Shaper", "StreamRef", "StreamRegistry", "resolve_default_volume"]
