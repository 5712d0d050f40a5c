"""Application ports implemented by infrastructure adapters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from streamvol.stream_options import StreamType


class PropertyStore(Protocol):
    """Key/value string store with an optional namespace hint."""

    def get(self, key: str, namespace: str | None = None) -> str | None:
        """Return the stored string for ``key`` or ``None`` when unset."""

    def set(self, key: str, value: Any, namespace: str | None = None) -> None:
        """Store ``value`` (stringified) under ``key``."""


class AudioBackend(Protocol):
    """Port to the native audio driver."""

    @property
    def stream_ids(self) -> Mapping[StreamType, int]:
        """Native integer handle for every stream class."""

    def set_stream_volume(self, stream_id: int, volume: int) -> bool:
        """Apply ``volume`` to the stream; return False when rejected."""

    def get_stream_playing_status(self, stream_id: int) -> bool:
        """True when the stream is connected and playing."""

    def is_muted(self) -> bool:
        """Global mute state."""

    def set_mute(self, muted: bool) -> bool:
        """Set global mute state."""

    def set_curve_for_volume(self, index: int, value: Any) -> bool:
        """Set one volume curve point; return False when out of range."""
