"""API-facing handlers that delegate to the stream registry."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from streamvol.application.stream_registry import StreamRegistry
from streamvol.domain.models import StreamDescriptor
from streamvol.errors import (
    AudioControlError,
    CurveRangeError,
    InvalidArgumentError,
    ShaperStructureError,
    StreamPermissionError,
    UnknownStreamError,
)
from streamvol.settings import build_registry, resolve_audio_config

_ERROR_STATUS: tuple[tuple[type[AudioControlError], int], ...] = (
    (UnknownStreamError, 404),
    (StreamPermissionError, 403),
    (ShaperStructureError, 400),
    (CurveRangeError, 400),
    (InvalidArgumentError, 422),
)


@lru_cache(maxsize=1)
def get_registry() -> StreamRegistry:
    """Process-wide registry built from the resolved runtime config."""

    return build_registry(resolve_audio_config())


def error_status(error: AudioControlError) -> int:
    # UnknownStreamError subclasses InvalidArgumentError, so order matters.
    for error_type, status in _ERROR_STATUS:
        if isinstance(error, error_type):
            return status
    return 500


def stream_payload(registry: StreamRegistry, descriptor: StreamDescriptor) -> dict[str, Any]:
    return {
        "id": descriptor.id,
        "name": descriptor.name,
        "readonly": descriptor.readonly,
        "volume": registry.get_volume(descriptor.kind),
        "playing": registry.get_playing_status(descriptor.kind),
    }


__all__ = ["error_status", "get_registry", "stream_payload"]
