"""Public package exports for streamvol with lazy imports."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "StreamRegistry",
    "StreamType",
    "StreamDescriptor",
    "AudioControlError",
    "InvalidArgumentError",
    "UnknownStreamError",
    "StreamPermissionError",
    "ShaperStructureError",
    "CurveRangeError",
    "InMemoryAudioBackend",
    "InMemoryPropertyStore",
    "JsonFilePropertyStore",
    "get",
    "pick",
    "starts_with",
    "linear_ramp",
]

_EXPORT_MODULES: dict[str, str] = {
    "StreamRegistry": "streamvol.application.stream_registry",
    "StreamType": "streamvol.stream_options",
    "StreamDescriptor": "streamvol.domain.models",
    "AudioControlError": "streamvol.errors",
    "InvalidArgumentError": "streamvol.errors",
    "UnknownStreamError": "streamvol.errors",
    "StreamPermissionError": "streamvol.errors",
    "ShaperStructureError": "streamvol.errors",
    "CurveRangeError": "streamvol.errors",
    "InMemoryAudioBackend": "streamvol.infrastructure.memory_backend",
    "InMemoryPropertyStore": "streamvol.infrastructure.property_stores",
    "JsonFilePropertyStore": "streamvol.infrastructure.property_stores",
    "get": "streamvol.utils.objects",
    "pick": "streamvol.utils.objects",
    "starts_with": "streamvol.utils.objects",
    "linear_ramp": "streamvol.shapers",
}


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MODULES:
        raise AttributeError(f"module 'streamvol' has no attribute {name!r}")

    module = import_module(_EXPORT_MODULES[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
