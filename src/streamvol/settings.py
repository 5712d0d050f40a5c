"""Runtime settings from the environment and registry assembly."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from streamvol.application.event_publisher import EventPublisher
from streamvol.application.ports import AudioBackend, PropertyStore
from streamvol.application.stream_registry import StreamRegistry
from streamvol.infrastructure.logging_event_publisher import LoggingEventPublisher
from streamvol.infrastructure.memory_backend import InMemoryAudioBackend
from streamvol.infrastructure.property_stores import InMemoryPropertyStore, JsonFilePropertyStore
from streamvol.shapers import shaper_for
from streamvol.stream_options import BackendKind, parse_case_insensitive_enum
from streamvol.utils.config import AudioConfig, load_audio_config

logger = logging.getLogger(__name__)

DEFAULT_PROPERTY_FILE = "~/.local/state/streamvol/properties.json"


@dataclass(frozen=True, slots=True)
class RuntimeSettings:
    """Environment overrides applied on top of the config file."""

    config_path: Path | None
    property_file: str | None
    backend: BackendKind | None


@lru_cache(maxsize=1)
def load_runtime_settings() -> RuntimeSettings:
    """Load runtime settings from environment."""

    config_path = os.getenv("STREAMVOL_CONFIG")
    backend = os.getenv("STREAMVOL_BACKEND")
    return RuntimeSettings(
        config_path=Path(config_path) if config_path else None,
        property_file=os.getenv("STREAMVOL_PROPERTY_FILE"),
        backend=parse_case_insensitive_enum(backend, BackendKind) if backend else None,
    )


def resolve_audio_config(config_path: Path | None = None) -> AudioConfig:
    """Merge the config file (explicit path, then STREAMVOL_CONFIG) with env overrides."""

    settings = load_runtime_settings()
    path = config_path or settings.config_path
    config = load_audio_config(path) if path is not None else AudioConfig()

    updates: dict[str, object] = {}
    if settings.property_file:
        updates["property_file"] = settings.property_file
    elif config.property_file is None:
        updates["property_file"] = DEFAULT_PROPERTY_FILE
    if settings.backend is not None:
        updates["backend"] = settings.backend
    if not updates:
        return config
    return AudioConfig.model_validate({**config.model_dump(), **updates})


def build_property_store(config: AudioConfig) -> PropertyStore:
    if config.uses_memory_store:
        return InMemoryPropertyStore()
    return JsonFilePropertyStore(Path(config.property_file))


def build_audio_backend(config: AudioConfig) -> AudioBackend:
    if config.backend is BackendKind.PULSE:
        from streamvol.infrastructure.pulse_backend import PulseAudioBackend

        return PulseAudioBackend(config.pulse_client_name, media_roles=config.media_roles or None)
    return InMemoryAudioBackend()


def build_registry(
    config: AudioConfig,
    *,
    property_store: PropertyStore | None = None,
    backend: AudioBackend | None = None,
    event_publisher: EventPublisher | None = None,
) -> StreamRegistry:
    """Construct a registry from config, applying the configured shaper if any."""

    registry = StreamRegistry(
        property_store if property_store is not None else build_property_store(config),
        backend if backend is not None else build_audio_backend(config),
        default_volume=config.default_volume,
        event_publisher=event_publisher or LoggingEventPublisher(),
    )
    if config.shaper is not None:
        registry.set_volume_shaper(shaper_for(config.shaper))
    logger.debug(
        "Stream registry ready",
        extra={"backend": config.backend.value, "default_volume": registry.default_volume},
    )
    return registry
