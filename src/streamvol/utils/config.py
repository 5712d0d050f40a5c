from __future__ import annotations

from pathlib import Path
from typing import Any

import json

from pydantic import BaseModel, Field, field_validator

from streamvol.stream_options import BackendKind, ShaperName, StreamType
from streamvol.utils.objects import get, pick, starts_with

MEMORY_STORE = ":memory:"

# Nested config path -> AudioConfig field.
_CONFIG_PATHS: dict[str, str] = {
    "audio.volume.default": "default_volume",
    "audio.backend": "backend",
    "audio.shaper": "shaper",
    "audio.pulse.client_name": "pulse_client_name",
    "audio.pulse.media_roles": "media_roles",
    "property_store.path": "property_file",
}


class AudioConfig(BaseModel):
    default_volume: int = Field(60, ge=0, le=100)
    backend: BackendKind = BackendKind.MEMORY
    shaper: ShaperName | None = None
    property_file: str | None = None
    pulse_client_name: str = "streamvol"
    media_roles: dict[StreamType, str] = Field(default_factory=dict)

    @field_validator("property_file")
    @classmethod
    def _expand_property_file(cls, value: str | None) -> str | None:
        if value is None or value == MEMORY_STORE:
            return value
        if starts_with(value, "~"):
            return str(Path(value).expanduser())
        return value

    @property
    def uses_memory_store(self) -> bool:
        return self.property_file in (None, MEMORY_STORE)


def config_from_mapping(data: Any) -> AudioConfig:
    """Build an AudioConfig from a nested mapping such as a parsed YAML file.

    Unknown top-level sections are ignored and unset or null values keep the
    model defaults.
    """

    sections = pick(data, "audio", "property_store")
    values = {}
    for path, field_name in _CONFIG_PATHS.items():
        value = get(sections, path)
        if value is not None:
            values[field_name] = value
    return AudioConfig.model_validate(values)


def load_audio_config(path: Path) -> AudioConfig:
    return config_from_mapping(_load_config_data(path))


def _load_config_data(path: Path) -> Any:
    if path.suffix.lower() in {".yaml", ".yml"}:
        import yaml

        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
