"""Shared stream enums and parsing helpers."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar


class StreamType(str, Enum):
    """Closed set of audio stream classes understood by the backend."""

    AUDIO = "audio"
    TTS = "tts"
    RING = "ring"
    VOICE_CALL = "voiceCall"
    PLAYBACK = "playback"
    ALARM = "alarm"
    SYSTEM = "system"


class BackendKind(str, Enum):
    """Available native audio backend adapters."""

    MEMORY = "memory"
    PULSE = "pulse"


class ShaperName(str, Enum):
    """Named volume curves accepted by the CLI and API."""

    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    LOGARITHMIC = "logarithmic"


EnumT = TypeVar("EnumT", bound=Enum)


def enum_values(enum_cls: type[EnumT]) -> tuple[str, ...]:
    """Return enum values for UI/API hinting in declaration order."""

    return tuple(str(member.value) for member in enum_cls)


def _fold(text: str) -> str:
    return text.strip().lower().replace("-", "").replace("_", "")


def parse_case_insensitive_enum(raw_value: str, enum_cls: type[EnumT]) -> EnumT:
    """Parse enum values ignoring case and ``-``/``_`` separators.

    ``"voice-call"``, ``"VOICE_CALL"`` and ``"voiceCall"`` all select
    ``StreamType.VOICE_CALL``. Raises ValueError listing allowed values.
    """

    folded = _fold(raw_value)
    for member in enum_cls:
        if _fold(str(member.value)) == folded:
            return member

    allowed = ", ".join(enum_values(enum_cls))
    raise ValueError(f"Invalid {enum_cls.__name__}: '{raw_value}'. Allowed values: {allowed}.")
