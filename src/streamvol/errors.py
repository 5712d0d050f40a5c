"""Error taxonomy raised by stream volume control operations."""

from __future__ import annotations

from typing import Any


class AudioControlError(Exception):
    """Base class for synchronous audio control failures."""

    code = "audio_control_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class InvalidArgumentError(AudioControlError, TypeError):
    """An argument had the wrong type, e.g. a non-numeric volume."""

    code = "invalid_argument"


class UnknownStreamError(InvalidArgumentError):
    """The stream reference does not match any catalog entry."""

    code = "unknown_stream"

    def __init__(self, stream: Any) -> None:
        super().__init__(f"invalid stream type: {stream!r}")
        self.stream = stream


class StreamPermissionError(AudioControlError, PermissionError):
    """A volume write targeted a readonly stream."""

    code = "stream_readonly"

    def __init__(self, stream_name: str) -> None:
        super().__init__(f'stream type "{stream_name}" is readonly')
        self.stream_name = stream_name


class ShaperStructureError(AudioControlError, TypeError):
    """A volume shaper did not return a sequence."""

    code = "invalid_shape"


class CurveRangeError(AudioControlError, ValueError):
    """The backend rejected a volume curve point."""

    code = "curve_out_of_range"

    def __init__(self, index: int, value: Any) -> None:
        super().__init__(f"out of range when set volume shape at index {index}: {value!r}")
        self.index = index
        self.value = value


__all__ = [
    "AudioControlError",
    "CurveRangeError",
    "InvalidArgumentError",
    "ShaperStructureError",
    "StreamPermissionError",
    "UnknownStreamError",
]
