"""FastAPI interface for streamvol."""

from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from .application.stream_registry import StreamRegistry
from .domain.policies import DEFAULT_VOLUME_POLICY
from .errors import AudioControlError
from .interfaces.api_handlers import error_status, get_registry, stream_payload
from .shapers import shaper_for
from .stream_options import ShaperName, enum_values, parse_case_insensitive_enum

app = FastAPI(title="streamvol API", version="0.1.0")


class VolumeUpdate(BaseModel):
    volume: Any


class MuteUpdate(BaseModel):
    muted: bool


class ShaperUpdate(BaseModel):
    curve: str


def _http_error(error: AudioControlError) -> HTTPException:
    return HTTPException(status_code=error_status(error), detail=error.as_dict())


@app.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint."""

    return {"status": "ok", "policy_version": DEFAULT_VOLUME_POLICY.policy_version}


@app.get("/streams")
def list_streams(registry: StreamRegistry = Depends(get_registry)) -> list[dict[str, Any]]:
    return registry.snapshot()


@app.get("/streams/{stream}")
def read_stream(stream: str, registry: StreamRegistry = Depends(get_registry)) -> dict[str, Any]:
    try:
        return stream_payload(registry, registry.descriptor(stream))
    except AudioControlError as error:
        raise _http_error(error) from error


@app.put("/streams/{stream}/volume")
def write_stream_volume(
    stream: str,
    update: VolumeUpdate,
    registry: StreamRegistry = Depends(get_registry),
) -> dict[str, Any]:
    try:
        registry.set_volume(update.volume, stream)
        return stream_payload(registry, registry.descriptor(stream))
    except AudioControlError as error:
        raise _http_error(error) from error


@app.put("/volume")
def write_broadcast_volume(
    update: VolumeUpdate,
    registry: StreamRegistry = Depends(get_registry),
) -> list[dict[str, Any]]:
    """Set audio, playback, tts and ring to the same volume."""

    try:
        registry.set_volume(update.volume)
    except AudioControlError as error:
        raise _http_error(error) from error
    return [
        stream_payload(registry, registry.descriptor(kind))
        for kind in registry.policy.broadcast_streams
    ]


@app.get("/mute")
def read_mute(registry: StreamRegistry = Depends(get_registry)) -> dict[str, bool]:
    return {"muted": registry.is_muted()}


@app.put("/mute")
def write_mute(update: MuteUpdate, registry: StreamRegistry = Depends(get_registry)) -> dict[str, bool]:
    registry.set_mute(update.muted)
    return {"muted": registry.is_muted()}


@app.put("/shaper")
def write_shaper(update: ShaperUpdate, registry: StreamRegistry = Depends(get_registry)) -> dict[str, str]:
    try:
        curve = parse_case_insensitive_enum(update.curve, ShaperName)
    except ValueError as error:
        raise HTTPException(
            status_code=400,
            detail={
                "code": "invalid_curve",
                "message": str(error),
                "allowed_values": list(enum_values(ShaperName)),
            },
        ) from error

    try:
        registry.set_volume_shaper(shaper_for(curve))
    except AudioControlError as error:
        raise _http_error(error) from error
    return {"curve": curve.value}
