"""CLI-facing handlers that delegate to the stream registry."""

from __future__ import annotations

from pathlib import Path

from streamvol.application.stream_registry import StreamRegistry
from streamvol.settings import build_registry, resolve_audio_config
from streamvol.shapers import shaper_for
from streamvol.stream_options import ShaperName


def open_registry(config_path: Path | None = None) -> StreamRegistry:
    return build_registry(resolve_audio_config(config_path))


def format_volume(volume: int | None) -> str:
    return "unset" if volume is None else str(volume)


def stream_table(registry: StreamRegistry) -> list[str]:
    """One display line per catalog stream."""

    lines = []
    for row in registry.snapshot():
        flags = []
        if row["readonly"]:
            flags.append("readonly")
        if row["playing"]:
            flags.append("playing")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        lines.append(f"{row['id']:>3}  {row['name']:<10} {format_volume(row['volume']):>5}{suffix}")
    return lines


def show_volume(registry: StreamRegistry, stream: str | None) -> str:
    descriptor = registry.descriptor(stream) if stream is not None else registry.descriptor(registry.policy.default_stream)
    return f"{descriptor.name}: {format_volume(registry.get_volume(descriptor.kind))}"


def apply_volume(registry: StreamRegistry, volume: float, stream: str | None) -> list[str]:
    """Set the volume and report the resulting persisted values."""

    registry.set_volume(volume, stream)
    if stream is None:
        targets = [registry.descriptor(kind) for kind in registry.policy.broadcast_streams]
    else:
        targets = [registry.descriptor(stream)]
    return [f"{descriptor.name}: {format_volume(registry.get_volume(descriptor.kind))}" for descriptor in targets]


def show_status(registry: StreamRegistry, stream: str | None) -> str:
    descriptor = registry.descriptor(stream) if stream is not None else registry.descriptor(registry.policy.default_stream)
    state = "playing" if registry.get_playing_status(descriptor.kind) else "idle"
    return f"{descriptor.name}: {state}"


def apply_shaper(registry: StreamRegistry, curve: ShaperName) -> str:
    registry.set_volume_shaper(shaper_for(curve))
    return f"Volume curve applied: {curve.value}"
