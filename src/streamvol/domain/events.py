"""Domain event contracts for stream volume control."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True, slots=True)
class DomainEvent:
    """Base domain event emitted by the stream registry."""

    stream_name: str | None
    payload_summary: dict[str, Any]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))


@dataclass(frozen=True, slots=True)
class StreamInitialized(DomainEvent):
    """A stream had no persisted volume and was seeded with the default."""


@dataclass(frozen=True, slots=True)
class VolumeChanged(DomainEvent):
    """A stream volume was persisted and forwarded to the backend."""


@dataclass(frozen=True, slots=True)
class MuteChanged(DomainEvent):
    """The global mute state was set."""


@dataclass(frozen=True, slots=True)
class VolumeShapeApplied(DomainEvent):
    """A full volume curve was accepted by the backend."""
