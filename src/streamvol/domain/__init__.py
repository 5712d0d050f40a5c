"""DDD domain layer."""

from .events import DomainEvent, MuteChanged, StreamInitialized, VolumeChanged, VolumeShapeApplied
from .models import (
    DEFAULT_VOLUME_PROPERTY,
    PERSIST_NAMESPACE,
    STREAM_CATALOG,
    StreamDefinition,
    StreamDescriptor,
)
from .policies import DEFAULT_VOLUME_POLICY, VolumePolicy

__all__ = [
    "DomainEvent",
    "StreamInitialized",
    "VolumeChanged",
    "MuteChanged",
    "VolumeShapeApplied",
    "StreamDefinition",
    "StreamDescriptor",
    "STREAM_CATALOG",
    "DEFAULT_VOLUME_PROPERTY",
    "PERSIST_NAMESPACE",
    "VolumePolicy",
    "DEFAULT_VOLUME_POLICY",
]
