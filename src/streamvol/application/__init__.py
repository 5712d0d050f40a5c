"""DDD application layer."""

from .event_publisher import EventPublisher, NullEventPublisher
from .ports import AudioBackend, PropertyStore
from .stream_registry import StreamRegistry, resolve_default_volume

__all__ = [
    "AudioBackend",
    "EventPublisher",
    "NullEventPublisher",
    "PropertyStore",
    "StreamRegistry",
    "resolve_default_volume",
]
