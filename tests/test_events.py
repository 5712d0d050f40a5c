from __future__ import annotations

import logging

from streamvol.application.event_publisher import NullEventPublisher
from streamvol.application.stream_registry import StreamRegistry
from streamvol.domain.events import StreamInitialized, VolumeChanged
from streamvol.infrastructure.logging_event_publisher import LoggingEventPublisher
from streamvol.infrastructure.memory_backend import InMemoryAudioBackend
from streamvol.infrastructure.property_stores import InMemoryPropertyStore
from streamvol.stream_options import StreamType


def test_logging_publisher_emits_structured_record(caplog) -> None:
    caplog.set_level(logging.INFO, logger="streamvol.events")

    LoggingEventPublisher().publish(VolumeChanged(stream_name="tts", payload_summary={"volume": 40}))

    record = caplog.records[-1]
    assert record.message == "domain_event_emitted"
    assert record.event_name == "VolumeChanged"
    assert record.stream_name == "tts"
    assert record.payload_summary == {"volume": 40}


def test_registry_publishes_through_logging_publisher(caplog) -> None:
    caplog.set_level(logging.INFO, logger="streamvol.events")
    registry = StreamRegistry(InMemoryPropertyStore(), InMemoryAudioBackend(), event_publisher=LoggingEventPublisher())

    registry.set_volume(10, StreamType.RING)

    names = [record.event_name for record in caplog.records if record.name == "streamvol.events"]
    assert names.count(StreamInitialized.__name__) == 7
    assert names[-1] == VolumeChanged.__name__


def test_null_publisher_is_the_default() -> None:
    registry = StreamRegistry(InMemoryPropertyStore(), InMemoryAudioBackend())

    assert isinstance(registry.event_publisher, NullEventPublisher)
