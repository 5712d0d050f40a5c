import pytest

from streamvol.application.stream_registry import StreamRegistry
from streamvol.domain.events import DomainEvent
from streamvol.infrastructure.memory_backend import InMemoryAudioBackend
from streamvol.infrastructure.property_stores import InMemoryPropertyStore


class RecordingPublisher:
    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)


@pytest.fixture
def property_store():
    return InMemoryPropertyStore()


@pytest.fixture
def backend():
    return InMemoryAudioBackend()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def registry(property_store, backend, publisher):
    return StreamRegistry(property_store, backend, event_publisher=publisher)
