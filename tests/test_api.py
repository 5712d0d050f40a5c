from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from streamvol.api import app
from streamvol.infrastructure.memory_backend import DEFAULT_STREAM_IDS
from streamvol.interfaces.api_handlers import get_registry
from streamvol.stream_options import StreamType


@pytest.fixture
def client(registry):
    app.dependency_overrides[get_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_streams(client) -> None:
    payload = client.get("/streams").json()

    assert [item["name"] for item in payload] == [
        "audio",
        "tts",
        "ring",
        "voiceCall",
        "playback",
        "alarm",
        "system",
    ]


def test_read_stream_by_name_and_id(client) -> None:
    by_name = client.get("/streams/ring").json()
    by_id = client.get(f"/streams/{DEFAULT_STREAM_IDS[StreamType.RING]}").json()

    assert by_name == by_id
    assert by_name["volume"] == 60


def test_unknown_stream_is_404(client) -> None:
    response = client.get("/streams/9999")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "unknown_stream"


def test_write_stream_volume_clamps(client, backend) -> None:
    response = client.put("/streams/alarm/volume", json={"volume": -10})

    assert response.status_code == 200
    assert response.json()["volume"] == 0
    assert backend.volumes[DEFAULT_STREAM_IDS[StreamType.ALARM]] == 0


def test_write_readonly_stream_is_403(client) -> None:
    response = client.put("/streams/system/volume", json={"volume": 10})

    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "stream_readonly"


def test_write_non_numeric_volume_is_422(client) -> None:
    response = client.put("/streams/tts/volume", json={"volume": "loud"})

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "invalid_argument"


def test_broadcast_volume(client, registry) -> None:
    response = client.put("/volume", json={"volume": 44})

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["audio", "playback", "tts", "ring"]
    assert registry.get_volume(StreamType.ALARM) == 60


def test_mute_round_trip(client) -> None:
    assert client.get("/mute").json() == {"muted": False}
    assert client.put("/mute", json={"muted": True}).json() == {"muted": True}


def test_shaper_endpoint(client, backend) -> None:
    response = client.put("/shaper", json={"curve": "LOGARITHMIC"})

    assert response.status_code == 200
    assert response.json() == {"curve": "logarithmic"}
    assert backend.curve[100] == 100


def test_unknown_shaper_is_400(client) -> None:
    response = client.put("/shaper", json={"curve": "s-curve"})

    assert response.status_code == 400
    assert "linear" in response.json()["detail"]["allowed_values"]
