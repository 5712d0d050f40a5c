from pathlib import Path

import pytest

from streamvol.stream_options import BackendKind, ShaperName, StreamType
from streamvol.utils.config import AudioConfig, config_from_mapping, load_audio_config


def test_config_reads_nested_values() -> None:
    data = {
        "audio": {
            "volume": {"default": 45},
            "backend": "pulse",
            "shaper": "logarithmic",
            "pulse": {"client_name": "kitchen", "media_roles": {"tts": "accessibility"}},
        },
        "property_store": {"path": "/var/lib/streamvol/properties.json"},
        "unrelated": {"ignored": True},
    }

    config = config_from_mapping(data)

    assert config.default_volume == 45
    assert config.backend is BackendKind.PULSE
    assert config.shaper is ShaperName.LOGARITHMIC
    assert config.pulse_client_name == "kitchen"
    assert config.media_roles == {StreamType.TTS: "accessibility"}
    assert config.property_file == "/var/lib/streamvol/properties.json"


@pytest.mark.parametrize("data", [None, {}, {"audio": None}, {"audio": {"volume": None}}, {"audio": 5}])
def test_config_defaults_for_partial_shapes(data) -> None:
    config = config_from_mapping(data)

    assert config == AudioConfig()
    assert config.default_volume == 60
    assert config.uses_memory_store


def test_config_rejects_out_of_range_default_volume() -> None:
    with pytest.raises(ValueError):
        config_from_mapping({"audio": {"volume": {"default": 150}}})


def test_config_expands_home_in_property_file() -> None:
    config = config_from_mapping({"property_store": {"path": "~/props.json"}})

    assert config.property_file == str(Path("~/props.json").expanduser())
    assert not config.uses_memory_store


def test_load_yaml_config(tmp_path: Path) -> None:
    path = tmp_path / "streamvol.yaml"
    path.write_text(
        "audio:\n  volume:\n    default: 30\n  shaper: linear\nproperty_store:\n  path: ':memory:'\n",
        encoding="utf-8",
    )

    config = load_audio_config(path)

    assert config.default_volume == 30
    assert config.shaper is ShaperName.LINEAR
    assert config.uses_memory_store


def test_load_json_config(tmp_path: Path) -> None:
    path = tmp_path / "streamvol.json"
    path.write_text('{"audio": {"backend": "memory", "volume": {"default": 5}}}', encoding="utf-8")

    assert load_audio_config(path).default_volume == 5


def test_empty_yaml_config_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_audio_config(path) == AudioConfig()
