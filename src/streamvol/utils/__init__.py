from .config import AudioConfig, config_from_mapping, load_audio_config
from .numbers import is_volume_number, parse_int
from .objects import get, pick, starts_with

__all__ = [
    "AudioConfig",
    "config_from_mapping",
    "get",
    "is_volume_number",
    "load_audio_config",
    "parse_int",
    "pick",
    "starts_with",
]
