"""Simulated audio backend that keeps device state in memory."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any

from streamvol.application.ports import AudioBackend
from streamvol.domain.models import STREAM_CATALOG
from streamvol.stream_options import StreamType

logger = logging.getLogger(__name__)

DEFAULT_STREAM_IDS: dict[StreamType, int] = {
    definition.kind: index for index, definition in enumerate(STREAM_CATALOG)
}


class InMemoryAudioBackend(AudioBackend):
    """Backend double recording every command it receives.

    Stream ids follow catalog order starting at 0 unless ``stream_ids`` is
    given. Curve values must be real numbers within ``[0, curve_ceiling]``.
    """

    def __init__(
        self,
        stream_ids: Mapping[StreamType, int] | None = None,
        *,
        curve_ceiling: int = 100,
    ) -> None:
        self._stream_ids = dict(stream_ids or DEFAULT_STREAM_IDS)
        self.curve_ceiling = curve_ceiling
        self.volumes: dict[int, int] = {}
        self.curve: dict[int, Any] = {}
        self.playing: set[int] = set()
        self.muted = False
        self.volume_calls: list[tuple[int, int]] = []

    @property
    def stream_ids(self) -> Mapping[StreamType, int]:
        return self._stream_ids

    def set_stream_volume(self, stream_id: int, volume: int) -> bool:
        self.volume_calls.append((stream_id, volume))
        self.volumes[stream_id] = volume
        return True

    def get_stream_playing_status(self, stream_id: int) -> bool:
        return stream_id in self.playing

    def is_muted(self) -> bool:
        return self.muted

    def set_mute(self, muted: bool) -> bool:
        self.muted = bool(muted)
        return True

    def set_curve_for_volume(self, index: int, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        if not 0 <= value <= self.curve_ceiling:
            logger.debug("Curve point out of range", extra={"index": index, "value": value})
            return False
        self.curve[index] = value
        return True
