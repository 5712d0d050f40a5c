"""Lenient numeric coercion for values read back from property stores."""

from __future__ import annotations

import math
import re
from numbers import Real
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Any) -> int | None:
    """Parse the leading integer of ``value``.

    Stored properties are strings, so ``"45"``, ``" 45 "``, ``"45abc"`` and
    ``"45.9"`` all parse to ``45``. Returns ``None`` when there is no leading
    integer at all.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Real):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return math.trunc(value)

    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def is_volume_number(value: Any) -> bool:
    """True for real numbers usable as a volume (not bools, not NaN)."""

    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(float(value))


__all__ = ["is_volume_number", "parse_int"]
