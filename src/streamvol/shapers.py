"""Volume curve generators for ``StreamRegistry.set_volume_shaper``.

A shaper takes the maximum curve index and returns one curve value per index
``0..length`` inclusive.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from .stream_options import ShaperName


def linear_ramp(length: int) -> list[int]:
    """Identity curve: index ``i`` maps to ``i``."""

    return list(range(length + 1))


def _pinned(curve: np.ndarray, length: int) -> np.ndarray:
    points = np.rint(curve).astype(int)
    points = np.clip(points, 0, length)
    points[0] = 0
    points[-1] = length
    return points


def exponential_ramp(length: int, steepness: float = 4.0) -> np.ndarray:
    """Quiet at the low end, rising quickly near full volume."""

    x = np.linspace(0.0, 1.0, length + 1)
    curve = length * np.expm1(steepness * x) / np.expm1(steepness)
    return _pinned(curve, length)


def logarithmic_ramp(length: int, steepness: float = 9.0) -> np.ndarray:
    """Rises quickly from silence, flattening out near full volume."""

    x = np.linspace(0.0, 1.0, length + 1)
    curve = length * np.log1p(steepness * x) / np.log1p(steepness)
    return _pinned(curve, length)


SHAPERS: dict[ShaperName, Callable[[int], object]] = {
    ShaperName.LINEAR: linear_ramp,
    ShaperName.EXPONENTIAL: exponential_ramp,
    ShaperName.LOGARITHMIC: logarithmic_ramp,
}


def shaper_for(name: ShaperName) -> Callable[[int], object]:
    return SHAPERS[name]
