import numpy as np
import pytest

from streamvol.shapers import SHAPERS, exponential_ramp, linear_ramp, logarithmic_ramp, shaper_for
from streamvol.stream_options import ShaperName


def test_linear_ramp_is_identity() -> None:
    assert linear_ramp(100) == list(range(101))


@pytest.mark.parametrize("shaper", [exponential_ramp, logarithmic_ramp])
def test_curves_are_monotonic_and_pinned(shaper) -> None:
    curve = shaper(100)

    assert curve.shape == (101,)
    assert curve[0] == 0
    assert curve[-1] == 100
    assert np.all(np.diff(curve) >= 0)


def test_exponential_stays_below_logarithmic_mid_range() -> None:
    assert exponential_ramp(100)[50] < 50 < logarithmic_ramp(100)[50]


def test_every_named_shaper_is_registered() -> None:
    assert set(SHAPERS) == set(ShaperName)
    assert shaper_for(ShaperName.LINEAR) is linear_ramp
