import math

import pytest

from streamvol.utils.numbers import is_volume_number, parse_int


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("45", 45),
        (" 45 ", 45),
        ("45abc", 45),
        ("45.9", 45),
        ("-3", -3),
        ("+7", 7),
        (12, 12),
        (12.9, 12),
        ("", None),
        ("abc", None),
        ("\u0664\u0665", None),
        (None, None),
        (True, None),
        (math.nan, None),
    ],
)
def test_parse_int(raw, expected) -> None:
    assert parse_int(raw) == expected


def test_is_volume_number() -> None:
    assert is_volume_number(0)
    assert is_volume_number(55.5)
    assert not is_volume_number(False)
    assert not is_volume_number("10")
    assert not is_volume_number(math.nan)
