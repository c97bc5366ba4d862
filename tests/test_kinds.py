import pytest

from progdash import unit
from progdash.kinds import (
    Bytes,
    Duration,
    Formatter,
    Human,
    Scales,
    format_bytes,
    format_dhms,
)
from progdash.unit import Mode


def test_duration_value_and_upper_bound_use_own_unit():
    assert str(unit.dynamic(Duration()).display(40, 300, None)) == "40s of 5m"


def test_human_various_combinations():
    u = unit.dynamic_and_mode(
        Human(Formatter().with_decimals(1), "objects"),
        Mode.with_percentage(),
    )
    assert str(u.display(100_002, 7_500_000, None)) == "100.0k/7.5M objects [1%]"
    assert str(u.display(100_002, None, None)) == "100.0k objects"


def test_bytes_value_and_upper_bound_use_own_unit():
    u = unit.dynamic_and_mode(Bytes(), Mode.with_percentage())
    assert str(u.display(1002, 10_000_000_000, None)) == "1.0KB/10.0GB [0%]"


def test_bytes_just_value():
    assert str(unit.dynamic(Bytes()).display(5540, None, None)) == "5.5KB"


def test_format_bytes_small_values():
    assert format_bytes(0) == "0 B"
    assert format_bytes(999) == "999 B"
    assert format_bytes(1000) == "1.0 KB"


def test_format_bytes_rejects_negative():
    with pytest.raises(ValueError):
        format_bytes(-1)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (40, "40s"),
        (300, "5m"),
        (3600, "1h"),
        (86400, "1d"),
        (620410, "7d4h20m10s"),
    ],
)
def test_format_dhms(seconds, expected):
    assert format_dhms(seconds) == expected


def test_format_dhms_rejects_negative():
    with pytest.raises(ValueError):
        format_dhms(-5)


def test_formatter_defaults():
    f = Formatter()
    assert f.format(0) == "0.00 "
    assert f.format(1500) == "1.50 k"
    assert f.format(-1500) == "-1.50 k"


def test_formatter_binary_and_separator():
    f = Formatter().with_scales(Scales.binary()).with_separator("").with_decimals(0)
    assert f.format(2048) == "2ki"
    assert f.format(3 * 1024 * 1024) == "3Mi"


def test_formatter_caps_at_largest_suffix():
    f = Formatter().with_decimals(0)
    assert f.format(1e27).endswith(" Y")


def test_human_unit_and_values():
    h = Human(Formatter(), "items")
    assert h.display_unit(5) == "items"
    assert h.display_current_value(2_540_000) == "2.54M"
    assert h.display_upper_bound(5, 1) == "5.00"


def test_duration_and_bytes_have_no_unit_text():
    assert str(unit.dynamic(Duration()).display(61).unit()) == ""
    assert str(unit.dynamic(Bytes()).display(12)) == "12B"