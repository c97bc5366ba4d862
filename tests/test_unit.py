from datetime import timedelta

import pytest

from progdash import unit
from progdash.unit import (
    DisplayValue,
    Label,
    Location,
    Mode,
    Range,
    Throughput,
    Unit,
    What,
)


def test_range_value_and_upper_bound_with_percentage():
    u = unit.dynamic_and_mode(Range("steps"), Mode.with_percentage())
    assert str(u.display(0, 3, None)) == "1 of 3 steps [0%]"
    assert str(u.display(1, 3, None)) == "2 of 3 steps [33%]"
    assert str(u.display(2, 3, None)) == "3 of 3 steps [66%]"


def test_only_values_percentage_before_value():
    u = unit.label_and_mode("items", Mode.with_percentage().show_before_value())
    assert str(u.display(123, 400, None).values()) == "[30%] 123/400"


def test_only_unit_percentage_after_unit():
    u = unit.label_and_mode("items", Mode.with_percentage())
    assert str(u.display(123, 400, None).unit()) == "items [30%]"


def test_display_current_over_time_shows_throughput():
    u = unit.label_and_mode("items", Mode.with_percentage().and_throughput())
    assert str(u.display(123, None, None)) == "123 items"
    assert str(u.display(500, None, Throughput(250, timedelta(milliseconds=500)))) == "500 items |250/500ms|"
    assert str(u.display(700, None, Throughput(500, timedelta(seconds=1)))) == "700 items |500/s|"
    assert str(u.display(500, None, Throughput(250, timedelta(seconds=30)))) == "500 items |250/30s|"
    assert str(u.display(700, None, Throughput(500, timedelta(seconds=60)))) == "700 items |500/m|"

    u = unit.label_and_mode("items", Mode.with_percentage().and_throughput().show_before_value())
    assert str(u.display(700, None, Throughput(500, timedelta(seconds=90)))) == "|500/1.5m| 700 items"
    assert str(u.display(500, None, Throughput(250, timedelta(seconds=30 * 60)))) == "|250/30m| 500 items"
    assert str(u.display(700, None, Throughput(500, timedelta(seconds=60 * 60)))) == "|500/h| 700 items"


def test_no_upper_bound_shows_no_percentage():
    u = unit.label_and_mode("items", Mode.with_percentage())
    assert str(u.display(123, None, None)) == "123 items"


def test_upper_bound_shows_percentage():
    assert str(unit.label_and_mode("items", Mode.with_percentage()).display(123, 500, None)) == "123/500 items [24%]"
    assert (
        str(unit.label_and_mode("items", Mode.with_percentage().show_before_value()).display(123, 500, None))
        == "[24%] 123/500 items"
    )


def test_without_percentage_no_upper_bound():
    assert str(unit.label("items").display(123, None, None)) == "123 items"


def test_without_percentage_with_upper_bound():
    assert str(unit.label("items").display(123, 500, None)) == "123/500 items"


def test_throughput_only_mode_ignores_upper_bound_percentage():
    u = unit.label_and_mode("items", Mode.with_throughput())
    assert str(u.display(5, 10, Throughput(3, timedelta(seconds=1)))) == "5/10 items |3/s|"


def test_zero_upper_bound_renders_zero_percent():
    u = unit.label_and_mode("items", Mode.with_percentage())
    assert str(u.display(0, 0)) == "0/0 items [0%]"


def test_display_selectors_return_same_object():
    d = unit.label("items").display(1, 2)
    assert d.values() is d
    assert d.display is What.VALUES
    assert d.unit() is d
    assert str(d) == "items"
    assert d.all() is d
    assert str(d) == "1/2 items"


def test_unit_from_string_becomes_label():
    u = Unit("files")
    assert u.as_display_value() == Label("files")
    assert str(u.display(3)) == "3 files"


def test_unit_rejects_non_display_value():
    with pytest.raises(TypeError):
        unit.dynamic(42)


def test_display_value_requires_display_unit():
    with pytest.raises(TypeError):
        DisplayValue()

    class Incomplete(DisplayValue):
        pass

    with pytest.raises(TypeError):
        unit.dynamic(Incomplete())


def test_mode_builders():
    mode = Mode.with_throughput().and_percentage().show_before_value()
    assert mode == Mode(location=Location.BEFORE_VALUE, percent=True, throughput=True)
    assert Mode.with_percentage() == Mode(location=Location.AFTER_UNIT, percent=True, throughput=False)


def test_fraction_and_time_unit():
    label_value = Label("x")
    assert label_value.fraction_and_time_unit(timedelta(seconds=2)) == (2.0, "s")
    assert label_value.fraction_and_time_unit(timedelta(hours=2)) == (2.0, "h")
    assert label_value.fraction_and_time_unit(timedelta(milliseconds=1)) == (None, "ms")


def test_range_defaults():
    r = Range("steps")
    assert r.display_current_value(4) == "5"
    assert r.separator(4) == " of "
    assert r.display_upper_bound(9, 4) == "9"
    assert r.display_percentage(42.9) == "[42%]"