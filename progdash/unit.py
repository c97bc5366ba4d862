"""Units describing how progress values are rendered as text."""

from __future__ import annotations

import abc
import enum
import math
import sys
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import ClassVar, Optional

_USIZE_MAX = 2**64 - 1


def _saturating_usize(value: float) -> int:
    """Convert a float to a non-negative integer, saturating at the bounds."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value) or value >= _USIZE_MAX:
        return _USIZE_MAX
    return int(value)


def _format_float(value: float) -> str:
    """Render a float the shortest way, dropping a trailing '.0'."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _skip_one(value: float) -> Optional[float]:
    return None if abs(value - 1.0) < sys.float_info.epsilon else value


class DisplayValue(abc.ABC):
    """Everything needed to render a value together with its unit."""

    value_separator: ClassVar[str] = "/"

    def display_current_value(self, value: int, upper: Optional[int] = None) -> str:
        """Render the current `value`; `upper` is context only."""
        return str(value)

    def separator(self, value: int, upper: Optional[int] = None) -> str:
        """Render the token between the current value and its upper bound."""
        return self.value_separator

    def display_upper_bound(self, upper_bound: int, value: int) -> str:
        """Render the upper bound; `value` is context only."""
        return str(upper_bound)

    @abc.abstractmethod
    def display_unit(self, value: int) -> str:
        """Render the unit belonging to `value`."""

    def display_percentage(self, percentage: float) -> str:
        """Render a percentage in brackets."""
        return f"[{_saturating_usize(percentage)}%]"

    def display_throughput(self, throughput: Throughput) -> str:
        """Render a value change per timespan, as in '|250/500ms|'."""
        fraction, time_unit = self.fraction_and_time_unit(throughput.timespan)
        value = self.display_current_value(throughput.value_change_in_timespan, None)
        fraction_text = "" if fraction is None else _format_float(fraction)
        return f"|{value}/{fraction_text}{time_unit}|"

    def fraction_and_time_unit(self, timespan: timedelta) -> tuple[Optional[float], str]:
        """Express `timespan` in its largest fitting time unit.

        The fraction is None when it is exactly one.
        """
        hour_in_secs = 60 * 60
        minute_in_secs = 60
        secs = timespan // timedelta(seconds=1)
        if secs // hour_in_secs > 0:
            return _skip_one(secs / hour_in_secs), "h"
        if secs // minute_in_secs > 0:
            return _skip_one(secs / minute_in_secs), "m"
        if secs > 0:
            return _skip_one(float(secs)), "s"
        millis = timespan // timedelta(milliseconds=1)
        return _skip_one(float(millis)), "ms"


@dataclass(frozen=True)
class Label(DisplayValue):
    """A fixed textual unit such as 'items'."""

    name: str

    def display_unit(self, value: int) -> str:
        return self.name


@dataclass(frozen=True)
class Range(DisplayValue):
    """Values shown as a one-based range, as in '2 of 5 steps'."""

    value_separator: ClassVar[str] = " of "

    name: str

    def display_current_value(self, value: int, upper: Optional[int] = None) -> str:
        return str(value + 1)

    def separator(self, value: int, upper: Optional[int] = None) -> str:
        return self.value_separator

    def display_unit(self, value: int) -> str:
        return self.name


class Location(enum.Enum):
    """Where percentage and throughput are placed."""

    BEFORE_VALUE = "before_value"
    AFTER_UNIT = "after_unit"


@dataclass(frozen=True)
class Throughput:
    """A change of value within a timespan."""

    value_change_in_timespan: int
    timespan: timedelta


@dataclass(frozen=True)
class Mode:
    """Which extras to show alongside a unit, and where."""

    location: Location
    percent: bool
    throughput: bool

    @staticmethod
    def with_percentage() -> Mode:
        """A mode showing the percentage only."""
        return Mode(location=Location.AFTER_UNIT, percent=True, throughput=False)

    @staticmethod
    def with_throughput() -> Mode:
        """A mode showing the throughput only."""
        return Mode(location=Location.AFTER_UNIT, percent=False, throughput=True)

    def and_percentage(self) -> Mode:
        """Return a copy that also shows the percentage."""
        return replace(self, percent=True)

    def and_throughput(self) -> Mode:
        """Return a copy that also shows the throughput."""
        return replace(self, throughput=True)

    def show_before_value(self) -> Mode:
        """Return a copy that places the extras in front of the value."""
        return replace(self, location=Location.BEFORE_VALUE)

    def _percent_location(self) -> Optional[Location]:
        return self.location if self.percent else None

    def _throughput_location(self) -> Optional[Location]:
        return self.location if self.throughput else None


class What(enum.Enum):
    """Which parts of a unit display are rendered."""

    VALUES_AND_UNIT = "values_and_unit"
    UNIT = "unit"
    VALUES = "values"

    @property
    def shows_values(self) -> bool:
        return self in (What.VALUES, What.VALUES_AND_UNIT)

    @property
    def shows_unit(self) -> bool:
        return self in (What.UNIT, What.VALUES_AND_UNIT)


def _percentage(value: int, upper: int) -> float:
    if upper == 0:
        return math.nan if value == 0 else math.inf
    return math.floor(value / upper * 100.0)


@dataclass
class UnitDisplay:
    """A renderable view of a unit with a value; use str() to render it."""

    current_value: int
    upper_bound: Optional[int]
    throughput: Optional[Throughput]
    parent: Unit
    display: What = What.VALUES_AND_UNIT

    def all(self) -> UnitDisplay:
        """Render values and the unit."""
        self.display = What.VALUES_AND_UNIT
        return self

    def values(self) -> UnitDisplay:
        """Render values only."""
        self.display = What.VALUES
        return self

    def unit(self) -> UnitDisplay:
        """Render the unit only."""
        self.display = What.UNIT
        return self

    def __str__(self) -> str:
        unit = self.parent.as_display_value()
        mode = self.parent.mode

        percent = None
        if self.upper_bound is not None and mode is not None:
            location = mode._percent_location()
            if location is not None:
                percent = (location, _percentage(self.current_value, self.upper_bound))

        throughput = None
        if self.throughput is not None and mode is not None:
            location = mode._throughput_location()
            if location is not None:
                throughput = (location, self.throughput)

        out: list[str] = []
        if self.display.shows_values:
            if percent is not None and percent[0] is Location.BEFORE_VALUE:
                out.append(unit.display_percentage(percent[1]) + " ")
            if throughput is not None and throughput[0] is Location.BEFORE_VALUE:
                out.append(unit.display_throughput(throughput[1]) + " ")
            out.append(unit.display_current_value(self.current_value, self.upper_bound))
            if self.upper_bound is not None:
                out.append(unit.separator(self.current_value, self.upper_bound))
                out.append(unit.display_upper_bound(self.upper_bound, self.current_value))
        if self.display.shows_unit:
            prefix = " " if self.display.shows_values else ""
            unit_text = prefix + unit.display_unit(self.current_value)
            if len(unit_text) > 1:
                out.append(unit_text)
            if percent is not None and percent[0] is Location.AFTER_UNIT:
                out.append(" " + unit.display_percentage(percent[1]))
            if throughput is not None and throughput[0] is Location.AFTER_UNIT:
                out.append(" " + unit.display_throughput(throughput[1]))
        return "".join(out)


@dataclass(frozen=True)
class Unit:
    """A unit for progress values, optionally with a display mode.

    A plain string given as `kind` becomes a `Label`.
    """

    kind: DisplayValue
    mode: Optional[Mode] = None

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            object.__setattr__(self, "kind", Label(self.kind))
        elif not isinstance(self.kind, DisplayValue):
            raise TypeError(f"unit kind must be a str or DisplayValue, got {type(self.kind).__name__}")

    def display(
        self,
        current_value: int,
        upper_bound: Optional[int] = None,
        throughput: Optional[Throughput] = None,
    ) -> UnitDisplay:
        """Return a renderable view of `current_value` in this unit."""
        return UnitDisplay(
            current_value=current_value,
            upper_bound=upper_bound,
            throughput=throughput,
            parent=self,
        )

    def as_display_value(self) -> DisplayValue:
        """Return the object that renders values of this unit."""
        return self.kind


def label(label: str) -> Unit:
    """A unit that is a fixed label."""
    return Unit(Label(label))


def label_and_mode(label: str, mode: Mode) -> Unit:
    """A unit that is a fixed label, with a display mode."""
    return Unit(Label(label), mode)


def dynamic(label: DisplayValue) -> Unit:
    """A unit rendered by the given DisplayValue."""
    return Unit(label)


def dynamic_and_mode(label: DisplayValue, mode: Mode) -> Unit:
    """A unit rendered by the given DisplayValue, with a display mode."""
    return Unit(label, mode)