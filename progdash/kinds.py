"""Ready-made dynamic units: byte sizes, durations and human-scaled numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from progdash.unit import DisplayValue

_BYTE_PREFIXES = "KMGTPE"
_KB = 1000


def format_bytes(value: int) -> str:
    """Format a byte count with decimal prefixes, as in '5.5 KB'."""
    if value < 0:
        raise ValueError("byte count must not be negative")
    if value < _KB:
        return f"{value} B"
    size = float(value)
    exp = int(math.log(size) / math.log(_KB)) or 1
    exp = min(exp, len(_BYTE_PREFIXES))
    return f"{size / _KB**exp:.1f} {_BYTE_PREFIXES[exp - 1]}B"


def format_dhms(seconds: int) -> str:
    """Format seconds as a compound duration, as in '7d4h20m10s'."""
    if seconds < 0:
        raise ValueError("duration must not be negative")
    if seconds == 0:
        return "0s"
    parts = []
    for size, suffix in ((86400, "d"), (3600, "h"), (60, "m"), (1, "s")):
        count, seconds = divmod(seconds, size)
        if count:
            parts.append(f"{count}{suffix}")
    return "".join(parts)


@dataclass(frozen=True)
class Bytes(DisplayValue):
    """Values rendered as byte sizes, without a separate unit."""

    def display_current_value(self, value: int, upper: Optional[int] = None) -> str:
        return format_bytes(value).replace(" ", "")

    def display_upper_bound(self, upper_bound: int, value: int) -> str:
        return format_bytes(upper_bound).replace(" ", "")

    def display_unit(self, value: int) -> str:
        return ""


@dataclass(frozen=True)
class Duration(DisplayValue):
    """Values in seconds rendered as compound durations."""

    value_separator: ClassVar[str] = " of "

    def display_current_value(self, value: int, upper: Optional[int] = None) -> str:
        return format_dhms(value)

    def separator(self, value: int, upper: Optional[int] = None) -> str:
        return self.value_separator

    def display_upper_bound(self, upper_bound: int, value: int) -> str:
        return format_dhms(upper_bound)

    def display_unit(self, value: int) -> str:
        return ""


@dataclass(frozen=True)
class Scales:
    """A base and the suffixes for each power of it."""

    base: int
    suffixes: tuple[str, ...]

    @staticmethod
    def si() -> Scales:
        """Powers of 1000 with SI suffixes."""
        return Scales(1000, ("", "k", "M", "G", "T", "P", "E", "Z", "Y"))

    @staticmethod
    def binary() -> Scales:
        """Powers of 1024 with binary suffixes."""
        return Scales(1024, ("", "ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"))

    def _scale(self, value: float) -> tuple[float, str]:
        index = 0
        while value >= self.base and index < len(self.suffixes) - 1:
            value /= self.base
            index += 1
        return value, self.suffixes[index]


@dataclass
class Formatter:
    """Formats numbers scaled for humans, as in '2.54 M'."""

    decimals: int = 2
    separator: str = " "
    scales: Scales = field(default_factory=Scales.si)

    def with_decimals(self, decimals: int) -> Formatter:
        """Set the number of decimals and return self."""
        self.decimals = decimals
        return self

    def with_separator(self, separator: str) -> Formatter:
        """Set the text between number and suffix and return self."""
        self.separator = separator
        return self

    def with_scales(self, scales: Scales) -> Formatter:
        """Set the scales and return self."""
        self.scales = scales
        return self

    def format(self, value: float) -> str:
        """Format `value` scaled to its largest fitting suffix."""
        if value < 0:
            return "-" + self.format(-value)
        scaled, suffix = self.scales._scale(float(value))
        return f"{scaled:.{self.decimals}f}{self.separator}{suffix}"


@dataclass
class Human(DisplayValue):
    """Values scaled for humans followed by a name, as in '2.54M objects'."""

    formatter: Formatter
    name: str

    def _format(self, value: int) -> str:
        return self.formatter.format(float(value)).replace(" ", "")

    def display_current_value(self, value: int, upper: Optional[int] = None) -> str:
        return self._format(value)

    def display_upper_bound(self, upper_bound: int, value: int) -> str:
        return self._format(upper_bound)

    def display_unit(self, value: int) -> str:
        return self.name