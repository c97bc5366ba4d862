"""The interface for reporting hierarchical progress."""

from __future__ import annotations

import abc
import enum
import math
import time
from typing import Optional

from progdash.unit import Unit

_USIZE_MAX = 2**64 - 1


class MessageLevel(enum.Enum):
    """The kind of a message attached to progress."""

    INFO = "info"
    FAILURE = "failure"
    SUCCESS = "success"


def _steps_per_second(step: int, elapsed: float) -> int:
    rate = step / elapsed if elapsed else (math.nan if step == 0 else math.inf)
    if math.isnan(rate) or rate <= 0:
        return 0
    if math.isinf(rate) or rate >= _USIZE_MAX:
        return _USIZE_MAX
    return int(rate)


class Progress(abc.ABC):
    """A node of a progress hierarchy that can be advanced and receive messages.

    Implementations that keep their unit or upper bound in `_unit` and `_max`
    get `unit()` and `max()` for free; both default to None.
    """

    _unit: Optional[Unit] = None
    _max: Optional[int] = None

    @abc.abstractmethod
    def add_child(self, name: str) -> Progress:
        """Add and return a child progress with the given name."""

    @abc.abstractmethod
    def init(self, max: Optional[int], unit: Optional[Unit]) -> None:
        """Prepare for progress; `max` of None means unbounded."""

    @abc.abstractmethod
    def set(self, step: int) -> None:
        """Set the current progress to `step`."""

    def unit(self) -> Optional[Unit]:
        """Return the unit given to `init`, if any."""
        return self._unit

    def max(self) -> Optional[int]:
        """Return the upper bound given to `init`, if any."""
        return self._max

    @abc.abstractmethod
    def step(self) -> int:
        """Return the current step."""

    @abc.abstractmethod
    def inc_by(self, step: int) -> None:
        """Advance the current progress by `step`."""

    def inc(self) -> None:
        """Advance the current progress by one."""
        self.inc_by(1)

    @abc.abstractmethod
    def set_name(self, name: str) -> None:
        """Rename this progress."""

    @abc.abstractmethod
    def name(self) -> Optional[str]:
        """Return the name of this progress, if it has one."""

    @abc.abstractmethod
    def message(self, level: MessageLevel, message: str) -> None:
        """Store a message of the given level with the progress."""

    def info(self, message: str) -> None:
        """Store an informational message."""
        self.message(MessageLevel.INFO, message)

    def done(self, message: str) -> None:
        """Store a message saying the task succeeded."""
        self.message(MessageLevel.SUCCESS, message)

    def fail(self, message: str) -> None:
        """Store a message saying the task failed."""
        self.message(MessageLevel.FAILURE, message)

    def show_throughput(self, start: float) -> None:
        """Report how many steps were done since `start`, a `time.monotonic()` value."""
        step = self.step()
        unit = self.unit()
        if unit is not None:
            self.show_throughput_with(start, step, unit)
            return
        elapsed = time.monotonic() - start
        per_second = _steps_per_second(step, elapsed)
        self.info(f"done {step} items in {elapsed:.2f}s ({per_second} items/s)")

    def show_throughput_with(self, start: float, step: int, unit: Unit) -> None:
        """Report `step` done since `start`, rendered in `unit`."""
        elapsed = time.monotonic() - start
        per_second = _steps_per_second(step, elapsed)
        display = unit.as_display_value()
        unit_text = display.display_unit(step)
        unit_suffix = f" {unit_text}" if unit_text else ""
        self.info(
            f"done {display.display_current_value(step, None)}{unit_suffix}"
            f" in {elapsed:.2f}s ({display.display_current_value(per_second, None)}{unit_suffix}/s)"
        )