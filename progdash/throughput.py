"""Throughput estimation for a set of progress values seen by a renderer."""

from __future__ import annotations

import math
import time
from collections import deque
from datetime import timedelta
from typing import Any, Callable, Hashable, Iterable, Optional

from progdash import unit

_THROTTLE_INTERVAL = timedelta(seconds=1)
_ONCE_A_SECOND = timedelta(seconds=1)
_ZERO = timedelta(0)
_USIZE_MAX = 2**64 - 1


def _to_step(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value) or value >= _USIZE_MAX:
        return _USIZE_MAX
    return int(value)


class _State:
    """Observed values of one progress entry."""

    def __init__(self, value: int, elapsed: timedelta) -> None:
        self.observed = elapsed
        self.last_value = value
        self.elapsed_values: deque[tuple[timedelta, int]] = deque([(elapsed, value)])
        self.last_update_duration = elapsed
        self.precomputed_throughput: Optional[int] = None

    def _compute_throughput(self) -> int:
        observed = sum((elapsed for elapsed, _ in self.elapsed_values), _ZERO)
        while self.elapsed_values and observed > _ONCE_A_SECOND:
            candidate = self.elapsed_values[0][0]
            if max(observed - candidate, _ZERO) <= _ONCE_A_SECOND:
                break
            observed -= candidate
            self.elapsed_values.popleft()
        observed_value = sum(value for _, value in self.elapsed_values)
        seconds = observed.total_seconds()
        if seconds == 0:
            rate = math.nan if observed_value == 0 else math.inf
        else:
            rate = observed_value / seconds * _ONCE_A_SECOND.total_seconds()
        return _to_step(rate)

    def update(self, value: int, elapsed: timedelta) -> Optional[unit.Throughput]:
        self.observed += elapsed
        self.elapsed_values.append((elapsed, max(value - self.last_value, 0)))
        self.last_value = value
        if self.observed - self.last_update_duration > _THROTTLE_INTERVAL:
            self.precomputed_throughput = self._compute_throughput()
            self.last_update_duration = self.observed
        return self.throughput()

    def throughput(self) -> Optional[unit.Throughput]:
        if self.precomputed_throughput is None:
            return None
        return unit.Throughput(self.precomputed_throughput, _ONCE_A_SECOND)


class Throughput:
    """Computes per-second throughput of progress values, keyed by task.

    `clock` returns the current time in seconds; it defaults to `time.time`.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._states: dict[Hashable, _State] = {}
        self._updated_at: Optional[float] = None
        self._elapsed: Optional[timedelta] = None

    def update_elapsed(self) -> None:
        """Record the time at which the values are about to be updated."""
        now = self._clock()
        if self._updated_at is None or now < self._updated_at:
            self._elapsed = None
        else:
            self._elapsed = timedelta(seconds=now - self._updated_at)
        self._updated_at = now

    def update_and_get(self, key: Hashable, progress: Optional[Any]) -> Optional[unit.Throughput]:
        """Set the current `progress` of `key` and return its throughput, if known.

        `progress` is any object with a `step` attribute, or None.
        """
        if progress is None or self._elapsed is None:
            return None
        state = self._states.get(key)
        if state is not None:
            return state.update(progress.step, self._elapsed)
        state = _State(progress.step, self._elapsed)
        self._states[key] = state
        return state.throughput()

    def reconcile(self, sorted_values: Iterable[tuple[Hashable, Any]]) -> None:
        """Forget every key not present among the `(key, task)` pairs given."""
        present = {key for key, _ in sorted_values}
        self._states = {key: state for key, state in self._states.items() if key in present}