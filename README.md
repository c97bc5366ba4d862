# progdash

Building blocks for reporting the progress of hierarchical tasks: units that
render progress values as text, display modes for percentages and throughput,
ready-made unit kinds for bytes, durations and human-scaled numbers, a
throughput tracker for renderers, UTC timestamps for messages, and an abstract
interface for progress tree nodes.

The package has no dependencies beyond the standard library.

## Installation

```
pip install progdash
```

## Units (`progdash.unit`)

A `Unit` turns a current value, an optional upper bound and an optional
`Throughput` into text. `Unit.display(...)` returns a `UnitDisplay`; render it
with `str()`.

```python
from progdash.unit import Mode, Range, dynamic_and_mode, label, label_and_mode

print(label("items").display(123, 500, None))
# 123/500 items

print(label_and_mode("items", Mode.with_percentage()).display(123, 500, None))
# 123/500 items [24%]

steps = dynamic_and_mode(Range("steps"), Mode.with_percentage())
print(steps.display(1, 3, None))
# 2 of 3 steps [33%]
```

- `label(name)` and `label_and_mode(name, mode)` make units with a fixed
  `Label`; `dynamic(kind)` and `dynamic_and_mode(kind, mode)` take any
  `DisplayValue`. `Unit("items")` also wraps a plain string in a `Label`.
- `Mode.with_percentage()` and `Mode.with_throughput()` create modes;
  `and_percentage()`, `and_throughput()` and `show_before_value()` return
  modified copies. By default the extras appear after the unit
  (`Location.AFTER_UNIT`); `show_before_value()` moves them in front
  (`Location.BEFORE_VALUE`).
- On a `UnitDisplay`, `.values()`, `.unit()` and `.all()` choose which parts
  are rendered.
- A `Throughput(value_change_in_timespan, timespan)` with a `timedelta`
  timespan is rendered in the largest fitting time unit, a factor of one left
  out:

```python
from datetime import timedelta
from progdash.unit import Mode, Throughput, label_and_mode

unit = label_and_mode("items", Mode.with_percentage().and_throughput())
print(unit.display(500, None, Throughput(250, timedelta(milliseconds=500))))
# 500 items |250/500ms|
print(unit.display(700, None, Throughput(500, timedelta(seconds=60))))
# 700 items |500/m|
```

To write a unit kind of your own, subclass `DisplayValue` and implement
`display_unit(value)`; override `display_current_value`, `separator`,
`display_upper_bound`, `display_percentage` or `display_throughput` as needed.

## Unit kinds (`progdash.kinds`)

- `Bytes()` renders sizes with decimal prefixes, e.g. `5.5KB`.
- `Duration()` renders seconds as compound durations, e.g. `40s of 5m`.
- `Human(formatter, name)` renders numbers scaled by a `Formatter`
  (configured with `with_decimals`, `with_separator`, `with_scales`; scales
  from `Scales.si()` or `Scales.binary()`) followed by a name.
- `format_bytes(value)` and `format_dhms(seconds)` are the plain formatting
  functions; both raise `ValueError` for negative input.

```python
from progdash.kinds import Bytes, Duration, Formatter, Human
from progdash.unit import Mode, dynamic, dynamic_and_mode

print(dynamic(Bytes()).display(5540, None, None))
# 5.5KB
print(dynamic(Duration()).display(40, 300, None))
# 40s of 5m
objects = dynamic_and_mode(Human(Formatter().with_decimals(1), "objects"), Mode.with_percentage())
print(objects.display(100_002, 7_500_000, None))
# 100.0k/7.5M objects [1%]
```

## Throughput (`progdash.throughput`)

`Throughput` keeps a short history per task key and computes how much a value
changed per second, recomputed at most once a second. Call `update_elapsed()`
once per frame, then `update_and_get(key, progress)` for each task, where
`progress` is any object with a `step` attribute (or None). It returns a
`progdash.unit.Throughput` once enough time has been observed, otherwise None.
`reconcile(pairs)` forgets every key not among the given `(key, task)` pairs.
The clock defaults to `time.time` and can be passed as `Throughput(clock=...)`.

## Timestamps (`progdash.timefmt`)

- `format_time_for_messages(time)` takes a `datetime` (naive ones are taken as
  UTC) or a POSIX timestamp and returns `HH:MM:SS` in UTC.
- `format_now_datetime_seconds()` returns the current UTC time as
  `YYYY-MM-DDTHH:MM:SS`.

## Progress interface (`progdash.progress`)

`Progress` is an abstract base class for a node in a progress tree. Subclasses
implement `add_child`, `init`, `set`, `step`, `inc_by`, `set_name`, `name` and
`message`. The class provides `inc`, `info`, `done` and `fail` (messages of
`MessageLevel.INFO`, `SUCCESS` and `FAILURE`), `unit()` and `max()` (which
return the `_unit` and `_max` attributes, None by default), and
`show_throughput(start)` / `show_throughput_with(start, step, unit)`, which
post an info message such as `done 10 items in 2.00s (5 items/s)`; `start` is
a `time.monotonic()` value.

## What this package does not do

It contains no concrete progress tree, no message buffer and no renderer:
`Progress` is an interface only, and nothing here draws to a terminal. You
supply the implementation and the display.

## Development

```
pip install -e ".[test]"
pytest
```