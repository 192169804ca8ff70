"""Discrete-stepping contracts for range bounds.

Every bound must be totally ordered. Iteration, counting and index
arithmetic additionally need discrete stepping: moving a value by a signed
integer offset and measuring the signed offset between two values.

Stepping is available for:

* objects implementing :class:`Strideable` (``advanced`` / ``distance_to``),
  including the fixed-width integers in :mod:`rangekit.core.fixed_width`;
* ``int`` (unbounded, never overflows);
* ``datetime.date`` (one day per step, trapping outside ``date.min`` and
  ``date.max``).

``bool`` and ``datetime.datetime`` are ordered but not steppable.
"""

from datetime import date, datetime, timedelta
from typing import Any, Protocol, Self, runtime_checkable

from rangekit.core.errors import (
    RangeOverflowError,
    UnsupportedBoundError,
    fail,
    precondition,
)


@runtime_checkable
class Strideable(Protocol):
    def advanced(self, by: int) -> Self: ...

    def distance_to(self, other: Any) -> int: ...


def _is_calendar_date(value: Any) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


def is_strideable(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Strideable):
        return True
    return isinstance(value, int) or _is_calendar_date(value)


def require_strideable(value: Any, operation: str) -> None:
    precondition(
        is_strideable(value),
        f"{operation} requires a bound type with discrete stepping, "
        f"got {type(value).__name__}",
        UnsupportedBoundError,
    )


def advance(value: Any, by: int) -> Any:
    """Return ``value`` moved ``by`` discrete steps."""
    require_strideable(value, "advance")
    if isinstance(value, Strideable):
        return value.advanced(by)
    if isinstance(value, int):
        return value + by
    try:
        return value + timedelta(days=by)
    except OverflowError:
        fail(
            RangeOverflowError,
            f"arithmetic overflow: {value} advanced by {by} days leaves "
            f"[{date.min}, {date.max}]",
        )


def distance(start: Any, end: Any) -> int:
    """Return the signed number of steps from ``start`` to ``end``."""
    require_strideable(start, "distance")
    if isinstance(start, Strideable):
        return start.distance_to(end)
    if isinstance(start, int):
        return int(end) - start
    return (end - start).days
