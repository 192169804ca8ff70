"""One-sided range expressions and the unbounded marker.

Partial ranges are inert until ``relative(to=container)`` fills the missing
endpoint from the container's ``start_index`` or ``end_index``.
"""

from collections.abc import Iterator
from typing import Any, Generic

from rangekit.core import stepping
from rangekit.core.containers import boundary_indices
from rangekit.ranges.expression import Bound, RangeExpression
from rangekit.ranges.half_open import Range


class PartialRangeUpTo(RangeExpression[Bound], Generic[Bound]):
    """``..<upper_bound``: everything below an exclusive upper bound."""

    upper_bound: Bound

    def relative(self, to: Any) -> Range[Bound]:
        start, _ = boundary_indices(to)
        return Range(lower_bound=start, upper_bound=self.upper_bound)

    def contains(self, value: Bound) -> bool:
        return value < self.upper_bound

    def __str__(self) -> str:
        return f"..<{self.upper_bound}"


class PartialRangeThrough(RangeExpression[Bound], Generic[Bound]):
    """``...upper_bound``: everything up to and including the upper bound."""

    upper_bound: Bound

    def relative(self, to: Any) -> Range[Bound]:
        start, _ = boundary_indices(to)
        return Range(
            lower_bound=start,
            upper_bound=stepping.advance(self.upper_bound, 1),
        )

    def contains(self, value: Bound) -> bool:
        return value <= self.upper_bound

    def __str__(self) -> str:
        return f"...{self.upper_bound}"


class PartialRangeFrom(RangeExpression[Bound], Generic[Bound]):
    """``lower_bound...``: everything from an inclusive lower bound upwards.

    With a steppable bound this is an endless lazy sequence. Each ``iter()``
    restarts at ``lower_bound``; bound it externally, e.g. with
    ``itertools.islice``. Fixed-width bounds raise ``RangeOverflowError``
    when asked for the value after their maximum.
    """

    lower_bound: Bound

    def relative(self, to: Any) -> Range[Bound]:
        _, end = boundary_indices(to)
        return Range(lower_bound=self.lower_bound, upper_bound=end)

    def contains(self, value: Bound) -> bool:
        return self.lower_bound <= value

    def __iter__(self) -> Iterator[Bound]:  # type: ignore[override]
        stepping.require_strideable(self.lower_bound, "iteration")
        return _count_from(self.lower_bound)

    def __str__(self) -> str:
        return f"{self.lower_bound}..."


def _count_from(start: Any) -> Iterator[Any]:
    current = start
    while True:
        yield current
        current = stepping.advance(current, 1)


class UnboundedRange(RangeExpression[Any]):
    """Zero-field marker for "no constraint in either direction"."""

    def relative(self, to: Any) -> Range[Any]:
        start, _ = boundary_indices(to)
        return PartialRangeFrom(lower_bound=start).relative(to=to)

    def contains(self, value: Any) -> bool:
        return True

    def __str__(self) -> str:
        return "..."


UNBOUNDED = UnboundedRange()
