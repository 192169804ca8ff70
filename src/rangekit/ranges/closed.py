from collections.abc import Iterator
from typing import Any, Generic

from pydantic import model_validator

from rangekit.core import stepping
from rangekit.core.errors import InvalidRangeError, precondition
from rangekit.ranges.expression import Bound, RangeExpression
from rangekit.ranges.half_open import Range


class ClosedRange(RangeExpression[Bound], Generic[Bound]):
    """Inclusive interval ``lower_bound ... upper_bound``; never empty."""

    lower_bound: Bound
    upper_bound: Bound

    @model_validator(mode="after")
    def validate_bounds(self) -> "ClosedRange[Bound]":
        precondition(
            self.lower_bound <= self.upper_bound,
            "Can't form ClosedRange with upper_bound < lower_bound: "
            f"{self.lower_bound!r} > {self.upper_bound!r}",
            InvalidRangeError,
        )
        return self

    @classmethod
    def unchecked(
        cls, lower_bound: Any, upper_bound: Any
    ) -> "ClosedRange[Any]":
        return cls.model_construct(
            lower_bound=lower_bound, upper_bound=upper_bound
        )

    @classmethod
    def from_range(cls, other: Range[Any]) -> "ClosedRange[Any]":
        """Closed equivalent of a non-empty half-open range."""
        precondition(
            not other.is_empty,
            f"Can't form ClosedRange from empty range {other}",
            InvalidRangeError,
        )
        upper = stepping.advance(other.upper_bound, -1)
        return cls.unchecked(other.lower_bound, upper)

    def contains(self, value: Bound) -> bool:
        return self.lower_bound <= value and value <= self.upper_bound

    @property
    def is_empty(self) -> bool:
        return False

    def to_range(self) -> Range[Bound]:
        return Range.from_closed(self)

    def relative(self, to: Any) -> Range[Bound]:
        return self.to_range()

    def overlaps(self, other: "ClosedRange[Bound]") -> bool:
        return (
            self.lower_bound <= other.upper_bound
            and other.lower_bound <= self.upper_bound
        )

    def clamped(self, to: "ClosedRange[Bound]") -> "ClosedRange[Bound]":
        limits = to
        lo, hi = limits.lower_bound, limits.upper_bound
        lower = min(max(self.lower_bound, lo), hi)
        upper = min(max(self.upper_bound, lo), hi)
        return ClosedRange.unchecked(lower, upper)

    def __len__(self) -> int:
        stepping.require_strideable(self.lower_bound, "len()")
        return stepping.distance(self.lower_bound, self.upper_bound) + 1

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Bound]:  # type: ignore[override]
        stepping.require_strideable(self.lower_bound, "iteration")
        return self._forward()

    def _forward(self) -> Iterator[Bound]:
        # Never step past upper_bound: it may be the bound type's maximum.
        current = self.lower_bound
        while True:
            yield current
            if current == self.upper_bound:
                return
            current = stepping.advance(current, 1)

    def __str__(self) -> str:
        return f"{self.lower_bound}...{self.upper_bound}"
