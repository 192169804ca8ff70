from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Generic

from pydantic import model_validator

from rangekit.core import stepping
from rangekit.core.errors import (
    InvalidRangeError,
    RangeIndexError,
    precondition,
)
from rangekit.ranges.expression import Bound, RangeExpression

if TYPE_CHECKING:
    from rangekit.ranges.closed import ClosedRange


class Range(RangeExpression[Bound], Generic[Bound]):
    """Half-open interval ``lower_bound ..< upper_bound``.

    Equal bounds form an empty range. Two empty ranges with different bounds
    are still unequal: equality is structural.

    When the bound type supports discrete stepping the range is also a
    random-access collection whose indices are its own elements: it can be
    iterated (forwards and in reverse), measured with ``len()``, stepped with
    ``index_after`` / ``index_before`` / ``index``, and subscripted with a
    position or a sub-range expression.
    """

    lower_bound: Bound
    upper_bound: Bound

    @model_validator(mode="after")
    def validate_bounds(self) -> "Range[Bound]":
        precondition(
            self.lower_bound <= self.upper_bound,
            "Can't form Range with upper_bound < lower_bound: "
            f"{self.lower_bound!r} > {self.upper_bound!r}",
            InvalidRangeError,
        )
        return self

    @classmethod
    def unchecked(cls, lower_bound: Any, upper_bound: Any) -> "Range[Any]":
        """Build a range without checking ``lower_bound <= upper_bound``."""
        return cls.model_construct(
            lower_bound=lower_bound, upper_bound=upper_bound
        )

    @classmethod
    def from_closed(cls, other: "ClosedRange[Any]") -> "Range[Any]":
        """Half-open equivalent of a closed range (upper bound + 1 step)."""
        upper = stepping.advance(other.upper_bound, 1)
        return cls.unchecked(other.lower_bound, upper)

    def contains(self, value: Bound) -> bool:
        return self.lower_bound <= value and value < self.upper_bound

    @property
    def is_empty(self) -> bool:
        return self.lower_bound == self.upper_bound

    def relative(self, to: Any) -> "Range[Bound]":
        return Range.unchecked(self.lower_bound, self.upper_bound)

    def clamped(self, to: "Range[Bound]") -> "Range[Bound]":
        """Project both bounds into ``to``.

        A range lying wholly outside ``to`` comes back empty, pinned at the
        nearest edge of ``to``.
        """
        limits = to
        if limits.lower_bound > self.lower_bound:
            lower = limits.lower_bound
        elif limits.upper_bound < self.lower_bound:
            lower = limits.upper_bound
        else:
            lower = self.lower_bound
        if limits.upper_bound < self.upper_bound:
            upper = limits.upper_bound
        elif limits.lower_bound > self.upper_bound:
            upper = limits.lower_bound
        else:
            upper = self.upper_bound
        return Range.unchecked(lower, upper)

    def overlaps(self, other: "Range[Bound] | ClosedRange[Bound]") -> bool:
        if isinstance(other, Range):
            return (
                not other.is_empty and self.contains(other.lower_bound)
            ) or (not self.is_empty and other.contains(self.lower_bound))
        return self.contains(other.lower_bound) or (
            not self.is_empty and other.contains(self.lower_bound)
        )

    # -- collection behaviour (requires discrete stepping) ------------------

    @property
    def start_index(self) -> Bound:
        return self.lower_bound

    @property
    def end_index(self) -> Bound:
        return self.upper_bound

    @property
    def indices(self) -> "Range[Bound]":
        stepping.require_strideable(self.lower_bound, "indices")
        return self

    def index_after(self, i: Bound) -> Bound:
        precondition(
            self.contains(i),
            f"index {i!r} is not a valid position in {self}",
            RangeIndexError,
        )
        return stepping.advance(i, 1)

    def index_before(self, i: Bound) -> Bound:
        precondition(
            self.lower_bound < i and i <= self.upper_bound,
            f"no index before {i!r} in {self}",
            RangeIndexError,
        )
        return stepping.advance(i, -1)

    def index(self, i: Bound, offset_by: int) -> Bound:
        result = stepping.advance(i, offset_by)
        precondition(
            self.lower_bound <= result and result <= self.upper_bound,
            f"{i!r} offset by {offset_by} lands outside {self}",
            RangeIndexError,
        )
        return result

    def distance(self, start: Bound, end: Bound) -> int:
        return stepping.distance(start, end)

    def element_at(self, position: Bound) -> Bound:
        stepping.require_strideable(self.lower_bound, "element access")
        precondition(
            self.contains(position), "Index out of range", RangeIndexError
        )
        return position

    def __getitem__(self, key: Any) -> Any:
        if not isinstance(key, RangeExpression):
            return self.element_at(key)
        bounds = key.relative(to=self)
        precondition(
            self.lower_bound <= bounds.lower_bound
            and bounds.upper_bound <= self.upper_bound,
            f"sub-range {bounds} is outside {self}",
            RangeIndexError,
        )
        return bounds

    def __len__(self) -> int:
        stepping.require_strideable(self.lower_bound, "len()")
        return stepping.distance(self.lower_bound, self.upper_bound)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __iter__(self) -> Iterator[Bound]:  # type: ignore[override]
        stepping.require_strideable(self.lower_bound, "iteration")
        return self._forward()

    def __reversed__(self) -> Iterator[Bound]:
        stepping.require_strideable(self.lower_bound, "reverse iteration")
        return self._backward()

    def _forward(self) -> Iterator[Bound]:
        current = self.lower_bound
        while current < self.upper_bound:
            yield current
            current = stepping.advance(current, 1)

    def _backward(self) -> Iterator[Bound]:
        current = self.upper_bound
        while current > self.lower_bound:
            current = stepping.advance(current, -1)
            yield current

    def __str__(self) -> str:
        return f"{self.lower_bound}..<{self.upper_bound}"
