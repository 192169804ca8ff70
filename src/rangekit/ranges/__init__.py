"""ranges family: interval types sharing the RangeExpression contract."""

from rangekit.ranges.closed import ClosedRange
from rangekit.ranges.construct import (
    between,
    closed,
    from_,
    through,
    unbounded,
    up_to,
)
from rangekit.ranges.expression import RangeExpression, matches
from rangekit.ranges.half_open import Range
from rangekit.ranges.partial import (
    UNBOUNDED,
    PartialRangeFrom,
    PartialRangeThrough,
    PartialRangeUpTo,
    UnboundedRange,
)

__all__ = [
    "UNBOUNDED",
    "ClosedRange",
    "PartialRangeFrom",
    "PartialRangeThrough",
    "PartialRangeUpTo",
    "Range",
    "RangeExpression",
    "UnboundedRange",
    "between",
    "closed",
    "from_",
    "matches",
    "through",
    "unbounded",
    "up_to",
]
