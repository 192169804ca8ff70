"""Named constructors for every range form.

=================  ==========  ======================
constructor        notation    result
=================  ==========  ======================
``between(a, b)``  ``a..<b``   :class:`Range`
``closed(a, b)``   ``a...b``   :class:`ClosedRange`
``up_to(b)``       ``..<b``    :class:`PartialRangeUpTo`
``through(b)``     ``...b``    :class:`PartialRangeThrough`
``from_(a)``       ``a...``    :class:`PartialRangeFrom`
``unbounded()``    ``...``     :data:`UNBOUNDED`
=================  ==========  ======================
"""

from rangekit.ranges.closed import ClosedRange
from rangekit.ranges.expression import Bound
from rangekit.ranges.half_open import Range
from rangekit.ranges.partial import (
    UNBOUNDED,
    PartialRangeFrom,
    PartialRangeThrough,
    PartialRangeUpTo,
    UnboundedRange,
)


def between(minimum: Bound, maximum: Bound) -> Range[Bound]:
    return Range(lower_bound=minimum, upper_bound=maximum)


def closed(minimum: Bound, maximum: Bound) -> ClosedRange[Bound]:
    return ClosedRange(lower_bound=minimum, upper_bound=maximum)


def up_to(maximum: Bound) -> PartialRangeUpTo[Bound]:
    return PartialRangeUpTo(upper_bound=maximum)


def through(maximum: Bound) -> PartialRangeThrough[Bound]:
    return PartialRangeThrough(upper_bound=maximum)


def from_(minimum: Bound) -> PartialRangeFrom[Bound]:
    return PartialRangeFrom(lower_bound=minimum)


def unbounded() -> UnboundedRange:
    return UNBOUNDED
