from datetime import date, timedelta
from typing import Any

from rangekit.ranges.half_open import Range
from rangekit.slicing import SliceableMixin


class OffsetArray(SliceableMixin):
    """Mutable array whose indices start at ``base`` instead of zero."""

    def __init__(self, base: int, values: list[Any]):
        self.base = base
        self.values = list(values)

    @property
    def start_index(self) -> int:
        return self.base

    @property
    def end_index(self) -> int:
        return self.base + len(self.values)

    def subsequence(self, bounds: Range[int]) -> list[Any]:
        return self.values[
            bounds.lower_bound - self.base : bounds.upper_bound - self.base
        ]

    def element(self, index: int) -> Any:
        return self.values[index - self.base]

    def replace_subrange(self, bounds: Range[int], values: Any) -> None:
        self.values[
            bounds.lower_bound - self.base : bounds.upper_bound - self.base
        ] = list(values)

    def set_element(self, index: int, value: Any) -> None:
        self.values[index - self.base] = value


class DailySeries(SliceableMixin):
    """Read-only readings indexed by consecutive calendar days."""

    def __init__(self, first_day: date, readings: list[float]):
        self.first_day = first_day
        self.readings = list(readings)

    @property
    def start_index(self) -> date:
        return self.first_day

    @property
    def end_index(self) -> date:
        return self.first_day + timedelta(days=len(self.readings))

    def subsequence(self, bounds: Range[date]) -> list[float]:
        lo = (bounds.lower_bound - self.first_day).days
        hi = (bounds.upper_bound - self.first_day).days
        return self.readings[lo:hi]

    def element(self, index: date) -> float:
        return self.readings[(index - self.first_day).days]
