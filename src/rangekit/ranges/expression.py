from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from rangekit.ranges.half_open import Range

Bound = TypeVar("Bound")


class RangeExpression(BaseModel, Generic[Bound]):
    """Shared contract of every interval variant.

    ``relative`` turns a possibly incomplete expression into a concrete
    half-open :class:`~rangekit.ranges.half_open.Range` using a container's
    ``start_index`` / ``end_index``. It does not check the result against the
    container; callers validate realized bounds like any other range they
    were handed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @abstractmethod
    def relative(self, to: Any) -> "Range[Bound]": ...

    @abstractmethod
    def contains(self, value: Bound) -> bool: ...

    def matches(self, value: Bound) -> bool:
        return self.contains(value)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]


def matches(pattern: RangeExpression[Bound], value: Bound) -> bool:
    """True iff ``value`` lies in ``pattern``."""
    return pattern.contains(value)
