"""Slicing containers with range expressions.

Every expression is first realized against the container
(``expr.relative(to=container)``) and the container is then indexed with the
resulting half-open :class:`~rangekit.ranges.half_open.Range`. Reads and
writes go through the same realization.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from rangekit.core.containers import MutableCollection, as_collection
from rangekit.ranges.expression import RangeExpression
from rangekit.ranges.half_open import Range

logger = logging.getLogger(__name__)


def realize(expression: RangeExpression[Any], container: Any) -> Range[Any]:
    if not isinstance(expression, RangeExpression):
        raise TypeError(
            f"expected a range expression, got {type(expression).__name__}"
        )
    bounds = expression.relative(to=container)
    logger.debug("realized %s as %s", expression, bounds)
    return bounds


def slice_of(container: Any, expression: RangeExpression[Any]) -> Any:
    """Return the sub-sequence of ``container`` selected by ``expression``."""
    collection = as_collection(container)
    return collection[realize(expression, collection)]


def replace_slice(
    container: Any, expression: RangeExpression[Any], values: Any
) -> None:
    """Assign ``values`` over the sub-range selected by ``expression``."""
    collection = as_collection(container)
    if not isinstance(collection, MutableCollection):
        raise TypeError(
            f"{type(container).__name__} does not support sub-range assignment"
        )
    collection[realize(expression, collection)] = values


class SliceableMixin(ABC):
    """Routes ``obj[expr]`` and ``obj[expr] = values`` through realization.

    Subclasses provide ``start_index``, ``end_index``, ``subsequence(bounds)``
    and ``element(index)``. Mutable containers also provide
    ``replace_subrange(bounds, values)`` and ``set_element``.
    """

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, RangeExpression):
            return self.subsequence(realize(key, self))
        return self.element(key)

    def __setitem__(self, key: Any, values: Any) -> None:
        if isinstance(key, RangeExpression):
            self.replace_subrange(realize(key, self), values)
            return
        self.set_element(key, values)

    @abstractmethod
    def subsequence(self, bounds: Range[Any]) -> Any: ...

    @abstractmethod
    def element(self, index: Any) -> Any: ...

    def replace_subrange(self, bounds: Range[Any], values: Any) -> None:
        raise TypeError(f"{type(self).__name__} is not mutable")

    def set_element(self, index: Any, value: Any) -> None:
        raise TypeError(f"{type(self).__name__} is not mutable")
