"""Container contract that range expressions are realized against."""

from collections.abc import MutableSequence, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from rangekit.core.errors import RangeIndexError, precondition

Index = TypeVar("Index")


@runtime_checkable
class Collection(Protocol[Index]):
    """An ordered container indexed by ``Index``.

    ``container[bounds]`` receives a realized half-open range and returns the
    matching sub-sequence.
    """

    @property
    def start_index(self) -> Index: ...

    @property
    def end_index(self) -> Index: ...

    def __getitem__(self, bounds: Any, /) -> Any: ...


@runtime_checkable
class MutableCollection(Collection[Index], Protocol[Index]):
    def __setitem__(self, bounds: Any, values: Any, /) -> None: ...


class SequenceAdapter:
    """Presents a built-in sequence through the :class:`Collection` contract.

    The index domain is ``0 ..< len(sequence)``; sub-ranges map onto native
    slices, so the result type is whatever the sequence slices to.
    """

    def __init__(self, sequence: Sequence[Any]):
        self.sequence = sequence

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self.sequence)

    def _check_bounds(self, bounds: Any) -> None:
        precondition(
            self.start_index <= bounds.lower_bound
            and bounds.lower_bound <= bounds.upper_bound
            and bounds.upper_bound <= self.end_index,
            f"sub-range {bounds} is outside "
            f"{self.start_index}..<{self.end_index}",
            RangeIndexError,
        )

    def __getitem__(self, bounds: Any) -> Any:
        self._check_bounds(bounds)
        return self.sequence[bounds.lower_bound : bounds.upper_bound]

    def __setitem__(self, bounds: Any, values: Any) -> None:
        if not isinstance(self.sequence, MutableSequence):
            raise TypeError(
                f"{type(self.sequence).__name__} does not support "
                "sub-range assignment"
            )
        self._check_bounds(bounds)
        self.sequence[bounds.lower_bound : bounds.upper_bound] = values


def as_collection(container: Any) -> Any:
    """Return ``container`` itself or a :class:`SequenceAdapter` over it."""
    if isinstance(container, Collection):
        return container
    if isinstance(container, Sequence):
        return SequenceAdapter(container)
    raise TypeError(
        f"{type(container).__name__} is not an indexable collection: "
        "expected start_index/end_index or a built-in sequence"
    )


def boundary_indices(container: Any) -> tuple[Any, Any]:
    collection = as_collection(container)
    return collection.start_index, collection.end_index
