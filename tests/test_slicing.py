from datetime import date

import pytest
from helpers import DailySeries, OffsetArray

from rangekit.core.containers import (
    Collection,
    MutableCollection,
    SequenceAdapter,
    as_collection,
    boundary_indices,
)
from rangekit.core.errors import RangeIndexError
from rangekit.ranges import (
    UNBOUNDED,
    Range,
    between,
    closed,
    from_,
    through,
    up_to,
)
from rangekit.slicing import (
    SliceableMixin,
    realize,
    replace_slice,
    slice_of,
)


class TestSliceOfSequences:
    def test_up_to(self, seven_items: list[int]) -> None:
        assert slice_of(seven_items, up_to(3)) == [10, 20, 30]

    def test_through(self, seven_items: list[int]) -> None:
        assert slice_of(seven_items, through(3)) == [10, 20, 30, 40]

    def test_from(self, seven_items: list[int]) -> None:
        assert slice_of(seven_items, from_(3)) == [40, 50, 60, 70]

    def test_unbounded(self, seven_items: list[int]) -> None:
        assert slice_of(seven_items, UNBOUNDED) == seven_items

    def test_bounded_forms(self, seven_items: list[int]) -> None:
        assert slice_of(seven_items, between(2, 5)) == [30, 40, 50]
        assert slice_of(seven_items, closed(2, 4)) == [30, 40, 50]
        assert slice_of(seven_items, between(3, 3)) == []

    def test_slice_type_follows_container(self) -> None:
        assert slice_of("abcdefg", up_to(3)) == "abc"
        assert slice_of((1, 2, 3, 4), from_(2)) == (3, 4)
        assert slice_of(b"\x00\x01\x02", through(1)) == b"\x00\x01"
        assert slice_of(range(10, 20), closed(0, 2)) == range(10, 13)

    def test_slicing_a_range(self) -> None:
        assert slice_of(between(10, 20), up_to(15)) == between(10, 15)
        assert slice_of(between(10, 20), UNBOUNDED) == between(10, 20)

    def test_rejects_non_expressions(self, seven_items: list[int]) -> None:
        with pytest.raises(TypeError):
            slice_of(seven_items, "0..<3")  # type: ignore[arg-type]

    def test_rejects_non_collections(self) -> None:
        with pytest.raises(TypeError, match="not an indexable collection"):
            slice_of(object(), UNBOUNDED)


class TestSequenceBounds:
    @pytest.mark.parametrize(
        "expr",
        [between(-3, -1), up_to(50), closed(5, 20), from_(-2), between(7, 8)],
    )
    def test_read_outside_domain_fails(
        self, seven_items: list[int], expr: object
    ) -> None:
        with pytest.raises(RangeIndexError, match="outside 0..<7"):
            slice_of(seven_items, expr)  # type: ignore[arg-type]

    def test_domain_edges_are_valid(self, seven_items: list[int]) -> None:
        assert slice_of(seven_items, between(0, 7)) == seven_items
        assert slice_of(seven_items, between(7, 7)) == []
        assert slice_of(seven_items, closed(6, 6)) == [70]

    def test_write_past_end_fails(self, seven_items: list[int]) -> None:
        with pytest.raises(RangeIndexError):
            replace_slice(seven_items, between(9, 12), [1])
        assert seven_items == [10, 20, 30, 40, 50, 60, 70]

    def test_write_negative_bounds_fails(self, seven_items: list[int]) -> None:
        with pytest.raises(RangeIndexError):
            replace_slice(seven_items, between(-2, 0), [1])
        assert len(seven_items) == 7

    def test_adapter_rejects_inverted_bounds(self) -> None:
        adapter = SequenceAdapter([1, 2, 3])
        with pytest.raises(RangeIndexError):
            adapter[Range.unchecked(2, 1)]

    def test_sub_range_of_a_range_uses_the_same_rule(self) -> None:
        with pytest.raises(RangeIndexError):
            slice_of(between(10, 20), up_to(50))


class TestReplaceSlice:
    def test_replace_prefix(self, seven_items: list[int]) -> None:
        replace_slice(seven_items, through(1), [1, 2, 3])
        assert seven_items == [1, 2, 3, 30, 40, 50, 60, 70]

    def test_replace_suffix(self, seven_items: list[int]) -> None:
        replace_slice(seven_items, from_(5), [])
        assert seven_items == [10, 20, 30, 40, 50]

    def test_replace_everything(self, seven_items: list[int]) -> None:
        replace_slice(seven_items, UNBOUNDED, [0])
        assert seven_items == [0]

    def test_read_and_write_realize_the_same_bounds(
        self, seven_items: list[int]
    ) -> None:
        expr = between(2, 4)
        picked = slice_of(seven_items, expr)
        replace_slice(seven_items, expr, [v * 10 for v in picked])
        assert seven_items == [10, 20, 300, 400, 50, 60, 70]

    def test_bytearray(self) -> None:
        data = bytearray(b"abcdef")
        replace_slice(data, up_to(2), b"XY")
        assert data == bytearray(b"XYcdef")

    def test_immutable_sequence(self) -> None:
        with pytest.raises(TypeError, match="sub-range assignment"):
            replace_slice((1, 2, 3), up_to(1), (9,))

    def test_range_is_not_mutable(self) -> None:
        with pytest.raises(TypeError):
            replace_slice(between(0, 5), up_to(2), [1])


class TestCustomContainers:
    def test_offset_indices(self) -> None:
        arr = OffsetArray(100, ["a", "b", "c", "d", "e"])
        assert arr[up_to(102)] == ["a", "b"]
        assert arr[through(102)] == ["a", "b", "c"]
        assert arr[from_(103)] == ["d", "e"]
        assert arr[UNBOUNDED] == ["a", "b", "c", "d", "e"]
        assert arr[103] == "d"
        assert slice_of(arr, between(101, 103)) == ["b", "c"]

    def test_offset_assignment(self) -> None:
        arr = OffsetArray(100, ["a", "b", "c", "d", "e"])
        arr[closed(101, 102)] = ["X"]
        assert arr.values == ["a", "X", "d", "e"]
        arr[UNBOUNDED] = ["z"]
        assert arr.values == ["z"]
        arr[100] = "y"
        assert arr.values == ["y"]

    def test_date_indexed_series(self) -> None:
        series = DailySeries(date(2024, 3, 1), [1.0, 2.0, 3.0, 4.0])
        assert series[through(date(2024, 3, 2))] == [1.0, 2.0]
        assert series[from_(date(2024, 3, 3))] == [3.0, 4.0]
        assert series[date(2024, 3, 4)] == 4.0

    def test_missing_accessors_fail_at_instantiation(self) -> None:
        class NoElements(SliceableMixin):
            def subsequence(self, bounds: Range[int]) -> list[int]:
                return []

        with pytest.raises(TypeError, match="abstract"):
            NoElements()

    def test_read_only_container(self) -> None:
        series = DailySeries(date(2024, 3, 1), [1.0])
        with pytest.raises(TypeError, match="not mutable"):
            series[UNBOUNDED] = [0.0]


class TestContainerContract:
    def test_protocol_checks(self) -> None:
        arr = OffsetArray(0, [])
        assert isinstance(arr, Collection)
        assert isinstance(arr, MutableCollection)
        assert isinstance(between(0, 3), Collection)
        assert not isinstance(between(0, 3), MutableCollection)
        assert not isinstance([1, 2], Collection)

    def test_as_collection(self) -> None:
        arr = OffsetArray(0, [])
        assert as_collection(arr) is arr
        adapter = as_collection([1, 2, 3])
        assert isinstance(adapter, SequenceAdapter)
        assert (adapter.start_index, adapter.end_index) == (0, 3)

    def test_boundary_indices(self) -> None:
        assert boundary_indices("hello") == (0, 5)
        assert boundary_indices(OffsetArray(7, [1, 2])) == (7, 9)

    def test_realize(self, seven_items: list[int]) -> None:
        assert realize(through(2), seven_items) == between(0, 3)
