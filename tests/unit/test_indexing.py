"""Unit tests for selector expansion and bounds checking."""

from __future__ import annotations

import pytest

from strand.errors import BoundsError
from strand.indexing import expand_selector, normalize_index, retention_mask


class TestNormalizeIndex:
    def test_positive(self) -> None:
        assert normalize_index(0, 3) == 0
        assert normalize_index(2, 3) == 2

    def test_negative_counts_from_end(self) -> None:
        assert normalize_index(-1, 3) == 2
        assert normalize_index(-3, 3) == 0

    @pytest.mark.parametrize("idx", [3, 10, -4])
    def test_out_of_bounds(self, idx: int) -> None:
        with pytest.raises(BoundsError) as exc_info:
            normalize_index(idx, 3)
        assert exc_info.value.index == idx
        assert exc_info.value.length == 3

    def test_empty_series_has_no_valid_index(self) -> None:
        with pytest.raises(BoundsError):
            normalize_index(0, 0)
        with pytest.raises(BoundsError):
            normalize_index(-1, 0)

    def test_bounds_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            normalize_index(5, 1)


class TestExpandSelector:
    def test_list_keeps_order_and_duplicates(self) -> None:
        assert expand_selector([2, 0, 2], 3) == [2, 0, 2]

    def test_negative_entries(self) -> None:
        assert expand_selector([-1, -2], 4) == [3, 2]

    def test_range(self) -> None:
        assert expand_selector(range(1, 4), 5) == [1, 2, 3]

    def test_range_out_of_bounds(self) -> None:
        with pytest.raises(BoundsError):
            expand_selector(range(0, 6), 5)

    def test_slice_is_clipped(self) -> None:
        assert expand_selector(slice(1, 100), 4) == [1, 2, 3]
        assert expand_selector(slice(None, None, 2), 5) == [0, 2, 4]
        assert expand_selector(slice(-2, None), 5) == [3, 4]

    def test_tuple(self) -> None:
        assert expand_selector((0, 1), 2) == [0, 1]

    def test_non_integer_entry(self) -> None:
        with pytest.raises(TypeError, match="Indices must be integers"):
            expand_selector([0, 1.5], 3)
        with pytest.raises(TypeError):
            expand_selector([True], 3)

    def test_unsupported_selector(self) -> None:
        with pytest.raises(TypeError, match="Unsupported selector"):
            expand_selector("0", 3)


class TestRetentionMask:
    def test_drops_listed_positions(self) -> None:
        assert retention_mask(4, [1, 3]) == [True, False, True, False]

    def test_duplicates_are_harmless(self) -> None:
        assert retention_mask(3, [0, 0]) == [False, True, True]

    def test_nothing_removed(self) -> None:
        assert retention_mask(2, []) == [True, True]
