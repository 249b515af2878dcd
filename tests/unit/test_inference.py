"""Unit tests for dtype inference over raw Python values."""

from __future__ import annotations

import datetime

import numpy as np
import pytest

from strand.dtypes import Bool, Date, Datetime, Float64, Int64, Utf8
from strand.errors import EmptyTypeError, TypeMismatchError, UnsupportedTypeError
from strand.inference import classify, infer_dtype, merge

# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    def test_none_is_null(self) -> None:
        assert classify(None) is None

    def test_bool_before_int(self) -> None:
        assert classify(True) is Bool
        assert classify(np.bool_(False)) is Bool

    def test_integers(self) -> None:
        assert classify(7) is Int64
        assert classify(np.int32(7)) is Int64
        assert classify(np.uint8(7)) is Int64

    def test_floats(self) -> None:
        assert classify(1.5) is Float64
        assert classify(np.float32(1.5)) is Float64

    def test_string(self) -> None:
        assert classify("x") is Utf8

    def test_datetime_before_date(self) -> None:
        assert classify(datetime.datetime(2024, 5, 1, 8, 30)) is Datetime
        assert classify(datetime.date(2024, 5, 1)) is Date

    def test_aware_datetime_unsupported(self) -> None:
        aware = datetime.datetime(2024, 5, 1, tzinfo=datetime.timezone.utc)
        with pytest.raises(UnsupportedTypeError, match="timezone-aware"):
            classify(aware)

    @pytest.mark.parametrize("value", [2**63, -(2**63) - 1, 2**70])
    def test_integer_beyond_int64(self, value: int) -> None:
        with pytest.raises(UnsupportedTypeError, match="64-bit range"):
            classify(value)

    def test_int64_bounds_accepted(self) -> None:
        assert classify(2**63 - 1) is Int64
        assert classify(-(2**63)) is Int64

    @pytest.mark.parametrize("value", [b"bytes", [1], {"a": 1}, object()])
    def test_unsupported(self, value: object) -> None:
        with pytest.raises(UnsupportedTypeError) as exc_info:
            classify(value)
        assert exc_info.value.value is value


# ---------------------------------------------------------------------------
# merge
# ---------------------------------------------------------------------------


class TestMerge:
    def test_null_keeps_running(self) -> None:
        assert merge(Int64, None) is Int64
        assert merge(None, None) is None

    def test_first_value_sets_running(self) -> None:
        assert merge(None, "a") is Utf8

    def test_int_into_float(self) -> None:
        assert merge(Float64, 3) is Float64

    def test_float_promotes_int(self) -> None:
        assert merge(Int64, 3.5) is Float64

    def test_conflict(self) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            merge(Int64, "a")
        assert exc_info.value.value == "a"
        assert exc_info.value.dtype is Int64


# ---------------------------------------------------------------------------
# infer_dtype
# ---------------------------------------------------------------------------


class TestInferDtype:
    def test_all_integers(self) -> None:
        assert infer_dtype([1, 2, 3]) is Int64

    def test_one_float_promotes(self) -> None:
        assert infer_dtype([1, 2, 3.0]) is Float64
        assert infer_dtype([1.0, 2, 3]) is Float64

    def test_nulls_are_transparent(self) -> None:
        assert infer_dtype([None, 1, None]) is Int64
        assert infer_dtype([None, "a"]) is Utf8

    def test_bool_does_not_mix_with_int(self) -> None:
        with pytest.raises(TypeMismatchError):
            infer_dtype([1, True])

    def test_string_and_integer(self) -> None:
        with pytest.raises(TypeMismatchError, match="mismatched types"):
            infer_dtype(["a", 1])

    def test_date_and_datetime_do_not_mix(self) -> None:
        with pytest.raises(TypeMismatchError):
            infer_dtype([datetime.date(2024, 1, 1), datetime.datetime(2024, 1, 1)])

    def test_all_nulls(self) -> None:
        with pytest.raises(EmptyTypeError):
            infer_dtype([None, None])

    def test_empty(self) -> None:
        with pytest.raises(EmptyTypeError):
            infer_dtype([])

    def test_accepts_generators(self) -> None:
        assert infer_dtype(x / 2 for x in range(3)) is Float64

    def test_first_conflict_wins(self) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            infer_dtype([1, 2.0, "a", True])
        assert exc_info.value.value == "a"
        assert exc_info.value.dtype is Float64
