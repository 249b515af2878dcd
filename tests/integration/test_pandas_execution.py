"""Integration tests for Series execution on the Pandas backend."""

from __future__ import annotations

import datetime

import numpy as np
import pandas as pd
import pyarrow as pa
import pytest

from strand import Bool, Date, Datetime, Float64, Int64, Series, Utf8, using_backend
from strand_pandas import PandasBackend, map_pandas_dtype, map_strand_dtype

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _series(values: list) -> Series:
    return Series.from_list(values, backend=PandasBackend())


# ---------------------------------------------------------------------------
# Dtype mapping
# ---------------------------------------------------------------------------


class TestDtypeMapping:
    @pytest.mark.parametrize(
        ("strand_dtype", "pandas_dtype"),
        [
            (Float64, pd.Float64Dtype()),
            (Int64, pd.Int64Dtype()),
            (Bool, pd.BooleanDtype()),
            (Utf8, pd.StringDtype()),
            (Date, pd.ArrowDtype(pa.date32())),
            (Datetime, pd.ArrowDtype(pa.timestamp("us"))),
        ],
    )
    def test_round_trip(self, strand_dtype: type, pandas_dtype: object) -> None:
        assert map_strand_dtype(strand_dtype) == pandas_dtype
        assert map_pandas_dtype(pandas_dtype) is strand_dtype

    @pytest.mark.parametrize(
        ("pandas_dtype", "expected"),
        [
            (np.dtype("bool"), Bool),
            (np.dtype("int32"), Int64),
            (np.dtype("float64"), Float64),
            (pd.ArrowDtype(pa.bool_()), Bool),
            (pd.ArrowDtype(pa.int32()), Int64),
            (pd.ArrowDtype(pa.large_string()), Utf8),
            (pd.ArrowDtype(pa.timestamp("ns")), Datetime),
            (pd.StringDtype("pyarrow"), Utf8),
        ],
    )
    def test_intermediate_dtypes(self, pandas_dtype: object, expected: type) -> None:
        assert map_pandas_dtype(pandas_dtype) is expected

    def test_unsupported(self) -> None:
        with pytest.raises(TypeError, match="Unsupported Pandas dtype"):
            map_pandas_dtype(np.dtype("complex128"))
        with pytest.raises(TypeError, match="Unsupported Pandas dtype"):
            map_pandas_dtype(pd.ArrowDtype(pa.timestamp("us", tz="UTC")))
        with pytest.raises(TypeError, match="Unsupported Strand dtype"):
            map_strand_dtype(str)


# ---------------------------------------------------------------------------
# Native handles
# ---------------------------------------------------------------------------


class TestNative:
    def test_handle_is_nullable_pandas_series(self) -> None:
        native = _series([1, None, 3]).to_native()
        assert isinstance(native, pd.Series)
        assert native.dtype == pd.Int64Dtype()
        assert native.isna().tolist() == [False, True, False]

    def test_selection_resets_index(self) -> None:
        s = _series([5, 1, 6, 2])
        native = s[s > 1].reverse().to_native()
        assert native.index.tolist() == [0, 1, 2]

    def test_comparison_is_nullable_boolean(self) -> None:
        s = _series([datetime.date(2024, 1, 1), None])
        native = (s == datetime.date(2024, 1, 1)).to_native()
        assert native.dtype == pd.BooleanDtype()

    def test_is_null_is_nullable_boolean(self) -> None:
        assert _series([1.0, None]).is_null().to_native().dtype == pd.BooleanDtype()

    def test_using_backend_by_name(self) -> None:
        with using_backend("pandas"):
            s = Series.from_list(["a", "b"])
        assert isinstance(s.backend, PandasBackend)
        assert s.to_native().dtype == pd.StringDtype()

    def test_values_are_python_scalars(self) -> None:
        s = _series([1, 2])
        assert type(s.get(0)) is int
        assert type(s.sum()) is int
        assert type(s.max()) is int
        assert type(_series([1.5]).mean()) is float

    def test_datetime_scalars(self) -> None:
        moment = datetime.datetime(2024, 1, 1, 8)
        s = _series([moment, None])
        assert s.max() == moment
        assert type(s.max()) is datetime.datetime


# ---------------------------------------------------------------------------
# Backend-level behaviour
# ---------------------------------------------------------------------------


class TestBackendMethods:
    def test_unknown_operator(self) -> None:
        backend = PandasBackend()
        with pytest.raises(ValueError, match="Unsupported binary operator"):
            backend.binary_op(pd.Series([1], dtype="Int64"), "%", 2)

    def test_unknown_fill_strategy(self) -> None:
        backend = PandasBackend()
        with pytest.raises(ValueError, match="Unsupported fill strategy"):
            backend.fill_missing(pd.Series([1, None], dtype="Int64"), "zero")

    def test_fill_max_on_all_nulls_is_noop(self) -> None:
        backend = PandasBackend()
        source = pd.Series([None, None], dtype="Int64")
        assert backend.to_list(backend.fill_missing(source, "max")) == [None, None]

    def test_quantile_of_all_nulls(self) -> None:
        backend = PandasBackend()
        assert backend.quantile(pd.Series([None], dtype="Float64"), 0.5) is None

    def test_weighted_rolling_skips_nulls(self) -> None:
        s = _series([1.0, None, 3.0, 4.0])
        values = s.rolling_sum(2, weights=[1.0, 2.0]).to_list()
        assert values == [None, 1.0, 6.0, 11.0]

    def test_weighted_rolling_all_null_window(self) -> None:
        s = _series([1.0, None, None, 4.0])
        assert s.rolling_sum(2, weights=[1.0, 1.0]).to_list() == [None, 1.0, None, 4.0]

    def test_rolling_mean_is_float(self) -> None:
        assert _series([1, 2, 3]).rolling_mean(2).to_native().dtype == pd.Float64Dtype()

    def test_count_includes_null(self) -> None:
        values, counts = _series([1, None, 1]).count()
        assert values.to_list() == [1, None]
        assert counts.to_list() == [2, 1]

    def test_distinct_keeps_dtype(self) -> None:
        s = _series([datetime.date(2024, 1, 1)] * 2)
        assert s.distinct().to_native().dtype == pd.ArrowDtype(pa.date32())
