"""PandasBackend: executes Strand series operations on ``pd.Series``.

Every handle this backend returns carries a fresh ``RangeIndex`` and one of
the nullable dtypes from :mod:`strand_pandas.conversion`, so positional and
element-wise operations never depend on index alignment.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np
import pandas as pd
import pyarrow as pa

from strand import dtypes
from strand_pandas.conversion import map_pandas_dtype, map_strand_dtype

# ---------------------------------------------------------------------------
# Binary operator dispatch
# ---------------------------------------------------------------------------

_BINOP_MAP: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "**": operator.pow,
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
}

# Window reducers over a raw float window (NaN marks a null).
_WEIGHTED_REDUCERS: dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "sum": lambda x, w: float(np.sum(x * w)),
    "mean": lambda x, w: float(np.sum(x * w) / np.sum(w)),
    "min": lambda x, w: float(np.min(x * w)),
    "max": lambda x, w: float(np.max(x * w)),
}


def _canonical(source: pd.Series) -> pd.Series:
    """Cast *source* to the canonical nullable dtype of its Strand dtype."""
    target = map_strand_dtype(map_pandas_dtype(source.dtype))
    if source.dtype == target:
        return source
    return source.astype(target)


def _positional(source: pd.Series) -> pd.Series:
    return source.reset_index(drop=True)


def _scalar(value: Any) -> Any:
    """Convert a pandas/NumPy scalar to the equivalent Python scalar."""
    if value is None or value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.generic):
        return value.item()
    return value


def _non_null_count(source: pd.Series) -> int:
    return int(source.notna().sum())


# ---------------------------------------------------------------------------
# PandasBackend
# ---------------------------------------------------------------------------


class PandasBackend:
    """Strand series backend for Pandas."""

    def __repr__(self) -> str:
        return "PandasBackend()"

    # --- Construction / conversion ---

    def from_list(self, values: Sequence[Any], dtype: type) -> pd.Series:
        if dtype is dtypes.Float64:
            # Only None is null; NaN stays a float value, as on Polars.
            mask = np.array([v is None for v in values], dtype=bool)
            data = np.array([0.0 if v is None else float(v) for v in values], dtype="float64")
            return pd.Series(pd.arrays.FloatingArray(data, mask))
        return pd.Series(list(values), dtype=map_strand_dtype(dtype))

    def to_list(self, source: pd.Series) -> list[Any]:
        # Arrow round-trips nulls, dates and timestamps to plain Python values.
        return pa.array(source.array).to_pylist()

    def cast(self, source: pd.Series, dtype: type) -> pd.Series:
        return source.astype(map_strand_dtype(dtype))

    # --- Introspection ---

    def length(self, source: pd.Series) -> int:
        return len(source)

    def dtype(self, source: pd.Series) -> type:
        return map_pandas_dtype(source.dtype)

    # --- Selection ---

    def get(self, source: pd.Series, idx: int) -> Any:
        return self.to_list(source.iloc[idx : idx + 1])[0]

    def slice(self, source: pd.Series, offset: int, length: int) -> pd.Series:
        if offset < 0:
            offset = max(len(source) + offset, 0)
        return _positional(source.iloc[offset : offset + length])

    def head(self, source: pd.Series, n: int) -> pd.Series:
        return _positional(source.head(n))

    def tail(self, source: pd.Series, n: int) -> pd.Series:
        return _positional(source.tail(n))

    def take(self, source: pd.Series, indices: Sequence[int]) -> pd.Series:
        return _positional(source.iloc[list(indices)])

    def take_every(self, source: pd.Series, every_n: int) -> pd.Series:
        return _positional(source.iloc[::every_n])

    def filter(self, source: pd.Series, mask: pd.Series) -> pd.Series:
        keep = mask.fillna(False).to_numpy(dtype=bool)
        return _positional(source[keep])

    # --- Arithmetic / comparison ---

    def binary_op(self, source: pd.Series, op: str, other: Any) -> pd.Series:
        func = _BINOP_MAP.get(op)
        if func is None:
            msg = f"Unsupported binary operator: {op}"
            raise ValueError(msg)
        return _canonical(func(source, other))

    def pow(self, source: pd.Series, exponent: float) -> pd.Series:
        return _canonical(source**exponent)

    def binary_and(self, source: pd.Series, other: pd.Series) -> pd.Series:
        return _canonical(source & other)

    def binary_or(self, source: pd.Series, other: pd.Series) -> pd.Series:
        return _canonical(source | other)

    def all_equal(self, source: pd.Series, other: pd.Series) -> bool:
        return bool(source.equals(other))

    # --- Aggregation ---

    def sum(self, source: pd.Series) -> Any:
        if _non_null_count(source) == 0:
            return None
        return _scalar(source.sum())

    def min(self, source: pd.Series) -> Any:
        return _scalar(source.min())

    def max(self, source: pd.Series) -> Any:
        return _scalar(source.max())

    def mean(self, source: pd.Series) -> float | None:
        return _scalar(source.mean())

    def median(self, source: pd.Series) -> float | None:
        return _scalar(source.median())

    def var(self, source: pd.Series) -> float | None:
        if _non_null_count(source) < 2:
            return None
        return _scalar(source.var(ddof=1))

    def std(self, source: pd.Series) -> float | None:
        if _non_null_count(source) < 2:
            return None
        return _scalar(source.std(ddof=1))

    def quantile(self, source: pd.Series, quantile: float) -> Any:
        # Nearest rank with ties rounded away from zero, as Polars does.
        values = self.to_list(source.dropna().sort_values())
        if not values:
            return None
        return values[math.floor(quantile * (len(values) - 1) + 0.5)]

    # --- Cumulative ---

    def _accumulate(
        self,
        source: pd.Series,
        pick: Callable[[Any, Any], Any],
        reverse: bool,
    ) -> pd.Series:
        values = self.to_list(source)
        if reverse:
            values.reverse()
        out: list[Any] = []
        running = None
        for value in values:
            if value is None:
                out.append(None)
                continue
            running = value if running is None else pick(running, value)
            out.append(running)
        if reverse:
            out.reverse()
        return pd.Series(out, dtype=source.dtype)

    def _cumulative(self, source: pd.Series, name: str, reverse: bool) -> pd.Series:
        if reverse:
            return _positional(getattr(source.iloc[::-1], name)().iloc[::-1])
        return getattr(source, name)()

    def cum_max(self, source: pd.Series, reverse: bool) -> pd.Series:
        if map_pandas_dtype(source.dtype) in (dtypes.Date, dtypes.Datetime):
            return self._accumulate(source, max, reverse)
        return self._cumulative(source, "cummax", reverse)

    def cum_min(self, source: pd.Series, reverse: bool) -> pd.Series:
        if map_pandas_dtype(source.dtype) in (dtypes.Date, dtypes.Datetime):
            return self._accumulate(source, min, reverse)
        return self._cumulative(source, "cummin", reverse)

    def cum_sum(self, source: pd.Series, reverse: bool) -> pd.Series:
        if source.dtype == pd.BooleanDtype():
            source = source.astype(pd.Int64Dtype())
        return self._cumulative(source, "cumsum", reverse)

    # --- Windowed ---

    def _rolling(
        self,
        source: pd.Series,
        name: str,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pd.Series:
        values = source.astype("float64")
        window = values.rolling(window_size, min_periods=1 if ignore_nil else window_size)
        if weights is None:
            result = getattr(window, name)()
        else:
            reducer = _WEIGHTED_REDUCERS[name]
            w = np.asarray(weights, dtype="float64")

            def apply(x: np.ndarray) -> float:
                # Partial windows are blanked below; only full windows matter.
                if len(x) < window_size:
                    return np.nan
                present = ~np.isnan(x)
                if not present.any():
                    return np.nan
                return reducer(x[present], w[present])

            result = window.apply(apply, raw=True)
        result.iloc[: window_size - 1] = np.nan
        result = result.astype(pd.Float64Dtype())
        keeps_int = (
            map_pandas_dtype(source.dtype) is dtypes.Int64
            and weights is None
            and name != "mean"
        )
        if keeps_int:
            result = result.astype(pd.Int64Dtype())
        return _positional(result)

    def rolling_sum(
        self,
        source: pd.Series,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pd.Series:
        return self._rolling(source, "sum", window_size, weights, ignore_nil)

    def rolling_mean(
        self,
        source: pd.Series,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pd.Series:
        return self._rolling(source, "mean", window_size, weights, ignore_nil)

    def rolling_min(
        self,
        source: pd.Series,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pd.Series:
        return self._rolling(source, "min", window_size, weights, ignore_nil)

    def rolling_max(
        self,
        source: pd.Series,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pd.Series:
        return self._rolling(source, "max", window_size, weights, ignore_nil)

    # --- Missing values ---

    def is_null(self, source: pd.Series) -> pd.Series:
        return _canonical(source.isna())

    def is_not_null(self, source: pd.Series) -> pd.Series:
        return _canonical(source.notna())

    def fill_missing(self, source: pd.Series, strategy: str) -> pd.Series:
        if strategy == "forward":
            return source.ffill()
        if strategy == "backward":
            return source.bfill()
        if strategy == "mean":
            value = source.mean()
            if source.dtype == pd.Int64Dtype():
                source = source.astype(pd.Float64Dtype())
        elif strategy == "max":
            value = source.max()
        elif strategy == "min":
            value = source.min()
        else:
            msg = f"Unsupported fill strategy: {strategy}"
            raise ValueError(msg)
        if _scalar(value) is None:
            return source
        return source.fillna(value)

    # --- Sampling ---

    def sample(
        self, source: pd.Series, n: int, with_replacement: bool, seed: int | None
    ) -> pd.Series:
        return _positional(source.sample(n=n, replace=with_replacement, random_state=seed))

    # --- Ordering ---

    def _sorted(self, source: pd.Series, reverse: bool) -> pd.Series:
        return source.sort_values(ascending=not reverse, na_position="first", kind="stable")

    def sort(self, source: pd.Series, reverse: bool) -> pd.Series:
        return _positional(self._sorted(source, reverse))

    def argsort(self, source: pd.Series, reverse: bool) -> pd.Series:
        order = self._sorted(source, reverse).index.to_numpy()
        return pd.Series(order, dtype=pd.Int64Dtype())

    def reverse(self, source: pd.Series) -> pd.Series:
        return _positional(source.iloc[::-1])

    # --- Set-like ---

    def distinct(self, source: pd.Series) -> pd.Series:
        return _positional(source.drop_duplicates())

    def n_distinct(self, source: pd.Series) -> int:
        return int(source.nunique(dropna=False))

    def count(self, source: pd.Series) -> tuple[pd.Series, pd.Series]:
        counts = source.value_counts(sort=True, dropna=False)
        values = pd.Series(counts.index.array, dtype=source.dtype)
        return values, pd.Series(counts.to_numpy(), dtype=pd.Int64Dtype())

    # --- Peaks ---

    def peaks(self, source: pd.Series, max_or_min: str) -> pd.Series:
        n = len(source)
        if n < 2:
            return pd.Series([False] * n, dtype=pd.BooleanDtype())
        compare = operator.gt if max_or_min == "max" else operator.lt
        # A missing neighbour (boundary or null) does not disqualify a peak.
        left = _canonical(compare(source, source.shift(1))).fillna(True)
        right = _canonical(compare(source, source.shift(-1))).fillna(True)
        return left & right & _canonical(source.notna())
