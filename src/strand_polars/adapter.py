"""PolarsBackend: executes Strand series operations on ``pl.Series``."""

from __future__ import annotations

import inspect
import operator
from collections.abc import Sequence
from typing import Any

import polars as pl

from strand_polars.conversion import map_polars_dtype, map_strand_dtype

# ---------------------------------------------------------------------------
# Binary operator dispatch
# ---------------------------------------------------------------------------

_BINOP_MAP: dict[str, str] = {
    "+": "__add__",
    "-": "__sub__",
    "*": "__mul__",
    "/": "__truediv__",
    "**": "__pow__",
    ">": "__gt__",
    "<": "__lt__",
    ">=": "__ge__",
    "<=": "__le__",
    "==": "__eq__",
    "!=": "__ne__",
}

# Polars 1.21 renamed ``min_periods`` to ``min_samples`` on the rolling methods.
_MIN_SAMPLES = (
    "min_samples"
    if "min_samples" in inspect.signature(pl.Series.rolling_sum).parameters
    else "min_periods"
)


def _is_all_null(source: pl.Series) -> bool:
    return source.null_count() == source.len()


# ---------------------------------------------------------------------------
# PolarsBackend
# ---------------------------------------------------------------------------


class PolarsBackend:
    """Strand series backend for Polars."""

    def __repr__(self) -> str:
        return "PolarsBackend()"

    # --- Construction / conversion ---

    def from_list(self, values: Sequence[Any], dtype: type) -> pl.Series:
        return pl.Series(values=list(values), dtype=map_strand_dtype(dtype), strict=False)

    def to_list(self, source: pl.Series) -> list[Any]:
        return source.to_list()

    def cast(self, source: pl.Series, dtype: type) -> pl.Series:
        return source.cast(map_strand_dtype(dtype))

    # --- Introspection ---

    def length(self, source: pl.Series) -> int:
        return source.len()

    def dtype(self, source: pl.Series) -> type:
        return map_polars_dtype(source.dtype)

    # --- Selection ---

    def get(self, source: pl.Series, idx: int) -> Any:
        return source[idx]

    def slice(self, source: pl.Series, offset: int, length: int) -> pl.Series:
        return source.slice(offset, length)

    def head(self, source: pl.Series, n: int) -> pl.Series:
        return source.head(n)

    def tail(self, source: pl.Series, n: int) -> pl.Series:
        return source.tail(n)

    def take(self, source: pl.Series, indices: Sequence[int]) -> pl.Series:
        if not indices:
            return source.clear()
        return source.gather(list(indices))

    def take_every(self, source: pl.Series, every_n: int) -> pl.Series:
        return source.gather_every(every_n)

    def filter(self, source: pl.Series, mask: pl.Series) -> pl.Series:
        return source.filter(mask)

    # --- Arithmetic / comparison ---

    def binary_op(self, source: pl.Series, op: str, other: Any) -> pl.Series:
        method = _BINOP_MAP.get(op)
        if method is None:
            msg = f"Unsupported binary operator: {op}"
            raise ValueError(msg)
        return getattr(source, method)(other)

    def pow(self, source: pl.Series, exponent: float) -> pl.Series:
        return source.pow(exponent)

    def binary_and(self, source: pl.Series, other: pl.Series) -> pl.Series:
        return source & other

    def binary_or(self, source: pl.Series, other: pl.Series) -> pl.Series:
        return source | other

    def all_equal(self, source: pl.Series, other: pl.Series) -> bool:
        return source.equals(other)

    # --- Aggregation ---

    def sum(self, source: pl.Series) -> Any:
        # Polars sums an all-null series to 0.
        if _is_all_null(source):
            return None
        return source.sum()

    def min(self, source: pl.Series) -> Any:
        return source.min()

    def max(self, source: pl.Series) -> Any:
        return source.max()

    def mean(self, source: pl.Series) -> float | None:
        return source.mean()

    def median(self, source: pl.Series) -> float | None:
        return source.median()

    def var(self, source: pl.Series) -> float | None:
        if source.len() - source.null_count() < 2:
            return None
        return source.var(ddof=1)

    def std(self, source: pl.Series) -> float | None:
        if source.len() - source.null_count() < 2:
            return None
        return source.std(ddof=1)

    def quantile(self, source: pl.Series, quantile: float) -> Any:
        if _is_all_null(source):
            return None
        if source.dtype.is_temporal():
            physical = source.to_physical()
            value = physical.quantile(quantile, interpolation="nearest")
            return pl.Series(values=[int(value)]).cast(physical.dtype).cast(source.dtype)[0]
        value = source.quantile(quantile, interpolation="nearest")
        if source.dtype.is_integer():
            return int(value)
        return value

    # --- Cumulative ---

    def _accumulate(self, source: pl.Series, name: str, reverse: bool) -> pl.Series:
        if source.dtype.is_temporal():
            physical = getattr(source.to_physical(), name)(reverse=reverse)
            return physical.cast(source.dtype)
        return getattr(source, name)(reverse=reverse)

    def cum_max(self, source: pl.Series, reverse: bool) -> pl.Series:
        return self._accumulate(source, "cum_max", reverse)

    def cum_min(self, source: pl.Series, reverse: bool) -> pl.Series:
        return self._accumulate(source, "cum_min", reverse)

    def cum_sum(self, source: pl.Series, reverse: bool) -> pl.Series:
        if source.dtype == pl.Boolean:
            source = source.cast(pl.Int64)
        return source.cum_sum(reverse=reverse)

    # --- Windowed ---

    def _rolling(
        self,
        source: pl.Series,
        name: str,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pl.Series:
        kwargs: dict[str, Any] = {"window_size": window_size, "weights": weights}
        if ignore_nil:
            kwargs[_MIN_SAMPLES] = 1
        result = getattr(source, name)(**kwargs)
        if not ignore_nil:
            return result
        # min_samples=1 also fills the warm-up positions; blank them again.
        warmup = min(window_size - 1, result.len())
        blank = pl.Series(values=[None] * warmup, dtype=result.dtype)
        return pl.concat([blank, result.slice(warmup)])

    def rolling_sum(
        self,
        source: pl.Series,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pl.Series:
        return self._rolling(source, "rolling_sum", window_size, weights, ignore_nil)

    def rolling_mean(
        self,
        source: pl.Series,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pl.Series:
        return self._rolling(source, "rolling_mean", window_size, weights, ignore_nil)

    def rolling_min(
        self,
        source: pl.Series,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pl.Series:
        return self._rolling(source, "rolling_min", window_size, weights, ignore_nil)

    def rolling_max(
        self,
        source: pl.Series,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> pl.Series:
        return self._rolling(source, "rolling_max", window_size, weights, ignore_nil)

    # --- Missing values ---

    def is_null(self, source: pl.Series) -> pl.Series:
        return source.is_null()

    def is_not_null(self, source: pl.Series) -> pl.Series:
        return source.is_not_null()

    def fill_missing(self, source: pl.Series, strategy: str) -> pl.Series:
        if strategy in ("forward", "backward"):
            return source.fill_null(strategy=strategy)
        if strategy == "mean":
            value = source.mean()
            if source.dtype.is_integer():
                source = source.cast(pl.Float64)
        elif strategy == "max":
            value = source.max()
        elif strategy == "min":
            value = source.min()
        else:
            msg = f"Unsupported fill strategy: {strategy}"
            raise ValueError(msg)
        if value is None:
            return source
        return source.fill_null(value)

    # --- Sampling ---

    def sample(
        self, source: pl.Series, n: int, with_replacement: bool, seed: int | None
    ) -> pl.Series:
        return source.sample(n=n, with_replacement=with_replacement, seed=seed)

    # --- Ordering ---

    def sort(self, source: pl.Series, reverse: bool) -> pl.Series:
        return source.sort(descending=reverse, nulls_last=False)

    def argsort(self, source: pl.Series, reverse: bool) -> pl.Series:
        return source.arg_sort(descending=reverse, nulls_last=False).cast(pl.Int64)

    def reverse(self, source: pl.Series) -> pl.Series:
        return source.reverse()

    # --- Set-like ---

    def distinct(self, source: pl.Series) -> pl.Series:
        return source.unique()

    def n_distinct(self, source: pl.Series) -> int:
        return source.n_unique()

    def count(self, source: pl.Series) -> tuple[pl.Series, pl.Series]:
        counts = source.value_counts(sort=True)
        return counts.to_series(0), counts.to_series(1).cast(pl.Int64)

    # --- Peaks ---

    def peaks(self, source: pl.Series, max_or_min: str) -> pl.Series:
        n = source.len()
        if n < 2:
            return pl.Series(values=[False] * n, dtype=pl.Boolean)
        compare = operator.gt if max_or_min == "max" else operator.lt
        # A missing neighbour (boundary or null) does not disqualify a peak.
        left = compare(source, source.shift(1)).fill_null(True)
        right = compare(source, source.shift(-1)).fill_null(True)
        return left & right & source.is_not_null()
