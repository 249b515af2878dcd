"""Benchmark: Strand dispatch overhead across backends.

Measures the cost of Strand's dtype gating and wrapping compared to calling
each backend directly. Covers Polars and Pandas.

    python benchmarks/bench_backends.py
"""

from __future__ import annotations

import timeit
from dataclasses import dataclass

import pandas as pd
import polars as pl

from strand import Series
from strand_pandas import PandasBackend
from strand_polars import PolarsBackend

# ---------------------------------------------------------------------------
# Data helpers
# ---------------------------------------------------------------------------


def _base_data(n: int) -> list[float]:
    return [50.0 + (i % 50) for i in range(n)]


def make_polars(n: int) -> tuple[pl.Series, Series]:
    data = _base_data(n)
    return pl.Series(values=data, dtype=pl.Float64), Series.from_list(data, backend=PolarsBackend())


def make_pandas(n: int) -> tuple[pd.Series, Series]:
    data = _base_data(n)
    return pd.Series(data, dtype=pd.Float64Dtype()), Series.from_list(data, backend=PandasBackend())


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass
class BenchResult:
    label: str
    raw_us: float
    strand_us: float

    @property
    def overhead_pct(self) -> float:
        return ((self.strand_us - self.raw_us) / self.raw_us) * 100 if self.raw_us > 0 else 0.0


def _time(label: str, raw, wrapped, iters: int) -> BenchResult:
    t_raw = timeit.timeit(raw, number=iters)
    t_strand = timeit.timeit(wrapped, number=iters)
    return BenchResult(label, t_raw / iters * 1e6, t_strand / iters * 1e6)


# ---------------------------------------------------------------------------
# Polars benchmarks
# ---------------------------------------------------------------------------


def bench_polars(n: int, iters: int) -> list[BenchResult]:
    raw, typed = make_polars(n)
    return [
        _time(
            f"Polars filter, {n:,} rows",
            lambda: raw.filter(raw > 70),
            lambda: typed.filter(typed > 70),
            iters,
        ),
        _time(
            f"Polars rolling_sum, {n:,} rows",
            lambda: raw.rolling_sum(4),
            lambda: typed.rolling_sum(4, ignore_nil=False),
            iters,
        ),
        _time(f"Polars sum, {n:,} rows", raw.sum, typed.sum, iters),
    ]


# ---------------------------------------------------------------------------
# Pandas benchmarks
# ---------------------------------------------------------------------------


def bench_pandas(n: int, iters: int) -> list[BenchResult]:
    raw, typed = make_pandas(n)
    return [
        _time(
            f"Pandas filter, {n:,} rows",
            lambda: raw[raw > 70].reset_index(drop=True),
            lambda: typed.filter(typed > 70),
            iters,
        ),
        _time(
            f"Pandas rolling_sum, {n:,} rows",
            lambda: raw.rolling(4).sum(),
            lambda: typed.rolling_sum(4, ignore_nil=False),
            iters,
        ),
        _time(f"Pandas sum, {n:,} rows", raw.sum, typed.sum, iters),
    ]


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    sizes = [100, 10_000, 1_000_000]

    print()
    print(f"{'Benchmark':<45} {'Raw (us)':>10} {'Strand (us)':>12} {'Overhead':>10}")
    print("-" * 81)

    for n in sizes:
        iters = max(20, 500 // (n // 100 + 1))

        for results in [bench_polars(n, iters), bench_pandas(n, iters)]:
            for r in results:
                overhead = f"+{r.overhead_pct:.0f}%"
                print(f"{r.label:<45} {r.raw_us:>10.0f} {r.strand_us:>12.0f} {overhead:>10}")

        print()


if __name__ == "__main__":
    main()
