"""Dtype mapping between Strand and Polars types."""

from __future__ import annotations

from typing import Any

import polars as pl

from strand import dtypes

# ---------------------------------------------------------------------------
# Strand → Polars mapping
# ---------------------------------------------------------------------------

STRAND_TO_POLARS: dict[type, pl.DataType] = {
    dtypes.Float64: pl.Float64(),
    dtypes.Int64: pl.Int64(),
    dtypes.Bool: pl.Boolean(),
    dtypes.Utf8: pl.String(),
    dtypes.Date: pl.Date(),
    dtypes.Datetime: pl.Datetime("us"),
}

# ---------------------------------------------------------------------------
# Polars → Strand mapping (keyed by Polars DataType class, not instance)
#
# Narrower integer and float types show up as intermediate results of some
# Polars kernels (e.g. UInt32 counts); they read back as the 64-bit dtype.
# ---------------------------------------------------------------------------

POLARS_TO_STRAND: dict[type[pl.DataType], type] = {
    pl.Boolean: dtypes.Bool,
    pl.UInt8: dtypes.Int64,
    pl.UInt16: dtypes.Int64,
    pl.UInt32: dtypes.Int64,
    pl.UInt64: dtypes.Int64,
    pl.Int8: dtypes.Int64,
    pl.Int16: dtypes.Int64,
    pl.Int32: dtypes.Int64,
    pl.Int64: dtypes.Int64,
    pl.Float32: dtypes.Float64,
    pl.Float64: dtypes.Float64,
    pl.String: dtypes.Utf8,
    pl.Utf8: dtypes.Utf8,
    pl.Date: dtypes.Date,
    pl.Datetime: dtypes.Datetime,
}


def map_strand_dtype(strand_type: Any) -> pl.DataType:
    """Map a Strand dtype sentinel to a Polars DataType."""
    if strand_type in STRAND_TO_POLARS:
        return STRAND_TO_POLARS[strand_type]
    msg = f"Unsupported Strand dtype: {strand_type}"
    raise TypeError(msg)


def map_polars_dtype(pl_dtype: pl.DataType) -> type:
    """Map a Polars DataType instance to a Strand dtype class."""
    dtype_cls = type(pl_dtype)
    if dtype_cls in POLARS_TO_STRAND:
        return POLARS_TO_STRAND[dtype_cls]
    msg = f"Unsupported Polars dtype: {pl_dtype}"
    raise TypeError(msg)
