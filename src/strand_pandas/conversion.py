"""Dtype mapping between Strand and Pandas types."""

from __future__ import annotations

from typing import Any

import pandas as pd
import pyarrow as pa

from strand import dtypes

# ---------------------------------------------------------------------------
# Strand → Pandas mapping (uses nullable extension types)
# ---------------------------------------------------------------------------

STRAND_TO_PANDAS: dict[type, Any] = {
    dtypes.Float64: pd.Float64Dtype(),
    dtypes.Int64: pd.Int64Dtype(),
    dtypes.Bool: pd.BooleanDtype(),
    dtypes.Utf8: pd.StringDtype(),
    dtypes.Date: pd.ArrowDtype(pa.date32()),
    dtypes.Datetime: pd.ArrowDtype(pa.timestamp("us")),
}

# ---------------------------------------------------------------------------
# Pandas → Strand mapping
# ---------------------------------------------------------------------------

PANDAS_TO_STRAND: dict[Any, type] = {
    pd.Float64Dtype(): dtypes.Float64,
    pd.Float32Dtype(): dtypes.Float64,
    pd.Int64Dtype(): dtypes.Int64,
    pd.Int32Dtype(): dtypes.Int64,
    pd.UInt64Dtype(): dtypes.Int64,
    pd.UInt32Dtype(): dtypes.Int64,
    pd.BooleanDtype(): dtypes.Bool,
    pd.ArrowDtype(pa.date32()): dtypes.Date,
    pd.ArrowDtype(pa.timestamp("us")): dtypes.Datetime,
}

# Plain NumPy results (``isna``, rolling windows) map by dtype kind.
_KIND_TO_STRAND: dict[str, type] = {
    "b": dtypes.Bool,
    "i": dtypes.Int64,
    "u": dtypes.Int64,
    "f": dtypes.Float64,
}


def _map_arrow_type(pa_type: pa.DataType) -> type | None:
    if pa.types.is_boolean(pa_type):
        return dtypes.Bool
    if pa.types.is_integer(pa_type):
        return dtypes.Int64
    if pa.types.is_floating(pa_type):
        return dtypes.Float64
    if pa.types.is_string(pa_type) or pa.types.is_large_string(pa_type):
        return dtypes.Utf8
    if pa.types.is_date(pa_type):
        return dtypes.Date
    if pa.types.is_timestamp(pa_type) and pa_type.tz is None:
        return dtypes.Datetime
    return None


def map_strand_dtype(strand_type: Any) -> Any:
    """Map a Strand dtype sentinel to a Pandas dtype."""
    if strand_type in STRAND_TO_PANDAS:
        return STRAND_TO_PANDAS[strand_type]
    msg = f"Unsupported Strand dtype: {strand_type}"
    raise TypeError(msg)


def map_pandas_dtype(pd_dtype: Any) -> type:
    """Map a Pandas dtype to a Strand dtype class.

    Handles:
    - Nullable extension types (pd.Int64Dtype() → Int64)
    - Any string storage (pd.StringDtype("python"), pd.StringDtype("pyarrow"))
    - Arrow-backed types (bool[pyarrow] from temporal comparisons → Bool)
    - NumPy dtypes by kind (float64 → Float64)
    """
    if pd_dtype in PANDAS_TO_STRAND:
        return PANDAS_TO_STRAND[pd_dtype]
    if isinstance(pd_dtype, pd.StringDtype):
        return dtypes.Utf8
    if isinstance(pd_dtype, pd.ArrowDtype):
        mapped = _map_arrow_type(pd_dtype.pyarrow_dtype)
        if mapped is not None:
            return mapped
    elif getattr(pd_dtype, "kind", None) in _KIND_TO_STRAND:
        return _KIND_TO_STRAND[pd_dtype.kind]
    msg = f"Unsupported Pandas dtype: {pd_dtype}"
    raise TypeError(msg)
