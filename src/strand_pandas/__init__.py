"""Strand Pandas backend."""

from strand_pandas.adapter import PandasBackend
from strand_pandas.conversion import map_pandas_dtype, map_strand_dtype

__all__ = [
    "PandasBackend",
    "map_strand_dtype",
    "map_pandas_dtype",
]
