"""Strand Polars backend."""

from strand_polars.adapter import PolarsBackend
from strand_polars.conversion import map_polars_dtype, map_strand_dtype

__all__ = [
    "PolarsBackend",
    "map_strand_dtype",
    "map_polars_dtype",
]
