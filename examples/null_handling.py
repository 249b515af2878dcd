"""Null handling: is_null, fill_missing, and nulls inside rolling windows.

Demonstrates how Strand treats nulls the same way on every backend.
"""

from __future__ import annotations

import strand
from strand import DtypeIneligibleError

# ---------------------------------------------------------------------------
# Create data with nulls
# ---------------------------------------------------------------------------

ages = strand.from_list([30, None, 35, None, 40])
print("Original ages:")
print(ages)
print(f"Null mask: {ages.is_null().to_list()}")
print()

# ---------------------------------------------------------------------------
# fill_missing with every strategy
# ---------------------------------------------------------------------------

for strategy in ("forward", "backward", "min", "max", "mean"):
    filled = ages.fill_missing(strategy)
    print(f"fill_missing({strategy!r}) -> {filled.dtype.__name__}: {filled.to_list()}")
print()

# ---------------------------------------------------------------------------
# Strategies are dtype-gated: "mean" makes no sense for strings
# ---------------------------------------------------------------------------

names = strand.from_list(["Alice", None, "Charlie"])
print(f"Forward-filled names: {names.fill_missing('forward').to_list()}")
try:
    names.fill_missing("mean")
except DtypeIneligibleError as exc:
    print(f"Rejected: {exc}")
print()

# ---------------------------------------------------------------------------
# Rolling windows: skip nulls, or let them poison the window
# ---------------------------------------------------------------------------

readings = strand.from_list([1.0, None, 3.0, 4.0, 5.0])
print(f"rolling_sum(2):                  {readings.rolling_sum(2).to_list()}")
print(f"rolling_sum(2, ignore_nil=False): {readings.rolling_sum(2, ignore_nil=False).to_list()}")
print()

# ---------------------------------------------------------------------------
# Same results on Pandas
# ---------------------------------------------------------------------------

with strand.using_backend("pandas"):
    pandas_ages = strand.from_list([30, None, 35, None, 40])
print(f"Pandas forward fill: {pandas_ages.fill_missing('forward').to_list()}")
print(f"Pandas native dtype: {pandas_ages.to_native().dtype}")
