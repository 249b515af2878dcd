"""Basic usage: construction, inference, selection, arithmetic and aggregation.

    python examples/basic_usage.py
"""

from __future__ import annotations

import datetime

import numpy as np

import strand
from strand import DtypeMismatchError, Series, TypeMismatchError

# ---------------------------------------------------------------------------
# Construction and dtype inference
# ---------------------------------------------------------------------------

scores = strand.from_list([85, 92, 78, 95, 88])
print(f"scores: {scores.dtype.__name__} {scores.to_list()}")

mixed = strand.from_list([1, 2.5, None])
print(f"ints and floats promote: {mixed.dtype.__name__} {mixed.to_list()}")

try:
    strand.from_list(["a", 1])
except TypeMismatchError as exc:
    print(f"Rejected: {exc}")
print()

# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

print(f"last score: {scores[-1]}")
print(f"every other: {scores.take_every(2).to_list()}")
print(f"above 85: {scores[scores > 85].to_list()}")
removed, rest = scores.pop(0)
print(f"pop(0): removed {removed}, remaining {rest.to_list()}")
print()

# ---------------------------------------------------------------------------
# Arithmetic follows the promotion lattice
# ---------------------------------------------------------------------------

weights = strand.from_list([0.5, 1.0, 1.0, 1.5, 1.0])
weighted = scores * weights
print(f"int * float -> {weighted.dtype.__name__}: {weighted.to_list()}")

labels = strand.from_list(["a", "b", "c", "d", "e"])
try:
    scores + labels
except DtypeMismatchError as exc:
    print(f"Rejected: {exc}")
print()

# ---------------------------------------------------------------------------
# Aggregation, windows and extrema
# ---------------------------------------------------------------------------

print(f"sum={scores.sum()} mean={scores.mean()} std={scores.std():.2f}")
print(f"median={scores.median()} p90={scores.quantile(0.9)}")
print(f"rolling mean (3): {scores.rolling_mean(3).to_list()}")
print(f"peaks: {scores.peaks().to_list()}")

values, counts = strand.from_list(["x", "y", "x", "x"]).count()
print(f"counts: {dict(zip(values.to_list(), counts.to_list()))}")
print()

# ---------------------------------------------------------------------------
# Temporal data
# ---------------------------------------------------------------------------

days = strand.from_list([datetime.date(2024, 1, d) for d in (5, 1, 3)])
print(f"dates sorted: {days.sort().to_list()}")
print(f"after Jan 2: {(days > datetime.date(2024, 1, 2)).to_list()}")
print()

# ---------------------------------------------------------------------------
# Tensors
# ---------------------------------------------------------------------------

from_numpy = Series.from_tensor(np.arange(6, dtype="int32").reshape(2, 3))
print(f"from tensor: {from_numpy.dtype.__name__} {from_numpy.to_list()}")
print(f"to tensor: {from_numpy.to_tensor(dtype='float32')}")
