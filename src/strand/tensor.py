"""NumPy tensor boundary.

Only numeric tensors cross this boundary: signed or unsigned integer arrays
become ``Int64`` series, floating-point arrays become ``Float64`` series, and
only ``Int64``/``Float64`` series convert back.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from strand.dtypes import Float64, Int64
from strand.errors import UnsupportedTypeError

_KIND_TO_DTYPE: dict[str, type] = {
    "i": Int64,
    "u": Int64,
    "f": Float64,
}


def tensor_dtype(tensor: np.ndarray) -> type:
    """Map the numeric category of *tensor* to a Strand dtype."""
    dtype = _KIND_TO_DTYPE.get(np.asarray(tensor).dtype.kind)
    if dtype is None:
        raise UnsupportedTypeError(tensor.dtype, context="tensor dtype")
    return dtype


def tensor_values(tensor: np.ndarray) -> list[Any]:
    """Flatten *tensor* (C order) into Python scalars."""
    array = np.asarray(tensor)
    if array.dtype.kind == "u" and array.size and int(array.max()) > np.iinfo(np.int64).max:
        raise UnsupportedTypeError(int(array.max()), context="integer outside the 64-bit range")
    return array.ravel().tolist()


def to_tensor(values: list[Any], **tensor_opts: Any) -> np.ndarray:
    """Build a tensor from series values; options go straight to ``np.array``."""
    return np.array(values, **tensor_opts)
