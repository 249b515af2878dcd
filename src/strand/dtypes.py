"""Data type definitions and the promotion lattice for Strand.

All series types are sentinel classes; they don't hold data. They exist so that
Series[Int64] is a meaningful generic type and so that the façade can decide,
by dtype alone, which operations a series supports.

Type categories (NumericType, FloatType, TemporalType) are base classes, so
eligibility checks can be phrased as ``issubclass(dtype, NumericType)``.

The set is closed: adding a dtype means extending this module, the inference
rules in ``strand.inference``, every eligibility table in ``strand.series``
and the dtype mapping of each backend.
"""

from __future__ import annotations

import datetime
from typing import Any

from strand.errors import UnsupportedTypeError

# ---------------------------------------------------------------------------
# Type category base classes
# ---------------------------------------------------------------------------


class NumericType:
    """Base class for all numeric data types."""


class IntegerType(NumericType):
    """Base class for integer data types."""


class FloatType(NumericType):
    """Base class for floating-point data types."""


class TemporalType:
    """Base class for all temporal data types."""


# ---------------------------------------------------------------------------
# Concrete dtypes
# ---------------------------------------------------------------------------


class Float64(FloatType):
    """64-bit floating point."""


class Int64(IntegerType):
    """64-bit signed integer."""


class Bool:
    """Boolean type. Not numeric, so arithmetic on booleans is not supported."""


class Utf8:
    """UTF-8 encoded string."""


class Date(TemporalType):
    """Calendar date (no time component)."""


class Datetime(TemporalType):
    """Naive date and time (no timezone)."""


ALL_DTYPES: tuple[type, ...] = (Float64, Int64, Bool, Utf8, Date, Datetime)

NUMERIC_DTYPES: tuple[type, ...] = (Int64, Float64)

ORDERED_DTYPES: tuple[type, ...] = (Int64, Float64, Date, Datetime)

# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

_DTYPE_NAMES: dict[type, str] = {
    Float64: "float64",
    Int64: "int64",
    Bool: "boolean",
    Utf8: "string",
    Date: "date",
    Datetime: "datetime",
}

_NAME_TO_DTYPE: dict[str, type] = {name: dtype for dtype, name in _DTYPE_NAMES.items()}
_NAME_TO_DTYPE.update(
    {
        "float": Float64,
        "integer": Int64,
        "bool": Bool,
        "utf8": Utf8,
        "str": Utf8,
    }
)


def dtype_name(dtype: Any) -> str:
    """Return the canonical short name of *dtype* (e.g. ``"int64"``)."""
    name = _DTYPE_NAMES.get(dtype)
    if name is None:
        return getattr(dtype, "__name__", repr(dtype))
    return name


def parse_dtype(dtype: type | str) -> type:
    """Resolve a dtype sentinel or one of its names to the sentinel class."""
    if isinstance(dtype, str):
        parsed = _NAME_TO_DTYPE.get(dtype.lower())
        if parsed is not None:
            return parsed
    elif dtype in _DTYPE_NAMES:
        return dtype
    raise UnsupportedTypeError(dtype, context="dtype")


def is_numeric(dtype: Any) -> bool:
    return isinstance(dtype, type) and issubclass(dtype, NumericType)


def is_temporal(dtype: Any) -> bool:
    return isinstance(dtype, type) and issubclass(dtype, TemporalType)


# ---------------------------------------------------------------------------
# Promotion lattice
# ---------------------------------------------------------------------------


def promote(left: type, right: type) -> type | None:
    """Return the result dtype of a binary numeric operation, or ``None``.

    Mixing floats and integers promotes to ``Float64``. Any pairing outside
    the numeric lattice is ineligible.
    """
    if not (is_numeric(left) and is_numeric(right)):
        return None
    if left is Int64 and right is Int64:
        return Int64
    return Float64


def scalar_matches(dtype: type, value: Any) -> bool:
    """Return whether a bare scalar is comparable against a series of *dtype*.

    ``bool`` is deliberately not a number here, and a ``datetime`` is not a
    ``date`` even though it subclasses it.
    """
    if is_numeric(dtype):
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if dtype is Bool:
        return isinstance(value, bool)
    if dtype is Utf8:
        return isinstance(value, str)
    if dtype is Datetime:
        return isinstance(value, datetime.datetime) and value.tzinfo is None
    if dtype is Date:
        return isinstance(value, datetime.date) and not isinstance(value, datetime.datetime)
    return False
