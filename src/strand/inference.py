"""Dtype inference for raw Python values.

``infer_dtype`` folds left over a sequence keeping a running dtype. Nulls
never change it, integers and floats merge into ``Float64``, and any other
disagreement stops the fold with :class:`TypeMismatchError`.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from strand.dtypes import Bool, Date, Datetime, Float64, Int64, Utf8
from strand.errors import EmptyTypeError, TypeMismatchError, UnsupportedTypeError

logger = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def classify(value: Any) -> type | None:
    """Return the dtype of a single value, or ``None`` for null.

    The categories are mutually exclusive: ``bool`` is tested before ``int``
    and ``datetime`` before ``date`` because Python makes each a subclass of
    the other.
    """
    if value is None:
        return None
    if isinstance(value, (bool, np.bool_)):
        return Bool
    if isinstance(value, (int, np.integer)):
        if not _INT64_MIN <= int(value) <= _INT64_MAX:
            raise UnsupportedTypeError(value, context="integer outside the 64-bit range")
        return Int64
    if isinstance(value, (float, np.floating)):
        return Float64
    if isinstance(value, str):
        return Utf8
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            raise UnsupportedTypeError(value, context="timezone-aware datetime")
        return Datetime
    if isinstance(value, datetime.date):
        return Date
    raise UnsupportedTypeError(value)


def merge(running: type | None, value: Any) -> type | None:
    """Merge the classification of *value* into the running dtype."""
    new = classify(value)
    if new is None:
        return running
    if running is None or new is running:
        return new
    if running is Float64 and new is Int64:
        return Float64
    if running is Int64 and new is Float64:
        return Float64
    raise TypeMismatchError(value, running)


def infer_dtype(values: Iterable[Any]) -> type:
    """Infer the single dtype of *values*.

    Raises :class:`TypeMismatchError` on conflicting items,
    :class:`UnsupportedTypeError` on unrecognised items and
    :class:`EmptyTypeError` when no item is non-null.
    """
    running: type | None = None
    for value in values:
        running = merge(running, value)
    if running is None:
        raise EmptyTypeError()
    logger.debug("Inferred dtype %s", running.__name__)
    return running
