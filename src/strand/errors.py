"""Error taxonomy for Strand.

Every error derives from :class:`StrandError` and from the builtin exception
a caller would naturally catch (``TypeError``, ``ValueError``,
``IndexError``, ``LookupError``). The offending values are kept as attributes
so callers can branch on them without parsing messages.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _name(dtype: Any) -> str:
    # Imported lazily: strand.dtypes imports this module.
    from strand.dtypes import dtype_name

    return dtype_name(dtype)


class StrandError(Exception):
    """Base class for all Strand errors."""


class TypeMismatchError(StrandError, TypeError):
    """Raised when inference meets a value that conflicts with the running dtype."""

    def __init__(self, value: Any, dtype: Any) -> None:
        self.value = value
        self.dtype = dtype
        super().__init__(
            f"Cannot make a series from mismatched types. Type of {value!r} "
            f"does not match inferred dtype {_name(dtype)}."
        )


class EmptyTypeError(StrandError, ValueError):
    """Raised when inference sees no non-null value."""

    def __init__(self) -> None:
        super().__init__("Cannot make a series from an empty list or a list of all nulls.")


class UnsupportedTypeError(StrandError, TypeError):
    """Raised when a value (or dtype) matches none of the supported dtypes."""

    def __init__(self, value: Any, context: str = "value") -> None:
        self.value = value
        super().__init__(f"Unsupported {context}: {value!r} (type {type(value).__name__})")


class DtypeIneligibleError(StrandError, TypeError):
    """Raised when an operation is called on a series of an unsupported dtype."""

    def __init__(self, operation: str, dtype: Any, valid_dtypes: Sequence[Any]) -> None:
        self.operation = operation
        self.dtype = dtype
        self.valid_dtypes = tuple(valid_dtypes)
        valid = ", ".join(_name(d) for d in self.valid_dtypes)
        super().__init__(
            f"Series.{operation} not implemented for dtype {_name(dtype)}. "
            f"Valid dtypes are [{valid}]."
        )


class DtypeMismatchError(StrandError, TypeError):
    """Raised when a binary operation receives two incompatible series."""

    def __init__(self, operation: str, left: Any, right: Any) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot invoke Series.{operation} with mismatched dtypes: "
            f"{_name(left)} and {_name(right)}."
        )


class BoundsError(StrandError, IndexError):
    """Raised when an index falls outside ``[-length, length - 1]``."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of bounds for series of length {length}")


class SamplingError(StrandError, ValueError):
    """Raised when sampling more elements than exist without replacement."""

    def __init__(self, n: int, length: int) -> None:
        self.n = n
        self.length = length
        super().__init__(
            f"In order to sample more elements than are in the series ({length}), "
            f"sampling with_replacement must be True (requested {n})."
        )


class BackendError(StrandError, LookupError):
    """Raised when a backend name is not registered."""

    def __init__(self, name: Any, available: Sequence[str] = ()) -> None:
        self.name = name
        known = ", ".join(sorted(available)) or "none"
        super().__init__(f"Unknown backend {name!r}. Registered backends: {known}")
