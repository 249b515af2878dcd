"""Series[DType]: the typed, nullable, backend-opaque column.

A Series is an immutable triple of a dtype sentinel, a backend-native handle
and the backend object that produced the handle. Every operation checks dtype
eligibility *before* calling the backend, then wraps the returned handle in a
new Series. The backend is never asked to do something the dtype forbids.

Binary operations assume both operands live on the same backend; the
Series layer does not move data between backends.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Generic, Literal, NamedTuple, TypeVar

from strand.config import resolve_backend
from strand.dtypes import (
    ALL_DTYPES,
    NUMERIC_DTYPES,
    ORDERED_DTYPES,
    Bool,
    Float64,
    Int64,
    dtype_name,
    is_numeric,
    parse_dtype,
    promote,
    scalar_matches,
)
from strand.errors import DtypeIneligibleError, DtypeMismatchError, SamplingError
from strand.indexing import expand_selector, normalize_index, retention_mask
from strand.inference import classify, infer_dtype
from strand.tensor import tensor_dtype, tensor_values, to_tensor

if TYPE_CHECKING:
    import numpy as np

    from strand._protocols import SeriesBackendProtocol

logger = logging.getLogger(__name__)

DType = TypeVar("DType")

# ---------------------------------------------------------------------------
# Eligibility tables
# ---------------------------------------------------------------------------

_SUMMABLE: tuple[type, ...] = (Int64, Float64, Bool)

FillStrategy = Literal["forward", "backward", "max", "min", "mean"]

_FILL_STRATEGIES: dict[str, tuple[type, ...]] = {
    "forward": ALL_DTYPES,
    "backward": ALL_DTYPES,
    "max": ORDERED_DTYPES,
    "min": ORDERED_DTYPES,
    "mean": NUMERIC_DTYPES,
}

_PREVIEW = 10


def _require_dtype(series: Series[Any], operation: str, valid: tuple[type, ...]) -> None:
    """Raise :class:`DtypeIneligibleError` unless ``series.dtype`` is in *valid*."""
    if series._dtype not in valid:
        raise DtypeIneligibleError(operation, series._dtype, valid)


def _scalar_dtype(value: Any) -> Any:
    """Best-effort dtype of a scalar operand, for error messages."""
    dtype = classify(value)
    return dtype if dtype is not None else value


class ValueCounts(NamedTuple):
    """Result of :meth:`Series.count`: distinct values and their counts."""

    values: Series[Any]
    counts: Series[Int64]


# ---------------------------------------------------------------------------
# Series
# ---------------------------------------------------------------------------


class Series(Generic[DType]):
    """A typed, immutable, nullable column backed by a pluggable engine.

    Construct one with :meth:`from_list` or :meth:`from_tensor`; the
    constructor itself is for backends and for Series operations.
    """

    __slots__ = ("_data", "_dtype", "_backend")

    # ``==`` builds a mask, so Series cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        *,
        _data: Any,
        _dtype: type,
        _backend: SeriesBackendProtocol,
    ) -> None:
        self._data = _data
        self._dtype = _dtype
        self._backend = _backend

    def __repr__(self) -> str:
        values = self._backend.to_list(self._backend.head(self._data, _PREVIEW))
        n = len(self)
        preview = ", ".join(repr(v) for v in values)
        if n > _PREVIEW:
            preview += ", ..."
        return f"Series[{dtype_name(self._dtype)}][{n}]\n[{preview}]"

    def __bool__(self) -> bool:
        msg = (
            "The truth value of a Series is ambiguous. "
            "Use all_equal() or reduce the series explicitly."
        )
        raise TypeError(msg)

    def to_native(self) -> Any:
        """Return the underlying backend-native data object (e.g. pl.Series)."""
        return self._data

    @property
    def backend(self) -> SeriesBackendProtocol:
        """The backend that owns this series' data."""
        return self._backend

    # --- Handle wrapping ---

    def _same(self, data: Any) -> Series[DType]:
        """Wrap *data* that keeps this series' dtype (selection, ordering)."""
        return Series(_data=data, _dtype=self._dtype, _backend=self._backend)

    def _derived(self, data: Any) -> Series[Any]:
        """Wrap *data* whose dtype the backend decides (arithmetic, windows)."""
        return Series(_data=data, _dtype=self._backend.dtype(data), _backend=self._backend)

    def _mask(self, data: Any) -> Series[Bool]:
        return Series(_data=data, _dtype=Bool, _backend=self._backend)

    # --- Construction ---

    @classmethod
    def from_list(cls, values: Iterable[Any], *, backend: Any = None) -> Series[Any]:
        """Create a series from Python values, inferring the dtype.

        The values must share one dtype (integers and floats mix into
        ``Float64``) and may contain ``None``, but not only ``None``::

            >>> Series.from_list([1, None, 3]).dtype
            <class 'strand.dtypes.Int64'>

        ``backend`` accepts a registered name or a backend instance; when
        omitted, the current default backend is used.
        """
        values = list(values)
        dtype = infer_dtype(values)
        impl = resolve_backend(backend)
        logger.debug("from_list: %d values as %s on %s", len(values), dtype.__name__, impl)
        return cls(_data=impl.from_list(values, dtype), _dtype=dtype, _backend=impl)

    @classmethod
    def from_tensor(cls, tensor: np.ndarray, *, backend: Any = None) -> Series[Any]:
        """Create a series from a NumPy array.

        Integer arrays (signed or unsigned) become ``Int64``, floating-point
        arrays ``Float64``. Multi-dimensional arrays are flattened.
        """
        dtype = tensor_dtype(tensor)
        impl = resolve_backend(backend)
        return cls(_data=impl.from_list(tensor_values(tensor), dtype), _dtype=dtype, _backend=impl)

    # --- Conversion ---

    def to_list(self) -> list[Any]:
        """Return the values as Python scalars, with ``None`` for nulls."""
        return self._backend.to_list(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    def to_tensor(self, **tensor_opts: Any) -> np.ndarray:
        """Convert to a NumPy array. Options are passed directly to ``np.array``.

        Supported dtypes: ``Int64``, ``Float64``.
        """
        _require_dtype(self, "to_tensor", NUMERIC_DTYPES)
        return to_tensor(self.to_list(), **tensor_opts)

    def cast(self, dtype: type | str) -> Series[Any]:
        """Cast to another dtype (sentinel or name such as ``"string"``)."""
        target = parse_dtype(dtype)
        return Series(
            _data=self._backend.cast(self._data, target), _dtype=target, _backend=self._backend
        )

    # --- Introspection ---

    @property
    def dtype(self) -> type:
        """Return the dtype sentinel of the series."""
        return self._dtype

    @property
    def length(self) -> int:
        """Return the number of elements, nulls included."""
        return self._backend.length(self._data)

    def __len__(self) -> int:
        return self.length

    # --- Slice and dice ---

    def head(self, n: int = 10) -> Series[DType]:
        """Return the first *n* elements."""
        return self._same(self._backend.head(self._data, n))

    def tail(self, n: int = 10) -> Series[DType]:
        """Return the last *n* elements."""
        return self._same(self._backend.tail(self._data, n))

    def first(self) -> Any:
        """Return the first element."""
        return self.get(0)

    def last(self) -> Any:
        """Return the last element."""
        return self.get(-1)

    def slice(self, offset: int, length: int) -> Series[DType]:
        """Return *length* elements starting at *offset*.

        Negative offsets count from the end; the result is shorter than
        *length* when it would run past the end.
        """
        return self._same(self._backend.slice(self._data, offset, length))

    def take(self, indices: Sequence[int] | range) -> Series[DType]:
        """Return the elements at *indices*, in the order given."""
        positions = expand_selector(indices, len(self))
        return self._same(self._backend.take(self._data, positions))

    def take_every(self, every_n: int) -> Series[DType]:
        """Take every *every_n*-th element, starting with the first."""
        if every_n < 1:
            msg = f"every_n must be a positive integer, got {every_n}"
            raise ValueError(msg)
        return self._same(self._backend.take_every(self._data, every_n))

    def get(self, idx: int) -> Any:
        """Return the element at *idx*; negative indices count from the end."""
        position = normalize_index(idx, len(self))
        return self._backend.get(self._data, position)

    def filter(self, mask: Series[Bool] | Callable[[Series[DType]], Series[Bool]]) -> Series[DType]:
        """Keep the positions where *mask* is true.

        *mask* is a boolean series of the same length, or a callable that
        receives this series and returns one. Null mask entries drop the
        element.
        """
        if not isinstance(mask, Series) and callable(mask):
            mask = mask(self)
        if not isinstance(mask, Series):
            msg = f"filter expects a boolean Series or a callable, got {type(mask).__name__}"
            raise TypeError(msg)
        if mask._dtype is not Bool:
            raise DtypeIneligibleError("filter", mask._dtype, (Bool,))
        return self._same(self._backend.filter(self._data, mask._data))

    def sample(
        self,
        n_or_frac: int | float,
        *,
        with_replacement: bool = False,
        seed: int | None = None,
    ) -> Series[DType]:
        """Return a random sample of *n* elements, or a fraction of the series.

        Sampling more elements than the series holds requires
        ``with_replacement=True``.
        """
        length = len(self)
        n = round(n_or_frac * length) if isinstance(n_or_frac, float) else n_or_frac
        if n < 0:
            msg = f"sample size must be non-negative, got {n_or_frac}"
            raise ValueError(msg)
        if n > length and not with_replacement:
            raise SamplingError(n, length)
        return self._same(self._backend.sample(self._data, n, with_replacement, seed))

    # --- Indexing protocol ---

    def __getitem__(self, selector: Any) -> Any:
        """``s[i]`` returns a value; lists, ranges, slices and masks return a Series."""
        if isinstance(selector, Series):
            return self.filter(selector)
        if isinstance(selector, int) and not isinstance(selector, bool):
            return self.get(selector)
        return self.take(expand_selector(selector, len(self)))

    def pop(self, selector: int | Sequence[int] | range) -> tuple[Any, Series[DType]]:
        """Remove the selected position(s).

        Returns ``(removed, remaining)``; ``removed`` is a value for an int
        selector and a Series otherwise. The remaining series is built by
        filtering with a retention mask, so the cost is linear in the series
        length however few elements are removed.
        """
        length = len(self)
        removed: Any
        if isinstance(selector, int) and not isinstance(selector, bool):
            positions = [normalize_index(selector, length)]
            removed = self._backend.get(self._data, positions[0])
        else:
            positions = expand_selector(selector, length)
            removed = self._same(self._backend.take(self._data, positions))
        mask = self._backend.from_list(retention_mask(length, positions), Bool)
        return removed, self._same(self._backend.filter(self._data, mask))

    def update(self, idx: int, value: Any) -> Series[Any]:
        """Return a new series with the element at *idx* replaced by *value*.

        The series is materialised to a list and rebuilt through inference,
        so the dtype may widen (replacing an integer by a float yields a
        ``Float64`` series) and an incompatible value raises
        :class:`TypeMismatchError`.
        """
        values = self.to_list()
        values[normalize_index(idx, len(values))] = value
        return Series.from_list(values, backend=self._backend)

    def get_and_update(
        self, idx: int, fun: Callable[[Any], tuple[Any, Any]]
    ) -> tuple[Any, Series[Any]]:
        """Call ``fun(current)`` → ``(reported, new)`` and update *idx* with ``new``."""
        current, new_value = fun(self.get(idx))
        return current, self.update(idx, new_value)

    # --- Aggregation ---

    def sum(self) -> Any:
        """Sum of the non-null elements (``None`` if there are none).

        Supported dtypes: ``Int64``, ``Float64``, ``Bool``.
        """
        _require_dtype(self, "sum", _SUMMABLE)
        return self._backend.sum(self._data)

    def min(self) -> Any:
        """Minimum non-null element. Supported: numeric and temporal dtypes."""
        _require_dtype(self, "min", ORDERED_DTYPES)
        return self._backend.min(self._data)

    def max(self) -> Any:
        """Maximum non-null element. Supported: numeric and temporal dtypes."""
        _require_dtype(self, "max", ORDERED_DTYPES)
        return self._backend.max(self._data)

    def mean(self) -> float | None:
        _require_dtype(self, "mean", NUMERIC_DTYPES)
        return self._backend.mean(self._data)

    def median(self) -> float | None:
        _require_dtype(self, "median", NUMERIC_DTYPES)
        return self._backend.median(self._data)

    def var(self) -> float | None:
        """Sample variance (ddof=1); ``None`` with fewer than two values."""
        _require_dtype(self, "var", NUMERIC_DTYPES)
        return self._backend.var(self._data)

    def std(self) -> float | None:
        """Sample standard deviation (ddof=1)."""
        _require_dtype(self, "std", NUMERIC_DTYPES)
        return self._backend.std(self._data)

    def quantile(self, quantile: float) -> Any:
        """Nearest-rank quantile of the non-null elements.

        Supported dtypes: ``Int64``, ``Float64``, ``Date``, ``Datetime``.
        """
        _require_dtype(self, "quantile", ORDERED_DTYPES)
        if not 0.0 <= quantile <= 1.0:
            msg = f"quantile must be between 0 and 1, got {quantile}"
            raise ValueError(msg)
        return self._backend.quantile(self._data, quantile)

    # --- Cumulative ---

    def cum_max(self, reverse: bool = False) -> Series[DType]:
        """Cumulative maximum. Nulls stay null; see :meth:`fill_missing`."""
        _require_dtype(self, "cum_max", ORDERED_DTYPES)
        return self._same(self._backend.cum_max(self._data, reverse))

    def cum_min(self, reverse: bool = False) -> Series[DType]:
        """Cumulative minimum. Nulls stay null; see :meth:`fill_missing`."""
        _require_dtype(self, "cum_min", ORDERED_DTYPES)
        return self._same(self._backend.cum_min(self._data, reverse))

    def cum_sum(self, reverse: bool = False) -> Series[Any]:
        """Cumulative sum. Booleans are summed as ``Int64``."""
        _require_dtype(self, "cum_sum", _SUMMABLE)
        return self._derived(self._backend.cum_sum(self._data, reverse))

    # --- Local extrema ---

    def peaks(self, max_or_min: Literal["max", "min"] = "max") -> Series[Bool]:
        """Boolean mask marking strict local maxima (or minima).

        Boundary elements are compared with their single neighbour; ties are
        not peaks.
        """
        _require_dtype(self, "peaks", ORDERED_DTYPES)
        if max_or_min not in ("max", "min"):
            msg = f"max_or_min must be 'max' or 'min', got {max_or_min!r}"
            raise ValueError(msg)
        return self._mask(self._backend.peaks(self._data, max_or_min))

    # --- Arithmetic ---

    def _arithmetic(self, operation: str, op: str, other: Any) -> Series[Any]:
        if isinstance(other, Series):
            if other._dtype is self._dtype:
                _require_dtype(self, operation, NUMERIC_DTYPES)
            elif promote(self._dtype, other._dtype) is None:
                raise DtypeMismatchError(operation, self._dtype, other._dtype)
            logger.debug("%s: %s %s %s", operation, self._dtype.__name__, op, other._dtype.__name__)
            return self._derived(self._backend.binary_op(self._data, op, other._data))
        _require_dtype(self, operation, NUMERIC_DTYPES)
        if not scalar_matches(self._dtype, other):
            raise DtypeMismatchError(operation, self._dtype, _scalar_dtype(other))
        return self._derived(self._backend.binary_op(self._data, op, other))

    def add(self, other: Series[Any] | float) -> Series[Any]:
        """Element-wise ``self + other``.

        Mixing ``Int64`` and ``Float64`` yields ``Float64``.
        """
        return self._arithmetic("add", "+", other)

    def subtract(self, other: Series[Any] | float) -> Series[Any]:
        """Element-wise ``self - other``."""
        return self._arithmetic("subtract", "-", other)

    def multiply(self, other: Series[Any] | float) -> Series[Any]:
        """Element-wise ``self * other``."""
        return self._arithmetic("multiply", "*", other)

    def divide(self, other: Series[Any] | float) -> Series[Any]:
        """Element-wise true division; the result is ``Float64``."""
        return self._arithmetic("divide", "/", other)

    def pow(self, exponent: float) -> Series[Any]:
        """Raise every element to *exponent*."""
        _require_dtype(self, "pow", NUMERIC_DTYPES)
        if not scalar_matches(Float64, exponent):
            raise DtypeMismatchError("pow", self._dtype, _scalar_dtype(exponent))
        return self._derived(self._backend.pow(self._data, exponent))

    __add__ = add
    __radd__ = add
    __sub__ = subtract
    __mul__ = multiply
    __rmul__ = multiply
    __truediv__ = divide
    __pow__ = pow

    # --- Comparison ---

    def _equality(self, operation: str, op: str, other: Any) -> Series[Bool]:
        if isinstance(other, Series):
            same = other._dtype is self._dtype
            if not same and promote(self._dtype, other._dtype) is None:
                raise DtypeMismatchError(operation, self._dtype, other._dtype)
            return self._mask(self._backend.binary_op(self._data, op, other._data))
        if not scalar_matches(self._dtype, other):
            raise DtypeMismatchError(operation, self._dtype, _scalar_dtype(other))
        return self._mask(self._backend.binary_op(self._data, op, other))

    def _ordering(self, operation: str, op: str, other: Any) -> Series[Bool]:
        if isinstance(other, Series):
            if other._dtype is self._dtype:
                _require_dtype(self, operation, ORDERED_DTYPES)
            elif not (is_numeric(self._dtype) and is_numeric(other._dtype)):
                raise DtypeMismatchError(operation, self._dtype, other._dtype)
            return self._mask(self._backend.binary_op(self._data, op, other._data))
        _require_dtype(self, operation, ORDERED_DTYPES)
        if not scalar_matches(self._dtype, other):
            raise DtypeMismatchError(operation, self._dtype, _scalar_dtype(other))
        return self._mask(self._backend.binary_op(self._data, op, other))

    def equal(self, other: Any) -> Series[Bool]:
        """Element-wise ``self == other``.

        *other* may be a series of the same dtype (or any numeric series for
        a numeric series) or a bare scalar of the matching type: a ``date``
        for ``Date``, a naive ``datetime`` for ``Datetime``, a ``str`` for
        ``Utf8``, a ``bool`` for ``Bool`` and a number for numeric dtypes.
        """
        return self._equality("equal", "==", other)

    def not_equal(self, other: Any) -> Series[Bool]:
        """Element-wise ``self != other``. Accepts the same operands as :meth:`equal`."""
        return self._equality("not_equal", "!=", other)

    def greater(self, other: Any) -> Series[Bool]:
        """Element-wise ``self > other``. Supported: numeric and temporal dtypes."""
        return self._ordering("greater", ">", other)

    def greater_equal(self, other: Any) -> Series[Bool]:
        return self._ordering("greater_equal", ">=", other)

    def less(self, other: Any) -> Series[Bool]:
        return self._ordering("less", "<", other)

    def less_equal(self, other: Any) -> Series[Bool]:
        return self._ordering("less_equal", "<=", other)

    __eq__ = equal  # type: ignore[assignment]
    __ne__ = not_equal  # type: ignore[assignment]
    __gt__ = greater
    __ge__ = greater_equal
    __lt__ = less
    __le__ = less_equal

    # --- Logical ---

    def and_(self, other: Series[Any]) -> Series[Bool]:
        """Element-wise logical and of two series.

        Not gated on dtype: the backend decides what non-boolean operands mean.
        """
        if not isinstance(other, Series):
            msg = f"and_ expects a Series, got {type(other).__name__}"
            raise TypeError(msg)
        return self._derived(self._backend.binary_and(self._data, other._data))

    def or_(self, other: Series[Any]) -> Series[Bool]:
        """Element-wise logical or of two series. Not gated on dtype."""
        if not isinstance(other, Series):
            msg = f"or_ expects a Series, got {type(other).__name__}"
            raise TypeError(msg)
        return self._derived(self._backend.binary_or(self._data, other._data))

    __and__ = and_
    __or__ = or_

    def all_equal(self, other: Series[Any]) -> bool:
        """Whether two series hold the same values, nulls included.

        Series of different dtypes are never equal; the backend is not
        consulted.
        """
        if not isinstance(other, Series):
            msg = f"all_equal expects a Series, got {type(other).__name__}"
            raise TypeError(msg)
        if other._dtype is not self._dtype:
            return False
        return self._backend.all_equal(self._data, other._data)

    # --- Ordering ---

    def sort(self, reverse: bool = False) -> Series[DType]:
        """Sort the values; nulls come first."""
        return self._same(self._backend.sort(self._data, reverse))

    def argsort(self, reverse: bool = False) -> Series[Int64]:
        """Return the positions that would sort the series."""
        return Series(
            _data=self._backend.argsort(self._data, reverse), _dtype=Int64, _backend=self._backend
        )

    def reverse(self) -> Series[DType]:
        return self._same(self._backend.reverse(self._data))

    # --- Distinct ---

    def distinct(self) -> Series[DType]:
        """Unique values. Order is not guaranteed."""
        return self._same(self._backend.distinct(self._data))

    def n_distinct(self) -> int:
        """Number of unique values; null counts as one value."""
        return self._backend.n_distinct(self._data)

    def count(self) -> ValueCounts:
        """Distinct values with their occurrence counts, most frequent first."""
        values, counts = self._backend.count(self._data)
        return ValueCounts(
            values=self._same(values),
            counts=Series(_data=counts, _dtype=Int64, _backend=self._backend),
        )

    # --- Rolling ---

    def _rolling(
        self,
        operation: str,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> Series[Any]:
        _require_dtype(self, operation, NUMERIC_DTYPES)
        if window_size < 1:
            msg = f"window_size must be a positive integer, got {window_size}"
            raise ValueError(msg)
        if weights is not None:
            weights = [float(w) for w in weights]
            if len(weights) != window_size:
                msg = f"weights must have length {window_size}, got {len(weights)}"
                raise ValueError(msg)
        method = getattr(self._backend, operation)
        return self._derived(method(self._data, window_size, weights, ignore_nil))

    def rolling_sum(
        self,
        window_size: int,
        weights: Sequence[float] | None = None,
        ignore_nil: bool = True,
    ) -> Series[Any]:
        """Rolling sum over a trailing window of *window_size* elements.

        The first ``window_size - 1`` positions are null. With *weights*,
        each element is multiplied by the weight at its window position
        before summing. With ``ignore_nil=False`` a window containing a null
        yields null.

            >>> Series.from_list(range(1, 11)).rolling_sum(4).to_list()
            [None, None, None, 10, 14, 18, 22, 26, 30, 34]
        """
        return self._rolling("rolling_sum", window_size, weights, ignore_nil)

    def rolling_mean(
        self,
        window_size: int,
        weights: Sequence[float] | None = None,
        ignore_nil: bool = True,
    ) -> Series[Any]:
        """Rolling mean; see :meth:`rolling_sum` for the window rules."""
        return self._rolling("rolling_mean", window_size, weights, ignore_nil)

    def rolling_min(
        self,
        window_size: int,
        weights: Sequence[float] | None = None,
        ignore_nil: bool = True,
    ) -> Series[Any]:
        return self._rolling("rolling_min", window_size, weights, ignore_nil)

    def rolling_max(
        self,
        window_size: int,
        weights: Sequence[float] | None = None,
        ignore_nil: bool = True,
    ) -> Series[Any]:
        return self._rolling("rolling_max", window_size, weights, ignore_nil)

    # --- Missing values ---

    def fill_missing(self, strategy: FillStrategy) -> Series[Any]:
        """Fill nulls using *strategy*.

        - ``"forward"``: copy the previous non-null value
        - ``"backward"``: copy the next non-null value
        - ``"max"`` / ``"min"``: the series maximum / minimum
        - ``"mean"``: the series mean (an ``Int64`` series becomes ``Float64``)
        """
        valid = _FILL_STRATEGIES.get(strategy)
        if valid is None:
            msg = (
                f"Unknown fill strategy {strategy!r}. "
                f"Use one of: {', '.join(_FILL_STRATEGIES)}"
            )
            raise ValueError(msg)
        _require_dtype(self, f"fill_missing({strategy!r})", valid)
        return self._derived(self._backend.fill_missing(self._data, strategy))

    def is_null(self) -> Series[Bool]:
        """Mask that is true where the value is null."""
        return self._mask(self._backend.is_null(self._data))

    def is_not_null(self) -> Series[Bool]:
        """Mask that is true where the value is present."""
        return self._mask(self._backend.is_not_null(self._data))


# ---------------------------------------------------------------------------
# Module-level constructors
# ---------------------------------------------------------------------------


def from_list(values: Iterable[Any], *, backend: Any = None) -> Series[Any]:
    """Create a series from Python values. See :meth:`Series.from_list`."""
    return Series.from_list(values, backend=backend)


def from_tensor(tensor: np.ndarray, *, backend: Any = None) -> Series[Any]:
    """Create a series from a NumPy array. See :meth:`Series.from_tensor`."""
    return Series.from_tensor(tensor, backend=backend)
