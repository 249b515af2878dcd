"""Backend protocols (what engine adapters must implement)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal, Protocol


class SeriesBackendProtocol(Protocol):
    """Interface that all series backends must implement.

    Each method takes backend-native data (``Any``) as ``source`` and returns
    backend-native data or a plain Python scalar. The Series layer performs
    every dtype check before calling in, and wraps returned handles in new
    Series instances.
    """

    # --- Construction / conversion ---

    def from_list(self, values: Sequence[Any], dtype: type) -> Any:
        """Build a native buffer from values already known to match ``dtype``.

        ``values`` may contain ``None`` for nulls.
        """
        ...

    def to_list(self, source: Any) -> list[Any]:
        """Return the elements as Python scalars, ``None`` for nulls."""
        ...

    def cast(self, source: Any, dtype: type) -> Any: ...

    # --- Introspection ---

    def length(self, source: Any) -> int: ...

    def dtype(self, source: Any) -> type:
        """Map the native dtype of ``source`` back to a Strand dtype."""
        ...

    # --- Selection ---

    def get(self, source: Any, idx: int) -> Any: ...

    def slice(self, source: Any, offset: int, length: int) -> Any: ...

    def head(self, source: Any, n: int) -> Any: ...

    def tail(self, source: Any, n: int) -> Any: ...

    def take(self, source: Any, indices: Sequence[int]) -> Any: ...

    def take_every(self, source: Any, every_n: int) -> Any: ...

    def filter(self, source: Any, mask: Any) -> Any: ...

    # --- Arithmetic / comparison ---

    def binary_op(self, source: Any, op: str, other: Any) -> Any:
        """Apply ``op`` (``+``, ``==``, ``>`` ...) element-wise.

        ``other`` is either a native handle of the same backend or a scalar.
        """
        ...

    def pow(self, source: Any, exponent: float) -> Any: ...

    def binary_and(self, source: Any, other: Any) -> Any: ...

    def binary_or(self, source: Any, other: Any) -> Any: ...

    def all_equal(self, source: Any, other: Any) -> bool: ...

    # --- Aggregation (``None`` for empty / all-null input) ---

    def sum(self, source: Any) -> Any: ...

    def min(self, source: Any) -> Any: ...

    def max(self, source: Any) -> Any: ...

    def mean(self, source: Any) -> float | None: ...

    def median(self, source: Any) -> float | None: ...

    def var(self, source: Any) -> float | None: ...

    def std(self, source: Any) -> float | None: ...

    def quantile(self, source: Any, quantile: float) -> Any: ...

    # --- Cumulative ---

    def cum_max(self, source: Any, reverse: bool) -> Any: ...

    def cum_min(self, source: Any, reverse: bool) -> Any: ...

    def cum_sum(self, source: Any, reverse: bool) -> Any: ...

    # --- Windowed ---

    def rolling_sum(
        self,
        source: Any,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> Any: ...

    def rolling_mean(
        self,
        source: Any,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> Any: ...

    def rolling_min(
        self,
        source: Any,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> Any: ...

    def rolling_max(
        self,
        source: Any,
        window_size: int,
        weights: Sequence[float] | None,
        ignore_nil: bool,
    ) -> Any: ...

    # --- Missing values ---

    def is_null(self, source: Any) -> Any: ...

    def is_not_null(self, source: Any) -> Any: ...

    def fill_missing(
        self,
        source: Any,
        strategy: Literal["forward", "backward", "max", "min", "mean"],
    ) -> Any: ...

    # --- Sampling ---

    def sample(self, source: Any, n: int, with_replacement: bool, seed: int | None) -> Any: ...

    # --- Ordering ---

    def sort(self, source: Any, reverse: bool) -> Any: ...

    def argsort(self, source: Any, reverse: bool) -> Any: ...

    def reverse(self, source: Any) -> Any: ...

    # --- Set-like ---

    def distinct(self, source: Any) -> Any: ...

    def n_distinct(self, source: Any) -> int: ...

    def count(self, source: Any) -> tuple[Any, Any]:
        """Return ``(values, counts)`` handles ordered by descending count."""
        ...

    # --- Peaks ---

    def peaks(self, source: Any, max_or_min: Literal["max", "min"]) -> Any: ...
