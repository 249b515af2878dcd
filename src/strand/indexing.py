"""Translation of Python selectors into positions.

The Series layer turns every selector (int, list of ints, ``range``,
``slice``) into non-negative positions before calling a backend, so backends
never see negative indices.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from strand.errors import BoundsError


def normalize_index(idx: int, length: int) -> int:
    """Return the non-negative position for *idx*.

    Negative indices count from the end. Raises :class:`BoundsError` when
    ``idx > length - 1`` or ``idx < -length``.
    """
    if idx > length - 1 or idx < -length:
        raise BoundsError(idx, length)
    return idx + length if idx < 0 else idx


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def expand_selector(selector: Any, length: int) -> list[int]:
    """Expand a list, tuple, ``range`` or ``slice`` into positions, in order.

    Explicit positions are bounds checked; a ``slice`` is clipped to the
    series like any Python sequence slice.
    """
    if isinstance(selector, slice):
        return list(range(*selector.indices(length)))
    if isinstance(selector, (range, list, tuple)):
        positions: list[int] = []
        for idx in selector:
            if not _is_index(idx):
                msg = f"Indices must be integers, got {type(idx).__name__} {idx!r}"
                raise TypeError(msg)
            positions.append(normalize_index(idx, length))
        return positions
    msg = f"Unsupported selector type: {type(selector).__name__}"
    raise TypeError(msg)


def retention_mask(length: int, removed: Sequence[int]) -> list[bool]:
    """Return a mask that is ``False`` exactly at the *removed* positions."""
    drop = set(removed)
    return [i not in drop for i in range(length)]
