"""Backend registry and default-backend selection.

Backends are registered by name with a zero-argument factory, and each name is
instantiated at most once per process. The default backend is chosen via
environment variable (ideal for CI) or programmatically::

    # Environment variable
    STRAND_BACKEND=pandas pytest tests/

    # Programmatic, for the current context
    strand.set_default_backend("pandas")

    # Scoped
    with strand.using_backend("pandas"):
        s = strand.from_list([1, 2, 3])

The programmatic default is held in a ``contextvars.ContextVar``, so threads
and asyncio tasks can select different backends without sharing mutable
state. A new thread starts without an override and falls back to the
environment variable, then to ``"polars"``.

The default is consulted every time a Series is constructed. Once built, a
Series keeps the backend that produced its data.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from strand.errors import BackendError

if TYPE_CHECKING:
    from strand._protocols import SeriesBackendProtocol

logger = logging.getLogger(__name__)

ENV_VAR = "STRAND_BACKEND"
FALLBACK_BACKEND = "polars"

_factories: dict[str, Callable[[], SeriesBackendProtocol]] = {}
_instances: dict[str, SeriesBackendProtocol] = {}
_lock = threading.Lock()

_default_backend: ContextVar[SeriesBackendProtocol | None] = ContextVar(
    "strand_default_backend", default=None
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def register_backend(name: str, factory: Callable[[], SeriesBackendProtocol]) -> None:
    """Register a backend factory under *name*.

    Re-registering a name replaces the factory and drops any cached instance.
    """
    with _lock:
        _factories[name] = factory
        _instances.pop(name, None)
    logger.debug("Registered backend %r", name)


def available_backends() -> list[str]:
    """Return the registered backend names, sorted."""
    return sorted(_factories)


def get_backend(name: str) -> SeriesBackendProtocol:
    """Return the backend instance registered under *name*."""
    with _lock:
        instance = _instances.get(name)
        if instance is not None:
            return instance
        factory = _factories.get(name)
        if factory is None:
            raise BackendError(name, available=list(_factories))
        instance = factory()
        _instances[name] = instance
    logger.debug("Instantiated backend %r (%s)", name, type(instance).__name__)
    return instance


def resolve_backend(backend: Any = None) -> SeriesBackendProtocol:
    """Resolve a backend option to a backend instance.

    Accepts ``None`` (the current default), a registered name, or any object
    already implementing ``SeriesBackendProtocol``.
    """
    if backend is None:
        return get_default_backend()
    if isinstance(backend, str):
        return get_backend(backend)
    return backend


# ---------------------------------------------------------------------------
# Default backend
# ---------------------------------------------------------------------------


def get_default_backend() -> SeriesBackendProtocol:
    """Return the default backend for the current context."""
    override = _default_backend.get()
    if override is not None:
        return override
    name = os.environ.get(ENV_VAR, "").strip().lower() or FALLBACK_BACKEND
    return get_backend(name)


def set_default_backend(backend: Any) -> SeriesBackendProtocol:
    """Set the default backend for the current context.

    Returns the backend that was in effect before the call.
    """
    previous = get_default_backend()
    _default_backend.set(resolve_backend(backend))
    logger.debug("Default backend set to %s", type(_default_backend.get()).__name__)
    return previous


def reset_default_backend() -> None:
    """Drop the programmatic override for the current context."""
    _default_backend.set(None)


@contextmanager
def using_backend(backend: Any) -> Iterator[SeriesBackendProtocol]:
    """Use *backend* as the default inside a ``with`` block."""
    resolved = resolve_backend(backend)
    token = _default_backend.set(resolved)
    try:
        yield resolved
    finally:
        _default_backend.reset(token)


# ---------------------------------------------------------------------------
# Built-in backends (imported lazily)
# ---------------------------------------------------------------------------


def _polars_factory() -> SeriesBackendProtocol:
    from strand_polars import PolarsBackend

    return PolarsBackend()


def _pandas_factory() -> SeriesBackendProtocol:
    from strand_pandas import PandasBackend

    return PandasBackend()


register_backend("polars", _polars_factory)
register_backend("pandas", _pandas_factory)
