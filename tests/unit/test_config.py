"""Unit tests for the backend registry and default-backend selection."""

from __future__ import annotations

import os
import threading
from unittest.mock import patch

import pytest

import strand.config
from strand.config import (
    ENV_VAR,
    available_backends,
    get_backend,
    get_default_backend,
    register_backend,
    reset_default_backend,
    resolve_backend,
    set_default_backend,
    using_backend,
)
from strand.errors import BackendError


class _FakeBackend:
    def __init__(self, label: str = "fake") -> None:
        self.label = label


@pytest.fixture(autouse=True)
def _isolate_registry():
    factories = dict(strand.config._factories)
    instances = dict(strand.config._instances)
    reset_default_backend()
    yield
    reset_default_backend()
    strand.config._factories.clear()
    strand.config._factories.update(factories)
    strand.config._instances.clear()
    strand.config._instances.update(instances)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_builtins_registered(self) -> None:
        assert {"polars", "pandas"} <= set(available_backends())

    def test_register_and_get(self) -> None:
        register_backend("fake", _FakeBackend)
        backend = get_backend("fake")
        assert isinstance(backend, _FakeBackend)

    def test_instances_are_cached(self) -> None:
        register_backend("fake", _FakeBackend)
        assert get_backend("fake") is get_backend("fake")

    def test_reregister_drops_cached_instance(self) -> None:
        register_backend("fake", _FakeBackend)
        first = get_backend("fake")
        register_backend("fake", lambda: _FakeBackend("second"))
        second = get_backend("fake")
        assert second is not first
        assert second.label == "second"

    def test_unknown_backend(self) -> None:
        with pytest.raises(BackendError) as exc_info:
            get_backend("spark")
        assert exc_info.value.name == "spark"
        assert "polars" in str(exc_info.value)


class TestResolve:
    def test_instance_passes_through(self) -> None:
        backend = _FakeBackend()
        assert resolve_backend(backend) is backend

    def test_name_is_looked_up(self) -> None:
        register_backend("fake", _FakeBackend)
        assert resolve_backend("fake") is get_backend("fake")

    def test_none_is_default(self) -> None:
        register_backend("fake", _FakeBackend)
        with using_backend("fake"):
            assert resolve_backend(None) is get_backend("fake")


# ---------------------------------------------------------------------------
# Default backend
# ---------------------------------------------------------------------------


class TestDefaultBackend:
    def test_env_var_selects_default(self) -> None:
        register_backend("fake", _FakeBackend)
        with patch.dict(os.environ, {ENV_VAR: "fake"}):
            assert isinstance(get_default_backend(), _FakeBackend)

    def test_env_var_is_case_insensitive(self) -> None:
        register_backend("fake", _FakeBackend)
        with patch.dict(os.environ, {ENV_VAR: " FAKE "}):
            assert isinstance(get_default_backend(), _FakeBackend)

    def test_fallback_is_polars(self) -> None:
        register_backend("polars", lambda: _FakeBackend("polars"))
        with patch.dict(os.environ, {}, clear=True):
            assert get_default_backend().label == "polars"

    def test_unknown_env_value(self) -> None:
        with patch.dict(os.environ, {ENV_VAR: "spark"}), pytest.raises(BackendError):
            get_default_backend()

    def test_programmatic_overrides_env(self) -> None:
        register_backend("fake", _FakeBackend)
        register_backend("other", lambda: _FakeBackend("other"))
        with patch.dict(os.environ, {ENV_VAR: "fake"}):
            set_default_backend("other")
            assert get_default_backend().label == "other"

    def test_set_returns_previous(self) -> None:
        register_backend("fake", _FakeBackend)
        register_backend("other", lambda: _FakeBackend("other"))
        set_default_backend("fake")
        previous = set_default_backend("other")
        assert previous.label == "fake"

    def test_reset(self) -> None:
        register_backend("polars", lambda: _FakeBackend("polars"))
        register_backend("fake", _FakeBackend)
        set_default_backend("fake")
        reset_default_backend()
        with patch.dict(os.environ, {}, clear=True):
            assert get_default_backend().label == "polars"

    def test_using_backend_restores(self) -> None:
        register_backend("fake", _FakeBackend)
        register_backend("other", lambda: _FakeBackend("other"))
        set_default_backend("fake")
        with using_backend("other") as backend:
            assert backend.label == "other"
            assert get_default_backend() is backend
        assert get_default_backend().label == "fake"

    def test_using_backend_restores_on_error(self) -> None:
        register_backend("fake", _FakeBackend)
        register_backend("other", lambda: _FakeBackend("other"))
        set_default_backend("fake")
        with pytest.raises(RuntimeError), using_backend("other"):
            raise RuntimeError("boom")
        assert get_default_backend().label == "fake"

    def test_override_is_per_thread(self) -> None:
        register_backend("polars", lambda: _FakeBackend("polars"))
        register_backend("fake", _FakeBackend)
        set_default_backend("fake")
        seen: list[str] = []

        def worker() -> None:
            seen.append(get_default_backend().label)

        with patch.dict(os.environ, {}, clear=True):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()
        assert seen == ["polars"]
        assert get_default_backend().label == "fake"
