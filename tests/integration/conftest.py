"""Shared fixtures for integration tests.

``backend`` runs a test once per built-in engine, so the conformance suite
checks that Polars and Pandas agree on every observable result.
"""

from __future__ import annotations

import pytest

from strand.config import get_backend, reset_default_backend


@pytest.fixture(params=["polars", "pandas"])
def backend(request: pytest.FixtureRequest):
    """A built-in backend instance, one per engine."""
    return get_backend(request.param)


@pytest.fixture(autouse=True)
def _reset_default_backend():
    yield
    reset_default_backend()
