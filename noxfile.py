"""Nox sessions for testing against multiple backend versions."""

import nox

nox.options.default_venv_backend = "uv"

POLARS_VERSIONS = ["1.0.0", "1.20.0"]
PANDAS_VERSIONS = ["2.0.0", "2.2.0"]

POLARS_TESTS = [
    "tests/integration/test_polars_execution.py",
    "tests/integration/test_backend_conformance.py",
]

PANDAS_TESTS = [
    "tests/integration/test_pandas_execution.py",
    "tests/integration/test_backend_conformance.py",
]


@nox.session(python=["3.10"])
def unit(session: nox.Session) -> None:
    """Run the backend-independent unit tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "tests/unit", "-q")


@nox.session(python=["3.10"])
@nox.parametrize("polars", POLARS_VERSIONS)
def test_polars(session: nox.Session, polars: str) -> None:
    """Test strand_polars against specific Polars versions."""
    session.install("-e", ".", "pytest", f"polars=={polars}")
    session.run("pytest", *POLARS_TESTS, "-q", "-k", "not pandas")


@nox.session(python=["3.10"])
@nox.parametrize("pandas", PANDAS_VERSIONS)
def test_pandas(session: nox.Session, pandas: str) -> None:
    """Test strand_pandas against specific Pandas versions."""
    deps = ["-e", ".", "pytest", f"pandas=={pandas}"]
    # pandas < 2.2 was compiled against numpy 1.x ABI
    if pandas < "2.2":
        deps.append("numpy<2")
    session.install(*deps)
    session.run("pytest", *PANDAS_TESTS, "-q", "-k", "not polars")
