"""Shared test fixtures for swaggergo.

Provides fixtures for isolating the environment, managing global output
state, writing definition files, and standing in for the SwaggerHub
registry with :class:`httpx.MockTransport`.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from swaggergo.output import OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager keeps a Rich console bound to the sys.stderr seen at
    creation time, which capsys swaps out per test.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear SWAGGERHUB_* variables and force plain, colourless output."""
    for var in ["SWAGGERHUB_ACCESS_TOKEN", "SWAGGERHUB_API"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


# ---------------------------------------------------------------------------
# Definition file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def yaml_definition(tmp_path: Path) -> Path:
    """A minimal YAML OpenAPI definition on disk."""
    path = tmp_path / "spec.yml"
    path.write_bytes(b"openapi: 3.0.0\n")
    return path


@pytest.fixture
def json_definition(tmp_path: Path) -> Path:
    """A minimal JSON OpenAPI definition on disk."""
    path = tmp_path / "spec.json"
    path.write_bytes(b'{"openapi": "3.0.0", "info": {"title": "Widgets"}}')
    return path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a colourless, non-quiet OutputManager."""
    output = OutputManager(no_color=True)
    set_output(output)
    yield output
    reset_output()
