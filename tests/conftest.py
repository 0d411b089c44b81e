"""Shared pytest fixtures and test helpers for tankctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from tankctl.config.settings import TankSettings
from tankctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory with no TANKCTL_* variables.

    Keeps a ``tankctl.toml`` above the checkout, or a developer's
    environment, from leaking into settings.
    """
    import os

    for key in list(os.environ):
        if key.startswith("TANKCTL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """The --verbose flag enables a ContextVar; keep it from leaking."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def settings() -> TankSettings:
    """Default settings: inches and liters."""
    return TankSettings()


@pytest.fixture
def gallon_settings() -> TankSettings:
    """Inches and gallons."""
    return TankSettings(volume_unit="gallons")


@pytest.fixture
def metric_settings() -> TankSettings:
    """Centimetres and liters."""
    return TankSettings(unit_system="metric", volume_unit="liters")


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def ok_data(result: Any) -> dict[str, Any]:
    """Assert a ServiceResult succeeded and return its data."""
    assert result.ok, result.error
    return result.data


def error_code(result: Any) -> str:
    """Assert a ServiceResult failed and return its error code."""
    assert not result.ok
    assert result.error is not None
    return result.error.code
