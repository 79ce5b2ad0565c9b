"""Shared BDD steps reused across feature modules."""

from __future__ import annotations

import pytest
from pytest_bdd import given

from earlylog import reset_manager


@given("the logging system is reset")
def reset_logging() -> None:
    """Reset global logging state for scenario isolation."""
    reset_manager()


@pytest.fixture(autouse=True)
def _capture_stderr_for_scenario(capsys: pytest.CaptureFixture[str]) -> None:
    """Activate ``capsys`` before any step runs so ``then`` steps see all output."""
