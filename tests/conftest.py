from __future__ import annotations

import io
import warnings
from collections.abc import Generator

import pytest

import earlylog

warnings.filterwarnings(
    "ignore",
    message="'maxsplit' is passed as positional argument",
    category=DeprecationWarning,
    module=r"gherkin\.gherkin_line",
)
# The warning originates in the vendored Gherkin parser, so filter it out until
# the dependency releases a fix rather than letting our test suite go noisy.


@pytest.fixture
def string_stream() -> io.StringIO:
    """Return a fresh StringIO for capturing handler output."""
    return io.StringIO()


@pytest.fixture
def handler() -> Generator[earlylog.LogHandler, None, None]:
    """Return a standalone handler that is closed after the test."""
    h = earlylog.LogHandler()
    try:
        yield h
    finally:
        h.close()


@pytest.fixture(autouse=True)
def _clean_logging_manager() -> Generator[None, None, None]:
    """Uninstall any process-wide handler before and after each test."""
    earlylog.reset_manager()
    try:
        yield
    finally:
        earlylog.reset_manager()
