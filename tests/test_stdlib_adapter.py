"""Tests for EarlyLogHandler bridging stdlib logging into earlylog."""

from __future__ import annotations

import io
import logging
import typing as typ

import pytest

import earlylog
from earlylog import EarlyLogHandler, LogHandler, StreamDestination
from tests.helpers import stderr_lines


@pytest.fixture
def stdlib_logger() -> typ.Iterator[logging.Logger]:
    """Return an isolated stdlib logger with an EarlyLogHandler attached."""
    logger = logging.getLogger("earlylog.tests.adapter")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    bridge = EarlyLogHandler()
    logger.addHandler(bridge)
    try:
        yield logger
    finally:
        logger.removeHandler(bridge)


def test_stdlib_records_follow_installed_handler(
    stdlib_logger: logging.Logger, string_stream: io.StringIO
) -> None:
    """Stdlib records are buffered and routed like native ones."""
    earlylog.install_handler(LogHandler())
    stdlib_logger.info("buffered %s", "value")
    earlylog.set_output_stream(string_stream, owned=False)
    stdlib_logger.critical("direct")
    lines = string_stream.getvalue().splitlines()
    assert lines[0].startswith("INFO ")
    assert lines[0].endswith(" buffered value")
    assert lines[1].startswith("FATAL ")
    assert lines[1].endswith(" direct")
    assert __file__ in lines[0]


@pytest.mark.parametrize(
    "method, expected",
    [
        ("debug", "INFO"),
        ("info", "INFO"),
        ("warning", "WARNING"),
        ("error", "ERROR"),
        ("critical", "FATAL"),
    ],
)
def test_level_mapping(
    stdlib_logger: logging.Logger,
    string_stream: io.StringIO,
    method: str,
    expected: str,
) -> None:
    """Stdlib levels map onto earlylog levels."""
    earlylog.install_handler(LogHandler())
    earlylog.set_output_stream(string_stream, owned=False)
    getattr(stdlib_logger, method)("msg")
    assert string_stream.getvalue().split(" ", 1)[0] == expected


def test_bound_target(string_stream: io.StringIO) -> None:
    """A bound target receives records formatted by the stdlib formatter."""
    target = LogHandler()
    target.set_destination(StreamDestination(string_stream, owned=False))
    logger = logging.getLogger("earlylog.tests.bound")
    logger.propagate = False
    bridge = EarlyLogHandler(target)
    bridge.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(bridge)
    try:
        logger.warning("hi")
    finally:
        logger.removeHandler(bridge)
        target.close()
    line = string_stream.getvalue().rstrip("\n")
    assert line.startswith("WARNING ")
    assert line.endswith(" earlylog.tests.bound: hi")


def test_without_installed_handler_drops_non_fatal(
    stdlib_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without a handler, non-fatal stdlib records are dropped."""
    stdlib_logger.error("dropped")
    assert stderr_lines(capsys) == []


def test_format_errors_use_handle_error(
    stdlib_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Formatting errors go through ``handleError``."""
    calls: list[logging.LogRecord] = []
    monkeypatch.setattr(EarlyLogHandler, "handleError", lambda self, r: calls.append(r))
    earlylog.install_handler(LogHandler())
    stdlib_logger.info("%d", "not a number")
    assert len(calls) == 1
