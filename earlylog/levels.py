"""Severity levels and their canonical names."""

from __future__ import annotations

import enum
import logging
import typing as typ


class LogLevel(enum.IntEnum):
    """Record severity, ordered by increasing urgency."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3


_LEVEL_NAMES: typ.Final[dict[LogLevel, str]] = {
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}

_NAME_ALIASES: typ.Final[dict[str, LogLevel]] = {
    "INFO": LogLevel.INFO,
    "WARN": LogLevel.WARNING,
    "WARNING": LogLevel.WARNING,
    "ERROR": LogLevel.ERROR,
    "FATAL": LogLevel.FATAL,
}

LevelArg = LogLevel | int | str


def level_name(level: LogLevel) -> str:
    """Return the canonical uppercase name of ``level``."""
    return _LEVEL_NAMES[LogLevel(level)]


def parse_level(value: LevelArg) -> LogLevel:
    """Coerce ``value`` into a :class:`LogLevel`.

    Parameters
    ----------
    value : LogLevel or int or str
        A level member, its integer value, or a case-insensitive name.
        ``"WARN"`` and ``"WARNING"`` are equivalent.

    Returns
    -------
    LogLevel
        The matching level.

    Raises
    ------
    ValueError
        If ``value`` names no known level.

    """
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        try:
            return _NAME_ALIASES[value.strip().upper()]
        except KeyError:
            msg = f"unknown log level: {value!r}"
            raise ValueError(msg) from None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"log level must be a LogLevel, int or str, got {type(value)!r}"
        raise ValueError(msg)
    try:
        return LogLevel(value)
    except ValueError:
        msg = f"unknown log level: {value!r}"
        raise ValueError(msg) from None


def from_stdlib_level(levelno: int) -> LogLevel:
    """Map a :mod:`logging` level number onto the nearest :class:`LogLevel`.

    Anything below ``WARNING`` becomes ``INFO`` and anything at or above
    ``CRITICAL`` becomes ``FATAL``.
    """
    if levelno >= logging.CRITICAL:
        return LogLevel.FATAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    return LogLevel.INFO


__all__ = ["LevelArg", "LogLevel", "from_stdlib_level", "level_name", "parse_level"]
