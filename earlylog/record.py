"""Log record values and their single-line rendering."""

from __future__ import annotations

import dataclasses
import sys

from .levels import LogLevel, level_name


@dataclasses.dataclass(frozen=True, slots=True)
class SourceLocation:
    """File and line that produced a record."""

    filename: str
    lineno: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


@dataclasses.dataclass(frozen=True, slots=True)
class LogRecord:
    """An immutable log record created at the call site."""

    level: LogLevel
    message: str
    location: SourceLocation | None = None


def caller_location(stacklevel: int = 1) -> SourceLocation | None:
    """Return the location ``stacklevel`` frames above the caller.

    ``stacklevel=1`` names the function that called ``caller_location``'s
    caller, matching the meaning of ``stacklevel`` in :mod:`logging`. Returns
    ``None`` when the stack is shallower than requested.
    """
    try:
        frame = sys._getframe(stacklevel + 1)  # noqa: SLF001
    except ValueError:
        return None
    return SourceLocation(frame.f_code.co_filename, frame.f_lineno)


def format_record(record: LogRecord) -> str:
    """Render ``record`` as one line without the trailing newline.

    Examples
    --------
    >>> format_record(LogRecord(LogLevel.INFO, "hello"))
    'INFO hello'
    >>> format_record(LogRecord(LogLevel.ERROR, "boom", SourceLocation("a.py", 3)))
    'ERROR a.py:3 boom'

    """
    name = level_name(record.level)
    if record.location is None:
        return f"{name} {record.message}"
    return f"{name} {record.location} {record.message}"


__all__ = ["LogRecord", "SourceLocation", "caller_location", "format_record"]
