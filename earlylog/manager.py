"""Process-wide handler lifecycle and the module-level logging surface.

Exactly one :class:`~earlylog.handler.LogHandler` is active at a time.
Installing a handler closes the previous one, which flushes its buffer to
stderr if it never received a destination. Call sites log through
:func:`log` or the level helpers and never need to know which handler is
active, or whether one is.
"""

from __future__ import annotations

import collections.abc as cabc
import contextlib
import sys
import threading
import typing as typ
from os import PathLike

from .destinations import FileDestination, StreamDestination
from .handler import LogHandler
from .levels import LevelArg, LogLevel, parse_level
from .record import LogRecord, SourceLocation, caller_location, format_record

_lock = threading.RLock()
_active: LogHandler | None = None


def get_handler() -> LogHandler | None:
    """Return the installed handler, if any."""
    return _active


def install_handler(handler: LogHandler | None) -> None:
    """Make ``handler`` the process-wide handler.

    The previously installed handler, when different, is closed first so its
    buffered records are flushed or discarded according to its destination.
    Passing ``None`` uninstalls without installing a replacement.
    """
    global _active
    with _lock:
        previous, _active = _active, handler
        if previous is not None and previous is not handler:
            previous.close()


def uninstall_handler() -> None:
    """Close and remove the installed handler."""
    install_handler(None)


def reset_manager() -> None:
    """Return the process-wide state to its initial, handler-less form."""
    uninstall_handler()


@contextlib.contextmanager
def installed(handler: LogHandler | None = None) -> cabc.Iterator[LogHandler]:
    """Install ``handler`` (a fresh one by default) for the ``with`` block.

    The handler is uninstalled, and therefore closed, on every exit path.
    """
    handler = LogHandler() if handler is None else handler
    install_handler(handler)
    try:
        yield handler
    finally:
        with _lock:
            if _active is handler:
                uninstall_handler()
            else:
                handler.close()


def log(
    level: LevelArg,
    message: object,
    location: SourceLocation | None = None,
) -> None:
    """Route a record to the installed handler.

    Without an installed handler only ``FATAL`` records are written, straight
    to stderr; anything less severe is dropped.
    """
    record = LogRecord(parse_level(level), str(message), location)
    handler = _active
    if handler is not None:
        handler.emit(record)
    elif record.level is LogLevel.FATAL:
        with contextlib.suppress(OSError, ValueError):
            sys.stderr.write(format_record(record) + "\n")
            sys.stderr.flush()


def info(message: object) -> None:
    log(LogLevel.INFO, message, caller_location())


def warning(message: object) -> None:
    log(LogLevel.WARNING, message, caller_location())


def error(message: object) -> None:
    log(LogLevel.ERROR, message, caller_location())


def fatal(message: object) -> None:
    """Log ``message`` at ``FATAL``; the process keeps running."""
    log(LogLevel.FATAL, message, caller_location())


def set_output_stream(stream: typ.TextIO | None, *, owned: bool = True) -> None:
    """Direct the installed handler's output to ``stream``.

    ``None`` selects the discard sink. With ``owned`` the handler closes the
    stream when it is replaced or the handler is closed. Does nothing when no
    handler is installed.
    """
    handler = _active
    if handler is None:
        return
    handler.set_destination(
        None if stream is None else StreamDestination(stream, owned=owned)
    )


def set_output_file(path: str | PathLike[str]) -> None:
    """Direct the installed handler's output to the file at ``path``."""
    handler = _active
    if handler is not None:
        handler.set_destination(FileDestination(path))


def set_output_stream_to_stderr() -> None:
    """Direct the installed handler's output to stderr."""
    handler = _active
    if handler is not None:
        handler.set_destination_to_stderr()


__all__ = [
    "error",
    "fatal",
    "get_handler",
    "info",
    "install_handler",
    "installed",
    "log",
    "reset_manager",
    "set_output_file",
    "set_output_stream",
    "set_output_stream_to_stderr",
    "uninstall_handler",
    "warning",
]
