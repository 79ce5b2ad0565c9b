"""Destinations a :class:`~earlylog.handler.LogHandler` can write to.

A destination receives one formatted line per record. Stream-backed
destinations remember the first failure they hit (``failed`` and ``error``)
instead of raising it, so the handler can report the failure on stderr and
keep the host process running.
"""

from __future__ import annotations

import sys
import typing as typ
from os import PathLike, fspath
from pathlib import Path

from .errors import HandlerIOError
from .record import LogRecord, format_record


class Destination:
    """Base class for handler destinations.

    Subclasses override :meth:`_write_line`; the base class turns any
    exception it raises into a recorded failure.
    """

    def __init__(self) -> None:
        self.failed = False
        self.error: HandlerIOError | None = None

    def describe(self) -> str:
        """Return a short human-readable name used in failure reports."""
        return type(self).__name__

    def open(self) -> bool:
        """Prepare the destination for writing; return ``False`` on failure."""
        return not self.failed

    def write(self, record: LogRecord) -> bool:
        """Write ``record`` as one line; return ``False`` if it was not written."""
        if self.failed:
            return False
        try:
            self._write_line(format_record(record) + "\n")
        except Exception as exc:  # noqa: BLE001 - any stream error marks the destination failed
            self.mark_failed(exc)
            return False
        return True

    def close(self) -> None:
        """Release the destination's resources."""

    def _write_line(self, line: str) -> None:
        raise NotImplementedError

    def mark_failed(self, exc: BaseException) -> None:
        """Record ``exc`` as the cause of failure and invalidate the destination."""
        self.failed = True
        if isinstance(exc, HandlerIOError):
            self.error = exc
            return
        err = HandlerIOError(f"{self.describe()}: {exc}")
        err.__cause__ = exc
        self.error = err


def _is_standard_stream(stream: object) -> bool:
    return any(
        stream is std
        for std in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__)
    )


class StreamDestination(Destination):
    """Write to a text stream such as an open file or :class:`io.StringIO`.

    Parameters
    ----------
    stream : typ.TextIO
        The stream to write to.
    owned : bool, default True
        Close ``stream`` when the destination is released. The standard
        streams, current or original, are only ever flushed, never closed.

    """

    def __init__(self, stream: typ.TextIO | None, *, owned: bool = True) -> None:
        super().__init__()
        self._stream = stream
        self._owned = owned

    @property
    def stream(self) -> typ.TextIO | None:
        return self._stream

    def describe(self) -> str:
        name = getattr(self._stream, "name", None)
        if isinstance(name, str):
            return f"stream {name!r}"
        return f"stream {type(self._stream).__name__}"

    def open(self) -> bool:
        if self.failed:
            return False
        stream = self._stream
        if stream is None or getattr(stream, "closed", False):
            self.mark_failed(HandlerIOError(f"{self.describe()} is closed"))
            return False
        writable = getattr(stream, "writable", None)
        if callable(writable) and not writable():
            self.mark_failed(HandlerIOError(f"{self.describe()} is not writable"))
            return False
        return True

    def _write_line(self, line: str) -> None:
        stream = self._stream
        if stream is None:
            msg = f"{self.describe()} is not open"
            raise HandlerIOError(msg)
        stream.write(line)
        flush = getattr(stream, "flush", None)
        if callable(flush):
            flush()

    def close(self) -> None:
        stream, self._stream = self._stream, None
        if stream is None:
            return
        if self._owned and not _is_standard_stream(stream):
            stream.close()
        elif not getattr(stream, "closed", False):
            stream.flush()


class FileDestination(StreamDestination):
    """Write to a file opened when the destination is assigned.

    Opening is deferred to :meth:`open` so an unwritable path becomes a
    reported failure rather than an exception at construction time.
    """

    def __init__(
        self,
        path: str | PathLike[str],
        *,
        mode: str = "a",
        encoding: str = "utf-8",
    ) -> None:
        super().__init__(None, owned=True)
        self._path = Path(fspath(path))
        self._mode = mode
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> str:
        return f"file {str(self._path)!r}"

    def open(self) -> bool:
        if self.failed:
            return False
        if self._stream is not None:
            return True
        try:
            self._stream = self._path.open(self._mode, encoding=self._encoding)
        except OSError as exc:
            self.mark_failed(exc)
            return False
        return True


class StderrDestination(Destination):
    """Write to whatever ``sys.stderr`` is at the time of each write."""

    def describe(self) -> str:
        return "stderr"

    def _write_line(self, line: str) -> None:
        sys.stderr.write(line)
        sys.stderr.flush()

    def close(self) -> None:
        sys.stderr.flush()


class DiscardDestination(Destination):
    """Silently drop every record."""

    def describe(self) -> str:
        return "discard"

    def write(self, record: LogRecord) -> bool:
        return True


__all__ = [
    "Destination",
    "DiscardDestination",
    "FileDestination",
    "StderrDestination",
    "StreamDestination",
]
