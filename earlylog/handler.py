"""The buffering log handler.

:class:`LogHandler` holds records in a :class:`~earlylog.buffer.RecordBuffer`
until a destination is assigned, then flushes them there and writes every
later record straight through. A handler that is closed without ever being
given a destination dumps its buffer to stderr so nothing logged during
startup is lost.

Nothing in this module raises to the caller because of a stream problem.
Failures are reported as an ``ERROR`` line on stderr instead.
"""

from __future__ import annotations

import sys
import threading
import typing as typ

from .buffer import RecordBuffer
from .destinations import Destination, DiscardDestination, StderrDestination
from .levels import LevelArg, LogLevel, level_name, parse_level
from .record import LogRecord, SourceLocation, format_record

if typ.TYPE_CHECKING:
    import types

FAILURE_NOTICE: typ.Final[str] = "Provided stream failed"


def _write_to_stderr(record: LogRecord) -> bool:
    """Write ``record`` to stderr, falling back to ``sys.__stderr__``."""
    line = format_record(record) + "\n"
    for stream in (sys.stderr, sys.__stderr__):
        if stream is None:
            continue
        try:
            stream.write(line)
            stream.flush()
        except Exception:  # noqa: BLE001, S112 - try the next stream
            continue
        return True
    return False


def report_failure(destination: Destination) -> None:
    """Write the failure notice for ``destination`` to stderr."""
    cause = destination.error
    message = f"{FAILURE_NOTICE}: {cause}" if cause is not None else FAILURE_NOTICE
    _write_to_stderr(LogRecord(LogLevel.ERROR, message))


class LogHandler:
    """Buffer records until a destination is chosen, then stream them there.

    The handler starts with no destination. Records emitted in that state are
    buffered. :meth:`set_destination` flushes the buffer into the new
    destination (or discards it for the discard sink) and every later record
    is written directly. :meth:`close` releases the destination, or flushes
    the buffer to stderr when no destination was ever set.

    All state is guarded by one re-entrant lock so records may be emitted
    from several threads.

    Examples
    --------
    >>> import io
    >>> from earlylog import LogLevel, StreamDestination
    >>> out = io.StringIO()
    >>> with LogHandler() as handler:
    ...     handler.log(LogLevel.INFO, "starting")
    ...     handler.set_destination(StreamDestination(out, owned=False))
    >>> out.getvalue()
    'INFO starting\\n'

    """

    level_name = staticmethod(level_name)

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._buffer = RecordBuffer()
        self._destination: Destination | None = None
        self._closed = False

    def __enter__(self) -> LogHandler:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        self.close()

    @property
    def destination(self) -> Destination | None:
        """The active destination, or ``None`` while records are buffered."""
        return self._destination

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def buffered(self) -> int:
        """Number of records waiting for a destination."""
        with self._lock:
            return len(self._buffer)

    def log(
        self,
        level: LevelArg,
        message: object,
        location: SourceLocation | None = None,
    ) -> None:
        """Build a record from ``level`` and ``message`` and emit it.

        Raises
        ------
        ValueError
            If ``level`` names no known level.

        """
        self.emit(LogRecord(parse_level(level), str(message), location))

    def emit(self, record: LogRecord) -> None:
        """Buffer ``record`` or write it to the active destination."""
        with self._lock:
            if self._closed:
                _write_to_stderr(record)
                return
            destination = self._destination
            if destination is None:
                self._buffer.append(record)
                return
            if destination.failed:
                _write_to_stderr(record)
                return
            if not destination.write(record):
                report_failure(destination)
                _write_to_stderr(record)

    def set_destination(self, destination: Destination | None) -> None:
        """Make ``destination`` the target of every record.

        ``None`` or a :class:`DiscardDestination` drops the buffer and every
        later record. Any other destination is opened and receives the
        buffered records in order; if that fails the failure is reported on
        stderr and the destination stays assigned. The previous destination is
        released.
        """
        if destination is None:
            destination = DiscardDestination()
        with self._lock:
            if self._closed:
                return
            previous = self._destination
            if isinstance(destination, DiscardDestination):
                self._buffer.discard()
            else:
                opened = destination.open()
                drained = self._buffer.drain_to(destination.write)
                if not (opened and drained):
                    report_failure(destination)
            self._destination = destination
            if previous is not None and previous is not destination:
                self._release(previous)

    def set_destination_to_stderr(self) -> None:
        """Send the buffer and every later record to stderr."""
        self.set_destination(StderrDestination())

    def close(self) -> None:
        """Tear the handler down.

        Releases the destination, or writes the buffered records to stderr if
        no destination was ever set. Calling ``close`` again does nothing.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            destination, self._destination = self._destination, None
            if destination is None:
                if not self._buffer.drain_to(_write_to_stderr):
                    _write_to_stderr(
                        LogRecord(LogLevel.ERROR, f"{FAILURE_NOTICE}: stderr")
                    )
                return
            self._release(destination)

    def _release(self, destination: Destination) -> None:
        try:
            destination.close()
        except Exception as exc:  # noqa: BLE001 - reported below
            destination.mark_failed(exc)
            report_failure(destination)


__all__ = ["FAILURE_NOTICE", "LogHandler", "report_failure"]
