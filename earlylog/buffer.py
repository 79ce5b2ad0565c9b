"""Ordered holding area for records logged before a destination exists."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

if typ.TYPE_CHECKING:
    from .record import LogRecord


class RecordBuffer:
    """Append-only sequence of records awaiting a destination.

    The buffer is owned by exactly one :class:`~earlylog.handler.LogHandler`
    and is not synchronised on its own; the handler's lock covers it.
    """

    def __init__(self) -> None:
        self._records: list[LogRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __iter__(self) -> cabc.Iterator[LogRecord]:
        return iter(tuple(self._records))

    def append(self, record: LogRecord) -> None:
        """Add ``record`` after every record already held."""
        self._records.append(record)

    def drain_to(self, write: cabc.Callable[[LogRecord], bool]) -> bool:
        """Write every buffered record in order, then empty the buffer.

        Parameters
        ----------
        write : Callable[[LogRecord], bool]
            Called once per record; returns ``False`` when the record could
            not be written.

        Returns
        -------
        bool
            ``True`` when every record was written. Draining stops at the
            first failed write and the remaining records are dropped.

        """
        records, self._records = self._records, []
        return all(write(record) for record in records)

    def discard(self) -> None:
        """Drop every buffered record without writing it."""
        self._records.clear()


__all__ = ["RecordBuffer"]
