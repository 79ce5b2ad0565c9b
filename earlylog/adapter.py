"""Bridge from the standard :mod:`logging` module into earlylog.

Attach :class:`EarlyLogHandler` to a stdlib logger so that libraries which
log through :mod:`logging` during startup have their records buffered and
routed like every other earlylog record.

Example
-------
>>> import logging
>>> logging.getLogger("startup").addHandler(EarlyLogHandler())

"""

from __future__ import annotations

import logging
import typing as typ

from . import manager
from .levels import from_stdlib_level
from .record import LogRecord, SourceLocation

if typ.TYPE_CHECKING:
    from .handler import LogHandler


class EarlyLogHandler(logging.Handler):
    """Forward stdlib records to an earlylog handler.

    Parameters
    ----------
    target : LogHandler, optional
        Handler to forward to. When omitted, records go to whichever handler
        is installed at the time of each record.
    level : int, default logging.NOTSET
        Minimum stdlib level handled.

    """

    def __init__(
        self, target: LogHandler | None = None, level: int = logging.NOTSET
    ) -> None:
        super().__init__(level)
        self._target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            location = (
                SourceLocation(record.pathname, record.lineno)
                if record.pathname
                else None
            )
            level = from_stdlib_level(record.levelno)
            if self._target is None:
                manager.log(level, message, location)
            else:
                self._target.emit(LogRecord(level, message, location))
        except Exception:  # noqa: BLE001 - stdlib handler contract
            self.handleError(record)


__all__ = ["EarlyLogHandler"]
