"""Exception types raised or recorded by earlylog."""

from __future__ import annotations


class HandlerConfigError(ValueError):
    """Raised when an output configuration is contradictory or malformed."""


class HandlerIOError(OSError):
    """A destination could not be opened or written.

    Instances are recorded on the failing destination and rendered into the
    stderr failure report. They never reach callers of the logging API.
    """


__all__ = ["HandlerConfigError", "HandlerIOError"]
