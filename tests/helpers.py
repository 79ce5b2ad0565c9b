"""Shared helpers for the test suite."""

from __future__ import annotations

import io
import typing as typ

if typ.TYPE_CHECKING:
    import pytest


class FailingStream(io.StringIO):
    """A text stream whose writes always fail."""

    def write(self, s: str) -> int:
        msg = "disk full"
        raise OSError(msg)


class CloseFailingStream(io.StringIO):
    """A text stream whose first ``close`` fails."""

    def __init__(self) -> None:
        super().__init__()
        self.close_attempts = 0

    def close(self) -> None:
        self.close_attempts += 1
        if self.close_attempts == 1:
            msg = "close failed"
            raise OSError(msg)
        super().close()


def stderr_lines(capsys: pytest.CaptureFixture[str]) -> list[str]:
    """Return the captured stderr lines and reset the capture.

    Parameters
    ----------
    capsys : pytest.CaptureFixture[str]
        The active capture fixture.

    Returns
    -------
    list[str]
        Lines written to ``sys.stderr`` since the last read.

    """
    return capsys.readouterr().err.splitlines()
