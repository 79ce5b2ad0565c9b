"""Choosing the output destination from code or the environment.

:func:`configure_output` mirrors the shape of ``logging.basicConfig``: pass an
:class:`OutputConfig` or keyword arguments naming exactly one destination.
:func:`output_config_from_env` builds the same configuration from an
environment variable so launchers can pick the destination without code.

Example
-------
>>> from earlylog import installed
>>> with installed():
...     configure_output(discard=True)

"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import os
import sys
import typing as typ

from . import manager
from .errors import HandlerConfigError

DEFAULT_ENV_VAR: typ.Final[str] = "EARLYLOG_OUTPUT"
_STDERR_VALUES: typ.Final[frozenset[str]] = frozenset({"stderr", "-"})
_DISCARD_VALUES: typ.Final[frozenset[str]] = frozenset({"discard", "none", "null"})


@dataclasses.dataclass
class OutputConfig:
    """Configuration parameters for :func:`configure_output`."""

    filename: str | os.PathLike[str] | None = None
    stream: typ.TextIO | None = None
    stderr: bool = False
    discard: bool = False

    def choices(self) -> list[str]:
        """Return the names of the destinations this configuration selects."""
        chosen = []
        if self.filename is not None:
            chosen.append("filename")
        if self.stream is not None:
            chosen.append("stream")
        if self.stderr:
            chosen.append("stderr")
        if self.discard:
            chosen.append("discard")
        return chosen


def configure_output(
    config: OutputConfig | None = None, /, **kwargs: object
) -> None:
    """Apply an output destination to the installed handler.

    Parameters
    ----------
    config : OutputConfig, optional
        Aggregated configuration. When provided, keyword arguments are
        rejected.
    **kwargs : object
        Supported keys mirror the dataclass fields: ``filename``, ``stream``,
        ``stderr`` and ``discard``.

    Raises
    ------
    TypeError
        If an unknown keyword is supplied or both ``config`` and keywords
        are given.
    HandlerConfigError
        If zero or several destinations are selected, or ``stream`` is not
        writable.

    Notes
    -----
    Does nothing beyond validation when no handler is installed.

    """
    allowed = {field.name for field in dataclasses.fields(OutputConfig)}
    unknown = set(kwargs) - allowed
    if unknown:
        name = next(iter(unknown))
        msg = f"configure_output() got an unexpected keyword argument {name!r}"
        raise TypeError(msg)
    if config is not None and kwargs:
        msg = "configure_output() takes either an OutputConfig or keywords"
        raise TypeError(msg)
    if config is None:
        config = OutputConfig(**typ.cast("dict[str, typ.Any]", kwargs))

    _validate_output_config(config)

    if config.discard:
        manager.set_output_stream(None)
    elif config.stderr or config.stream is sys.stderr:
        manager.set_output_stream_to_stderr()
    elif config.stream is not None:
        manager.set_output_stream(config.stream, owned=False)
    else:
        manager.set_output_file(typ.cast("str | os.PathLike[str]", config.filename))


def _validate_output_config(config: OutputConfig) -> None:
    chosen = config.choices()
    if not chosen:
        msg = "configure_output() needs one of filename, stream, stderr or discard"
        raise HandlerConfigError(msg)
    if len(chosen) > 1:
        msg = f"Cannot specify more than one destination, got {', '.join(chosen)}"
        raise HandlerConfigError(msg)
    if config.stream is not None and not callable(getattr(config.stream, "write", None)):
        msg = f"stream must have a callable 'write' method, got {config.stream!r}"
        raise HandlerConfigError(msg)


def output_config_from_env(
    environ: cabc.Mapping[str, str] | None = None,
    variable: str = DEFAULT_ENV_VAR,
) -> OutputConfig | None:
    """Read the output destination from ``variable`` in ``environ``.

    ``"stderr"`` (or ``"-"``) selects stderr, ``"discard"``, ``"none"`` or
    ``"null"`` select the discard sink, and any other non-empty value is taken
    as a file path. Returns ``None`` when the variable is unset or blank.
    """
    env = os.environ if environ is None else environ
    value = env.get(variable, "").strip()
    if not value:
        return None
    lowered = value.lower()
    if lowered in _STDERR_VALUES:
        return OutputConfig(stderr=True)
    if lowered in _DISCARD_VALUES:
        return OutputConfig(discard=True)
    return OutputConfig(filename=value)


__all__ = [
    "DEFAULT_ENV_VAR",
    "OutputConfig",
    "configure_output",
    "output_config_from_env",
]
