"""earlylog package.

Buffers log records produced before an output destination is known and
routes them once one is chosen.
"""

from __future__ import annotations

from .adapter import EarlyLogHandler
from .buffer import RecordBuffer
from .config import OutputConfig, configure_output, output_config_from_env
from .destinations import (
    Destination,
    DiscardDestination,
    FileDestination,
    StderrDestination,
    StreamDestination,
)
from .errors import HandlerConfigError, HandlerIOError
from .handler import FAILURE_NOTICE, LogHandler
from .levels import LogLevel, from_stdlib_level, level_name, parse_level
from .manager import (
    error,
    fatal,
    get_handler,
    info,
    install_handler,
    installed,
    log,
    reset_manager,
    set_output_file,
    set_output_stream,
    set_output_stream_to_stderr,
    uninstall_handler,
    warning,
)
from .record import LogRecord, SourceLocation, caller_location, format_record

__all__ = [
    "FAILURE_NOTICE",
    "Destination",
    "DiscardDestination",
    "EarlyLogHandler",
    "FileDestination",
    "HandlerConfigError",
    "HandlerIOError",
    "LogHandler",
    "LogLevel",
    "LogRecord",
    "OutputConfig",
    "RecordBuffer",
    "SourceLocation",
    "StderrDestination",
    "StreamDestination",
    "caller_location",
    "configure_output",
    "error",
    "fatal",
    "format_record",
    "from_stdlib_level",
    "get_handler",
    "info",
    "install_handler",
    "installed",
    "level_name",
    "log",
    "output_config_from_env",
    "parse_level",
    "reset_manager",
    "set_output_file",
    "set_output_stream",
    "set_output_stream_to_stderr",
    "uninstall_handler",
    "warning",
]
