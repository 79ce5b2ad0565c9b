#!/usr/bin/env python3
# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "earlylog @ {path = \"..\"}",
# ]
# ///
"""Demonstrate buffering records until the log destination is known."""

from __future__ import annotations

import logging

import earlylog


def main() -> None:
    """Log during "startup", then pick a destination from the environment.

    Records logged before :func:`earlylog.configure_output` are held in the
    handler's buffer. Set ``EARLYLOG_OUTPUT`` to a path, ``stderr`` or
    ``discard`` to choose where they end up; leave it unset and they are
    written to stderr when the handler is uninstalled.
    """
    logging.getLogger("startup").addHandler(earlylog.EarlyLogHandler())

    with earlylog.installed():
        earlylog.info("parsing command line")
        logging.getLogger("startup").warning("no rc file found")

        config = earlylog.output_config_from_env()
        if config is not None:
            earlylog.configure_output(config)

        earlylog.info("startup complete")


if __name__ == "__main__":
    main()
