"""Logging setup for the loaders and the CLI. The matching core does not log."""
from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures the console handler on first call."""
    global _configured
    if not _configured:
        _configure()
        _configured = True
    return logging.getLogger(name)


def _configure() -> None:
    from hirematch import config

    level = getattr(logging, config.HIREMATCH_LOG_LEVEL, logging.INFO)

    root = logging.getLogger("hirematch")
    root.setLevel(level)

    if root.handlers:
        return

    # stderr keeps --json output on stdout clean
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    root.addHandler(console)
