"""Logging setup shared by the API and the projection engine."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str | int = "INFO") -> None:
    """Install one stream handler on the root logger; safe to call repeatedly."""
    if isinstance(level, str):
        level_value = getattr(logging, level.upper(), logging.INFO)
    else:
        level_value = level

    root = logging.getLogger()
    if not getattr(root, "_sipcalc_logging_initialized", False):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root._sipcalc_logging_initialized = True
    root.setLevel(level_value)

    # werkzeug request lines duplicate our own request logs
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
