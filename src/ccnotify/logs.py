"""Append-only debug log files for the hooks."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "ccnotify"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def configure_debug_logging(settings, name: str, prefix: str = "") -> Optional[logging.Handler]:
    """
    Send ccnotify log records to <data_dir>/<name>.log when debug is on.

    Args:
        settings: Settings instance (debug toggle and data_dir)
        name: Log file stem, e.g. "notification-hook"
        prefix: Text placed before every message, e.g. "STOP HOOK: "

    Returns:
        The installed file handler, or None when debug logging is off or
        the log file could not be opened

    Records written to the file are not passed on to the root logger, so
    the stderr level chosen at the entry point still applies.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not settings.debug:
        logger.addHandler(logging.NullHandler())
        return None

    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(settings.log_file(name), mode="a", encoding="utf-8")
    except OSError as e:
        print(f"Notification hook logging failed: {e}", file=sys.stderr)
        return None

    handler.setFormatter(logging.Formatter(f"[%(asctime)s] {prefix}%(message)s", DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return handler
