"""Logging setup shared by the work-log modules."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
APP_LOGGERS = ("utils", "store", "totals", "import_data", "export", "settings", "app")


def get_logger(name: str, log_file: str | None = None) -> logging.Logger:
    """Get or create a logger writing warnings to stderr.

    A DEBUG-level file handler is added when log_file is given or the
    WORKLOG_LOG environment variable names a file.
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_path = log_file or os.environ.get("WORKLOG_LOG")
    if log_path:
        try:
            file_handler = logging.FileHandler(Path(log_path), mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot open log file %s: %s", log_path, e)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == path
        for h in logger.handlers
    )


def add_file_handler(log_file: str) -> bool:
    """Send DEBUG output of every work-log logger to log_file.

    Loggers already writing to log_file are left alone. Returns False,
    with a warning, when the file cannot be opened.
    """
    path = Path(os.path.abspath(log_file))
    targets = [get_logger(name) for name in APP_LOGGERS]
    targets = [t for t in targets if not _has_file_handler(t, path)]
    if not targets:
        return True

    try:
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as e:
        get_logger("app").warning("Cannot open log file %s: %s", log_file, e)
        return False

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    for target in targets:
        target.addHandler(handler)
    return True
