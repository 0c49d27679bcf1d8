# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Logging for the ``cayley`` logger hierarchy.

Library modules take their logger from :func:`get_logger`, which sets up the
hierarchy from the environment the first time it is called. Entry points
call :func:`configure` to override the level or log file from their own
config.

Environment variables:
    CAYLEY_LOG_LEVEL: DEBUG / INFO (default) / WARNING / ERROR
    CAYLEY_LOG_FILE: optional path; appends plain-text log lines
"""

import logging
import os
import sys

ROOT_LOGGER = "cayley"

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_RESET = "\033[0m"

_console = None
_file = None


class _LevelColorFormatter(logging.Formatter):
    """Colours the level name of a copy of each record."""

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        color = _LEVEL_COLORS.get(record.levelno, "")
        record.levelname = f"{color}{record.levelname}{_RESET}"
        return super().format(record)


def _resolve_level(level) -> int:
    if level is None:
        level = os.environ.get("CAYLEY_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def configure(level=None, log_file=None) -> logging.Logger:
    """Sets the level and handlers of the ``cayley`` root logger.

    Safe to call repeatedly: the console handler is installed once, and the
    file handler is replaced when *log_file* names a different file.

    Args:
        level: Level name or number. Defaults to ``CAYLEY_LOG_LEVEL``.
        log_file: Path to append to. Defaults to ``CAYLEY_LOG_FILE``.

    Returns:
        The ``cayley`` root logger.
    """
    global _console, _file

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(_resolve_level(level))

    if _console is None:
        _console = logging.StreamHandler(sys.stderr)
        if hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
            _console.setFormatter(_LevelColorFormatter(CONSOLE_FORMAT))
        else:
            _console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root.addHandler(_console)

    if log_file is None:
        log_file = os.environ.get("CAYLEY_LOG_FILE")
    if log_file and (_file is None or _file.baseFilename != os.path.abspath(log_file)):
        if _file is not None:
            root.removeHandler(_file)
            _file.close()
        _file = logging.FileHandler(log_file, mode="a")
        _file.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(_file)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``cayley`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.

    Returns:
        A :class:`logging.Logger` instance.
    """
    if _console is None:
        configure()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
