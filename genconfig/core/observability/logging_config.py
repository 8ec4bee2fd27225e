"""
Logging configuration for the genconfig command.

Only the ``genconfig`` package logger is configured; records still
propagate to the root logger so an embedding application (or pytest)
sees them too.

Environment:
    GENCONFIG_LOG_LEVEL       console level (default WARNING)
    GENCONFIG_LOG_FILE        optional log file
    GENCONFIG_LOG_FILE_LEVEL  file level (default: the console level)
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

PACKAGE_LOGGER = "genconfig"

ENV_LEVEL = "GENCONFIG_LOG_LEVEL"
ENV_FILE = "GENCONFIG_LOG_FILE"
ENV_FILE_LEVEL = "GENCONFIG_LOG_FILE_LEVEL"

# Warnings and errors read like the command's own output
_FMT_CONSOLE = "genconfig: %(message)s"

# Used below WARNING and for files
_FMT_DETAIL = "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d %(message)s"
_DATEFMT_DETAIL = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogSettings:
    """Where genconfig logs go and how much of it."""

    level: int = logging.WARNING
    log_file: str | None = None
    file_level: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LogSettings:
        env = os.environ if environ is None else environ
        level = level_from_name(env.get(ENV_LEVEL))
        file_level = env.get(ENV_FILE_LEVEL)
        return cls(
            level=level,
            log_file=env.get(ENV_FILE) or None,
            file_level=level_from_name(file_level) if file_level else None,
        )


def setup_logging(settings: LogSettings | None = None) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    Safe to call more than once; earlier handlers are closed and replaced.

    Returns:
        The configured ``genconfig`` logger.
    """
    settings = settings or LogSettings.from_env()
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(settings.level)
    if settings.level < logging.WARNING:
        console.setFormatter(logging.Formatter(_FMT_DETAIL, datefmt=_DATEFMT_DETAIL))
    else:
        console.setFormatter(logging.Formatter(_FMT_CONSOLE))
    logger.addHandler(console)

    effective = settings.level
    if settings.log_file:
        file_level = settings.file_level if settings.file_level is not None else settings.level
        effective = min(effective, file_level)

        fh = logging.FileHandler(settings.log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DETAIL, datefmt=_DATEFMT_DETAIL))
        logger.addHandler(fh)

    logger.setLevel(effective)
    return logger


def level_from_name(name: str | None) -> int:
    """``"debug"`` → ``logging.DEBUG``; unknown or empty names give WARNING."""
    if not name:
        return logging.WARNING
    numeric = logging.getLevelName(name.strip().upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
