"""structlog setup for the desktop app.

Console output in development, JSON lines otherwise. When LOG_FILE is set the
same lines are also appended to that file; a file that cannot be opened or
written just turns file logging off.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

import ui_config as cfg

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class _TeeWriter:
    def __init__(self, file_path: str) -> None:
        self._file: IO[str] | None = None
        try:
            self._file = open(file_path, "a", encoding="utf-8")  # noqa: SIM115
        except OSError as exc:
            print(f"WARNING: Could not open log file {file_path!r}: {exc}", file=sys.stderr)

    def write(self, data: str) -> None:
        sys.stdout.write(data)
        if self._file is None:
            return
        try:
            self._file.write(data)
            self._file.flush()
        except (OSError, ValueError):
            self._file = None
            print("WARNING: Log file write failed. File logging disabled.", file=sys.stderr)

    def flush(self) -> None:
        sys.stdout.flush()


def configure_logging(
    *,
    environment: str | None = None,
    level: str | None = None,
    log_file: str | None = None,
) -> None:
    environment = environment or cfg.ENVIRONMENT
    level_name = (level or cfg.LOG_LEVEL).upper()
    log_file = cfg.LOG_FILE if log_file is None else log_file

    renderer = (
        structlog.dev.ConsoleRenderer()
        if environment == "development"
        else structlog.processors.JSONRenderer()
    )

    if log_file:
        logger_factory = structlog.PrintLoggerFactory(file=_TeeWriter(log_file))  # type: ignore[arg-type]
    else:
        logger_factory = structlog.PrintLoggerFactory()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS.get(level_name, logging.INFO)),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=True,
    )
