"""Levelled console logging used throughout the engine."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Severity thresholds; a message is shown when its level is at least the logger's."""

    ALL = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    DEVELOPMENT = 6
    NONE = 99


@dataclass
class Logger:
    """Writes ``[TAG]: message`` lines for messages at or above ``level``.

    Messages use printf-style placeholders filled from the extra arguments.
    When ``stream`` is None the current ``sys.stdout`` is used.
    """

    level: int = LogLevel.ALL
    stream: TextIO | None = None

    def _log(self, level: LogLevel, tag: str, message: str, args: tuple) -> None:
        if level < self.level:
            return
        text = message % args if args else message
        out = self.stream if self.stream is not None else sys.stdout
        out.write(f"[{tag}]: {text}\n")

    def log_dev(self, message: str, *args) -> None:
        """Log a development trace message."""
        self._log(LogLevel.DEVELOPMENT, "DEV", message, args)

    def log_fatal(self, message: str, *args) -> None:
        """Log a fatal error."""
        self._log(LogLevel.FATAL, "FATAL", message, args)

    def log_error(self, message: str, *args) -> None:
        """Log an error."""
        self._log(LogLevel.ERROR, "ERROR", message, args)

    def log_warn(self, message: str, *args) -> None:
        """Log a warning."""
        self._log(LogLevel.WARN, "WARNING", message, args)

    def log_info(self, message: str, *args) -> None:
        """Log an informational message."""
        self._log(LogLevel.INFO, "INFO", message, args)

    def log_debug(self, message: str, *args) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, "DEBUG", message, args)


default_logger = Logger()