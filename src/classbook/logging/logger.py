# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
Logger setup for classbook.

This module configures Python's standard logging module for classbook,
enhanced with structured logging: ``extra`` fields and any context bound
with ``log_context`` are appended to each line as ``key=value`` pairs, or
emitted as one JSON object per line.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from classbook.logging.config import LoggingSettings
from classbook.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Generator

ROOT_LOGGER_NAME = "classbook"

# Context variable for storing log context data
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data."""
        extra: dict[str, Any] = dict(_log_context.get())
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                extra[key] = value

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **{k: self._format_value(v) for k, v in extra.items()},
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])
        return json.dumps(log_data, ensure_ascii=False)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message
        ctx_str = " ".join(
            f"{k}={self._quote(self._format_value(v))}" for k, v in extra.items()
        )
        return f"{message} {ctx_str}"

    @staticmethod
    def _quote(value: Any) -> str:
        text = str(value)
        # Quote strings that contain spaces
        if " " in text or not text:
            return json.dumps(text, ensure_ascii=False)
        return text

    @staticmethod
    def _format_value(value: Any) -> Any:
        """Reduce a context value to something JSON and text friendly."""
        if value is None or isinstance(value, bool | int | float | str):
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, enum.Enum):
            return value.name
        return str(value)


@contextlib.contextmanager
def log_context(**kwargs: Any) -> Generator[None]:
    """Bind context fields to every log line emitted inside the block.

    Example:
        with log_context(command="add-task"):
            parse_task(name, description)
    """
    token = _log_context.set({**_log_context.get(), **kwargs})
    try:
        yield
    finally:
        _log_context.reset(token)


def current_log_context() -> dict[str, Any]:
    """Return a copy of the context currently bound by ``log_context``."""
    return dict(_log_context.get())


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Install the structured formatter on the classbook root logger.

    Calling this again replaces the handler it installed earlier, so it is
    safe to call once per settings change.

    Args:
        settings: Logging settings; loaded from the environment when omitted

    Returns:
        The configured ``classbook`` logger
    """
    settings = settings or LoggingSettings.load()
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, "_classbook_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        StructuredFormatter(
            json_format=settings.json_format,
            include_timestamp=settings.include_timestamp,
            include_level=settings.include_level,
        )
    )
    handler._classbook_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(LogLevel.from_string(settings.level).to_stdlib_level())
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the classbook namespace.

    Args:
        name: Logger name, usually ``__name__``; names outside the
            ``classbook`` namespace are nested under it
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
