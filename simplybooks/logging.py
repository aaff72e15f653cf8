"""
Logging setup for SimplyBooks.

All records go through the root logger. The console shows either
human-readable lines (development) or one JSON object per line (staging,
production), chosen by LOG_CONSOLE_FORMAT. Errors are additionally
written as JSON to LOG_FILE_PATH.

Request-scoped fields are attached in two ways:

- the correlation ID set by CorrelationIDMiddleware
- arbitrary fields stored with set_log_context(), e.g.
  ``set_log_context(author_id=3)``
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any

from simplybooks.constants import MAX_LOG_SIZE_BYTES
from simplybooks.settings import app_settings

log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Present on every LogRecord; anything else was passed through `extra`
_BUILTIN_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "correlation_id"}

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_correlation_id() -> str:
    """Correlation ID of the current request, "" when there is none."""
    # Imported lazily: the middleware package imports this module
    from simplybooks.middlewares.correlation_id import (
        get_correlation_id as current_id,
    )

    return current_id()


def set_log_context(**fields: Any) -> None:
    """Add fields to every record logged from the current context."""
    log_context.set({**log_context.get(), **fields})


def get_log_context() -> dict[str, Any]:
    return log_context.get()


def clear_log_context() -> None:
    log_context.set({})


def _json_safe(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class StructuredJSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Keys: timestamp, level, logger, message, module, function, line,
    environment, request_id (inside a request), the log context fields,
    any ``extra`` fields and exception (when exc_info is set). Values that
    are not JSON serializable are stored as their ``str()``. Oversized
    messages are cut to keep the line under MAX_LOG_SIZE_BYTES.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "environment": app_settings.ENV.value,
        }

        request_id = get_correlation_id()
        if request_id:
            payload["request_id"] = request_id

        payload.update(get_log_context())

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (key, _json_safe(value))
            for key, value in record.__dict__.items()
            if key not in _BUILTIN_RECORD_KEYS
        )

        line = json.dumps(payload)
        if len(line) > MAX_LOG_SIZE_BYTES:
            keep = MAX_LOG_SIZE_BYTES - 1000
            payload["message"] = payload["message"][:keep] + "... [TRUNCATED]"
            line = json.dumps(payload)
        return line


class HumanReadableFormatter(logging.Formatter):
    """
    Console lines for development.

    INFO records are short; everything else also shows where the record
    was emitted. The correlation ID is shown in brackets, "-" outside a
    request.
    """

    SHORT_FMT = "%(asctime)s - [%(correlation_id)s] %(levelname)s: %(message)s"
    LONG_FMT = (
        "%(asctime)s - [%(correlation_id)s] %(levelname)s: "
        "%(module)s.%(funcName)s:%(lineno)d - %(message)s"
    )

    def __init__(self) -> None:
        super().__init__(datefmt=DATE_FORMAT)
        self._short = logging.Formatter(self.SHORT_FMT, datefmt=DATE_FORMAT)
        self._long = logging.Formatter(self.LONG_FMT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.correlation_id = get_correlation_id() or "-"
        formatter = self._short if record.levelno == logging.INFO else self._long
        return formatter.format(record)


def setup_logging() -> logging.Logger:
    """Configure the root logger once at import time and return it."""
    root = logging.getLogger()
    root.setLevel(app_settings.LOG_LEVEL.upper())
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    if app_settings.LOG_CONSOLE_FORMAT.lower() == "json":
        console.setFormatter(StructuredJSONFormatter())
    else:
        console.setFormatter(HumanReadableFormatter())
    root.addHandler(console)

    try:
        error_file = logging.FileHandler(app_settings.LOG_FILE_PATH)
    except OSError as e:
        root.warning(f"Error log file disabled: {e}")
    else:
        error_file.setLevel(logging.ERROR)
        error_file.setFormatter(StructuredJSONFormatter())
        root.addHandler(error_file)

    return root


logger = setup_logging()
