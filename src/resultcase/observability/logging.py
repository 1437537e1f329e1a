"""Logging helpers for result pipelines.

Uses the standard library logging package with named loggers under
"resultcase". The log_* helpers build actions for the tap combinators:

    >>> import logging
    >>> log = logging.getLogger("billing")
    >>> charge(order).on_failure(log_failure(log, "charge failed"))  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from resultcase.config import get_settings
from resultcase.errors import Error, ValidationError

ROOT_LOGGER = "resultcase"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": self.formatTime(record),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    level: str | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach one stream handler to the resultcase logger.

    Defaults come from settings (RESULTCASE_LOG_LEVEL, RESULTCASE_LOG_FORMAT).
    Calling again replaces the handler installed by the previous call.
    """
    settings = get_settings()
    level = (level or settings.effective_log_level).upper()
    fmt = fmt or settings.logging.format

    log = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in log.handlers if getattr(h, "_resultcase", False)]:
        log.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))
    handler._resultcase = True  # type: ignore[attr-defined]
    log.addHandler(handler)
    log.setLevel(level)
    return log


def log_failure(logger: logging.Logger, event: str, level: int = logging.WARNING) -> Callable[[Error], None]:
    """Action for Result.on_failure that logs the error message and code."""

    def action(error: Error) -> None:
        logger.log(level, "%s: %s (code=%s)", event, error.message, error.code or "-")

    return action


def log_invalid(
    logger: logging.Logger, event: str, level: int = logging.INFO
) -> Callable[[ValidationError], None]:
    """Action that logs every key and message of a ValidationError."""

    def action(error: ValidationError) -> None:
        if not logger.isEnabledFor(level):
            return
        for key, messages in error.items():
            for message in messages:
                logger.log(level, "%s: %s: %s", event, key or "<root>", message)

    return action
