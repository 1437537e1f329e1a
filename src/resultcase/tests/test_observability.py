"""Tests for settings and logging helpers."""

from __future__ import annotations

import io
import json
import logging

import pytest

from resultcase import Error, Failure, Invalid, Success, ValidationError
from resultcase.config import ResultcaseSettings, clear_settings_cache, get_settings
from resultcase.observability import configure_logging, log_failure, log_invalid


@pytest.fixture
def resultcase_logger() -> object:
    """Restore the package logger after configure_logging() touches it."""
    log = logging.getLogger("resultcase")
    handlers, level = list(log.handlers), log.level
    yield log
    log.handlers[:] = handlers
    log.setLevel(level)


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_default_settings() -> None:
    settings = get_settings()

    assert isinstance(settings, ResultcaseSettings)
    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.validation.dedupe_messages is True
    assert get_settings() is settings


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESULTCASE_LOG_LEVEL", "info")
    monkeypatch.setenv("RESULTCASE_LOG_FORMAT", "json")
    clear_settings_cache()

    settings = get_settings()
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "json"
    assert settings.effective_log_level == "INFO"


def test_debug_overrides_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESULTCASE_DEBUG", "true")
    clear_settings_cache()

    assert get_settings().effective_log_level == "DEBUG"


# ═════════════════════════════════════════════════════════════════════════════
# configure_logging
# ═════════════════════════════════════════════════════════════════════════════


def test_configure_logging_text(resultcase_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging(level="INFO", fmt="text", stream=stream)

    logging.getLogger("resultcase.test").info("hello")

    assert "[INFO] resultcase.test: hello" in stream.getvalue()


def test_configure_logging_json_is_idempotent(resultcase_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging(level="DEBUG", fmt="json", stream=stream)
    configure_logging(level="DEBUG", fmt="json", stream=stream)

    logging.getLogger("resultcase.test").debug("once")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["event"] == "once"
    assert entry["level"] == "debug"
    assert entry["logger"] == "resultcase.test"


# ═════════════════════════════════════════════════════════════════════════════
# Tap Actions
# ═════════════════════════════════════════════════════════════════════════════


def test_log_failure_with_on_failure(caplog: pytest.LogCaptureFixture) -> None:
    log = logging.getLogger("app.billing")

    with caplog.at_level(logging.WARNING, logger="app.billing"):
        result = Failure(Error.create("card declined", "DECLINED"))
        assert result.on_failure(log_failure(log, "charge failed")) is result
        Success(1).on_failure(log_failure(log, "never logged"))

    assert caplog.messages == ["charge failed: card declined (code=DECLINED)"]


def test_log_invalid_logs_each_message(caplog: pytest.LogCaptureFixture) -> None:
    log = logging.getLogger("app.signup")
    error = ValidationError.from_mapping({"Name": ["required"], "Age": ["too young", "not a number"]})

    with caplog.at_level(logging.INFO, logger="app.signup"):
        Invalid(error).match(lambda _: None, log_invalid(log, "rejected"))

    assert caplog.messages == [
        "rejected: Name: required",
        "rejected: Age: too young",
        "rejected: Age: not a number",
    ]
