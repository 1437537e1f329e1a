"""Logging integration for resultcase."""

from .logging import JsonFormatter, configure_logging, log_failure, log_invalid

__all__ = ["JsonFormatter", "configure_logging", "log_failure", "log_invalid"]
