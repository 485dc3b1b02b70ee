"""Utility modules for fsmspec."""

from fsmspec.utils.logging import configure_logging, get_logger
from fsmspec.utils.result import ConfigError, Err, Ok, Result, ResultError

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Result
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "ConfigError",
]
