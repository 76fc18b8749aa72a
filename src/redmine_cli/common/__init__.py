"""Core utilities for redmine-cli."""

from redmine_cli.common.config import AppConfig, RedmineConfig
from redmine_cli.common.decorators import retry
from redmine_cli.common.errors import (
    APIError,
    ConfigurationError,
    InvalidArgumentTypeError,
    InvalidOptionError,
    RedmineCliError,
    TooFewArgumentsError,
    TooManyArgumentsError,
    ValidationError,
)
from redmine_cli.common.logging import setup_logging

__all__ = [
    "AppConfig",
    "RedmineConfig",
    "RedmineCliError",
    "ConfigurationError",
    "APIError",
    "ValidationError",
    "TooFewArgumentsError",
    "TooManyArgumentsError",
    "InvalidOptionError",
    "InvalidArgumentTypeError",
    "setup_logging",
    "retry",
]
