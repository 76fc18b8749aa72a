"""Command-line client for the Redmine issue tracker."""

__version__ = "0.1.0"

from redmine_cli.common import (
    APIError,
    AppConfig,
    ConfigurationError,
    RedmineCliError,
    ValidationError,
    setup_logging,
)

__all__ = [
    "__version__",
    "APIError",
    "AppConfig",
    "ConfigurationError",
    "RedmineCliError",
    "ValidationError",
    "setup_logging",
]
