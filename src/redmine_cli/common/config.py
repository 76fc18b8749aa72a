"""Configuration management for redmine-cli."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class RedmineConfig:
    """Redmine server configuration."""

    url: str | None
    api_key: str | None
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> RedmineConfig:
        """Load configuration from environment variables.

        Expected variables:
            REDMINE_URL: Redmine server URL
            REDMINE_API_KEY: API access key of the Redmine user
            REDMINE_VERIFY_SSL: Set to "false" for self-signed certificates (optional)

        Returns:
            RedmineConfig instance
        """
        verify_ssl = os.getenv("REDMINE_VERIFY_SSL", "true").strip().lower() not in _FALSE_VALUES
        return cls(
            url=os.getenv("REDMINE_URL") or None,
            api_key=os.getenv("REDMINE_API_KEY") or None,
            verify_ssl=verify_ssl,
        )

    @property
    def is_connected(self) -> bool:
        """Whether both the server URL and the API key are known."""
        return not self.validate()

    def validate(self) -> dict[str, str]:
        """Validate configuration.

        Returns:
            Dict of field names to error messages (empty if valid)
        """
        errors = {}
        if not self.url:
            errors["url"] = "REDMINE_URL not set"
        if not self.api_key:
            errors["api_key"] = "REDMINE_API_KEY not set"
        return errors


class AppConfig:
    """Main application configuration loader."""

    def __init__(self, env_file: Path | None = None, load_env: bool = True):
        """Initialize configuration from environment.

        Args:
            env_file: Optional path to .env file. If not provided,
                     looks for .env in current directory or ~/.redmine_cli.env
            load_env: Whether to load from .env files (default True). Set False in tests.

        Besides the Redmine connection, LOG_LEVEL (default WARNING) and
        LOG_FILE (optional path that also receives log records) are read.
        """
        if load_env:
            if env_file and env_file.exists():
                load_dotenv(env_file)
            else:
                for default in [
                    Path(".env"),
                    Path.home() / ".redmine_cli.env",
                ]:
                    if default.exists():
                        load_dotenv(default)
                        break

        self.redmine = RedmineConfig.from_env()
        self.log_level = os.getenv("LOG_LEVEL", "WARNING")

        log_file = os.getenv("LOG_FILE")
        self.log_file = Path(log_file).expanduser() if log_file else None
