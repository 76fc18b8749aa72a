"""Base class for commands that talk to a Redmine server."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from rich.console import Console

from redmine_cli.command.base import Argument, Command, Option
from redmine_cli.common.config import RedmineConfig
from redmine_cli.common.errors import ConfigurationError
from redmine_cli.redmine.client import RedmineClient

ClientFactory = Callable[[RedmineConfig], RedmineClient]


def create_client(config: RedmineConfig) -> RedmineClient:
    """Build a client from a complete configuration."""
    return RedmineClient(base_url=config.url, api_key=config.api_key, verify_ssl=config.verify_ssl)


class RedmineCommand(Command):
    """Command that requires a configured Redmine connection.

    The client is created on first use, so commands can be registered (and
    listed by ``help``) without a server being configured.
    """

    NOT_CONNECTED_MESSAGE = (
        "You are not connected to a Redmine server. Set REDMINE_URL and REDMINE_API_KEY in your environment or .env file."
    )

    def __init__(
        self,
        name: str,
        description: str,
        long_description: str = "",
        arguments: Sequence[Argument] = (),
        options: Sequence[Option] = (),
        *,
        config: RedmineConfig,
        console: Console | None = None,
        client_factory: ClientFactory = create_client,
    ):
        super().__init__(name, description, long_description, arguments, options, console)
        self.config = config
        self._client_factory = client_factory
        self._client: RedmineClient | None = None

    @property
    def client(self) -> RedmineClient:
        if self._client is None:
            self._client = self._client_factory(self.config)
        return self._client

    def process(self, tokens: Sequence[str]) -> None:
        if not self.config.is_connected:
            raise ConfigurationError(self.NOT_CONNECTED_MESSAGE)
        super().process(tokens)
