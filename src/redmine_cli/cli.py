"""Command-line interface for redmine-cli.

The first token names the command; everything after it is handed to that
command's :meth:`~redmine_cli.command.base.Command.process` untouched, so the
command framework (not click) validates positional arguments and
``--name=value`` options.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from redmine_cli.command.base import Command
from redmine_cli.command.help import INVALID_COMMAND_MESSAGE, HelpCommand
from redmine_cli.command.issue import IssueCommand
from redmine_cli.command.issues import IssuesCommand
from redmine_cli.command.open import Browser, OpenCommand
from redmine_cli.command.redmine import ClientFactory, create_client
from redmine_cli.command.update import UpdateIssueCommand
from redmine_cli.common.config import AppConfig, RedmineConfig
from redmine_cli.common.errors import RedmineCliError, ValidationError
from redmine_cli.common.logging import setup_logging

logger = logging.getLogger(__name__)

INVALID_ARGUMENT_MESSAGE = "Invalid argument. Type 'redmine help' for usage."


class RedmineCli:
    """Registry of commands and dispatcher of a single invocation."""

    def __init__(
        self,
        config: RedmineConfig,
        console: Console | None = None,
        client_factory: ClientFactory = create_client,
        browser: Browser | None = None,
    ):
        self.config = config
        self.console = console or Console()
        self.commands: dict[str, Command] = {}

        shared = {"config": config, "console": self.console, "client_factory": client_factory}
        for command in (
            HelpCommand(self.commands, self.console),
            IssueCommand(**shared),
            IssuesCommand(**shared),
            OpenCommand(browser=browser, **shared),
            UpdateIssueCommand(**shared),
        ):
            self.commands[command.name] = command

    def handle_command(self, tokens: Sequence[str] | None) -> None:
        """Run the command named by the first token with the remaining tokens.

        Raises:
            ValidationError: If no command or an unknown command is given
            RedmineCliError: Whatever the command itself raises
        """
        if not tokens:
            raise ValidationError(INVALID_ARGUMENT_MESSAGE)

        name, *arguments = tokens
        command = self.commands.get(name)
        if command is None:
            raise ValidationError(INVALID_COMMAND_MESSAGE % name)

        logger.debug(f"Running command '{name}' with {arguments}")
        command.process(arguments)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    }
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .env configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output (DEBUG level)")
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def main(config, verbose, tokens):
    """
    Redmine CLI - work with Redmine issues from the terminal.

    \b
    Configuration:
        Set REDMINE_URL and REDMINE_API_KEY in your environment,
        a .env file or ~/.redmine_cli.env. LOG_LEVEL and LOG_FILE
        are optional.

    \b
    Examples:
        redmine help
        redmine issues --project=Website --assignee=me
        redmine issue 42
        redmine update 42 status=Closed
        redmine open 42
    """
    console = Console()
    app_config = AppConfig(env_file=config)

    log_level = logging.DEBUG if verbose else app_config.log_level
    setup_logging("redmine_cli", level=log_level, log_file=app_config.log_file)

    try:
        RedmineCli(app_config.redmine, console).handle_command(list(tokens))
    except RedmineCliError as e:
        logger.debug("Command failed", exc_info=True)
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
