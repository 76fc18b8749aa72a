"""``help`` command: list commands or describe one of them."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from rich.console import Console

from redmine_cli.command.base import Argument, Command
from redmine_cli.common.errors import ValidationError

INVALID_COMMAND_MESSAGE = "'%s' is not a valid command. Type 'redmine help' for usage."


class HelpCommand(Command):
    """Print the command overview, or usage of a single command.

    Works without a Redmine connection.
    """

    def __init__(self, commands: Mapping[str, Command], console: Console | None = None):
        super().__init__(
            "help",
            "Display help.",
            "Display all available commands, or the arguments and options of a single command.",
            [Argument.text("command", "The command to describe.", optional=True)],
            console=console,
        )
        self.commands = commands

    def process(self, tokens: Sequence[str]) -> None:
        super().process(tokens)

        name = self.arguments[0].value
        if name is None:
            self._print_overview()
            return

        command = self.commands.get(name)
        if command is None:
            raise ValidationError(INVALID_COMMAND_MESSAGE % name)
        self._print_command(command)

    def _print_overview(self) -> None:
        self.println("Usage: redmine <command> [<args>] [--<option>=<value>]")
        self.println()
        self.print_heading("Commands")
        self.print_table([[command.name, command.description] for command in self.commands.values()])
        self.println()
        self.println("Type 'redmine help <command>' for details on a command.")

    def _print_command(self, command: Command) -> None:
        self.println("Usage: redmine %s", command.usage)
        self.println()
        self.println(command.long_description or command.description)
        self.println()

        if command.arguments:
            self.print_heading("Arguments")
            self.print_table(
                [
                    [argument.name, argument.kind.value, argument.description + (" (optional)" if argument.optional else "")]
                    for argument in command.arguments
                ]
            )
            self.println()

        if command.options:
            self.print_heading("Options")
            self.print_table([[f"--{option.name}=<value>", option.description] for option in command.options])
            self.println()
