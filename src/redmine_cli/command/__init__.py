"""Command framework and the commands of the Redmine CLI."""

from redmine_cli.command.base import Argument, ArgumentType, Command, Option
from redmine_cli.command.help import HelpCommand
from redmine_cli.command.issue import IssueCommand
from redmine_cli.command.issues import IssuesCommand
from redmine_cli.command.open import Browser, OpenCommand
from redmine_cli.command.redmine import RedmineCommand, create_client
from redmine_cli.command.update import UpdateIssueCommand

__all__ = [
    "Argument",
    "ArgumentType",
    "Browser",
    "Command",
    "HelpCommand",
    "IssueCommand",
    "IssuesCommand",
    "OpenCommand",
    "Option",
    "RedmineCommand",
    "UpdateIssueCommand",
    "create_client",
]
