"""``issue`` command: show the details of a single issue."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from redmine_cli.command.base import Argument
from redmine_cli.command.redmine import RedmineCommand
from redmine_cli.common.formatting import parse_timestamp, time_difference_as_text

NOT_ASSIGNED = "(not assigned)"
NOT_SET = "(not set)"


def display_name(reference: dict[str, Any] | None, default: str = "") -> str:
    """Name of a nested ``{"id": .., "name": ..}`` reference of an issue."""
    if not reference:
        return default
    return reference.get("name", default)


class IssueCommand(RedmineCommand):
    def __init__(self, **kwargs):
        super().__init__(
            "issue",
            "Display issue details.",
            "Display the header, status, priority, assignee and description of an issue.",
            [Argument.number("id", "The ID of the issue to display.")],
            **kwargs,
        )

    def process(self, tokens: Sequence[str]) -> None:
        super().process(tokens)

        issue = self.client.get_issue(self.arguments[0].value)

        self._print_header(issue)
        self._print_details(issue)
        self._print_description(issue)

    def _print_header(self, issue: dict[str, Any]) -> None:
        self.println("%s #%d", display_name(issue.get("tracker")), issue["id"])
        self.println(issue.get("subject", ""))

        created_on = parse_timestamp(issue["created_on"])
        updated_on = parse_timestamp(issue.get("updated_on") or issue["created_on"])

        updated_text = ""
        if created_on < updated_on:
            updated_text = f"Updated {time_difference_as_text(updated_on)} ago."

        self.println(
            "Added by %s %s ago. %s",
            display_name(issue.get("author"), "Anonymous"),
            time_difference_as_text(created_on),
            updated_text,
        )
        self.println()

    def _print_details(self, issue: dict[str, Any]) -> None:
        row = [
            display_name(issue.get("status")),
            display_name(issue.get("priority")),
            display_name(issue.get("assigned_to"), NOT_ASSIGNED),
        ]
        self.print_table([row], header=["Status", "Priority", "Assignee"])
        self.println()

    def _print_description(self, issue: dict[str, Any]) -> None:
        self.print_heading("Description")
        self.println(issue.get("description") or NOT_SET)
        self.println()
