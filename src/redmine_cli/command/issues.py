"""``issues`` command: list issues, filtered by options."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import Any

from redmine_cli.command.base import Option
from redmine_cli.command.issue import NOT_ASSIGNED, display_name
from redmine_cli.command.redmine import RedmineCommand
from redmine_cli.common.errors import ValidationError
from redmine_cli.common.formatting import ellipsize, parse_timestamp, time_difference_as_text, unquote

logger = logging.getLogger(__name__)

INVALID_PROJECT_MESSAGE = "'%s' is not a valid project."
INVALID_PRIORITY_MESSAGE = "'%s' is not a valid priority."
INVALID_ASSIGNEE_MESSAGE = "'%s' is not a valid assignee."
INVALID_STATUS_MESSAGE = "'%s' is not a valid status."
INVALID_TRACKER_MESSAGE = "'%s' is not a valid tracker."

SUBJECT_LENGTH = 24

# Maps an option value to one (name, value) query parameter of GET /issues.json
ParameterHandler = Callable[[str], tuple[str, str]]


class IssuesCommand(RedmineCommand):
    """List issues as a table.

    Each option is translated into a query parameter of the issues endpoint,
    see https://www.redmine.org/projects/redmine/wiki/Rest_Issues.
    """

    HEADER = ["ID", "Tracker", "Status", "Priority", "Assignee", "Updated", "Subject"]

    def __init__(self, **kwargs):
        super().__init__(
            "issues",
            "Display issues.",
            "Display open issues, optionally filtered by project, priority, assignee, status or tracker.",
            [],
            [
                Option("project", "Only display issues for the specified project."),
                Option("priority", "Only display issues with specified priority."),
                Option("assignee", "Only display issues for the specified assignee."),
                Option("status", "Only display issues with the specified status."),
                Option("tracker", "Only display issues for the specified tracker."),
            ],
            **kwargs,
        )

        self._handlers: dict[str, ParameterHandler] = {
            "project": self._project_parameter,
            "priority": self._priority_parameter,
            "assignee": self._assignee_parameter,
            "status": self._status_parameter,
            "tracker": self._tracker_parameter,
        }

    def process(self, tokens: Sequence[str]) -> None:
        super().process(tokens)

        parameters = self.build_parameters()
        logger.debug(f"Issue filter parameters: {parameters}")

        issues = self.client.get_issues(parameters)
        self.print_table([self._build_row(issue) for issue in issues], header=self.HEADER)

    def build_parameters(self) -> dict[str, str]:
        """Translate the supplied options into query parameters.

        Raises:
            ValidationError: If an option value does not name a known entity
        """
        parameters = {}
        for option in self.options:
            if option.value is None:
                continue
            key, value = self._handlers[option.name](unquote(option.value))
            parameters[key] = value
        return parameters

    def _project_parameter(self, value: str) -> tuple[str, str]:
        project = self.client.resolve_project(value)
        if project is None:
            raise ValidationError(INVALID_PROJECT_MESSAGE % value)
        return "project_id", str(project["id"])

    def _priority_parameter(self, value: str) -> tuple[str, str]:
        priority = self.client.resolve_priority(value)
        if priority is None:
            raise ValidationError(INVALID_PRIORITY_MESSAGE % value)
        return "priority_id", str(priority["id"])

    def _assignee_parameter(self, value: str) -> tuple[str, str]:
        if value.lower() == "me":
            return "assigned_to_id", "me"
        if re.fullmatch(r"[0-9]+", value):
            return "assigned_to_id", value
        raise ValidationError(INVALID_ASSIGNEE_MESSAGE % value)

    def _status_parameter(self, value: str) -> tuple[str, str]:
        status = self.client.resolve_status(value)
        if status is None:
            raise ValidationError(INVALID_STATUS_MESSAGE % value)
        return "status_id", str(status["id"])

    def _tracker_parameter(self, value: str) -> tuple[str, str]:
        tracker = self.client.resolve_tracker(value)
        if tracker is None:
            raise ValidationError(INVALID_TRACKER_MESSAGE % value)
        return "tracker_id", str(tracker["id"])

    def _build_row(self, issue: dict[str, Any]) -> list[str]:
        updated_on = parse_timestamp(issue.get("updated_on") or issue["created_on"])
        return [
            f"#{issue['id']}",
            display_name(issue.get("tracker")),
            display_name(issue.get("status")),
            display_name(issue.get("priority")),
            display_name(issue.get("assigned_to"), NOT_ASSIGNED),
            f"{time_difference_as_text(updated_on)} ago",
            ellipsize(issue.get("subject", ""), SUBJECT_LENGTH),
        ]
