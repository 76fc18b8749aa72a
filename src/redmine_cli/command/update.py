"""``update`` command: change fields of an issue with ``key=value`` pairs."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from redmine_cli.command.base import Argument
from redmine_cli.command.redmine import RedmineCommand
from redmine_cli.common.errors import ValidationError

INVALID_KEYVALUE_MESSAGE = "'%s' is not a valid key/value pair."
INVALID_KEY_MESSAGE = "'%s' is not a valid key."
INVALID_STATUS_MESSAGE = "'%s' is not a valid status."
INVALID_TRACKER_MESSAGE = "'%s' is not a valid tracker."
INVALID_PRIORITY_MESSAGE = "'%s' is not a valid priority."
ISSUE_UPDATE_SUCCESS_MESSAGE = "Issue #%d successfully updated."

KEY_VALUE_PATTERN = re.compile(r"(?P<key>[A-Za-z_]+)=(?P<value>.+)", re.DOTALL)
MAX_ASSIGNMENTS = 4


class UpdateIssueCommand(RedmineCommand):
    """Update subject, description, status, tracker or priority of an issue.

    Example:
        redmine update 42 status=Closed "subject=Crash on start"

    Values are stored exactly as typed, so quotes that reach the command
    (``description="Text"``) become part of the text. Status, tracker and
    priority names are looked up verbatim.
    """

    KEYS = ("subject", "description", "status", "tracker", "priority")

    def __init__(self, **kwargs):
        arguments = [
            Argument.number("id", "The ID of the issue to update."),
            Argument.text("key=value", "Field to update, one of: " + ", ".join(self.KEYS) + "."),
        ]
        arguments += [
            Argument.text("key=value", "Additional field to update.", optional=True)
            for _ in range(MAX_ASSIGNMENTS - 1)
        ]
        super().__init__(
            "update",
            "Update issue.",
            "Update one or more fields of an issue. Status, tracker and priority are given by name.",
            arguments,
            **kwargs,
        )

    def process(self, tokens: Sequence[str]) -> None:
        super().process(tokens)

        issue_id = self.arguments[0].value
        assignments = [argument.value for argument in self.arguments[1:] if argument.has_value]

        fields: dict[str, Any] = {}
        for assignment in assignments:
            key, value = self._parse_assignment(assignment)
            fields.update(self._to_field(key, value))

        self.client.update_issue(issue_id, fields)
        self.println(ISSUE_UPDATE_SUCCESS_MESSAGE, issue_id)

    def _parse_assignment(self, assignment: str) -> tuple[str, str]:
        match = KEY_VALUE_PATTERN.fullmatch(assignment)
        if match is None:
            raise ValidationError(INVALID_KEYVALUE_MESSAGE % assignment)

        key = match.group("key")
        if key not in self.KEYS:
            raise ValidationError(INVALID_KEY_MESSAGE % key)

        return key, match.group("value")

    def _to_field(self, key: str, value: str) -> dict[str, Any]:
        if key == "status":
            status = self.client.resolve_status(value)
            if status is None:
                raise ValidationError(INVALID_STATUS_MESSAGE % value)
            return {"status_id": status["id"]}

        if key == "tracker":
            tracker = self.client.resolve_tracker(value)
            if tracker is None:
                raise ValidationError(INVALID_TRACKER_MESSAGE % value)
            return {"tracker_id": tracker["id"]}

        if key == "priority":
            priority = self.client.resolve_priority(value)
            if priority is None:
                raise ValidationError(INVALID_PRIORITY_MESSAGE % value)
            return {"priority_id": priority["id"]}

        return {key: value}
