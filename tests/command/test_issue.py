"""Tests for the issue command."""

import pytest

from redmine_cli.command.issue import IssueCommand
from redmine_cli.common.config import RedmineConfig
from redmine_cli.common.errors import ConfigurationError, InvalidArgumentTypeError, TooFewArgumentsError


class TestIssueCommand:
    """Test displaying a single issue."""

    def test_displays_issue(self, command_kwargs, client, sample_issue, output):
        client.get_issue.return_value = sample_issue
        command = IssueCommand(**command_kwargs)

        command.process(["1"])

        client.get_issue.assert_called_once_with(1)
        text = output()
        assert "Bug #1" in text
        assert "Subject of #1" in text
        assert "Added by John Doe 1 hour ago. Updated 10 minutes ago." in text
        assert "Status" in text
        assert "Normal" in text
        assert "Description\n¯¯¯¯¯¯¯¯¯¯¯" in text
        assert "Description of #1" in text

    def test_unassigned_issue_without_description(self, command_kwargs, client, sample_issue, output):
        del sample_issue["assigned_to"]
        sample_issue["description"] = ""
        sample_issue["updated_on"] = sample_issue["created_on"]
        client.get_issue.return_value = sample_issue

        IssueCommand(**command_kwargs).process(["1"])

        text = output()
        assert "(not assigned)" in text
        assert "(not set)" in text
        assert "Updated" not in text

    def test_requires_id(self, command_kwargs, client):
        with pytest.raises(TooFewArgumentsError):
            IssueCommand(**command_kwargs).process([])
        client.get_issue.assert_not_called()

    def test_id_must_be_number(self, command_kwargs, client):
        with pytest.raises(InvalidArgumentTypeError):
            IssueCommand(**command_kwargs).process(["PIPE-1"])
        client.get_issue.assert_not_called()

    def test_requires_connection(self, command_kwargs, client):
        command_kwargs["config"] = RedmineConfig(url=None, api_key=None)

        with pytest.raises(ConfigurationError) as exc_info:
            IssueCommand(**command_kwargs).process(["1"])

        assert "not connected" in str(exc_info.value)
        client.get_issue.assert_not_called()
