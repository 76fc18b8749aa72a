"""Shared fixtures for command tests."""

import io
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from redmine_cli.common.config import RedmineConfig
from redmine_cli.redmine.client import RedmineClient


def _timestamp(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


@pytest.fixture
def console():
    """Console writing into a string buffer, wide enough to avoid wrapping."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def output(console):
    """Return everything printed to the console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def config():
    """Connected Redmine configuration."""
    return RedmineConfig(url="http://test.redmine.com", api_key="1234567890")


@pytest.fixture
def client():
    """Redmine client double with lookup tables."""
    client = MagicMock(spec=RedmineClient)
    client.issue_url.side_effect = lambda issue_id: f"http://test.redmine.com/issues/{issue_id}"

    statuses = {"new": {"id": 1, "name": "New"}, "closed": {"id": 2, "name": "Closed"}}
    trackers = {"bug": {"id": 1, "name": "Bug"}, "feature": {"id": 2, "name": "Feature"}}
    priorities = {"normal": {"id": 2, "name": "Normal"}, "high": {"id": 3, "name": "High"}}
    projects = {"website": {"id": 7, "name": "Website", "identifier": "web"}}

    client.resolve_status.side_effect = lambda name: statuses.get(name.lower())
    client.resolve_tracker.side_effect = lambda name: trackers.get(name.lower())
    client.resolve_priority.side_effect = lambda name: priorities.get(name.lower())
    client.resolve_project.side_effect = lambda name: projects.get(name.lower())
    return client


@pytest.fixture
def command_kwargs(config, console, client):
    """Keyword arguments shared by every Redmine command."""
    return {"config": config, "console": console, "client_factory": lambda _config: client}


@pytest.fixture
def sample_issue():
    """Issue as returned by GET /issues/1.json, created an hour ago."""
    now = datetime.now(timezone.utc)
    return {
        "id": 1,
        "project": {"id": 7, "name": "Website"},
        "tracker": {"id": 1, "name": "Bug"},
        "status": {"id": 1, "name": "New"},
        "priority": {"id": 2, "name": "Normal"},
        "author": {"id": 5, "name": "John Doe"},
        "assigned_to": {"id": 5, "name": "John Doe"},
        "subject": "Subject of #1",
        "description": "Description of #1",
        "created_on": _timestamp(now - timedelta(hours=1, seconds=5)),
        "updated_on": _timestamp(now - timedelta(minutes=10, seconds=5)),
    }
