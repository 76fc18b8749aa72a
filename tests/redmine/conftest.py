"""Shared fixtures for Redmine client tests."""

from unittest.mock import MagicMock

import pytest

from redmine_cli.redmine.client import RedmineClient


def _make_response(status_code=200, json_data=None, text=""):
    """Build a requests.Response double."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    response.content = b"" if json_data is None else b"{...}"
    response.json.return_value = json_data if json_data is not None else {}
    return response


@pytest.fixture
def mock_client():
    """Create a Redmine client with a mocked session."""
    client = RedmineClient(base_url="https://test.redmine.local", api_key="test_api_key")
    client._session = MagicMock()
    client._session.request.return_value = _make_response(json_data={})
    return client


@pytest.fixture
def sample_statuses():
    """Sample GET /issue_statuses.json response."""
    return {
        "issue_statuses": [
            {"id": 1, "name": "New", "is_closed": False},
            {"id": 5, "name": "Closed", "is_closed": True},
        ]
    }


@pytest.fixture
def sample_projects_page():
    """Builder for GET /projects.json pages."""

    def build(projects, total_count, offset=0):
        return {"projects": projects, "total_count": total_count, "offset": offset, "limit": 100}

    return build


@pytest.fixture
def make_response():
    """Builder of requests.Response doubles."""
    return _make_response
