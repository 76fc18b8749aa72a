"""Redmine REST API client with authentication, pagination and name resolution."""

from __future__ import annotations

import logging
from typing import Any

import requests

from redmine_cli.common.decorators import retry
from redmine_cli.common.errors import APIError

logger = logging.getLogger(__name__)


class RedmineClient:
    """Client for the Redmine REST API (JSON format).

    Handles authentication, pagination and error handling. Lookup tables that
    rarely change (statuses, trackers, priorities, projects) are cached for the
    lifetime of the client.
    """

    DEFAULT_TIMEOUT = 30
    MAX_PAGE_SIZE = 100

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
    ):
        """Initialize the Redmine client.

        Args:
            base_url: Redmine instance URL (e.g., https://redmine.example.com)
            api_key: API access key shown on the user's "My account" page
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates (set to False for self-signed certs)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.verify_ssl = verify_ssl

        self._session = requests.Session()
        self._session.headers.update(self._get_headers())
        self._session.verify = verify_ssl
        self._cache: dict[str, list[dict[str, Any]]] = {}

    def _get_headers(self) -> dict[str, str]:
        """Get authentication headers for API requests."""
        return {
            "X-Redmine-API-Key": self.api_key,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _build_url(self, endpoint: str) -> str:
        """Build full API URL from endpoint.

        Args:
            endpoint: Resource path (e.g., issues/1 or /trackers)

        Returns:
            Full URL with the .json format suffix
        """
        endpoint = endpoint.strip("/")
        if not endpoint.endswith(".json"):
            endpoint = f"{endpoint}.json"
        return f"{self.base_url}/{endpoint}"

    def _handle_response(self, response: requests.Response) -> dict[str, Any]:
        """Handle API response, checking for errors.

        Raises:
            APIError: If the request failed
        """
        if not response.ok:
            try:
                errors = response.json().get("errors", [])
                error_msg = ", ".join(errors) if errors else response.text
            except (ValueError, AttributeError):
                error_msg = response.text
            raise APIError(f"API request failed ({response.status_code}): {error_msg}")

        # PUT and DELETE answer with 204 No Content
        if response.status_code == 204 or not response.content:
            return {}

        return response.json()

    @retry(
        max_attempts=3,
        delay=1.0,
        exceptions=(requests.exceptions.ConnectionError, requests.exceptions.Timeout),
    )
    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        return self._session.request(method=method, url=url, timeout=self.timeout, **kwargs)

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make an API request.

        Raises:
            APIError: If the request failed
        """
        url = self._build_url(endpoint)
        logger.debug(f"{method} {url} params={params}")

        try:
            response = self._send(method, url, params=params, json=json_data)
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request failed: {e}") from e

        return self._handle_response(response)

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._request("GET", endpoint, params=params)

    def put(self, endpoint: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._request("PUT", endpoint, json_data=data)

    def list_all(
        self,
        endpoint: str,
        key: str,
        params: dict[str, Any] | None = None,
        page_size: int = MAX_PAGE_SIZE,
    ) -> list[dict[str, Any]]:
        """Fetch all items from a listing endpoint with pagination.

        Args:
            endpoint: API endpoint for listing (e.g., issues)
            key: Name of the list in the response body (e.g., issues)
            params: Additional query parameters (filters, sort)
            page_size: Number of items per page (max 100)

        Returns:
            List of all items
        """
        params = dict(params or {})
        page_size = min(page_size, self.MAX_PAGE_SIZE)
        results: list[dict[str, Any]] = []
        offset = 0

        while True:
            response = self.get(endpoint, params={**params, "limit": page_size, "offset": offset})

            data = response.get(key, [])
            results.extend(data)

            # Endpoints without pagination omit total_count
            total = response.get("total_count", len(results))
            if len(results) >= total or not data:
                break

            offset += page_size

        return results

    # Issues

    def issue_url(self, issue_id: int) -> str:
        """Web (not API) URL of an issue."""
        return f"{self.base_url}/issues/{issue_id}"

    def get_issue(self, issue_id: int) -> dict[str, Any]:
        return self.get(f"issues/{issue_id}").get("issue", {})

    def get_issues(self, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return self.list_all("issues", "issues", params=params)

    def update_issue(self, issue_id: int, fields: dict[str, Any]) -> None:
        """Update fields of an issue.

        Args:
            issue_id: Issue ID
            fields: Issue attributes to change (e.g., {"subject": "...", "status_id": 2})
        """
        self.put(f"issues/{issue_id}", data={"issue": fields})

    # Lookup tables

    def _cached(self, endpoint: str, key: str, paginated: bool = False) -> list[dict[str, Any]]:
        if endpoint not in self._cache:
            if paginated:
                self._cache[endpoint] = self.list_all(endpoint, key)
            else:
                self._cache[endpoint] = self.get(endpoint).get(key, [])
        return self._cache[endpoint]

    def get_projects(self) -> list[dict[str, Any]]:
        return self._cached("projects", "projects", paginated=True)

    def get_statuses(self) -> list[dict[str, Any]]:
        return self._cached("issue_statuses", "issue_statuses")

    def get_trackers(self) -> list[dict[str, Any]]:
        return self._cached("trackers", "trackers")

    def get_priorities(self) -> list[dict[str, Any]]:
        return self._cached("enumerations/issue_priorities", "issue_priorities")

    @staticmethod
    def _find_by_name(items: list[dict[str, Any]], name: str, *keys: str) -> dict[str, Any] | None:
        wanted = name.lower()
        for item in items:
            for key in keys or ("name",):
                value = item.get(key)
                if isinstance(value, str) and value.lower() == wanted:
                    return item
        return None

    def resolve_project(self, name: str) -> dict[str, Any] | None:
        """Find a project by name or identifier, ignoring case."""
        return self._find_by_name(self.get_projects(), name, "name", "identifier")

    def resolve_status(self, name: str) -> dict[str, Any] | None:
        return self._find_by_name(self.get_statuses(), name)

    def resolve_tracker(self, name: str) -> dict[str, Any] | None:
        return self._find_by_name(self.get_trackers(), name)

    def resolve_priority(self, name: str) -> dict[str, Any] | None:
        return self._find_by_name(self.get_priorities(), name)
