"""Jira REST API client for project versions.

Provides a lightweight REST client that reads a project's versions and
persists release state. It is both the version source and the release sink
of ReleaseService.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple
from urllib.parse import quote

from constants import Constants
from common.http_client import TransportError, get_json, safe_put
from versioning.models import InvalidInputError, Version


class JiraError(Exception):
    """Jira could not be reached or rejected a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class JiraAuthError(JiraError):
    """Jira answered 401/403."""


def _raise_for_status(status: int, context: str) -> None:
    if status in (401, 403):
        raise JiraAuthError(f"{context}: authentication failed or permission denied (HTTP {status})", status)
    if not 200 <= status < 300:
        raise JiraError(f"{context}: unexpected HTTP {status}", status)


class JiraClient:
    """Lightweight REST client for Jira version operations.

    Authentication: basic auth when a username is given (Jira Cloud e-mail
    plus API token), a bearer token otherwise (personal access token), or
    anonymous when neither is set.
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        token: Optional[str] = None,
        verify: bool = True,
    ):
        """Initialize Jira client.

        Args:
            base_url: Jira site URL, e.g. https://example.atlassian.net
            username: Account name or e-mail for basic auth
            token: API token, password or personal access token
            verify: Verify TLS certificates
        """
        if not base_url:
            raise InvalidInputError("Jira URL is required")
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.token = token
        self.verify = verify

    def _api_url(self, path: str) -> str:
        return f"{self.base_url}{Constants.JIRA_API_BASE_PATH}{path}"

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers including bearer authorization when applicable."""
        headers = {"Accept": "application/json"}
        if self.token and not self.username:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_auth(self) -> Optional[Tuple[str, str]]:
        if self.username:
            return (self.username, self.token or "")
        return None

    def fetch_versions(self, project_key: str) -> List[Version]:
        """Fetch all versions of a project.

        Args:
            project_key: Jira project key, e.g. "PROJ"

        Returns:
            Versions in the order Jira returned them

        Raises:
            JiraError: on transport failure or a non-2xx answer
        """
        if not project_key:
            raise InvalidInputError("Jira project key is required")
        url = self._api_url(
            Constants.JIRA_PROJECT_VERSIONS_PATH.format(key=quote(project_key, safe=""))
        )
        context = f"Fetching versions of {project_key}"
        try:
            status, _, data = get_json(
                url, headers=self._get_headers(), auth=self._get_auth(), verify=self.verify
            )
        except TransportError as exc:
            raise JiraError(f"{context}: {exc}") from exc

        _raise_for_status(status, context)
        if not isinstance(data, list):
            raise JiraError(f"{context}: response is not a JSON list", status)
        return [Version.from_json(item) for item in data]

    def persist(self, version: Version) -> None:
        """Persist the released state of ``version``.

        Raises:
            InvalidInputError: if the version carries no Jira id
            JiraError: on transport failure or a non-2xx answer
        """
        if not version.id:
            raise InvalidInputError(f"Version {version.name} has no Jira id")
        url = self._api_url(Constants.JIRA_VERSION_PATH.format(id=quote(version.id, safe="")))
        context = f"Releasing version {version.name}"
        try:
            res = safe_put(
                url,
                context="jira",
                payload=version.to_release_payload(),
                headers=self._get_headers(),
                auth=self._get_auth(),
                verify=self.verify,
            )
        except TransportError as exc:
            raise JiraError(f"{context}: {exc}") from exc
        _raise_for_status(res.status_code, context)
