"""Tests for the Jira REST client."""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from common.http_client import TransportError
from jira_rest.client import JiraAuthError, JiraClient, JiraError
from versioning.models import InvalidInputError, Version

VERSIONS_JSON = [
    {"id": "10000", "name": "1.0", "archived": False, "released": True,
     "releaseDate": "2026-01-15", "projectId": 10000},
    {"id": "10001", "name": "1.1", "archived": False, "released": False, "projectId": 10000},
]


@pytest.fixture
def client():
    """Client using basic auth."""
    return JiraClient("https://jira.example.com/", username="me@example.com", token="secret")


class TestFetchVersions:
    """GET /rest/api/2/project/{key}/versions."""

    @patch("jira_rest.client.get_json")
    def test_parses_versions(self, mock_get_json, client):
        """Versions are built from the JSON list in Jira order."""
        mock_get_json.return_value = (200, {}, VERSIONS_JSON)

        versions = client.fetch_versions("PROJ")

        url = mock_get_json.call_args[0][0]
        assert url == "https://jira.example.com/rest/api/2/project/PROJ/versions"
        assert mock_get_json.call_args[1]["auth"] == ("me@example.com", "secret")
        assert [v.name for v in versions] == ["1.0", "1.1"]
        assert versions[0].released is True
        assert versions[0].release_date == date(2026, 1, 15)
        assert versions[1].id == "10001"
        assert versions[1].project_id == 10000

    @patch("jira_rest.client.get_json")
    def test_auth_failure(self, mock_get_json, client):
        """401 maps to JiraAuthError."""
        mock_get_json.return_value = (401, {}, None)
        with pytest.raises(JiraAuthError) as excinfo:
            client.fetch_versions("PROJ")
        assert excinfo.value.status_code == 401

    @patch("jira_rest.client.get_json")
    def test_missing_project(self, mock_get_json, client):
        """404 maps to JiraError."""
        mock_get_json.return_value = (404, {}, None)
        with pytest.raises(JiraError):
            client.fetch_versions("NOPE")

    @patch("jira_rest.client.get_json")
    def test_unexpected_payload(self, mock_get_json, client):
        """A non-list body is rejected."""
        mock_get_json.return_value = (200, {}, {"errorMessages": []})
        with pytest.raises(JiraError):
            client.fetch_versions("PROJ")

    @patch("jira_rest.client.get_json")
    def test_transport_failure(self, mock_get_json, client):
        """Network failures surface as JiraError."""
        mock_get_json.side_effect = TransportError("unreachable")
        with pytest.raises(JiraError):
            client.fetch_versions("PROJ")

    def test_project_key_required(self, client):
        """An empty key fails before any request."""
        with pytest.raises(InvalidInputError):
            client.fetch_versions("")


class TestPersist:
    """PUT /rest/api/2/version/{id}."""

    @patch("jira_rest.client.safe_put")
    def test_puts_release_payload(self, mock_put, client):
        """The released flag and date are sent for the version id."""
        mock_put.return_value = MagicMock(status_code=200)
        version = Version("1.1", id="10001")
        version.mark_released(date(2026, 10, 18))

        client.persist(version)

        url = mock_put.call_args[0][0]
        kwargs = mock_put.call_args[1]
        assert url == "https://jira.example.com/rest/api/2/version/10001"
        assert kwargs["payload"] == {"released": True, "releaseDate": "2026-10-18"}
        assert kwargs["auth"] == ("me@example.com", "secret")

    @patch("jira_rest.client.safe_put")
    def test_permission_denied(self, mock_put, client):
        """403 maps to JiraAuthError."""
        mock_put.return_value = MagicMock(status_code=403)
        version = Version("1.1", id="10001", released=True, release_date=date(2026, 10, 18))
        with pytest.raises(JiraAuthError):
            client.persist(version)

    def test_version_without_id(self, client):
        """Persisting needs the Jira id."""
        with pytest.raises(InvalidInputError):
            client.persist(Version("1.1"))


class TestAuthHeaders:
    """Auth selection."""

    def test_bearer_token_without_username(self):
        """A token alone is sent as a bearer token."""
        client = JiraClient("https://jira.example.com", token="pat")
        assert client._get_headers()["Authorization"] == "Bearer pat"
        assert client._get_auth() is None

    def test_basic_auth_with_username(self, client):
        """With a username no Authorization header is built by hand."""
        assert "Authorization" not in client._get_headers()

    def test_anonymous(self):
        """No credentials, no auth."""
        client = JiraClient("https://jira.example.com")
        assert "Authorization" not in client._get_headers()
        assert client._get_auth() is None

    def test_url_required(self):
        """A client without a URL cannot be built."""
        with pytest.raises(InvalidInputError):
            JiraClient("")
