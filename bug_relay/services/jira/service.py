"""
Jira Cloud REST API (v3) service.

Handles the Jira interactions needed to relay a bug report:
- Metadata lookups for the modal (issue types, projects, priorities)
- User lookup by email for assignee resolution
- Issue creation and attachment upload
- Diagnostic calls (create-meta, auth check)

Metadata lookups never raise: they log and return an empty result so the
modal still opens. Issue creation and attachment upload raise JiraAPIError.
"""

import logging
from typing import Any

import httpx

from bug_relay.config import settings
from bug_relay.services.http_client import get_http_client
from bug_relay.services.jira.exceptions import JiraAPIError
from bug_relay.services.jira.helpers import browse_url, map_priority, plain_text_to_adf
from bug_relay.services.jira.types import (
    CreatedIssue,
    IssueDraft,
    JiraIssueType,
    JiraPriority,
    JiraProject,
)

logger = logging.getLogger(__name__)


class JiraService:
    """Service for interacting with the Jira Cloud REST API."""

    API_PATH = "/rest/api/3"

    def __init__(
        self,
        host: str | None = None,
        username: str | None = None,
        api_token: str | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.host = host if host is not None else settings.jira_host
        self.base_url = f"https://{self.host}{self.API_PATH}"
        self._auth = httpx.BasicAuth(
            username if username is not None else settings.jira_username,
            api_token if api_token is not None else settings.jira_api_token,
        )
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client or get_http_client()

    def _headers(self, is_form_data: bool = False) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if is_form_data:
            # Jira rejects multipart uploads without the XSRF opt-out header
            headers["X-Atlassian-Token"] = "no-check"
        else:
            headers["Content-Type"] = "application/json"
        return headers

    async def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET a JSON resource, raising JiraAPIError on transport or HTTP failure."""
        try:
            response = await self.client.get(
                f"{self.base_url}{path}",
                params=params,
                headers=self._headers(),
                auth=self._auth,
            )
        except httpx.RequestError as e:
            raise JiraAPIError(f"Request to Jira failed: {e}") from e

        _raise_for_status(response)
        return _json(response)

    # ----- Pure helpers (re-exposed for callers holding a service) -----

    @staticmethod
    def plain_text_to_adf(text: str) -> dict[str, Any]:
        return plain_text_to_adf(text)

    @staticmethod
    def map_priority(priority: str) -> str:
        return map_priority(priority)

    # ----- Metadata lookups (never raise) -----

    async def fetch_issue_types(self) -> list[JiraIssueType]:
        """Fetch all issue types visible to the bot user."""
        try:
            data = await self._get_json("/issuetype")
        except JiraAPIError as e:
            logger.error(f"[jira] Error fetching issue types: {e}")
            return []

        logger.debug(f"[jira] Issue types: {data}")
        return [
            JiraIssueType(id=str(item["id"]), name=item.get("name", ""))
            for item in _records(data, "id")
        ]

    async def fetch_projects(self) -> list[JiraProject]:
        """Fetch all projects visible to the bot user."""
        try:
            data = await self._get_json("/project")
        except JiraAPIError as e:
            logger.error(f"[jira] Error fetching projects: {e}")
            return []

        return [
            JiraProject(id=str(item["id"]), key=item["key"], name=item.get("name", item["key"]))
            for item in _records(data, "id", "key")
        ]

    async def fetch_priorities(self) -> list[JiraPriority]:
        """Fetch the instance's priority scheme."""
        try:
            data = await self._get_json("/priority")
        except JiraAPIError as e:
            logger.error(f"[jira] Error fetching priorities: {e}")
            return []

        return [
            JiraPriority(id=str(item["id"]), name=item.get("name", ""))
            for item in _records(data, "id")
        ]

    async def find_user_by_email(self, email: str) -> dict[str, Any] | None:
        """
        Find a Jira user by email address.

        Jira's user search is a fuzzy query; the first result is taken as the
        match. Returns None when nothing matches or the search fails.
        """
        try:
            users = await self._get_json("/user/search", params={"query": email})
        except JiraAPIError as e:
            logger.error(f"[jira] Error finding user by email: {e}")
            return None

        matches = _records(users, "accountId")
        if matches:
            return matches[0]
        return None

    # ----- Diagnostics (raise) -----

    async def get_issue_create_meta(self, project_key: str) -> dict[str, Any]:
        """Fetch issue creation metadata (issue types and their fields) for a project."""
        return await self._get_json(
            "/issue/createmeta",
            params={"projectKeys": project_key, "expand": "projects.issuetypes.fields"},
        )

    async def check_auth(self) -> int:
        """Verify the configured credentials against /myself. Returns the HTTP status."""
        try:
            response = await self.client.get(
                f"{self.base_url}/myself", headers=self._headers(), auth=self._auth
            )
        except httpx.RequestError as e:
            raise JiraAPIError(f"Request to Jira failed: {e}") from e

        _raise_for_status(response)
        return response.status_code

    # ----- Mutations (raise) -----

    async def create_issue(self, draft: IssueDraft) -> CreatedIssue:
        """
        Create a new issue.

        Raises:
            JiraAPIError: On transport failure, non-2xx response, or a response
                without an issue key.
        """
        payload = draft.to_payload()
        logger.debug(f"[jira] Create issue payload: {payload}")

        try:
            response = await self.client.post(
                f"{self.base_url}/issue",
                json=payload,
                headers=self._headers(),
                auth=self._auth,
            )
        except httpx.RequestError as e:
            raise JiraAPIError(f"Request to Jira failed: {e}") from e

        _raise_for_status(response)
        data = _json(response)
        issue_key = data.get("key")
        if not issue_key:
            raise JiraAPIError(f"No issue key returned: {data}", response.status_code)

        logger.info(f"[jira] Created issue {issue_key}")
        return CreatedIssue(
            key=issue_key,
            id=str(data.get("id", "")),
            url=browse_url(issue_key, self.host),
        )

    async def attach_file(
        self,
        issue_key: str,
        content: bytes,
        filename: str,
        content_type: str,
    ) -> list[dict[str, Any]]:
        """
        Upload a file as an attachment to an issue.

        Returns:
            Attachment metadata as returned by Jira (one entry per uploaded file)

        Raises:
            JiraAPIError: On transport failure or non-2xx response
        """
        files = {"file": (filename, content, content_type or "application/octet-stream")}
        try:
            response = await self.client.post(
                f"{self.base_url}/issue/{issue_key}/attachments",
                files=files,
                headers=self._headers(is_form_data=True),
                auth=self._auth,
            )
        except httpx.RequestError as e:
            raise JiraAPIError(f"Request to Jira failed: {e}") from e

        _raise_for_status(response)
        return _json(response)


def _raise_for_status(response: httpx.Response) -> None:
    """Raise JiraAPIError for any non-2xx response, carrying Jira's error text."""
    if response.is_success:
        return
    raise JiraAPIError(
        f"Jira API error {response.status_code}: {response.text}",
        response.status_code,
    )


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise JiraAPIError(f"Invalid JSON from Jira: {e}", response.status_code) from e


def _records(data: Any, *required: str) -> list[dict[str, Any]]:
    """Objects in a Jira list response that carry every required key.

    Anything else (an error object instead of a list, nulls, partial entries)
    is dropped and logged.
    """
    if not isinstance(data, list):
        logger.warning(f"[jira] Expected a list response, got {type(data).__name__}")
        return []
    records = [
        item for item in data if isinstance(item, dict) and all(key in item for key in required)
    ]
    if len(records) < len(data):
        logger.warning(f"[jira] Skipped {len(data) - len(records)} malformed entries")
    return records
