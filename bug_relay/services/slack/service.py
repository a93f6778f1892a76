"""
Slack Web API service.

Thin bearer-token wrapper over the Slack methods the relay needs:
views.open, users.info, chat.postMessage, plus authenticated downloads of
private file URLs. Slack reports most failures as HTTP 200 with
`{"ok": false, "error": "..."}`; those are raised as SlackAPIError.
"""

import logging
from typing import Any

import httpx

from bug_relay.config import settings
from bug_relay.services.http_client import get_http_client
from bug_relay.services.slack.exceptions import SlackAPIError

logger = logging.getLogger(__name__)


class SlackService:
    """Service for interacting with the Slack Web API."""

    def __init__(
        self,
        token: str | None = None,
        client: httpx.AsyncClient | None = None,
        api_url: str | None = None,
    ):
        self.token = token if token is not None else settings.slack_bot_token
        self.api_url = (api_url or settings.slack_api_url).rstrip("/")
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client or get_http_client()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json; charset=utf-8",
        }

    async def _call(
        self,
        method: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Call a Web API method and unwrap the `ok` envelope."""
        url = f"{self.api_url}/{method}"
        try:
            if json is not None:
                response = await self.client.post(url, json=json, headers=self._headers())
            else:
                response = await self.client.get(url, params=params, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SlackAPIError(
                f"Slack API HTTP {e.response.status_code} for {method}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise SlackAPIError(f"Request to Slack failed for {method}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise SlackAPIError(f"Invalid JSON from Slack for {method}: {e}") from e
        if not data.get("ok"):
            error = data.get("error", "unknown_error")
            raise SlackAPIError(f"Slack API error: {error}", error=error)
        return data

    async def open_modal(self, trigger_id: str, view: dict[str, Any]) -> dict[str, Any]:
        """Open a modal view for the user who triggered the interaction."""
        try:
            return await self._call("views.open", json={"trigger_id": trigger_id, "view": view})
        except SlackAPIError as e:
            logger.error(f"[slack] Error opening modal: {e}")
            raise

    async def get_user_info(self, user_id: str) -> dict[str, Any]:
        """Fetch a user object (including `profile.email` with users:read.email scope)."""
        try:
            data = await self._call("users.info", params={"user": user_id})
        except SlackAPIError as e:
            logger.error(f"[slack] Error getting user info for {user_id}: {e}")
            raise
        return data.get("user", {})

    async def download_file(self, url: str) -> bytes:
        """Download a private file (url_private) using the bot token."""
        try:
            response = await self.client.get(
                url, headers={"Authorization": f"Bearer {self.token}"}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"[slack] HTTP {e.response.status_code} downloading file")
            raise SlackAPIError(
                f"File download failed with HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"[slack] Request failed downloading file: {e}")
            raise SlackAPIError(f"File download failed: {e}") from e
        return response.content

    async def post_message(self, channel: str, text: str) -> dict[str, Any]:
        """Post a plain mrkdwn message to a channel, or to a user ID for a DM."""
        try:
            return await self._call("chat.postMessage", json={"channel": channel, "text": text})
        except SlackAPIError as e:
            logger.error(f"[slack] Error posting message to {channel}: {e}")
            raise
