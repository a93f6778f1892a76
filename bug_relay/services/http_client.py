"""
Connection pool shared by SlackService and JiraService.

One submission talks to slack.com, the Slack file CDN and the Jira site in
quick succession, so both services draw from a single AsyncClient instead of
opening their own. Credentials differ per service and are sent per request.
"""

import logging

import httpx

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_http_client() -> httpx.AsyncClient:
    """
    Return the pooled client, creating it on first use or after shutdown.

    Redirects are followed because Slack answers url_private downloads with a
    redirect to its file CDN. Timeouts are the httpx defaults.
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            follow_redirects=True,
        )
        logger.debug("[http] Opened pooled client for Slack and Jira")
    return _client


async def close_http_client() -> None:
    """Release pooled connections. Called from the app lifespan on shutdown."""
    global _client
    if _client is None or _client.is_closed:
        return
    await _client.aclose()
    _client = None
    logger.debug("[http] Closed pooled client")
