"""Pure helpers for building Jira request bodies."""

from typing import Any

from bug_relay.config import settings


def plain_text_to_adf(text: str) -> dict[str, Any]:
    """
    Wrap plain text as a single paragraph in Atlassian Document Format.

    No markdown or Slack mrkdwn is translated; newlines are kept verbatim
    inside the one text node.
    """
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {
                        "type": "text",
                        "text": text,
                    }
                ],
            }
        ],
    }


def map_priority(priority: str) -> str:
    """Map a modal priority name (High/Medium/Low) to the configured Jira priority ID.

    Unknown or empty names map to the Medium ID.
    """
    priority_ids = settings.jira_priority_ids
    return priority_ids.get(priority, priority_ids["Medium"])


def browse_url(issue_key: str, host: str | None = None) -> str:
    """Browser URL for an issue key on the given (default: configured) Jira host."""
    return f"https://{host or settings.jira_host}/browse/{issue_key}"
