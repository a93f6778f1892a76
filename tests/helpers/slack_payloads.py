"""Builders for Slack webhook bodies used across tests."""

from __future__ import annotations

import json
import time
from typing import Any
from urllib.parse import urlencode

from bug_relay.core.security import compute_slack_signature

SIGNING_SECRET = "8f742231b10e8888abcd99yyyzzz85a5"


def make_view_submission(
    *,
    title: str = "Login broken",
    description: str = "Steps: open app, tap login",
    priority: str | None = "High",
    project_key: str | None = "QA",
    issue_type_id: str | None = None,
    assignee: str | None = None,
    files: list[dict[str, Any]] | None = None,
    private_metadata: str | None = '{"channelId":"C123"}',
    user_id: str = "U999",
    callback_id: str = "qa_issue_modal",
) -> dict[str, Any]:
    """A view_submission payload shaped like the one Slack sends for our modal."""
    values: dict[str, Any] = {
        "issue_title": {"title": {"type": "plain_text_input", "value": title}},
        "issue_description": {
            "description": {"type": "plain_text_input", "value": description}
        },
        "issue_priority": {
            "priority": {
                "type": "static_select",
                "selected_option": {"value": priority} if priority else None,
            }
        },
        "project_select": {
            "project": {
                "type": "static_select",
                "selected_option": {"value": project_key} if project_key else None,
            }
        },
        "issue_components": {
            "components": {
                "type": "static_select",
                "selected_option": {"value": issue_type_id} if issue_type_id else None,
            }
        },
        "issue_assignee": {"assignee": {"type": "users_select", "selected_user": assignee}},
        "issue_attachments": {"attachments": {"type": "file_input", "files": files or []}},
    }
    view: dict[str, Any] = {
        "id": "V123",
        "callback_id": callback_id,
        "state": {"values": values},
    }
    if private_metadata is not None:
        view["private_metadata"] = private_metadata
    return {
        "type": "view_submission",
        "user": {"id": user_id, "username": "reporter"},
        "view": view,
    }


def make_slack_file(file_id: str = "F1", name: str = "screen.png") -> dict[str, Any]:
    return {
        "id": file_id,
        "name": name,
        "mimetype": "image/png",
        "url_private": f"https://files.slack.com/files-pri/T1-{file_id}/{name}",
    }


def signed_headers(
    body: bytes,
    secret: str = SIGNING_SECRET,
    timestamp: int | None = None,
) -> dict[str, str]:
    """Headers Slack would attach to this body."""
    ts = str(int(time.time()) if timestamp is None else timestamp)
    return {
        "Content-Type": "application/x-www-form-urlencoded",
        "X-Slack-Request-Timestamp": ts,
        "X-Slack-Signature": compute_slack_signature(secret, ts, body),
    }


def interactive_body(payload: dict[str, Any]) -> bytes:
    return urlencode({"payload": json.dumps(payload)}).encode()


def slash_command_body(
    trigger_id: str = "13345224609.738474920.8088930838d88f008e0",
    channel_id: str = "C123",
    user_id: str = "U999",
) -> bytes:
    return urlencode(
        {
            "command": "/qa-issue",
            "text": "",
            "trigger_id": trigger_id,
            "channel_id": channel_id,
            "user_id": user_id,
        }
    ).encode()
