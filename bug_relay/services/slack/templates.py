"""Block Kit views and message texts sent to Slack."""

from typing import Any

from bug_relay.config import settings
from bug_relay.services.jira.types import CreatedIssue, JiraIssueType, JiraProject

DESCRIPTION_PREVIEW_LIMIT = 280
PRIORITY_CHOICES = ("High", "Medium", "Low")
ATTACHMENT_FILETYPES = ["jpg", "jpeg", "png", "gif", "mp4", "mov", "wmv", "webm"]
MAX_ATTACHMENTS = 5


def _plain_text(text: str) -> dict[str, str]:
    return {"type": "plain_text", "text": text}


def _option(text: str, value: str) -> dict[str, Any]:
    return {"text": _plain_text(text), "value": value}


def _input_block(
    block_id: str,
    label: str,
    element: dict[str, Any],
    optional: bool = False,
) -> dict[str, Any]:
    return {
        "type": "input",
        "block_id": block_id,
        "element": element,
        "label": _plain_text(label),
        "optional": optional,
    }


def build_issue_modal(
    projects: list[JiraProject],
    issue_types: list[JiraIssueType],
    private_metadata: str,
) -> dict[str, Any]:
    """
    Build the bug-report modal.

    Option lists are built fresh on every call. Empty project or issue-type
    lists render selects without choices instead of failing.
    """
    project_options = [_option(f"{p.key} - {p.name}", p.key) for p in projects]
    issue_type_options = [_option(t.name, t.id) for t in issue_types]

    return {
        "type": "modal",
        "callback_id": settings.slack_modal_callback_id,
        "private_metadata": private_metadata,
        "title": _plain_text("Report QA Issue"),
        "submit": _plain_text("Submit"),
        "blocks": [
            _input_block(
                "project_select",
                "Project",
                {
                    "type": "static_select",
                    "action_id": "project",
                    "placeholder": _plain_text("Select project"),
                    "options": project_options,
                },
            ),
            _input_block(
                "issue_title",
                "Issue Title (Include platform)",
                {
                    "type": "plain_text_input",
                    "action_id": "title",
                    "placeholder": _plain_text("e.g: [Platform] Issue with live match"),
                },
            ),
            _input_block(
                "issue_description",
                "Description",
                {
                    "type": "plain_text_input",
                    "action_id": "description",
                    "multiline": True,
                    "placeholder": _plain_text("Describe the issue"),
                },
            ),
            _input_block(
                "issue_priority",
                "Priority",
                {
                    "type": "static_select",
                    "action_id": "priority",
                    "options": [_option(name, name) for name in PRIORITY_CHOICES],
                },
            ),
            _input_block(
                "issue_components",
                "Issue Type",
                {
                    "type": "static_select",
                    "action_id": "components",
                    "placeholder": _plain_text("Select issue type"),
                    "options": issue_type_options,
                },
                optional=True,
            ),
            _input_block(
                "issue_attachments",
                "Screenshots & Recordings",
                {
                    "type": "file_input",
                    "action_id": "attachments",
                    "filetypes": ATTACHMENT_FILETYPES,
                    "max_files": MAX_ATTACHMENTS,
                },
                optional=True,
            ),
            _input_block(
                "issue_assignee",
                "Assign To",
                {
                    "type": "users_select",
                    "action_id": "assignee",
                    "placeholder": _plain_text("Select assignee"),
                },
            ),
        ],
    }


def truncate_description(text: str, limit: int = DESCRIPTION_PREVIEW_LIMIT) -> str:
    """Shorten text to at most `limit` characters, ending in "..." when cut."""
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def build_success_message(issue: CreatedIssue, title: str, description: str) -> str:
    return (
        f"✅ Issue created successfully: <{issue.url}|{issue.key}>\n"
        f"*Title:* {title}\n"
        f"*Description:* {truncate_description(description)}"
    )


def build_error_message(error_message: str) -> str:
    return f"❌ Failed to create issue in Jira: {error_message}"
