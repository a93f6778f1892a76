"""
Translate a Slack view_submission payload into Jira issue fields.

Every lookup tolerates missing keys: an unselected optional input yields an
empty string or list, never an exception. Field paths follow the block and
action IDs of the modal built in services/slack/templates.py.
"""

import json
import logging
from typing import Any

from bug_relay.config import settings
from bug_relay.services.jira.helpers import map_priority, plain_text_to_adf
from bug_relay.services.jira.types import IssueDraft
from bug_relay.services.slack.types import ModalSubmission, SlackFile

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = "Medium"


def _dig(data: Any, *keys: str) -> Any:
    """Follow nested dict keys, returning None as soon as one is missing."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def parse_private_metadata(raw: str | None) -> dict[str, Any]:
    """Parse the modal's private_metadata JSON. Malformed or absent metadata yields {}."""
    if not raw:
        return {}
    try:
        metadata = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"[submission] Error parsing private_metadata: {e}")
        return {}
    if not isinstance(metadata, dict):
        return {}
    return metadata


def resolve_channel(metadata: dict[str, Any], user_id: str) -> str:
    """Channel to notify: the originating channel, else a DM to the submitter."""
    return metadata.get("channelId") or user_id


def is_issue_modal_submission(payload: dict[str, Any]) -> bool:
    """Check the interaction is a submission of our bug-report modal."""
    return (
        payload.get("type") == "view_submission"
        and _dig(payload, "view", "callback_id") == settings.slack_modal_callback_id
    )


def extract_submission(payload: dict[str, Any]) -> ModalSubmission:
    """Flatten the submitted view state into a ModalSubmission."""
    values = _dig(payload, "view", "state", "values") or {}
    user_id = _dig(payload, "user", "id") or ""
    metadata = parse_private_metadata(_dig(payload, "view", "private_metadata"))

    selected_components = _dig(values, "issue_components", "components", "selected_options") or []
    component_ids = [opt["value"] for opt in selected_components if opt.get("value")]
    issue_type_id = (
        _dig(values, "issue_components", "components", "selected_option", "value")
        or (component_ids[0] if component_ids else "")
    )

    files = _dig(values, "issue_attachments", "attachments", "files") or []

    return ModalSubmission(
        project_key=_dig(values, "project_select", "project", "selected_option", "value") or "",
        title=_dig(values, "issue_title", "title", "value") or "",
        description=_dig(values, "issue_description", "description", "value") or "",
        priority=_dig(values, "issue_priority", "priority", "selected_option", "value")
        or DEFAULT_PRIORITY,
        issue_type_id=issue_type_id,
        assignee_slack_id=_dig(values, "issue_assignee", "assignee", "selected_user") or "",
        user_id=user_id,
        channel_id=resolve_channel(metadata, user_id),
        component_ids=component_ids,
        files=[SlackFile.from_payload(f) for f in files if isinstance(f, dict)],
    )


def build_issue_draft(
    submission: ModalSubmission,
    assignee_account_id: str | None = None,
) -> IssueDraft:
    """Build the Jira issue fields for a submission.

    The issue type falls back to the configured default ("Bug") and the
    priority to Medium, so missing optional inputs never block creation.
    """
    return IssueDraft(
        project_key=submission.project_key or settings.jira_project_key,
        summary=submission.title,
        description=plain_text_to_adf(submission.description),
        issue_type_id=submission.issue_type_id or settings.jira_default_issue_type_id,
        priority_id=map_priority(submission.priority),
        assignee_account_id=assignee_account_id,
        component_ids=list(submission.component_ids),
    )
