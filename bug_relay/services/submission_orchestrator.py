"""
Submission orchestrator for the bug-report modal.

Sequences one modal submission end to end, after Slack has already been
acknowledged:
1. Resolve the selected assignee (Slack user → email → Jira account)
2. Create the Jira issue
3. Relay uploaded files onto the issue
4. Notify the originating channel (or the submitter on failure)

Only issue creation is fatal. Assignee resolution degrades to "unassigned",
attachment failures are logged per file, and notification failures are
logged and dropped. Nothing is retried.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from bug_relay.config import settings
from bug_relay.services.attachment_relay import AttachmentRelay, AttachmentResult
from bug_relay.services.form_mapper import build_issue_draft, extract_submission
from bug_relay.services.jira import CreatedIssue, JiraAPIError, JiraService
from bug_relay.services.slack import (
    ModalSubmission,
    SlackAPIError,
    SlackService,
    build_error_message,
    build_issue_modal,
    build_success_message,
)

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    """Lifecycle of a single modal submission."""

    RECEIVED = "received"
    ACKNOWLEDGED = "acknowledged"
    IDENTITY_RESOLVING = "identity_resolving"
    ISSUE_CREATING = "issue_creating"
    ATTACHMENTS_PROCESSING = "attachments_processing"
    NOTIFYING = "notifying"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SubmissionOutcome:
    """What happened to a submission. Returned for logging and tests."""

    state: SubmissionState = SubmissionState.RECEIVED
    issue: CreatedIssue | None = None
    attachments: list[AttachmentResult] = field(default_factory=list)
    error: str | None = None
    notified: bool = False


class SubmissionOrchestrator:
    """Opens the bug-report modal and processes its submissions."""

    def __init__(
        self,
        slack: SlackService | None = None,
        jira: JiraService | None = None,
    ) -> None:
        self.slack = slack or SlackService()
        self.jira = jira or JiraService()
        self.attachments = AttachmentRelay(self.slack, self.jira)

    async def open_issue_modal(self, trigger_id: str, channel_id: str) -> None:
        """
        Open the modal in response to the slash command.

        Project and issue-type lists are fetched per request; if Jira is
        unreachable they come back empty and the modal opens without choices.

        Raises:
            SlackAPIError: If Slack refuses to open the view
        """
        private_metadata = json.dumps({"channelId": channel_id})

        issue_types = await self.jira.fetch_issue_types()
        projects = await self.jira.fetch_projects()

        view = build_issue_modal(projects, issue_types, private_metadata)
        await self.slack.open_modal(trigger_id, view)

    async def resolve_assignee(self, slack_user_id: str) -> str | None:
        """Map a Slack user to a Jira account ID. Returns None on any failure."""
        try:
            slack_user = await self.slack.get_user_info(slack_user_id)
        except SlackAPIError as e:
            logger.warning(f"[submission] Could not fetch Slack user {slack_user_id}: {e}")
            return None

        email = (slack_user.get("profile") or {}).get("email")
        if not email:
            logger.info(f"[submission] Slack user {slack_user_id} has no email on profile")
            return None

        jira_user = await self.jira.find_user_by_email(email)
        if not jira_user:
            logger.info(f"[submission] No matching Jira user found for email: {email}")
            return None

        account_id = jira_user.get("accountId")
        logger.info(f"[submission] Resolved assignee {slack_user_id} → {account_id}")
        return account_id

    async def log_diagnostics(self, project_key: str) -> None:
        """Log what Jira offers for this project. Failures are logged, never raised."""
        try:
            meta = await self.jira.get_issue_create_meta(project_key)
            meta_projects = meta.get("projects") or [{}]
            issue_types = [
                {"id": t.get("id"), "name": t.get("name")}
                for t in meta_projects[0].get("issuetypes", [])
            ]
            logger.info(f"[submission] Available issue types for {project_key}: {issue_types}")
        except JiraAPIError as e:
            logger.warning(f"[submission] Could not fetch create-meta for {project_key}: {e}")

        priorities = await self.jira.fetch_priorities()
        logger.info(
            f"[submission] Available priorities: {[(p.id, p.name) for p in priorities]}"
        )

        try:
            status = await self.jira.check_auth()
            logger.info(f"[submission] Jira auth check status: {status}")
        except JiraAPIError as e:
            logger.warning(f"[submission] Jira auth check failed: {e}")

    async def process_submission(self, payload: dict[str, Any]) -> SubmissionOutcome:
        """
        Process a submitted modal. Runs after Slack has been acknowledged.

        Never raises: the outcome records the final state and any error.
        """
        outcome = SubmissionOutcome(state=SubmissionState.ACKNOWLEDGED)
        submission = extract_submission(payload)
        logger.info(f"[submission] From {submission.user_id}: {summarize(submission)}")

        outcome.state = SubmissionState.IDENTITY_RESOLVING
        assignee_account_id = None
        if submission.assignee_slack_id:
            assignee_account_id = await self.resolve_assignee(submission.assignee_slack_id)

        outcome.state = SubmissionState.ISSUE_CREATING
        draft = build_issue_draft(submission, assignee_account_id)
        if settings.jira_diagnostics_enabled:
            await self.log_diagnostics(draft.project_key)
        try:
            issue = await self.jira.create_issue(draft)
        except Exception as e:
            logger.error(f"[submission] Error creating issue for {submission.user_id}: {e}")
            outcome.state = SubmissionState.FAILED
            outcome.error = str(e)
            # Failures always go to the submitter, never the originating channel
            outcome.notified = await self._notify(
                submission.user_id, build_error_message(str(e))
            )
            return outcome

        outcome.issue = issue

        outcome.state = SubmissionState.ATTACHMENTS_PROCESSING
        outcome.attachments = await self.attachments.relay(submission.files, issue.key)
        failed = [r for r in outcome.attachments if not r.success]
        if failed:
            logger.warning(
                f"[submission] {len(failed)}/{len(outcome.attachments)} attachments "
                f"failed for {issue.key}"
            )

        outcome.state = SubmissionState.NOTIFYING
        outcome.notified = await self._notify(
            submission.channel_id,
            build_success_message(issue, submission.title, submission.description),
        )

        outcome.state = SubmissionState.DONE
        return outcome

    async def _notify(self, channel: str, text: str) -> bool:
        """Post one best-effort message. Returns False if Slack rejected it."""
        try:
            await self.slack.post_message(channel, text)
        except SlackAPIError as e:
            logger.error(f"[submission] Notification to {channel} failed: {e}")
            return False
        return True


def summarize(submission: ModalSubmission) -> str:
    """Short description of a submission for log lines."""
    return (
        f"project={submission.project_key or settings.jira_project_key!r} "
        f"title={submission.title!r} files={len(submission.files)}"
    )
