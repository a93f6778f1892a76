# Services package

from bug_relay.services.attachment_relay import AttachmentRelay, AttachmentResult
from bug_relay.services.jira import JiraService
from bug_relay.services.slack import SlackService
from bug_relay.services.submission_orchestrator import (
    SubmissionOrchestrator,
    SubmissionOutcome,
    SubmissionState,
)

__all__ = [
    # API clients
    "JiraService",
    "SlackService",
    # Submission pipeline
    "AttachmentRelay",
    "AttachmentResult",
    "SubmissionOrchestrator",
    "SubmissionOutcome",
    "SubmissionState",
]
