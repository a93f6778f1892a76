"""Copy files uploaded in the Slack modal onto the created Jira issue.

Best-effort: each file is downloaded and re-uploaded in turn, and a failure
is recorded on that file's result without stopping the others.
"""

import logging
from dataclasses import dataclass
from typing import Any

from bug_relay.services.jira import JiraService
from bug_relay.services.slack import SlackFile, SlackService

logger = logging.getLogger(__name__)


@dataclass
class AttachmentResult:
    """Outcome of relaying one file."""

    file_id: str
    file_name: str
    success: bool
    data: list[dict[str, Any]] | None = None  # Jira attachment metadata on success
    error: str | None = None


class AttachmentRelay:
    """Downloads Slack files and attaches them to a Jira issue."""

    def __init__(self, slack: SlackService, jira: JiraService):
        self.slack = slack
        self.jira = jira

    async def relay(self, files: list[SlackFile], issue_key: str) -> list[AttachmentResult]:
        """Relay every file to the issue. Never raises."""
        results: list[AttachmentResult] = []
        if not files:
            logger.info("[attachments] No files to attach")
            return results

        logger.info(f"[attachments] Processing {len(files)} files for {issue_key}")

        for file in files:
            logger.info(f"[attachments] Processing file: {file.name} ({file.id})")
            try:
                content = await self.slack.download_file(file.url_private)
                data = await self.jira.attach_file(issue_key, content, file.name, file.mimetype)
            except Exception as e:
                logger.error(f"[attachments] Error processing file {file.name}: {e}")
                results.append(
                    AttachmentResult(
                        file_id=file.id, file_name=file.name, success=False, error=str(e)
                    )
                )
                continue

            logger.info(f"[attachments] Attached {file.name} to {issue_key}")
            results.append(
                AttachmentResult(file_id=file.id, file_name=file.name, success=True, data=data)
            )

        return results
