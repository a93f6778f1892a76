"""Data types for Slack modal submissions."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SlackFile:
    """A file uploaded through the modal's file input."""

    id: str
    name: str
    url_private: str
    mimetype: str

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "SlackFile":
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            url_private=data.get("url_private") or "",
            mimetype=data.get("mimetype") or "",
        )


@dataclass
class ModalSubmission:
    """Flattened field values of a submitted bug-report modal."""

    project_key: str
    title: str
    description: str
    priority: str  # "High" | "Medium" | "Low"
    issue_type_id: str
    assignee_slack_id: str
    user_id: str  # Submitting user
    channel_id: str  # Notification target (metadata channel, else user_id)
    component_ids: list[str] = field(default_factory=list)
    files: list[SlackFile] = field(default_factory=list)
