"""Data types for Jira API requests and responses."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class JiraProject:
    """Project as listed in the modal's project select."""

    id: str
    key: str
    name: str


@dataclass
class JiraIssueType:
    """Issue type option."""

    id: str
    name: str


@dataclass
class JiraPriority:
    """Priority from the instance's priority scheme."""

    id: str
    name: str


@dataclass
class IssueDraft:
    """Fields for a new issue, ready to be sent to POST /issue."""

    project_key: str
    summary: str
    description: dict[str, Any]  # Atlassian Document Format
    issue_type_id: str
    priority_id: str
    assignee_account_id: str | None = None
    component_ids: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Render the request body for issue creation."""
        fields: dict[str, Any] = {
            "project": {"key": self.project_key},
            "summary": self.summary,
            "description": self.description,
            "issuetype": {"id": self.issue_type_id},
            "priority": {"id": self.priority_id},
        }
        if self.assignee_account_id:
            fields["assignee"] = {"id": self.assignee_account_id}
        if self.component_ids:
            fields["components"] = [{"id": cid} for cid in self.component_ids]
        return {"fields": fields}


@dataclass(frozen=True)
class CreatedIssue:
    """Issue returned by Jira after a successful create."""

    key: str
    id: str
    url: str  # Browse URL, e.g. https://acme.atlassian.net/browse/QA-12
