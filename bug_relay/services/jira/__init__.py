"""
Jira service package.

Usage: `from bug_relay.services.jira import JiraService, IssueDraft`

Module structure:
- service.py: JiraService, the REST v3 client
- helpers.py: ADF conversion, priority mapping, browse URLs
- types.py: Request and response data types
- exceptions.py: Custom exceptions
"""

from bug_relay.services.jira.exceptions import JiraAPIError
from bug_relay.services.jira.helpers import browse_url, map_priority, plain_text_to_adf
from bug_relay.services.jira.service import JiraService
from bug_relay.services.jira.types import (
    CreatedIssue,
    IssueDraft,
    JiraIssueType,
    JiraPriority,
    JiraProject,
)

__all__ = [
    # Service (main entry point)
    "JiraService",
    # Helpers
    "browse_url",
    "map_priority",
    "plain_text_to_adf",
    # Exceptions
    "JiraAPIError",
    # Types
    "CreatedIssue",
    "IssueDraft",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
]
