"""
Slack service package.

Usage: `from bug_relay.services.slack import SlackService, ModalSubmission`

Module structure:
- service.py: SlackService, the Web API client
- templates.py: Modal view and notification texts
- types.py: Modal submission data types
- exceptions.py: Custom exceptions
"""

from bug_relay.services.slack.exceptions import SlackAPIError
from bug_relay.services.slack.service import SlackService
from bug_relay.services.slack.templates import (
    build_error_message,
    build_issue_modal,
    build_success_message,
    truncate_description,
)
from bug_relay.services.slack.types import ModalSubmission, SlackFile

__all__ = [
    # Service (main entry point)
    "SlackService",
    # Templates
    "build_error_message",
    "build_issue_modal",
    "build_success_message",
    "truncate_description",
    # Exceptions
    "SlackAPIError",
    # Types
    "ModalSubmission",
    "SlackFile",
]
