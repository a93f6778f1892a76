"""Exceptions for Jira service."""


class JiraAPIError(Exception):
    """Error from Jira REST API."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
