"""Exceptions for Slack service."""


class SlackAPIError(Exception):
    """Error from the Slack Web API.

    `error` carries Slack's machine-readable error code (e.g. "expired_trigger_id")
    when the response envelope was `ok: false`.
    """

    def __init__(
        self,
        message: str,
        error: str | None = None,
        status_code: int | None = None,
    ):
        self.message = message
        self.error = error
        self.status_code = status_code
        super().__init__(message)
