"""Slack webhook request dependencies.

Slack posts slash commands and interactions as
`application/x-www-form-urlencoded`. The raw body is needed for signature
verification, so it is read once here and parsed from bytes.
"""

import json
import logging
from typing import Annotated, Any
from urllib.parse import parse_qs

from fastapi import Depends, HTTPException, Request, status

from bug_relay.config import settings
from bug_relay.core.security import verify_slack_signature
from bug_relay.services.submission_orchestrator import SubmissionOrchestrator

logger = logging.getLogger(__name__)


async def verify_slack_request(request: Request) -> bytes:
    """Validate the Slack signature headers and return the raw body."""
    if not settings.slack_signature_enabled:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Slack signing secret not configured",
        )

    body = await request.body()
    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")

    if not verify_slack_signature(
        settings.slack_signing_secret,
        timestamp,
        body,
        signature,
        settings.slack_signature_max_age_seconds,
    ):
        logger.warning(f"[slack] Rejected request to {request.url.path}: invalid signature")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid request",
        )
    return body


def parse_form_body(body: bytes) -> dict[str, str]:
    """Decode a form-encoded body, keeping the first value of each field."""
    parsed = parse_qs(body.decode("utf-8"), keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


async def get_slash_command(
    body: Annotated[bytes, Depends(verify_slack_request)],
) -> dict[str, str]:
    """Verified slash command fields (trigger_id, channel_id, user_id, ...)."""
    try:
        return parse_form_body(body)
    except UnicodeDecodeError as e:
        logger.error(f"[slack] Error decoding slash command body: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid payload",
        ) from None


async def get_interaction_payload(
    body: Annotated[bytes, Depends(verify_slack_request)],
) -> dict[str, Any]:
    """Verified interaction payload, decoded from the `payload` form field."""
    try:
        payload = json.loads(parse_form_body(body)["payload"])
    except (KeyError, ValueError) as e:
        logger.error(f"[slack] Error parsing interactive payload: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid payload",
        ) from None
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid payload",
        )
    return payload


SlashCommand = Annotated[dict[str, str], Depends(get_slash_command)]
InteractionPayload = Annotated[dict[str, Any], Depends(get_interaction_payload)]


def get_orchestrator() -> SubmissionOrchestrator:
    """Orchestrator bound to the configured Slack and Jira credentials."""
    return SubmissionOrchestrator()


Orchestrator = Annotated[SubmissionOrchestrator, Depends(get_orchestrator)]
