"""Slack webhook endpoints: slash command and modal interactions.

Both endpoints are called by Slack, not by users, and are authenticated by
the Slack request signature. Slack expects a reply within 3 seconds, so the
modal submission is acknowledged first and processed in the background.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Response, status
from fastapi.responses import JSONResponse

from bug_relay.api.deps import InteractionPayload, Orchestrator, SlashCommand
from bug_relay.services.form_mapper import is_issue_modal_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/slack", tags=["slack"])


@router.post("/commands")
async def handle_slash_command(command: SlashCommand, orchestrator: Orchestrator) -> Response:
    """Open the bug-report modal for the user who ran the slash command."""
    trigger_id = command.get("trigger_id", "")
    channel_id = command.get("channel_id", "")

    try:
        await orchestrator.open_issue_modal(trigger_id, channel_id)
    except Exception as e:
        logger.error(f"[slack] Error handling slash command: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e)},
        )

    return Response(status_code=status.HTTP_200_OK)


@router.post("/interactive")
async def handle_interaction(
    payload: InteractionPayload,
    background_tasks: BackgroundTasks,
    orchestrator: Orchestrator,
) -> Response:
    """
    Acknowledge an interaction with an empty 200.

    Submissions of the bug-report modal are processed after the response is
    sent; any other interaction is acknowledged and ignored.
    """
    if is_issue_modal_submission(payload):
        background_tasks.add_task(orchestrator.process_submission, payload)
    else:
        logger.debug(f"[slack] Ignoring interaction of type {payload.get('type')}")

    return Response(status_code=status.HTTP_200_OK)
