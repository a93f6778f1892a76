"""API dependencies - re-exports from submodules."""

from .slack import (
    InteractionPayload,
    Orchestrator,
    SlashCommand,
    get_interaction_payload,
    get_orchestrator,
    get_slash_command,
    parse_form_body,
    verify_slack_request,
)

__all__ = [
    # Slack request verification
    "verify_slack_request",
    "parse_form_body",
    "get_slash_command",
    "get_interaction_payload",
    "SlashCommand",
    "InteractionPayload",
    # Services
    "get_orchestrator",
    "Orchestrator",
]
