"""Slack request signature verification.

Slack signs every request with the app's signing secret and sends the result
as `X-Slack-Signature: v0=<hex>` alongside `X-Slack-Request-Timestamp`. The
signature itself is checked by slack_sdk's SignatureVerifier; this module adds
the configurable freshness window and rejects malformed headers up front.
"""

import time

from slack_sdk.signature import Clock, SignatureVerifier


class _FixedClock(Clock):
    """Clock pinned to a given time, for verifying against an explicit `now`."""

    def __init__(self, now: float):
        self._now = now

    def now(self) -> float:
        return self._now


def compute_slack_signature(secret: str, timestamp: str, body: bytes) -> str:
    """Compute the `v0=<hex>` signature Slack would send for this body."""
    return SignatureVerifier(secret).generate_signature(timestamp=timestamp, body=body)


def is_fresh_timestamp(timestamp: str, max_age_seconds: int, now: float | None = None) -> bool:
    """Check the request timestamp is an integer within max_age_seconds of now."""
    try:
        ts = int(timestamp)
    except (TypeError, ValueError):
        return False
    current = time.time() if now is None else now
    return abs(current - ts) <= max_age_seconds


def verify_slack_signature(
    secret: str,
    timestamp: str,
    body: bytes,
    signature: str,
    max_age_seconds: int,
    now: float | None = None,
) -> bool:
    """
    Verify a Slack request.

    Returns False for stale or missing timestamps, for bodies that are not
    UTF-8 and for signatures that don't match. slack_sdk also enforces its own
    five-minute window, so a larger max_age_seconds has no effect.
    """
    if not secret or not signature:
        return False
    if not is_fresh_timestamp(timestamp, max_age_seconds, now):
        return False

    verifier = SignatureVerifier(secret, clock=Clock() if now is None else _FixedClock(now))
    try:
        return verifier.is_valid(body=body, timestamp=timestamp, signature=signature)
    except UnicodeDecodeError:
        return False
