"""Configuration package."""

from bug_relay.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
