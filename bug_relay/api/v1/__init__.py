"""Slack-facing API routes."""
