"""Unit tests for Settings loading and derived properties."""

from __future__ import annotations

import pytest

from bug_relay.config.settings import Settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "PORT",
        "SLACK_BOT_TOKEN",
        "SLACK_SIGNING_SECRET",
        "JIRA_HOST",
        "JIRA_USERNAME",
        "JIRA_API_TOKEN",
        "JIRA_PROJECT_KEY",
        "JIRA_DEFAULT_ISSUE_TYPE_ID",
        "JIRA_PRIORITY_HIGH_ID",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self, clean_env):
        s = Settings(_env_file=None)

        assert s.port == 3000
        assert s.jira_default_issue_type_id == "10002"
        assert s.jira_priority_ids == {"High": "2", "Medium": "3", "Low": "4"}
        assert s.slack_signature_enabled is False

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-1")
        monkeypatch.setenv("SLACK_SIGNING_SECRET", "shh")
        monkeypatch.setenv("JIRA_HOST", "acme.atlassian.net")
        monkeypatch.setenv("JIRA_USERNAME", "bot@acme.com")
        monkeypatch.setenv("JIRA_API_TOKEN", "tok")
        monkeypatch.setenv("JIRA_PROJECT_KEY", "QA")
        monkeypatch.setenv("JIRA_PRIORITY_HIGH_ID", "10001")

        s = Settings(_env_file=None)

        assert s.port == 8080
        assert s.slack_bot_token == "xoxb-1"
        assert s.slack_signature_enabled is True
        assert s.jira_base_url == "https://acme.atlassian.net"
        assert s.jira_username == "bot@acme.com"
        assert s.jira_api_token == "tok"
        assert s.jira_project_key == "QA"
        assert s.jira_priority_ids["High"] == "10001"
