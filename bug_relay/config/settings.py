from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    # Slack - bot token needs views:write, users:read, users:read.email, files:read, chat:write
    slack_bot_token: str = ""
    # Signing secret from the Slack app's "Basic Information" page
    # Empty string = every Slack request is rejected with 503
    slack_signing_secret: str = ""
    # Requests with a timestamp further than this from now are rejected (replay protection)
    slack_signature_max_age_seconds: int = 300
    slack_api_url: str = "https://slack.com/api"
    slack_modal_callback_id: str = "qa_issue_modal"

    # Jira Cloud - host name only, e.g. "acme.atlassian.net"
    jira_host: str = ""
    jira_username: str = ""
    jira_api_token: str = ""
    # Used when the modal submission carries no project
    jira_project_key: str = ""

    # Instance-specific scheme IDs (check /rest/api/3/issuetype and /rest/api/3/priority)
    jira_default_issue_type_id: str = "10002"  # "Bug"
    jira_priority_high_id: str = "2"
    jira_priority_medium_id: str = "3"
    jira_priority_low_id: str = "4"

    # Log create-meta, priorities and an auth check before every issue creation
    jira_diagnostics_enabled: bool = False

    @property
    def jira_base_url(self) -> str:
        """Browser-facing base URL of the Jira site."""
        return f"https://{self.jira_host}"

    @property
    def jira_priority_ids(self) -> dict[str, str]:
        """Priority name shown in the modal → Jira priority ID."""
        return {
            "High": self.jira_priority_high_id,
            "Medium": self.jira_priority_medium_id,
            "Low": self.jira_priority_low_id,
        }

    @property
    def slack_signature_enabled(self) -> bool:
        """Check if Slack request verification is configured (has signing secret)."""
        return bool(self.slack_signing_secret)


settings = Settings()
