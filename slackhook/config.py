from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """slackhook settings loaded from ``SLACK_*`` environment variables."""

    # Service
    service_name: str = "slackhook"
    log_level: str = "INFO"
    log_json: bool = True

    # Webhook
    webhook_url: str = ""
    timeout: float = 10.0

    # Message defaults
    channel: str | None = None
    username: str | None = None
    icon: str | None = None  # Emoji token (":robot_face:") or image URL

    # Formatting
    link_names: bool = False
    unfurl_links: bool = False
    unfurl_media: bool = True
    allow_markdown: bool = True
    markdown_in_attachments: list[str] = []

    model_config = SettingsConfigDict(
        env_prefix="SLACK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
