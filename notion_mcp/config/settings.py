from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    notion_token: str = ""
    notion_base_url: str = "https://api.notion.com"
    notion_version: str = "2022-06-28"
    notion_timeout_seconds: int = 30

    notion_mcp_output_mode: str = "full"
