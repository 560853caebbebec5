"""
Configuration settings for the GitHub Notifications MCP server
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    server_name: str = "github-notifications"
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    transport: str = "stdio"  # "stdio", "sse" or "streamable-http"

    # GitHub API
    github_token: Optional[str] = None
    github_api_url: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"
    user_agent: str = "github-notifications-mcp"

    # Refuse to start without a token. Disable to rely on set-github-token.
    require_token: bool = True

    # Rendering
    display_timezone: str = "UTC"

    # Logging
    log_level: str = "INFO"


# Create a singleton instance
settings = Settings()
