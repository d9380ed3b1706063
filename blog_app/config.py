from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Application
    app_name: str = "Cosmos Blog"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 8889
    cors_origins: List[str] = ["*"]

    # Database
    database_url: str = "sqlite:///./cosmos_blog.db"
    database_timeout: int = 10  # Seconds to wait on a locked SQLite database

    # Auth
    secret_key: str = "cosmos-secret-key-change-in-production"
    admin_password: str = "change-me"
    token_ttl_seconds: int = 24 * 60 * 60  # Tokens expire 24h after issuance

    # Posts pagination
    posts_page_size: int = 10
    posts_max_page_size: int = 100

    # Analytics
    analytics_default_days: int = 7
    analytics_max_days: int = 365
    recent_visits_limit: int = 10

    # Retention
    cleanup_default_days: int = 12
    cleanup_max_days: int = 3650

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
