"""
Zendesk Connector - Configuration Management
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # App
    app_env: str = "development"

    # Zendesk (defaults for tasks that leave connection properties unset)
    zendesk_domain: str = ""
    zendesk_username: str = ""
    zendesk_token: str = ""
    zendesk_oauth_token: str = ""
    zendesk_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
