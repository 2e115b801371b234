"""
Application configuration module.
Handles environment variables and app settings.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    # App info
    app_name: str = "CORS Gate"
    app_version: str = "0.1.0"
    description: str = "HTTP service applying an allow-list CORS policy"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # CORS policy, list values are given as JSON in the environment,
    # e.g. CORS_ORIGINS='["https://app.example.com"]'
    cors_origins: List[str] = []
    cors_methods: List[str] = []
    cors_headers: List[str] = []
    cors_allow_credentials: Optional[bool] = None

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
