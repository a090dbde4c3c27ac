"""Application configuration using Pydantic settings."""
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    app_name: str = "ProScore Resume Scoring API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Settings
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Scoring Settings
    max_resume_chars: int = 20000
    default_role: str = "General"
    max_file_size_mb: int = 10

    # Redis Cache
    redis_url: str | None = None
    redis_tls: bool = False
    cache_ttl: int = 3600  # seconds

    # Gemini API for the AI verdict
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"

    class Config:
        env_prefix = "PROSCORE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
