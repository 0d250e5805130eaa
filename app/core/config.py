"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CLIENT_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:5173",
    "http://localhost:8081",
    "http://localhost:8082",
]


class Settings(BaseSettings):
    # PostgreSQL (Neon or any Postgres connection string)
    database_url: str = ""
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "prepwise_docs"

    # JWT Auth
    jwt_secret_key: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7
    cookie_secure: bool = False

    # CORS - comma separated list of allowed origins
    client_url: str = ""

    # Groq (OpenAI-compatible) - question generation, resume analysis
    groq_api_key: str = ""
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama-3.3-70b-versatile"

    # OpenAI - interview feedback, realtime sessions
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_feedback_model: str = "gpt-4o-mini"
    openai_realtime_model: str = "gpt-4o-realtime-preview-2024-10-01"

    # Uploads
    upload_root: str = "uploads"

    # Interviews
    interview_question_count: int = 7

    # App
    log_level: str = "INFO"
    debug: bool = False

    @property
    def cors_origins(self) -> List[str]:
        """Parse CLIENT_URL into a list of origins, falling back to dev servers."""
        origins = [o.strip() for o in self.client_url.split(",") if o.strip()]
        return origins or list(DEFAULT_CLIENT_ORIGINS)

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def assert_required_settings(settings: Settings = None) -> None:
    """Raise if the settings the API cannot run without are missing."""
    settings = settings or get_settings()
    required = [
        ("database_url", "DATABASE_URL"),
        ("jwt_secret_key", "JWT_SECRET_KEY"),
    ]
    missing = [label for field, label in required if not getattr(settings, field)]
    if missing:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")
