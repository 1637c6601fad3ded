from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_ENV: Literal["development", "production", "testing"] = "production"
    HOST_NAME: str = "http://localhost:8000"
    APP_TITLE: str = "AI Psychometric Profiler"

    # Model provider (OpenRouter-compatible chat completions)
    OPENROUTER_API_KEY: str | None = None
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_TIMEOUT_SECONDS: float = 60.0
    OPENROUTER_MAX_TOKENS: int = 1000
    DEFAULT_TEMPERATURE: float = 0.7

    # Sampling
    SAMPLE_COUNT: int = 5
    SAMPLING_CONCURRENCY: int = 5

    REDIS_URL: str = "redis://redis:6379/0"
    # Maximum number of connections Redis client will open per process
    REDIS_MAX_CONNECTIONS: int = 20
    REDIS_RUN_KEY: str = "psychometrics:run:"
    REDIS_RUN_INDEX_KEY: str = "psychometrics:runs"

    # How long finished job handles stay queryable in memory
    JOB_TTL_SECONDS: int = 86400  # 24 hours
    MAX_TRACKED_JOBS: int = 1000


settings = Settings()

APP_VERSION = __version__
