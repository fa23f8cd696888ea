# app/core/config.py
from __future__ import annotations
from typing import Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # API
    api_title: str = "Resume Match API"
    api_version: str = "0.2.0"

    # Generator (Gemini)
    # IMPORTANT: GEMINI_API_KEY wins over GOOGLE_API_KEY
    gemini_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("gemini_api_key", "google_api_key")
    )
    gemini_model: str = "gemini-2.5-flash"    # env: GEMINI_MODEL
    llm_timeout_seconds: float = 60.0         # env: LLM_TIMEOUT_SECONDS

    # Caller-side truncation before prompting
    analyze_max_chars: int = 10000            # env: ANALYZE_MAX_CHARS
    rewrite_jd_max_chars: int = 5000          # env: REWRITE_JD_MAX_CHARS

    # Rate limits
    anon_daily_limit: int = 20                # env: ANON_DAILY_LIMIT
    redis_url: Optional[str] = None           # env: REDIS_URL

    # Observability
    log_level: str = "INFO"                   # env: LOG_LEVEL
    sentry_dsn: Optional[str] = None          # env: SENTRY_DSN
    posthog_key: Optional[str] = None         # env: POSTHOG_KEY
    posthog_host: str = "https://app.posthog.com"  # env: POSTHOG_HOST

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
