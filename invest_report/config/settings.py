"""Application settings loaded from environment variables.

Uses Pydantic Settings for validation and type coercion.
All config flows through this single module.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Report parser configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"

    # Recommendation
    recommendation_horizon: str = "12개월"

    # List extraction limits
    key_points_limit: int = 5
    risks_limit: int = 5
    swot_items_limit: int = 3
    min_item_length: int = 10

    # Free-text truncation
    summary_max_chars: int = 500
    ai_summary_max_chars: int = 600
    ai_summary_fallback_chars: int = 400

    # Substituted for empty key point / risk lists
    pending_placeholder: str = "분석 결과를 준비 중입니다."


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton."""
    return Settings()
