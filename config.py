"""
Configuration settings for the vocab-drill practice engine.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Log level for the CLI sink (DEBUG, INFO, WARNING, ERROR)",
    )

    # ========================================
    # Drill Generation
    # ========================================
    drill_default_types: str = Field(
        default="CHOOSE_MEANING,CHOOSE_WORD",
        description="Comma-separated drill types used when none are enabled",
    )
    drill_max_distractors: int = Field(
        default=3,
        description="Distractor options per multiple-choice drill",
    )
    drill_random_seed: int | None = Field(
        default=None,
        description="Seed for reproducible sessions (None = system randomness)",
    )
    true_label: str = Field(
        default="Đúng",
        description="Option label for a true pairing",
    )
    false_label: str = Field(
        default="Sai",
        description="Option label for a false pairing",
    )

    # ========================================
    # Session Flows
    # ========================================
    drill_pronounce_max_attempts: int = Field(
        default=2,
        description="Wrong answers before a PRONOUNCE drill is dropped",
    )
    drill_topic_items_per_word: int = Field(
        default=2,
        description="Drills generated per word when learning a topic",
    )
    drill_topic_min_types: int = Field(
        default=2,
        description="Minimum enabled drill types to start topic learning",
    )
    drill_topic_word_limit: int = Field(
        default=10,
        description="Default word count for topic learning",
    )
    drill_review_items_per_word: int = Field(
        default=1,
        description="Drills generated per word in a review session",
    )
    drill_review_word_limit: int = Field(
        default=10,
        description="Default word count for review sessions",
    )

    def get_default_drill_types(self) -> list[str]:
        """Default drill type names, in configured order."""
        return [t.strip().upper() for t in self.drill_default_types.split(",") if t.strip()]

    def get_attempt_limits(self) -> dict[str, int]:
        """Attempt limit table keyed by drill type name."""
        return {"PRONOUNCE": self.drill_pronounce_max_attempts}

    def get_drill_config(self) -> dict[str, Any]:
        """Get drill generation and flow configuration as a dictionary."""
        return {
            "default_types": self.get_default_drill_types(),
            "max_distractors": self.drill_max_distractors,
            "random_seed": self.drill_random_seed,
            "labels": {
                "true": self.true_label,
                "false": self.false_label,
            },
            "attempt_limits": self.get_attempt_limits(),
            "topic": {
                "items_per_word": self.drill_topic_items_per_word,
                "min_types": self.drill_topic_min_types,
                "word_limit": self.drill_topic_word_limit,
            },
            "review": {
                "items_per_word": self.drill_review_items_per_word,
                "word_limit": self.drill_review_word_limit,
            },
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
