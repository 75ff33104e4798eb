"""
Configuration management for Campaign Similarity.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables, e.g.
SIMILARITY_THRESHOLD=0.8 or THIRD_AXIS=progress.
"""

from functools import lru_cache

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import MetricWeights, check_weight_sum
from .types import (
    DEFAULT_DEADLINE_WEIGHT,
    DEFAULT_DEADLINE_WINDOW_DAYS,
    DEFAULT_SIMILARITY_LIMIT,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_TARGET_WEIGHT,
    DEFAULT_THIRD_AXIS_WEIGHT,
    SECONDS_PER_DAY,
    GroupingStrategy,
    ThirdAxis,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables.
    For nested settings, use double underscore.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "Campaign Similarity API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", description="development, staging, production")
    log_level: str = Field(default="INFO", description="Root log level for CLI and API")

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api/v1"

    # ==========================================================================
    # CORS Configuration
    # ==========================================================================
    cors_allow_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        description="Origins of the browser client allowed to call the API.",
    )
    cors_allow_methods: list[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: list[str] = ["Accept", "Content-Type"]

    # ==========================================================================
    # Similarity Engine
    # ==========================================================================
    similarity_threshold: float = Field(
        default=DEFAULT_SIMILARITY_THRESHOLD,
        description="Minimum composite score for group co-membership (clamped to [0, 1])",
    )
    similarity_limit: int = Field(
        default=DEFAULT_SIMILARITY_LIMIT,
        description="Default number of similar campaigns returned",
    )
    target_weight: float = Field(default=DEFAULT_TARGET_WEIGHT, ge=0)
    deadline_weight: float = Field(default=DEFAULT_DEADLINE_WEIGHT, ge=0)
    third_axis_weight: float = Field(default=DEFAULT_THIRD_AXIS_WEIGHT, ge=0)
    third_axis: ThirdAxis = ThirdAxis.category
    grouping_strategy: GroupingStrategy = GroupingStrategy.complete_linkage
    deadline_window_days: float = Field(
        default=DEFAULT_DEADLINE_WINDOW_DAYS,
        gt=0,
        description="Deadline gap at which deadline similarity reaches 0",
    )

    @model_validator(mode="after")
    def _check_weights(self) -> "Settings":
        check_weight_sum(self.target_weight, self.deadline_weight, self.third_axis_weight)
        return self

    @computed_field
    @property
    def metric_weights(self) -> MetricWeights:
        """Composite score weights as a validated value."""
        return MetricWeights(
            target=self.target_weight,
            deadline=self.deadline_weight,
            third_axis=self.third_axis_weight,
        )

    @computed_field
    @property
    def deadline_window_seconds(self) -> float:
        return self.deadline_window_days * SECONDS_PER_DAY


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
