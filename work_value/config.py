"""Application configuration with validation."""
from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings. Values can be overridden via environment or .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Work Value Calculator"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Valuation constants
    COFFEE_COST_PER_DAY: Decimal = Field(
        default=Decimal("5"),
        ge=0,
        description="Self-funded coffee cost charged per actual working day",
    )
    WEEKS_PER_YEAR: int = Field(default=52, ge=1, le=53)
    DAYS_PER_YEAR: int = Field(
        default=365,
        ge=360,
        le=366,
        description="Calendar approximation used for remaining days (no leap-year correction)",
    )
    OVERTIME_BASELINE_HOURS: Decimal = Field(default=Decimal("1"), ge=0)
    ONCALL_BASELINE_HOURS: Decimal = Field(default=Decimal("1"), ge=0)

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
