"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from stockledger.core.exceptions import ConfigurationError

DeletePolicy = Literal["allow", "forbid", "tombstone"]


class LedgerSettings(BaseSettings):
    """Ledger engine and query configuration."""

    model_config = SettingsConfigDict(env_prefix="LEDGER_")

    # allow: hard delete, movements are orphaned
    # forbid: refuse to delete a product that has movements
    # tombstone: keep the record, hidden from listings
    delete_policy: DeletePolicy = "allow"

    # Rankings
    top_moved_limit: int = 5
    report_top_moved_limit: int = 10

    # Stock status: current >= max_stock * ratio is "high"
    high_stock_ratio: float = 0.8

    # Startup
    seed_demo_data: bool = False

    @field_validator("top_moved_limit", "report_top_moved_limit")
    @classmethod
    def positive_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError("limit must be at least 1")
        return v

    @field_validator("high_stock_ratio")
    @classmethod
    def ratio_in_range(cls, v: float) -> float:
        if not 0 < v <= 1:
            raise ValueError("high_stock_ratio must be in (0, 1]")
        return v


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Stock Ledger"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    storage_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Sub-settings
    ledger: LedgerSettings = Field(default_factory=LedgerSettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create global settings instance.

    Raises:
        ConfigurationError: environment holds invalid values
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid settings: {e.error_count()} error(s)",
                details={
                    "errors": [
                        {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                        for err in e.errors()
                    ]
                },
            ) from e
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
