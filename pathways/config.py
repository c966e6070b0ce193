"""Application configuration via pydantic-settings.

Thresholds shared across the engine are loaded from environment variables
(.env file) so they can be tuned without a code change. Per-program point
grids are NOT here: each program module owns its own constants.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CrsSettings(BaseSettings):
    """Comprehensive Ranking System scale."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CRS_", extra="ignore")

    scale_max: int = Field(default=1200, description="Maximum CRS total; raw sums above are clamped")
    additional_max: int = Field(default=600, description="Cap on the additional-points bucket")
    transferability_max: int = Field(default=100, description="Cap on the skill transferability bucket")


class ComplianceSettings(BaseSettings):
    """Status timing, work-hour and inadmissibility thresholds."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="COMPLIANCE_", extra="ignore")

    # Status
    restoration_window_days: int = Field(default=90, description="Days after expiry during which status can be restored")
    urgent_window_days: int = Field(default=30, description="Days before expiry below which an extension is urgent")
    prepare_window_days: int = Field(default=90, description="Days before expiry below which preparation should start")

    # Work experience
    max_countable_hours_per_week: int = Field(default=30, description="Weekly hours counted towards full-time equivalence")
    full_time_year_hours: int = Field(default=1560, description="Hours equal to one year of full-time work")
    fst_required_hours: int = Field(default=3120, description="Skilled Trades minimum (two years full-time)")

    # Legal
    serious_sentence_years: int = Field(default=10, description="Max sentence at or above which an offence is serious")
    rehabilitation_years: int = Field(default=5, description="Years after sentence before rehabilitation can be sought")
    deemed_rehabilitation_years: int = Field(default=10, description="Years after sentence for deemed rehabilitation")
    misrepresentation_ban_years: int = Field(default=5, description="Length of the misrepresentation bar")
    medical_cost_threshold: Decimal = Field(
        default=Decimal("27162"),
        description="Annual excessive-demand cost threshold (CAD)",
    )


class ApiSettings(BaseSettings):
    """HTTP surface."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="API_", extra="ignore")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.crs.scale_max
        settings.compliance.restoration_window_days
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    crs: CrsSettings = Field(default_factory=CrsSettings)
    compliance: ComplianceSettings = Field(default_factory=ComplianceSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton: import this wherever settings are needed.
settings = Settings()
