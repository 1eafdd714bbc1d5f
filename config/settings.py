"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Validation happens automatically on startup.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra env vars
    )

    # ===================
    # SHEET FEED
    # ===================
    spreadsheet_id: str = Field(
        default="1-4Bd7MeYXMkkTWgkIbzrsn_eNz3Dzw5FgTxC7lFgsB0",
        description="Shared spreadsheet holding the production and invoice sheets"
    )
    production_sheet_name: str = Field(
        default="Sheet",
        description="Sheet with work orders and daily production"
    )
    invoice_sheet_name: str = Field(
        default="IN",
        description="Sheet with inbound quantities and invoice columns"
    )
    sheets_base_url: str = Field(
        default="https://docs.google.com/spreadsheets/d",
        description="Base URL of the spreadsheet service"
    )
    sheet_fetch_timeout_seconds: int = Field(
        default=15,
        ge=1,
        le=120,
        description="Timeout for a single sheet fetch"
    )

    # ===================
    # BUSINESS SETTINGS
    # ===================
    planning_year: int = Field(
        default=2026,
        ge=2000,
        le=2100,
        description="Year assumed for short MM-DD production dates"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API host"
    )
    api_port: int = Field(
        default=8000,
        ge=1000,
        le=65535,
        description="API port"
    )

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    def gviz_url(self, sheet_name: str) -> str:
        """Build the JSON export URL for one sheet of the spreadsheet."""
        return (
            f"{self.sheets_base_url.rstrip('/')}/{self.spreadsheet_id}"
            f"/gviz/tq?tqx=out:json&sheet={sheet_name}"
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings: Application settings

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()


# For convenient imports: from config.settings import settings
settings = get_settings()
