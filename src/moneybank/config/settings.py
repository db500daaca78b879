# src/moneybank/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Exchange rates to preload into a bank and logging options are read from
environment variables or a .env file.

Files that USE this module:
- moneybank.application.bank (create_bank seeds rates from settings)
- tests.test_settings (unit tests)

Files that this module USES:
- moneybank.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for LOG_LEVEL validation
from typing import List, Optional  # Type hints for lists and optional values

from pydantic import BaseModel, ConfigDict, Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from moneybank.shared.validators import (
    normalize_currency_code,  # Strip whitespace from configured labels
    validate_currency_code,  # Validate currency label format
    validate_rate,  # Validate positive integer rates
)


class RateEntry(BaseModel):
    """
    One configured directional exchange rate.
    
    Attributes:
        from_currency: Source currency label (JSON key "from")
        to_currency: Target currency label (JSON key "to")
        rate: Units of source currency per unit of target currency
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    
    from_currency: str = Field(..., alias="from")
    to_currency: str = Field(..., alias="to")
    rate: int = Field(..., strict=True)
    
    @field_validator("from_currency", "to_currency", mode="before")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate currency label format."""
        v = normalize_currency_code(v)
        if not validate_currency_code(v):
            raise ValueError(f"Invalid currency code: {v!r}")
        return v
    
    @field_validator("rate")
    @classmethod
    def validate_rate_value(cls, v: int) -> int:
        """Rates must be positive so reduction never divides by zero."""
        if not validate_rate(v):
            raise ValueError("Exchange rate must be a positive integer")
        return v


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # --- Rates ---
    # JSON list, e.g. [{"from": "CHF", "to": "USD", "rate": 2}]
    exchange_rates: List[RateEntry] = Field(default_factory=list, alias="EXCHANGE_RATES")
    default_currency: str = Field(default="USD", alias="DEFAULT_CURRENCY")
    
    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="MONEYBANK_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)
    
    @field_validator("default_currency", mode="before")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        """Validate currency label format."""
        v = normalize_currency_code(v)
        if not validate_currency_code(v):
            raise ValueError("Invalid DEFAULT_CURRENCY")
        return v
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return v


# Global settings instance
settings = Settings()
