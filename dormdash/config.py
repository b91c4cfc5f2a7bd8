"""
Configuration management for the DormDash core
"""


import threading
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dormdash.infrastructure.utilities.constants import (
    CheckoutSettings,
    InstitutionDomains,
)


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(
        default="development", description="Application environment"
    )

    # Checkout settings
    currency: str = Field(
        default=CheckoutSettings.DEFAULT_CURRENCY, description="Currency code", min_length=3, max_length=3
    )
    tax_rate: float = Field(
        default=CheckoutSettings.DEFAULT_TAX_RATE, description="Sales tax rate applied to the subtotal", ge=0
    )
    delivery_fee_cents: int = Field(
        default=CheckoutSettings.FIXED_DELIVERY_FEE_CENTS, description="Flat delivery fee in cents", ge=0
    )

    # Accounts
    institutional_email_suffixes: List[str] = Field(
        default=list(InstitutionDomains.DEFAULT_SUFFIXES),
        description="Email suffixes accepted for registration",
    )


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next get_config() re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
