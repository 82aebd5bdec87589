"""
Configuration Settings.

This module defines the client configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://api.stripe.com"


class StripeSettings(BaseSettings):
    """
    Stripe client settings model.

    All properties are automatically bound from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: Optional[str] = Field(
        default=None,
        alias="STRIPE_API_KEY",
        description="Secret API key used as Bearer credential (e.g. sk_test_...)",
    )
    api_base: str = Field(
        default=DEFAULT_API_BASE,
        alias="STRIPE_API_BASE",
        description="Base URL of the Stripe API",
    )
    api_version: Optional[str] = Field(
        default=None,
        alias="STRIPE_API_VERSION",
        description="Pinned API version sent as Stripe-Version header; account default when omitted",
    )
    stripe_account: Optional[str] = Field(
        default=None,
        alias="STRIPE_ACCOUNT",
        description="Connected account id sent as Stripe-Account header",
    )
    timeout: float = Field(
        default=30.0,
        alias="STRIPE_TIMEOUT",
        description="HTTP timeout in seconds",
        gt=0,
    )
    log_level: str = Field(
        default="WARNING",
        alias="STRIPE_LOG_LEVEL",
        description="Logging level for the stripe_terminal logger (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_base")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def configure_logging(level: str) -> None:
    """Set the level of the package logger (``stripe_terminal``)."""
    logging.getLogger("stripe_terminal").setLevel(level.upper())
