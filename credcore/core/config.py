"""
Core configuration module for the credential and signing toolkit.

Uses Pydantic Settings for environment-based configuration with validation.
Secrets (webhook keys) are loaded from environment variables or .env file
and never have defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Toolkit settings loaded from environment variables.

    All settings can be overridden via ``CREDCORE_``-prefixed environment
    variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREDCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Password hashing
    password_work_factor: int = Field(
        default=12,
        description="Default bcrypt cost used when hashing passwords",
    )
    min_work_factor: int = Field(
        default=10,
        ge=4,
        le=31,
        description="Lowest bcrypt cost accepted by the hasher",
    )
    max_work_factor: int = Field(
        default=16,
        ge=4,
        le=31,
        description="Highest bcrypt cost accepted by the hasher",
    )

    # Random values
    token_bytes: int = Field(
        default=32,
        ge=16,
        description="Default number of random bytes in a secure token",
    )
    otp_length: int = Field(
        default=6,
        ge=4,
        le=12,
        description="Default number of digits in a one-time code",
    )

    # Masking
    mask_visible_chars: int = Field(
        default=4,
        ge=0,
        description="Characters kept verbatim at each end of a masked value",
    )

    # Rate limit descriptor defaults
    rate_limit_window_ms: int = Field(
        default=15 * 60 * 1000,
        gt=0,
        description="Default rate limit window in milliseconds",
    )
    rate_limit_max_requests: int = Field(
        default=100,
        gt=0,
        description="Default maximum requests per window",
    )
    rate_limit_message: str = Field(
        default="Too many requests from this IP",
        min_length=1,
        description="Default message returned when the limit is hit",
    )

    # Webhooks
    webhook_secret: SecretStr | None = Field(
        default=None,
        description="Shared secret for webhook and payment signatures",
    )
    webhook_signature_header: str = Field(
        default="X-Webhook-Signature",
        description="Request header carrying the webhook signature",
    )

    # Reset tokens
    reset_token_ttl_seconds: int = Field(
        default=600,
        ge=1,
        description="Lifetime of password reset tokens in seconds",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Application log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )
    log_masked_fields: list[str] = Field(
        default=[
            "token",
            "password",
            "secret",
            "signature",
            "authorization",
            "api_key",
            "otp",
        ],
        description="Log event keys whose values are masked before rendering",
    )

    @model_validator(mode="after")
    def check_work_factor_bounds(self) -> "Settings":
        """Ensure the default work factor sits inside the accepted range."""
        if self.min_work_factor > self.max_work_factor:
            raise ValueError("min_work_factor must not exceed max_work_factor")
        if not self.min_work_factor <= self.password_work_factor <= self.max_work_factor:
            raise ValueError(
                "password_work_factor must be between "
                f"{self.min_work_factor} and {self.max_work_factor}"
            )
        return self

    @property
    def webhook_secret_bytes(self) -> bytes | None:
        """Webhook secret as UTF-8 bytes, or None if not configured."""
        if self.webhook_secret is None:
            return None
        return self.webhook_secret.get_secret_value().encode("utf-8")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached toolkit settings.

    Settings are loaded once and cached for the lifetime of the process.

    Returns:
        Settings: Toolkit configuration instance.

    Raises:
        ValidationError: If settings are invalid.
    """
    return Settings()
