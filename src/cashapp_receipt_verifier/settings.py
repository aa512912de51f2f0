"""Configuration settings for the receipt verifier."""

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_RECEIPT_BASE_URL = "https://cash.app/payments/"
DEFAULT_RECEIPT_JSON_BASE_URL = "https://cash.app/receipt-json/f/"
DEFAULT_USER_AGENT = "cashapp-receipt-verifier/0.1.0"


class VerifierSettings(BaseSettings):
    """Verifier configuration, read from ``CASHAPP_*`` variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CASHAPP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Provider endpoints
    receipt_base_url: str = Field(
        default=DEFAULT_RECEIPT_BASE_URL,
        description="Prefix every web receipt link must start with"
    )
    receipt_json_base_url: str = Field(
        default=DEFAULT_RECEIPT_JSON_BASE_URL,
        description="Endpoint the transaction token is appended to"
    )

    # HTTP client
    http_timeout: Optional[float] = Field(
        default=None, gt=0,
        description="Request timeout in seconds; unset keeps the HTTP client default"
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("receipt_base_url", "receipt_json_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("https://", "http://")):
            raise ValueError("must be an absolute http(s) URL")
        if not v.endswith("/"):
            raise ValueError("must end with '/'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def get_settings(**overrides) -> VerifierSettings:
    """
    Get a new settings instance.

    Raises:
        ConfigurationError: If the environment holds an invalid value
    """
    try:
        return VerifierSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid verifier configuration: {e.error_count()} error(s)",
            details={"errors": [
                {"field": ".".join(str(p) for p in err["loc"]), "error": err["msg"]}
                for err in e.errors()
            ]},
        ) from e
