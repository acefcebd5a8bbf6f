"""Pydantic models for client configuration."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from nautobot_cli.config.constants import DEFAULT_PAGE_VALUE, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class NautobotProfile(BaseModel):
    """A named Nautobot connection profile.

    Immutable once built. Negative ``offset``/``limit`` values are replaced by
    a safe default with a warning instead of failing construction.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url: str = Field(description="Nautobot base URL, e.g. https://nautobot.example.com")
    token: str | None = Field(default=None, description="API token")
    offset: int = Field(default=0, description="Offset of the first listed record")
    limit: int = Field(default=0, description="Page size requested from the API (0 = server default)")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("offset", "limit")
    @classmethod
    def coerce_negative(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            field = info.field_name or "value"
            logger.warning(
                "%s set to %d. Wrong %s value given: %d",
                field.capitalize(), DEFAULT_PAGE_VALUE, field, v,
            )
            return DEFAULT_PAGE_VALUE
        return v


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    profiles: dict[str, NautobotProfile] = Field(default_factory=dict)
