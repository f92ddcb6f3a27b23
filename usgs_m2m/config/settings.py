"""Pydantic Settings for the M2M client.

All environment variables use the M2M_ prefix.
Example: M2M_BASE_URL=http://localhost:8080/api/, M2M_TIMEOUT_SECONDS=5
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from usgs_m2m.transport.headers import is_header_text

DEFAULT_BASE_URL = "https://m2m.cr.usgs.gov/api/api/json/stable/"


class M2MSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Endpoint
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0)  # Fixed per-call budget

    # Headers
    auth_token: str | None = None  # Installed as X-Auth-Token on construction
    user_agent: str | None = None

    model_config = {"env_prefix": "M2M_"}

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url must not be empty")
        return value if value.endswith("/") else value + "/"

    @field_validator("auth_token", "user_agent")
    @classmethod
    def _ensure_header_text(cls, value: str | None) -> str | None:
        if value is not None and not is_header_text(value):
            raise ValueError("must be printable ASCII (sent as an HTTP header)")
        return value
