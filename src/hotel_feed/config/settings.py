"""Runtime configuration for the hotel feed utility.

Relies on pydantic-settings so that environment variables (prefixed with ``HOTELS_``)
can override defaults. See `.env.example` for common values.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_XML_URL = "https://raw.githubusercontent.com/pbattu18/cse445-a4/master/Hotels.xml"
DEFAULT_XML_ERROR_URL = "https://raw.githubusercontent.com/pbattu18/cse445-a4/master/HotelsErrors.xml"
DEFAULT_XSD_URL = "https://raw.githubusercontent.com/pbattu18/cse445-a4/master/Hotels.xsd"


class Settings(BaseSettings):
    """Captures runtime configuration for a validation + conversion run."""

    xml_url: str = Field(
        default=DEFAULT_XML_URL,
        description="Hotels document that is validated and converted to JSON",
    )
    xml_error_url: str = Field(
        default=DEFAULT_XML_ERROR_URL,
        description="Intentionally invalid hotels document used to exercise diagnostics",
    )
    xsd_url: str = Field(default=DEFAULT_XSD_URL, description="XML Schema both documents are checked against")

    request_timeout_s: float = Field(default=30.0, description="Timeout applied to each HTTP fetch")
    user_agent: Optional[str] = Field(default="hotel-feed/0.1.0", description="User-Agent header for HTTP fetches")

    log_level: str = Field(default="WARNING")
    log_dir: Optional[Path] = Field(
        default=None, description="Directory for hotel_feed.log; stderr only when unset"
    )

    model_config = SettingsConfigDict(
        env_prefix="HOTELS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    @field_validator("xml_url", "xml_error_url", "xsd_url", mode="before")
    def _strip_location(cls, value: object) -> str:
        if not isinstance(value, str):
            raise ValueError("document locations must be strings")
        stripped = value.strip()
        if not stripped:
            raise ValueError("document locations must not be blank")
        return stripped

    @field_validator("log_dir", mode="before")
    def _expand_log_dir(cls, value: str | Path | None) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @field_validator("user_agent", mode="before")
    def _blank_user_agent(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    def ensure_directories(self) -> None:
        """Create directories that must exist at runtime."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    def client_options(self) -> dict[str, object]:
        options: dict[str, object] = {"timeout": self.request_timeout_s}
        if self.user_agent:
            options["headers"] = {"User-Agent": self.user_agent}
        logger.debug("HTTP client options: %s", options)
        return options
