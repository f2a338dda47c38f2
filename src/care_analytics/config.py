"""Application configuration."""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from care_analytics.domain.windows import TimeWindow

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    timezone: str = "UTC"
    default_window_days: int = TimeWindow.WEEK.days
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="CARE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("default_window_days", mode="before")
    @classmethod
    def _supported_window(cls, value: str | int) -> int:
        return parse_window_days(value).days

    @property
    def default_window(self) -> TimeWindow:
        return TimeWindow(self.default_window_days)


def parse_window_days(raw: str | int) -> TimeWindow:
    """Parse ``7``, ``"30"`` or ``"90d"`` into a supported window."""
    cleaned = str(raw).strip().lower().removesuffix("d")
    if not cleaned.isdigit():
        raise ValueError(f"Unsupported window: {raw!r}")
    try:
        return TimeWindow(int(cleaned))
    except ValueError as exc:
        raise ValueError(f"Unsupported window: {raw!r}") from exc
