"""Application configuration read from the environment."""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from finpulse.core.exceptions import ConfigurationError
from finpulse.core.models import Theme, TimeRangeKey

ENV_PREFIX = "FINPULSE_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class Settings(BaseModel):
    """Dashboard settings.

    Attributes:
        default_range: Range selected when a view is mounted.
        theme: Colour theme of generated pages.
        derive_trend: Derive card arrows from the sign of the change text
            instead of always showing them as positive.
        reports_dir: Directory for generated HTML when no output is given.
        log_level: Level name for the finpulse logger.
    """

    default_range: TimeRangeKey = TimeRangeKey.SIX_MONTHS
    theme: Theme = Theme.LIGHT
    derive_trend: bool = False
    reports_dir: Path = Path("reports")
    log_level: str = "WARNING"

    @field_validator("default_range", mode="before")
    @classmethod
    def normalize_range(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"invalid log level '{value}'")
        return level

    @classmethod
    def from_env(cls, dotenv_path: Path | None = None) -> "Settings":
        """Build settings from FINPULSE_* variables (optionally from a .env file).

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        load_dotenv(dotenv_path)

        values: dict[str, object] = {}
        for field in ("default_range", "theme", "reports_dir", "log_level"):
            raw = os.getenv(ENV_PREFIX + field.upper())
            if raw is not None:
                values[field] = raw.strip().lower() if field == "theme" else raw

        raw_trend = os.getenv(ENV_PREFIX + "DERIVE_TREND")
        if raw_trend is not None:
            values["derive_trend"] = _parse_bool("DERIVE_TREND", raw_trend)

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid {ENV_PREFIX}* configuration: {e}") from e


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{ENV_PREFIX}{name} must be a boolean, got '{raw}'")


@lru_cache()
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings.from_env()
