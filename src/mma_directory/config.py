"""Application configuration via Pydantic BaseSettings.

Settings are built once at process start with `load_settings()` and passed
to the data source client, repository and UI.
"""

from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENV_FILE = ".env"


class ConfigurationError(RuntimeError):
    """Raised when required data source configuration is missing."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # Data source
    supabase_url: str = Field(validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"))
    supabase_key: str = Field(validation_alias=AliasChoices("SUPABASE_KEY", "VITE_SUPABASE_KEY"))
    request_timeout: float = 10.0

    # Display
    display_timezone: str = "America/New_York"
    log_level: str = "INFO"

    @field_validator("supabase_url", "supabase_key")
    @classmethod
    def _require_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("supabase_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def rest_url(self) -> str:
        """Base URL of the REST-over-tables endpoint."""
        return f"{self.supabase_url}/rest/v1"


def load_settings(env_file: Optional[str] = DEFAULT_ENV_FILE, **overrides) -> Settings:
    """
    Build settings from the environment (and `.env`).

    Args:
        env_file: Path of the dotenv file to read, or None to skip it
        **overrides: Explicit values taking precedence over the environment

    Raises:
        ConfigurationError: If the data source URL or key is missing
    """
    try:
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as e:
        missing = sorted({str(err["loc"][0]).upper() for err in e.errors() if err["loc"]})
        raise ConfigurationError(
            f"Missing or invalid data source configuration: {', '.join(missing) or 'unknown'}. "
            "Set SUPABASE_URL and SUPABASE_KEY in the environment or .env file."
        ) from e
