"""Runtime configuration loaded from the environment."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Defaults for document generation; CLI options take precedence."""

    indent: int = Field(default=2, ge=0)
    output_format: Literal["json", "yaml"] = "json"
    example_seed: int | None = None
    strict: bool = False
    log_level: LogLevel = "WARNING"
    log_json: bool = False

    model_config = SettingsConfigDict(env_prefix="API_DOC_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings."""
    return Settings()
