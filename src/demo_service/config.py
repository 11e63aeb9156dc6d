from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


class Settings(BaseSettings):
    """Service settings loaded from environment variables with DEMO_ prefix."""

    # Listener
    host: str = "0.0.0.0"
    port: int = 3000
    # Logging (uvicorn level names; "trace" maps to DEBUG for stdlib logging)
    log_level: LogLevel = "info"

    model_config = SettingsConfigDict(env_prefix="DEMO_", env_file=".env")

    @field_validator("log_level", mode="before")
    @classmethod
    def _lowercase_log_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return cached service settings instance."""
    return Settings()
