"""Application settings loaded from environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LIFETIME = 3600

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class BearerGrantSettings(BaseSettings):
    """Defaults for the command line tool and logging."""

    model_config = SettingsConfigDict(env_prefix="BEARER_GRANT_")

    credentials_file: str = ""
    default_scope: str = "CLOUD_PLATFORM"
    default_lifetime: int = DEFAULT_LIFETIME
    log_level: LogLevel = "warning"
    log_json: bool = False
