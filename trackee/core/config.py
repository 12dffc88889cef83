# trackee/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Global application configuration.

    Values are loaded from environment variables (or a local .env file)
    at runtime.

    These settings are used for:
    - Attendance backend base URL and request timeout
    - Log level
    - Fallback labels/messages surfaced to the dashboard
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "Trackee Dashboard"
    APP_ENV: str = Field("local", description="Environment name: local/dev/stage/prod")

    API_BASE_URL: str = Field(
        "http://localhost:5000/api",
        description="Base URL of the attendance backend (login, roster, summary endpoints).",
    )
    API_TIMEOUT_SECONDS: float = Field(
        10.0,
        description="Timeout applied to every request sent to the attendance backend.",
    )

    LOG_LEVEL: str = Field(
        "INFO",
        description="Root log level for the trackee loggers (DEBUG/INFO/WARNING/ERROR).",
    )

    UNKNOWN_VERTICAL_LABEL: str = Field(
        "N/A",
        description="Label used for attendance records that carry no vertical.",
    )
    LOGIN_FALLBACK_MESSAGE: str = Field(
        "Login failed. Please check your credentials and try again.",
        description="Message reported when a login fails without a server-provided reason.",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached accessor for application settings.

    Settings are read and validated only once per process.
    """
    return Settings()
