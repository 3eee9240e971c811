"""
Application-specific settings.
"""
from typing import List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, log format and the
    public base URL embedded in confirmation and reset links.

    Security Note:
        - Ensure ALLOWED_ORIGINS is explicitly set to trusted domains in production
          to prevent unauthorized cross-origin requests.
        - APP_URL is sent to users inside emails; it must point at a host the
          operator controls.
    """
    PROJECT_NAME: str = "warden"
    VERSION: str = "0.1.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    APP_URL: str = Field(default="http://localhost:8000/api/auth")
    ALLOWED_ORIGINS: Union[str, List[str]] = Field(default="http://localhost:8000")

    @field_validator("APP_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        Splits a comma-separated string of origins into a list.

        Args:
            v: Input value as a string or list of origins.

        Returns:
            List of stripped origin strings.
        """
        if isinstance(v, str):
            return [i.strip() for i in v.split(",")]
        return v
