"""Main application settings and configuration management.

This module composes the settings of every concern (app, auth, email) into a
single ``Settings`` class, loads them from environment variables and ``.env``
files, and exposes a module-level ``settings`` singleton.

Environment Support:
- Development: Uses .env, email test mode enabled
- Test: Uses .env.test, email test mode enabled
- Staging/Production: Uses .env.staging / .env.production, real SMTP delivery

A missing or malformed signing key is a ``ConfigurationError`` raised while
this module is imported, so the process fails at startup rather than on the
first login.
"""

import logging
import os
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import SettingsConfigDict

from src.core.exceptions import ConfigurationError

from .app import AppSettings
from .auth import AuthSettings
from .email import EmailSettings

logger = logging.getLogger(__name__)
logging.getLogger("passlib").setLevel(logging.ERROR)


class Settings(AppSettings, AuthSettings, EmailSettings):
    """The main settings class that aggregates all application configurations.

    Usage:
        - Access settings via the singleton instance ``settings`` in wiring code
          (application factory, dependency providers). Domain services receive
          their configuration through their constructors instead.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._set_environment_defaults(self.APP_ENV)

    def _set_environment_defaults(self, env: str) -> None:
        """Set environment-specific default values.

        Args:
            env: Environment name
        """
        if env in ("development", "test"):
            self.EMAIL_TEST_MODE = True
            logger.info(f"Email test mode enabled for {env} environment")

        if env == "development":
            self.DEBUG = True

        logger.info(f"Application running in {env} environment")


def create_settings() -> Settings:
    """Create settings instance with environment-specific configuration.

    Returns:
        Settings: Configured settings instance

    Raises:
        ConfigurationError: If required settings are missing or invalid.
    """
    env = os.getenv("APP_ENV", "development")

    env_files = {
        "development": ".env",
        "test": ".env.test",
        "staging": ".env.staging",
        "production": ".env.production",
    }
    env_file = env_files.get(env, ".env")

    try:
        if env != "development" and Path(env_file).exists():
            logger.info(f"Loading environment configuration from {env_file}")
            settings_instance = Settings(_env_file=env_file)
        else:
            settings_instance = Settings()
        settings_instance.validate_smtp_config()
    except (PydanticValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    return settings_instance


settings = create_settings()
