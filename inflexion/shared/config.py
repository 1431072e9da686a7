# inflexion/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central configuration registry.
    Every field can be overridden with an INFLEXION_-prefixed environment
    variable or a line in `.env`.
    """

    # --- Application Meta ---
    APP_NAME: str = "inflexion"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE
    # Falls back to APP_NAME.
    OTEL_SERVICE_NAME: Optional[str] = None

    # --- Rule Data ---
    # None means the files packaged in inflexion/data.
    NOUNS_PATH: Optional[str] = None
    PREPOSITIONS_PATH: Optional[str] = None

    # Malformed noun rule lines raise instead of being logged and skipped.
    STRICT_NOUN_DB: bool = True

    # --- Markup ---
    # An uppercase directive letter (<N...>) starts option case folding.
    FOLD_FROM_DIRECTIVE_KIND: bool = False

    model_config = SettingsConfigDict(env_prefix="INFLEXION_", env_file=".env", extra="ignore")


settings = Settings()
