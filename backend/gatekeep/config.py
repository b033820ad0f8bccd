"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from GATEKEEP_* environment variables."""

    # Logging
    LOG_LEVEL: str = "info"
    DEBUG: bool = False

    # Emit a debug event for every failed TypeGuard check
    LOG_FAILURES: bool = False

    model_config = {"env_prefix": "GATEKEEP_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
