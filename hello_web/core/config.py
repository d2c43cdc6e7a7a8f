"""
Process configuration, read once from the environment at startup.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from hello_web.core import build_info

DEFAULT_PORT = "8080"


class Settings(BaseSettings):
    # Empty variables count as unset so PORT="" falls back to 8080.
    model_config = SettingsConfigDict(case_sensitive=True, env_ignore_empty=True, frozen=True)

    PORT: str = DEFAULT_PORT
    # empty: every interface, IPv4 and IPv6
    HOST: str = ""

    APP_VERSION: str = build_info.VERSION
    GIT_SHA: str = build_info.GIT_SHA
    BUILD_TIME: str = build_info.BUILD_TIME

    READ_HEADER_TIMEOUT_SECONDS: float = 5.0
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    return Settings()

