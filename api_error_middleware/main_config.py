"""Interceptor and demo application configuration from environment variables."""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from api_error_middleware.core.config_loader import get_env_files
from api_error_middleware.core.enums import Environment


# =============================================================================
# LOCAL DEBUG OVERRIDE - Change this to test other environments locally
# =============================================================================
LOCAL_ENV_OVERRIDE: Environment | None = None  # e.g., Environment.PROD

ENV_FILES = get_env_files(LOCAL_ENV_OVERRIDE)


# =============================================================================
# Config Classes
# =============================================================================

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILES, extra="ignore")

    env: Environment = Field(default=Environment.LOCAL)
    debug: bool = Field(default=False)

    @field_validator("debug")
    @classmethod
    def _no_debug_in_prod(cls, v: bool, info) -> bool:
        if info.data.get("env") == Environment.PROD and v:
            raise ValueError(f"{info.field_name} cannot be True in production")
        return v

    @property
    def is_release(self) -> bool:
        return self.env.is_release

    @property
    def is_local(self) -> bool:
        return self.env == Environment.LOCAL


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILES, env_prefix="LOG_", extra="ignore")

    level: str = "INFO"
    format: Literal["console", "json"] = "console"
    level_sqlalchemy: str = "WARNING"
    level_uvicorn_access: str = "INFO"


class FastAPIConfig(BaseSettings):
    """Demo application configuration."""
    model_config = SettingsConfigDict(env_file=ENV_FILES, env_prefix="FASTAPI_", extra="ignore")

    title: str = "API Error Middleware Demo"
    description: str = "Routes that raise every failure shape the interceptor recognises"
    version: str = "0.1.0"
    debug: bool = False


# =============================================================================
# Lazy Loaders (cached)
# =============================================================================

@lru_cache
def get_settings() -> Settings:
    return Settings()

@lru_cache
def get_logging_config() -> LoggingConfig:
    return LoggingConfig()

@lru_cache
def get_fastapi_config() -> FastAPIConfig:
    return FastAPIConfig()
