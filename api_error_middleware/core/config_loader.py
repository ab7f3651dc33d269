"""Locate the .env files read by the settings classes in ``main_config``."""

import os
from pathlib import Path

from api_error_middleware.core.enums import Environment

__all__ = ["ENV_FILES_DIR", "ENV_VAR", "Environment", "get_current_environment", "get_env_files"]

ENV_VAR = "ENV"
# api_error_middleware/env_files/
ENV_FILES_DIR = Path(__file__).resolve().parent.parent / "env_files"


def get_current_environment() -> Environment:
    """Environment named by ``$ENV``; a missing or unknown value means local."""
    raw = os.getenv(ENV_VAR, "").strip().lower()
    return next((env for env in Environment if env.value == raw), Environment.LOCAL)


def get_env_files(override: Environment | None = None, env_dir: Path = ENV_FILES_DIR) -> list[str]:
    """.env files in load order: ``.env_base`` first, then ``.env_<environment>``.

    ``override`` lets a developer point a local run at another environment's
    file; it is ignored everywhere except local. Missing files are skipped by
    pydantic-settings.
    """
    env = get_current_environment()
    if override is not None and env is Environment.LOCAL:
        env = override
    return [str(env_dir / ".env_base"), str(env_dir / f".env_{env.value}")]
