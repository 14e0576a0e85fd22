"""Runtime settings read from the environment (and .env, via python-dotenv).

    FOLKLORERUN_CONTENT_URL        base URL serving the content JSON files
    FOLKLORERUN_CREATURE_RESOURCE  creature dataset file name
    FOLKLORERUN_UI_RESOURCE        UI parameter dataset file name
    FOLKLORERUN_FETCH_TIMEOUT      per-request timeout in seconds
    LOG_LEVEL                      root log level for the backend
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from folklorerun.loader import CREATURE_RESOURCE, DEFAULT_TIMEOUT, UI_RESOURCE

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent


class Settings(BaseModel):
    content_url: str = "http://localhost:13015/content"
    creature_resource: str = CREATURE_RESOURCE
    ui_resource: str = UI_RESOURCE
    fetch_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def get_settings(env_file: Path | None = None) -> Settings:
    """Read settings, returning defaults for anything unset or unusable."""
    load_dotenv(env_file or ROOT / ".env")
    defaults = Settings()
    return Settings(
        content_url=os.getenv("FOLKLORERUN_CONTENT_URL", defaults.content_url),
        creature_resource=os.getenv("FOLKLORERUN_CREATURE_RESOURCE", defaults.creature_resource),
        ui_resource=os.getenv("FOLKLORERUN_UI_RESOURCE", defaults.ui_resource),
        fetch_timeout=_float_env("FOLKLORERUN_FETCH_TIMEOUT", defaults.fetch_timeout),
        log_level=_level_env("LOG_LEVEL", defaults.log_level),
    )


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s=%r must be positive, using %s", name, raw, default)
        return default
    return value


def _level_env(name: str, default: str) -> str:
    raw = os.getenv(name, "")
    if not raw:
        return default
    level = raw.strip().upper()
    # getLevelName maps known names to their number, anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("%s=%r is not a log level, using %s", name, raw, default)
        return default
    return level
