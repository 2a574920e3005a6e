"""
Centralized configuration module for application-wide settings.

This module provides centralized configuration for timezone handling,
the text-generation collaborator and start-up behaviour. Values come from
environment variables (optionally loaded from a .env file by main).
"""

import logging
import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("true", "1", "yes")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower().strip() in TRUTHY_VALUES


# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    Returns:
        ZoneInfo: Application timezone (defaults to UTC if not configured)

    Environment Variables:
        TZ: Timezone identifier (e.g., 'Europe/Madrid', 'UTC')
            Default: 'UTC' (safe fallback)
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


APP_TZ = get_app_timezone()


def app_today() -> date:
    """Return today's calendar date in the application timezone."""
    return datetime.now(APP_TZ).date()


def log_timezone_config():
    """Log the active timezone configuration at start-up."""
    logger.info(
        "Timezone configuration initialized",
        extra={
            "context": {
                "timezone": str(APP_TZ),
                "tz_env_var": os.getenv("TZ", "UTC"),
            }
        },
    )


# ===========================
# Text Generation (Gemini) Configuration
# ===========================

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_TIMEOUT = 30


def get_gemini_api_key() -> str | None:
    """
    Get the Gemini API key.

    Environment Variables:
        GEMINI_API_KEY: preferred name
        API_KEY: accepted for compatibility with older deployments
    """
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None


def get_gemini_model() -> str:
    return os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)


def get_gemini_timeout() -> int:
    """HTTP timeout in seconds for text-generation calls."""
    raw = os.getenv("GEMINI_TIMEOUT", str(DEFAULT_GEMINI_TIMEOUT))
    try:
        timeout = int(raw)
    except ValueError:
        logger.warning(
            "Invalid GEMINI_TIMEOUT, using default",
            extra={"context": {"value": raw, "default": DEFAULT_GEMINI_TIMEOUT}},
        )
        return DEFAULT_GEMINI_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_GEMINI_TIMEOUT


def log_text_generation_config():
    """Log whether the text-generation collaborator is usable."""
    api_key = get_gemini_api_key()
    if not api_key:
        logger.warning(
            "GEMINI_API_KEY not set. Marketing and assistant calls will return a configuration message.",
            extra={"context": {"model": get_gemini_model()}},
        )
        return
    logger.info(
        "Text generation configured",
        extra={
            "context": {
                "model": get_gemini_model(),
                "timeout": get_gemini_timeout(),
            }
        },
    )


# ===========================
# Start-up Configuration
# ===========================


def should_seed_demo_data() -> bool:
    """
    Whether the in-memory state is seeded with demo data on start-up.

    Environment Variables:
        SEED_DEMO_DATA: Default 'true'
    """
    return _env_flag("SEED_DEMO_DATA", "true")


def should_log_to_file() -> bool:
    """
    Whether rotating log files are written under logs/.

    Environment Variables:
        LOG_TO_FILE: Default '0' (stdout only)
    """
    return _env_flag("LOG_TO_FILE", "0")


def is_rate_limit_enabled() -> bool:
    return _env_flag("RATE_LIMIT_ENABLED", "1")
