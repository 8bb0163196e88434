"""
Environment detection, run metadata and logging shortcuts.
"""
import logging
import platform
from datetime import datetime, timezone
from typing import Any

from ..api.client import CLEANUP_ALL, PumpMasterApi
from ..config import Settings, get_settings

logger = logging.getLogger("pumpmaster_qa")

_LEVELS = {
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def is_ci(settings: Settings | None = None) -> bool:
    return (settings or get_settings()).is_ci


def get_environment(settings: Settings | None = None) -> str:
    return (settings or get_settings()).environment


def is_headless(settings: Settings | None = None) -> bool:
    return (settings or get_settings()).is_headless


def log(message: str, level: str = "info") -> None:
    """Log through the package logger; level is one of info, warn, error."""
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level {level!r}")
    logger.log(_LEVELS[level], message)


def get_test_metadata(settings: Settings | None = None) -> dict[str, Any]:
    settings = settings or get_settings()
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "isCI": settings.is_ci,
        "isHeadless": settings.is_headless,
        "pythonVersion": platform.python_version(),
        "platform": platform.system().lower(),
    }


def cleanup_test_data(api: PumpMasterApi, scope: str = CLEANUP_ALL) -> int:
    """Remove test-created pumps through the API. Never raises.

    The default sweeps every test-marked pump; only run it when no other
    worker is still using its records.
    """
    logger.info("Cleaning up test data against %s", api.base_url)
    return api.cleanup(scope=scope)
