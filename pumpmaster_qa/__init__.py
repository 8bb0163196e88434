# Pump Master QA support package

from .config import Settings, get_settings, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]

__version__ = "0.1.0"
