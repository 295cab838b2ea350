"""Configuration package."""

from cashbook.config.settings import Settings, get_settings, reset_settings
from cashbook.config.logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "setup_logging",
]
