"""Core: config, logging."""

from reqw.core.config import Settings, get_settings
from reqw.core.logging import DevFormatter, JsonFormatter, configure_logging, setup_logging

__all__ = [
    "DevFormatter",
    "JsonFormatter",
    "Settings",
    "configure_logging",
    "get_settings",
    "setup_logging",
]
