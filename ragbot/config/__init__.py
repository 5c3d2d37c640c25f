"""Application configuration and logging setup."""

from .logging import configure_logging, setup_logging
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging", "setup_logging"]
