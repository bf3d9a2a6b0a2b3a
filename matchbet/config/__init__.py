"""Configuration module for the betting services."""

from matchbet.config.logging_config import configure_logging
from matchbet.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
