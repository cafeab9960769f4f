"""Configuration management for PoseSandbox."""

from posesandbox.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from posesandbox.core.config.models import AppConfig, LoggingConfig, NotificationConfig

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    "configure_logging",
    # Models
    "AppConfig",
    "LoggingConfig",
    "NotificationConfig",
]
