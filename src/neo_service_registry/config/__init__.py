"""Configuration module for neo-service-registry."""

# Logging configuration
from .logging_config import (
    setup_logging,
    get_logger,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

# Settings
from .settings import ServiceRegistrySettings, get_settings

__all__ = [
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    "ServiceRegistrySettings",
    "get_settings",
]
