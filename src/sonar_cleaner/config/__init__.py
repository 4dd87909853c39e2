"""Configuration management for sonar-cleaner."""

from sonar_cleaner.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from sonar_cleaner.config.models import CleanupConfig, load_config

__all__ = [
    "CleanupConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "load_config",
]
