"""Configuration management module for SkillMatch."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, parse_config, validate_config_file
from .models import (
    AppConfig,
    ConnectionConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    RecommendationConfig,
    ScoringConfig,
    VocabularyConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "parse_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "VocabularyConfig",
    "ScoringConfig",
    "RecommendationConfig",
    "ConnectionConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
