"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "key-value"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """Initialize environment configuration."""
        self.config_path = config_path
        self.log_level = log_level
        self.log_format = log_format
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - SKILLMATCH_CONFIG: Path to the YAML configuration file
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Override log format (json, key-value)
    - ENVIRONMENT: Environment label attached to log records (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    config_path_str = os.getenv("SKILLMATCH_CONFIG")
    log_level = os.getenv("LOG_LEVEL")
    log_format = os.getenv("LOG_FORMAT")
    environment = os.getenv("ENVIRONMENT")

    config_path = None
    if config_path_str:
        config_path = Path(config_path_str)
        if not config_path.exists():
            errors.append(f"SKILLMATCH_CONFIG points to a missing file: {config_path_str}")

    if log_level:
        log_level = log_level.upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    if log_format:
        log_format = log_format.lower()
        if log_format not in VALID_LOG_FORMATS:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(VALID_LOG_FORMATS)}"
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        config_path=config_path,
        log_level=log_level,
        log_format=log_format,
        environment=environment,
    )
