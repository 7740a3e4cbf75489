"""Configuration loader for SkillMatch."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_LOCATIONS = [
    Path("skillmatch.yaml"),
    Path("config") / "skillmatch.yaml",
]


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate configuration from a YAML file.

    Lookup order:
    1. Use provided config_path if given (must exist)
    2. Use $SKILLMATCH_CONFIG if set (must exist)
    3. Try skillmatch.yaml in current directory
    4. Try ./config/skillmatch.yaml
    5. Fall back to built-in defaults

    Args:
        config_path: Optional path to configuration file

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    config_file = _find_config_file(config_path)
    if config_file is None:
        logger.debug(
            "No configuration file found, using defaults",
            extra={"event": "config.defaults"},
        )
        return AppConfig()

    config_dict = _read_yaml(config_file)

    # An empty file is a valid "all defaults" configuration
    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration root must be a mapping, got {type(config_dict).__name__}",
            suggestions=["Start the file with top-level keys such as 'scoring:'"],
        )

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    app_config = parse_config(config_dict)
    logger.info(
        "Configuration loaded",
        extra={"event": "config.loaded", "config_path": str(config_file)},
    )
    return app_config


def parse_config(config_dict: Dict[str, Any]) -> AppConfig:
    """
    Validate a raw configuration mapping.

    Args:
        config_dict: Parsed YAML content

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            error_type = error["type"]

            if error_type == "missing":
                errors.append(f"Missing required field: {field_path}")
            elif error_type == "extra_forbidden":
                errors.append(f"Unknown field: {field_path}")
            elif error_type in ("string_type", "int_type", "float_type", "bool_type", "list_type"):
                expected_type = error_type.replace("_type", "")
                errors.append(
                    f"Invalid type for '{field_path}': expected {expected_type}, "
                    f"got {error.get('input')!r}"
                )
            else:
                errors.append(f"{field_path}: {error['msg']}")

        raise ConfigurationError(
            "Configuration validation failed",
            errors=errors,
            suggestions=[
                "Review skillmatch.example.yaml for the expected format",
                "Verify field types match the expected schema",
            ],
        ) from e


def _read_yaml(config_file: Path) -> Any:
    try:
        with open(config_file, "r") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
        ) from e


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find configuration file using fallback logic.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to configuration file, or None when defaults should be used

    Raises:
        ConfigurationError: If an explicitly requested file does not exist
    """
    explicit = config_path or os.getenv("SKILLMATCH_CONFIG")
    if explicit:
        explicit = Path(explicit)
        if not explicit.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {explicit}",
                suggestions=[
                    f"Ensure {explicit} exists",
                    "Check --config and SKILLMATCH_CONFIG",
                ],
            )
        return explicit

    for candidate in DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return None


def validate_config_file(config_path: Path) -> bool:
    """
    Validate a configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        True if valid, False otherwise (errors printed to stdout)
    """
    try:
        load_config(Path(config_path))
    except ConfigurationError as e:
        print(f"✗ Configuration validation failed:\n{e}")
        return False

    print(f"✓ Configuration file {config_path} is valid")
    return True
