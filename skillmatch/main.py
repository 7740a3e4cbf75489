"""Command-line entry point for SkillMatch."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml
from dotenv import load_dotenv

from skillmatch.config.environment import load_environment_config
from skillmatch.config.exceptions import ConfigurationError
from skillmatch.config.loader import load_config, validate_config_file
from skillmatch.exceptions import InputError
from skillmatch.logging import get_logger
from skillmatch.logging.config import configure_logging
from skillmatch.matching import MatchingEngine, build_rationale_dict

logger = get_logger(__name__, component="cli")


def read_records(path: Path) -> Any:
    """Read a JSON or YAML document.

    Raises:
        InputError: If the file cannot be read or parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            # JSON is a subset of YAML
            return yaml.safe_load(f)
    except OSError as e:
        raise InputError(f"Cannot read input file: {e.strerror}", path) from e
    except yaml.YAMLError as e:
        raise InputError(f"Cannot parse input file: {e}", path) from e


def _read_mapping(path: Path) -> dict:
    data = read_records(path)
    if not isinstance(data, dict):
        raise InputError("Expected a single record (mapping)", path)
    return data


def _read_list(path: Path) -> List[Any]:
    data = read_records(path)
    if data is None:
        return []
    if not isinstance(data, list):
        raise InputError("Expected a list of records", path)
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillmatch",
        description="SkillMatch - rank jobs and suggest connections from declared skills and free text",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: $SKILLMATCH_CONFIG, skillmatch.yaml, built-in defaults)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser("extract", help="List vocabulary skills found in text")
    extract.add_argument("text", help="Free text to scan")

    jobs = subparsers.add_parser("recommend-jobs", help="Rank jobs for a user profile")
    jobs.add_argument("--profile", type=Path, required=True, help="User profile (JSON/YAML)")
    jobs.add_argument("--jobs", type=Path, required=True, help="List of jobs (JSON/YAML)")
    jobs.add_argument("--explain", action="store_true", help="Attach a score breakdown to every result")

    connections = subparsers.add_parser("suggest-connections", help="Suggest users to connect with")
    connections.add_argument("--profile", type=Path, required=True, help="User profile (JSON/YAML)")
    connections.add_argument("--users", type=Path, required=True, help="List of users (JSON/YAML)")
    connections.add_argument("--explain", action="store_true", help="Attach a score breakdown to every result")

    validate = subparsers.add_parser("validate-config", help="Validate a configuration file")
    validate.add_argument("path", type=Path, help="Configuration file to validate")

    return parser


def run_command(args: argparse.Namespace, engine: MatchingEngine) -> Any:
    """Execute a parsed matching command and return JSON-serializable output."""
    if args.command == "extract":
        return sorted(engine.extract_skills(args.text))

    if args.command == "recommend-jobs":
        profile = _read_mapping(args.profile)
        ranked = engine.recommend_jobs(profile.get("skills"), profile.get("bio"), _read_list(args.jobs))
        output = []
        for candidate in ranked:
            item = candidate.to_dict()
            if args.explain:
                item["rationale"] = build_rationale_dict(candidate.match)
            output.append(item)
        return output

    if args.command == "suggest-connections":
        profile = _read_mapping(args.profile)
        suggestions = engine.suggest_connections(profile, _read_list(args.users))
        output = []
        for suggestion in suggestions:
            item = suggestion.to_dict()
            if args.explain:
                item["rationale"] = build_rationale_dict(suggestion)
            output.append(item)
        return output

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for SkillMatch.

    Returns:
        Exit code (0 for success, 1 for configuration or input errors).
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    if args.command == "validate-config":
        return 0 if validate_config_file(args.path) else 1

    try:
        env_config = load_environment_config()
        app_config = load_config(args.config or env_config.config_path)

        # Log level priority: CLI > Environment > Config
        log_level = args.log_level or env_config.log_level or app_config.logging.level
        log_format = env_config.log_format or app_config.logging.format
        configure_logging(level=log_level, format_type=log_format, environment=env_config.environment)

        engine = MatchingEngine.from_config(app_config)
        output = run_command(args, engine)

    except (ConfigurationError, InputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(
            "Command failed",
            extra={"event": "cli.failed", "command": args.command, "error_type": type(e).__name__},
        )
        return 1

    # YAML input can carry dates and timestamps in pass-through fields
    json.dump(output, sys.stdout, indent=2, ensure_ascii=False, default=str)
    sys.stdout.write("\n")
    logger.debug("Command completed", extra={"event": "cli.completed", "command": args.command})
    return 0


if __name__ == "__main__":
    sys.exit(main())
