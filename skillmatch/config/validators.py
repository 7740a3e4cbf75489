"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check a raw configuration for settings that are legal but suspicious.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    vocabulary = config_dict.get("vocabulary", {})
    if isinstance(vocabulary, dict):
        for key in ("terms", "extra_terms"):
            terms = vocabulary.get(key) or []
            if not isinstance(terms, list):
                continue
            normalized = [t.strip().lower() for t in terms if isinstance(t, str)]
            duplicates = {t for t in normalized if t and normalized.count(t) > 1}
            if duplicates:
                warning_messages.append(
                    f"Duplicate terms in vocabulary.{key} will be deduplicated: "
                    f"{', '.join(sorted(duplicates))}"
                )

    # Weights that can push past the cap make the clamp do the real work
    scoring = config_dict.get("scoring", {})
    if isinstance(scoring, dict):
        weight = scoring.get("declared_skill_weight", 70)
        cap = scoring.get("keyword_bonus_cap", 30)
        max_score = scoring.get("max_score", 100)
        if all(isinstance(v, (int, float)) for v in (weight, cap, max_score)):
            if weight + cap > max_score:
                warning_messages.append(
                    f"declared_skill_weight + keyword_bonus_cap ({weight + cap}) exceeds "
                    f"max_score ({max_score}); scores will be clamped"
                )

    connections = config_dict.get("connections", {})
    if isinstance(connections, dict):
        limit = connections.get("limit", 5)
        if isinstance(limit, int) and limit > 50:
            warning_messages.append(
                f"Large connections.limit ({limit}) returns most of the candidate pool"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
