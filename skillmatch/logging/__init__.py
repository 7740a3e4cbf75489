"""Structured logging helpers for SkillMatch."""

import logging
from typing import Optional, Union

from .config import configure_logging
from .context import clear_log_context, get_log_context, log_context, pop_log_context, push_log_context


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges a default component field with call extras."""

    def process(self, msg, kwargs):
        # Call-site extras take precedence over the adapter's defaults
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a logger, optionally tagging every record with a component.

    Args:
        name: Logger name (typically __name__)
        component: Component identifier injected into all records

    Example:
        >>> logger = get_logger(__name__, component="ranker")
        >>> logger.info("Ranked jobs", extra={"event": "ranking.jobs.completed"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger


__all__ = [
    "ComponentLoggerAdapter",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_log_context",
    "push_log_context",
    "pop_log_context",
    "clear_log_context",
]
