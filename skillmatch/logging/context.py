"""Context propagation for structured logging.

Fields pushed here (ranking kind, subject id, ...) are attached to every log
record emitted inside the scope. Backed by contextvars, so concurrent ranking
calls in separate threads or tasks never see each other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("skillmatch_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active logging context."""
    return LogContextVar.get().copy()


def push_log_context(**kwargs) -> Token:
    """Merge fields into the logging context.

    Args:
        **kwargs: Fields to add; existing keys are overwritten

    Returns:
        Token for pop_log_context()

    Example:
        >>> token = push_log_context(ranking="jobs", subject_id="u-1")
        >>> pop_log_context(token)
    """
    return LogContextVar.set({**LogContextVar.get(), **kwargs})


def pop_log_context(token: Token) -> None:
    """Restore the logging context captured by push_log_context()."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop all context fields. Mostly useful in tests."""
    LogContextVar.set({})


class log_context:
    """Context manager for scoped logging context.

    Example:
        >>> with log_context(ranking="connections", subject_id="u-1"):
        ...     logger.info("Ranking started")  # includes ranking and subject_id
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
