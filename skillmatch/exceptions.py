"""Base exceptions for SkillMatch.

The matching core itself never raises on content; these cover the
surrounding layers (configuration and CLI input files).
"""

from pathlib import Path
from typing import Optional, Union


class SkillMatchError(Exception):
    """Base class for all SkillMatch errors."""


class InputError(SkillMatchError):
    """Raised when an input file for the CLI cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{message} ({self.path})"
        super().__init__(message)
