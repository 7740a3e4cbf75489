"""Exceptions raised by the configuration layer."""

from typing import List, Optional

from skillmatch.exceptions import SkillMatchError


class ConfigurationError(SkillMatchError):
    """
    Exception raised when configuration cannot be loaded or validated.

    Collects any number of specific validation errors together with hints
    for fixing them, and renders them as a single readable message.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Primary error message
            errors: Specific validation errors
            suggestions: Hints for fixing the errors
        """
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.errors:
            parts.append("\nValidation Errors:")
            parts.extend(f"  {i}. {error}" for i, error in enumerate(self.errors, 1))

        if self.suggestions:
            parts.append("\nSuggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)
