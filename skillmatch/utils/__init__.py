"""Utility functions for presenting match results."""

from .highlighting import highlight_keywords, truncate_text

__all__ = ["highlight_keywords", "truncate_text"]
