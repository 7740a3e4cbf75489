"""Keyword highlighting for match explanations.

Highlighting follows the same rule as skill extraction: case-insensitive
substring matches with no word-boundary check, so every highlighted span is
one the extractor would have counted.
"""

import re
from typing import Iterable


def highlight_keywords(
    text: str, keywords: Iterable[str], marker_start: str = "**", marker_end: str = "**"
) -> str:
    """Wrap each keyword occurrence in ``text`` with markers.

    Original casing of the text is preserved. Longer keywords are matched
    first, so "machine learning" is not split by a shorter overlapping term.

    Example:
        >>> highlight_keywords("Senior React developer", ["react"])
        'Senior **React** developer'
    """
    if not text:
        return text

    terms = sorted({k.strip() for k in keywords if k and k.strip()}, key=len, reverse=True)
    if not terms:
        return text

    pattern = re.compile("|".join(re.escape(term) for term in terms), re.IGNORECASE)
    return pattern.sub(lambda m: f"{marker_start}{m.group(0)}{marker_end}", text)


def truncate_text(text: str, max_length: int = 200, suffix: str = "...") -> str:
    """Truncate text to ``max_length`` characters, breaking on a word if possible."""
    if not text or len(text) <= max_length:
        return text

    cut = text[: max_length - len(suffix)]
    last_space = cut.rfind(" ")
    if last_space > max_length // 2:
        cut = cut[:last_space]

    return cut.rstrip() + suffix
