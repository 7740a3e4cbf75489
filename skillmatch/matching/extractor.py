"""Skill extraction from free text.

Extraction is a plain substring scan of the lower-cased text for every
vocabulary term. There is no tokenization or word-boundary check, so "react"
is found inside "reactive" and "ai" inside "maintain". Tightening this would
change scores across every ranking, so it stays permissive.
"""

from typing import Any, FrozenSet, Optional

from .vocabulary import DEFAULT_VOCABULARY, SkillVocabulary


class SkillExtractor:
    """Finds vocabulary terms mentioned in free text."""

    def __init__(self, vocabulary: Optional[SkillVocabulary] = None):
        """Initialize SkillExtractor.

        Args:
            vocabulary: Terms to look for (defaults to the built-in vocabulary)
        """
        self.vocabulary = vocabulary if vocabulary is not None else DEFAULT_VOCABULARY

    def extract(self, text: Any) -> FrozenSet[str]:
        """Return the distinct vocabulary terms contained in ``text``.

        ``None`` and non-string input are treated as empty text.
        """
        if not isinstance(text, str) or not text:
            return frozenset()

        normalized = text.lower()
        return frozenset(term for term in self.vocabulary if term in normalized)

    def shared(self, left: Any, right: Any) -> FrozenSet[str]:
        """Terms extracted from both texts."""
        return self.extract(left) & self.extract(right)


DEFAULT_EXTRACTOR = SkillExtractor(DEFAULT_VOCABULARY)


def extract_skills(text: Any, vocabulary: Optional[SkillVocabulary] = None) -> FrozenSet[str]:
    """Extract skills from ``text`` using ``vocabulary`` or the default one."""
    if vocabulary is None:
        return DEFAULT_EXTRACTOR.extract(text)
    return SkillExtractor(vocabulary).extract(text)
