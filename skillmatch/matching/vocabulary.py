"""Skill vocabulary used for free-text extraction."""

from typing import Iterable, Iterator, Tuple

DEFAULT_SKILL_TERMS: Tuple[str, ...] = (
    "javascript", "typescript", "react", "node.js", "python", "java", "c++", "c#",
    "html", "css", "sql", "mongodb", "postgresql", "aws", "docker", "kubernetes",
    "git", "agile", "scrum", "machine learning", "ai", "blockchain", "solana",
    "ethereum", "web3", "smart contracts", "defi", "nft", "rust", "solidity",
    "express", "next.js", "vue.js", "angular", "tailwind", "bootstrap", "figma",
    "photoshop", "illustrator", "ui/ux", "design", "marketing", "seo", "analytics",
    "project management", "leadership", "communication", "problem solving",
)


class SkillVocabulary:
    """Immutable, ordered set of lower-cased skill terms.

    Blank entries and duplicates are dropped on construction; the first
    occurrence of each term fixes its position.
    """

    __slots__ = ("_terms", "_lookup")

    def __init__(self, terms: Iterable[str]):
        ordered = []
        seen = set()
        for term in terms:
            canonical = str(term).strip().lower()
            if canonical and canonical not in seen:
                seen.add(canonical)
                ordered.append(canonical)
        self._terms: Tuple[str, ...] = tuple(ordered)
        self._lookup = frozenset(ordered)

    @classmethod
    def default(cls) -> "SkillVocabulary":
        """Vocabulary built from DEFAULT_SKILL_TERMS."""
        return cls(DEFAULT_SKILL_TERMS)

    @property
    def terms(self) -> Tuple[str, ...]:
        return self._terms

    def extended(self, terms: Iterable[str]) -> "SkillVocabulary":
        """Return a new vocabulary with ``terms`` appended."""
        return SkillVocabulary((*self._terms, *terms))

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and term.strip().lower() in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SkillVocabulary):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __repr__(self) -> str:
        return f"SkillVocabulary({len(self._terms)} terms)"


DEFAULT_VOCABULARY = SkillVocabulary.default()
