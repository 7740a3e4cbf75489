"""Match scoring between a subject and a single target.

The score combines two signals:
1. Declared-skill coverage: the share of the target's declared skills the
   subject also declares, scaled to ``declared_skill_weight`` (70 points).
2. Keyword bonus: vocabulary terms extracted from both free texts, worth
   ``keyword_bonus_per_term`` (5) each and capped at ``keyword_bonus_cap`` (30).

Coverage is proportional, so matching 2 of 2 required skills scores the
same as matching 10 of 10. The final score is rounded half-up and clamped
to ``max_score``.
"""

import math
from typing import Any, Optional

from skillmatch.config.models import ScoringConfig
from skillmatch.domain.models import coerce_skill_list, coerce_text

from .extractor import DEFAULT_EXTRACTOR, SkillExtractor
from .models import MatchResult


def normalize_skill(skill: str) -> str:
    """Comparison key for declared skills."""
    return skill.strip().lower()


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class MatchScorer:
    """Scores one subject against one target."""

    def __init__(
        self,
        extractor: Optional[SkillExtractor] = None,
        config: Optional[ScoringConfig] = None,
    ):
        """Initialize MatchScorer.

        Args:
            extractor: Extractor used for the keyword bonus
            config: Scoring weights (defaults to 70 / 5 / 30 / 100)
        """
        self.extractor = extractor or DEFAULT_EXTRACTOR
        self.config = config or ScoringConfig()

    def score(
        self,
        subject_skills: Any,
        target_skills: Any,
        subject_text: Any = "",
        target_text: Any = "",
    ) -> MatchResult:
        """Score a subject against a target.

        Args:
            subject_skills: Skills declared by the subject (user)
            target_skills: Skills declared by the target (job)
            subject_text: Subject's free text (bio)
            target_text: Target's free text (description)

        Returns:
            MatchResult; ``matching_skills`` is always drawn from
            ``target_skills``. Missing or malformed inputs contribute nothing.
        """
        subject = coerce_skill_list(subject_skills)
        target = coerce_skill_list(target_skills)

        subject_keys = {normalize_skill(skill) for skill in subject}
        matching = [skill for skill in target if normalize_skill(skill) in subject_keys]

        skill_score = 0.0
        if target:
            skill_score = len(matching) / len(target) * self.config.declared_skill_weight

        shared = self.extractor.shared(coerce_text(subject_text), coerce_text(target_text))
        keyword_bonus = min(
            len(shared) * self.config.keyword_bonus_per_term,
            self.config.keyword_bonus_cap,
        )

        total = round_half_up(skill_score + keyword_bonus)
        score = max(0, min(total, self.config.max_score))

        return MatchResult(
            score=score,
            matching_skills=matching,
            skill_score=skill_score,
            keyword_bonus=keyword_bonus,
            shared_keywords=sorted(shared),
        )


DEFAULT_SCORER = MatchScorer(DEFAULT_EXTRACTOR)


def score_match(
    subject_skills: Any,
    target_skills: Any,
    subject_text: Any = "",
    target_text: Any = "",
) -> MatchResult:
    """Score with the default vocabulary and weights."""
    return DEFAULT_SCORER.score(subject_skills, target_skills, subject_text, target_text)
