"""Data models for the matching engine.

Results are created fresh for every scoring or ranking call and are frozen
once built.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import BaseModel

from skillmatch.domain.models import JobPosting, UserProfile


def record_fields(record: Any, validated: BaseModel) -> Dict[str, Any]:
    """Fields of the record as the caller passed it in.

    Mappings and pydantic models are copied field for field. Other objects
    fall back to the validated model.
    """
    if isinstance(record, Mapping):
        return dict(record)
    if isinstance(record, BaseModel):
        return record.model_dump()
    return validated.model_dump()


@dataclass(frozen=True)
class MatchResult:
    """Outcome of scoring one subject against one target.

    Attributes:
        score: Final score, an integer in [0, max_score]
        matching_skills: Target's declared skills the subject also declares,
            in the target's casing and order
        skill_score: Unrounded points from declared-skill coverage
        keyword_bonus: Points from keywords found in both texts
        shared_keywords: Sorted vocabulary terms extracted from both texts
    """

    score: int
    matching_skills: List[str] = field(default_factory=list)
    skill_score: float = 0.0
    keyword_bonus: float = 0.0
    shared_keywords: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when neither declared skills nor text contributed."""
        return not self.matching_skills and not self.shared_keywords


@dataclass(frozen=True)
class RankedCandidate:
    """A job annotated with its match against the subject.

    Attributes:
        job: Validated job used for scoring
        match: Score breakdown
        record: The job exactly as it appeared in the candidate pool
    """

    job: JobPosting
    match: MatchResult
    record: Any = None

    @property
    def match_score(self) -> int:
        return self.match.score

    @property
    def matching_skills(self) -> List[str]:
        return list(self.match.matching_skills)

    def to_dict(self) -> Dict[str, Any]:
        """Job fields plus ``match_score`` and ``matching_skills``."""
        return {
            **record_fields(self.record, self.job),
            "match_score": self.match_score,
            "matching_skills": self.matching_skills,
        }


@dataclass(frozen=True)
class ConnectionSuggestion:
    """A user annotated with how well they connect to the subject.

    Attributes:
        user: Suggested user
        connection_score: Points from shared declared skills and bio keywords
        common_skills: Subject's declared skills the user also declares
        shared_keywords: Sorted vocabulary terms found in both bios
        record: The user exactly as they appeared in the candidate pool
    """

    user: UserProfile
    connection_score: int
    common_skills: List[str] = field(default_factory=list)
    shared_keywords: List[str] = field(default_factory=list)
    record: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """User fields plus ``connection_score`` and ``common_skills``."""
        return {
            **record_fields(self.record, self.user),
            "connection_score": self.connection_score,
            "common_skills": list(self.common_skills),
        }
