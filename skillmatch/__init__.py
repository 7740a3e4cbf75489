"""SkillMatch: explainable job recommendations and connection suggestions."""

from .domain import JobPosting, UserProfile
from .exceptions import InputError, SkillMatchError
from .matching import (
    ConnectionSuggestion,
    MatchingEngine,
    MatchResult,
    RankedCandidate,
    SkillVocabulary,
    extract_skills,
    recommend_jobs,
    score_match,
    suggest_connections,
)

__version__ = "0.1.0"

__all__ = [
    "extract_skills",
    "score_match",
    "recommend_jobs",
    "suggest_connections",
    "MatchingEngine",
    "SkillVocabulary",
    "MatchResult",
    "RankedCandidate",
    "ConnectionSuggestion",
    "UserProfile",
    "JobPosting",
    "SkillMatchError",
    "InputError",
]
