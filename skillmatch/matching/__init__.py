"""Skill matching and ranking engine.

This module provides:
- SkillVocabulary / SkillExtractor: find known skills in free text
- MatchScorer: score a subject against one target
- Ranker: recommend jobs and suggest connections over a candidate pool
- MatchingEngine: all of the above wired from configuration
- Module-level functions using the default vocabulary and weights
"""

from .engine import MatchingEngine, build_vocabulary
from .extractor import SkillExtractor, extract_skills
from .models import ConnectionSuggestion, MatchResult, RankedCandidate
from .ranker import Ranker, recommend_jobs, suggest_connections
from .scorer import MatchScorer, score_match
from .utils import build_rationale_dict, format_match_explanation
from .vocabulary import DEFAULT_SKILL_TERMS, DEFAULT_VOCABULARY, SkillVocabulary

__all__ = [
    "SkillVocabulary",
    "DEFAULT_SKILL_TERMS",
    "DEFAULT_VOCABULARY",
    "SkillExtractor",
    "MatchScorer",
    "Ranker",
    "MatchingEngine",
    "build_vocabulary",
    "MatchResult",
    "RankedCandidate",
    "ConnectionSuggestion",
    "extract_skills",
    "score_match",
    "recommend_jobs",
    "suggest_connections",
    "build_rationale_dict",
    "format_match_explanation",
]
