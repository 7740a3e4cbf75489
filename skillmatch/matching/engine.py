"""Composition of vocabulary, extractor, scorer and ranker from configuration."""

from typing import Any, FrozenSet, Iterable, List, Optional

from skillmatch.config.models import AppConfig
from skillmatch.logging import get_logger

from .extractor import SkillExtractor
from .models import ConnectionSuggestion, MatchResult, RankedCandidate
from .ranker import Ranker
from .scorer import MatchScorer
from .vocabulary import DEFAULT_SKILL_TERMS, SkillVocabulary

logger = get_logger(__name__, component="engine")


class MatchingEngine:
    """Facade exposing the four matching operations over one configuration.

    Engines hold no mutable state once built and can be shared between
    threads.
    """

    def __init__(self, ranker: Ranker):
        self.ranker = ranker

    @classmethod
    def from_config(cls, app_config: Optional[AppConfig] = None) -> "MatchingEngine":
        """Build an engine from an AppConfig (defaults when omitted)."""
        app_config = app_config or AppConfig()

        vocabulary = build_vocabulary(app_config)
        extractor = SkillExtractor(vocabulary)
        scorer = MatchScorer(extractor, app_config.scoring)
        ranker = Ranker(
            scorer,
            recommendation_config=app_config.recommendations,
            connection_config=app_config.connections,
        )

        logger.debug(
            "Matching engine built",
            extra={
                "event": "engine.built",
                "vocabulary_size": len(vocabulary),
                "job_min_score": app_config.recommendations.min_score,
                "connection_limit": app_config.connections.limit,
            },
        )
        return cls(ranker)

    @property
    def scorer(self) -> MatchScorer:
        return self.ranker.scorer

    @property
    def extractor(self) -> SkillExtractor:
        return self.ranker.scorer.extractor

    @property
    def vocabulary(self) -> SkillVocabulary:
        return self.extractor.vocabulary

    def extract_skills(self, text: Any) -> FrozenSet[str]:
        return self.extractor.extract(text)

    def score_match(
        self,
        subject_skills: Any,
        target_skills: Any,
        subject_text: Any = "",
        target_text: Any = "",
    ) -> MatchResult:
        return self.scorer.score(subject_skills, target_skills, subject_text, target_text)

    def recommend_jobs(
        self, subject_skills: Any, subject_bio: Any, jobs: Optional[Iterable[Any]]
    ) -> List[RankedCandidate]:
        return self.ranker.recommend_jobs(subject_skills, subject_bio, jobs)

    def suggest_connections(
        self, subject_user: Any, candidate_users: Optional[Iterable[Any]]
    ) -> List[ConnectionSuggestion]:
        return self.ranker.suggest_connections(subject_user, candidate_users)


def build_vocabulary(app_config: AppConfig) -> SkillVocabulary:
    """Vocabulary from ``vocabulary.terms`` (or the defaults) plus ``extra_terms``."""
    vocabulary_config = app_config.vocabulary
    base_terms = vocabulary_config.terms if vocabulary_config.terms is not None else DEFAULT_SKILL_TERMS
    return SkillVocabulary(base_terms).extended(vocabulary_config.extra_terms)
