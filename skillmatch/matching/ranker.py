"""Ranking of candidate pools against a single subject.

Two rankings are provided:
- recommend_jobs: jobs for a user, scored by MatchScorer
- suggest_connections: other users for a user, scored by shared declared
  skills and shared bio keywords

Both drop weak candidates, sort by score descending and keep input order
between equal scores (Python's sort is stable). Inputs are never mutated.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Set

from pydantic import ValidationError

from skillmatch.config.models import ConnectionConfig, RecommendationConfig
from skillmatch.domain.models import JobPosting, UserProfile, coerce_skill_list, coerce_text
from skillmatch.logging import get_logger, log_context

from .models import ConnectionSuggestion, RankedCandidate
from .scorer import DEFAULT_SCORER, MatchScorer, normalize_skill

logger = get_logger(__name__, component="ranker")


def _coerce_record(record: Any, model):
    """Validate a pool entry into ``model``; returns None for unusable entries."""
    if record is None:
        return None
    if isinstance(record, model):
        return record
    try:
        if isinstance(record, Mapping):
            return model.model_validate(dict(record))
        if isinstance(record, (UserProfile, JobPosting)):
            return model.model_validate(record.model_dump())
        return model.model_validate(record, from_attributes=True)
    except ValidationError as e:
        logger.warning(
            f"Skipping malformed {model.__name__} record",
            extra={
                "event": "ranking.record.skipped",
                "record_type": model.__name__,
                "error_count": e.error_count(),
            },
        )
        return None


class Ranker:
    """Applies scoring across a candidate pool."""

    def __init__(
        self,
        scorer: Optional[MatchScorer] = None,
        recommendation_config: Optional[RecommendationConfig] = None,
        connection_config: Optional[ConnectionConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize Ranker.

        Args:
            scorer: Scorer used for job recommendations
            recommendation_config: Threshold for job recommendations
            connection_config: Points, threshold, limit and case policy for
                connection suggestions
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.scorer = scorer or DEFAULT_SCORER
        self.recommendation_config = recommendation_config or RecommendationConfig()
        self.connection_config = connection_config or ConnectionConfig()
        self.logger = logger_instance or logger

    @property
    def extractor(self):
        return self.scorer.extractor

    def recommend_jobs(
        self,
        subject_skills: Any,
        subject_bio: Any,
        jobs: Optional[Iterable[Any]],
    ) -> List[RankedCandidate]:
        """Rank jobs for a user.

        Args:
            subject_skills: User's declared skills
            subject_bio: User's biography
            jobs: Candidate pool of JobPosting instances or mappings

        Returns:
            Jobs scoring strictly above ``min_score``, best first
        """
        min_score = self.recommendation_config.min_score
        skills = coerce_skill_list(subject_skills)
        bio = coerce_text(subject_bio)

        ranked: List[RankedCandidate] = []
        considered = 0

        with log_context(ranking="jobs"):
            for raw_job in jobs or ():
                job = _coerce_record(raw_job, JobPosting)
                if job is None:
                    continue
                considered += 1

                match = self.scorer.score(skills, job.skills, bio, job.description)
                if match.score <= min_score:
                    self.logger.debug(
                        "Job below recommendation threshold",
                        extra={"job_id": job.id, "match_score": match.score, "min_score": min_score},
                    )
                    continue

                ranked.append(RankedCandidate(job=job, match=match, record=raw_job))

            ranked.sort(key=lambda candidate: candidate.match_score, reverse=True)

            self.logger.info(
                "Ranked job recommendations",
                extra={
                    "event": "ranking.jobs.completed",
                    "considered": considered,
                    "returned": len(ranked),
                    "top_score": ranked[0].match_score if ranked else None,
                },
            )

        return ranked

    def suggest_connections(
        self,
        subject_user: Any,
        candidate_users: Optional[Iterable[Any]],
    ) -> List[ConnectionSuggestion]:
        """Suggest users for the subject to connect with.

        Args:
            subject_user: UserProfile (or mapping) of the user asking
            candidate_users: Candidate pool; the subject itself is skipped when
                its id compares equal, with no type conversion

        Returns:
            At most ``limit`` suggestions scoring strictly above ``min_score``,
            best first
        """
        config = self.connection_config
        subject = _coerce_record(subject_user, UserProfile) or UserProfile()
        subject_keywords = self.extractor.extract(subject.bio) if subject.bio else frozenset()

        suggestions: List[ConnectionSuggestion] = []
        considered = 0

        with log_context(ranking="connections", subject_id=subject.id):
            for raw_user in candidate_users or ():
                user = _coerce_record(raw_user, UserProfile)
                if user is None or user.id == subject.id:
                    continue
                considered += 1

                common = self.common_skills(subject.skills, user.skills)
                shared: Set[str] = set()
                if subject.bio and user.bio:
                    shared = subject_keywords & self.extractor.extract(user.bio)

                score = len(common) * config.common_skill_points + len(shared) * config.bio_overlap_points
                if score <= config.min_score:
                    self.logger.debug(
                        "User below connection threshold",
                        extra={"user_id": user.id, "connection_score": score, "min_score": config.min_score},
                    )
                    continue

                suggestions.append(
                    ConnectionSuggestion(
                        user=user,
                        connection_score=score,
                        common_skills=common,
                        shared_keywords=sorted(shared),
                        record=raw_user,
                    )
                )

            suggestions.sort(key=lambda suggestion: suggestion.connection_score, reverse=True)
            suggestions = suggestions[: config.limit]

            self.logger.info(
                "Ranked connection suggestions",
                extra={
                    "event": "ranking.connections.completed",
                    "considered": considered,
                    "returned": len(suggestions),
                },
            )

        return suggestions

    def common_skills(self, subject_skills: List[str], candidate_skills: List[str]) -> List[str]:
        """Subject's skills (in subject order) that the candidate also declares.

        Exact string comparison unless ``case_sensitive_common_skills`` is off,
        in which case the scorer's normalization is used.
        """
        if self.connection_config.case_sensitive_common_skills:
            candidate_set = set(candidate_skills)
            return [skill for skill in subject_skills if skill in candidate_set]

        candidate_keys = {normalize_skill(skill) for skill in candidate_skills}
        return [skill for skill in subject_skills if normalize_skill(skill) in candidate_keys]


DEFAULT_RANKER = Ranker(DEFAULT_SCORER)


def recommend_jobs(subject_skills: Any, subject_bio: Any, jobs: Optional[Iterable[Any]]) -> List[RankedCandidate]:
    """Rank jobs with the default vocabulary and thresholds."""
    return DEFAULT_RANKER.recommend_jobs(subject_skills, subject_bio, jobs)


def suggest_connections(subject_user: Any, candidate_users: Optional[Iterable[Any]]) -> List[ConnectionSuggestion]:
    """Suggest connections with the default vocabulary and thresholds."""
    return DEFAULT_RANKER.suggest_connections(subject_user, candidate_users)
