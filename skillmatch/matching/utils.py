"""Helpers for explaining match results to downstream consumers."""

from typing import Any, Dict, Union

from skillmatch.utils.highlighting import highlight_keywords, truncate_text

from .models import ConnectionSuggestion, MatchResult, RankedCandidate


def build_rationale_dict(result: Union[MatchResult, ConnectionSuggestion]) -> Dict[str, Any]:
    """Build a serializable breakdown of how a score was reached.

    Args:
        result: MatchResult from the scorer, or a ConnectionSuggestion

    Returns:
        For a MatchResult:
        - score: Final score
        - skill_score: Declared-skill contribution, rounded to 2 places
        - keyword_bonus: Shared-keyword contribution
        - matching_skills: Matched declared skills
        - shared_keywords: Keywords found in both texts
        For a ConnectionSuggestion:
        - connection_score, common_skills, shared_keywords
    """
    if isinstance(result, ConnectionSuggestion):
        return {
            "connection_score": result.connection_score,
            "common_skills": list(result.common_skills),
            "shared_keywords": list(result.shared_keywords),
        }

    return {
        "score": result.score,
        "skill_score": round(result.skill_score, 2),
        "keyword_bonus": result.keyword_bonus,
        "matching_skills": list(result.matching_skills),
        "shared_keywords": list(result.shared_keywords),
    }


def _label(record: Any, *fields: str) -> str:
    for name in fields:
        value = getattr(record, name, None)
        if value:
            return str(value)
    return "(unnamed)"


def format_match_explanation(
    candidate: Union[RankedCandidate, ConnectionSuggestion], include_text: bool = True
) -> str:
    """Format a ranked job or connection suggestion as plain text.

    Args:
        candidate: Result from Ranker.recommend_jobs or Ranker.suggest_connections
        include_text: Whether to include the highlighted description/bio

    Returns:
        Multi-line explanation
    """
    lines = []

    if isinstance(candidate, ConnectionSuggestion):
        user = candidate.user
        lines.append(f"Connection: {_label(user, 'name', 'id')} (score {candidate.connection_score})")
        lines.append("-" * 60)
        lines.append(f"  Common skills: {', '.join(candidate.common_skills) or 'none'}")
        lines.append(f"  Shared bio keywords: {', '.join(candidate.shared_keywords) or 'none'}")
        text = user.bio
        keywords = candidate.shared_keywords
    else:
        job = candidate.job
        match = candidate.match
        lines.append(f"Job Match: {_label(job, 'title', 'id')} (score {match.score}/100)")
        lines.append("-" * 60)
        lines.append(
            f"  Declared skills: {len(match.matching_skills)} of {len(job.skills)} matched"
            f" ({', '.join(match.matching_skills) or 'none'}) -> {match.skill_score:.1f} pts"
        )
        lines.append(
            f"  Shared keywords: {', '.join(match.shared_keywords) or 'none'}"
            f" -> +{match.keyword_bonus:g} pts"
        )
        text = job.description
        keywords = match.shared_keywords

    if include_text and text:
        lines.append("")
        lines.append(f"  {truncate_text(highlight_keywords(text, keywords), max_length=300)}")

    return "\n".join(lines)
