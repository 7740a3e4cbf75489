"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


def _normalize_term_list(terms: Optional[List[str]]) -> Optional[List[str]]:
    if terms is None:
        return None
    normalized = []
    for term in terms:
        stripped = str(term).strip().lower()
        if stripped:
            normalized.append(stripped)
    return normalized


class VocabularyConfig(BaseModel):
    """Skill vocabulary used for free-text extraction."""

    terms: Optional[List[str]] = Field(
        None,
        description="Replacement vocabulary (defaults to the built-in skill terms)",
    )
    extra_terms: List[str] = Field(
        default_factory=list,
        description="Terms appended to the vocabulary",
    )

    @field_validator("terms", "extra_terms")
    @classmethod
    def normalize_terms(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Strip whitespace, lower-case and drop empty terms."""
        return _normalize_term_list(v)

    @model_validator(mode="after")
    def validate_not_empty(self):
        """A replacement vocabulary must contain at least one term."""
        if self.terms is not None and not self.terms and not self.extra_terms:
            raise ValueError("vocabulary.terms is empty and no extra_terms were given")
        return self


class ScoringConfig(BaseModel):
    """Weights for combining declared-skill coverage and keyword overlap."""

    declared_skill_weight: float = Field(
        70, ge=0, description="Points awarded for covering all of the target's skills"
    )
    keyword_bonus_per_term: float = Field(
        5, ge=0, description="Points per extracted keyword shared by both texts"
    )
    keyword_bonus_cap: float = Field(
        30, ge=0, description="Maximum points from shared keywords"
    )
    max_score: int = Field(100, ge=1, description="Upper bound of the final score")


class RecommendationConfig(BaseModel):
    """Filtering rules for job recommendations."""

    min_score: int = Field(
        20, ge=0, description="Jobs must score strictly above this to be recommended"
    )


class ConnectionConfig(BaseModel):
    """Scoring and filtering rules for connection suggestions."""

    common_skill_points: int = Field(20, ge=0, description="Points per shared declared skill")
    bio_overlap_points: int = Field(
        10, ge=0, description="Points per extracted skill shared by both bios"
    )
    min_score: int = Field(
        10, ge=0, description="Users must score strictly above this to be suggested"
    )
    limit: int = Field(5, ge=1, description="Maximum number of suggestions returned")
    case_sensitive_common_skills: bool = Field(
        True,
        description="Compare declared skills exactly (true) or case-insensitively (false)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for SkillMatch."""

    vocabulary: VocabularyConfig = Field(default_factory=VocabularyConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    recommendations: RecommendationConfig = Field(default_factory=RecommendationConfig)
    connections: ConnectionConfig = Field(default_factory=ConnectionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}
