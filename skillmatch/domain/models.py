"""Core domain models for users and jobs.

These models carry exactly the fields the matching core needs:
- UserProfile: id, declared skills, biography
- JobPosting: optional id, declared skills, description

Any other fields on the incoming record (name, title, company, ...) are kept
as pydantic extras. Identifiers are never converted: two records are the same
user only when their ids compare equal as given.
"""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator


def coerce_skill_list(value: Any) -> List[str]:
    """Normalize a loosely-typed skill collection into a clean list.

    ``None`` becomes an empty list, a bare string becomes a one-item list,
    non-string entries are stringified (``None`` entries dropped), whitespace
    is stripped and exact duplicates removed keeping first-seen order.
    Case is preserved.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    elif isinstance(value, dict) or not hasattr(value, "__iter__"):
        return []

    skills: List[str] = []
    seen = set()
    for item in value:
        if item is None:
            continue
        skill = str(item).strip()
        if skill and skill not in seen:
            seen.add(skill)
            skills.append(skill)
    return skills


def coerce_text(value: Any) -> str:
    """Normalize free text; ``None`` and non-string values become an empty string."""
    if isinstance(value, str):
        return value
    return ""


class UserProfile(BaseModel):
    """A platform user as seen by the matching core."""

    id: Any = Field(None, description="User identifier, kept as given")
    skills: List[str] = Field(default_factory=list, description="Declared skills")
    bio: str = Field("", description="Free-text biography")

    model_config = {"extra": "allow", "frozen": True}

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, v: Any) -> List[str]:
        """Clean up the declared skill list."""
        return coerce_skill_list(v)

    @field_validator("bio", mode="before")
    @classmethod
    def normalize_bio(cls, v: Any) -> str:
        """Treat a missing or non-text biography as empty text."""
        return coerce_text(v)


class JobPosting(BaseModel):
    """A job posting as seen by the matching core."""

    id: Any = Field(None, description="Job identifier, kept as given")
    skills: List[str] = Field(default_factory=list, description="Required skills")
    description: str = Field("", description="Free-text job description")

    model_config = {
        "extra": "allow",
        "frozen": True,
        "json_schema_extra": {"example": {
            "id": "job-42",
            "title": "Full-stack Engineer",
            "company": "Example Labs",
            "skills": ["React", "Node.js", "PostgreSQL"],
            "description": "Build web3 dashboards with React and Node.js.",
        }},
    }

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, v: Any) -> List[str]:
        """Clean up the required skill list."""
        return coerce_skill_list(v)

    @field_validator("description", mode="before")
    @classmethod
    def normalize_description(cls, v: Any) -> str:
        """Treat a missing or non-text description as empty text."""
        return coerce_text(v)
