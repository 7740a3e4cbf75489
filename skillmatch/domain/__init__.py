"""Domain models for SkillMatch."""

from .models import JobPosting, UserProfile, coerce_skill_list, coerce_text

__all__ = ["UserProfile", "JobPosting", "coerce_skill_list", "coerce_text"]
