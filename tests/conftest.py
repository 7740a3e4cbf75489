"""Shared fixtures for SkillMatch tests."""

import pytest

from skillmatch.domain.models import JobPosting, UserProfile
from skillmatch.logging.context import clear_log_context


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def job_pool():
    """Jobs with varied overlap against a React/Node.js developer."""
    return [
        JobPosting(
            id="job-frontend",
            title="Frontend Engineer",
            skills=["React", "TypeScript"],
            description="Build React dashboards in TypeScript.",
        ),
        JobPosting(
            id="job-fullstack",
            title="Full-stack Engineer",
            skills=["react", "python", "node.js"],
            description="React frontend, Node.js and Python services on AWS.",
        ),
        JobPosting(
            id="job-design",
            title="Product Designer",
            skills=["Figma", "Illustrator"],
            description="Own our visual identity.",
        ),
        JobPosting(
            id="job-backend",
            title="Backend Engineer",
            skills=["Node.js"],
            description="Node.js APIs backed by PostgreSQL.",
        ),
    ]


@pytest.fixture
def subject_user():
    """User with three declared skills and a bio."""
    return UserProfile(
        id="u-1",
        name="Ada",
        skills=["React", "Node.js", "Python"],
        bio="Full-stack developer working with React and Docker.",
    )
