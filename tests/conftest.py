"""
Pytest configuration and fixtures.
"""

import os

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("SCORING_CONFIG_PATH", None)


RESET_PASSWORD_STORY = "As a user, I want to reset my password, so that I can regain access to my account"


@pytest.fixture(autouse=True, scope="session")
def configured_logging():
    """Route loguru through the configured LOG_LEVEL for the whole run."""
    from storyscore.config.settings import settings
    from storyscore.logging_setup import configure_logging

    configure_logging(settings.log_level)


@pytest.fixture
def analyzer():
    """Analyzer with the default scoring configuration."""
    from storyscore.analysis.story_analyzer import StoryAnalyzer

    return StoryAnalyzer()


@pytest.fixture
def well_formed_story() -> str:
    """Short story following the canonical template."""
    return RESET_PASSWORD_STORY


@pytest.fixture
def gherkin_criteria() -> str:
    """Three Given/When/Then acceptance criteria."""
    return "Given X\nWhen Y\nThen Z"


@pytest.fixture
def vague_criteria() -> str:
    """Two acceptance criteria without any testable wording."""
    return "It should just work\nMake it nice"


@pytest.fixture
def manage_story() -> str:
    """Template story whose goal is a 'manage X' epic."""
    return "As an admin, I want to manage user accounts, so that the team stays organised"


@pytest.fixture
def many_criteria() -> str:
    """Eight testable acceptance criteria (above the 7 criteria limit)."""
    return "\n".join(f"Given account {i} exists then it is listed" for i in range(1, 9))
