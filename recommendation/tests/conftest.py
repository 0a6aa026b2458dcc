"""Shared fixtures for the career scoring engine tests."""

import os

# In-memory database and no AI provider for every test
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("OPENAI_API_KEY", None)

import pytest

from recommendation.logic import RecommendationEngine, StudentProfile
from recommendation.logic.adapter import normalize_profile

FIXED_TIMESTAMP = "2026-01-15T12:00:00+00:00"

NEUTRAL_ANSWERS = {
    "grade": 10,
    "zipCode": "30301",
    "educationWillingness": "I'm not sure yet",
    "incomeImportance": "Not sure",
    "stabilityImportance": "Not sure",
    "helpingImportance": "Not sure",
    "decisionPressure": "Just exploring options",
    "riskTolerance": "Not sure",
    "supportLevel": "Not sure about support",
    "careerConfidence": "Unsure",
}


@pytest.fixture
def make_answers():
    """Factory for questionnaire answers: neutral defaults plus overrides."""
    def _make(**overrides):
        answers = dict(NEUTRAL_ANSWERS)
        answers.update(overrides)
        return answers
    return _make


@pytest.fixture
def make_profile(make_answers):
    def _make(**overrides):
        return StudentProfile(**make_answers(**overrides))
    return _make


@pytest.fixture
def make_normalized(make_profile):
    def _make(**overrides):
        return normalize_profile(make_profile(**overrides))
    return _make


@pytest.fixture
def helping_answers(make_answers):
    return make_answers(
        workStyle=["helping"],
        traits=["compassionate"],
        helpingImportance="Very important",
    )


@pytest.fixture
def engine():
    return RecommendationEngine()
