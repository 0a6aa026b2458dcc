"""
Recommendation Logic Module

Provides the deterministic scoring engine for career cluster and career recommendations.
"""

from .contracts import (
    StudentProfile,
    RecommendationResult,
    ClusterScore,
    CareerRecommendation,
    CareerRecommendations,
    Career,
    ClusterDefinition,
    ScoringPolicy,
    DimensionScore,
    NormalizedProfile,
    ScoringRun,
)
from .engine import RecommendationEngine, get_recommendations
from .errors import UnrecognizedAnswerValue, MissingRequiredField
from .constants import FitCategory

__all__ = [
    # Main engine
    "RecommendationEngine",
    "get_recommendations",

    # Contracts
    "StudentProfile",
    "RecommendationResult",
    "ClusterScore",
    "CareerRecommendation",
    "CareerRecommendations",
    "Career",
    "ClusterDefinition",
    "ScoringPolicy",
    "DimensionScore",
    "NormalizedProfile",
    "ScoringRun",

    # Errors
    "UnrecognizedAnswerValue",
    "MissingRequiredField",

    # Enums
    "FitCategory",
]
