"""
Engine Runner

Orchestrates the recommendation pipeline:
1. Accepts StudentProfile
2. Loads the career catalog (database or built-in)
3. Runs recommendation engine
4. Returns the assembled result

This is a pure orchestration layer - NO scoring, NO business logic.
"""

import logging
import time
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from .career_catalog import load_career_catalog
from .contracts import RecommendationResult, ScoringPolicy, StudentProfile
from .engine import RecommendationEngine

logger = logging.getLogger(__name__)


def run_recommendations(
    db: Optional[Session],
    profile: StudentProfile,
    policy: Optional[ScoringPolicy] = None
) -> RecommendationResult:
    """
    Main entry point: run full recommendation pipeline.

    Args:
        db: Database session (None uses the built-in catalog)
        profile: Student's questionnaire answers
        policy: Optional scoring policy

    Returns:
        RecommendationResult

    Raises:
        UnrecognizedAnswerValue: an answer is not in its table
    """
    logger.info(f"🚀 Starting recommendation pipeline for grade {profile.grade} student")

    careers = load_career_catalog(db)
    logger.info(f"📦 Careers loaded for scoring: {len(careers)}")

    start_time = time.perf_counter()
    engine = RecommendationEngine(careers=careers, policy=policy)

    run = engine.score(profile)
    logger.info(f"📊 Cluster scores: {[(cs.cluster_id, cs.score) for cs in run.cluster_scores]}")
    logger.info(
        f"📂 Careers categorized: "
        f"{ {category: len(recs) for category, recs in run.buckets.items()} }, "
        f"held out {len(run.held_out)}"
    )

    result = engine.assemble(run)

    processing_time = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"✨ Recommendation pipeline complete ({processing_time:.2f}ms): "
        f"top cluster {result.top_clusters[0].name if result.top_clusters else 'none'}, "
        f"best fit {len(result.career_recommendations.best_fit)}, "
        f"good fit {len(result.career_recommendations.good_fit)}, "
        f"stretch {len(result.career_recommendations.stretch_options)}"
    )

    return result


def run_recommendations_from_dict(
    db: Optional[Session],
    profile_data: Dict[str, Any],
    policy: Optional[ScoringPolicy] = None
) -> RecommendationResult:
    """
    Convenience wrapper accepting dict instead of StudentProfile.
    """
    profile = StudentProfile(**profile_data)
    return run_recommendations(db, profile, policy)
