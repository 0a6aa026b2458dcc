"""
Recommendation Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for generating recommendations.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Union

from .adapter import normalize_profile
from .aggregator import aggregate_cluster, score_all_clusters
from .career_catalog import DEFAULT_CAREERS
from .career_scorer import score_all_careers, score_career
from .classifier import classify_all, classify_career, held_out_careers
from .clusters import CLUSTER_BY_ID
from .contracts import (
    Career,
    ClusterScore,
    RecommendationResult,
    ScoringPolicy,
    ScoringRun,
    StudentProfile,
)
from .constants import ENGINE_VERSION
from .output_assembler import assemble_output
from .ranker import group_by_category, rank_clusters, select_top_per_category

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Main recommendation engine that orchestrates the scoring pipeline.

    Pipeline flow:
    1. Normalization - Check every answer against the encoding tables
    2. Cluster Scoring - Score each dimension per cluster and aggregate
    3. Career Scoring - Inherit cluster scores, apply feasibility adjustments
    4. Classification - Categorize into Best Fit/Good Fit/Stretch
    5. Ranking - Order clusters and careers, cap each category
    6. Output Assembly - Build final RecommendationResult

    The engine holds only read-only reference data, so one instance can be
    shared across threads.
    """

    def __init__(
        self,
        careers: Optional[Sequence[Career]] = None,
        policy: Optional[ScoringPolicy] = None
    ):
        """
        Initialize the recommendation engine.

        Args:
            careers: Career catalog. If None, uses the built-in catalog.
            policy: Tunable thresholds and penalties. If None, uses defaults.
        """
        self.careers: List[Career] = list(careers) if careers is not None else list(DEFAULT_CAREERS)
        self.policy = policy or ScoringPolicy()
        self.version = ENGINE_VERSION

    def score(self, profile: StudentProfile) -> ScoringRun:
        """
        Run every scoring stage without assembling the output.

        Raises:
            UnrecognizedAnswerValue: an answer is not in its table
        """
        normalized = normalize_profile(profile)

        cluster_scores = rank_clusters(score_all_clusters(normalized))
        scored_careers = score_all_careers(normalized, self.careers, cluster_scores, self.policy)
        classified = classify_all(scored_careers, self.policy)
        buckets = group_by_category(classified)
        logger.debug(
            "Top clusters: %s", [(cs.cluster_id, cs.score) for cs in cluster_scores[:3]]
        )

        return ScoringRun(
            profile=normalized,
            cluster_scores=cluster_scores,
            buckets=buckets,
            held_out=held_out_careers(classified),
            recommendations=select_top_per_category(buckets, self.policy),
        )

    def assemble(
        self,
        run: ScoringRun,
        generated_at: Optional[Union[datetime, str]] = None
    ) -> RecommendationResult:
        return assemble_output(run, generated_at=generated_at)

    def recommend(
        self,
        profile: StudentProfile,
        generated_at: Optional[Union[datetime, str]] = None
    ) -> RecommendationResult:
        """
        Generate recommendations for a student profile.

        Args:
            profile: Student's questionnaire answers
            generated_at: Optional fixed timestamp (for reproducible output)

        Returns:
            RecommendationResult with categorized recommendations
        """
        run = self.score(profile)
        return self.assemble(run, generated_at=generated_at)

    def recommend_from_dict(
        self,
        profile_data: dict,
        **kwargs
    ) -> RecommendationResult:
        """
        Generate recommendations from a dictionary profile.

        Convenience method for API integration.

        Args:
            profile_data: Dictionary matching StudentProfile fields (camelCase or snake_case)
            **kwargs: Additional arguments passed to recommend()

        Returns:
            RecommendationResult
        """
        profile = StudentProfile(**profile_data)
        return self.recommend(profile, **kwargs)

    def score_single_career(
        self,
        profile: StudentProfile,
        career: Career
    ) -> dict:
        """
        Score a single career for a student.

        Useful for getting detailed scoring on a specific career
        the student is interested in. The relative thresholds are not
        applied, since they need the whole catalog, so a career without
        feasibility notes below the good-fit threshold gets no category (None).

        Args:
            profile: Student profile
            career: Career to score

        Returns:
            Dict with scoring details
        """
        normalized = normalize_profile(profile)
        clusters: Dict[str, ClusterScore] = {
            cluster_id: aggregate_cluster(normalized, cluster)
            for cluster_id, cluster in CLUSTER_BY_ID.items()
        }
        scored = score_career(normalized, career, clusters, self.policy)
        category = classify_career(scored, self.policy, top_feasible_score=float("inf"))

        return {
            "career_id": career.career_id,
            "base_score": round(scored.base_score, 2),
            "score": scored.score,
            "category": category.value if category is not None else None,
            "reasoning": scored.reasoning,
            "feasibility_notes": scored.feasibility_notes,
            "cluster_scores": {
                cluster_id: cs.score
                for cluster_id, cs in clusters.items()
                if cluster_id in (career.primary_cluster, career.secondary_cluster)
            },
        }


# Convenience function for simple usage
def get_recommendations(
    profile: StudentProfile,
    careers: Optional[Sequence[Career]] = None,
    policy: Optional[ScoringPolicy] = None
) -> RecommendationResult:
    """
    Convenience function to get recommendations.

    Args:
        profile: Student profile
        careers: Optional career catalog
        policy: Optional scoring policy

    Returns:
        RecommendationResult
    """
    engine = RecommendationEngine(careers=careers, policy=policy)
    return engine.recommend(profile)
