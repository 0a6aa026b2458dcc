"""
Score Aggregator

Combines individual dimension scores into an overall cluster score.
Applies weighting, the experience bonus and normalization.
"""

import math
from typing import List, Dict

from .clusters import CLUSTERS
from .contracts import (
    NormalizedProfile,
    ClusterDefinition,
    ClusterScore,
    Contribution,
    DimensionScore,
)
from .dimension_scorers import (
    score_interests_preferences,
    score_academic_readiness,
    score_personality_traits,
    score_values,
    score_experience_bonus,
)
from .constants import MAX_REASONS_PER_CLUSTER


SCORERS = (
    score_interests_preferences,
    score_academic_readiness,
    score_personality_traits,
    score_values,
    score_experience_bonus,
)


def aggregate_cluster(
    profile: NormalizedProfile,
    cluster: ClusterDefinition
) -> ClusterScore:
    """
    Compute all dimension scores for one cluster and aggregate into its score.

    Args:
        profile: Normalized student profile
        cluster: Cluster to score

    Returns:
        ClusterScore with public 0-100 score, reasoning and dimension fractions
    """
    dimension_scores: Dict[str, DimensionScore] = {}

    for scorer in SCORERS:
        score = scorer(profile, cluster)
        dimension_scores[score.dimension] = score

    # Weighted sum plus the additive bonus
    fraction = sum(score.weighted_score for score in dimension_scores.values())

    # Normalize to ensure 0-1 range
    fraction = max(0.0, min(1.0, fraction))

    return ClusterScore(
        cluster_id=cluster.id,
        name=cluster.name,
        score=to_public_score(fraction),
        reasoning=_build_reasoning(dimension_scores),
        dimension_scores={dim: round(score.score, 4) for dim, score in dimension_scores.items()},
    )


def score_all_clusters(profile: NormalizedProfile) -> List[ClusterScore]:
    """
    Score every cluster, in cluster order (C1..C10).

    Args:
        profile: Normalized student profile

    Returns:
        List of ClusterScore objects, unranked
    """
    return [aggregate_cluster(profile, cluster) for cluster in CLUSTERS]


def to_public_score(fraction: float) -> int:
    """Scale a [0, 1] fraction to a 0-100 integer, rounding half up."""
    # Trim float noise so 0.795 * 100 lands on 79.5 rather than 79.4999...
    return int(math.floor(round(fraction * 100, 6) + 0.5))


def _build_reasoning(dimension_scores: Dict[str, DimensionScore]) -> List[str]:
    """
    Name the selections that contributed most to a cluster.

    Option contributions (interests, subjects, traits) come first, heaviest
    first with table order on ties. Experience and values lines fill any
    remaining room.
    """
    option_contributions: List[Contribution] = []
    for dimension in ("interests_preferences", "academic_readiness", "personality_traits"):
        option_contributions.extend(dimension_scores[dimension].contributions)

    option_contributions.sort(key=lambda c: (-c.weight, c.rank))
    reasons = [c.reason for c in option_contributions[:MAX_REASONS_PER_CLUSTER]]

    for dimension in ("experience_bonus", "values"):
        for contribution in dimension_scores[dimension].contributions:
            if len(reasons) >= MAX_REASONS_PER_CLUSTER:
                return reasons
            reasons.append(contribution.reason)

    return reasons
