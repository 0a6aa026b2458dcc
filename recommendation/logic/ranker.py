"""
Ranker

Orders clusters and careers deterministically and applies the
per-category caps.
"""

from typing import List, Optional, Tuple, Dict

from .clusters import CLUSTER_ORDER
from .contracts import (
    CareerRecommendation,
    CareerRecommendations,
    ClusterScore,
    ScoredCareer,
    ScoringPolicy,
)
from .constants import FitCategory, MAX_TOP_CLUSTERS


def rank_clusters(cluster_scores: List[ClusterScore]) -> List[ClusterScore]:
    """
    Rank clusters by score (descending), ties by cluster order C1..C10.

    Args:
        cluster_scores: Unranked cluster scores

    Returns:
        Sorted list by score
    """
    return sorted(
        cluster_scores,
        key=lambda x: (-x.score, CLUSTER_ORDER.get(x.cluster_id, len(CLUSTER_ORDER)))
    )


def top_clusters(
    ranked: List[ClusterScore],
    limit: int = MAX_TOP_CLUSTERS
) -> List[ClusterScore]:
    return ranked[:limit]


def rank_careers(
    classified: List[Tuple[ScoredCareer, Optional[FitCategory]]]
) -> List[Tuple[ScoredCareer, Optional[FitCategory]]]:
    """
    Rank careers by score (descending), ties by catalog order.
    """
    return sorted(classified, key=lambda x: (-x[0].score, x[0].catalog_index))


def group_by_category(
    classified: List[Tuple[ScoredCareer, Optional[FitCategory]]]
) -> Dict[str, List[CareerRecommendation]]:
    """
    Group every classified career into its bucket, ranked, without caps.
    Held-out careers (no category) are left out.

    Args:
        classified: Classified careers

    Returns:
        Dict mapping category value to ranked recommendations
    """
    by_category: Dict[str, List[CareerRecommendation]] = {cat.value: [] for cat in FitCategory}

    for scored, category in rank_careers(classified):
        if category is None:
            continue
        by_category[category.value].append(_to_recommendation(scored, category))

    return by_category


def select_top_per_category(
    by_category: Dict[str, List[CareerRecommendation]],
    policy: ScoringPolicy
) -> CareerRecommendations:
    """
    Select top N careers per category.

    Args:
        by_category: Ranked careers grouped by category
        policy: Supplies the per-category caps

    Returns:
        CareerRecommendations with capped lists
    """
    return CareerRecommendations(
        best_fit=by_category.get(FitCategory.BEST_FIT.value, [])[:policy.cap_for(FitCategory.BEST_FIT)],
        good_fit=by_category.get(FitCategory.GOOD_FIT.value, [])[:policy.cap_for(FitCategory.GOOD_FIT)],
        stretch_options=by_category.get(FitCategory.STRETCH_OPTION.value, [])[
            :policy.cap_for(FitCategory.STRETCH_OPTION)
        ],
    )


def _to_recommendation(scored: ScoredCareer, category: FitCategory) -> CareerRecommendation:
    return CareerRecommendation(
        career=scored.career,
        score=int(scored.score),
        fit_category=category,
        reasoning=list(scored.reasoning),
        feasibility_notes=list(scored.feasibility_notes) or None,
    )
