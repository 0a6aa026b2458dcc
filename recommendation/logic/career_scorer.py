"""
Career Scorer

Turns cluster scores into career scores. Each career inherits a base score
from its primary cluster (and, when present, its secondary cluster), then
feasibility adjustments are applied against the student's constraints,
education willingness and support level.

Every penalty leaves a human-readable note; notes drive classification.
"""

import math
from typing import Dict, List, Optional, Sequence

from .clusters import (
    CONSTRAINT_PHYSICAL,
    CONSTRAINT_PREDICTABLE_HOURS,
    CONSTRAINT_QUICK_INCOME,
    HANDS_ON_TRAIT,
)
from .contracts import Career, ClusterScore, NormalizedProfile, ScoredCareer, ScoringPolicy
from .encodings import education_level_name


def score_career(
    profile: NormalizedProfile,
    career: Career,
    cluster_scores: Dict[str, ClusterScore],
    policy: ScoringPolicy,
    catalog_index: int = 0,
) -> ScoredCareer:
    """
    Score a single career for a student.

    Args:
        profile: Normalized student profile
        career: Career to score
        cluster_scores: Cluster scores keyed by cluster id
        policy: Tunable weights and penalties
        catalog_index: Position in the catalog, used for tie-breaks

    Returns:
        ScoredCareer with adjusted score, reasoning and feasibility notes
    """
    primary = cluster_scores[career.primary_cluster]
    secondary = cluster_scores.get(career.secondary_cluster) if career.secondary_cluster else None

    base_score = _base_score(primary, secondary, policy)
    reasoning = _base_reasoning(primary, secondary)

    score = base_score
    notes: List[str] = []
    education_gap = False

    # Education gap
    gap = career.edu_required_level - profile.education_level
    if gap > 0:
        education_gap = True
        score -= policy.education_gap_penalty * gap
        notes.append(
            f"Education gap: requires {education_level_name(career.edu_required_level)} "
            f"(higher than your stated preference of {education_level_name(profile.education_level)})"
        )

    constraints = set(profile.constraints)

    if CONSTRAINT_QUICK_INCOME in constraints and career.time_to_entry_years > policy.quick_income_max_years:
        extra_years = career.time_to_entry_years - policy.quick_income_max_years
        score -= policy.quick_income_penalty_per_year * extra_years
        notes.append(
            f"Takes about {career.time_to_entry_years:g} years to start earning, "
            f"longer than your goal of earning money quickly"
        )

    physically_demanding = career.physical_demand >= policy.physical_demand_threshold
    if CONSTRAINT_PHYSICAL in constraints and physically_demanding:
        score -= policy.physical_demand_penalty
        notes.append("Physically demanding work, which you noted may be difficult for you")

    if CONSTRAINT_PREDICTABLE_HOURS in constraints and career.irregular_hours:
        score -= policy.irregular_hours_penalty
        notes.append("Often involves irregular or shift hours, but you prefer predictable hours")

    if profile.support < policy.low_support_threshold and career.cost_level == 1:
        score -= policy.cost_penalty
        notes.append("Training costs may be hard to cover with your current level of support")

    readiness = primary.dimension_scores.get("academic_readiness", 0.0)
    has_performance = bool(profile.performance)

    if has_performance and career.challenge_level >= policy.high_challenge_level and readiness < policy.challenge_readiness_floor:
        score -= policy.challenge_penalty
        notes.append("Academically demanding; strengthening related subjects would help you get there")

    # Bonuses
    if physically_demanding and HANDS_ON_TRAIT in profile.selected("traits") and CONSTRAINT_PHYSICAL not in constraints:
        score += policy.hands_on_bonus
        reasoning.append("Hands-on work suits your practical personality")

    if career.challenge_level >= policy.challenge_bonus_level and readiness >= policy.challenge_bonus_readiness:
        score += policy.challenge_bonus
        reasoning.append("Your academic readiness supports this challenging path")

    return ScoredCareer(
        career=career,
        catalog_index=catalog_index,
        base_score=base_score,
        score=_round_score(score),
        reasoning=reasoning,
        feasibility_notes=notes,
        education_gap=education_gap,
    )


def score_all_careers(
    profile: NormalizedProfile,
    careers: Sequence[Career],
    cluster_scores: List[ClusterScore],
    policy: ScoringPolicy,
) -> List[ScoredCareer]:
    """Score the whole catalog; careers pointing at unknown clusters are skipped."""
    by_id = {cs.cluster_id: cs for cs in cluster_scores}
    return [
        score_career(profile, career, by_id, policy, catalog_index=index)
        for index, career in enumerate(careers)
        if career.primary_cluster in by_id
    ]


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _base_score(
    primary: ClusterScore,
    secondary: Optional[ClusterScore],
    policy: ScoringPolicy
) -> float:
    if secondary is None:
        return float(primary.score)
    return policy.primary_cluster_weight * primary.score + policy.secondary_cluster_weight * secondary.score


def _base_reasoning(primary: ClusterScore, secondary: Optional[ClusterScore]) -> List[str]:
    reasoning = [f"Strong match with {primary.name} (cluster score {primary.score})"]
    if secondary is not None:
        reasoning.append(f"Also draws on {secondary.name} (cluster score {secondary.score})")
    if primary.reasoning:
        reasoning.append(primary.reasoning[0])
    return reasoning


def _round_score(score: float) -> int:
    clamped = max(0.0, min(100.0, score))
    return int(math.floor(round(clamped, 6) + 0.5))
