"""
Output Assembler

Transforms internal scoring data into the final RecommendationResult contract.
Builds the profile summary, four-year plan skeleton and comparison questions.

Pure formatting: nothing here re-scores. Assembling the same run twice gives
the same result apart from generated_at.
"""

from datetime import datetime, timezone
from itertools import combinations
from typing import Dict, List, Optional, Tuple, Union

from .clusters import AFFINITY_MAPS, CLUSTER_BY_ID, INTEREST_CATEGORIES, option_order
from .contracts import (
    Career,
    CareerRecommendation,
    CareerRecommendations,
    ClusterScore,
    ComparisonQuestion,
    FourYearPlan,
    NormalizedProfile,
    RecommendationResult,
    ScoringRun,
    StudentProfileSummary,
)
from .constants import (
    DECISION_READINESS_BANDS,
    DISCLAIMER,
    MAX_COMPARISON_CAREERS,
    MAX_COMPARISON_FACTORS,
    MAX_KEY_STRENGTHS,
    MAX_PRIMARY_INTERESTS,
    MAX_TOP_CLUSTERS,
    READINESS_BANDS,
)
from .dimension_scorers import STRONG_PERFORMANCE
from .plan_templates import GRADES, post_graduation_plan, year_plan

# Used when two careers do not differ on any comparison factor
DEFAULT_FACTORS = ["Work environment", "Daily tasks", "Long-term goals"]


def assemble_output(
    run: ScoringRun,
    generated_at: Optional[Union[datetime, str]] = None
) -> RecommendationResult:
    """
    Assemble the final recommendation result.

    Args:
        run: Ranked cluster scores and bucketed careers from the engine
        generated_at: Timestamp to stamp on the result (defaults to now, UTC)

    Returns:
        Complete RecommendationResult
    """
    top = run.cluster_scores[:MAX_TOP_CLUSTERS]
    recommendations = run.recommendations

    return RecommendationResult(
        student_profile_summary=build_profile_summary(run.profile, top),
        top_clusters=[cs.model_copy(deep=True) for cs in top],
        career_recommendations=recommendations.model_copy(deep=True),
        four_year_plan=build_four_year_plan(run.profile, top, recommendations),
        comparison_questions=build_comparison_questions(recommendations),
        disclaimer=DISCLAIMER,
        generated_at=_timestamp(generated_at),
    )


# =============================================================================
# PROFILE SUMMARY
# =============================================================================

def build_profile_summary(
    profile: NormalizedProfile,
    top: List[ClusterScore]
) -> StudentProfileSummary:
    readiness = top[0].dimension_scores.get("academic_readiness", 0.0) if top else 0.0
    decision = (profile.confidence + profile.urgency) / 2

    return StudentProfileSummary(
        grade=profile.grade,
        readiness_level=_band(readiness, READINESS_BANDS),
        decision_readiness=_band(decision, DECISION_READINESS_BANDS),
        key_strengths=_key_strengths(profile, top),
        primary_interests=_primary_interests(profile, top),
    )


def _key_strengths(profile: NormalizedProfile, top: List[ClusterScore]) -> List[str]:
    """Strong subjects first, then traits ranked by affinity to the top clusters."""
    strengths = [subject for subject, level in profile.performance.items() if level >= STRONG_PERFORMANCE]

    cluster_ids = [cs.cluster_id for cs in top]
    order = option_order("traits")
    traits = sorted(
        profile.selected("traits"),
        key=lambda t: (-_affinity_to(AFFINITY_MAPS["traits"][t], cluster_ids), order[t]),
    )
    strengths.extend(traits)

    return strengths[:MAX_KEY_STRENGTHS]


def _primary_interests(profile: NormalizedProfile, top: List[ClusterScore]) -> List[str]:
    """Interest selections ranked by how strongly they point at the top clusters."""
    cluster_ids = [cs.cluster_id for cs in top]
    ranked: List[Tuple[float, int, int, str]] = []

    for position, category in enumerate(INTEREST_CATEGORIES):
        order = option_order(category)
        for option in profile.selected(category):
            weight = _affinity_to(AFFINITY_MAPS[category][option], cluster_ids)
            ranked.append((-weight, position, order[option], option))

    interests: List[str] = []
    for *_, option in sorted(ranked):
        if option not in interests:
            interests.append(option)
    return interests[:MAX_PRIMARY_INTERESTS]


def _affinity_to(weights: Dict[str, float], cluster_ids: List[str]) -> float:
    return sum(weights.get(cluster_id, 0.0) for cluster_id in cluster_ids)


def _band(value: float, bands) -> str:
    for floor, label in bands:
        if value >= floor:
            return label
    return bands[-1][1]


# =============================================================================
# FOUR-YEAR PLAN
# =============================================================================

def build_four_year_plan(
    profile: NormalizedProfile,
    top: List[ClusterScore],
    recommendations: CareerRecommendations
) -> FourYearPlan:
    """Year plans from the current grade through 12, plus post-graduation steps."""
    cluster_id = top[0].cluster_id if top else None
    lead = _lead_career(recommendations)

    years = {
        f"grade_{grade}": year_plan(grade, cluster_id)
        for grade in GRADES
        if grade >= profile.grade
    }
    return FourYearPlan(**years, post_graduation=post_graduation_plan(lead))


def _lead_career(recommendations: CareerRecommendations) -> Optional[Career]:
    for bucket in (recommendations.best_fit, recommendations.good_fit, recommendations.stretch_options):
        if bucket:
            return bucket[0].career
    return None


# =============================================================================
# COMPARISON QUESTIONS
# =============================================================================

def build_comparison_questions(recommendations: CareerRecommendations) -> List[ComparisonQuestion]:
    """
    Pair up the leading careers so the student can weigh them.

    Uses the top best-fit careers, topped up from good fit when fewer than
    two best-fit careers exist.
    """
    candidates: List[CareerRecommendation] = list(recommendations.best_fit[:MAX_COMPARISON_CAREERS])
    if len(candidates) < 2:
        candidates.extend(recommendations.good_fit[:MAX_COMPARISON_CAREERS - len(candidates)])

    questions = []
    for rec_a, rec_b in combinations(candidates, 2):
        a, b = rec_a.career, rec_b.career
        questions.append(ComparisonQuestion(
            question=f"Which appeals to you more: {a.name} or {b.name}?",
            career_a=a.name,
            career_b=b.name,
            factors=comparison_factors(a, b),
        ))
    return questions


def comparison_factors(a: Career, b: Career) -> List[str]:
    """The feasibility and value dimensions on which two careers differ most."""
    va = CLUSTER_BY_ID[a.primary_cluster].value_profile if a.primary_cluster in CLUSTER_BY_ID else None
    vb = CLUSTER_BY_ID[b.primary_cluster].value_profile if b.primary_cluster in CLUSTER_BY_ID else None

    differences = [
        ("Education requirements", abs(a.edu_required_level - b.edu_required_level) / 3),
        ("Time to start earning", min(1.0, abs(a.time_to_entry_years - b.time_to_entry_years) / 4)),
        ("Cost of training", float(abs(a.cost_level - b.cost_level))),
        ("Physical demands", abs(a.physical_demand - b.physical_demand) / 3),
        ("Academic challenge", abs(a.challenge_level - b.challenge_level) / 3),
        ("Work schedule", float(a.irregular_hours != b.irregular_hours)),
    ]
    if va is not None and vb is not None:
        differences.extend([
            ("Income potential", abs(va.income - vb.income)),
            ("Job security", abs(va.stability - vb.stability)),
            ("Helping others", abs(va.helping - vb.helping)),
            ("Risk and independence", abs(va.risk - vb.risk)),
        ])

    ranked = sorted(
        (item for item in enumerate(differences) if item[1][1] > 0),
        key=lambda item: (-item[1][1], item[0]),
    )
    factors = [name for _, (name, _) in ranked[:MAX_COMPARISON_FACTORS]]
    return factors or list(DEFAULT_FACTORS)


def _timestamp(generated_at: Optional[Union[datetime, str]]) -> str:
    if isinstance(generated_at, str):
        return generated_at
    moment = generated_at or datetime.now(timezone.utc)
    return moment.isoformat()
