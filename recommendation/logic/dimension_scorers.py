"""
Dimension Scorers

Individual scoring functions for each cluster evaluation dimension.
Each scorer produces a normalized score between 0.0 and 1.0 for one cluster,
together with the contributions that explain it.
All logic is deterministic - no AI/ML components.
"""

import re
from typing import Dict, List, Tuple

from .clusters import AFFINITY_MAPS, INTEREST_CATEGORIES, option_order
from .contracts import ClusterDefinition, Contribution, DimensionScore, NormalizedProfile
from .constants import (
    DIMENSION_WEIGHTS,
    EDUCATION_REACH_SHARE,
    EXPERIENCE_BONUS_MAX,
    EXPERIENCE_KEYWORD_SATURATION,
    EXPERIENCE_MIN_LENGTH,
    EXPERIENCE_PRESENCE_SHARE,
    PERFORMANCE_SHARE,
    VALUES_REASON_THRESHOLD,
)
from .encodings import MAX_EDUCATION_LEVEL, PERFORMANCE_MAP

STRONG_PERFORMANCE = PERFORMANCE_MAP["Good"]

# How each question category is phrased in reasoning strings
_REASON_TEMPLATES: Dict[str, str] = {
    "workEnvironment": "Work environment preference: {option}",
    "workStyle": "Enjoys {option_lower}",
    "thinkingStyle": "Likes {option_lower}",
    "academicInterests": "Strong interest in {option}",
    "traits": "{option} personality trait",
}

_CATEGORY_POSITION: Dict[str, int] = {category: i for i, category in enumerate(AFFINITY_MAPS)}


def score_interests_preferences(
    profile: NormalizedProfile,
    cluster: ClusterDefinition
) -> DimensionScore:
    """
    Score interest alignment.

    Combines work environment, work style, thinking style and academic
    interest selections.
    """
    raw_score, contributions = _affinity_score(profile, cluster, INTEREST_CATEGORIES, "interests_preferences")
    weight = DIMENSION_WEIGHTS["interests_preferences"]

    return DimensionScore(
        dimension="interests_preferences",
        score=raw_score,
        weight=weight,
        weighted_score=raw_score * weight,
        contributions=contributions,
        explanation=f"{len(contributions)} matching selections, affinity: {raw_score:.2f}",
    )


def score_academic_readiness(
    profile: NormalizedProfile,
    cluster: ClusterDefinition
) -> DimensionScore:
    """
    Score academic readiness for a cluster.

    Compares:
    - Performance in subjects relevant to the cluster (affinity-weighted)
    - Education willingness vs. the cluster's typical education level
    """
    weight = DIMENSION_WEIGHTS["academic_readiness"]
    subject_affinity = AFFINITY_MAPS["academicInterests"]
    order = option_order("academicInterests")

    relevant = [
        (subject, level, subject_affinity[subject].get(cluster.id, 0.0))
        for subject, level in profile.performance.items()
        if subject_affinity[subject].get(cluster.id, 0.0) > 0
    ]
    total_affinity = sum(aff for _, _, aff in relevant)
    performance_fit = (
        sum(level * aff for _, level, aff in relevant) / total_affinity
        if total_affinity > 0 else 0.0
    )

    shortfall = max(0, cluster.typical_education_level - profile.education_level)
    education_reach = 1.0 - shortfall / MAX_EDUCATION_LEVEL

    raw_score = PERFORMANCE_SHARE * performance_fit + EDUCATION_REACH_SHARE * education_reach

    contributions = [
        Contribution(
            weight=weight * PERFORMANCE_SHARE * level * aff / total_affinity,
            rank=(_CATEGORY_POSITION["academicInterests"], order[subject]),
            reason=f"Strong performance in {subject}",
        )
        for subject, level, aff in relevant
        if level >= STRONG_PERFORMANCE
    ]

    return DimensionScore(
        dimension="academic_readiness",
        score=raw_score,
        weight=weight,
        weighted_score=raw_score * weight,
        contributions=contributions,
        explanation=f"Performance fit: {performance_fit:.2f}, Education reach: {education_reach:.2f}",
    )


def score_personality_traits(
    profile: NormalizedProfile,
    cluster: ClusterDefinition
) -> DimensionScore:
    """Score how well selected traits fit the cluster."""
    raw_score, contributions = _affinity_score(profile, cluster, ("traits",), "personality_traits")
    weight = DIMENSION_WEIGHTS["personality_traits"]

    return DimensionScore(
        dimension="personality_traits",
        score=raw_score,
        weight=weight,
        weighted_score=raw_score * weight,
        contributions=contributions,
        explanation=f"Trait affinity: {raw_score:.2f}",
    )


def score_values(
    profile: NormalizedProfile,
    cluster: ClusterDefinition
) -> DimensionScore:
    """
    Score closeness between the student's values and the cluster's value profile.

    Each axis contributes 1 - |student - cluster|; the four axes are averaged.
    """
    vp = cluster.value_profile
    closeness = {
        "income": 1 - abs(profile.income - vp.income),
        "stability": 1 - abs(profile.stability - vp.stability),
        "helping": 1 - abs(profile.helping - vp.helping),
        "risk": 1 - abs(profile.risk - vp.risk),
    }
    raw_score = sum(closeness.values()) / len(closeness)
    weight = DIMENSION_WEIGHTS["values"]

    contributions = []
    if raw_score > VALUES_REASON_THRESHOLD:
        contributions.append(Contribution(
            weight=raw_score * weight,
            rank=(len(_CATEGORY_POSITION), 0),
            reason=f"Values align well with {cluster.name.lower()}",
        ))

    return DimensionScore(
        dimension="values",
        score=raw_score,
        weight=weight,
        weighted_score=raw_score * weight,
        contributions=contributions,
        explanation=", ".join(f"{axis}: {value:.2f}" for axis, value in closeness.items()),
    )


def score_experience_bonus(
    profile: NormalizedProfile,
    cluster: ClusterDefinition
) -> DimensionScore:
    """
    Additive bonus (at most EXPERIENCE_BONUS_MAX) for experience text.

    Half the bonus is granted for any substantive experience, the other half
    scales with how many of the cluster's keywords the interests and
    experience text mention.
    """
    presence = EXPERIENCE_BONUS_MAX * EXPERIENCE_PRESENCE_SHARE if has_substantive_experience(profile) else 0.0

    hits = matched_keywords(profile, cluster)
    relevance = min(1.0, len(hits) / EXPERIENCE_KEYWORD_SATURATION)
    keyword_part = EXPERIENCE_BONUS_MAX * (1 - EXPERIENCE_PRESENCE_SHARE) * relevance

    bonus = presence + keyword_part
    contributions = []
    if hits:
        contributions.append(Contribution(
            weight=keyword_part,
            rank=(len(_CATEGORY_POSITION) + 1, 0),
            reason=f"Your experience and interests mention {', '.join(hits[:2])}",
        ))

    return DimensionScore(
        dimension="experience_bonus",
        score=bonus / EXPERIENCE_BONUS_MAX,
        weight=EXPERIENCE_BONUS_MAX,
        weighted_score=bonus,
        contributions=contributions,
        explanation=f"Experience present: {presence > 0}, Keyword hits: {len(hits)}",
    )


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def has_substantive_experience(profile: NormalizedProfile) -> bool:
    text = profile.experience_text.strip()
    return len(text) > EXPERIENCE_MIN_LENGTH and text.lower() != "none yet"


def matched_keywords(profile: NormalizedProfile, cluster: ClusterDefinition) -> List[str]:
    """Cluster keywords found in the interests + experience text, in keyword order."""
    text = f"{profile.interests_text} {profile.experience_text}".lower()
    if not text.strip():
        return []
    return [kw for kw in cluster.keywords if re.search(rf"\b{re.escape(kw)}\b", text)]


def _affinity_score(
    profile: NormalizedProfile,
    cluster: ClusterDefinition,
    categories: Tuple[str, ...],
    dimension: str,
) -> Tuple[float, List[Contribution]]:
    """
    Sum the cluster affinity of every selected option in ``categories`` and
    normalize by the maximum possible contribution (one full point per
    selected option).
    """
    selected = [(category, option) for category in categories for option in profile.selected(category)]
    if not selected:
        return 0.0, []

    weight = DIMENSION_WEIGHTS[dimension]
    total = 0.0
    contributions: List[Contribution] = []

    for category, option in selected:
        aff = AFFINITY_MAPS[category][option].get(cluster.id, 0.0)
        if aff <= 0:
            continue
        total += aff
        contributions.append(Contribution(
            weight=weight * aff / len(selected),
            rank=(_CATEGORY_POSITION[category], option_order(category)[option]),
            reason=_REASON_TEMPLATES[category].format(option=option, option_lower=option.lower()),
        ))

    return min(1.0, total / len(selected)), contributions
