"""
Classifier

Classifies scored careers into fit categories:
- Best Fit (strong match, no feasibility concerns)
- Good Fit (realistic alternative, or a strong match with minor concerns)
- Stretch Option (real affinity, but a feasibility gap to close)

A career without feasibility notes that clears neither good-fit floor
(absolute score or share of the top feasible score) gets no category and is
held out of the recommendations. Every other career lands in exactly one
category.
"""

from typing import List, Optional, Tuple

from .contracts import ScoredCareer, ScoringPolicy
from .constants import FitCategory


def classify_career(
    scored: ScoredCareer,
    policy: ScoringPolicy,
    top_feasible_score: float = 0.0
) -> Optional[FitCategory]:
    """
    Classify a single scored career into a fit category.

    Args:
        scored: Career with adjusted score and feasibility notes
        policy: Thresholds to apply
        top_feasible_score: Highest score among careers without feasibility notes

    Returns:
        FitCategory enum value, or None when the career is below the good-fit floor
    """
    # An education gap always makes a career a stretch
    if scored.education_gap:
        return FitCategory.STRETCH_OPTION

    if scored.feasibility_notes:
        if scored.score >= policy.good_fit_threshold:
            return FitCategory.GOOD_FIT
        return FitCategory.STRETCH_OPTION

    if scored.score >= policy.best_fit_threshold:
        return FitCategory.BEST_FIT

    relative = scored.score / top_feasible_score if top_feasible_score > 0 else 0.0

    # Relative best fit: close to the strongest feasible career
    if scored.score >= policy.good_fit_threshold and relative >= policy.best_fit_relative_threshold:
        return FitCategory.BEST_FIT

    if scored.score >= policy.good_fit_threshold or relative >= policy.good_fit_relative_threshold:
        return FitCategory.GOOD_FIT

    return None


def classify_all(
    scored_careers: List[ScoredCareer],
    policy: ScoringPolicy
) -> List[Tuple[ScoredCareer, Optional[FitCategory]]]:
    """
    Classify all scored careers.

    Args:
        scored_careers: List of scored careers
        policy: Thresholds to apply

    Returns:
        List of tuples (ScoredCareer, FitCategory or None when held out)
    """
    top_feasible = max(
        (s.score for s in scored_careers if not s.feasibility_notes),
        default=0.0,
    )
    return [(scored, classify_career(scored, policy, top_feasible)) for scored in scored_careers]


def held_out_careers(
    classified: List[Tuple[ScoredCareer, Optional[FitCategory]]]
) -> List[str]:
    """Ids of careers that received no category, in catalog order."""
    return [
        scored.career.career_id
        for scored, category in sorted(classified, key=lambda x: x[0].catalog_index)
        if category is None
    ]


def get_category_counts(
    classified: List[Tuple[ScoredCareer, Optional[FitCategory]]]
) -> dict:
    """
    Count careers in each category. Held-out careers are not counted.
    """
    counts = {cat.value: 0 for cat in FitCategory}
    for _, category in classified:
        if category is not None:
            counts[category.value] += 1
    return counts
